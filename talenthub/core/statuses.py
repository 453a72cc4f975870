from __future__ import annotations

from typing import Literal

# Closed status vocabularies. Payloads carrying anything else are rejected at the model boundary.
JobStatus = Literal["draft", "active", "closed"]
JobType = Literal["full-time", "part-time", "contract"]
CandidateStatus = Literal["active", "hired", "archived"]
ApplicationStatus = Literal["new", "in-progress", "rejected", "accepted"]
InterviewType = Literal["phone", "video", "technical", "onsite", "design"]
InterviewStatus = Literal["scheduled", "completed", "cancelled"]
OfferStatus = Literal["draft", "sent", "accepted", "rejected"]

JOB_ACTIVE = "active"
INTERVIEW_SCHEDULED = "scheduled"
OFFER_ACCEPTED = "accepted"
