from talenthub.schemas.application import Application, ApplicationCreate, ApplicationUpdate
from talenthub.schemas.candidate import Candidate, CandidateCreate, CandidateUpdate
from talenthub.schemas.dashboard import DashboardStats, TimelinePoint
from talenthub.schemas.interview import Interview, InterviewCreate, InterviewUpdate
from talenthub.schemas.job import Job, JobCreate, JobStage, JobStageCreate, JobStageUpdate, JobUpdate
from talenthub.schemas.offer import Offer, OfferCreate, OfferUpdate
from talenthub.schemas.user import User, UserCreate, UserOut

__all__ = [
    "Application",
    "ApplicationCreate",
    "ApplicationUpdate",
    "Candidate",
    "CandidateCreate",
    "CandidateUpdate",
    "DashboardStats",
    "Interview",
    "InterviewCreate",
    "InterviewUpdate",
    "Job",
    "JobCreate",
    "JobStage",
    "JobStageCreate",
    "JobStageUpdate",
    "JobUpdate",
    "Offer",
    "OfferCreate",
    "OfferUpdate",
    "TimelinePoint",
    "User",
    "UserCreate",
    "UserOut",
]
