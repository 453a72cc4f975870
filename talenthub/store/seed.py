from __future__ import annotations

import logging
from datetime import timedelta

from talenthub.core.pipeline import first_stage
from talenthub.store.memory import RecruitmentStore

logger = logging.getLogger("talenthub.store")


def seed_sample_data(store: RecruitmentStore) -> None:
    """Populate an empty store with a small demo data set for local runs."""
    admin = store.create_user(
        {
            "username": "admin",
            "password": "admin123",
            "full_name": "Admin User",
            "email": "admin@talenthub.com",
            "role": "admin",
            "avatar": "",
        }
    )
    store.create_user(
        {
            "username": "sarah",
            "password": "sarah123",
            "full_name": "Sarah Anderson",
            "email": "sarah@talenthub.com",
            "role": "hr",
            "avatar": "",
        }
    )

    frontend = store.create_job(
        {
            "title": "Frontend Developer",
            "department": "Engineering",
            "location": "San Francisco, CA",
            "type": "full-time",
            "salary": "$80,000 - $120,000",
            "description": "We're looking for a talented Frontend Developer to join our team.",
            "requirements": "3+ years of experience with React, TypeScript, and modern frontend frameworks.",
            "status": "active",
            "created_by": admin.id,
        }
    )
    designer = store.create_job(
        {
            "title": "UX Designer",
            "department": "Design",
            "location": "Remote",
            "type": "full-time",
            "salary": "$90,000 - $130,000",
            "description": "Join our design team to create beautiful and intuitive user experiences.",
            "requirements": "Portfolio demonstrating strong UX design skills. Experience with Figma.",
            "status": "active",
            "created_by": admin.id,
        }
    )

    john = store.create_candidate(
        {
            "first_name": "John",
            "last_name": "Smith",
            "email": "john.smith@example.com",
            "phone": "123-456-7890",
            "current_job_title": "Senior Web Developer",
            "current_company": "Tech Innovations Inc.",
            "tags": ["JavaScript", "React", "TypeScript"],
            "source": "LinkedIn",
            "resume_url": "path/to/resume.pdf",
            "notes": "Excellent technical background, 8 years of experience in web development.",
        }
    )
    emma = store.create_candidate(
        {
            "first_name": "Emma",
            "last_name": "Garcia",
            "email": "emma.garcia@example.com",
            "phone": "987-654-3210",
            "current_job_title": "UX/UI Designer",
            "current_company": "Design Solutions",
            "tags": ["UI Design", "Figma", "Adobe XD"],
            "source": "Referral",
            "resume_url": "path/to/resume.pdf",
            "notes": "Strong portfolio with creative design solutions. Looking for remote opportunities.",
        }
    )

    today = store.now().replace(minute=0, second=0, microsecond=0)
    pairs = (
        (frontend, john, "Strong frontend candidate with React experience", "Technical Interview - Frontend", "technical", 3, 10, 60),
        (designer, emma, "Experienced UX designer with strong portfolio", "Portfolio Review - UX Designer", "design", 2, 14, 90),
    )
    for job, candidate, notes, title, interview_type, days_ahead, hour, duration in pairs:
        stage = first_stage(store.list_job_stages(job.id))
        application = store.create_application(
            {
                "job_id": job.id,
                "candidate_id": candidate.id,
                "stage_id": stage.id,
                "status": "new",
                "notes": notes,
            }
        )
        store.create_interview(
            {
                "application_id": application.id,
                "title": title,
                "type": interview_type,
                "scheduled_at": (today + timedelta(days=days_ahead)).replace(hour=hour),
                "duration": duration,
                "interviewers": ["Sarah Anderson", "John Doe"],
            }
        )

    logger.info("sample_data_seeded", extra={"jobs": 2, "candidates": 2, "applications": 2})
