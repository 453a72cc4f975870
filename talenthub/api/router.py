from fastapi import APIRouter

from talenthub.api.routes import applications
from talenthub.api.routes import candidates
from talenthub.api.routes import dashboard
from talenthub.api.routes import interviews
from talenthub.api.routes import jobs
from talenthub.api.routes import offers
from talenthub.api.routes import users

api_router = APIRouter(prefix="/api")
api_router.include_router(users.router)
api_router.include_router(jobs.router)
api_router.include_router(jobs.stages_router)
api_router.include_router(candidates.router)
api_router.include_router(applications.router)
api_router.include_router(interviews.router)
api_router.include_router(offers.router)
api_router.include_router(dashboard.router)
