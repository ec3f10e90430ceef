# enrollment_approvals/api/v1/router.py
from fastapi import APIRouter
from enrollment_approvals.api.v1 import auth, requests, participants, offers

api_router = APIRouter()

api_router.include_router(auth.router,         prefix="/auth",         tags=["auth"])
api_router.include_router(requests.router,     prefix="/requests",     tags=["validaciones"])
api_router.include_router(participants.router, prefix="/participants", tags=["participants"])
api_router.include_router(offers.router,       prefix="/offers",       tags=["offers"])
