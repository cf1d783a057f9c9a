# counsel_api/api/v1/router.py
from fastapi import APIRouter
from counsel_api.api.v1 import programs, me

api_router = APIRouter()

api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
api_router.include_router(me.router,       prefix="/me",       tags=["me"])
