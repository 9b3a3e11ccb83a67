"""Main API router."""

from fastapi import APIRouter

from octohook.api.auth import router as auth_router
from octohook.api.webhook import router as webhook_router

api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(webhook_router, tags=["webhook"])
