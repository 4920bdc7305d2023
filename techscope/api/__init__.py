"""API routes."""

from fastapi import APIRouter

from techscope.api import auth, health, users

router = APIRouter()
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(health.router, prefix="/health", tags=["health"])
