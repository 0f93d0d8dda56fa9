"""
HTTP routers.

api_router groups the public JSON endpoints so main.py can mount them
under more than one prefix. The admin router is mounted separately.
"""

from fastapi import APIRouter

from . import admin, chirps, health, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(chirps.router)

__all__ = ["api_router", "admin"]
