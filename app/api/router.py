"""Agregador de routers de la API."""
from fastapi import APIRouter
from app.api.routers import health, schedule, academies, enrollments, bookmarks, reservations

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(schedule.router)
api_router.include_router(academies.router)
api_router.include_router(enrollments.router)
api_router.include_router(bookmarks.router)
api_router.include_router(reservations.router)
