from fastapi import APIRouter

from .booking_routes import router as booking_router
from .field_routes import router as field_router
from .slot_routes import router as slot_router
from .team_routes import router as team_router

router = APIRouter()
router.include_router(field_router)
router.include_router(slot_router)
router.include_router(booking_router)
router.include_router(team_router)

__all__ = [
    "router",
    "booking_router",
    "field_router",
    "slot_router",
    "team_router",
]
