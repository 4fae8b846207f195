"""API routes for managing bookings."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pitchside.core.security import get_caller_id
from pitchside.dependencies import get_db
from pitchside.schemas import BookingCreate, BookingResponse, BookingStatusUpdate
from pitchside.services import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("/users/{user_id}", response_model=List[BookingResponse])
def list_bookings_by_user(user_id: int, db: Session = Depends(get_db)) -> List[BookingResponse]:
    """Retrieve the bookings made by a specific user."""

    service = BookingService(db)
    return service.list_bookings_by_user(user_id)


@router.get("/owners/{owner_id}", response_model=List[BookingResponse])
def list_bookings_by_field_owner(
    owner_id: int, db: Session = Depends(get_db)
) -> List[BookingResponse]:
    """Retrieve the bookings made on any field of a specific owner."""

    service = BookingService(db)
    return service.list_bookings_by_field_owner(owner_id)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, db: Session = Depends(get_db)) -> BookingResponse:
    service = BookingService(db)
    return service.get_booking(booking_id)


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> BookingResponse:
    """Book a slot for the caller, optionally on behalf of one of their teams."""

    service = BookingService(db)
    return service.create_booking(caller_id, payload)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> BookingResponse:
    """Confirm, cancel or reopen a booking."""

    service = BookingService(db)
    return service.update_booking_status(booking_id, payload.status, caller_id)
