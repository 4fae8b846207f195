"""API routes for field slots."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pitchside.core.security import get_caller_id
from pitchside.dependencies import get_db
from pitchside.schemas import SlotCreate, SlotResponse
from pitchside.services import SlotService

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/available", response_model=List[SlotResponse])
def list_available_slots(db: Session = Depends(get_db)) -> List[SlotResponse]:
    """Retrieve every slot that can still be booked."""

    service = SlotService(db)
    return service.list_available_slots()


@router.get("/fields/{field_id}", response_model=List[SlotResponse])
def list_slots_by_field(field_id: int, db: Session = Depends(get_db)) -> List[SlotResponse]:
    """Retrieve all slots of a field regardless of availability."""

    service = SlotService(db)
    return service.list_slots_by_field(field_id)


@router.get("/{slot_id}", response_model=SlotResponse)
def get_slot(slot_id: int, db: Session = Depends(get_db)) -> SlotResponse:
    service = SlotService(db)
    return service.get_slot(slot_id)


@router.post("/", response_model=SlotResponse, status_code=status.HTTP_201_CREATED)
def create_slot(
    payload: SlotCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> SlotResponse:
    """Open a new slot on one of the caller's fields."""

    service = SlotService(db)
    return service.create_slot(caller_id, payload)
