"""API routes for the field directory."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pitchside.core.security import get_caller_id
from pitchside.dependencies import get_db
from pitchside.schemas import FieldCreate, FieldResponse, FieldUpdate
from pitchside.services import FieldService

router = APIRouter(prefix="/fields", tags=["fields"])


@router.get("/", response_model=List[FieldResponse])
def list_fields(db: Session = Depends(get_db)) -> List[FieldResponse]:
    """Retrieve every registered field."""

    service = FieldService(db)
    return service.list_fields()


@router.get("/owners/{owner_id}", response_model=List[FieldResponse])
def list_fields_by_owner(owner_id: int, db: Session = Depends(get_db)) -> List[FieldResponse]:
    """Retrieve the fields owned by a specific user."""

    service = FieldService(db)
    return service.list_fields_by_owner(owner_id)


@router.get("/{field_id}", response_model=FieldResponse)
def get_field(field_id: int, db: Session = Depends(get_db)) -> FieldResponse:
    service = FieldService(db)
    return service.get_field(field_id)


@router.post("/", response_model=FieldResponse, status_code=status.HTTP_201_CREATED)
def create_field(
    payload: FieldCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> FieldResponse:
    """Register a new field owned by the caller."""

    service = FieldService(db)
    return service.create_field(caller_id, payload)


@router.put("/{field_id}", response_model=FieldResponse)
def update_field(
    field_id: int,
    payload: FieldUpdate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> FieldResponse:
    """Update the supplied attributes of a field owned by the caller."""

    service = FieldService(db)
    return service.update_field(caller_id, field_id, payload)
