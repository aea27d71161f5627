from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..services.guest_service import GuestService
from ..schemas.guest import GuestCreate, GuestResponse
from ..schemas.common import SuccessResponse, DeleteAllResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["guests"])


@router.get("", response_model=List[GuestResponse])
@handle_service_errors
async def get_guests(
    search: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    group: Optional[int] = Query(None, description="Only guests of this group"),
    db: Session = Depends(get_db),
):
    """List guests, newest first"""
    guest_service = GuestService(db)

    guests = guest_service.get_guests(search=search, group_id=group)
    return [GuestResponse.model_validate(guest) for guest in guests]


@router.post("", response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_guest(guest_data: GuestCreate, db: Session = Depends(get_db)):
    """Create a guest, optionally inviting it to functions straight away"""
    guest_service = GuestService(db)

    guest = guest_service.create_guest(guest_data)
    return GuestResponse.model_validate(guest)


@router.delete("", response_model=DeleteAllResponse)
@handle_service_errors
async def delete_all_guests(db: Session = Depends(get_db)):
    """Delete every guest together with their invites and RSVPs"""
    guest_service = GuestService(db)

    deleted_count = guest_service.delete_all_guests()
    return DeleteAllResponse(deleted_count=deleted_count)


@router.get("/{guest_id}", response_model=GuestResponse)
@handle_service_errors
async def get_guest(guest_id: int, db: Session = Depends(get_db)):
    guest_service = GuestService(db)

    guest = guest_service.get_guest(guest_id)
    return GuestResponse.model_validate(guest)


@router.delete("/{guest_id}", response_model=SuccessResponse)
@handle_service_errors
async def delete_guest(guest_id: int, db: Session = Depends(get_db)):
    guest_service = GuestService(db)

    guest_service.delete_guest(guest_id)
    return SuccessResponse()
