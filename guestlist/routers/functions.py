from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..services.function_service import FunctionService
from ..services.invite_service import InviteService
from ..schemas.function import (
    FunctionCreate,
    FunctionUpdate,
    FunctionResponse,
    FunctionDetailResponse,
)
from ..schemas.invite import (
    InviteUpsert,
    InviteUpdate,
    PairIncrement,
    InviteResponse,
)
from ..schemas.common import SuccessResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["functions"])


@router.get("", response_model=List[FunctionResponse])
@handle_service_errors
async def get_functions(db: Session = Depends(get_db)):
    """List functions by date, undated ones last"""
    function_service = FunctionService(db)

    return [
        FunctionResponse.model_validate(function)
        for function in function_service.get_functions()
    ]


@router.post("", response_model=FunctionResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_function(function_data: FunctionCreate, db: Session = Depends(get_db)):
    function_service = FunctionService(db)

    function = function_service.create_function(function_data)
    return FunctionResponse.model_validate(function)


@router.get("/{function_id}", response_model=FunctionDetailResponse)
@handle_service_errors
async def get_function(function_id: int, db: Session = Depends(get_db)):
    """Function with its invites and the guests still available to invite"""
    function_service = FunctionService(db)

    details = function_service.get_function_details(function_id)
    return FunctionDetailResponse.model_validate(details)


@router.put("/{function_id}", response_model=FunctionResponse)
@handle_service_errors
async def update_function(
    function_id: int, function_updates: FunctionUpdate, db: Session = Depends(get_db)
):
    function_service = FunctionService(db)

    function = function_service.update_function(function_id, function_updates)
    return FunctionResponse.model_validate(function)


@router.delete("/{function_id}", response_model=SuccessResponse)
@handle_service_errors
async def delete_function(function_id: int, db: Session = Depends(get_db)):
    function_service = FunctionService(db)

    function_service.delete_function(function_id)
    return SuccessResponse()


# Invites of a function


@router.post("/{function_id}/invites", response_model=InviteResponse)
@handle_service_errors
async def upsert_invite(
    function_id: int,
    invite_data: InviteUpsert,
    response: Response,
    db: Session = Depends(get_db),
):
    """Invite a guest, or replace the counts of their existing invite.

    Responds 201 when the invite is new and 200 when it was updated.
    """
    invite_service = InviteService(db)

    invite, created = invite_service.upsert_invite(function_id, invite_data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return InviteResponse.model_validate(invite)


@router.put("/{function_id}/invites", response_model=InviteResponse)
@handle_service_errors
async def update_invite(
    function_id: int, invite_data: InviteUpdate, db: Session = Depends(get_db)
):
    invite_service = InviteService(db)

    invite = invite_service.update_invite(function_id, invite_data)
    return InviteResponse.model_validate(invite)


@router.delete("/{function_id}/invites", response_model=SuccessResponse)
@handle_service_errors
async def delete_invite(
    function_id: int,
    invite_id: Optional[int] = Query(None, alias="inviteId"),
    db: Session = Depends(get_db),
):
    invite_service = InviteService(db)

    invite_service.delete_invite(function_id, invite_id)
    return SuccessResponse()


@router.post("/{function_id}/invites/increment", response_model=InviteResponse)
@handle_service_errors
async def increment_guest_invite(
    function_id: int,
    increment_data: PairIncrement,
    response: Response,
    db: Session = Depends(get_db),
):
    """Add one person to a guest's invite, creating the invite on first use"""
    invite_service = InviteService(db)

    invite, created = invite_service.increment_for_guest(
        function_id, increment_data.guest_id, increment_data.category
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return InviteResponse.model_validate(invite)
