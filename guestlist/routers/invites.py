from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.invite_service import InviteService
from ..schemas.invite import InviteIncrement, InviteResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["invites"])


@router.post("/{invite_id}/increment", response_model=InviteResponse)
@handle_service_errors
async def increment_invite(
    invite_id: int, increment_data: InviteIncrement, db: Session = Depends(get_db)
):
    invite_service = InviteService(db)

    invite = invite_service.increment(invite_id, increment_data.category)
    return InviteResponse.model_validate(invite)


@router.delete("/{invite_id}/increment", response_model=InviteResponse)
@handle_service_errors
async def decrement_invite(invite_id: int, db: Session = Depends(get_db)):
    """Remove one person: children first, then gents, then ladies"""
    invite_service = InviteService(db)

    invite = invite_service.decrement(invite_id)
    return InviteResponse.model_validate(invite)
