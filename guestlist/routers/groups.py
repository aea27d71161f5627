from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..services.group_service import GroupService
from ..schemas.group import (
    GroupCreate,
    GroupResponse,
    GroupLabelCreate,
    GroupLabelResponse,
)
from ..schemas.common import SuccessResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["groups"])


@router.get("", response_model=List[GroupResponse])
@handle_service_errors
async def get_groups(db: Session = Depends(get_db)):
    """List groups with guest counts and labels"""
    group_service = GroupService(db)

    return [
        GroupResponse.model_validate(group) for group in group_service.get_groups()
    ]


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_group(group_data: GroupCreate, db: Session = Depends(get_db)):
    group_service = GroupService(db)

    group = group_service.create_group(group_data)
    return GroupResponse(
        id=group.id,
        name=group.name,
        is_predefined=group.is_predefined,
        created_at=group.created_at,
    )


@router.post(
    "/{group_id}/labels",
    response_model=GroupLabelResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_label_to_group(
    group_id: int, label_data: GroupLabelCreate, db: Session = Depends(get_db)
):
    """Attach an existing label to a group"""
    group_service = GroupService(db)

    group_label = group_service.add_label_to_group(group_id, label_data.label_id)
    return GroupLabelResponse.model_validate(group_label)


@router.delete("/{group_id}/labels", response_model=SuccessResponse)
@handle_service_errors
async def remove_label_from_group(
    group_id: int,
    label_id: Optional[int] = Query(None, alias="labelId"),
    db: Session = Depends(get_db),
):
    group_service = GroupService(db)

    group_service.remove_label_from_group(group_id, label_id)
    return SuccessResponse()
