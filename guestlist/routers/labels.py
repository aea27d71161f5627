from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from ..database import get_db
from ..services.group_service import GroupService
from ..schemas.group import LabelCreate, LabelResponse, LabelWithCount
from ..schemas.common import SuccessResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["labels"])


@router.get("", response_model=List[LabelWithCount])
@handle_service_errors
async def get_labels(db: Session = Depends(get_db)):
    group_service = GroupService(db)

    return [
        LabelWithCount.model_validate(label) for label in group_service.get_labels()
    ]


@router.post("", response_model=LabelResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_label(label_data: LabelCreate, db: Session = Depends(get_db)):
    group_service = GroupService(db)

    label = group_service.create_label(label_data)
    return LabelResponse.model_validate(label)


@router.delete("/{label_id}", response_model=SuccessResponse)
@handle_service_errors
async def delete_label(label_id: int, db: Session = Depends(get_db)):
    """Delete a label and detach it from every group"""
    group_service = GroupService(db)

    group_service.delete_label(label_id)
    return SuccessResponse()
