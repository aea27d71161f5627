from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from ..database import get_db
from ..services.search_service import SearchService
from ..schemas.search import GuestSearchResponse
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["search"])


@router.get(
    "/guests",
    response_model=GuestSearchResponse,
    response_model_exclude_unset=True,
)
@handle_service_errors
async def search_guests(
    q: Optional[str] = Query(None, description="Guest name or part of it"),
    db: Session = Depends(get_db),
):
    """Invite and RSVP status of the best matching guest for every function"""
    search_service = SearchService(db)

    return GuestSearchResponse.model_validate(search_service.search_guest(q))
