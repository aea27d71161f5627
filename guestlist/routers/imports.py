from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import Optional
from ..database import get_db
from ..services.import_service import ImportService
from ..schemas.imports import ImportResult
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["import"])


@router.post("/guests", response_model=ImportResult)
@handle_service_errors
async def import_guests(
    file: Optional[UploadFile] = File(None),
    group_name: Optional[str] = Form(None, alias="groupName"),
    db: Session = Depends(get_db),
):
    """Create guests from the first sheet of an .xlsx, .xls or .csv upload.

    Expected columns: name, ladies, gents, children. Rows that fail are
    reported in ``errors`` and do not stop the import.
    """
    import_service = ImportService(db)

    contents = await file.read() if file is not None else None
    result = import_service.import_guests(
        filename=file.filename if file is not None else None,
        content_type=file.content_type if file is not None else None,
        contents=contents,
        group_name=group_name,
    )
    return ImportResult.model_validate(result)
