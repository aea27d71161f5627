import io
import logging
from typing import Any, Dict, List, Optional
import pandas as pd
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from ..models.guest import Guest
from ..utils.constants import AppConstants
from ..utils.validation import ValidationHelpers
from .errors import ValidationFailedError
from .group_service import GroupService
from .guest_service import DUPLICATE_GUEST_MESSAGE, GuestService

logger = logging.getLogger(__name__)


class ImportService:
    """Bulk guest creation from an uploaded spreadsheet.

    Only the first sheet is read. Each row is inserted in its own
    transaction, so a bad row is reported and skipped while the rest of the
    file still goes in.
    """

    def __init__(self, db: Session):
        self.db = db

    def import_guests(
        self,
        filename: Optional[str],
        content_type: Optional[str],
        contents: Optional[bytes],
        group_name: Optional[str],
    ) -> Dict[str, Any]:
        if contents is None or not filename:
            raise ValidationFailedError("No file provided")

        group_name = ValidationHelpers.require_text(
            group_name, "Group name is required"
        )
        extension = self._validate_file(filename, content_type, contents)
        rows = self._read_rows(contents, extension)

        if len(rows) > AppConstants.MAX_IMPORT_ROWS:
            raise ValidationFailedError(
                f"Too many rows ({len(rows)}). "
                f"Maximum is {AppConstants.MAX_IMPORT_ROWS}"
            )

        group = GroupService(self.db).find_or_create_group(group_name)
        guest_service = GuestService(self.db)

        success = 0
        failed = 0
        errors: List[str] = []

        for index, row in enumerate(rows):
            row_number = index + AppConstants.IMPORT_HEADER_ROW_OFFSET

            name = self._cell_text(row.get("name"))
            if not name:
                errors.append(f"Row {row_number}: Skipped - blank name")
                failed += 1
                continue

            if guest_service.find_guest_by_name(name):
                errors.append(f"Row {row_number}: {DUPLICATE_GUEST_MESSAGE}")
                failed += 1
                continue

            try:
                ladies, gents, children = (
                    ValidationHelpers.validate_count(
                        max(0, ValidationHelpers.parse_leading_int(row.get(column))),
                        column.capitalize(),
                    )
                    for column in ("ladies", "gents", "children")
                )
            except ValidationFailedError as e:
                errors.append(f"Row {row_number}: {e}")
                failed += 1
                continue

            guest = Guest(
                name=name,
                ladies=ladies,
                gents=gents,
                children=children,
                group_id=group.id,
            )
            self.db.add(guest)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                errors.append(f"Row {row_number}: {DUPLICATE_GUEST_MESSAGE}")
                failed += 1
                continue
            except Exception as e:
                # Any row failure is reported for that row only
                self.db.rollback()
                logger.warning(f"Import row {row_number} failed: {e}")
                errors.append(f"Row {row_number}: {e}")
                failed += 1
                continue

            success += 1

        logger.info(
            f"Imported '{filename}' into group '{group.name}': "
            f"{success} created, {failed} failed"
        )

        return {
            "success": success,
            "failed": failed,
            "errors": errors[: AppConstants.MAX_IMPORT_ERRORS],
            "group": group,
        }

    def _validate_file(
        self, filename: str, content_type: Optional[str], contents: bytes
    ) -> str:
        if not ValidationHelpers.validate_file_extension(
            filename, AppConstants.ALLOWED_IMPORT_EXTENSIONS
        ):
            raise ValidationFailedError(
                "Invalid file type. Allowed: "
                + ", ".join(AppConstants.ALLOWED_IMPORT_EXTENSIONS)
            )

        mime = (content_type or "").split(";")[0].strip().lower()
        if mime and mime not in AppConstants.ALLOWED_IMPORT_CONTENT_TYPES:
            raise ValidationFailedError(f"Unsupported content type: {mime}")

        if len(contents) > AppConstants.MAX_FILE_SIZE_BYTES:
            raise ValidationFailedError(
                f"File too large. Maximum size is {AppConstants.MAX_FILE_SIZE_MB}MB"
            )

        return "." + filename.lower().rsplit(".", 1)[-1]

    def _read_rows(self, contents: bytes, extension: str) -> List[Dict[str, Any]]:
        """First sheet as a list of dicts keyed by lower-cased header"""

        try:
            if extension == ".csv":
                df = pd.read_csv(io.BytesIO(contents), dtype=object)
            else:
                engine = "xlrd" if extension == ".xls" else "openpyxl"
                df = pd.read_excel(
                    io.BytesIO(contents), sheet_name=0, dtype=object, engine=engine
                )
        except pd.errors.EmptyDataError:
            return []
        except Exception as exc:
            logger.warning(f"Unreadable spreadsheet: {exc}")
            raise ValidationFailedError("Could not read spreadsheet file") from exc

        df.columns = [str(column).strip().lower() for column in df.columns]
        df = df.dropna(how="all")

        return df.to_dict(orient="records")

    @staticmethod
    def _cell_text(value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, str) and pd.isna(value):
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()
