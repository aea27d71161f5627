from datetime import datetime
from typing import Optional
from dateutil import parser as date_parser
from ..services.errors import ValidationFailedError


class DateHelpers:
    @staticmethod
    def parse_iso_date(value: Optional[str]) -> Optional[datetime]:
        """Parse an ISO date or datetime string; blank means no date"""
        if value is None or not str(value).strip():
            return None
        try:
            parsed = date_parser.isoparse(str(value).strip())
        except (ValueError, OverflowError):
            raise ValidationFailedError("Invalid date format")

        # Stored naive; aware inputs are kept in their own wall-clock time
        return parsed.replace(tzinfo=None)
