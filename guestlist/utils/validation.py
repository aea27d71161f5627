import math
import re
from typing import Any, List, Optional
from .constants import AppConstants
from ..services.errors import ValidationFailedError


class ValidationHelpers:
    @staticmethod
    def require_text(value: Optional[str], message: str) -> str:
        """Return the trimmed value or raise when it is missing or blank"""
        if value is None or not isinstance(value, str) or not value.strip():
            raise ValidationFailedError(message)
        return value.strip()

    @staticmethod
    def optional_text(value: Optional[str]) -> Optional[str]:
        """Trim optional text; blank becomes None"""
        if value is None:
            return None
        trimmed = str(value).strip()
        return trimmed or None

    @staticmethod
    def validate_count(value: Optional[int], field: str) -> int:
        """Headcounts default to zero and stay within 0..MAX_HEADCOUNT"""
        if value is None:
            return 0
        if value < 0:
            raise ValidationFailedError(f"{field} cannot be negative")
        if value > AppConstants.MAX_HEADCOUNT:
            raise ValidationFailedError(
                f"{field} cannot exceed {AppConstants.MAX_HEADCOUNT}"
            )
        return int(value)

    @staticmethod
    def clamp_count(value: Optional[int]) -> int:
        return min(max(0, value or 0), AppConstants.MAX_HEADCOUNT)

    @staticmethod
    def validate_amount(amount: Any) -> float:
        """Finite and still positive once rounded to cents"""
        if (
            amount is None
            or isinstance(amount, bool)
            or not isinstance(amount, (int, float))
        ):
            raise ValidationFailedError("Amount must be a positive number")

        try:
            value = float(amount)
        except OverflowError:
            raise ValidationFailedError("Amount must be a positive number")
        if not math.isfinite(value):
            raise ValidationFailedError("Amount must be a positive number")

        rounded = round(value, AppConstants.CURRENCY_DECIMAL_PLACES)
        if rounded <= 0:
            raise ValidationFailedError("Amount must be a positive number")
        return rounded

    @staticmethod
    def parse_leading_int(value: Any) -> int:
        """Parse a spreadsheet cell the way a lenient integer parser would.

        ``"3"`` -> 3, ``2.0`` -> 2, ``"4 adults"`` -> 4, blanks and junk -> 0.
        """
        if value is None or isinstance(value, bool):
            return 0
        if isinstance(value, (int, float)):
            if value != value or value in (float("inf"), float("-inf")):
                return 0  # NaN or infinity from pandas
            return int(value)
        match = re.match(r"^\s*([+-]?\d+)", str(value))
        if not match:
            return 0
        return int(match.group(1))

    @staticmethod
    def validate_file_extension(filename: str, allowed_extensions: List[str]) -> bool:
        """Validate file extension"""
        if not filename or "." not in filename:
            return False

        file_extension = filename.lower().rsplit(".", 1)[-1]
        return f".{file_extension}" in [ext.lower() for ext in allowed_extensions]
