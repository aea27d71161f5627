# guestlist/utils/router_helpers.py

from fastapi import HTTPException, status
from typing import Callable
from functools import wraps
import logging

from ..config import settings
from ..services.errors import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    DuplicateError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def operation_failed_message(func: Callable) -> str:
    """Generic 500 message naming the operation, e.g. "Failed to create guest"."""
    return f"Failed to {func.__name__.replace('_', ' ')}"


def handle_service_errors(func: Callable) -> Callable:
    """Decorator to standardize service error handling in routers"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        # Invite addressed through the wrong function -> 403 Forbidden
        except PermissionDeniedError as e:
            logger.warning(f"Permission denied: {str(e)}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

        except NotFoundError as e:
            logger.warning(f"Resource not found: {str(e)}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        # Duplicates and bad input -> 400 Bad Request
        except (DuplicateError, ValidationFailedError) as e:
            logger.warning(f"Validation error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ServiceError as e:
            logger.warning(f"Service error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ValueError as e:
            logger.warning(f"Validation error: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        # Unexpected errors -> 500, details hidden in production
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {str(e)}", exc_info=True
            )
            detail = operation_failed_message(func) if settings.is_production else str(e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=detail or operation_failed_message(func),
            )

    return wrapper
