# Custom Exceptions shared by every service.
# Routers translate them to HTTP status codes in utils/router_helpers.py


class ServiceError(Exception):
    """Base exception for service errors"""

    pass


class ValidationFailedError(ServiceError):
    """Missing, empty or malformed input"""

    pass


class DuplicateError(ServiceError):
    """A uniqueness rule would be violated"""

    pass


class NotFoundError(ServiceError):
    """Requested resource does not exist"""

    pass


class PermissionDeniedError(ServiceError):
    """Child resource does not belong to the parent named in the request"""

    pass


class GuestNotFoundError(NotFoundError):
    pass


class GroupNotFoundError(NotFoundError):
    pass


class LabelNotFoundError(NotFoundError):
    pass


class FunctionNotFoundError(NotFoundError):
    pass


class InviteNotFoundError(NotFoundError):
    pass


class ExpenseNotFoundError(NotFoundError):
    pass
