from .common import ErrorResponse, SuccessResponse, DeleteAllResponse
from .group import (
    GroupCreate,
    GroupResponse,
    GroupSummary,
    LabelCreate,
    LabelResponse,
    LabelWithCount,
    GroupLabelCreate,
    GroupLabelResponse,
)
from .guest import GuestCreate, GuestResponse, GuestSummary, FunctionInviteCreate
from .function import (
    FunctionCreate,
    FunctionUpdate,
    FunctionResponse,
    FunctionDetailResponse,
    FunctionSummary,
)
from .invite import (
    InviteUpsert,
    InviteUpdate,
    InviteIncrement,
    PairIncrement,
    InviteResponse,
)
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .imports import ImportResult
from .search import GuestSearchResponse, FunctionOverview
from .dashboard import DashboardStats

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
    "DeleteAllResponse",
    "GroupCreate",
    "GroupResponse",
    "GroupSummary",
    "LabelCreate",
    "LabelResponse",
    "LabelWithCount",
    "GroupLabelCreate",
    "GroupLabelResponse",
    "GuestCreate",
    "GuestResponse",
    "GuestSummary",
    "FunctionInviteCreate",
    "FunctionCreate",
    "FunctionUpdate",
    "FunctionResponse",
    "FunctionDetailResponse",
    "FunctionSummary",
    "InviteUpsert",
    "InviteUpdate",
    "InviteIncrement",
    "PairIncrement",
    "InviteResponse",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "ImportResult",
    "GuestSearchResponse",
    "FunctionOverview",
    "DashboardStats",
]
