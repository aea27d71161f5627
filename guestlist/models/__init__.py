from .user import User
from .group import Group, Label, GroupLabel
from .guest import Guest
from .function import Function
from .invite import Invite
from .rsvp import RSVP
from .expense import Expense


__all__ = [
    "User",
    "Group",
    "Label",
    "GroupLabel",
    "Guest",
    "Function",
    "Invite",
    "RSVP",
    "Expense",
]
