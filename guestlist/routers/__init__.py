# guestlist/routers/__init__.py

# Import all router modules to make them available
from . import guests
from . import groups
from . import labels
from . import functions
from . import invites
from . import expenses
from . import imports
from . import search
from . import dashboard

__all__ = [
    "guests",
    "groups",
    "labels",
    "functions",
    "invites",
    "expenses",
    "imports",
    "search",
    "dashboard",
]
