#!/usr/bin/env python3
"""
Database Setup Module
Creates every table and the predefined guest groups.

Run with: python -m guestlist.database_setup
"""

import logging

from .database import Base, init_db, session_scope
from .services.group_service import GroupService
from .utils.constants import AppConstants

logger = logging.getLogger(__name__)


def ensure_predefined_groups(db) -> int:
    """Create the predefined groups that are missing; returns how many were added"""
    group_service = GroupService(db)
    created = 0

    for name in AppConstants.PREDEFINED_GROUPS:
        group = group_service.find_group_by_name(name)
        if group:
            if not group.is_predefined:
                group.is_predefined = True
                db.commit()
            continue
        group = group_service.find_or_create_group(name)
        group.is_predefined = True
        db.commit()
        created += 1

    return created


def setup_database() -> None:
    init_db()

    with session_scope() as db:
        created = ensure_predefined_groups(db)

    tables = sorted(Base.metadata.tables.keys())
    logger.info(f"Database ready: {len(tables)} tables, {created} groups added")
    for table in tables:
        logger.info(f"  - {table}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    setup_database()
