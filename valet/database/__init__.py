"""Database models and session management."""
from .engine import get_engine, init_db, make_session_factory
from .models import Attachment, Base, License
from .repository import (
    add_attachment,
    create_license,
    delete_license,
    get_attachment_data,
    get_license,
    list_licenses,
    remove_attachment,
    to_record,
    update_license,
)

__all__ = [
    "get_engine",
    "init_db",
    "make_session_factory",
    "Attachment",
    "Base",
    "License",
    "add_attachment",
    "create_license",
    "delete_license",
    "get_attachment_data",
    "get_license",
    "list_licenses",
    "remove_attachment",
    "to_record",
    "update_license",
]
