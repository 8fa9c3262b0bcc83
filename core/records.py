# =============================================================================
# core/records.py  -  Record Retrieval & Normalization
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches a user's items, lists or folders from the document store and
#   flattens each raw document into the Record shape the model sees.
#
# THE OWNERSHIP INVARIANT:
#   Every record handed back satisfies createdBy == the caller's user id.
#   The store query already filters on it; fetch_records() checks again and
#   drops anything that slipped through, so a misbehaving store can never
#   leak another user's data into a tool response.
#
# NORMALIZATION RULES:
#   - Timestamps become en-US locale strings in UTC ("1/2/2025, 3:04:05 PM"),
#     the format the hosted runtime's default locale produces.
#   - Missing description   -> ""
#   - Missing dateModified  -> ""   ("never modified", not "modified at epoch")
#   - Missing count (items) -> 0
#
# IDEMPOTENCY:
#   fetch_records() is a pure read.  Two calls against an unchanged store
#   return the same set of records.
# =============================================================================

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from core.models import FolderRecord, ItemRecord, ListRecord, Record
from core.store import OWNER_FIELD, DocumentStore, StoredDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordKind:
    """Binds a store collection to the record type it normalizes into."""

    collection: str
    record_type: type


ITEMS = RecordKind("items", ItemRecord)
LISTS = RecordKind("lists", ListRecord)
FOLDERS = RecordKind("folders", FolderRecord)


def format_timestamp(value: Any) -> str:
    """Render a stored timestamp as an en-US locale string in UTC.

    Firestore hands back timezone-aware datetimes; naive ones are taken to be
    UTC already.  Strings are passed through untouched and None becomes "".
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        dt = value.astimezone(timezone.utc) if value.tzinfo else value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    else:
        return str(value)

    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def normalize_document(kind: RecordKind, doc: StoredDocument) -> Record:
    """Flatten one raw document into its record type."""
    data = doc.data
    fields = {
        "id": doc.id,
        "name": str(data.get("name", "")),
        "dateCreated": format_timestamp(data.get("dateCreated")),
        "description": data.get("description") or "",
        "dateModified": format_timestamp(data.get("dateModified")),
    }
    if kind.record_type is ItemRecord:
        count = data.get("count")
        fields["count"] = int(count) if count is not None else 0
    return kind.record_type(**fields)


async def fetch_records(store: DocumentStore, kind: RecordKind, user_id: str) -> list[Record]:
    """Return every record of ``kind`` owned by ``user_id``.

    An empty or missing user id yields an empty list; it is a defined
    fallback, not a fault.
    """
    if not user_id:
        return []

    records = []
    for doc in await store.find_owned(kind.collection, user_id):
        if doc.data.get(OWNER_FIELD) != user_id:
            logger.warning("Dropping %s/%s: not owned by the caller", kind.collection, doc.id)
            continue
        records.append(normalize_document(kind, doc))
    return records


async def fetch_items(store: DocumentStore, user_id: str) -> list[Record]:
    return await fetch_records(store, ITEMS, user_id)


async def fetch_lists(store: DocumentStore, user_id: str) -> list[Record]:
    return await fetch_records(store, LISTS, user_id)


async def fetch_folders(store: DocumentStore, user_id: str) -> list[Record]:
    return await fetch_records(store, FOLDERS, user_id)
