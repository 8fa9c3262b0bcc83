"""
Tests for record retrieval and normalization.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from core.models import FolderRecord, ItemRecord, ListRecord
from core.records import ITEMS, fetch_folders, fetch_items, fetch_lists, fetch_records, format_timestamp
from core.store import InMemoryStore, StoredDocument

from tests.conftest import T1


class TestFormatTimestamp:
    def test_morning(self):
        assert format_timestamp(T1) == "1/6/2025, 9:30:00 AM"

    def test_afternoon(self):
        value = datetime(2025, 2, 14, 17, 5, 9, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2/14/2025, 5:05:09 PM"

    def test_midnight_and_noon(self):
        assert format_timestamp(datetime(2024, 3, 1, 0, 0)) == "3/1/2024, 12:00:00 AM"
        assert format_timestamp(datetime(2024, 3, 1, 12, 0)) == "3/1/2024, 12:00:00 PM"

    def test_converts_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2025, 1, 1, 1, 0, tzinfo=plus_two)
        assert format_timestamp(value) == "12/31/2024, 11:00:00 PM"

    def test_epoch_is_not_empty(self):
        assert format_timestamp(datetime(1970, 1, 1, tzinfo=timezone.utc)) == "1/1/1970, 12:00:00 AM"

    def test_date(self):
        assert format_timestamp(date(2025, 7, 4)) == "7/4/2025, 12:00:00 AM"

    def test_none_and_strings(self):
        assert format_timestamp(None) == ""
        assert format_timestamp("yesterday") == "yesterday"


@pytest.mark.asyncio
async def test_single_item_scenario():
    store = InMemoryStore()
    store.add("items", "i1", {"name": "Run", "count": 5, "dateCreated": T1, "createdBy": "u1"})

    records = await fetch_items(store, "u1")

    assert records == [
        ItemRecord(id="i1", name="Run", dateCreated="1/6/2025, 9:30:00 AM",
                   description="", dateModified="", count=5)
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("fetch", [fetch_items, fetch_lists, fetch_folders])
@pytest.mark.parametrize("user_id", ["", None])
async def test_missing_user_id_returns_empty(store, fetch, user_id):
    assert await fetch(store, user_id) == []


@pytest.mark.asyncio
async def test_only_callers_records_are_returned(store):
    items = await fetch_items(store, "u1")
    lists = await fetch_lists(store, "u1")

    assert {r.id for r in items} == {"i1", "i2"}
    assert {r.id for r in lists} == {"l1"}
    assert {r.id for r in await fetch_items(store, "u2")} == {"i3"}


@pytest.mark.asyncio
async def test_repeated_fetch_is_stable(store):
    first = await fetch_items(store, "u1")
    second = await fetch_items(store, "u1")
    assert set(first) == set(second)


@pytest.mark.asyncio
async def test_record_types_and_defaults(store):
    (item_with_details,) = [r for r in await fetch_items(store, "u1") if r.id == "i2"]
    assert item_with_details.description == "After runs"
    assert item_with_details.dateModified == "2/14/2025, 5:05:09 PM"

    (lst,) = await fetch_lists(store, "u1")
    assert isinstance(lst, ListRecord)
    assert "count" not in lst.to_dict()

    (folder,) = await fetch_folders(store, "u1")
    assert isinstance(folder, FolderRecord)
    assert folder.description == ""


@pytest.mark.asyncio
async def test_missing_count_defaults_to_zero():
    store = InMemoryStore()
    store.add("items", "i9", {"name": "New", "dateCreated": T1, "createdBy": "u1"})
    (record,) = await fetch_items(store, "u1")
    assert record.count == 0


class LeakyStore(InMemoryStore):
    """Ignores the owner filter, like a misconfigured index would."""

    async def find_owned(self, collection, owner_id):
        return [StoredDocument(id=doc.id, data=dict(doc.data)) for doc in self._collections.get(collection, [])]


@pytest.mark.asyncio
async def test_foreign_records_are_dropped_even_if_store_returns_them():
    store = LeakyStore()
    store.add("items", "mine", {"name": "A", "count": 1, "dateCreated": T1, "createdBy": "u1"})
    store.add("items", "theirs", {"name": "B", "count": 1, "dateCreated": T1, "createdBy": "u2"})

    records = await fetch_records(store, ITEMS, "u1")

    assert [r.id for r in records] == ["mine"]
