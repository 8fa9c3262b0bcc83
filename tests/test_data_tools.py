"""
Tests for the data-fetch tools exposed to the model.
"""

import pytest

from core.errors import ToolArgumentError
from core.store import InMemoryStore
from tools.data_tools import FOLDERS_TOOL, ITEMS_TOOL, LISTS_TOOL, TOOLSETS, get_tools, run_data_tool


class SpyStore(InMemoryStore):
    def __init__(self):
        super().__init__()
        self.queries = []

    async def find_owned(self, collection, owner_id):
        self.queries.append((collection, owner_id))
        return await super().find_owned(collection, owner_id)


@pytest.mark.asyncio
async def test_items_tool_returns_declared_schema(store):
    result = await run_data_tool(ITEMS_TOOL, store, {"user_id": "u1"}, caller_id="u1")

    by_id = {r["id"]: r for r in result["records"]}
    assert set(by_id) == {"i1", "i2"}
    assert by_id["i1"] == {
        "id": "i1",
        "name": "Run",
        "dateCreated": "1/6/2025, 9:30:00 AM",
        "description": "",
        "dateModified": "",
        "count": 5,
    }


@pytest.mark.asyncio
async def test_lists_and_folders_tools(store):
    lists = await run_data_tool(LISTS_TOOL, store, {"user_id": "u1"}, caller_id="u1")
    folders = await run_data_tool(FOLDERS_TOOL, store, {"user_id": "u1"}, caller_id="u1")

    assert [r["name"] for r in lists["records"]] == ["Weekly"]
    assert [r["name"] for r in folders["records"]] == ["Training"]
    assert "count" not in lists["records"][0]


@pytest.mark.asyncio
async def test_empty_user_id_yields_no_records_without_querying():
    store = SpyStore()
    assert await run_data_tool(ITEMS_TOOL, store, {"user_id": ""}, caller_id="u1") == {"records": []}
    assert await run_data_tool(ITEMS_TOOL, store, {}, caller_id="u1") == {"records": []}
    assert store.queries == []


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{"user_id": 123}, {"user_id": None}, {"user_id": ["u1"]}])
async def test_schema_violations_are_rejected_before_the_store(arguments):
    store = SpyStore()
    with pytest.raises(ToolArgumentError):
        await run_data_tool(ITEMS_TOOL, store, arguments, caller_id="u1")
    assert store.queries == []


@pytest.mark.asyncio
async def test_other_users_id_is_refused_without_querying(store):
    spy = SpyStore()
    spy.add("items", "i3", {"name": "Swim", "count": 1, "createdBy": "u2"})

    result = await run_data_tool(ITEMS_TOOL, spy, {"user_id": "u2"}, caller_id="u1")

    assert result == {"records": []}
    assert spy.queries == []


def test_tool_revisions(store):
    assert get_tools("none", store, "u1") == []
    assert [t.name for t in get_tools("items", store, "u1")] == ["get_user_items"]
    assert [t.name for t in get_tools("all", store, "u1")] == ["get_user_items", "get_user_lists", "get_user_folders"]


def test_unknown_revision(store):
    with pytest.raises(ValueError):
        get_tools("v4", store, "u1")


def test_tool_descriptions_reach_the_model(store):
    for tool, tool_def in zip(get_tools("all", store, "u1"), TOOLSETS["all"]):
        assert tool.description == tool_def.description


@pytest.mark.asyncio
async def test_function_tool_is_bound_to_its_caller(store):
    (items_tool,) = get_tools("items", store, "u2")

    own = await items_tool.func(user_id="u2")
    foreign = await items_tool.func(user_id="u1")

    assert [r["id"] for r in own["records"]] == ["i3"]
    assert foreign == {"records": []}
