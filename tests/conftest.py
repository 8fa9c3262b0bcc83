"""
Shared pytest fixtures for the DocIt assistant tests.
"""

from datetime import datetime, timezone

import pytest

from agent.backend import GenerativeBackend
from agent.endpoint import build_app_state
from core.config import Settings
from core.store import InMemoryStore

T1 = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)
T2 = datetime(2025, 2, 14, 17, 5, 9, tzinfo=timezone.utc)


class FakeBackend(GenerativeBackend):
    """Records every call and answers with a canned reply."""

    def __init__(self, reply="My name is Kian."):
        self.reply = reply
        self.calls = []

    async def generate(self, prompt, tools, user_id="anonymous"):
        self.calls.append({"prompt": prompt, "tools": list(tools), "user_id": user_id})
        return self.reply


class ToolCallingBackend(GenerativeBackend):
    """Calls every tool it is given for the user, then summarizes the names."""

    def __init__(self):
        self.results = {}

    async def generate(self, prompt, tools, user_id="anonymous"):
        names = []
        for tool in tools:
            result = await tool.func(user_id=user_id)
            self.results[tool.name] = result
            names.extend(record["name"] for record in result["records"])
        return "You have: " + ", ".join(sorted(names))


@pytest.fixture
def store():
    """
    An in-memory store holding records for two users.

    Returns:
        InMemoryStore: u1 owns i1, i2, l1, f1; u2 owns i3, l2.
    """
    s = InMemoryStore()
    s.add("items", "i1", {"name": "Run", "count": 5, "dateCreated": T1, "createdBy": "u1"})
    s.add("items", "i2", {"name": "Stretch", "count": 2, "dateCreated": T1, "createdBy": "u1",
                          "description": "After runs", "dateModified": T2})
    s.add("items", "i3", {"name": "Swim", "count": 1, "dateCreated": T1, "createdBy": "u2"})
    s.add("lists", "l1", {"name": "Weekly", "dateCreated": T1, "createdBy": "u1"})
    s.add("lists", "l2", {"name": "Secret", "dateCreated": T1, "createdBy": "u2"})
    s.add("folders", "f1", {"name": "Training", "dateCreated": T1, "createdBy": "u1",
                            "dateModified": T2})
    return s


@pytest.fixture
def settings():
    return Settings(store_backend="memory")


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def state(settings, store, fake_backend):
    return build_app_state(settings, store=store, backend=fake_backend)
