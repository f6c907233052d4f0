"""Pytest configuration and fixtures for kanban-mcp tests."""

from datetime import date
from types import SimpleNamespace

import pytest

from kanban_mcp.registry import StatusSet
from kanban_mcp.runtime import BoardRuntime
from kanban_mcp.store import MockTaskStore, create_mock_store

TODAY = date(2025, 1, 15)


@pytest.fixture
def today():
    """Fixed reference date so sample due dates are deterministic."""
    return TODAY


@pytest.fixture
def seeded_store():
    """Store seeded with the 8 sample tasks, due dates relative to TODAY."""
    return create_mock_store(today=TODAY)


@pytest.fixture
def empty_store():
    """Store with no tasks and the default statuses."""
    return MockTaskStore()


@pytest.fixture
def small_store():
    """Store with three simple tasks in a known order."""
    return MockTaskStore(
        [
            {"タスク": "First", "ステータス": "未着手", "優先度": "高"},
            {"タスク": "Second", "ステータス": "進行中", "担当者": "佐藤"},
            {"タスク": "Third", "ステータス": "完了", "期限": "2025-02-01"},
        ]
    )


@pytest.fixture
def two_status_store():
    """Empty store whose status set only knows 未着手 and 完了."""
    return MockTaskStore(statuses=StatusSet(["未着手", "完了"]))


@pytest.fixture
def runtime(small_store):
    """Runtime (not yet started) whose mock factory returns small_store."""
    return BoardRuntime(mock_api_factory=lambda: small_store)


@pytest.fixture
def ctx(small_store):
    """Fake MCP Context whose lifespan context serves small_store."""
    return SimpleNamespace(request_context=SimpleNamespace(lifespan_context=SimpleNamespace(api=small_store)))
