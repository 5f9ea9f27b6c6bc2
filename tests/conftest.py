"""Pytest fixtures for roleidm tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from roleidm.application.identity_manager import IdentityManager
from roleidm.domain.exceptions import StoreUnavailable
from roleidm.infrastructure.persistence.memory import (
    MemoryRoleStore,
    MemoryUnitOfWork,
    create_memory_uow_factory,
)


# --- Fake Postgres connection ---


class FakeCursor:
    """Cursor returning canned rows."""

    def __init__(self, rows: list[tuple] | None = None, rowcount: int = 0) -> None:
        self._rows = rows or []
        self.rowcount = rowcount

    async def fetchone(self) -> tuple | None:
        return self._rows[0] if self._rows else None

    async def fetchall(self) -> list[tuple]:
        return list(self._rows)


class FakeConnection:
    """Records executed statements; returns queued cursors in order."""

    def __init__(self, cursors: list[FakeCursor] | None = None) -> None:
        self._cursors = list(cursors or [])
        self.executed: list[tuple[str, tuple | None]] = []

    async def execute(self, query: str, params: tuple | None = None) -> FakeCursor:
        self.executed.append((query, params))
        result = self._cursors.pop(0) if self._cursors else FakeCursor()
        if isinstance(result, Exception):
            raise result
        return result


# --- Failing store ---


@asynccontextmanager
async def unavailable_uow_factory() -> AsyncIterator[MemoryUnitOfWork]:
    """Factory whose store can never be reached."""
    raise StoreUnavailable("store is down")
    yield  # pragma: no cover


# --- Fixtures ---


@pytest.fixture
def role_store() -> MemoryRoleStore:
    """In-memory store seeded with the Administrator role."""
    return MemoryRoleStore(seed_roles=["Administrator"])


@pytest.fixture
def uow_factory(role_store: MemoryRoleStore):
    """Factory returning async context manager over the seeded store."""
    return create_memory_uow_factory(role_store)


@pytest.fixture
def identity_manager(uow_factory) -> IdentityManager:
    """IdentityManager over the seeded in-memory store."""
    return IdentityManager(uow_factory)
