"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from roleidm.infrastructure.persistence.memory.role_repository import (
    MemoryRoleRepository,
    MemoryRoleStore,
)


class MemoryUnitOfWork:
    """Stages writes on a private copy of the store; commit publishes them."""

    def __init__(self, store: MemoryRoleStore) -> None:
        self._store = store
        self._staged = dict(store.roles)
        self._touched: set[str] = set()
        self._roles = MemoryRoleRepository(self._staged, self._touched)

    async def __aenter__(self) -> "MemoryUnitOfWork":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type:
            await self.rollback()

    @property
    def roles(self) -> MemoryRoleRepository:
        return self._roles

    async def commit(self) -> None:
        self._store.apply(self._staged, self._touched)
        self._touched.clear()

    async def rollback(self) -> None:
        self._staged.clear()
        self._staged.update(self._store.roles)
        self._touched.clear()


def create_memory_uow_factory(store: MemoryRoleStore) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[MemoryUnitOfWork]:
        uow = MemoryUnitOfWork(store)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
