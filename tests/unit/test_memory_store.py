"""Unit tests for the in-memory role store and its unit of work."""

import pytest

from roleidm.application.dto import StoredRole
from roleidm.domain.exceptions import DuplicateEntity, EntityNotFound
from roleidm.infrastructure.persistence.memory import (
    MemoryRoleStore,
    create_memory_uow_factory,
)


def test_seed_roles_created_without_attributes() -> None:
    store = MemoryRoleStore(seed_roles=["Administrator", "Auditor"])
    assert set(store.roles) == {"Administrator", "Auditor"}
    assert store.roles["Auditor"].attributes == ()


@pytest.mark.asyncio
async def test_commit_publishes_staged_writes(role_store, uow_factory) -> None:
    async with uow_factory() as uow:
        await uow.roles.insert(StoredRole(name="someRole"))
        assert "someRole" not in role_store.roles

    assert "someRole" in role_store.roles


@pytest.mark.asyncio
async def test_failure_rolls_back_all_writes(role_store, uow_factory) -> None:
    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            await uow.roles.insert(StoredRole(name="someRole"))
            await uow.roles.delete_by_name("Administrator")
            raise RuntimeError("boom")

    assert set(role_store.roles) == {"Administrator"}


@pytest.mark.asyncio
async def test_insert_duplicate_raises(uow_factory) -> None:
    async with uow_factory() as uow:
        with pytest.raises(DuplicateEntity):
            await uow.roles.insert(StoredRole(name="Administrator"))


@pytest.mark.asyncio
async def test_replace_missing_raises(uow_factory) -> None:
    async with uow_factory() as uow:
        with pytest.raises(EntityNotFound):
            await uow.roles.replace(StoredRole(name="ghost"))


@pytest.mark.asyncio
async def test_delete_reports_whether_deleted(uow_factory) -> None:
    async with uow_factory() as uow:
        assert await uow.roles.delete_by_name("Administrator") is True
        assert await uow.roles.delete_by_name("Administrator") is False


@pytest.mark.asyncio
async def test_units_of_work_are_isolated() -> None:
    store = MemoryRoleStore()
    factory = create_memory_uow_factory(store)

    async with factory() as first:
        await first.roles.insert(StoredRole(name="a"))
        async with factory() as second:
            assert not await second.roles.exists_by_name("a")

    async with factory() as third:
        assert await third.roles.exists_by_name("a")


@pytest.mark.asyncio
async def test_concurrent_units_keep_writes_to_other_roles() -> None:
    store = MemoryRoleStore()
    factory = create_memory_uow_factory(store)

    async with factory() as first:
        await first.roles.insert(StoredRole(name="a"))
        async with factory() as second:
            await second.roles.insert(StoredRole(name="b"))

    assert set(store.roles) == {"a", "b"}
