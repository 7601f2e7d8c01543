from __future__ import annotations

from datetime import date, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import (
    ConflictError,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from src.application.use_cases.breeding import create_breeding_record
from src.application.use_cases.goats import create_goat, delete_goat, update_goat
from src.domain.models.goat import Goat
from src.domain.value_objects.role import Role


class StubGoatsRepo:
    def __init__(self, *goats: Goat) -> None:
        self.goats = {goat.id: goat for goat in goats}
        self.added: list[Goat] = []
        self.deleted: list = []

    async def add(self, goat: Goat) -> Goat:
        self.added.append(goat)
        self.goats[goat.id] = goat
        return goat

    async def get(self, goat_id):
        return self.goats.get(goat_id)

    async def get_many(self, goat_ids):
        return {gid: self.goats[gid] for gid in goat_ids if gid in self.goats}

    async def update(self, goat_id, data, expected_version):
        return None

    async def delete(self, goat_id):
        self.deleted.append(goat_id)
        return self.goats.pop(goat_id, None) is not None


class StubCounters:
    def __init__(self) -> None:
        self.values: dict = {}

    async def next_value(self, kind):
        self.values[kind] = self.values.get(kind, 0) + 1
        return self.values[kind]


class StubBreedingRepo:
    def __init__(self) -> None:
        self.added = []

    async def add(self, record):
        self.added.append(record)
        return record


def make_uow(goats: StubGoatsRepo):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        goats=goats,
        breeding_records=StubBreedingRepo(),
        reference_counters=StubCounters(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.mark.asyncio
async def test_create_goat_denies_viewer():
    repo = StubGoatsRepo()
    uow = make_uow(repo)
    with pytest.raises(PermissionDenied):
        await create_goat.execute(
            uow,
            Role.VIEWER,
            uuid4(),
            create_goat.CreateGoatInput(tag_no="G-001", breed="Boer", gender="Female"),
        )
    assert not repo.added


@pytest.mark.asyncio
async def test_create_goat_with_staff_succeeds():
    repo = StubGoatsRepo()
    uow = make_uow(repo)
    actor = uuid4()
    result = await create_goat.execute(
        uow,
        Role.STAFF,
        actor,
        create_goat.CreateGoatInput(tag_no="  G-002 ", breed="Boer", gender="Female"),
    )
    assert result.tag_no == "G-002"
    assert result.status == "Active"
    assert result.created_by == actor
    assert uow.commits


@pytest.mark.asyncio
async def test_create_goat_rejects_female_sire():
    doe = Goat.create(tag_no="D-1", breed="Boer", gender="Female")
    uow = make_uow(StubGoatsRepo(doe))
    with pytest.raises(ValidationError):
        await create_goat.execute(
            uow,
            Role.ADMIN,
            uuid4(),
            create_goat.CreateGoatInput(
                tag_no="K-1", breed="Boer", gender="Male", sire_id=doe.id
            ),
        )


@pytest.mark.asyncio
async def test_update_conflict_raises():
    goat = Goat.create(tag_no="G-3", breed="Saanen", gender="Female")
    uow = make_uow(StubGoatsRepo(goat))
    with pytest.raises(ConflictError):
        await update_goat.execute(
            uow,
            Role.MANAGER,
            uuid4(),
            goat.id,
            update_goat.UpdateGoatInput(version=1, name="Daisy"),
        )


@pytest.mark.asyncio
async def test_update_rejects_self_parent():
    goat = Goat.create(tag_no="G-4", breed="Saanen", gender="Male")
    uow = make_uow(StubGoatsRepo(goat))
    with pytest.raises(ValidationError):
        await update_goat.execute(
            uow,
            Role.ADMIN,
            uuid4(),
            goat.id,
            update_goat.UpdateGoatInput(sire_id=goat.id),
        )


@pytest.mark.asyncio
async def test_delete_goat_denies_viewer():
    goat = Goat.create(tag_no="G-5", breed="Boer", gender="Male")
    repo = StubGoatsRepo(goat)
    uow = make_uow(repo)
    with pytest.raises(PermissionDenied):
        await delete_goat.execute(uow, Role.VIEWER, goat.id)
    assert not repo.deleted


@pytest.mark.asyncio
async def test_delete_missing_goat_raises_not_found():
    uow = make_uow(StubGoatsRepo())
    with pytest.raises(NotFound):
        await delete_goat.execute(uow, Role.ADMIN, uuid4())


@pytest.mark.asyncio
async def test_breeding_record_defaults_expected_kid_date():
    buck = Goat.create(tag_no="B-1", breed="Boer", gender="Male")
    doe = Goat.create(tag_no="D-1", breed="Boer", gender="Female")
    uow = make_uow(StubGoatsRepo(buck, doe))
    bred_on = date(2026, 3, 1)
    record = await create_breeding_record.execute(
        uow,
        Role.STAFF,
        uuid4(),
        create_breeding_record.CreateBreedingRecordInput(
            male_goat_id=buck.id, female_goat_id=doe.id, breeding_date=bred_on
        ),
        gestation_days=150,
    )
    assert record.expected_kid_date == bred_on + timedelta(days=150)
    assert record.method == "Natural"
    assert record.reference_no.startswith("BR-")
    assert record.reference_no.endswith("-0001")


@pytest.mark.asyncio
async def test_breeding_record_requires_buck_and_doe():
    doe_a = Goat.create(tag_no="D-1", breed="Boer", gender="Female")
    doe_b = Goat.create(tag_no="D-2", breed="Boer", gender="Female")
    uow = make_uow(StubGoatsRepo(doe_a, doe_b))
    with pytest.raises(ValidationError):
        await create_breeding_record.execute(
            uow,
            Role.STAFF,
            uuid4(),
            create_breeding_record.CreateBreedingRecordInput(
                male_goat_id=doe_a.id, female_goat_id=doe_b.id, breeding_date=date(2026, 3, 1)
            ),
            gestation_days=150,
        )
    assert not uow.breeding_records.added
