"""Tests for SQLite material store."""

from datetime import date
from pathlib import Path

from snackbooks.core.entities import DEFAULT_MATERIALS, Material, MaterialUsage
from snackbooks.core.services import requirements_for
from snackbooks.infrastructure.storage.sqlite.material_store import SQLiteMaterialStore


class TestMaterials:
    async def test_first_load_seeds_defaults(self, db_pool: Path):
        store = SQLiteMaterialStore()
        materials = await store.load()

        assert [m.name for m in materials] == [m.name for m in DEFAULT_MATERIALS]
        assert all(m.id is not None for m in materials)
        assert DEFAULT_MATERIALS[0].id is None

        again = await store.load()
        assert [m.id for m in again] == [m.id for m in materials]

    async def test_update_existing_material(self, db_pool: Path):
        store = SQLiteMaterialStore()
        materials = await store.load()
        oil = next(m for m in materials if m.name == "Oil")

        oil.price_per_unit = 135.0
        oil.stock = 4.5
        await store.save([oil])

        reloaded = {m.name: m for m in await store.load()}
        assert reloaded["Oil"].price_per_unit == 135.0
        assert reloaded["Oil"].stock == 4.5
        assert reloaded["Maida"].price_per_unit == 45.0

    async def test_new_material_gets_id(self, db_pool: Path):
        store = SQLiteMaterialStore()
        await store.load()

        sugar = Material(name="Sugar", unit="kg", price_per_unit=42.0)
        await store.save([sugar])

        assert sugar.id is not None
        names = [m.name for m in await store.load()]
        assert names[-1] == "Sugar"

    async def test_insert_with_existing_name_updates(self, db_pool: Path):
        store = SQLiteMaterialStore()
        materials = await store.load()
        salt_id = next(m.id for m in materials if m.name == "Salt")

        duplicate = Material(name="salt", unit="kg", price_per_unit=6.0)
        await store.save([duplicate])

        assert duplicate.id == salt_id
        reloaded = await store.load()
        assert len(reloaded) == len(DEFAULT_MATERIALS)
        assert next(m for m in reloaded if m.id == salt_id).price_per_unit == 6.0


class TestUsageLog:
    async def test_add_and_list_usage(self, db_pool: Path):
        store = SQLiteMaterialStore()
        usage = MaterialUsage(
            usage_date=date(2024, 3, 5),
            batch_size_kg=5.1,
            requirements=requirements_for(5100),
            total_cost=512.5,
        )
        saved = await store.add_usage(usage)
        assert saved.id is not None

        [loaded] = await store.list_usage()
        assert loaded.id == saved.id
        assert loaded.usage_date == date(2024, 3, 5)
        assert loaded.batch_size_kg == 5.1
        assert loaded.requirements.gas_minutes == 60
        assert loaded.requirements.flour_kg == usage.requirements.flour_kg
        assert loaded.total_cost == 512.5

    async def test_usage_listed_newest_first(self, db_pool: Path):
        store = SQLiteMaterialStore()
        for day in (1, 3, 2):
            await store.add_usage(
                MaterialUsage(
                    usage_date=date(2024, 3, day),
                    batch_size_kg=1.0,
                    requirements=requirements_for(1000),
                )
            )

        listed = await store.list_usage()
        assert [u.usage_date.day for u in listed] == [3, 2, 1]
        assert len(await store.list_usage(limit=2)) == 2
