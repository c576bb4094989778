"""Tests for SQLite pricing store."""

from pathlib import Path

import aiosqlite

from snackbooks.core.entities import DEFAULT_PRICES, PricingTable
from snackbooks.infrastructure.storage.sqlite.pricing_store import SQLitePricingStore


class TestSQLitePricingStore:
    async def test_empty_store_loads_defaults(self, db_pool: Path):
        table = await SQLitePricingStore().load()
        assert table.prices == DEFAULT_PRICES

    async def test_save_and_load(self, db_pool: Path):
        store = SQLitePricingStore()
        table = PricingTable.with_defaults()
        table.set_price("retail", 100, 28.0)
        table.set_price("festival", 500, 130.0)

        await store.save(table)
        loaded = await store.load()

        assert loaded.get_price("retail", 100) == 28.0
        assert loaded.get_price("festival", 500) == 130.0
        assert loaded.get_price("wholesale", 250) == 56.0

    async def test_save_replaces_previous_table(self, db_pool: Path):
        store = SQLitePricingStore()
        await store.save(PricingTable(prices={"festival": {100: 40.0}}))
        await store.save(PricingTable(prices={"retail": {100: 30.0}}))

        loaded = await store.load()
        assert "festival" not in loaded.prices
        assert loaded.prices["retail"] == {100: 30.0}

    async def test_zero_price_round_trips_as_default(self, db_pool: Path):
        store = SQLitePricingStore()
        table = PricingTable(prices={"retail": {100: 30.0}})
        table.set_price("retail", 100, 0)
        await store.save(table)

        assert (await store.load()).get_price("retail", 100) == 25.0

    async def test_corrupt_rows_are_dropped(self, db_pool: Path):
        async with aiosqlite.connect(db_pool) as conn:
            await conn.execute(
                "INSERT INTO selling_prices (variant, size, price) VALUES ('retail', 100, 31)"
            )
            await conn.execute(
                "INSERT INTO selling_prices (variant, size, price) VALUES ('retail', 250, 'abc')"
            )
            await conn.commit()

        table = await SQLitePricingStore().load()
        assert table.get_price("retail", 100) == 31.0
        assert table.get_price("retail", 250) == 70.0
