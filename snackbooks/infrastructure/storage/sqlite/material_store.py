"""SQLite implementation of material and usage-log storage."""

import json
from datetime import UTC, datetime

import aiosqlite

from snackbooks.config import get_logger
from snackbooks.core.entities.production import (
    DEFAULT_MATERIALS,
    Material,
    MaterialRequirements,
    MaterialUsage,
)
from snackbooks.core.interfaces.material_store import IMaterialStore
from snackbooks.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from snackbooks.infrastructure.storage.sqlite.rows import parse_date, parse_datetime

logger = get_logger(__name__)


class SQLiteMaterialStore(IMaterialStore):
    """Materials in `materials`, production batches in `material_usage`."""

    async def load(self) -> list[Material]:
        """All materials by id; seeds the default list into an empty table."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM materials ORDER BY id")
            rows = await cursor.fetchall()

        if rows:
            return [self._row_to_material(r) for r in rows]

        defaults = [m.model_copy() for m in DEFAULT_MATERIALS]
        await self.save(defaults)
        logger.info("default_materials_seeded", count=len(defaults))
        return defaults

    async def save(self, materials: list[Material]) -> None:
        """Insert materials without an id, update the rest by id."""
        now = datetime.now(UTC).isoformat()
        async with get_transaction() as conn:
            for material in materials:
                if material.id is None:
                    cursor = await conn.execute(
                        """
                        INSERT INTO materials (name, unit, price_per_unit, stock, created_at, updated_at)
                        VALUES (?, ?, ?, ?, ?, ?)
                        ON CONFLICT(name) DO UPDATE SET
                            unit = excluded.unit,
                            price_per_unit = excluded.price_per_unit,
                            stock = excluded.stock,
                            updated_at = excluded.updated_at
                        """,
                        (
                            material.name,
                            material.unit,
                            material.price_per_unit,
                            material.stock,
                            now,
                            now,
                        ),
                    )
                    material.id = await self._id_for_name(conn, material.name, cursor.lastrowid)
                else:
                    await conn.execute(
                        """
                        UPDATE materials
                        SET name = ?, unit = ?, price_per_unit = ?, stock = ?, updated_at = ?
                        WHERE id = ?
                        """,
                        (
                            material.name,
                            material.unit,
                            material.price_per_unit,
                            material.stock,
                            now,
                            material.id,
                        ),
                    )

        logger.info("materials_saved", count=len(materials))

    async def add_usage(self, usage: MaterialUsage) -> MaterialUsage:
        """Append a production batch to the log."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO material_usage (
                    usage_date, batch_size_kg, requirements_json, total_cost, created_at
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (
                    usage.usage_date.isoformat(),
                    usage.batch_size_kg,
                    json.dumps(usage.requirements.model_dump()),
                    usage.total_cost,
                    usage.created_at.isoformat(),
                ),
            )
            usage.id = cursor.lastrowid

        logger.info(
            "material_usage_recorded",
            usage_id=usage.id,
            batch_size_kg=usage.batch_size_kg,
            total_cost=usage.total_cost,
        )
        return usage

    async def list_usage(self, limit: int = 100) -> list[MaterialUsage]:
        """Usage records, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM material_usage
                ORDER BY usage_date DESC, id DESC
                LIMIT ?
                """,
                (limit,),
            )
            rows = await cursor.fetchall()
        return [self._row_to_usage(r) for r in rows]

    @staticmethod
    async def _id_for_name(
        conn: aiosqlite.Connection, name: str, fallback: int | None
    ) -> int | None:
        # lastrowid is unreliable when the upsert took the UPDATE branch
        cursor = await conn.execute("SELECT id FROM materials WHERE name = ?", (name,))
        row = await cursor.fetchone()
        return row["id"] if row else fallback

    @staticmethod
    def _row_to_material(row: aiosqlite.Row) -> Material:
        """Convert a database row to a Material entity."""
        return Material(
            id=row["id"],
            name=row["name"],
            unit=row["unit"],
            price_per_unit=float(row["price_per_unit"]),
            stock=float(row["stock"]),
        )

    @staticmethod
    def _row_to_usage(row: aiosqlite.Row) -> MaterialUsage:
        """Convert a database row to a MaterialUsage entity."""
        try:
            requirements = MaterialRequirements(**json.loads(row["requirements_json"]))
        except (TypeError, ValueError):
            logger.warning("usage_requirements_unreadable", usage_id=row["id"])
            requirements = MaterialRequirements()

        return MaterialUsage(
            id=row["id"],
            usage_date=parse_date(row["usage_date"]),
            batch_size_kg=float(row["batch_size_kg"]),
            requirements=requirements,
            total_cost=float(row["total_cost"]),
            created_at=parse_datetime(row["created_at"]),
        )
