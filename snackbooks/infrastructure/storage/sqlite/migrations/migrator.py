"""
Versioned schema migrations for the SnackBooks database.

Migrations are `vNNN_name.sql` scripts next to this module, applied in
version order and recorded with a checksum in `schema_migrations`. An
existing database file is copied aside first and put back if a run
fails part way.
"""

import hashlib
import re
import shutil
import time
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite

from snackbooks.config import get_logger, get_settings

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent
MIGRATION_FILENAME = re.compile(r"v(\d+)_(.+)\.sql$")

REQUIRED_TABLES = (
    "selling_prices",
    "materials",
    "material_usage",
    "orders",
    "order_packages",
    "income_entries",
    "expense_entries",
    "schema_migrations",
)

_TRACKING_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    checksum TEXT NOT NULL,
    execution_time_ms INTEGER NOT NULL DEFAULT 0,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
)
"""


@dataclass
class MigrationInfo:
    """A migration script on disk."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = MIGRATION_FILENAME.match(path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")

        return cls(
            version=match.group(1),
            name=match.group(2),
            path=path,
            checksum=hashlib.sha256(path.read_bytes()).hexdigest()[:16],
        )

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")


@dataclass
class MigrationResult:
    """Outcome of applying one migration."""

    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


def _resolve_db_path(db_path: Path | None) -> Path:
    return Path(db_path) if db_path is not None else get_settings().storage.db_path


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[MigrationInfo]:
    """Migration scripts in `directory`, in version order; misnamed files are skipped."""
    migrations = []
    for path in sorted(directory.glob("v*.sql")):
        try:
            migrations.append(MigrationInfo.from_file(path))
        except ValueError as e:
            logger.warning("skipping_invalid_migration", path=str(path), error=str(e))
    return migrations


async def get_applied_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied versions mapped to their recorded checksums; empty before the first run."""
    try:
        cursor = await conn.execute(
            "SELECT version, checksum FROM schema_migrations ORDER BY version"
        )
    except aiosqlite.OperationalError:
        return {}
    return {version: checksum for version, checksum in await cursor.fetchall()}


def _pending(
    migrations: list[MigrationInfo], applied: dict[str, str]
) -> Iterator[MigrationInfo]:
    for migration in migrations:
        recorded = applied.get(migration.version)
        if recorded is None:
            yield migration
        elif recorded != migration.checksum:
            # Already applied; an edited script is reported, never re-run
            logger.warning(
                "migration_checksum_changed",
                version=migration.version,
                applied=recorded,
                current=migration.checksum,
            )


async def apply_migration(
    conn: aiosqlite.Connection,
    migration: MigrationInfo,
) -> MigrationResult:
    """Run one migration script and record it in the same commit."""
    logger.info("applying_migration", version=migration.version, name=migration.name)
    started = time.perf_counter()
    error = None

    try:
        await conn.executescript(migration.read())
        elapsed = int((time.perf_counter() - started) * 1000)
        await conn.execute(
            """
            INSERT OR REPLACE INTO schema_migrations (version, name, checksum, execution_time_ms)
            VALUES (?, ?, ?, ?)
            """,
            (migration.version, migration.name, migration.checksum, elapsed),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        elapsed = int((time.perf_counter() - started) * 1000)
        error = str(e)
        logger.error("migration_failed", version=migration.version, error=error)
    else:
        logger.info("migration_applied", version=migration.version, execution_time_ms=elapsed)

    return MigrationResult(
        version=migration.version,
        name=migration.name,
        success=error is None,
        execution_time_ms=elapsed,
        error=error,
    )


def create_backup(db_path: Path) -> Path:
    """Copy the database file aside before migrating."""
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S%f")
    backup_path = db_path.with_suffix(f".backup_{stamp}.db")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_backup(db_path: Path, backup_path: Path) -> None:
    """Put a backup back in place of the database file."""
    shutil.copy2(backup_path, db_path)
    logger.warning("database_restored_from_backup", backup_path=str(backup_path))


async def run_migrations(
    db_path: Path | None = None,
    create_backup_before: bool = True,
    migrations_dir: Path = MIGRATIONS_DIR,
) -> list[MigrationResult]:
    """
    Apply every pending migration in order, stopping at the first failure.

    Returns one result per migration attempted; an up-to-date database
    gives an empty list. A failed run restores the backup. A database or
    filesystem error also restores it and is re-raised.
    """
    db_path = _resolve_db_path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("migrating_database", db_path=str(db_path))

    backup_path = create_backup(db_path) if create_backup_before and db_path.exists() else None
    results: list[MigrationResult] = []

    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute("PRAGMA foreign_keys=ON")
            await conn.execute(_TRACKING_TABLE_SQL)
            await conn.commit()

            migrations = discover_migrations(migrations_dir)
            if not migrations:
                logger.warning("no_migrations_found", directory=str(migrations_dir))

            for migration in _pending(migrations, await get_applied_migrations(conn)):
                result = await apply_migration(conn, migration)
                results.append(result)
                if not result.success:
                    break
    except (aiosqlite.Error, OSError) as e:
        logger.error("migration_run_failed", error=str(e))
        if backup_path and backup_path.exists():
            restore_backup(db_path, backup_path)
        raise

    if backup_path:
        if all(r.success for r in results):
            backup_path.unlink()
        else:
            restore_backup(db_path, backup_path)

    return results


async def get_migration_status(
    db_path: Path | None = None,
    migrations_dir: Path = MIGRATIONS_DIR,
) -> dict:
    """Current version plus applied and pending migrations."""
    db_path = _resolve_db_path(db_path)
    discovered = discover_migrations(migrations_dir)

    applied: dict[str, str] = {}
    if db_path.exists():
        async with aiosqlite.connect(db_path) as conn:
            applied = await get_applied_migrations(conn)

    return {
        "exists": db_path.exists(),
        "current_version": max(applied, default=None),
        "applied_migrations": list(applied),
        "pending_migrations": [m.version for m in discovered if m.version not in applied],
        "total_migrations": len(discovered),
    }


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    """Foreign key, integrity and required-table checks, each PASS or FAIL."""
    async with aiosqlite.connect(_resolve_db_path(db_path)) as conn:
        cursor = await conn.execute("PRAGMA foreign_key_check")
        violations = len(await cursor.fetchall())

        cursor = await conn.execute("PRAGMA integrity_check")
        (integrity,) = await cursor.fetchone()

        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        existing = {name for (name,) in await cursor.fetchall()}

    missing = [t for t in REQUIRED_TABLES if t not in existing]
    return [
        {
            "check": "foreign_keys",
            "status": "FAIL" if violations else "PASS",
            "violations": violations,
        },
        {
            "check": "integrity",
            "status": "PASS" if integrity == "ok" else "FAIL",
            "result": integrity,
        },
        {
            "check": "required_tables",
            "status": "FAIL" if missing else "PASS",
            "missing": missing,
        },
    ]
