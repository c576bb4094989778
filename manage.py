#!/usr/bin/env python3
"""
SnackBooks management CLI.

Usage:
    python manage.py serve             Apply migrations and start the API server
    python manage.py migrate           Apply pending database migrations
    python manage.py migration-status  Show applied and pending migrations
    python manage.py verify            Check database integrity
"""

import argparse
import asyncio
import sys
from pathlib import Path

from snackbooks.config import configure_logging, get_settings


def cmd_serve(args: argparse.Namespace) -> int:
    """Start uvicorn; migrations run in the app lifespan."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api.host
    port = args.port or settings.api.port

    print(f"Starting {settings.app_name} on {host}:{port}...")
    uvicorn.run(
        "snackbooks.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
    )
    return 0


def cmd_migrate(args: argparse.Namespace) -> int:
    """Apply pending migrations."""
    from snackbooks.infrastructure.storage.sqlite.migrations import run_migrations

    results = asyncio.run(
        run_migrations(args.db_path, create_backup_before=not args.no_backup)
    )
    if not results:
        print("Database is up to date.")
        return 0

    for result in results:
        status = "SUCCESS" if result.success else "FAILED"
        print(f"[{status}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")
    return 0 if all(r.success for r in results) else 1


def cmd_migration_status(args: argparse.Namespace) -> int:
    """Print migration status."""
    from snackbooks.infrastructure.storage.sqlite.migrations import get_migration_status

    status = asyncio.run(get_migration_status(args.db_path))
    print(f"Database exists: {status['exists']}")
    print(f"Current version: {status['current_version'] or 'N/A'}")
    print(f"Applied migrations: {status['applied_migrations']}")
    print(f"Pending migrations: {status['pending_migrations']}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Run integrity checks against the database."""
    from snackbooks.infrastructure.storage.sqlite.migrations import verify_schema_integrity

    checks = asyncio.run(verify_schema_integrity(args.db_path))
    failed = False
    for check in checks:
        passed = check["status"] == "PASS"
        failed = failed or not passed
        print(f"[{'PASS' if passed else 'FAIL'}] {check['check']}")
        if not passed:
            for key, value in check.items():
                if key not in ("check", "status"):
                    print(f"       {key}: {value}")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SnackBooks management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default=None, help="Bind host (default from settings)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default from settings)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending migrations")
    p_migrate.add_argument("--db-path", type=Path, default=None, help="Database path (default from settings)")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip backup before migrations")
    p_migrate.set_defaults(func=cmd_migrate)

    # migration-status
    p_status = sub.add_parser("migration-status", help="Show migration status")
    p_status.add_argument("--db-path", type=Path, default=None, help="Database path (default from settings)")
    p_status.set_defaults(func=cmd_migration_status)

    # verify
    p_verify = sub.add_parser("verify", help="Check database integrity")
    p_verify.add_argument("--db-path", type=Path, default=None, help="Database path (default from settings)")
    p_verify.set_defaults(func=cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
