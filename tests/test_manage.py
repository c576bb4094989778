"""Tests for the management CLI."""

from pathlib import Path

import pytest

import manage


class TestParser:
    def test_serve_defaults(self):
        args = manage.build_parser().parse_args(["serve"])
        assert args.func is manage.cmd_serve
        assert args.host is None
        assert args.port is None
        assert args.reload is False

    def test_migrate_options(self):
        args = manage.build_parser().parse_args(["migrate", "--db-path", "x.db", "--no-backup"])
        assert args.func is manage.cmd_migrate
        assert args.db_path == Path("x.db")
        assert args.no_backup is True

    def test_command_required(self):
        with pytest.raises(SystemExit):
            manage.build_parser().parse_args([])


class TestCommands:
    def test_migrate_then_verify(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        db_path = tmp_path / "cli.db"

        assert manage.main(["migrate", "--db-path", str(db_path), "--no-backup"]) == 0
        assert "[SUCCESS] v001" in capsys.readouterr().out

        assert manage.main(["migrate", "--db-path", str(db_path)]) == 0
        assert "up to date" in capsys.readouterr().out

        assert manage.main(["verify", "--db-path", str(db_path)]) == 0
        assert "[PASS] required_tables" in capsys.readouterr().out

    def test_migration_status_of_missing_db(self, tmp_path: Path, capsys: pytest.CaptureFixture):
        assert manage.main(["migration-status", "--db-path", str(tmp_path / "none.db")]) == 0
        out = capsys.readouterr().out
        assert "Database exists: False" in out
        assert "Pending migrations: ['001']" in out
