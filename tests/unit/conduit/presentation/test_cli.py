"""Tests for the conduit CLI."""

import sqlite3

from typer.testing import CliRunner

from conduit.presentation.cli.app import app
from conduit_config import clear_settings_cache

runner = CliRunner()


class TestSecretsGenerate:
    def test_prints_required_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output

    def test_secrets_differ_between_runs(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestDbInit:
    def test_creates_users_table(self, tmp_path, monkeypatch):
        db_file = tmp_path / "cli.db"
        monkeypatch.setenv("JWT_SECRET_KEY", "cli-test-secret-with-32-plus-characters")
        monkeypatch.setenv("DATABASE_URL_OVERRIDE", f"sqlite+aiosqlite:///{db_file}")
        clear_settings_cache()

        try:
            result = runner.invoke(app, ["db", "init"])
        finally:
            clear_settings_cache()

        assert result.exit_code == 0, result.output
        with sqlite3.connect(db_file) as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}
        assert "users" in tables
