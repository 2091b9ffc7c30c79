"""
Tests for the migration command line.
"""
import pytest

from app.db.migrate import revision_history
from scripts import migrate as migrate_cli


@pytest.fixture
def run_cli(tmp_path, monkeypatch, capsys):
    """Run the CLI against a temporary SQLite file and return its stdout lines."""
    monkeypatch.setattr(migrate_cli, "setup_logging", lambda app_config: None)
    database_url = f"sqlite:///{tmp_path / 'cli.db'}"

    def run(*args):
        capsys.readouterr()
        assert migrate_cli.main(["--database-url", database_url, *args]) == 0
        return capsys.readouterr().out.split()

    return run


def test_current_on_empty_database(run_cli):
    assert run_cli("current") == ["base"]


def test_upgrade_downgrade_and_current(run_cli):
    history = revision_history()

    run_cli("upgrade")
    assert run_cli("current") == [history[-1]]

    run_cli("downgrade", "-1")
    assert run_cli("current") == [history[-2]]

    run_cli("downgrade", "base")
    assert run_cli("current") == ["base"]

    run_cli("upgrade", history[2])
    assert run_cli("current") == [history[2]]


def test_history_lists_base_to_head(run_cli):
    assert run_cli("history") == revision_history()


def test_command_is_required():
    with pytest.raises(SystemExit):
        migrate_cli.main([])
