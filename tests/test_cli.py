"""Tests for the pmboard command line."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pmboard.cli import main
from pmboard.config import Config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path):
    tasks = [
        {"id": "t1", "title": "Draft proposal", "dueDate": "2025-01-15", "status": "Client Review", "progress": 0.4},
        {"id": "t2", "title": "Invoice", "dueDate": "2025-01-14", "status": "TODO"},
    ]
    events = [{"id": "m1", "title": "Kickoff", "date": "2025-01-15T14:00:00", "status": "completed"}]
    projects = [{"name": "A", "progress": 1}, {"name": "B", "progress": 0.5}]
    (tmp_path / "tasks.json").write_text(json.dumps(tasks))
    (tmp_path / "events.json").write_text(json.dumps(events))
    (tmp_path / "projects.json").write_text(json.dumps(projects))
    (tmp_path / "settings").mkdir()
    (tmp_path / "settings" / "task-statuses.json").write_text(
        json.dumps({"statuses": [{"name": "Client Review", "color": "#AF52DE"}, "TODO", "Done"]})
    )
    return tmp_path


@pytest.fixture
def file_config(data_dir):
    with patch("pmboard.cli.load_config", return_value=Config(data_dir=str(data_dir))):
        yield


@pytest.fixture
def broken_config():
    with patch("pmboard.cli.load_config", return_value=Config(store="firestore")):
        yield


def test_progress(runner):
    result = runner.invoke(main, ["progress", "0.57", "57", "1", "150"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("0.57 -> 57%")
    assert lines[1].startswith("57 -> 57%")
    assert lines[2].startswith("1 -> 100%")
    assert lines[3].startswith("150 -> 100%")


@pytest.mark.usefixtures("file_config")
class TestWithFileStore:
    def test_status_json(self, runner):
        result = runner.invoke(main, ["status", "--json", "done", "client-review", "Shipped"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0] == {"label": "done", "canonical": "COMPLETED", "display": "Done", "color": "#34C759"}
        assert rows[1]["display"] == "Client Review"
        assert rows[1]["color"] == "#AF52DE"
        assert rows[2]["canonical"] == "NOT_STARTED"
        assert rows[2]["display"] == "Shipped"

    def test_statuses(self, runner):
        result = runner.invoke(main, ["statuses", "--json"])
        assert result.exit_code == 0
        entries = json.loads(result.output)
        assert [e["label"] for e in entries] == ["All", "TODO", "Done", "Client Review"]
        assert entries[0]["pseudo"] is True
        assert entries[0]["canonical"] is None
        assert entries[1]["canonical"] == "NOT_STARTED"

    def test_grid_json(self, runner):
        result = runner.invoke(main, ["grid", "--month", "2025-01", "--json"])
        assert result.exit_code == 0
        cells = json.loads(result.output)
        assert len(cells) == 35
        assert cells[0] is None
        assert cells[17]["date"] == "2025-01-15"
        assert cells[17]["meeting_status"] == "COMPLETED"
        assert cells[17]["color"] == "green"
        assert cells[16]["task_status"] == "NOT_STARTED"

    def test_grid_text(self, runner):
        result = runner.invoke(main, ["grid", "--month", "2025-01", "--mode", "week"])
        assert result.exit_code == 0
        assert "January 2025" in result.output
        assert "15G" in result.output

    def test_grid_bad_month(self, runner):
        result = runner.invoke(main, ["grid", "--month", "January"])
        assert result.exit_code != 0
        assert "YYYY-MM" in result.output

    def test_day_text(self, runner):
        result = runner.invoke(main, ["day", "2025-01-15"])
        assert result.exit_code == 0
        assert "### Wednesday, January 15" in result.output
        assert "- [Client Review] Draft proposal 40% (due TODAY)" in result.output
        assert "- 14:00 Kickoff [Completed]" in result.output

    def test_day_json_with_status(self, runner):
        result = runner.invoke(main, ["day", "2025-01-14", "--status", "TODO", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [t["title"] for t in data["tasks"]] == ["Invoice"]
        assert data["meetings"] == []

    def test_projects(self, runner):
        result = runner.invoke(main, ["projects", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"completed": 1, "in_progress": 1, "not_started": 0, "total": 2}


@pytest.mark.usefixtures("broken_config")
class TestStoreErrors:
    @pytest.mark.parametrize("args", [["grid", "--month", "2025-01"], ["day"], ["projects"]])
    def test_exits_with_error(self, runner, args):
        result = runner.invoke(main, args)
        assert result.exit_code == 1
        assert "Error: No Firestore project configured" in result.output


def test_day_json_uses_configured_zone(runner, tmp_path):
    events = [{"id": "m1", "title": "Late call", "date": "2025-01-15T02:00:00Z", "status": "scheduled"}]
    (tmp_path / "events.json").write_text(json.dumps(events))
    config = Config(data_dir=str(tmp_path), timezone="America/Toronto")

    with patch("pmboard.cli.load_config", return_value=config):
        result = runner.invoke(main, ["day", "2025-01-14", "--json"])
        text = runner.invoke(main, ["day", "2025-01-14"])

    assert result.exit_code == 0
    meetings = json.loads(result.output)["meetings"]
    assert meetings[0]["date"] == "2025-01-14T21:00:00-05:00"
    assert "- 21:00 Late call [Scheduled]" in text.output
