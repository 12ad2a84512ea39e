"""
scripts/recalculate_confidence.py — argument handling, dry run vs apply.
Records carry no dates so their scores don't depend on the wall clock.
"""

import importlib.util
import json
from pathlib import Path

import pytest

from provider_directory.settings import settings

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "recalculate_confidence.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("recalculate_confidence", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def records_file(tmp_path):
    rows = [
        # CMS data of unknown date (15) + two verifications (4) = 19
        {"id": 1, "confidenceScore": 19, "dataSource": "CMS_DATA", "verificationCount": 2},
        {"id": 2, "confidenceScore": 50, "dataSource": "CMS_DATA", "verificationCount": 2},
        {"id": 3, "confidenceScore": 10, "dataSource": "NOT_A_SOURCE"},
    ]
    path = tmp_path / "records.json"
    path.write_text(json.dumps(rows))
    return path


class TestRecalculateScript:

    def test_dry_run_by_default(self, script, records_file, capsys):
        before = records_file.read_text()
        assert script.main([str(records_file)]) == 0
        out = capsys.readouterr().out
        assert "DRY RUN" in out
        assert "Updated:    1" in out
        assert "Errors:     1" in out
        assert records_file.read_text() == before

    def test_apply_writes_new_scores(self, script, records_file):
        assert script.main([str(records_file), "--apply"]) == 0
        rows = json.loads(records_file.read_text())
        assert [row["confidenceScore"] for row in rows] == [19, 19, 10]

    def test_limit(self, script, records_file, capsys):
        assert script.main([str(records_file), "--limit", "1"]) == 0
        out = capsys.readouterr().out
        assert "Processed:  1" in out

    @pytest.mark.parametrize("limit", ["0", "-3", "abc"])
    def test_bad_limit_exits_1(self, script, records_file, capsys, limit):
        with pytest.raises(SystemExit) as exc:
            script.main([str(records_file), "--limit", limit])
        assert exc.value.code == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_missing_file(self, script, tmp_path, capsys):
        assert script.main([str(tmp_path / "nope.json")]) == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_not_a_list(self, script, tmp_path, capsys):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({"id": 1}))
        assert script.main([str(path)]) == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_empty_list(self, script, tmp_path, capsys):
        path = tmp_path / "records.json"
        path.write_text("[]")
        assert script.main([str(path)]) == 0
        assert "No records to process" in capsys.readouterr().out

    def test_apply_row_without_id(self, script, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([{"confidenceScore": 50, "dataSource": "CMS_DATA"}]))
        assert script.main([str(path), "--apply"]) == 0
        assert json.loads(path.read_text()) == [{"confidenceScore": 15, "dataSource": "CMS_DATA"}]

    @pytest.mark.parametrize("shared_id", [None, 7])
    def test_apply_rows_sharing_an_id(self, script, tmp_path, shared_id):
        rows = [
            {"id": shared_id, "confidenceScore": 50, "dataSource": "CMS_DATA"},   # → 15
            {"id": shared_id, "confidenceScore": 50, "dataSource": "AUTOMATED"},  # → 8
        ]
        path = tmp_path / "records.json"
        path.write_text(json.dumps(rows))
        assert script.main([str(path), "--apply"]) == 0
        assert [row["confidenceScore"] for row in json.loads(path.read_text())] == [15, 8]

    def test_banner_shows_environment(self, script, records_file, capsys):
        script.main([str(records_file)])
        assert f"Environment: {settings.environment}" in capsys.readouterr().out
