"""
Tests for scripts/sanitize_payload.py

Uses tmp_path for input files and capsys for the printed JSON.
"""
import io
import json
import sys
from pathlib import Path

import pytest

# Add scripts to path for import
SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"
sys.path.insert(0, str(SCRIPTS_DIR))

from sanitize_payload import main, read_input


@pytest.fixture
def payload_file(tmp_path):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({
        "vendors": [{"vendor_type": "photo", "vendor_name": "Lens & Co"}],
        "tasks": [{"task_name": "Send invites"}, {"task_name": "send invites"}],
    }), encoding="utf-8")
    return path


class TestReadInput:

    def test_missing_file(self, tmp_path, capsys):
        assert read_input(str(tmp_path / "missing.json")) is None
        assert "[ERROR]" in capsys.readouterr().err

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO('{"tasks": []}'))
        assert read_input("-") == '{"tasks": []}'


class TestMain:

    def test_prints_sanitized_result(self, payload_file, capsys):
        exit_code = main([str(payload_file)])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["vendors"][0]["vendor_type"] == "photographer"
        assert len(output["tasks"]) == 1
        assert len(output["warnings"]) == 1

    def test_envelope_mode(self, tmp_path, capsys):
        path = tmp_path / "reply.txt"
        path.write_text(
            '<response>Great news!</response><extracted_data>{"wedding_info": '
            '{"expected_guest_count": "120"}}</extracted_data>',
            encoding="utf-8"
        )

        exit_code = main([str(path), "--envelope"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["message"] == "Great news!"
        assert output["result"]["weddingInfo"] == {"expected_guest_count": 120}

    def test_strict_fails_on_parse_error(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        assert main([str(path)]) == 0
        assert main([str(path), "--strict"]) == 1

    def test_strict_fails_on_size_limit(self, payload_file, capsys):
        assert main([str(payload_file), "--strict", "--max-chars", "10"]) == 1

    def test_unreadable_input(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1
