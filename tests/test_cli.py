"""Tests for the content generator CLI."""

import json
import sys
from unittest.mock import patch

from agents.content_generator.__main__ import main


def _run_cli(monkeypatch, client, *argv):
    monkeypatch.setattr(sys, "argv", ["content_generator", *argv])
    with patch("agents.content_generator.__main__.ContentGenerationClient.from_env", return_value=client):
        return main()


def test_topics_command_prints_json(monkeypatch, capsys, make_client):
    client, _ = make_client({"gemini-1.5-flash": '["Spin Kings", "O-D-I Chaos"]'})

    assert _run_cli(monkeypatch, client, "topics", "--count", "2") == 0
    assert json.loads(capsys.readouterr().out) == ["Spin Kings", "O-D-I Chaos"]


def test_script_command_marks_hosts(monkeypatch, capsys, make_client):
    client, fake = make_client({
        "gemini-1.5-flash": '[{"speaker": "Harsha", "line": "[excited] Hello!"}]',
    })

    code = _run_cli(
        monkeypatch, client,
        "script", "--topic", "Spin", "--speaker", "Harsha", "--speaker", "Nasser", "--host", "Harsha",
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"speaker": "Harsha", "line": "[excited] Hello!"}]
    assert "Harsha (Host):" in fake.last_prompt
    assert "Nasser (Guest):" in fake.last_prompt


def test_script_command_requires_a_topic_source(monkeypatch, capsys, make_client):
    client, fake = make_client({})

    assert _run_cli(monkeypatch, client, "script", "--speaker", "Harsha") == 1
    assert fake.calls == []


def test_summary_command_reads_transcript(monkeypatch, capsys, tmp_path, make_client):
    transcript_path = tmp_path / "transcript.json"
    transcript_path.write_text(json.dumps([
        {"speaker": "Isa", "line": "[excited] Bumrah strikes!"},
    ]))
    client, fake = make_client({"gemini-1.5-flash": "# Recap\n- Bumrah"})

    assert _run_cli(monkeypatch, client, "summary", str(transcript_path)) == 0
    assert capsys.readouterr().out.strip() == "# Recap\n- Bumrah"
    assert "Isa: Bumrah strikes!" in fake.last_prompt


def test_errors_exit_with_status_one(monkeypatch, capsys, make_client):
    client, _ = make_client({})

    assert _run_cli(monkeypatch, client, "topics") == 1
    assert "Error" in capsys.readouterr().err
