"""Tests for Actions output helpers."""

from __future__ import annotations

from preview_url.outputs import error_annotation, set_output, set_outputs


def test_set_output_appends_delimited_block(tmp_path, read_outputs) -> None:
    path = tmp_path / "out"
    set_output("should-notify", "true", path)
    set_output("deployment-info", '{"a":1}', path)

    assert read_outputs(path) == {"should-notify": "true", "deployment-info": '{"a":1}'}


def test_set_output_multiline_value(tmp_path, read_outputs) -> None:
    path = tmp_path / "out"
    set_output("notes", "line one\nline two", path)
    assert read_outputs(path)["notes"] == "line one\nline two"


def test_set_output_without_file_prints(capsys) -> None:
    set_output("should-notify", "true")
    assert capsys.readouterr().out == "should-notify=true\n"


def test_error_annotation_escapes_newlines(capsys) -> None:
    error_annotation("Action failed: boom\nsecond line 100%")
    assert capsys.readouterr().out == "::error::Action failed: boom%0Asecond line 100%25\n"


def test_set_outputs_writes_every_block(tmp_path, read_outputs) -> None:
    path = tmp_path / "out"
    set_outputs({"should-notify": "true", "deployment-info": "{}"}, path)
    assert read_outputs(path) == {"should-notify": "true", "deployment-info": "{}"}


def test_set_outputs_without_file_prints(capsys) -> None:
    set_outputs({"a": "1", "b": "2"})
    assert capsys.readouterr().out == "a=1\nb=2\n"
