# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Tests for listing containers per configured user."""

import pytest

from podmen.errors import ConfigNotFoundError, ConfigParseError
from podmen.inspector import podman_ps
from podmen.runner import run_command


def test_no_users(recorder, write_config, capsys) -> None:
    podman_ps(write_config({"users": {}}))
    assert recorder.calls == []
    assert capsys.readouterr().out.strip() == "No users found in config"


def test_users_as_array(recorder, write_config, capsys) -> None:
    podman_ps(write_config({"users": ["web"]}))
    assert recorder.calls == []
    assert "No users found in config" in capsys.readouterr().out


def test_runs_podman_per_user(recorder, write_config, capsys) -> None:
    podman_ps(write_config({"users": {"web": {}, "db": {"uid": 5}}}))

    assert recorder.calls == [
        ["sudo", "-u", "web", "podman", "ps"],
        ["sudo", "-u", "db", "podman", "ps"],
    ]
    out = capsys.readouterr().out
    assert out.index("=== Containers for user: web ===") < out.index(
        "=== Containers for user: db ==="
    )


def test_header_preceded_by_blank_line(recorder, write_config, capsys) -> None:
    podman_ps(write_config({"users": {"web": {}}}))
    assert capsys.readouterr().out == "\n=== Containers for user: web ===\n"


def test_failure_does_not_stop_loop(recorder, write_config, capsys) -> None:
    recorder.fail_on = {"b"}

    podman_ps(write_config({"users": {"a": {}, "b": {}, "c": {}}}))

    assert [call[2] for call in recorder.calls] == ["a", "b", "c"]
    captured = capsys.readouterr()
    for name in "abc":
        assert f"=== Containers for user: {name} ===" in captured.out
    assert "Failed to run podman ps for user b: " in captured.err
    assert "user a" not in captured.err
    assert "user c" not in captured.err


def test_name_with_brackets_printed_verbatim(recorder, write_config, capsys) -> None:
    podman_ps(write_config({"users": {"[bold]x[/bold]": {}}}))
    assert "=== Containers for user: [bold]x[/bold] ===" in capsys.readouterr().out


def test_missing_config(recorder, tmp_path) -> None:
    with pytest.raises(ConfigNotFoundError):
        podman_ps(tmp_path / "missing.conf")
    assert recorder.calls == []


def test_malformed_config(recorder, tmp_path) -> None:
    path = tmp_path / "podmen.conf"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        podman_ps(path)


def test_unexecutable_name_does_not_stop_loop(write_config, capsys) -> None:
    calls = []

    def runner(argv):
        calls.append(argv)
        if argv[2] == "a\x00b":
            run_command(argv)

    podman_ps(write_config({"users": {"a\x00b": {}, "c": {}}}), runner=runner)

    assert [call[2] for call in calls] == ["a\x00b", "c"]
    captured = capsys.readouterr()
    assert "=== Containers for user: c ===" in captured.out
    assert "Failed to run podman ps for user a" in captured.err
    assert "null byte" in captured.err
