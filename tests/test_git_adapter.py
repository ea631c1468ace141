import subprocess

import pytest

from repo_publisher.errors import GitError, PushError, ToolNotFoundError
from repo_publisher.git_adapter import (
    _run_git,
    ensure_git_available,
    get_remote_url,
    has_commits,
    push_with_upstream,
)


def _completed(returncode: int, stdout: str = "", stderr: str = ""):
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


def test_run_git_includes_stderr_details_on_failure(monkeypatch):
    monkeypatch.setattr(
        "repo_publisher.git_adapter.subprocess.run",
        lambda *args, **kwargs: _completed(128, stderr="fatal: not a git repository"),
    )

    try:
        _run_git(["status"])
    except GitError as exc:
        message = str(exc)
        assert "git status" in message
        assert "fatal: not a git repository" in message
    else:
        raise AssertionError("expected GitError to be raised")


def test_run_git_wraps_os_errors(monkeypatch):
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr("repo_publisher.git_adapter.subprocess.run", fake_run)

    with pytest.raises(GitError, match="failed to execute git"):
        _run_git(["status"])


def test_run_git_passes_cwd(monkeypatch):
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["cwd"] = kwargs["cwd"]
        return _completed(0, stdout="ok\n")

    monkeypatch.setattr("repo_publisher.git_adapter.subprocess.run", fake_run)

    assert _run_git(["status"], cwd="/work").stdout == "ok\n"
    assert seen == {"cmd": ["git", "status"], "cwd": "/work"}


def test_ensure_git_available_raises_when_git_missing(monkeypatch):
    monkeypatch.setattr("repo_publisher.git_adapter.shutil.which", lambda name: None)

    with pytest.raises(ToolNotFoundError, match="git is not installed"):
        ensure_git_available()


def test_ensure_git_available_returns_version(monkeypatch):
    monkeypatch.setattr("repo_publisher.git_adapter.shutil.which", lambda name: "/usr/bin/git")
    monkeypatch.setattr(
        "repo_publisher.git_adapter.subprocess.run",
        lambda *args, **kwargs: _completed(0, stdout="git version 2.43.0\n"),
    )

    assert ensure_git_available() == "git version 2.43.0"


def test_has_commits_is_false_when_head_does_not_resolve(monkeypatch):
    monkeypatch.setattr(
        "repo_publisher.git_adapter.subprocess.run",
        lambda *args, **kwargs: _completed(1),
    )

    assert has_commits() is False


def test_get_remote_url_returns_none_for_missing_remote(monkeypatch):
    monkeypatch.setattr(
        "repo_publisher.git_adapter.subprocess.run",
        lambda *args, **kwargs: _completed(2, stderr="error: No such remote 'origin'"),
    )

    assert get_remote_url("origin") is None


def test_push_failure_raises_push_error(monkeypatch):
    monkeypatch.setattr(
        "repo_publisher.git_adapter.subprocess.run",
        lambda *args, **kwargs: _completed(128, stderr="remote: Repository not found."),
    )

    with pytest.raises(PushError, match="Repository not found"):
        push_with_upstream("origin", "main")
