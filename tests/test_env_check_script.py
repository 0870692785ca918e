"""Tests for the environment drift detection script."""

from __future__ import annotations

from pathlib import Path

import pytest

from scripts import check_env

REQUIRED_ENV_KEYS = ["THREADS_APP_ID", "THREADS_APP_SECRET"]


def _write_env(env_path: Path, **values: str) -> None:
    contents = "\n".join(f"{key}={value}" for key, value in values.items())
    env_path.write_text(contents + "\n", encoding="utf-8")


@pytest.fixture(autouse=True)
def _clear_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in REQUIRED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _run(command: str, env_file: Path, hash_file: Path | None = None) -> int:
    argv = [command, "--env-file", str(env_file)]
    if hash_file is not None:
        argv.extend(["--hash-file", str(hash_file)])
    return check_env.main(argv)


@pytest.mark.parametrize("command", ["record", "verify", "check"])
def test_main_requires_existing_env_file(tmp_path: Path, command: str) -> None:
    hash_file = None if command == "check" else tmp_path / ".env.sha256"

    assert _run(command, tmp_path / ".missing-env", hash_file) == check_env.EXIT_RUNTIME_ERROR


def test_record_and_verify_detects_changed_secret(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env"
    hash_file = tmp_path / ".env.sha256"
    _write_env(env_file, THREADS_APP_ID="1234567890", THREADS_APP_SECRET="secret")

    assert _run("record", env_file, hash_file) == check_env.EXIT_OK
    assert hash_file.read_text(encoding="utf-8").strip()

    for key in REQUIRED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    assert _run("verify", env_file, hash_file) == check_env.EXIT_OK

    _write_env(env_file, THREADS_APP_ID="1234567890", THREADS_APP_SECRET="rotated")
    for key in REQUIRED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    assert _run("verify", env_file, hash_file) == check_env.EXIT_CHECKSUM_ERROR


def test_verify_without_baseline(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    _write_env(env_file, THREADS_APP_ID="1234567890", THREADS_APP_SECRET="secret")

    assert (
        _run("verify", env_file, tmp_path / "missing.sha256")
        == check_env.EXIT_RUNTIME_ERROR
    )


def test_missing_secret_fails_validation(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    _write_env(env_file, THREADS_APP_ID="1234567890")

    assert _run("check", env_file) == check_env.EXIT_VALIDATION_ERROR


def test_blank_secret_fails_validation(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    _write_env(env_file, THREADS_APP_ID="1234567890", THREADS_APP_SECRET="'   '")

    assert _run("check", env_file) == check_env.EXIT_VALIDATION_ERROR
