"""Shared test fixtures."""

import json

import pytest

from versync.config import get_settings


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file and return its path."""

    def _write(config, name="version.json"):
        path = tmp_path / name
        path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def output_file(tmp_path):
    """Empty GITHUB_OUTPUT file."""
    path = tmp_path / "github_output"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def read_outputs():
    """Parse name=value lines from a GITHUB_OUTPUT file."""

    def _read(path):
        outputs = {}
        for line in path.read_text(encoding="utf-8").splitlines():
            name, _, value = line.partition("=")
            outputs[name] = value
        return outputs

    return _read


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no GitHub Actions variables and no .env file in reach."""
    for name in ("INPUT_PATH", "GITHUB_REF", "GITHUB_SHA", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
