"""Fixtures for loading the command-line scripts as modules."""

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(f"_script_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def insert_books(monkeypatch):
    module = _load_script("insert_books")
    monkeypatch.setattr(module, "load_env_file", lambda: None)
    return module


@pytest.fixture
def run_queries(monkeypatch):
    module = _load_script("run_queries")
    monkeypatch.setattr(module, "load_env_file", lambda: None)
    return module
