from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def run_from_repo_root(monkeypatch):
    # example programs are opened relative to the repository root
    monkeypatch.chdir(ROOT)
