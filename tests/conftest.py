import os

import pytest


@pytest.fixture(autouse=True)
def scratch_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """load_env writes straight into os.environ; give each test a throwaway copy."""
    monkeypatch.setattr(os, 'environ', os.environ.copy())
