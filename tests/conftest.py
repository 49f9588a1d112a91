from __future__ import annotations

import pytest

ENV_VARS = [
    "BIN_PACKER_BIN_SIZE",
    "BIN_PACKER_PACKAGE_COUNT",
    "BIN_PACKER_MAX_PACKAGE_SIZE",
    "BIN_PACKER_SEED",
    "BIN_PACKER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so values loaded from a .env file are undone on teardown
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
