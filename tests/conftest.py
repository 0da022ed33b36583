"""Shared test fixtures for aicommit."""

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from aicommit.config.schema import ProviderConfig
from aicommit.models.diff import Diff

SAMPLE_DIFF = """diff --git a/src/app.py b/src/app.py
index 3b18e51..a9c2f10 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,4 @@
 import os
+import sys

 def main():
"""


@pytest.fixture(autouse=True)
def clean_aicommit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AICOMMIT_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("AICOMMIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def provider() -> ProviderConfig:
    """An active provider with a credential."""
    return ProviderConfig(
        name="deepseek",
        api_key="test-key-0123456789",
        endpoint="https://api.example.com/v1/chat/completions",
        model="deepseek-chat",
    )


@pytest.fixture
def sample_diff() -> Diff:
    """A one-file staged diff."""
    return Diff(text=SAMPLE_DIFF, file_names=("src/app.py",))


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Raw configuration with two providers."""
    return {
        "providers": [
            {
                "name": "deepseek",
                "api_key": "ds-key",
                "endpoint": "https://api.deepseek.com/v1/chat/completions",
                "model": "deepseek-chat",
            },
            {
                "name": "OpenAI",
                "api_key": "",
                "endpoint": "https://api.openai.com/v1/chat/completions",
                "model": "gpt-4o-mini",
            },
        ],
        "default_provider": "deepseek",
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a config file (JSON-encoded unless given a str) and return its path."""

    def _write(data: Any) -> Path:
        path = tmp_path / ".aicommit" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return path

    return _write

