"""Shared fixtures for create-effect-agent tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from create_effect_agent.models.config import ResolvedConfig


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory for ResolvedConfig with test-friendly defaults."""

    def _make(**overrides: Any) -> ResolvedConfig:
        values: dict[str, Any] = {
            "path": tmp_path / "demo",
            "project_name": "demo-lib",
            "non_interactive": True,
            "skip_git": True,
        }
        values.update(overrides)
        return ResolvedConfig(**values)

    return _make
