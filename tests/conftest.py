"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def advisories() -> list[str]:
    """Collect advisories; pass advisories.append as the advise sink."""
    return []


@pytest.fixture
def tmp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary directory holding a tckit.yaml at 29.97 fps."""
    config_dir = tmp_path / "show"
    config_dir.mkdir()
    config = {"frame_rate": 29.97, "drop_frame": None, "verbose": False}
    with open(config_dir / "tckit.yaml", "w") as f:
        yaml.dump(config, f)
    return config_dir


@pytest.fixture
def drop_frame_boundaries() -> list[tuple[int, str]]:
    """Frame counts at 29.97 fps around the minute boundaries, with labels."""
    return [
        (0, "00:00:00;00"),
        (1799, "00:00:59;29"),
        (1800, "00:01:00;02"),
        (3597, "00:01:59;29"),
        (3598, "00:02:00;02"),
        (16184, "00:09:00;02"),
        (17981, "00:09:59;29"),
        (17982, "00:10:00;00"),
        (17983, "00:10:00;01"),
        (19782, "00:11:00;02"),
        (34166, "00:19:00;02"),
        (35963, "00:19:59;29"),
        (35964, "00:20:00;00"),
        (107892, "01:00:00;00"),
    ]
