from pathlib import Path

import pytest


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "land_odds_settings.json"
