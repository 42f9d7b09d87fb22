from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.boilerplate import BoilerplateRepo


@pytest.fixture
def boilerplate(tmp_path: Path) -> BoilerplateRepo:
    """Provide a seeded boilerplate repository rooted at the pytest tmp_path."""
    return BoilerplateRepo(tmp_path).seed()
