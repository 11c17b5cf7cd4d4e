from pathlib import Path

import pytest

from linqquiz.domain.entities import Family, Person

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The project's rules.yaml."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def sample_families() -> list[Family]:
    return [
        Family(id=1, persons=(Person(age=10), Person(age=20))),
        Family(id=2, persons=()),
        Family(id=3, persons=(Person(age=40), Person(age=41), Person(age=45))),
    ]
