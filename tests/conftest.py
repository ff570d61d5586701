from __future__ import annotations

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"

CHARIZARD_DESCRIPTION = (
    "Spits fire that is hot enough to melt boulders. "
    "Known to cause forest fires unintentionally."
)


@pytest.fixture(scope="session")
def charizard_species() -> dict[str, object]:
    path = DATA_DIR / "pokeapi" / "charizard_species.json"
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def charizard_description() -> str:
    return CHARIZARD_DESCRIPTION
