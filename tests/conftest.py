"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from src.core.weapon.models import BaseWeapon, Catalog, GeneratedWeapon

DATA_DIR = Path(__file__).resolve().parent.parent / "src" / "data"
EXAMPLE_CATALOG_PATH = DATA_DIR / "example_catalog.json"
EXAMPLE_TEMPLATE_PATH = DATA_DIR / "example_template.txt"

STICK_PAYLOAD = {
    "weapons": [
        {
            "name": "Stick",
            "hit": "50",
            "damage": "1d4",
            "range": "5ft",
            "description": "A stick.",
        }
    ],
    "perks": ["Sharp", "Heavy"],
    "randoms": {},
}


@pytest.fixture()
def stick() -> BaseWeapon:
    return BaseWeapon(name="Stick", hit="50", damage="1d4", range="5ft", description="A stick.")


@pytest.fixture()
def stick_catalog(stick: BaseWeapon) -> Catalog:
    """무기 1개, perk 2개, 랜덤 없음"""
    return Catalog(weapons=(stick,), perks=("Sharp", "Heavy"), randoms={})


@pytest.fixture()
def stick_weapon(stick: BaseWeapon) -> GeneratedWeapon:
    return GeneratedWeapon(weapon=stick, perks=("Sharp", "Heavy"))


@pytest.fixture()
def write_json(tmp_path: Path):
    """tmp_path 아래에 JSON 파일을 쓰고 경로 반환"""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def stick_payload() -> dict:
    return json.loads(json.dumps(STICK_PAYLOAD))


@pytest.fixture()
def example_catalog_path() -> Path:
    return EXAMPLE_CATALOG_PATH


@pytest.fixture()
def example_template_path() -> Path:
    return EXAMPLE_TEMPLATE_PATH
