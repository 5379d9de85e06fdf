"""템플릿 렌더러 - 리터럴 마커 치환 + perk 줄 복제"""

from typing import Iterable

from .models import (
    REPLACE_DAMAGE_STR,
    REPLACE_DESC_STR,
    REPLACE_HIT_STR,
    REPLACE_NAME_STR,
    REPLACE_PERK_STR,
    REPLACE_RANGE_STR,
    GeneratedWeapon,
)


def _field_markers(weapon: GeneratedWeapon) -> list[tuple[str, str]]:
    base = weapon.weapon
    return [
        (REPLACE_NAME_STR, weapon.name),
        (REPLACE_HIT_STR, base.hit),
        (REPLACE_DAMAGE_STR, base.damage),
        (REPLACE_RANGE_STR, base.range),
        (REPLACE_DESC_STR, base.description),
    ]


def render(template: str, weapon: GeneratedWeapon) -> str:
    """무기 1개를 템플릿에 렌더링.

    perk 마커가 있는 줄은 perk마다 한 줄씩 복제된다.
    perk가 없으면 그 줄은 출력에서 사라진다.
    """
    text = template
    for marker, value in _field_markers(weapon):
        text = text.replace(marker, value)

    lines: list[str] = []
    for line in text.split("\n"):
        if REPLACE_PERK_STR not in line:
            lines.append(line)
            continue
        if not weapon.perks:
            continue
        lines.append("\n".join(line.replace(REPLACE_PERK_STR, perk) for perk in weapon.perks))
    return "\n".join(lines)


def render_many(template: str, weapons: Iterable[GeneratedWeapon]) -> str:
    """각 무기를 같은 템플릿으로 렌더링하고 줄바꿈을 붙여 이어 붙인다."""
    return "".join(f"{render(template, weapon)}\n" for weapon in weapons)
