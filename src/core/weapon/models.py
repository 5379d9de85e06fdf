"""무기 도메인 모델 (I/O 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# === 템플릿 마커 ===
REPLACE_NAME_STR = "{REPLACE_NAME_STR}"
REPLACE_HIT_STR = "{REPLACE_HIT_STR}"
REPLACE_DAMAGE_STR = "{REPLACE_DAMAGE_STR}"
REPLACE_RANGE_STR = "{REPLACE_RANGE_STR}"
REPLACE_DESC_STR = "{REPLACE_DESC_STR}"
REPLACE_PERK_STR = "{REPLACE_PERK_STR}"


@dataclass(frozen=True)
class BaseWeapon:
    """기본 무기 - 카탈로그에서 로드. 모든 필드에 프래그먼트 키가 들어갈 수 있다."""

    name: str
    hit: str
    damage: str
    range: str
    description: str


@dataclass(frozen=True)
class Catalog:
    """생성 입력 데이터 - 실행 중 읽기 전용."""

    weapons: tuple[BaseWeapon, ...]
    perks: tuple[str, ...] = ()
    randoms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # list/dict로 넘겨도 불변 컨테이너로 고정
        object.__setattr__(self, "weapons", tuple(self.weapons))
        object.__setattr__(self, "perks", tuple(self.perks))
        object.__setattr__(
            self,
            "randoms",
            MappingProxyType({k: tuple(v) for k, v in self.randoms.items()}),
        )


@dataclass(frozen=True)
class GeneratedWeapon:
    """치환까지 끝난 무기 1개. 렌더링 직전 상태."""

    weapon: BaseWeapon
    perks: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.weapon.name
