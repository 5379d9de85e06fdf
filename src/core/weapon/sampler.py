"""무기 샘플러 - 기본 무기 1개 + 중복 없는 perk 묶음을 뽑아 치환까지 수행"""

import logging

from .fragments import substitute
from .models import BaseWeapon, Catalog, GeneratedWeapon
from .rng import RandomSource, get_index_drawer

logger = logging.getLogger(__name__)


def clamp_perk_count(requested: int, available: int) -> int:
    """요청 perk 수를 [0, available]로 제한. 초과 시 경고 로그."""
    if requested < 0:
        return 0
    if requested > available:
        logger.warning(
            "%d perks requested, but only %d perks exist. Providing %d perks.",
            requested,
            available,
            available,
        )
        return available
    return requested


def _substitute_weapon(weapon: BaseWeapon, catalog: Catalog, rng: RandomSource) -> BaseWeapon:
    # 필드별로 독립 치환. 같은 키라도 필드마다 다른 값이 나올 수 있다.
    return BaseWeapon(
        name=substitute(weapon.name, catalog.randoms, rng),
        hit=substitute(weapon.hit, catalog.randoms, rng),
        damage=substitute(weapon.damage, catalog.randoms, rng),
        range=substitute(weapon.range, catalog.randoms, rng),
        description=substitute(weapon.description, catalog.randoms, rng),
    )


def sample(
    catalog: Catalog,
    perk_count: int,
    rng: RandomSource,
    strategy: str = "rejection",
) -> GeneratedWeapon:
    """무기 1개 생성.

    1. 기본 무기 균등 선택
    2. perk 수 클램프
    3. 서로 다른 perk 인덱스 추출 (추출 순서 유지)
    4. 모든 필드/perk에 프래그먼트 치환

    Raises:
        ValueError: 카탈로그에 무기가 없을 때
    """
    if not catalog.weapons:
        raise ValueError("Catalog contains no weapons")

    draw = get_index_drawer(strategy)
    base = catalog.weapons[rng.next_index(len(catalog.weapons))]

    count = clamp_perk_count(perk_count, len(catalog.perks))
    indices = draw(rng, len(catalog.perks), count)
    perks = [catalog.perks[i] for i in indices]

    weapon = _substitute_weapon(base, catalog, rng)
    return GeneratedWeapon(
        weapon=weapon,
        perks=tuple(substitute(perk, catalog.randoms, rng) for perk in perks),
    )


def sample_many(
    catalog: Catalog,
    perk_count: int,
    n: int,
    rng: RandomSource,
    strategy: str = "rejection",
) -> list[GeneratedWeapon]:
    """sample()을 n번 독립 호출. n == 0이면 빈 리스트."""
    if n < 0:
        raise ValueError(f"Number of weapons to generate must be >= 0, got {n}")
    weapons = [sample(catalog, perk_count, rng, strategy) for _ in range(n)]
    logger.info("Generated %d weapons (%d perks requested each)", len(weapons), perk_count)
    return weapons
