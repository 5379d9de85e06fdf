"""무기 생성 Service - Catalog + RNG + 템플릿을 묶어 한 번의 실행을 처리

Service → Core만 호출한다. 파일 읽기와 출력은 호출자(main) 담당.
"""

from typing import Optional

from src.config import Settings
from src.core.logging import get_logger
from src.core.weapon.models import Catalog, GeneratedWeapon
from src.core.weapon.rng import RandomSource, StdRandomSource, get_index_drawer
from src.core.weapon.sampler import sample_many
from src.core.weapon.template import render_many

logger = get_logger(__name__)


class ForgeService:
    """무기 생성 + 렌더링"""

    def __init__(
        self,
        catalog: Catalog,
        rng: RandomSource,
        strategy: str = "rejection",
    ):
        get_index_drawer(strategy)  # 잘못된 전략은 생성 전에 실패
        self._catalog = catalog
        self._rng = rng
        self._strategy = strategy

    @classmethod
    def from_settings(
        cls,
        catalog: Catalog,
        settings: Settings,
        seed: Optional[int] = None,
        strategy: Optional[str] = None,
    ) -> "ForgeService":
        """Settings 기반 생성. seed/strategy 인자가 있으면 설정값보다 우선."""
        seed = seed if seed is not None else settings.RNG_SEED
        strategy = strategy or settings.PERK_SAMPLING
        logger.debug("ForgeService: seed=%s, strategy=%s", seed, strategy)
        return cls(catalog, StdRandomSource(seed), strategy)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def generate(self, count: int, perk_count: int) -> list[GeneratedWeapon]:
        """무기 count개 생성."""
        return sample_many(self._catalog, perk_count, count, self._rng, self._strategy)

    def render(self, template: str, weapons: list[GeneratedWeapon]) -> str:
        """생성된 무기들을 템플릿으로 렌더링."""
        return render_many(template, weapons)

    def run(self, template: str, count: int, perk_count: int) -> str:
        """generate + render."""
        return self.render(template, self.generate(count, perk_count))
