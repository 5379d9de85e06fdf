"""난수 소스 - 생성 파이프라인 전체가 공유하는 단일 RNG

샘플러와 치환기는 모듈 전역 random을 직접 쓰지 않고 RandomSource를 주입받는다.
호출 순서가 곧 재현 가능한 시퀀스다.
"""

import random
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from src.core.logging import get_logger

logger = get_logger(__name__)


class RandomSource(ABC):
    """Abstract source of uniform random indices."""

    @abstractmethod
    def next_index(self, n: int) -> int:
        """Return a uniformly random integer in [0, n).

        Raises:
            ValueError: if n <= 0 (nothing to choose from).
        """
        ...


class StdRandomSource(RandomSource):
    """random.Random 기반 구현. seed가 같으면 같은 시퀀스."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Cannot pick an index from an empty range (n={n})")
        return self._random.randrange(n)


class SequenceRandomSource(RandomSource):
    """미리 정한 값을 순서대로 돌려주는 RNG (테스트/재생용).

    각 값은 요청된 범위로 나눈 나머지로 반환된다.
    시퀀스가 소진되면 RuntimeError.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    def next_index(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Cannot pick an index from an empty range (n={n})")
        if self._pos >= len(self._values):
            raise RuntimeError("SequenceRandomSource exhausted")
        value = self._values[self._pos]
        self._pos += 1
        return value % n


# === 중복 없는 인덱스 추출 ===


def draw_unique_indices(rng: RandomSource, population: int, count: int) -> list[int]:
    """거부 샘플링으로 [0, population)에서 서로 다른 인덱스 count개 추출.

    충돌하면 다시 뽑는다. count가 population에 가까울수록 재시도가 늘어나지만
    perk 수가 카탈로그보다 충분히 작은 일반적인 경우에는 문제없다.
    반환 순서 = 추출 순서.
    """
    if count > population:
        raise ValueError(f"Cannot draw {count} unique indices from {population}")

    drawn: set[int] = set()
    order: list[int] = []
    rejected = 0
    while len(order) < count:
        index = rng.next_index(population)
        if index in drawn:
            rejected += 1
            continue
        drawn.add(index)
        order.append(index)

    if rejected:
        logger.debug("Rejection sampling: %d collisions for %d/%d", rejected, count, population)
    return order


def shuffle_unique_indices(rng: RandomSource, population: int, count: int) -> list[int]:
    """부분 Fisher-Yates 셔플. 분포는 거부 샘플링과 같고 호출 횟수는 정확히 count번."""
    if count > population:
        raise ValueError(f"Cannot draw {count} unique indices from {population}")

    pool = list(range(population))
    for i in range(count):
        j = i + rng.next_index(population - i)
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:count]


IndexDrawer = Callable[[RandomSource, int, int], list[int]]

SAMPLING_STRATEGIES: dict[str, IndexDrawer] = {
    "rejection": draw_unique_indices,
    "shuffle": shuffle_unique_indices,
}


def get_index_drawer(strategy: str) -> IndexDrawer:
    """전략 이름 → 추출 함수. 모르는 이름이면 ValueError."""
    try:
        return SAMPLING_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown perk sampling strategy: {strategy!r} "
            f"(expected one of {sorted(SAMPLING_STRATEGIES)})"
        ) from None
