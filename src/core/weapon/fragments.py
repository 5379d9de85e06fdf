"""프래그먼트 치환 - 텍스트 안의 키를 무작위 선택지로 바꾼다"""

from typing import Mapping, Sequence

from .rng import RandomSource


def substitute(
    text: str,
    randoms: Mapping[str, Sequence[str]],
    rng: RandomSource,
) -> str:
    """text 안의 모든 키를 선택지 중 하나로 치환.

    한 번에 한 곳만 바꾸므로 같은 키가 여러 번 나와도 각각 독립적으로 뽑힌다.
    선택지가 다시 키(같은 키든 다른 키든)를 포함하면 그것까지 계속 치환한다 (중첩 랜덤).
    키 순서와 무관하게 결과에는 randoms의 키가 남지 않는다.

    Args:
        text: 원본 문자열
        randoms: 키 → 선택지 목록
        rng: 공유 난수 소스

    Raises:
        ValueError: text에 나타난 키의 선택지 목록이 비어 있을 때
    """
    # 어떤 키도 남지 않을 때까지 전체 패스 반복
    while any(key in text for key in randoms):
        for key, options in randoms.items():
            while key in text:
                if not options:
                    raise ValueError(f"Random fragment {key!r} has no replacement options")
                choice = options[rng.next_index(len(options))]
                text = text.replace(key, choice, 1)
    return text
