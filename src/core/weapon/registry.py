"""카탈로그 저장소 - JSON 로드 + 검증"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .models import BaseWeapon, Catalog
from .schemas import CatalogFile

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Raised when a catalog or template file cannot be read or decoded."""


class CatalogRegistry:
    """
    카탈로그 로더.
    파일/문자열 → CatalogFile 검증 → 불변 Catalog.
    """

    def load_from_json(self, path: str | Path) -> Catalog:
        """카탈로그 파일 로드.

        파일 없음, 읽기 실패, JSON 오류, 스키마 불일치는 모두 CatalogLoadError.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Catalog file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Unable to read catalog file: {path} ({e})") from e

        catalog = self.load_from_text(text, source=str(path))
        logger.info(
            "Loaded catalog: %d weapons, %d perks, %d random keys from %s",
            len(catalog.weapons),
            len(catalog.perks),
            len(catalog.randoms),
            path,
        )
        return catalog

    def load_from_text(self, text: str, source: str = "<string>") -> Catalog:
        """JSON 문자열 → Catalog."""
        try:
            raw = CatalogFile.model_validate_json(text)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid catalog in {source}: {e}") from e
        return self._to_catalog(raw)

    @staticmethod
    def _to_catalog(raw: CatalogFile) -> Catalog:
        weapons = tuple(
            BaseWeapon(
                name=w.name,
                hit=w.hit,
                damage=w.damage,
                range=w.range,
                description=w.description,
            )
            for w in raw.weapons
        )
        if not weapons:
            logger.warning("Catalog has no weapons; generation will fail")
        empty_keys = [key for key, options in raw.randoms.items() if not options]
        for key in empty_keys:
            logger.warning("Random fragment %s has no options", key)
        return Catalog(weapons=weapons, perks=tuple(raw.perks), randoms=raw.randoms)


def load_template(path: str | Path) -> str:
    """템플릿 파일을 UTF-8 텍스트로 읽는다."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Template file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Unable to read template file: {path} ({e})") from e
