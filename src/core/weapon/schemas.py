"""Catalog file schemas (JSON → pydantic)."""

from pydantic import BaseModel, ConfigDict, Field


class WeaponEntry(BaseModel):
    """카탈로그 파일의 무기 항목"""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(..., description="무기 이름")
    hit: str = Field(..., description="명중 수치 텍스트")
    damage: str = Field(..., description="피해 텍스트 (예: 1d6)")
    range: str = Field(..., description="사거리 텍스트")
    description: str = Field(..., description="설명문")


class CatalogFile(BaseModel):
    """카탈로그 파일 최상위 객체"""

    model_config = ConfigDict(extra="ignore", strict=True)

    weapons: list[WeaponEntry]
    perks: list[str] = Field(default_factory=list)
    randoms: dict[str, list[str]] = Field(default_factory=dict)
