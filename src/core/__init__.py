"""Weapon Forge Core"""
__version__ = "0.1.0"

from src.core.weapon import (
    BaseWeapon,
    Catalog,
    CatalogRegistry,
    GeneratedWeapon,
    render,
    sample,
    sample_many,
    substitute,
)

__all__ = [
    "BaseWeapon",
    "Catalog",
    "CatalogRegistry",
    "GeneratedWeapon",
    "render",
    "sample",
    "sample_many",
    "substitute",
]
