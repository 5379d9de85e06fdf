"""무기 생성 Core - 순수 Python, I/O는 registry만 담당"""

from .models import BaseWeapon, Catalog, GeneratedWeapon
from .fragments import substitute
from .rng import RandomSource, SequenceRandomSource, StdRandomSource
from .sampler import sample, sample_many
from .template import render, render_many
from .registry import CatalogLoadError, CatalogRegistry, load_template

__all__ = [
    "BaseWeapon",
    "Catalog",
    "GeneratedWeapon",
    "substitute",
    "RandomSource",
    "SequenceRandomSource",
    "StdRandomSource",
    "sample",
    "sample_many",
    "render",
    "render_many",
    "CatalogLoadError",
    "CatalogRegistry",
    "load_template",
]
