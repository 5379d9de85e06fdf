"""ForgeService 테스트"""

import pytest

from src.config import Settings
from src.core.weapon.models import Catalog
from src.core.weapon.registry import CatalogRegistry
from src.core.weapon.rng import SequenceRandomSource, StdRandomSource
from src.services.forge_service import ForgeService


class TestForgeService:
    def test_generate_count(self, stick_catalog: Catalog) -> None:
        service = ForgeService(stick_catalog, StdRandomSource(1))
        weapons = service.generate(3, 1)
        assert len(weapons) == 3
        assert all(len(w.perks) == 1 for w in weapons)

    def test_generate_zero(self, stick_catalog: Catalog) -> None:
        assert ForgeService(stick_catalog, StdRandomSource(1)).generate(0, 1) == []

    def test_run_renders_each_weapon(self, stick_catalog: Catalog) -> None:
        rng = SequenceRandomSource([0, 0, 1, 0, 1, 0])
        service = ForgeService(stick_catalog, rng)
        output = service.run("{REPLACE_NAME_STR}\n{REPLACE_PERK_STR}", 2, 2)
        assert output == "Stick\nSharp\nHeavy\nStick\nHeavy\nSharp\n"

    def test_unknown_strategy_fails_early(self, stick_catalog: Catalog) -> None:
        with pytest.raises(ValueError):
            ForgeService(stick_catalog, StdRandomSource(1), strategy="bogus")

    def test_catalog_property(self, stick_catalog: Catalog) -> None:
        assert ForgeService(stick_catalog, StdRandomSource(1)).catalog is stick_catalog


class TestFromSettings:
    def test_seeded_settings_reproducible(self, stick_catalog: Catalog) -> None:
        settings = Settings(RNG_SEED=99, _env_file=None)
        template = "{REPLACE_PERK_STR}"
        first = ForgeService.from_settings(stick_catalog, settings).run(template, 5, 1)
        second = ForgeService.from_settings(stick_catalog, settings).run(template, 5, 1)
        assert first == second

    def test_explicit_seed_overrides_settings(self, stick_catalog: Catalog) -> None:
        settings = Settings(RNG_SEED=1, _env_file=None)
        template = "{REPLACE_PERK_STR}"
        explicit = ForgeService.from_settings(stick_catalog, settings, seed=123).run(template, 8, 2)
        direct = ForgeService(stick_catalog, StdRandomSource(123)).run(template, 8, 2)
        assert explicit == direct

    def test_strategy_from_settings(self, stick_catalog: Catalog) -> None:
        settings = Settings(RNG_SEED=5, PERK_SAMPLING="shuffle", _env_file=None)
        service = ForgeService.from_settings(stick_catalog, settings)
        direct = ForgeService(stick_catalog, StdRandomSource(5), strategy="shuffle")
        assert service.generate(4, 2) == direct.generate(4, 2)

    def test_example_catalog_end_to_end(self, example_catalog_path, example_template_path) -> None:
        catalog = CatalogRegistry().load_from_json(example_catalog_path)
        template = example_template_path.read_text(encoding="utf-8")
        service = ForgeService.from_settings(catalog, Settings(RNG_SEED=2024, _env_file=None))
        output = service.run(template, 10, 3)
        assert "{" not in output
        assert output.count("===") == 20
        assert output.count("  - ") == 30
