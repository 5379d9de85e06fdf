"""Command-line entrypoint: read catalog + template, print generated weapons."""

import argparse
import sys
from typing import Optional, Sequence

from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.core.weapon.registry import CatalogLoadError, CatalogRegistry, load_template
from src.core.weapon.rng import SAMPLING_STRATEGIES
from src.services.forge_service import ForgeService

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weapon-forge",
        description="Generate random weapons from a JSON catalog and a text template.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-fin",
        dest="fin",
        required=True,
        metavar="PATH",
        help="Input file for generated stats, names, and perks.",
    )
    parser.add_argument(
        "-ffmt",
        dest="ffmt",
        required=True,
        metavar="PATH",
        help="Format file for generated weapons.",
    )
    parser.add_argument(
        "-ngen",
        dest="ngen",
        type=int,
        default=settings.DEFAULT_NGEN,
        help="Number of weapons to generate",
    )
    parser.add_argument(
        "-nperk",
        dest="nperk",
        type=int,
        default=settings.DEFAULT_NPERK,
        help="Number of perks to allocate to each weapon.",
    )
    parser.add_argument(
        "-seed",
        dest="seed",
        type=int,
        default=None,
        help="Seed for reproducible output (overrides FORGE_RNG_SEED).",
    )
    parser.add_argument(
        "-sampling",
        dest="sampling",
        choices=sorted(SAMPLING_STRATEGIES),
        default=None,
        help="Perk selection strategy (default: FORGE_PERK_SAMPLING).",
    )
    parser.add_argument(
        "-log-level",
        dest="log_level",
        default=None,
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI 실행. 반환값은 프로세스 종료 코드."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level or settings.LOG_LEVEL)
    except ValueError as e:
        parser.error(str(e))

    try:
        catalog = CatalogRegistry().load_from_json(args.fin)
        template = load_template(args.ffmt)
    except CatalogLoadError as e:
        logger.error("%s", e)
        return 1

    try:
        service = ForgeService.from_settings(
            catalog, settings, seed=args.seed, strategy=args.sampling
        )
        weapons = service.generate(args.ngen, args.nperk)
    except ValueError as e:
        logger.error("Generation failed: %s", e)
        return 1

    for weapon in weapons:
        print(service.render(template, [weapon]), end="")
    return 0


def main_entry() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
