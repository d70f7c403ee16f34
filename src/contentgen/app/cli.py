from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from contentgen.app.container import build_container
from contentgen.app.pipeline import aggregate, generate_content
from contentgen.domain.errors import ContentGenError
from contentgen.settings import load_settings, override_settings

logger = logging.getLogger("contentgen")


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate JSON data files from the content/ tree.")
    ap.add_argument("--settings", default=None, help="Path to settings.toml (default: ./settings.toml if present)")
    ap.add_argument("--content-dir", default=None, help="Content root with projects/, news/, team/, stats/")
    ap.add_argument("--output-dir", default=None, help="Where to write *.json (default: public/data)")
    ap.add_argument("--public-prefix", default=None, help="URL prefix for content assets (default: /content)")
    ap.add_argument("--organization", default=None, help="Default news author")
    ap.add_argument("--workers", type=int, default=None, help="Collections processed in parallel")
    ap.add_argument("--dry-run", action="store_true", help="Aggregate and report, but do not write files")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = override_settings(
            load_settings(args.settings),
            content_dir=args.content_dir,
            output_dir=args.output_dir,
            public_prefix=args.public_prefix,
            organization=args.organization,
            workers=args.workers,
        )
        c = build_container(settings)

        if args.dry_run:
            bundle = aggregate(c.source, warnings=c.warnings, builders=c.builders, workers=c.workers)
            logger.info(
                "Dry run: %d projects, %d news, %d team members, %d stats",
                len(bundle.projects),
                len(bundle.news),
                len(bundle.team),
                len(bundle.stats),
            )
            return 0

        generate_content(c.source, c.writer, warnings=c.warnings, builders=c.builders, workers=c.workers)
    except (ContentGenError, OSError) as e:
        logger.error("Content generation failed: %s", e)
        return 1

    logger.info("Generated %s/*.json", settings.paths.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
