from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Sequence

from contentgen.builders.news import NewsBuilder
from contentgen.builders.projects import ProjectsBuilder
from contentgen.builders.stats import StatsBuilder
from contentgen.builders.team import TeamBuilder
from contentgen.domain.models import BuildReport, ContentBundle
from contentgen.domain.schema import DEFAULT_ORGANIZATION, DEFAULT_PUBLIC_PREFIX, NEWS, PROJECTS, STATS, TEAM
from contentgen.ports import ArtifactWriter, CollectionBuilder, ContentSource, WarningSink

logger = logging.getLogger(__name__)


def default_builders(
    *,
    prefix: str = DEFAULT_PUBLIC_PREFIX,
    organization: str = DEFAULT_ORGANIZATION,
) -> tuple[CollectionBuilder, ...]:
    return (
        ProjectsBuilder(prefix=prefix),
        NewsBuilder(prefix=prefix, organization=organization),
        TeamBuilder(prefix=prefix),
        StatsBuilder(),
    )


def aggregate(
    source: ContentSource,
    *,
    warnings: WarningSink,
    builders: Optional[Sequence[CollectionBuilder]] = None,
    workers: int = 4,
) -> ContentBundle:
    """
    Run every collection builder against the same source and bundle the results.

    Builders read disjoint subtrees and share no state, so they run concurrently.
    The first builder exception is re-raised after all of them finished.
    """
    builders = tuple(builders) if builders is not None else default_builders()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [(b.collection, pool.submit(b.build, source, warnings=warnings)) for b in builders]
        results: dict[str, Any] = {}
        reports: list[BuildReport] = []
        for collection, future in futures:
            values, report = future.result()
            results[collection] = values
            reports.append(report)

    for r in reports:
        logger.info(
            "%s: %d loaded, %d without meta, %d unreadable",
            r.collection,
            r.loaded,
            r.skipped_missing_meta,
            r.skipped_unreadable,
        )

    return ContentBundle(
        projects=tuple(results.get(PROJECTS, ())),
        news=tuple(results.get(NEWS, ())),
        team=tuple(results.get(TEAM, ())),
        stats=dict(results.get(STATS, {})),
        reports=tuple(reports),
    )


def generate_content(
    source: ContentSource,
    writer: ArtifactWriter,
    *,
    warnings: WarningSink,
    builders: Optional[Sequence[CollectionBuilder]] = None,
    workers: int = 4,
) -> tuple[ContentBundle, list[str]]:
    bundle = aggregate(source, warnings=warnings, builders=builders, workers=workers)
    written = writer.write(bundle.artifacts())
    return bundle, written
