from __future__ import annotations

from dataclasses import dataclass

from contentgen.adapters.sources.filesystem import FilesystemSource
from contentgen.adapters.warnings.sinks import LoggingWarningSink
from contentgen.adapters.writers.json_writer import JsonArtifactWriter
from contentgen.app.pipeline import default_builders
from contentgen.ports import ArtifactWriter, CollectionBuilder, ContentSource, WarningSink
from contentgen.settings import Settings


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the adapters a run is wired with.
    """
    source: ContentSource
    writer: ArtifactWriter
    warnings: WarningSink
    builders: tuple[CollectionBuilder, ...]
    workers: int


def build_container(settings: Settings) -> Container:
    return Container(
        source=FilesystemSource(root=settings.paths.content_dir),
        writer=JsonArtifactWriter(output_dir=settings.paths.output_dir),
        warnings=LoggingWarningSink(),
        builders=default_builders(
            prefix=settings.site.public_prefix,
            organization=settings.site.organization,
        ),
        workers=settings.build.workers,
    )
