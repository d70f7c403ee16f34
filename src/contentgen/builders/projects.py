from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Sequence

from contentgen.assets import AssetResolver, image_candidates, public_path
from contentgen.builders.base import LoadedItem, compare_dates_desc, load_items
from contentgen.collation import polish_compare
from contentgen.domain.models import BuildReport, DirEntry, ProjectRecord
from contentgen.domain.schema import (
    DEFAULT_PUBLIC_PREFIX,
    DEFAULT_STATUS,
    GALLERY_DIR,
    META_DATE,
    META_DESCRIPTION,
    META_LINKS,
    META_STATUS,
    META_TAGS,
    META_TITLE,
    PROJECTS,
)
from contentgen.ports import ContentSource, WarningSink
from contentgen.utils.parsing import parse_tags

COVER_CANDIDATES = image_candidates("cover")


def compare_projects(a: ProjectRecord, b: ProjectRecord) -> int:
    """
    Dated projects first, newest first; undated ones by title in Polish collation.
    """
    if a.date and b.date:
        return compare_dates_desc(a.date, b.date)
    if a.date:
        return -1
    if b.date:
        return 1
    return polish_compare(a.title, b.title)


def sort_projects(records: Sequence[ProjectRecord]) -> list[ProjectRecord]:
    return sorted(records, key=cmp_to_key(compare_projects))


@dataclass(frozen=True, slots=True)
class ProjectsBuilder:
    prefix: str = DEFAULT_PUBLIC_PREFIX
    collection: str = PROJECTS

    def build(self, source: ContentSource, *, warnings: WarningSink) -> tuple[list[ProjectRecord], BuildReport]:
        items, report = load_items(source, self.collection, warnings=warnings)
        resolver = AssetResolver(source=source, prefix=self.prefix)
        records = [self._to_record(item, source, resolver, warnings) for item in items]
        return sort_projects(records), report

    def _gallery(self, slug: str, source: ContentSource, warnings: WarningSink) -> list[str]:
        gallery_dir = f"{self.collection}/{slug}/{GALLERY_DIR}"
        try:
            entries: list[DirEntry] = source.list_dir(gallery_dir)
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as e:
            warnings.warn(f"Cannot list {gallery_dir} ({e}), gallery left empty")
            return []
        return [
            public_path(self.prefix, self.collection, slug, GALLERY_DIR, e.name)
            for e in entries
            if e.is_file
        ]

    def _to_record(
        self,
        item: LoadedItem,
        source: ContentSource,
        resolver: AssetResolver,
        warnings: WarningSink,
    ) -> ProjectRecord:
        meta = item.meta
        return ProjectRecord(
            slug=item.slug,
            title=meta.get(META_TITLE, item.slug),
            date=meta.get(META_DATE),
            tags=tuple(parse_tags(meta.get(META_TAGS))),
            status=meta.get(META_STATUS, DEFAULT_STATUS),
            links=meta.get(META_LINKS),
            cover=resolver.resolve(self.collection, item.slug, COVER_CANDIDATES),
            gallery=tuple(self._gallery(item.slug, source, warnings)),
            description=meta.get(META_DESCRIPTION, ""),
            path=public_path(self.prefix, self.collection, item.slug) + "/",
        )
