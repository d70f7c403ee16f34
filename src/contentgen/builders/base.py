from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from contentgen.domain.errors import ContentRootError
from contentgen.domain.models import BuildReport, DirEntry
from contentgen.domain.schema import META_FILE
from contentgen.ports import ContentSource, WarningSink
from contentgen.utils.parsing import parse_meta_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedItem:
    """
    An item directory whose meta.txt was read and parsed.
    """
    slug: str
    meta: Mapping[str, str]


def list_collection(source: ContentSource, collection: str) -> list[DirEntry]:
    """
    List a collection root. A missing root is an empty collection; any other
    failure (permissions, root is a file) aborts the run.
    """
    try:
        return source.list_dir(collection)
    except FileNotFoundError:
        logger.debug("Collection root %r not found, treating as empty", collection)
        return []
    except OSError as e:
        raise ContentRootError(f"Cannot list collection root {collection!r}: {e}") from e


def load_items(
    source: ContentSource,
    collection: str,
    *,
    warnings: WarningSink,
) -> tuple[list[LoadedItem], BuildReport]:
    """
    Read and parse meta.txt of every item directory under a collection root.

    Items without a readable meta.txt are reported to `warnings` and skipped;
    the remaining items are still processed.
    """
    scanned = loaded = 0
    skipped_missing_meta = skipped_unreadable = skipped_not_directory = 0
    items: list[LoadedItem] = []

    for entry in list_collection(source, collection):
        scanned += 1
        if not entry.is_dir:
            skipped_not_directory += 1
            continue

        slug = entry.name
        meta_path = f"{collection}/{slug}/{META_FILE}"
        try:
            text = source.read_text(meta_path)
        except FileNotFoundError:
            warnings.warn(f"There is no {META_FILE} in {slug}, skipping..")
            skipped_missing_meta += 1
            continue
        except OSError as e:
            warnings.warn(f"Cannot read {meta_path} ({e}), skipping..")
            skipped_unreadable += 1
            continue

        items.append(LoadedItem(slug=slug, meta=parse_meta_text(text)))
        loaded += 1

    report = BuildReport(
        collection=collection,
        scanned=scanned,
        loaded=loaded,
        skipped_missing_meta=skipped_missing_meta,
        skipped_unreadable=skipped_unreadable,
        skipped_not_directory=skipped_not_directory,
    )
    return items, report


def compare_dates_desc(a: str, b: str) -> int:
    # ISO dates sort lexicographically; newer first
    return (a < b) - (a > b)
