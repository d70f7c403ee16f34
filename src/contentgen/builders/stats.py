from __future__ import annotations

import logging
from dataclasses import dataclass

from contentgen.domain.errors import ContentRootError
from contentgen.domain.models import BuildReport, StatsMap
from contentgen.domain.schema import STATS, STATS_FILE
from contentgen.ports import ContentSource, WarningSink
from contentgen.utils.parsing import parse_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StatsBuilder:
    """
    Reads the flat stats document; a missing file yields an empty mapping.
    """
    path: str = STATS_FILE
    collection: str = STATS

    def build(self, source: ContentSource, *, warnings: WarningSink) -> tuple[StatsMap, BuildReport]:
        try:
            text = source.read_text(self.path)
        except FileNotFoundError:
            logger.debug("No stats file at %r, writing empty stats", self.path)
            return {}, BuildReport(collection=self.collection)
        except OSError as e:
            raise ContentRootError(f"Cannot read stats file {self.path!r}: {e}") from e

        stats = parse_stats(text)
        return stats, BuildReport(collection=self.collection, scanned=1, loaded=len(stats))
