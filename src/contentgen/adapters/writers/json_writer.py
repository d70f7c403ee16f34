from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from contentgen.domain.errors import ArtifactWriteError
from contentgen.utils.json_sanitize import json_sanitize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JsonArtifactWriter:
    """
    Writes each artifact to <output_dir>/<name>.json.

    - creates output_dir when missing
    - 2-space indent, non-ASCII kept as-is
    - write to a temp file first, then atomic replace
    """
    output_dir: Path
    indent: int = 2

    def path_for(self, name: str) -> Path:
        return self.output_dir / f"{name}.json"

    def write(self, artifacts: Mapping[str, Any]) -> list[str]:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactWriteError(f"Cannot create output directory {self.output_dir}: {e}") from e

        written: list[str] = []
        for name, payload in artifacts.items():
            target = self.path_for(name)
            tmp_file = target.with_suffix(".json.tmp")
            text = json.dumps(json_sanitize(payload), indent=self.indent, ensure_ascii=False)
            try:
                tmp_file.write_text(text, encoding="utf-8")
                tmp_file.replace(target)
            except OSError as e:
                raise ArtifactWriteError(f"Cannot write {target}: {e}") from e
            logger.debug("Wrote %s", target)
            written.append(str(target))
        return written
