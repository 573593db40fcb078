"""JSON artifact persistence for completed searches."""

from __future__ import annotations

import json
import os
from pathlib import Path

from searchbot.agent.tools.websearch.errors import ArtifactWriteError
from searchbot.agent.tools.websearch.models import ProcessedResults


def artifact_filename(timestamp: str) -> str:
    """Filename for a search stamped at ``timestamp``; colons are replaced on Windows."""
    name = f"search-{timestamp}.json"
    if os.name == "nt":
        name = name.replace(":", "-")
    return name


class ArtifactWriter:
    """Store one JSON file per search under a results directory."""

    def __init__(self, directory: Path):
        self._dir = directory

    @property
    def directory(self) -> Path:
        return self._dir

    def path_for(self, timestamp: str) -> Path:
        return self._dir / artifact_filename(timestamp)

    def save(self, processed: ProcessedResults) -> Path:
        path = self.path_for(processed.timestamp)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(processed.to_dict(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise ArtifactWriteError(f"failed to write search artifact {path}: {e}") from e
        return path

    def load(self, path: Path) -> ProcessedResults:
        data = json.loads(path.read_text(encoding="utf-8"))
        return ProcessedResults.from_dict(data)
