"""TempArea — scratch directory for generated declaration files.

Declarations generated from value manifests are written here so that
source-map generation has a real file to point at. The directory is
cleared once by the process entry point (:meth:`TempArea.reset`) and only
appended to afterwards; the engine never reads these files back.
"""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TMP_DIR = Path("node_modules") / ".tmp" / "scss-importer"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def sanitize_filename(source_path: str) -> str:
    """Flatten *source_path* into a single safe ``.scss`` filename."""
    return _UNSAFE_CHARS.sub("_", source_path) + ".scss"


class TempArea:
    """A process-owned directory for persisted declaration text."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def reset(self) -> None:
        """Remove the directory with everything in it and create it empty."""
        if self.root.exists():
            shutil.rmtree(self.root)
        self.root.mkdir(parents=True, exist_ok=True)
        logger.debug("Reset temp area %s", self.root)

    def clear(self) -> bool:
        """Remove the directory. Returns False if it did not exist."""
        if not self.root.exists():
            return False
        shutil.rmtree(self.root)
        return True

    def path_for(self, source_path: str) -> Path:
        return self.root / sanitize_filename(source_path)

    def write(self, source_path: str, text: str) -> Path:
        """Persist *text* under the name derived from *source_path*."""
        target = self.path_for(source_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        return target
