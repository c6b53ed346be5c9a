"""PathProbe — find the first existing file among SCSS naming conventions.

Given ``name`` the probe tries, in order::

    name.scss  name.css  name  _name.scss  _name.css  _name

Prefix is the outer loop, extension the inner one. The order decides
which file wins when several exist, so it must not change.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from pathlib import Path

from scssimporter.domain.types import PARTIAL_PREFIXES, PROBE_EXTENSIONS

logger = logging.getLogger(__name__)


class PathProbe:
    """Filesystem probe for SCSS-style file names."""

    def __init__(
        self,
        prefixes: tuple[str, ...] = PARTIAL_PREFIXES,
        extensions: tuple[str, ...] = PROBE_EXTENSIONS,
    ) -> None:
        self.prefixes = prefixes
        self.extensions = extensions

    def candidates(self, directory: Path | str, name: str) -> Iterator[Path]:
        """Yield every candidate path for *name* under *directory*, in probe order."""
        base = Path(directory)
        stem = name
        if "/" in name:
            subdir, stem = name.rsplit("/", 1)
            base = base / subdir
        for prefix in self.prefixes:
            for ext in self.extensions:
                yield base / f"{prefix}{stem}{ext}"

    def find_existing(self, directory: Path | str, name: str) -> Path | None:
        """Return the first candidate that is a regular file, or None."""
        for candidate in self.candidates(directory, name):
            if self.is_file(candidate):
                return candidate
        return None

    @staticmethod
    def is_file(path: Path) -> bool:
        """True if *path* is a regular file (symlinks followed).

        Missing paths are a normal outcome. Other OS errors (permissions and
        the like) are logged and reported as "not a file" so a flaky
        filesystem never aborts a compilation.
        """
        try:
            return stat.S_ISREG(path.stat().st_mode)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            logger.warning("Could not stat %s: %s", path, exc)
            return False
