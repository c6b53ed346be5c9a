"""ResolvedTarget — the outcome of one successful resolution.

A resolution either defers to the host compiler (represented as ``None``)
or produces a ResolvedTarget. Host-specific shapes (callback dicts,
libsass tuples) are derived from it at the boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from scssimporter.domain.types import TargetKind


class ResolvedTarget(BaseModel):
    """A resolved import.

    Attributes:
        file_path: Absolute, ``/``-separated path handed to the host. For
            manifest data this is the persisted declaration file.
        kind: How the host should treat the file.
        contents: Inline source for manifest data and raw static files;
            None for style sheets, which the host reads itself.
        source_path: The file the reference actually resolved to.
    """

    model_config = {"frozen": True}

    file_path: str
    kind: TargetKind
    contents: str | None = None
    source_path: str

    @property
    def is_inline(self) -> bool:
        return self.contents is not None

    def to_host_payload(self) -> dict[str, Any]:
        """Shape expected by ``done(...)`` style importer callbacks."""
        if self.contents is None:
            return {"file": self.file_path}
        return {"file": self.file_path, "contents": self.contents}

    def to_libsass(self) -> tuple[str] | tuple[str, str]:
        """Tuple shape expected by libsass-python custom importers."""
        if self.contents is None:
            return (self.file_path,)
        return (self.file_path, self.contents)
