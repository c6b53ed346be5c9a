"""Import references — classic paths and ``~`` dependency references.

Pure parsing, no filesystem access. The resolver builds a
:class:`Reference` per import statement and, for dependency-style
references, asks :func:`parse_dependency_reference` which package and
sub-path the text names.
"""

from __future__ import annotations

from dataclasses import dataclass

ALIAS_MARKER = "~"
SCOPE_MARKER = "@"


@dataclass(frozen=True)
class Reference:
    """The raw text of an ``@import``/``@use`` target."""

    raw_text: str

    @property
    def is_dependency_style(self) -> bool:
        return self.raw_text.startswith(ALIAS_MARKER)

    @property
    def is_scoped(self) -> bool:
        # Only meaningful for dependency-style references.
        return self.raw_text[1:2] == SCOPE_MARKER


@dataclass(frozen=True)
class DependencyReference:
    """A ``~name[/sub/path]`` or ``~@scope/name[/sub/path]`` reference."""

    package_name: str  # install name, e.g. "bootstrap" or "@scope/pkg"
    subpath: str  # "" means "use the manifest defaults"
    scope: str | None = None


def parse_dependency_reference(reference: Reference) -> DependencyReference | None:
    """Split a dependency-style reference into package name and sub-path.

    The text after the leading ``~`` is split on ``/``. Scoped references
    (``~@scope/name``) take the first two segments as the package name,
    everything else takes the first. Whatever remains is the sub-path.

    Returns None for text that cannot name a package (not dependency-style,
    an empty name, or a bare ``~@scope``).
    """
    if not reference.is_dependency_style:
        return None

    segments = reference.raw_text[len(ALIAS_MARKER) :].split("/")
    if reference.is_scoped:
        if len(segments) < 2 or not segments[1]:
            return None
        scope = segments[0][len(SCOPE_MARKER) :]
        if not scope:
            return None
        return DependencyReference(
            package_name=f"{segments[0]}/{segments[1]}",
            subpath="/".join(segments[2:]),
            scope=scope,
        )

    if not segments[0]:
        return None
    return DependencyReference(package_name=segments[0], subpath="/".join(segments[1:]))
