"""Value trees to SCSS variable declarations.

A value manifest exports a mapping; each top-level entry becomes one
``$key: value;`` line. Lists render as SCSS list literals ``(a,b)`` and
nested mappings as SCSS map literals ``(k: v,k2: v2)``. Scalars are
emitted verbatim: the manifest is responsible for already-correct SCSS
literals (quoted strings stay quoted, colors and numbers stay bare).

Example::

    >>> to_declarations({"color": "#fff", "sizes": [1, 2, 3], "$skip": "x"})
    '$color: #fff;\\n$sizes: (1,2,3);'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# Keys starting with these collide with SCSS syntax and are never emitted.
_VALID_KEY = re.compile(r"^[^$@:]")

# A top-level value of exactly "#" marks a comment/placeholder entry.
PLACEHOLDER_VALUE = "#"


def is_valid_key(key: object) -> bool:
    """Return True when *key* may be emitted as a variable or map key."""
    return _VALID_KEY.match(str(key)) is not None


def to_declarations(tree: Mapping[str, Any]) -> str:
    """Render the top level of *tree* as newline-joined declarations."""
    if not isinstance(tree, Mapping):
        msg = f"Value manifest must export a mapping, got {type(tree).__name__}"
        raise TypeError(msg)
    return "\n".join(
        f"${key}: {format_value(value)};"
        for key, value in tree.items()
        if is_valid_key(key) and value != PLACEHOLDER_VALUE
    )


def format_value(value: Any) -> str:
    """Format one value as SCSS source, recursing into lists and mappings."""
    if isinstance(value, (list, tuple)):
        return format_list(value)
    if isinstance(value, Mapping):
        return format_map(value)
    if value == "":
        # An unquoted empty value is a Sass syntax error.
        return '""'
    return _format_scalar(value)


def format_list(values: list[Any] | tuple[Any, ...]) -> str:
    return "(" + ",".join(format_value(v) for v in values) + ")"


def format_map(mapping: Mapping[Any, Any]) -> str:
    entries = (
        f"{key}: {format_value(value)}" for key, value in mapping.items() if is_valid_key(key)
    )
    return "(" + ",".join(entries) + ")"


def _format_scalar(value: Any) -> str:
    # Spell scalars the way they were written in the manifest source.
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
