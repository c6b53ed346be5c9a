"""Target kinds and the file-extension tables used to classify them."""

from __future__ import annotations

from enum import StrEnum


class TargetKind(StrEnum):
    """What a resolved import turned out to be."""

    STYLESHEET = "stylesheet"
    MANIFEST_DATA = "manifest_data"
    RAW_STATIC = "raw_static"


# Probe order is load-bearing: prefix-major, extension-minor.
PARTIAL_PREFIXES: tuple[str, ...] = ("", "_")
PROBE_EXTENSIONS: tuple[str, ...] = (".scss", ".css", "")
INDEX_STEMS: tuple[str, ...] = ("index",)

STYLESHEET_EXTENSIONS: frozenset[str] = frozenset({".scss", ".css"})

# ``.py`` is the executable manifest: the Python counterpart of a ``.js`` module.
MANIFEST_EXTENSIONS: frozenset[str] = frozenset({".json", ".yaml", ".yml", ".py"})

# Scripts: skipped as package entry candidates, deferred when resolved directly.
SCRIPT_EXTENSIONS: tuple[str, ...] = (".js", ".ts", ".es6")


def classify_extension(suffix: str) -> TargetKind:
    """Map a file suffix (with leading dot) to a :class:`TargetKind`."""
    if suffix in STYLESHEET_EXTENSIONS:
        return TargetKind.STYLESHEET
    if suffix in MANIFEST_EXTENSIONS:
        return TargetKind.MANIFEST_DATA
    return TargetKind.RAW_STATIC
