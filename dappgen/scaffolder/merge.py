"""Non-destructive JSON configuration merging.

Generated settings are injected into files such as ``package.json`` or
``app.json`` that already hold content written by the user or by another
tool.  Settings are expressed as a *dotted-path map*::

    {"expo.ios.bundleIdentifier": "com.demo", "scripts.test": "jest"}

Each key is split into path segments and merged into the existing tree with an
explicit recursive merge, so unrelated keys at every level survive and leaf
values keep their JSON types.  Keys that contain a literal dot can be given as
a tuple of segments instead, e.g. ``("lint-staged", "*.{ts,tsx}")``.

An optional *overlay* is applied afterwards: each of its top-level keys
replaces the merged value wholesale.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from dappgen.fs import FileSystem, FileSystemError
from dappgen.utils import pretty_json

OptionKey = Union[str, tuple[str, ...]]


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def split_path(key: OptionKey) -> tuple[str, ...]:
    """Split a dotted key (or pass through a tuple key) into path segments.

    Raises:
        ValueError: If the key is empty or contains an empty segment.
    """
    segments = tuple(key) if isinstance(key, tuple) else tuple(key.split("."))
    if not segments or any(not segment for segment in segments):
        raise ValueError(f"Invalid option path: {key!r}")
    return segments


def set_path(tree: dict[str, Any], segments: tuple[str, ...], value: Any) -> None:
    """Assign *value* at *segments* inside *tree*, creating objects on the way.

    A non-object value found along the path is replaced by an object.
    """
    node = tree
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = copy.deepcopy(value)


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge *patch* into a copy of *base*.

    Objects present on both sides are merged key by key; any other value from
    *patch* replaces the value in *base*.  Existing keys keep their position and
    new keys are appended in *patch* order.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


# ---------------------------------------------------------------------------
# Fragment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConfigFragment:
    """A deep-merge instruction: dotted-path options plus an optional overlay."""

    options: Mapping[OptionKey, Any] = field(default_factory=dict)
    overlay: Mapping[str, Any] | None = None

    def as_tree(self) -> dict[str, Any]:
        """Expand the dotted-path options into a nested tree."""
        tree: dict[str, Any] = {}
        for key, value in self.options.items():
            set_path(tree, split_path(key), value)
        return tree

    def apply(self, existing: Mapping[str, Any]) -> dict[str, Any]:
        """Return *existing* with the options merged in and the overlay applied."""
        merged = deep_merge(existing, self.as_tree())
        if self.overlay is not None:
            for key, value in self.overlay.items():
                merged[key] = copy.deepcopy(value)
        return merged


# ---------------------------------------------------------------------------
# File-level merge
# ---------------------------------------------------------------------------


def load_json_object(fs: FileSystem, path: Path) -> dict[str, Any]:
    """Read a JSON object from *path*; an absent or blank file yields ``{}``.

    Raises:
        FileSystemError: If the file holds invalid JSON or a non-object root.
    """
    if not fs.exists(path):
        return {}
    raw = fs.read_text(path)
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FileSystemError(f"Cannot merge into {path}: invalid JSON ({exc})", path) from exc
    if not isinstance(data, dict):
        raise FileSystemError(
            f"Cannot merge into {path}: top-level value is {type(data).__name__}, not an object",
            path,
        )
    return data


def merge_into(
    fs: FileSystem,
    path: Path,
    options: Mapping[OptionKey, Any],
    overlay: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge *options* (and *overlay*) into the JSON file at *path*.

    The file is rewritten in full as pretty-printed JSON.  Applying the same
    options twice leaves the file byte-for-byte unchanged after the first run.

    Returns:
        The merged tree that was written.
    """
    fragment = ConfigFragment(options=options, overlay=overlay)
    merged = fragment.apply(load_json_object(fs, path))
    fs.write_text(path, pretty_json(merged))
    return merged
