"""
Label set utilities.

Label sets are plain ``dict[str, str]`` mappings. Equality is the equality of
their key/value pairs, so anything that serializes or hashes a label set must
be independent of insertion order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import orjson
import xxhash


def normalize_labels(labels: Mapping[str, str] | None) -> dict[str, str]:
    """
    Return a fresh copy of a label set.

    Args:
        labels: Label set, or None for an object without labels.

    Returns:
        New dict, empty when ``labels`` is None.
    """
    if not labels:
        return {}
    return dict(labels)


def is_subset(subset: Mapping[str, str], labels: Mapping[str, str] | None) -> bool:
    """
    Check that every pair of ``subset`` is present in ``labels``.

    This is how an equality-based label selector matches an object.

    Examples:
        >>> is_subset({"a": "1"}, {"a": "1", "b": "2"})
        True
        >>> is_subset({"a": "2"}, {"a": "1", "b": "2"})
        False
    """
    labels = labels or {}
    return all(key in labels and labels[key] == value for key, value in subset.items())


@dataclass(frozen=True)
class LabelDiff:
    """Differences between two label sets."""

    added: dict[str, str] = field(default_factory=dict)
    removed: dict[str, str] = field(default_factory=dict)
    changed: dict[str, tuple[str, str]] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        """Whether the two label sets differ at all."""
        return bool(self.added or self.removed or self.changed)

    def to_dict(self) -> dict[str, dict]:
        """Convert to dictionary."""
        return {
            "added": dict(self.added),
            "removed": dict(self.removed),
            "changed": {k: list(v) for k, v in self.changed.items()},
        }


def diff_labels(
    before: Mapping[str, str] | None,
    after: Mapping[str, str] | None,
) -> LabelDiff:
    """
    Compare two label sets.

    Args:
        before: Labels currently persisted.
        after: Labels that should be persisted.

    Returns:
        LabelDiff listing added, removed and changed keys.
    """
    before = before or {}
    after = after or {}

    added = {k: v for k, v in after.items() if k not in before}
    removed = {k: v for k, v in before.items() if k not in after}
    changed = {
        k: (before[k], v) for k, v in after.items() if k in before and before[k] != v
    }
    return LabelDiff(added=added, removed=removed, changed=changed)


def canonical_label_bytes(labels: Mapping[str, str] | None) -> bytes:
    """
    Serialize a label set to canonical JSON bytes.

    Keys are sorted, so equal label sets always produce identical bytes.

    Examples:
        >>> canonical_label_bytes({"b": "2", "a": "1"})
        b'{"a":"1","b":"2"}'
    """
    return orjson.dumps(normalize_labels(labels), option=orjson.OPT_SORT_KEYS)


def label_set_hash(labels: Mapping[str, str] | None) -> str:
    """
    Compute a stable fingerprint of a label set.

    Returns:
        Hex-encoded xxhash digest of the canonical JSON bytes.
    """
    return xxhash.xxh64(canonical_label_bytes(labels)).hexdigest()


def format_selector(labels: Mapping[str, str]) -> str:
    """
    Render a label set as an equality-based label selector query.

    Examples:
        >>> format_selector({"tenant": "tester", "instance": "kubernetes-0000"})
        'instance=kubernetes-0000,tenant=tester'
    """
    return ",".join(f"{key}={labels[key]}" for key in sorted(labels))
