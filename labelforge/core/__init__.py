"""Core utilities: label scheme, resource records, label sets."""

from labelforge.core.labelset import (
    LabelDiff,
    diff_labels,
    format_selector,
    is_subset,
    label_set_hash,
    normalize_labels,
)
from labelforge.core.refs import GenericRef, Instance, Template
from labelforge.core.scheme import DEFAULT_SCHEME, LabelScheme

__all__ = [
    "LabelDiff",
    "diff_labels",
    "format_selector",
    "is_subset",
    "label_set_hash",
    "normalize_labels",
    "GenericRef",
    "Instance",
    "Template",
    "DEFAULT_SCHEME",
    "LabelScheme",
]
