"""
LabelForge: Deterministic label reconciliation for lab instances.

Computes the managed, identity and selector label sets of the resources owned
by an instance, with change detection to skip unnecessary writes.
"""

from labelforge.forge.labels import (
    derive_identity_labels,
    merge_managed_labels,
    selector_labels,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "derive_identity_labels",
    "merge_managed_labels",
    "selector_labels",
]
