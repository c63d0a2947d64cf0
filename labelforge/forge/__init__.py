"""Label forging: managed, identity and selector label sets."""

from labelforge.forge.labels import (
    apply_managed_labels,
    derive_identity_labels,
    merge_managed_labels,
    selector_labels,
)

__all__ = [
    "apply_managed_labels",
    "derive_identity_labels",
    "merge_managed_labels",
    "selector_labels",
]
