"""
Label forging for instances and the objects they own.

Three label sets are derived from the parent resources:

- managed labels of an instance, from its template and workspace
- identity labels of the objects owned by an instance
- selector labels, the subset of the identity labels used to select them

Every function is pure: it reads its arguments and returns a new dict.
Labels outside the set an operation manages are kept as they are.
"""

from __future__ import annotations

from collections.abc import Mapping

from labelforge.core.labelset import normalize_labels
from labelforge.core.refs import Instance, Template
from labelforge.core.scheme import (
    DEFAULT_SCHEME,
    INSTANCE,
    MANAGED_BY,
    TEMPLATE,
    TENANT,
    WORKSPACE,
    LabelScheme,
)


def apply_managed_labels(
    existing: Mapping[str, str] | None,
    managed: Mapping[str, str],
) -> tuple[dict[str, str], bool]:
    """
    Enforce a set of managed labels over existing ones.

    Args:
        existing: Labels currently on the object (None if it has none).
        managed: Managed key/value pairs to enforce.

    Returns:
        Tuple of (merged labels, whether any managed label was missing or stale).
    """
    labels = normalize_labels(existing)
    updated = False

    for key, value in managed.items():
        if labels.get(key) != value:
            labels[key] = value
            updated = True

    return labels, updated


def merge_managed_labels(
    existing: Mapping[str, str] | None,
    template: Template,
    scheme: LabelScheme | None = None,
) -> tuple[dict[str, str], bool]:
    """
    Compute the labels of an instance created from a template.

    Args:
        existing: Labels currently on the instance.
        template: Template the instance refers to.
        scheme: Label scheme (defaults to the standard prefix).

    Returns:
        Tuple of (labels to persist, whether they differ from ``existing``).

    Examples:
        >>> from labelforge.core.refs import GenericRef
        >>> template = Template(name="kubernetes", workspace_ref=GenericRef(name="netgroup"))
        >>> labels, updated = merge_managed_labels(None, template)
        >>> labels["crownlabs.polito.it/workspace"], updated
        ('netgroup', True)
    """
    scheme = scheme or DEFAULT_SCHEME
    managed = {
        scheme.key(MANAGED_BY): scheme.managed_by,
        scheme.key(WORKSPACE): template.workspace_ref.name,
        scheme.key(TEMPLATE): template.name,
    }
    return apply_managed_labels(existing, managed)


def _identity_values(instance: Instance, scheme: LabelScheme) -> dict[str, str]:
    return {
        scheme.key(INSTANCE): instance.name,
        scheme.key(TEMPLATE): instance.template_ref.name,
        scheme.key(TENANT): instance.tenant_ref.name,
    }


def derive_identity_labels(
    existing: Mapping[str, str] | None,
    instance: Instance,
    scheme: LabelScheme | None = None,
) -> dict[str, str]:
    """
    Compute the identity labels of an object owned by an instance.

    The identity labels are always forced to their current values, whatever
    the object carried before. No change flag is returned: diff the input and
    output with ``labelforge.core.labelset.diff_labels`` when one is needed.

    Args:
        existing: Labels currently on the object.
        instance: Instance owning the object.
        scheme: Label scheme (defaults to the standard prefix).

    Returns:
        Labels to persist on the object.
    """
    scheme = scheme or DEFAULT_SCHEME
    managed = {scheme.key(MANAGED_BY): scheme.managed_by}
    managed.update(_identity_values(instance, scheme))

    labels, _ = apply_managed_labels(existing, managed)
    return labels


def selector_labels(
    instance: Instance,
    scheme: LabelScheme | None = None,
) -> dict[str, str]:
    """
    Compute the labels selecting the objects owned by an instance.

    The result is a subset of ``derive_identity_labels(None, instance)``, so
    it matches every object labelled through that function.

    Args:
        instance: Instance owning the objects.
        scheme: Label scheme (defaults to the standard prefix).

    Returns:
        The instance, template and tenant labels.
    """
    return _identity_values(instance, scheme or DEFAULT_SCHEME)
