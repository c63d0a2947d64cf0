"""
Manifest loading.

Reads Template and Instance manifests (YAML, or JSON as a YAML subset) into
resource records, together with the labels they currently carry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from labelforge.core.refs import GenericRef, Instance, Template

KIND_TEMPLATE = "Template"
KIND_INSTANCE = "Instance"
MANIFEST_KINDS = [KIND_TEMPLATE, KIND_INSTANCE]

# Reference fields as named in the custom resource specs
WORKSPACE_REF_FIELD = "workspace.crownlabs.polito.it/WorkspaceRef"
TEMPLATE_REF_FIELD = "template.crownlabs.polito.it/TemplateRef"
TENANT_REF_FIELD = "tenant.crownlabs.polito.it/TenantRef"


@dataclass(frozen=True)
class LoadedManifest:
    """A resource record and the labels found in its manifest."""

    kind: str
    resource: Template | Instance
    labels: dict[str, str] = field(default_factory=dict)


def _mapping(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping")
    return value


def _labels(raw: dict) -> dict[str, str]:
    """Check that labels are string pairs, keeping them as they are."""
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Label {key!r} must map a string to a string, got {value!r}")
    return dict(raw)


def parse_manifest(data: Any) -> LoadedManifest:
    """
    Build a resource record from a parsed manifest.

    Args:
        data: Parsed manifest document.

    Returns:
        LoadedManifest for the document.

    Raises:
        ValueError: If the document or one of its sections is not a mapping,
            has an unsupported kind, misses required fields, or carries
            non-string labels.
    """
    if not isinstance(data, dict):
        raise ValueError("Manifest must be a mapping")

    kind = data.get("kind")
    if kind not in MANIFEST_KINDS:
        raise ValueError(f"Unsupported kind: {kind}. Supported: {MANIFEST_KINDS}")

    metadata = _mapping(data.get("metadata"), "metadata")
    spec = _mapping(data.get("spec"), "spec")

    try:
        if kind == KIND_TEMPLATE:
            resource: Template | Instance = Template(
                name=metadata.get("name"),
                namespace=metadata.get("namespace"),
                workspace_ref=GenericRef.model_validate(spec.get(WORKSPACE_REF_FIELD)),
            )
        else:
            resource = Instance(
                name=metadata.get("name"),
                namespace=metadata.get("namespace"),
                template_ref=GenericRef.model_validate(spec.get(TEMPLATE_REF_FIELD)),
                tenant_ref=GenericRef.model_validate(spec.get(TENANT_REF_FIELD)),
            )
    except ValidationError as e:
        raise ValueError(f"Invalid {kind} manifest: {e}") from e

    labels = _labels(_mapping(metadata.get("labels"), "metadata.labels"))
    return LoadedManifest(kind=kind, resource=resource, labels=labels)


def load_manifest(path: str | Path) -> LoadedManifest:
    """
    Load a resource manifest from disk.

    Args:
        path: Path to a YAML or JSON manifest.

    Returns:
        LoadedManifest for the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or is not a valid manifest.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing manifest: {e}") from e

    return parse_manifest(data)
