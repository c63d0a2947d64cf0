"""
Resource records consumed by the label forging functions.

Only the fields the labels are derived from are modelled: object names,
namespaces and the references to parent resources.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenericRef(BaseModel):
    """Reference to another resource by name and optional namespace."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the referenced resource")
    namespace: str | None = Field(
        default=None, description="Namespace of the referenced resource"
    )


class Template(BaseModel):
    """
    A lab template.

    Templates belong to a workspace, and instances are created from them.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Template name")
    namespace: str | None = Field(default=None, description="Template namespace")
    workspace_ref: GenericRef = Field(description="Workspace owning the template")


class Instance(BaseModel):
    """
    A running instance of a template, owned by a tenant.

    The instance's own name plus its template and tenant references make up
    its identity.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Instance name")
    namespace: str | None = Field(default=None, description="Instance namespace")
    template_ref: GenericRef = Field(description="Template the instance runs")
    tenant_ref: GenericRef = Field(description="Tenant owning the instance")
