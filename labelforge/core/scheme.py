"""
Reserved label namespace.

Every label the controller owns lives under a single prefix so that it never
collides with labels set by users. The prefix and the ``managed-by`` value are
bundled in a ``LabelScheme``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LABEL_PREFIX = "crownlabs.polito.it/"
DEFAULT_MANAGED_BY = "instance"

# Key names, relative to the scheme prefix
MANAGED_BY = "managed-by"
WORKSPACE = "workspace"
TEMPLATE = "template"
INSTANCE = "instance"
TENANT = "tenant"


class LabelScheme(BaseModel):
    """
    Naming scheme for the labels owned by the controller.

    Examples:
        >>> LabelScheme().key("tenant")
        'crownlabs.polito.it/tenant'
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        default=DEFAULT_LABEL_PREFIX,
        description="Prefix shared by every reserved label key",
    )
    managed_by: str = Field(
        default=DEFAULT_MANAGED_BY,
        description="Value of the managed-by label",
    )

    def key(self, name: str) -> str:
        """Build the full reserved key for a key name."""
        return f"{self.prefix}{name}"


DEFAULT_SCHEME = LabelScheme()
