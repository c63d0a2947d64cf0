"""I/O utilities: resource manifest loading."""

from labelforge.io.manifests import (
    MANIFEST_KINDS,
    LoadedManifest,
    load_manifest,
    parse_manifest,
)

__all__ = [
    "MANIFEST_KINDS",
    "LoadedManifest",
    "load_manifest",
    "parse_manifest",
]
