"""Tests for resource records and manifest loading."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from labelforge.core.refs import GenericRef, Instance, Template
from labelforge.io.manifests import load_manifest, parse_manifest


class TestRecords:
    """Tests for resource record models."""

    def test_ref_namespace_optional(self):
        """References may omit the namespace."""
        ref = GenericRef(name="tester")
        assert ref.namespace is None

    def test_frozen(self):
        """Records should be immutable."""
        template = Template(name="kubernetes", workspace_ref=GenericRef(name="netgroup"))
        with pytest.raises(ValidationError):
            template.name = "different"

    def test_missing_ref(self):
        """Missing references should be rejected at construction."""
        with pytest.raises(ValidationError):
            Instance(name="kubernetes-0000", tenant_ref=GenericRef(name="tester"))


class TestParseManifest:
    """Tests for parsing manifest documents."""

    def test_not_a_mapping(self):
        """Non-mapping documents should be rejected."""
        with pytest.raises(ValueError):
            parse_manifest(["kind", "Template"])

    def test_unsupported_kind(self):
        """Unknown kinds should be rejected."""
        with pytest.raises(ValueError, match="Unsupported kind"):
            parse_manifest({"kind": "Tenant", "metadata": {"name": "tester"}})

    def test_missing_reference(self):
        """Missing spec references should be reported as ValueError."""
        with pytest.raises(ValueError, match="Invalid Instance manifest"):
            parse_manifest({"kind": "Instance", "metadata": {"name": "x"}, "spec": {}})

    def test_no_labels(self):
        """Manifests without labels should load with an empty label set."""
        loaded = parse_manifest(
            {
                "kind": "Template",
                "metadata": {"name": "kubernetes"},
                "spec": {"workspace.crownlabs.polito.it/WorkspaceRef": {"name": "netgroup"}},
            }
        )
        assert loaded.labels == {}
        assert loaded.resource.workspace_ref.name == "netgroup"

    @pytest.mark.parametrize(
        "document,section",
        [
            ({"kind": "Template", "metadata": ["a"]}, "metadata"),
            ({"kind": "Template", "metadata": {"name": "kubernetes"}, "spec": ["a"]}, "spec"),
            (
                {
                    "kind": "Instance",
                    "metadata": {"name": "kubernetes-0000", "labels": ["a"]},
                    "spec": {
                        "template.crownlabs.polito.it/TemplateRef": {"name": "kubernetes"},
                        "tenant.crownlabs.polito.it/TenantRef": {"name": "tester"},
                    },
                },
                "metadata.labels",
            ),
        ],
    )
    def test_section_not_a_mapping(self, document, section):
        """Non-mapping sections should be rejected as ValueError."""
        with pytest.raises(ValueError, match=f"{section} must be a mapping"):
            parse_manifest(document)

    @pytest.mark.parametrize("labels", [{"user/key": None}, {"flag": True}, {1: "one"}])
    def test_non_string_labels(self, labels):
        """Labels must be string pairs; nothing is coerced."""
        document = {
            "kind": "Template",
            "metadata": {"name": "kubernetes", "labels": labels},
            "spec": {"workspace.crownlabs.polito.it/WorkspaceRef": {"name": "netgroup"}},
        }
        with pytest.raises(ValueError, match="must map a string to a string"):
            parse_manifest(document)

    def test_loaded_manifest_frozen(self):
        """Loaded manifests should be immutable."""
        loaded = parse_manifest(
            {
                "kind": "Template",
                "metadata": {"name": "kubernetes"},
                "spec": {"workspace.crownlabs.polito.it/WorkspaceRef": {"name": "netgroup"}},
            }
        )
        with pytest.raises(FrozenInstanceError):
            loaded.kind = "Instance"


class TestLoadManifest:
    """Tests for loading manifests from disk."""

    def test_load_template(self, template_path):
        """Template manifests should load into Template records."""
        loaded = load_manifest(template_path)
        assert loaded.kind == "Template"
        assert loaded.resource == Template(
            name="kubernetes",
            namespace="workspace-netgroup",
            workspace_ref=GenericRef(name="netgroup"),
        )

    def test_load_instance(self, instance_path):
        """Instance manifests should carry their current labels."""
        loaded = load_manifest(instance_path)
        assert loaded.kind == "Instance"
        assert loaded.resource.template_ref.namespace == "workspace-netgroup"
        assert loaded.resource.tenant_ref.name == "tester"
        assert loaded.labels == {
            "crownlabs.polito.it/managed-by": "instance",
            "user/key": "user/value",
        }

    def test_missing_file(self, tmp_path):
        """Missing files should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_manifest(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Unparsable files should raise ValueError."""
        path = tmp_path / "broken.yaml"
        path.write_text("kind: [unclosed")
        with pytest.raises(ValueError, match="Error parsing manifest"):
            load_manifest(path)
