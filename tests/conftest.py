"""Shared fixtures: resource manifests on disk."""

import pytest

TEMPLATE_MANIFEST = """\
apiVersion: crownlabs.polito.it/v1alpha2
kind: Template
metadata:
  name: kubernetes
  namespace: workspace-netgroup
spec:
  workspace.crownlabs.polito.it/WorkspaceRef:
    name: netgroup
"""

INSTANCE_MANIFEST = """\
apiVersion: crownlabs.polito.it/v1alpha2
kind: Instance
metadata:
  name: kubernetes-0000
  namespace: tenant-tester
  labels:
    crownlabs.polito.it/managed-by: instance
    user/key: user/value
spec:
  template.crownlabs.polito.it/TemplateRef:
    name: kubernetes
    namespace: workspace-netgroup
  tenant.crownlabs.polito.it/TenantRef:
    name: tester
"""


@pytest.fixture
def template_path(tmp_path):
    path = tmp_path / "template.yaml"
    path.write_text(TEMPLATE_MANIFEST)
    return path


@pytest.fixture
def instance_path(tmp_path):
    path = tmp_path / "instance.yaml"
    path.write_text(INSTANCE_MANIFEST)
    return path
