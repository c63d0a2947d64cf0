"""
LabelForge CLI.

Command-line interface for computing the labels of resource manifests.
"""

import click
import orjson
import yaml

from labelforge import __version__
from labelforge.core.scheme import DEFAULT_LABEL_PREFIX

OUTPUT_FORMATS = ["table", "json", "yaml"]


def _load(manifest_path: str, expected_kind: str):
    """Load a manifest, exiting with an error when it is unusable."""
    from labelforge.io.manifests import load_manifest

    try:
        loaded = load_manifest(manifest_path)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Error loading manifest: {e}", err=True)
        raise SystemExit(1)

    if loaded.kind != expected_kind:
        click.echo(
            f"Error: Expected a {expected_kind} manifest, got {loaded.kind}", err=True
        )
        raise SystemExit(1)

    return loaded


def _scheme(prefix: str):
    from labelforge.core.scheme import LabelScheme

    return LabelScheme(prefix=prefix)


def _render(labels: dict[str, str], output_format: str, title: str, extra: dict | None = None) -> None:
    """Print a label set in the requested format."""
    if output_format == "json":
        data = {"labels": labels, **(extra or {})}
        click.echo(orjson.dumps(data, option=orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2).decode("utf-8"))
        return

    if output_format == "yaml":
        data = {"labels": labels, **(extra or {})}
        click.echo(yaml.safe_dump(data, default_flow_style=False), nl=False)
        return

    from rich.console import Console
    from rich.table import Table

    console = Console()
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value")

    for key in sorted(labels):
        table.add_row(key, labels[key])

    console.print(table)
    for name, value in (extra or {}).items():
        console.print(f"{name}: {value}")


prefix_option = click.option(
    "--prefix",
    default=DEFAULT_LABEL_PREFIX,
    envvar="LABELFORGE_PREFIX",
    show_default=True,
    help="Prefix of the reserved label keys",
)
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="table",
    help="Output format",
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """LabelForge: Deterministic label reconciliation for lab instances."""
    pass


@main.command()
@click.argument("manifest_path")
@prefix_option
@format_option
def managed(manifest_path: str, prefix: str, output_format: str) -> None:
    """Compute the labels of an instance from its Template manifest."""
    from labelforge.core.labelset import label_set_hash
    from labelforge.forge.labels import merge_managed_labels

    loaded = _load(manifest_path, "Template")
    labels, updated = merge_managed_labels(loaded.labels, loaded.resource, _scheme(prefix))

    extra = {"changed": updated}
    if output_format != "table":
        extra["fingerprint"] = label_set_hash(labels)

    _render(labels, output_format, f"Instance labels ({loaded.resource.name})", extra)


@main.command()
@click.argument("manifest_path")
@prefix_option
@format_option
def identity(manifest_path: str, prefix: str, output_format: str) -> None:
    """Compute the identity labels of the objects owned by an Instance."""
    from labelforge.core.labelset import diff_labels, label_set_hash
    from labelforge.forge.labels import derive_identity_labels

    loaded = _load(manifest_path, "Instance")
    labels = derive_identity_labels(loaded.labels, loaded.resource, _scheme(prefix))
    diff = diff_labels(loaded.labels, labels)

    extra = {"changed": diff.has_changes}
    if output_format != "table":
        extra["diff"] = diff.to_dict()
        extra["fingerprint"] = label_set_hash(labels)

    _render(labels, output_format, f"Identity labels ({loaded.resource.name})", extra)


@main.command()
@click.argument("manifest_path")
@prefix_option
@format_option
@click.option("--query", is_flag=True, help="Print the label selector query string")
def selector(manifest_path: str, prefix: str, output_format: str, query: bool) -> None:
    """Compute the selector labels of an Instance's objects."""
    from labelforge.core.labelset import format_selector
    from labelforge.forge.labels import selector_labels

    loaded = _load(manifest_path, "Instance")
    labels = selector_labels(loaded.resource, _scheme(prefix))

    if query:
        click.echo(format_selector(labels))
        return

    _render(labels, output_format, f"Selector labels ({loaded.resource.name})")


if __name__ == "__main__":
    main()
