"""CLI: Typer app that loads a schema from user code and renders it."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape

from config_guard.application import resolve_schema
from config_guard.config import load_settings
from config_guard.domain import (
    ArrayNode,
    ConfigGuardError,
    NumberNode,
    SchemaDefinition,
    StringNode,
    is_definition,
)
from config_guard.schema import dump_json, iter_fields, to_json_schema
from config_guard.schema.serialize import REDACTED

app = typer.Typer(help="config-guard: inspect configuration schemas built with the fluent builder.")

_TARGET_HELP = "Schema target 'module.path:attribute' (default: CONFIG_GUARD_SCHEMA_TARGET)."


def _setup_logging(verbose: bool) -> None:
    try:
        settings = load_settings()
    except ValidationError as e:
        rprint(f"[red]Invalid CONFIG_GUARD_* settings: {escape(str(e))}[/red]")
        sys.exit(1)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(target: Optional[str]) -> SchemaDefinition:
    target = target or load_settings().schema_target
    if not target:
        rprint("[red]No schema target given and CONFIG_GUARD_SCHEMA_TARGET is not set.[/red]")
        sys.exit(1)
    try:
        return resolve_schema(target)
    except ConfigGuardError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _describe(node) -> str:
    """One-line summary of a node's constraints for tree output."""
    parts = [f"[cyan]{node.kind}[/cyan]"]
    if node.required:
        parts.append("[bold]required[/bold]")
    if node.env_binding:
        parts.append(f"env={escape(node.env_binding)}")
    if node.default is not None:
        shown = REDACTED if isinstance(node, StringNode) and node.secret else repr(node.default)
        parts.append(f"default={escape(shown)}")
    if isinstance(node, StringNode) and node.secret:
        parts.append("[magenta]secret[/magenta]")
    if isinstance(node, NumberNode):
        if node.min is not None:
            parts.append(f"min={node.min}")
        if node.max is not None:
            parts.append(f"max={node.max}")
        parts.extend(c.value for c in node.checks)
    if node.description:
        parts.append(f"[dim]{escape(node.description)}[/dim]")
    return " ".join(parts)


def _add_branch(tree, definition: SchemaDefinition) -> None:
    for key, value in definition.items():
        if is_definition(value):
            _add_branch(tree.add(f"[bold]{escape(key)}[/bold]"), value)
            continue
        branch = tree.add(f"[bold]{escape(key)}[/bold] {_describe(value)}")
        if isinstance(value, ArrayNode) and is_definition(value.items):
            _add_branch(branch.add("[dim]items[/dim]"), value.items)


@app.command()
def show(
    target: Optional[str] = typer.Argument(None, help=_TARGET_HELP),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format (json|tree)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging to stderr."),
) -> None:
    """Print the built schema as JSON or as a tree."""
    _setup_logging(verbose)
    schema = _load(target)
    if fmt == "json":
        typer.echo(dump_json(schema, indent=load_settings().json_indent, redact_secrets=True))
    elif fmt == "tree":
        from rich.console import Console
        from rich.tree import Tree

        tree = Tree(f"[bold]{escape(target or load_settings().schema_target or 'schema')}[/bold]")
        _add_branch(tree, schema)
        Console().print(tree)
    else:
        rprint(f"[red]Unknown format {escape(fmt)!r}; expected json or tree.[/red]")
        sys.exit(1)


@app.command()
def env(
    target: Optional[str] = typer.Argument(None, help=_TARGET_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging to stderr."),
) -> None:
    """List fields bound to environment variables."""
    _setup_logging(verbose)
    schema = _load(target)
    rows = [(path, node) for path, node in iter_fields(schema) if node.env_binding]
    if not rows:
        rprint("[dim]No fields are bound to environment variables.[/dim]")
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title="Environment bindings", show_header=True, header_style="bold")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Path", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Required")
    table.add_column("Default", overflow="fold")
    for path, node in rows:
        if node.default is None:
            default = "—"
        elif isinstance(node, StringNode) and node.secret:
            default = REDACTED
        else:
            default = repr(node.default)
        table.add_row(
            escape(node.env_binding),
            escape(".".join(path)),
            node.kind,
            "yes" if node.required else "no",
            escape(default),
        )
    Console().print(table)


@app.command("json-schema")
def json_schema_cmd(
    target: Optional[str] = typer.Argument(None, help=_TARGET_HELP),
    title: Optional[str] = typer.Option(None, "--title", help="Document title."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging to stderr."),
) -> None:
    """Print the schema as a JSON Schema (draft 2020-12) document."""
    _setup_logging(verbose)
    schema = _load(target)
    doc = to_json_schema(schema, title=title)
    typer.echo(json.dumps(doc, indent=load_settings().json_indent, ensure_ascii=False))
