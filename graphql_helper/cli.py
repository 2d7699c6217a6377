"""
graphql-helper command-line interface.

Commands import one or more Python modules that declare fragments and
operations, then inspect, export or run what those modules registered.
"""

import asyncio
import importlib
import json
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click

from . import default_engine
from .config import ConfigLoader, LoggingConfig, LogLevel
from .engine import GraphQLHelper
from .exceptions import GraphQLHelperError, GraphQLOperationError
from .logging import setup_logging


def load_engine(spec: Optional[str]) -> GraphQLHelper:
    """Resolve ``module:attribute`` to a GraphQLHelper; None means the default engine."""
    if not spec:
        return default_engine
    module_name, _, attribute = spec.partition(":")
    engine = getattr(importlib.import_module(module_name), attribute or "engine")
    if not isinstance(engine, GraphQLHelper):
        raise click.BadParameter(f"{spec} is not a GraphQLHelper", param_hint="--engine")
    return engine


def import_modules(modules: Tuple[str, ...]) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    for module in modules:
        try:
            importlib.import_module(module)
        except ImportError as e:
            raise click.ClickException(f"Cannot import {module}: {e}") from e
        except GraphQLHelperError as e:
            raise click.ClickException(f"{module}: {e}") from e


@click.group()
@click.version_option(package_name="graphql-helper")
@click.option("--engine", "engine_spec", help="Engine to use, as module:attribute")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, engine_spec: Optional[str], verbose: bool) -> None:
    """Build, export and run GraphQL documents declared in Python modules."""
    ctx.ensure_object(dict)
    ctx.obj["engine_spec"] = engine_spec
    if verbose:
        setup_logging(LoggingConfig(level=LogLevel.DEBUG))


@cli.command("list")
@click.argument("modules", nargs=-1, required=True)
@click.pass_context
def list_command(ctx: click.Context, modules: Tuple[str, ...]) -> None:
    """List registered operations and fragments."""
    import_modules(modules)
    registry = load_engine(ctx.obj["engine_spec"]).registry

    for name, operation in registry.operations.items():
        click.echo(f"{operation.operation_type.value} {name} ({len(operation.fragment_defs)} fragments)")
    for name, fragment in registry.fragments.items():
        click.echo(f"fragment {name} on {fragment.on_type}")


@cli.command()
@click.argument("modules", nargs=-1, required=True)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Write one <Name>.graphql file per operation instead of printing",
)
@click.pass_context
def dump(ctx: click.Context, modules: Tuple[str, ...], output_dir: Optional[Path]) -> None:
    """Print or write the document text of every registered operation."""
    import_modules(modules)
    operations = load_engine(ctx.obj["engine_spec"]).registry.operations

    if output_dir is None:
        click.echo("\n".join(str(operation) for operation in operations.values()))
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    for name, operation in operations.items():
        path = output_dir / f"{name}.graphql"
        path.write_text(operation.document_text, encoding="utf-8")
        click.echo(f"✓ {path}")


@cli.command()
@click.argument("module")
@click.argument("operation_name")
@click.option("--variables", default=None, help="Variables as a JSON object")
@click.option("--host", default=None, help="GraphQL endpoint URL")
@click.option("--config", "-c", "config_file", type=click.Path(exists=True), help="JSON configuration file")
@click.pass_context
def run(
    ctx: click.Context,
    module: str,
    operation_name: str,
    variables: Optional[str],
    host: Optional[str],
    config_file: Optional[str],
) -> None:
    """Run one registered operation and print its result as JSON."""
    import_modules((module,))
    engine = load_engine(ctx.obj["engine_spec"])

    operation = engine.registry.get_operation(operation_name)
    if operation is None:
        raise click.ClickException(f"No operation named {operation_name!r}")

    values: Any = None
    if variables:
        try:
            values = json.loads(variables)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--variables") from e

    if host or config_file or engine.config is None:
        try:
            engine.configure(config=ConfigLoader().load_config(config_file, host=host))
        except GraphQLHelperError as e:
            raise click.ClickException(str(e)) from e

    async def _run() -> Any:
        async with engine:
            return await operation(values)

    try:
        result = asyncio.run(_run())
    except GraphQLOperationError as e:
        click.echo(json.dumps(e.errors, indent=2), err=True)
        sys.exit(1)
    except GraphQLHelperError as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(result, indent=2))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
