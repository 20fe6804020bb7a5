"""CLI interface for gqldoc."""

import click
from pathlib import Path
from typing import Optional, Tuple

from .core import GQLDoc
from .exceptions import GQLDocError


def _report_error(e: GQLDocError, verbose: bool) -> None:
    click.echo(f"\n❌ {e.error_code}: {e.message}", err=True)
    if e.context:
        click.echo(f"📍 Context: {e.context}", err=True)
    if e.suggestions:
        click.echo("\n💡 Suggestions:", err=True)
        for suggestion in e.suggestions:
            click.echo(f"   • {suggestion}", err=True)
    if verbose:
        click.echo(f"\n🔍 Correlation ID: {e.correlation_id}", err=True)


def _configure_logging(verbose: bool) -> None:
    import logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group()
def cli():
    """gqldoc - Reference documentation generator for GraphQL schemas."""
    pass


@cli.command()
@click.argument('schema', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None, help='Write to file instead of stdout')
@click.option('--endpoint', default='http://host:port/graphql', help='Endpoint URL shown in the document')
@click.option('--method', default='POST', help='HTTP method shown in the document')
@click.option('--title', default='API Reference', help='Document title')
@click.option('--introduction', default=None, help='Paragraph shown below the title')
@click.option('--mutations/--no-mutations', default=False, help='Document mutations as well as queries')
@click.option('--strict/--no-strict', default=False, help='Fail on types missing from the schema')
@click.option('--validate/--no-validate', default=True, help='Validate example queries against the schema')
@click.option('--operation', 'operations', multiple=True, help='Only document this operation (repeatable)')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging and error output')
def generate(schema: str, output: Optional[str], endpoint: str, method: str, title: str,
             introduction: Optional[str], mutations: bool, strict: bool, validate: bool,
             operations: Tuple[str, ...], verbose: bool):
    """Generate markdown documentation for a schema file (SDL or introspection JSON)."""
    _configure_logging(verbose)

    try:
        docs = GQLDoc(
            Path(schema),
            endpoint=endpoint,
            method=method,
            title=title,
            introduction=introduction,
            include_mutations=mutations,
            strict=strict,
            validate_examples=validate
        )

        if output:
            path = docs.write(output, list(operations) or None)
            click.echo(f"📝 Documentation written to {path}", err=True)
        else:
            click.echo(docs.generate(list(operations) or None))

    except GQLDocError as e:
        _report_error(e, verbose)
        raise click.Abort()


@cli.command()
@click.argument('schema', type=click.Path(exists=True, dir_okay=False))
@click.option('--mutations/--no-mutations', default=False, help='Include mutations')
def operations(schema: str, mutations: bool):
    """List the operations that would be documented."""
    try:
        docs = GQLDoc(Path(schema), include_mutations=mutations, validate_examples=False)

        for name, (kind, operation) in docs.builder.operations().items():
            description = f" - {operation.description}" if operation.description else ""
            click.echo(f"  {kind} {name}: {operation.type}{description}")

    except GQLDocError as e:
        _report_error(e, verbose=False)
        raise click.Abort()


@cli.command()
@click.argument('schema', type=click.Path(exists=True, dir_okay=False))
@click.option('--host', default='0.0.0.0', help='Host to bind to')
@click.option('--port', default=8000, type=int, help='Port to bind to')
@click.option('--path', default='/docs', help='Documentation endpoint path')
@click.option('--endpoint', default='http://host:port/graphql', help='Endpoint URL shown in the document')
@click.option('--title', default='API Reference', help='Document title')
@click.option('--mutations/--no-mutations', default=False, help='Document mutations as well as queries')
@click.option('--debug/--no-debug', default=True, help='Enable debug mode')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging and error output')
def serve(schema: str, host: str, port: int, path: str, endpoint: str, title: str,
          mutations: bool, debug: bool, verbose: bool):
    """Serve generated documentation over HTTP."""
    _configure_logging(verbose)

    try:
        docs = GQLDoc(Path(schema), endpoint=endpoint, title=title, include_mutations=mutations)

        click.echo(f"📚 Documenting {len(docs.operation_names())} operations")
        click.echo(f"🚀 Serving documentation at http://{host}:{port}{path}")

        docs.serve(host=host, port=port, path=path, debug=debug)

    except GQLDocError as e:
        _report_error(e, verbose)
        raise click.Abort()


if __name__ == '__main__':
    cli()
