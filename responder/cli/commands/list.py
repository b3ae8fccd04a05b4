"""CLI command for listing available serializers."""

import click

from responder.serializers import list_serializer_types


@click.command("list-serializers")
def list_serializers():
    """List available serializers.

    Shows all registered serializer names usable in config files and
    with --serializer.
    """
    click.echo("Available Serializers:")
    for serializer_type in list_serializer_types():
        click.echo(f"  - {serializer_type}")
