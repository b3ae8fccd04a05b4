"""CLI command for validating config files."""

import sys

import click

from responder.core.exceptions import ConfigError, SerializerError
from responder.models.config import ResponderConfig
from responder.serializers import get_serializer


@click.command()
@click.argument("config_path", type=click.Path(exists=True))
def validate(config_path: str):
    """Validate a responder config YAML file.

    Checks:
    - YAML syntax
    - Config schema validation
    - Serializer name resolution

    Examples:

        responder validate responder.yaml
    """
    try:
        config = ResponderConfig.from_yaml(config_path)
        get_serializer(config.serializer)

        click.echo(f"✓ Config '{config_path}' is valid")
        click.echo(f"  Serializer: {config.serializer}")
        click.echo(f"  Recursion limit: {config.recursion_limit}")
        click.echo(f"  Pagination query: {config.pagination_query or '(none)'}")

    except (ConfigError, SerializerError) as e:
        click.echo(f"✗ Config validation failed: {e}", err=True)
        sys.exit(1)
