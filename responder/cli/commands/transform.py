"""CLI command for transforming a data file."""

import json
import sys
from pathlib import Path

import click
import yaml

from responder.api import make_builder
from responder.core.exceptions import ResponderError
from responder.core.logging import configure_logging
from responder.models.config import ResponderConfig


@click.command()
@click.argument("data_path", type=click.Path(exists=True))
@click.option("--with", "includes", multiple=True, help="Relation to include (can be used multiple times)")
@click.option("--without", "excludes", multiple=True, help="Relation to exclude (can be used multiple times)")
@click.option("--only", "fields", multiple=True, help="Field to keep (can be used multiple times)")
@click.option("--serializer", default=None, help="Registered serializer name")
@click.option("--key", "resource_key", default=None, help="Resource key")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None, help="Config YAML file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level (overrides config)",
)
@click.option("--json-logs", is_flag=True, help="Output logs in JSON format")
def transform(
    data_path: str,
    includes: tuple,
    excludes: tuple,
    fields: tuple,
    serializer: str | None,
    resource_key: str | None,
    config_path: str | None,
    log_level: str | None,
    json_logs: bool,
):
    """Transform a JSON or YAML data file and print the result as JSON.

    Examples:

        responder transform posts.json --with author --only id --only title
        responder transform posts.yaml --serializer array --key posts
    """
    try:
        config = ResponderConfig.from_yaml(config_path) if config_path else ResponderConfig()
        configure_logging(level=log_level or config.log_level, json_format=json_logs or config.json_logs)

        try:
            data = yaml.safe_load(Path(data_path).read_text())
        except yaml.YAMLError as e:
            click.echo(f"✗ Invalid data file: {e}", err=True)
            sys.exit(1)

        builder = make_builder(config)
        if serializer:
            builder.serializer(serializer)

        result = (
            builder.resource(data, None, resource_key)
            .with_(list(includes))
            .without(list(excludes))
            .only(list(fields))
            .transform()
        )
        click.echo(json.dumps(result, indent=2, default=str))

    except ResponderError as e:
        click.echo(f"✗ Transformation failed: {e}", err=True)
        sys.exit(1)
