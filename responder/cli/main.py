"""Main CLI entry point for responder."""

import click

from responder import __version__
from responder.cli.commands.list import list_serializers
from responder.cli.commands.transform import transform
from responder.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """Responder - transform data into API response payloads."""
    pass


# Register commands
main.add_command(transform)
main.add_command(validate)
main.add_command(list_serializers)


if __name__ == "__main__":
    main()
