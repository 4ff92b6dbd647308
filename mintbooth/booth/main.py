"""
mintbooth CLI
"""
import json
from pathlib import Path

import click
import uvicorn

from mintbooth.booth.api import create_app
from mintbooth.booth.app import App
from mintbooth.booth.config import BoothConfig
from mintbooth.core.logging import configure_logging

config_file_option = click.option(
    "--config-file",
    required=True,
    type=click.Path(exists=True, resolve_path=True, readable=True, path_type=Path),
    help="TOML config file",
)


@click.group()
def cli():
    """
    Photo NFT print booth server
    """


@cli.command
@config_file_option
def serve(config_file: Path):
    """
    Runs the booth REST API server
    """
    config = BoothConfig.from_config_file(config_file)
    configure_logging(config.log_level)

    app = App(config)
    app.create_schema()

    uvicorn.run(
        create_app(app),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


@cli.command
@config_file_option
def init_db(config_file: Path):
    """
    Creates the booth database tables
    """
    config = BoothConfig.from_config_file(config_file)
    configure_logging(config.log_level)

    App(config).create_schema()
    click.echo(f"database initialized: {config.database_url}")


@cli.command
@config_file_option
def show_config(config_file: Path):
    """
    Displays the config as JSON - secrets are redacted
    """
    config = BoothConfig.from_config_file(config_file)
    click.echo(config_file)
    click.echo(json.dumps(config.to_dict(), indent=3))


if __name__ == "__main__":
    cli()
