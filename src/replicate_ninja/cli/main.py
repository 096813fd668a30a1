"""Main CLI entry point for Replicate Ninja."""

import logging

import click

from replicate_ninja import __version__
from replicate_ninja.cli import commands
from replicate_ninja.cli.commands.common import ClientFactory


@click.group()
@click.version_option(version=__version__, prog_name='replicate-ninja')
@click.option(
    "--api-token",
    help="API token (or set REPLICATE_API_TOKEN in .env)",
)
@click.option(
    "--base-url",
    help="API base URL (or set REPLICATE_API_URL in .env)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True),
    help="Path to .env file (default: searches current dir and parents)",
)
@click.option(
    "--profile",
    help="Profile name from YAML config (e.g., prod, staging)",
)
@click.option(
    "--config-file",
    type=click.Path(exists=True),
    help="Path to YAML config file (default: replicate-ninja.yaml or replicate.yaml)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log HTTP requests and polling to stderr",
)
@click.pass_context
def cli(ctx, api_token, base_url, env_file, profile, config_file, verbose):
    """Replicate Ninja - run and inspect models on Replicate.

    Credentials can be provided via CLI options or .env file.
    CLI options take precedence over profile and .env values.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = ClientFactory(api_token, base_url, env_file, profile, config_file)


cli.add_command(commands.run)


@cli.group()
def predictions():
    """Create, inspect and cancel predictions."""
    pass


predictions.add_command(commands.create_prediction)
predictions.add_command(commands.get_prediction)
predictions.add_command(commands.list_predictions)
predictions.add_command(commands.cancel_prediction)
predictions.add_command(commands.wait_prediction)


@cli.group()
def models():
    """Inspect models and their versions."""
    pass


models.add_command(commands.get_model)
models.add_command(commands.list_models)
models.add_command(commands.list_versions)
models.add_command(commands.get_version)


@cli.group()
def collections():
    """Browse curated collections of models."""
    pass


collections.add_command(commands.get_collection)
collections.add_command(commands.list_collections)


@cli.group()
def trainings():
    """Fine-tune model versions."""
    pass


trainings.add_command(commands.create_training)
trainings.add_command(commands.get_training)
trainings.add_command(commands.list_trainings)
trainings.add_command(commands.cancel_training)


if __name__ == '__main__':
    cli()
