"""Training commands for Replicate Ninja CLI."""

import click

from replicate_ninja.cli.commands.common import (
    echo_json,
    echo_page,
    handle_errors,
    parse_inputs,
    pass_client,
)
from replicate_ninja.cli.commands.prediction_commands import with_input_options
from replicate_ninja.resources.predictions import parse_version_ref


@click.command("create")
@click.argument("ref")
@click.option(
    "-d",
    "--destination",
    required=True,
    help="OWNER/NAME of the model that receives the trained version",
)
@with_input_options
@click.option("--webhook", help="URL the API calls back on training updates")
@pass_client
@handle_errors
def create_training(factory, ref, destination, inputs, input_file, webhook):
    """Start a training of a model version.

    \b
    REF: Model version to train, OWNER/NAME:VERSION_ID
    """
    model, version_id = parse_version_ref(ref)
    if model is None:
        raise click.BadParameter("Trainings need OWNER/NAME:VERSION_ID", param_hint="REF")
    owner, name = model.split("/", 1)
    training = factory.get().trainings.create(
        owner, name, version_id, destination, parse_inputs(inputs, input_file), webhook=webhook
    )
    echo_json(training.raw)


@click.command("get")
@click.argument("training_id")
@pass_client
@handle_errors
def get_training(factory, training_id):
    """Show the current state of a training."""
    echo_json(factory.get().trainings.get(training_id).raw)


@click.command("list")
@click.option("--cursor", help="'next' or 'previous' URL of an earlier page")
@pass_client
@handle_errors
def list_trainings(factory, cursor):
    """List your trainings."""
    echo_page(factory.get().trainings.list(cursor=cursor))


@click.command("cancel")
@click.argument("training_id")
@pass_client
@handle_errors
def cancel_training(factory, training_id):
    """Cancel a running training."""
    echo_json(factory.get().trainings.cancel(training_id).raw)
