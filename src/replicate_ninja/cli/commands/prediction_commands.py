"""Prediction commands for Replicate Ninja CLI."""

import json

import click

from replicate_ninja.cli.commands.common import (
    echo_json,
    echo_page,
    handle_errors,
    parse_inputs,
    pass_client,
)

input_options = [
    click.option(
        "-i",
        "--input",
        "inputs",
        multiple=True,
        metavar="KEY=VALUE",
        help="Model input; repeat for several inputs. JSON values are decoded.",
    ),
    click.option(
        "--input-file",
        type=click.Path(exists=True, dir_okay=False),
        help="JSON file holding an object of model inputs",
    ),
]


def with_input_options(func):
    for option in reversed(input_options):
        func = option(func)
    return func


@click.command("run")
@click.argument("ref")
@with_input_options
@click.option(
    "--interval",
    type=float,
    help="Seconds between status checks (default: REPLICATE_POLL_INTERVAL or 1.0)",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    help="Give up after this many status checks",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the finished prediction JSON to this file instead of stdout",
)
@pass_client
@handle_errors
def run(factory, ref, inputs, input_file, interval, max_attempts, output):
    """Run a model and wait for the result.

    \b
    REF: Model version, OWNER/NAME:VERSION_ID or a bare version id

    \b
    Examples:
        replicate-ninja run stability-ai/sdxl:39ed52f2... \\
            -i prompt="a 19th century portrait of a wombat gentleman"

        replicate-ninja run 39ed52f2... --input-file inputs.json -o result.json
    """
    payload = parse_inputs(inputs, input_file)
    prediction = factory.get().run(ref, payload, interval=interval, max_attempts=max_attempts)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(prediction.raw, f, indent=2)
        click.echo(
            click.style(f"✓ Prediction {prediction.id} {prediction.status}", fg="green"),
            err=True,
        )
        click.echo(f"Output saved to: {output}", err=True)
    else:
        echo_json(prediction.raw)


@click.command("create")
@click.argument("ref")
@with_input_options
@click.option("--webhook", help="URL the API calls back on prediction updates")
@click.option(
    "--webhook-event",
    "webhook_events",
    multiple=True,
    type=click.Choice(["start", "output", "logs", "completed"]),
    help="Event that triggers the webhook; repeat for several",
)
@pass_client
@handle_errors
def create_prediction(factory, ref, inputs, input_file, webhook, webhook_events):
    """Start a prediction without waiting for it.

    \b
    REF: Model version, OWNER/NAME:VERSION_ID or a bare version id
    """
    prediction = factory.get().predictions.create(
        ref,
        parse_inputs(inputs, input_file),
        webhook=webhook,
        webhook_events_filter=list(webhook_events) or None,
    )
    echo_json(prediction.raw)


@click.command("get")
@click.argument("prediction_id")
@pass_client
@handle_errors
def get_prediction(factory, prediction_id):
    """Show the current state of a prediction."""
    echo_json(factory.get().predictions.get(prediction_id).raw)


@click.command("list")
@click.option("--cursor", help="'next' or 'previous' URL of an earlier page")
@pass_client
@handle_errors
def list_predictions(factory, cursor):
    """List your predictions, newest first."""
    echo_page(factory.get().predictions.list(cursor=cursor))


@click.command("cancel")
@click.argument("prediction_id")
@pass_client
@handle_errors
def cancel_prediction(factory, prediction_id):
    """Cancel a running prediction."""
    echo_json(factory.get().predictions.cancel(prediction_id).raw)


@click.command("wait")
@click.argument("prediction_id")
@click.option("--interval", type=float, help="Seconds between status checks")
@click.option("--max-attempts", type=click.IntRange(min=1), help="Give up after this many checks")
@pass_client
@handle_errors
def wait_prediction(factory, prediction_id, interval, max_attempts):
    """Block until a prediction succeeds, fails or is canceled."""
    prediction = factory.get().predictions.wait(
        prediction_id, interval=interval, max_attempts=max_attempts
    )
    echo_json(prediction.raw)
