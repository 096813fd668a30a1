"""Model, model version and collection commands for Replicate Ninja CLI."""

import click

from replicate_ninja.cli.commands.common import (
    echo_json,
    echo_page,
    handle_errors,
    pass_client,
    split_model_ref,
)


@click.command("get")
@click.argument("model")
@pass_client
@handle_errors
def get_model(factory, model):
    """Show a model.

    \b
    MODEL: OWNER/NAME, e.g. stability-ai/sdxl
    """
    owner, name = split_model_ref(model)
    echo_json(factory.get().models.get(owner, name).raw)


@click.command("list")
@click.option("--cursor", help="'next' or 'previous' URL of an earlier page")
@pass_client
@handle_errors
def list_models(factory, cursor):
    """List public models."""
    echo_page(factory.get().models.list(cursor=cursor))


@click.command("versions")
@click.argument("model")
@click.option("--cursor", help="'next' or 'previous' URL of an earlier page")
@pass_client
@handle_errors
def list_versions(factory, model, cursor):
    """List the versions of a model, newest first."""
    owner, name = split_model_ref(model)
    echo_page(factory.get().models.versions.list(owner, name, cursor=cursor))


@click.command("version")
@click.argument("model")
@click.argument("version_id")
@pass_client
@handle_errors
def get_version(factory, model, version_id):
    """Show one version of a model, including its OpenAPI schema."""
    owner, name = split_model_ref(model)
    echo_json(factory.get().models.versions.get(owner, name, version_id).raw)


@click.command("get")
@click.argument("slug")
@pass_client
@handle_errors
def get_collection(factory, slug):
    """Show a collection and its models.

    \b
    SLUG: Collection slug, e.g. super-resolution
    """
    echo_json(factory.get().collections.get(slug).raw)


@click.command("list")
@click.option("--cursor", help="'next' or 'previous' URL of an earlier page")
@pass_client
@handle_errors
def list_collections(factory, cursor):
    """List collections."""
    echo_page(factory.get().collections.list(cursor=cursor))
