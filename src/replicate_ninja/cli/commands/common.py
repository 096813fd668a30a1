"""Helpers shared by the CLI commands."""

import functools
import json
from typing import Any, Dict, Iterable, Optional

import click

from replicate_ninja.api.config import Config
from replicate_ninja.client import Replicate
from replicate_ninja.utils.exceptions import (
    APIError,
    ConfigurationError,
    PredictionFailedError,
    ReplicateError,
    ValidationError,
    WaitTimeoutError,
)


class ClientFactory:
    """Build the client lazily from the global CLI options.

    Kept on ``ctx.obj`` so that ``--help`` never needs a token.
    """

    def __init__(self, api_token=None, base_url=None, env_file=None, profile=None, config_file=None):
        self.api_token = api_token
        self.base_url = base_url
        self.env_file = env_file
        self.profile = profile
        self.config_file = config_file
        self._client: Optional[Replicate] = None

    def get(self) -> Replicate:
        if self._client is None:
            config = Config.from_env(
                api_token=self.api_token,
                base_url=self.base_url,
                env_file=self.env_file,
                profile=self.profile,
                config_file=self.config_file,
            )
            self._client = Replicate(config)
        return self._client


pass_client = click.make_pass_decorator(ClientFactory)


def handle_errors(func):
    """Turn library errors into red messages and a non-zero exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            _fail(f"Configuration error: {e}")
        except ValidationError as e:
            _fail(f"Validation error: {e}")
        except APIError as e:
            _fail(f"API error ({e.status_code}): {e.message}")
        except PredictionFailedError as e:
            _fail(f"Prediction {e.prediction.id} failed: {e.prediction.error}")
        except WaitTimeoutError as e:
            _fail(f"Timed out: {e}")
        except ReplicateError as e:
            _fail(f"Error: {e}")

    return wrapper


def _fail(message: str) -> None:
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)
    raise click.Abort()


def parse_inputs(pairs: Iterable[str], input_file: Optional[str] = None) -> Dict[str, Any]:
    """Build model inputs from ``--input-file`` and repeated ``-i key=value``.

    Values that parse as JSON (numbers, booleans, lists) are decoded;
    anything else is passed as a string. ``-i`` pairs win over the file.

    Raises:
        click.UsageError: If a pair has no '=' or the file is not a JSON object
    """
    inputs: Dict[str, Any] = {}
    if input_file:
        with open(input_file, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise click.UsageError(f"Invalid JSON in --input-file: {e}")
        if not isinstance(data, dict):
            raise click.UsageError("--input-file must contain a JSON object")
        inputs.update(data)

    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.UsageError(f"Invalid input {pair!r}. Use KEY=VALUE")
        try:
            inputs[key] = json.loads(value)
        except json.JSONDecodeError:
            inputs[key] = value
    return inputs


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def echo_page(page) -> None:
    """Print a page of results as the API's own listing shape."""
    echo_json({
        "previous": page.previous,
        "next": page.next,
        "results": [item.raw for item in page.results],
    })


def split_model_ref(ref: str):
    """Split ``owner/name`` for click arguments."""
    owner, sep, name = ref.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise click.BadParameter(f"Expected OWNER/NAME, got {ref!r}")
    return owner, name
