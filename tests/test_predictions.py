import pytest

from replicate_ninja.api.types import PredictionStatus
from replicate_ninja.resources.predictions import parse_version_ref
from replicate_ninja.utils.exceptions import (
    APIError,
    ConfigurationError,
    InvalidVersionError,
    PredictionFailedError,
    ValidationError,
    WaitTimeoutError,
)
from replicate_ninja import Config, Replicate
from tests.helpers import (
    BASE_URL,
    VERSION_ID,
    make_response,
    prediction_payload,
    sent_requests,
)


@pytest.mark.parametrize(
    "ref, expected",
    [
        (f"replicate/hello-world:{VERSION_ID}", ("replicate/hello-world", VERSION_ID)),
        (VERSION_ID, (None, VERSION_ID)),
    ],
)
def test_parse_version_ref(ref, expected):
    assert parse_version_ref(ref) == expected


@pytest.mark.parametrize(
    "ref",
    ["", "replicate/hello-world", "replicate/hello-world:", "hello-world:abc", "/x:abc", "a/b/c:abc", "a b"],
)
def test_parse_version_ref_rejects(ref):
    with pytest.raises(InvalidVersionError):
        parse_version_ref(ref)


def test_create_posts_version_and_input(client, session):
    session.request.return_value = make_response(201, prediction_payload("p1", "starting"))

    prediction = client.predictions.create(
        f"replicate/hello-world:{VERSION_ID}",
        {"text": "world"},
        webhook="https://example.com/hook",
        webhook_events_filter=["completed"],
    )

    assert prediction.id == "p1"
    assert prediction.status in set(PredictionStatus)
    assert sent_requests(session) == [("POST", f"{BASE_URL}/predictions")]
    assert session.request.call_args.kwargs["json"] == {
        "version": VERSION_ID,
        "input": {"text": "world"},
        "webhook": "https://example.com/hook",
        "webhook_events_filter": ["completed"],
    }


def test_create_with_invalid_version_sends_nothing(client, session):
    with pytest.raises(InvalidVersionError):
        client.predictions.create("replicate/hello-world", {"text": "world"})

    session.request.assert_not_called()


def test_create_then_get(client, session):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "starting")),
        make_response(200, prediction_payload("p1", "processing")),
    ]

    created = client.predictions.create(VERSION_ID, {"text": "world"})
    fetched = client.predictions.get(created.id)

    assert fetched.id == created.id
    assert fetched.status is PredictionStatus.PROCESSING
    assert sent_requests(session)[1] == ("GET", f"{BASE_URL}/predictions/p1")


def test_list_items_have_the_get_shape(client, session):
    session.request.return_value = make_response(200, {
        "next": f"{BASE_URL}/predictions?cursor=cD0yMDIy",
        "previous": None,
        "results": [
            prediction_payload("jpzd7hm5gfcapbfyt4mqytarku", "succeeded", source="web"),
            prediction_payload("ufawqhfynnddngldkgtslldrkq", "processing"),
        ],
    })

    page = client.predictions.list()

    assert [p.id for p in page] == ["jpzd7hm5gfcapbfyt4mqytarku", "ufawqhfynnddngldkgtslldrkq"]
    assert all(p.status in set(PredictionStatus) for p in page)
    assert page.next.endswith("cursor=cD0yMDIy")


def test_paginate_follows_next_links(client, session):
    next_url = f"{BASE_URL}/predictions?cursor=two"
    session.request.side_effect = [
        make_response(200, {"next": next_url, "previous": None,
                            "results": [prediction_payload("p1", "succeeded")]}),
        make_response(200, {"next": None, "previous": f"{BASE_URL}/predictions",
                            "results": [prediction_payload("p2", "failed")]}),
    ]

    assert [p.id for p in client.predictions.paginate()] == ["p1", "p2"]
    assert sent_requests(session) == [
        ("GET", f"{BASE_URL}/predictions"),
        ("GET", next_url),
    ]


@pytest.mark.parametrize(
    "cursor",
    ["http://evil.example/steal", "http://api.test/v1/predictions?cursor=two"],
)
def test_list_refuses_cursor_on_another_origin(client, session, cursor):
    with pytest.raises(ValidationError):
        client.predictions.list(cursor=cursor)

    session.request.assert_not_called()


def test_paginate_stops_at_next_link_on_another_host(client, session):
    session.request.return_value = make_response(200, {
        "next": "https://evil.example/predictions?cursor=two",
        "previous": None,
        "results": [prediction_payload("p1", "succeeded")],
    })

    items = client.predictions.paginate()

    assert next(items).id == "p1"
    with pytest.raises(ValidationError):
        next(items)
    assert sent_requests(session) == [("GET", f"{BASE_URL}/predictions")]


def test_ids_are_escaped_into_one_path_segment(client, session):
    session.request.side_effect = [
        make_response(200, prediction_payload("p1")),
        make_response(200, prediction_payload("p1", "canceled")),
    ]

    client.predictions.get("p1/cancel?x=1")
    client.predictions.cancel("../trainings#t1")

    assert sent_requests(session) == [
        ("GET", f"{BASE_URL}/predictions/p1%2Fcancel%3Fx%3D1"),
        ("POST", f"{BASE_URL}/predictions/..%2Ftrainings%23t1/cancel"),
    ]


def test_cancel_then_get_eventually_canceled(client, session, sleeps):
    session.request.side_effect = [
        make_response(200, prediction_payload("p1", "processing")),
        make_response(200, prediction_payload("p1", "processing")),
        make_response(200, prediction_payload("p1", "canceled")),
    ]

    client.predictions.cancel("p1")
    final = client.predictions.wait("p1", sleep=sleeps.append)

    assert final.status is PredictionStatus.CANCELED
    assert sent_requests(session)[0] == ("POST", f"{BASE_URL}/predictions/p1/cancel")
    assert sleeps == [0.5]


def test_cancel_with_empty_body_fetches_state(client, session):
    session.request.side_effect = [
        make_response(200),
        make_response(200, prediction_payload("p1", "canceled")),
    ]

    assert client.predictions.cancel("p1").status is PredictionStatus.CANCELED


def test_reload_updates_in_place(client, session):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "starting")),
        make_response(200, prediction_payload("p1", "processing", logs="step 1")),
    ]
    prediction = client.predictions.create(VERSION_ID, {"text": "world"})

    reloaded = client.predictions.reload(prediction)

    assert reloaded is prediction
    assert prediction.status is PredictionStatus.PROCESSING
    assert prediction.logs == "step 1"


def test_wait_on_prediction_object_returns_terminal_and_updates_it(client, session, sleeps):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "starting")),
        make_response(200, prediction_payload("p1", "processing")),
        make_response(200, prediction_payload("p1", "succeeded", output="hello world")),
    ]
    prediction = client.predictions.create(VERSION_ID, {"text": "world"})

    result = client.predictions.wait(prediction, interval=2, sleep=sleeps.append)

    assert result is prediction
    assert result.status is PredictionStatus.SUCCEEDED
    assert result.output == "hello world"
    assert sleeps == [2]


def test_wait_surfaces_api_error(client, session, sleeps):
    session.request.side_effect = [
        make_response(200, prediction_payload("p1", "processing")),
        make_response(404, body='{"detail": "Not found."}'),
    ]

    with pytest.raises(APIError) as excinfo:
        client.predictions.wait("p1", sleep=sleeps.append)

    assert excinfo.value.message == '{"detail": "Not found."}'


def test_wait_with_bound(client, session, sleeps):
    session.request.return_value = make_response(200, prediction_payload("p1", "processing"))

    with pytest.raises(WaitTimeoutError):
        client.predictions.wait("p1", max_attempts=4, sleep=sleeps.append)

    assert session.request.call_count == 4


def test_run_returns_succeeded_prediction(client, session, sleeps):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "processing")),
        make_response(200, prediction_payload("p1", "succeeded", output="hello world")),
    ]

    result = client.run(f"test/model:{VERSION_ID}", {"text": "world"}, sleep=sleeps.append)

    assert result.output == "hello world"
    assert sent_requests(session) == [
        ("POST", f"{BASE_URL}/predictions"),
        ("GET", f"{BASE_URL}/predictions/p1"),
    ]


def test_run_raises_on_failed_prediction(client, session, sleeps):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "starting")),
        make_response(200, prediction_payload("p1", "failed", error="CUDA out of memory")),
    ]

    with pytest.raises(PredictionFailedError) as excinfo:
        client.run(VERSION_ID, {"text": "world"}, sleep=sleeps.append)

    assert excinfo.value.prediction.error == "CUDA out of memory"


def test_run_returns_canceled_prediction(client, session, sleeps):
    session.request.side_effect = [
        make_response(201, prediction_payload("p1", "starting")),
        make_response(200, prediction_payload("p1", "canceled")),
    ]

    prediction = client.run(VERSION_ID, {"text": "world"}, sleep=sleeps.append)

    assert prediction.status is PredictionStatus.CANCELED
    assert prediction.output is None


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.predictions.create(VERSION_ID, {}),
        lambda c: c.predictions.get("p1"),
        lambda c: c.predictions.list(),
        lambda c: c.predictions.cancel("p1"),
        lambda c: c.predictions.wait("p1"),
        lambda c: c.models.get("replicate", "hello-world"),
        lambda c: c.models.list(),
        lambda c: c.models.versions.get("replicate", "hello-world", VERSION_ID),
        lambda c: c.models.versions.list("replicate", "hello-world"),
        lambda c: c.collections.get("super-resolution"),
        lambda c: c.collections.list(),
        lambda c: c.trainings.list(),
        lambda c: c.run(VERSION_ID, {}),
    ],
)
def test_missing_token_fails_every_method_before_sending(session, call):
    client = Replicate(Config(api_token="", base_url=BASE_URL), session=session)

    with pytest.raises(ConfigurationError):
        call(client)

    session.request.assert_not_called()
