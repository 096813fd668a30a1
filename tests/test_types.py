import pytest

from replicate_ninja.api.types import (
    TERMINAL_STATUSES,
    Collection,
    Model,
    ModelVersion,
    Page,
    Prediction,
    PredictionSource,
    PredictionStatus,
    Training,
)
from replicate_ninja.utils.exceptions import DeserializationError
from tests.helpers import (
    model_payload,
    prediction_payload,
    training_payload,
    version_payload,
)


def test_prediction_from_dict():
    payload = prediction_payload(
        "rrr4z55ocneqzikepnug6xezpe",
        "succeeded",
        output=["https://replicate.delivery/out-0.png"],
        logs="Using seed: 36941...",
        metrics={"predict_time": 4.48},
    )

    prediction = Prediction.from_dict(payload)

    assert prediction.id == "rrr4z55ocneqzikepnug6xezpe"
    assert prediction.status is PredictionStatus.SUCCEEDED
    assert prediction.source is PredictionSource.API
    assert prediction.urls.cancel.endswith("/cancel")
    assert prediction.output == ["https://replicate.delivery/out-0.png"]
    assert prediction.metrics == {"predict_time": 4.48}
    assert prediction.raw is payload
    assert prediction.is_terminal


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {
        PredictionStatus.SUCCEEDED,
        PredictionStatus.FAILED,
        PredictionStatus.CANCELED,
    }
    assert not PredictionStatus.STARTING.is_terminal
    assert not PredictionStatus.PROCESSING.is_terminal
    assert str(PredictionStatus.CANCELED) == "canceled"


@pytest.mark.parametrize("missing", ["id", "status"])
def test_prediction_requires_id_and_status(missing):
    payload = prediction_payload()
    del payload[missing]

    with pytest.raises(DeserializationError, match=missing):
        Prediction.from_dict(payload)


def test_unknown_status_is_a_deserialization_error():
    with pytest.raises(DeserializationError, match="queued"):
        Prediction.from_dict(prediction_payload(status="queued"))


def test_non_object_body_is_a_deserialization_error():
    with pytest.raises(DeserializationError, match="list"):
        Prediction.from_dict([])


def test_update_from_overwrites_every_field():
    prediction = Prediction.from_dict(prediction_payload("p1", "starting"))
    newer = Prediction.from_dict(
        prediction_payload("p1", "failed", error="CUDA out of memory", logs="boom")
    )

    prediction.update_from(newer)

    assert prediction.status is PredictionStatus.FAILED
    assert prediction.error == "CUDA out of memory"
    assert prediction.logs == "boom"
    assert prediction.raw is newer.raw


def test_model_with_empty_example_and_latest_version():
    model = Model.from_dict(model_payload(latest_version=version_payload()))

    assert model.ref == "replicate/hello-world"
    assert model.default_example is None
    assert isinstance(model.latest_version, ModelVersion)
    assert model.latest_version.cog_version == "0.3.0"


def test_model_with_default_example():
    model = Model.from_dict(model_payload(default_example=prediction_payload("ex", "succeeded")))

    assert model.default_example.id == "ex"


def test_model_requires_owner():
    payload = model_payload()
    del payload["owner"]

    with pytest.raises(DeserializationError, match="owner"):
        Model.from_dict(payload)


def test_collection_listing_item_has_no_models():
    collection = Collection.from_dict(
        {"name": "Image classification", "slug": "image-classification", "description": "..."}
    )

    assert collection.models == []


def test_collection_with_models():
    collection = Collection.from_dict({
        "name": "Super resolution",
        "slug": "super-resolution",
        "description": "Upscaling models",
        "models": [model_payload("nightmareai", "real-esrgan")],
    })

    assert [m.ref for m in collection.models] == ["nightmareai/real-esrgan"]


def test_training_from_dict():
    training = Training.from_dict(training_payload(status="processing"))

    assert training.destination == "alice/my-sdxl"
    assert training.status is PredictionStatus.PROCESSING
    assert not training.is_terminal


def test_page_requires_results_list():
    with pytest.raises(DeserializationError, match="results"):
        Page.from_dict({"next": None}, Prediction.from_dict)

    with pytest.raises(DeserializationError, match="list"):
        Page.from_dict({"results": {}}, Prediction.from_dict)


def test_page_is_iterable():
    page = Page.from_dict(
        {"next": "https://api.test/v1/models?cursor=x", "previous": None,
         "results": [model_payload("a", "one"), model_payload("b", "two")]},
        Model.from_dict,
    )

    assert len(page) == 2
    assert [m.name for m in page] == ["one", "two"]
    assert page.next.endswith("cursor=x")
