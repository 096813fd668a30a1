import json

import requests

BASE_URL = "https://api.test/v1"
VERSION_ID = "5c7d5dc6dd8bf75c1acaa8565735e7986bc5b66206b55cca93cb72c9bf15ccaa"


def make_response(status_code=200, payload=None, body=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload) if payload is not None else ""
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = BASE_URL
    return response


def prediction_payload(prediction_id="p1", status="starting", **extra):
    payload = {
        "id": prediction_id,
        "version": VERSION_ID,
        "urls": {
            "get": f"{BASE_URL}/predictions/{prediction_id}",
            "cancel": f"{BASE_URL}/predictions/{prediction_id}/cancel",
        },
        "created_at": "2022-04-26T20:00:40.658234Z",
        "started_at": None,
        "completed_at": None,
        "source": "api",
        "status": status,
        "input": {"text": "world"},
        "output": None,
        "error": None,
        "logs": None,
        "metrics": {},
    }
    payload.update(extra)
    return payload


def model_payload(owner="replicate", name="hello-world", **extra):
    payload = {
        "url": f"https://replicate.com/{owner}/{name}",
        "owner": owner,
        "name": name,
        "description": "A tiny model that says hello",
        "visibility": "public",
        "github_url": "https://github.com/replicate/cog-examples",
        "paper_url": None,
        "license_url": None,
        "run_count": 12345,
        "cover_image_url": None,
        "default_example": {},
        "latest_version": None,
    }
    payload.update(extra)
    return payload


def version_payload(version_id=VERSION_ID):
    return {
        "id": version_id,
        "created_at": "2022-04-26T19:29:04.418669Z",
        "cog_version": "0.3.0",
        "openapi_schema": {"info": {"title": "Cog", "version": "0.1.0"}},
    }


def training_payload(training_id="t1", status="starting", **extra):
    payload = {
        "id": training_id,
        "version": VERSION_ID,
        "model": "stability-ai/sdxl",
        "destination": "alice/my-sdxl",
        "status": status,
        "input": {"input_images": "https://example.com/images.zip"},
        "output": None,
        "logs": "",
        "error": None,
        "created_at": "2023-03-28T21:47:58.566434Z",
        "started_at": None,
        "completed_at": None,
        "urls": {
            "get": f"{BASE_URL}/trainings/{training_id}",
            "cancel": f"{BASE_URL}/trainings/{training_id}/cancel",
        },
    }
    payload.update(extra)
    return payload


def sent_requests(session):
    """(method, url) of every request the fake session received."""
    return [(c.args[0], c.args[1]) for c in session.request.call_args_list]
