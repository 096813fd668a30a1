"""Example: run a model, then look around the API.

Requires REPLICATE_API_TOKEN in the environment or a .env file.
"""

from replicate_ninja import Replicate
from replicate_ninja.utils.exceptions import PredictionFailedError, ReplicateError

VERSION = "stability-ai/stable-diffusion:27b93a2413e7f36cd83da926f3656280b2931564ff050bf9575f1fdf9bcd7478"


def main():
    with Replicate() as client:
        # Blocking: create the prediction and poll until it is finished.
        try:
            result = client.run(VERSION, {"prompt": "a 19th century portrait of a wombat gentleman"})
            print(f"Output: {result.output}")
        except PredictionFailedError as e:
            print(f"Prediction failed: {e.prediction.error}")
        except ReplicateError as e:
            print(f"Error: {e}")
            return

        # Step by step: create, reload, cancel, wait.
        prediction = client.predictions.create(VERSION, {"prompt": "an oak tree with boletus"})
        print(f"Created {prediction.id}: {prediction.status}")

        client.predictions.reload(prediction)
        print(f"Reloaded: {prediction.status}")

        client.predictions.cancel(prediction.id)
        final = client.predictions.wait(prediction)
        print(f"Final status: {final.status}")

        model = client.models.get("replicate", "hello-world")
        print(f"{model.ref}: {model.description}")

        for version in client.models.versions.list("replicate", "hello-world"):
            print(f"  version {version.id} ({version.created_at})")

        collection = client.collections.get("super-resolution")
        print(f"{collection.name}: {[m.ref for m in collection.models]}")


if __name__ == "__main__":
    main()
