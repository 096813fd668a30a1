"""Response types returned by the Replicate API.

Each type is a dataclass built from the decoded JSON body through
``from_dict``. The typed fields mirror the server payload; the payload
itself is kept in ``raw`` so nothing the server sends is lost.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from replicate_ninja.utils.exceptions import DeserializationError

T = TypeVar("T")


class PredictionStatus(str, Enum):
    """Lifecycle status shared by predictions and trainings."""

    STARTING = "starting"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    def __str__(self) -> str:
        return self.value


TERMINAL_STATUSES = frozenset(
    {PredictionStatus.SUCCEEDED, PredictionStatus.FAILED, PredictionStatus.CANCELED}
)


class PredictionSource(str, Enum):
    """Where a prediction was started from."""

    API = "api"
    WEB = "web"

    def __str__(self) -> str:
        return self.value


def _require(data: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in data or data[key] is None:
        raise DeserializationError(f"{kind} response is missing required field '{key}'")
    return data[key]


def _ensure_mapping(data: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DeserializationError(
            f"{kind} response must be a JSON object, got {type(data).__name__}"
        )
    return data


def _optional_mapping(data: Dict[str, Any], key: str, kind: str) -> Optional[Dict[str, Any]]:
    value = data.get(key)
    if value is not None and not isinstance(value, dict):
        raise DeserializationError(f"{kind} field '{key}' must be an object")
    return value


def _enum(enum_cls: Type[Enum], value: Any, kind: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise DeserializationError(f"{kind} has unknown {enum_cls.__name__} value: {value!r}")


def _empty_as_none(value: Any, factory: Callable[[Dict[str, Any]], T]) -> Optional[T]:
    # The API sends {} as well as null for "no example" / "no version yet".
    if not value:
        return None
    return factory(value)


@dataclass
class PredictionURLs:
    """Links to fetch or cancel a prediction."""

    get: Optional[str] = None
    cancel: Optional[str] = None
    stream: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PredictionURLs":
        data = data or {}
        return cls(get=data.get("get"), cancel=data.get("cancel"), stream=data.get("stream"))


@dataclass
class Prediction:
    """One invocation of a hosted model."""

    id: str
    status: PredictionStatus
    version: Optional[str] = None
    model: Optional[str] = None
    urls: PredictionURLs = field(default_factory=PredictionURLs)
    input: Dict[str, Any] = field(default_factory=dict)
    output: Any = None
    logs: Optional[str] = None
    error: Optional[str] = None
    source: Optional[PredictionSource] = None
    metrics: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Prediction":
        data = _ensure_mapping(data, "Prediction")
        source = data.get("source")
        return cls(
            id=_require(data, "id", "Prediction"),
            status=_enum(PredictionStatus, _require(data, "status", "Prediction"), "Prediction"),
            version=data.get("version"),
            model=data.get("model"),
            urls=PredictionURLs.from_dict(_optional_mapping(data, "urls", "Prediction")),
            input=_optional_mapping(data, "input", "Prediction") or {},
            output=data.get("output"),
            logs=data.get("logs"),
            error=data.get("error"),
            source=_enum(PredictionSource, source, "Prediction") if source else None,
            metrics=_optional_mapping(data, "metrics", "Prediction"),
            created_at=data.get("created_at"),
            started_at=data.get("started_at"),
            completed_at=data.get("completed_at"),
            raw=data,
        )

    def update_from(self, other: "Prediction") -> None:
        """Overwrite every field with the values of a newer snapshot."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


@dataclass
class Training:
    """A fine-tuning job that produces a new model version."""

    id: str
    status: PredictionStatus
    version: Optional[str] = None
    model: Optional[str] = None
    destination: Optional[str] = None
    urls: PredictionURLs = field(default_factory=PredictionURLs)
    input: Dict[str, Any] = field(default_factory=dict)
    output: Any = None
    logs: Optional[str] = None
    error: Optional[str] = None
    source: Optional[PredictionSource] = None
    created_at: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Training":
        data = _ensure_mapping(data, "Training")
        source = data.get("source")
        return cls(
            id=_require(data, "id", "Training"),
            status=_enum(PredictionStatus, _require(data, "status", "Training"), "Training"),
            version=data.get("version"),
            model=data.get("model"),
            destination=data.get("destination"),
            urls=PredictionURLs.from_dict(_optional_mapping(data, "urls", "Training")),
            input=_optional_mapping(data, "input", "Training") or {},
            output=data.get("output"),
            logs=data.get("logs"),
            error=data.get("error"),
            source=_enum(PredictionSource, source, "Training") if source else None,
            created_at=data.get("created_at"),
            started_at=data.get("started_at"),
            completed_at=data.get("completed_at"),
            raw=data,
        )

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal


@dataclass
class ModelVersion:
    """An immutable revision of a model."""

    id: str
    created_at: Optional[str] = None
    cog_version: Optional[str] = None
    openapi_schema: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "ModelVersion":
        data = _ensure_mapping(data, "ModelVersion")
        return cls(
            id=_require(data, "id", "ModelVersion"),
            created_at=data.get("created_at"),
            cog_version=data.get("cog_version"),
            openapi_schema=_optional_mapping(data, "openapi_schema", "ModelVersion") or {},
            raw=data,
        )


@dataclass
class Model:
    """A hosted model, identified by owner and name."""

    owner: str
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[str] = None
    github_url: Optional[str] = None
    paper_url: Optional[str] = None
    license_url: Optional[str] = None
    run_count: Optional[int] = None
    cover_image_url: Optional[str] = None
    default_example: Optional[Prediction] = None
    latest_version: Optional[ModelVersion] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Model":
        data = _ensure_mapping(data, "Model")
        return cls(
            owner=_require(data, "owner", "Model"),
            name=_require(data, "name", "Model"),
            url=data.get("url"),
            description=data.get("description"),
            visibility=data.get("visibility"),
            github_url=data.get("github_url"),
            paper_url=data.get("paper_url"),
            license_url=data.get("license_url"),
            run_count=data.get("run_count"),
            cover_image_url=data.get("cover_image_url"),
            default_example=_empty_as_none(data.get("default_example"), Prediction.from_dict),
            latest_version=_empty_as_none(data.get("latest_version"), ModelVersion.from_dict),
            raw=data,
        )

    @property
    def ref(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class Collection:
    """A curated, named grouping of models."""

    slug: str
    name: str
    description: Optional[str] = None
    models: List[Model] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Collection":
        data = _ensure_mapping(data, "Collection")
        models = data.get("models") or []
        if not isinstance(models, list):
            raise DeserializationError("Collection field 'models' must be a list")
        return cls(
            slug=_require(data, "slug", "Collection"),
            name=_require(data, "name", "Collection"),
            description=data.get("description"),
            models=[Model.from_dict(item) for item in models],
            raw=data,
        )


@dataclass
class Page(Generic[T]):
    """One page of a paginated listing."""

    results: List[T]
    next: Optional[str] = None
    previous: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, item_factory: Callable[[Any], T]) -> "Page[T]":
        data = _ensure_mapping(data, "Page")
        results = _require(data, "results", "Page")
        if not isinstance(results, list):
            raise DeserializationError("Page field 'results' must be a list")
        return cls(
            results=[item_factory(item) for item in results],
            next=data.get("next"),
            previous=data.get("previous"),
        )

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)
