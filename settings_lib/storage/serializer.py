from typing import Any, Protocol
import pickle
import json
import yaml

class Serializer(Protocol):
    """Serialize/deserialize settings objects for stores that keep bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    `extension` names the file suffix a file-based store should use.
    """

    extension: str

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class JSONSerializer:
    """Serializer using JSON (text). Caller must ensure values are JSON-serializable.

    JSON is lossy for some Python values: non-string dict keys come back as
    strings and tuples come back as lists. Use `PickleSerializer` when those
    types must survive a reload.
    """

    extension = ".json"

    def dump(self, value: Any) -> bytes:
        return json.dumps(value).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    extension = ".yml"

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, default_flow_style=False).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))


class PickleSerializer:
    """Serializer using pickle (binary).

    Settings values may be arbitrary Python objects; only load data you
    wrote yourself.
    """

    extension = ".pkl"

    def dump(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)

    def load(self, data: bytes) -> Any:
        return pickle.loads(data)


_SERIALIZERS = {
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
    "yml": YAMLSerializer,
    "pickle": PickleSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Return a serializer instance for `name` (json, yaml/yml, pickle)."""
    try:
        return _SERIALIZERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown serializer '{name}'") from None
