"""Model definitions.

A model definition describes one JSON:API resource type as seen by the client:
its attributes, its relationships and a few options.

Relationships are attribute slots whose value is a :class:`RelationshipSpec`,
built with :func:`has_one` / :func:`has_many`::

    client.define("post", {
        "title": "",
        "author": has_one("user"),
        "comments": has_many("comment"),
    })

Plain dicts of the form ``{"jsonApi": "hasMany", "type": "comment"}`` are accepted as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional

HAS_ONE = "hasOne"
HAS_MANY = "hasMany"
RELATIONSHIP_KINDS = (HAS_ONE, HAS_MANY)

Hook = Callable[..., Any]


@dataclass(frozen=True)
class RelationshipSpec:
    """Relationship declaration

    :param kind: cardinality, "hasOne" or "hasMany"
    :param type: name of the related model
    :param filter: attribute values an included resource must match to be related
    """

    kind: str
    type: str
    filter: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if self.kind not in RELATIONSHIP_KINDS:
            raise ValueError(f"Invalid relationship kind {self.kind!r}, expected one of {RELATIONSHIP_KINDS}")

    @property
    def is_many(self) -> bool:
        return self.kind == HAS_MANY


def has_one(type: str, filter: Optional[Mapping[str, Any]] = None) -> RelationshipSpec:
    return RelationshipSpec(HAS_ONE, type, filter)


def has_many(type: str, filter: Optional[Mapping[str, Any]] = None) -> RelationshipSpec:
    return RelationshipSpec(HAS_MANY, type, filter)


def as_relationship(spec: Any) -> Optional[RelationshipSpec]:
    """Return the RelationshipSpec for an attribute spec, None if the spec is a plain attribute"""
    if isinstance(spec, RelationshipSpec):
        return spec
    if isinstance(spec, Mapping) and spec.get("jsonApi") in RELATIONSHIP_KINDS:
        return RelationshipSpec(spec["jsonApi"], spec.get("type"), spec.get("filter"))
    return None


def is_relationship(spec: Any) -> bool:
    return as_relationship(spec) is not None


@dataclass(frozen=True)
class ModelOptions:
    """Per-model options.

    All fields are immutable, a model is changed by defining it again.

    - collection_path: path used instead of the pluralized model name
    - type: JSON:API type used when serializing, defaults to the pluralized model name
    - deserializer: ``fn(deserializer, item, included)`` replacing the generic deserialization
    - serializer: ``fn(item)`` replacing the generic serialization
    - read_only: attributes that are never sent to the server
    """

    collection_path: Optional[str] = None
    type: Optional[str] = None
    deserializer: Optional[Hook] = None
    serializer: Optional[Hook] = None
    read_only: tuple = ()

    def with_overrides(self, overrides: Mapping[str, Any]) -> "ModelOptions":
        """Return new options where known fields are replaced by ``overrides``."""
        valid = {k: v for k, v in overrides.items() if k in self.__dataclass_fields__}
        if "read_only" in valid:
            valid["read_only"] = tuple(valid["read_only"])
        if not valid:
            return self
        return replace(self, **valid)


@dataclass(frozen=True)
class ModelDefinition:
    name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    options: ModelOptions = field(default_factory=ModelOptions)

    @property
    def relationships(self) -> dict:
        """
        :return: the relationship specs of the model, by attribute name
        """
        result = {}
        for name, spec in self.attributes.items():
            rel = as_relationship(spec)
            if rel is not None:
                result[name] = rel
        return result
