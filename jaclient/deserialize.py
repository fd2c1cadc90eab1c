#
# JSON:API compound document deserialization
#
# A resource object and the document "included" array are turned into plain dicts:
# {"id": .., "type": .., <attributes>, <relationships>, "meta": .., "links": ..}
#
# Relationships are resolved against the included resources. Every (type, id) pair is materialized
# at most once per top-level call: the DeserializationCache is threaded through the recursion
# and a resource is cached before its relationships are resolved, so cyclic graphs
# (author -> posts -> author) terminate and resolve to the same dict instance.
#
import re
import warnings
from collections.abc import Mapping
from typing import Optional
import jaclient
from .errors import SchemaDriftWarning
from .jsonapi_types import ResourceObject
from .model_config import as_relationship

KEBAB_RE = re.compile(r"-([a-z])")


def camelize(name: str) -> str:
    """
    kebab-case => camelCase: "first-name" => "firstName"
    """
    return KEBAB_RE.sub(lambda match: match.group(1).upper(), name)


def schema_drift(message: str) -> None:
    jaclient.log.warning(message)
    warnings.warn(message, SchemaDriftWarning, stacklevel=3)


class DeserializationCache:
    """
    Materialized resources by (type, id), scoped to one top-level deserialization call
    """

    def __init__(self) -> None:
        self._resources: dict = {}

    def get(self, type_, id_):
        return self._resources.get((type_, id_))

    def set(self, type_, id_, resource) -> None:
        self._resources[(type_, id_)] = resource

    def clear(self) -> None:
        self._resources.clear()

    def __contains__(self, key) -> bool:
        return key in self._resources

    def __len__(self) -> int:
        return len(self._resources)


def matches(attributes, expected) -> bool:
    """
    Partial deep comparison: every key in `expected` must be present in `attributes` with an equal value,
    nested mappings are compared the same way
    """
    if not isinstance(expected, Mapping):
        return attributes == expected
    if not isinstance(attributes, Mapping):
        return False
    for key, value in expected.items():
        if key not in attributes or not matches(attributes[key], value):
            return False
    return True


def is_related_item(rel_spec, included_item, linkage) -> bool:
    if included_item.get("id") != linkage.get("id") or included_item.get("type") != linkage.get("type"):
        return False
    if rel_spec.filter:
        return matches(included_item.get("attributes") or {}, rel_spec.filter)
    return True


def related_items_for(rel_spec, item, included, key):
    """
    :param rel_spec: RelationshipSpec
    :param item: resource object holding the relationship
    :param included: document "included" resources
    :param key: relationship name as it appears in the resource object
    :return: the included resource objects referenced by the relationship linkage data
    """
    relationship = (item.get("relationships") or {}).get(key) or {}
    linkage = relationship.get("data")
    if not linkage:
        return []
    if isinstance(linkage, Mapping):
        linkage = [linkage]
    result = []
    for linkage_item in linkage:
        result += [included_item for included_item in included or [] if is_related_item(rel_spec, included_item, linkage_item)]
    return result


class Deserializer:
    """
    Deserializes resource objects using the client model definitions
    :param registry: ModelRegistry
    :param pluralizer: used to find the model name for a JSON:API type
    """

    def __init__(self, registry, pluralizer) -> None:
        self.registry = registry
        self.pluralizer = pluralizer

    def collection(
        self, items: list[ResourceObject], included: Optional[list[ResourceObject]] = None, use_cache: bool = False, cache=None
    ) -> list:
        """
        Deserialize a list of resource objects
        The cache is cleared when a top-level call (no cache argument) returns, not in between items
        """
        owns_cache = cache is None
        if owns_cache:
            cache = DeserializationCache()
        try:
            return [self.resource(item, included, use_cache, cache) for item in items]
        finally:
            if owns_cache:
                cache.clear()

    def resource(
        self, item: ResourceObject, included: Optional[list[ResourceObject]] = None, use_cache: bool = False, cache=None
    ) -> dict:
        """
        Deserialize a single resource object
        :param item: JSON:API resource object
        :param included: document "included" resources
        :param use_cache: return the already materialized resource for (type, id) if there is one
        :param cache: DeserializationCache shared with the calling resolver
        :return: deserialized resource dict
        """
        owns_cache = cache is None
        if owns_cache:
            cache = DeserializationCache()
        try:
            return self._resource(item, included, use_cache, cache)
        finally:
            if owns_cache:
                cache.clear()

    def _resource(self, item, included, use_cache, cache):
        item_type, item_id = item.get("type"), item.get("id")
        if use_cache:
            cached = cache.get(item_type, item_id)
            if cached is not None:
                return cached

        model = self.registry.model_for(self.pluralizer.singular(item_type))
        if model.options.deserializer:
            return model.options.deserializer(self, item, included)

        result = {"id": item_id, "type": item_type}

        for attr, value in (item.get("attributes") or {}).items():
            if attr != "id" and attr not in model.attributes and camelize(attr) not in model.attributes:
                schema_drift(
                    f'Resource response for type "{item_type}" contains attribute "{attr}", '
                    "but it is not present on model config and therefore not deserialized."
                )
                continue
            result[attr] = value

        # cache before resolving the relationships, a relationship may refer back to this resource
        cache.set(item_type, item_id, result)

        for key in item.get("relationships") or {}:
            rel_name = key
            if rel_name not in model.attributes:
                rel_name = camelize(key)
            if rel_name not in model.attributes:
                schema_drift(
                    f'Resource response for type "{item_type}" contains relationship "{rel_name}", '
                    "but it is not present on model config and therefore not deserialized."
                )
                continue
            rel_spec = as_relationship(model.attributes[rel_name])
            if rel_spec is None:
                schema_drift(
                    f'Resource response for type "{item_type}" contains relationship "{rel_name}", '
                    "but it is present on model config as a plain attribute."
                )
                continue
            result[rel_name] = self._attach_relationship(rel_spec, item, included, key, cache)

        for param in ("meta", "links"):
            if item.get(param):
                result[param] = item[param]

        return result

    def _attach_relationship(self, rel_spec, item, included, key, cache):
        related_items = related_items_for(rel_spec, item, included, key)
        if rel_spec.is_many:
            return self.collection(related_items, included, True, cache)
        if related_items:
            return self.resource(related_items[0], included, True, cache)
        return None


def resource(client, item, included=None, use_cache=False):
    """
    Deserialize a resource object with the models defined on `client`
    """
    return client.deserializer.resource(item, included, use_cache)


def collection(client, items, included=None, use_cache=False):
    """
    Deserialize a list of resource objects with the models defined on `client`
    """
    return client.deserializer.collection(items, included, use_cache)
