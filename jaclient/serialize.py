#
# Serialization of outgoing payloads, the counterpart of deserialize.py
#
# {"title": "Hi", "author": {"id": "1", ...}} => {"type": "posts", "attributes": {"title": "Hi"},
#                                                  "relationships": {"author": {"data": {"type": "users", "id": "1"}}}}
#
from collections.abc import Mapping
import jaclient
from .jsonapi_types import Linkage, RelationshipObject
from .model_config import as_relationship


class Serializer:
    """
    Serializes plain dicts to JSON:API resource objects using the client model definitions
    :param registry: ModelRegistry
    :param pluralizer: used to derive the JSON:API type from a model name
    """

    def __init__(self, registry, pluralizer) -> None:
        self.registry = registry
        self.pluralizer = pluralizer

    def type_for(self, model_name: str) -> str:
        model = self.registry.get(model_name)
        if model is not None and model.options.type:
            return model.options.type
        return self.pluralizer.plural(model_name)

    def collection(self, model_name, items):
        return [self.resource(model_name, item) for item in items]

    def resource(self, model_name, item):
        """
        :param model_name: name of the model `item` is an instance of
        :param item: dict with the attribute and relationship values, attributes that are absent are not sent
        :return: JSON:API resource object
        """
        model = self.registry.model_for(model_name)
        if model.options.serializer:
            return model.options.serializer(item)

        attributes = {}
        relationships = {}
        for key, spec in model.attributes.items():
            if key in model.options.read_only or key not in item:
                continue
            rel_spec = as_relationship(spec)
            if rel_spec is None:
                attributes[key] = item[key]
            else:
                relationships[key] = self.relationship(rel_spec, item[key])

        result = {"type": self.type_for(model_name)}
        if item.get("id") is not None:
            result["id"] = item["id"]
        if attributes:
            result["attributes"] = attributes
        if relationships:
            result["relationships"] = relationships
        if item.get("meta"):
            result["meta"] = item["meta"]
        return result

    def relationship(self, rel_spec, value) -> RelationshipObject:
        """
        :return: relationship object holding the linkage data for `value`
        """
        if rel_spec.is_many:
            return {"data": [self.identifier(rel_spec.type, related) for related in value or []]}
        if not value:
            return {"data": None}
        return {"data": self.identifier(rel_spec.type, value)}

    def identifier(self, model_name, value) -> Linkage:
        if not isinstance(value, Mapping):
            # a bare id
            return {"type": self.type_for(model_name), "id": value}
        if "id" not in value:
            jaclient.log.warning(f'Related "{model_name}" object without "id": {value}')
        return {"type": value.get("type") or self.type_for(model_name), "id": value.get("id")}
