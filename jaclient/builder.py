#
# Resource path builder
#
# Chained calls accumulate path segments:
#   client.one("post", 1).relationships("comments").get()  => GET <api_url>/posts/1/relationships/comments
#
# A RequestBuilder is an immutable value: each chain call returns a new builder,
# so two chains started from the same client (or the same builder) never interfere.
#
from typing import Any, NamedTuple, Optional
from .errors import ConfigurationError
from .model_config import as_relationship


class StackEntry(NamedTuple):
    path: str
    model: Optional[str] = None
    id: Any = None


class RequestBuilder:
    """
    :param client: JsonApiClient used for path construction and request execution
    :param stack: path segments, in url order
    """

    def __init__(self, client, stack=()) -> None:
        self.client = client
        self.stack = tuple(stack)

    def __repr__(self) -> str:
        return f"RequestBuilder({self.build_path()!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, RequestBuilder):
            return self.client is other.client and self.stack == other.stack
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self.client), self.stack))

    def _push(self, *entries) -> "RequestBuilder":
        return RequestBuilder(self.client, self.stack + entries)

    @property
    def last(self) -> Optional[StackEntry]:
        return self.stack[-1] if self.stack else None

    @property
    def model(self) -> Optional[str]:
        """
        :return: model of the last path segment, the model of the request payload
        """
        return self.last.model if self.last else None

    @property
    def is_resource(self) -> bool:
        """
        :return: True if the path ends with a resource id, False if it ends with a collection
        """
        return self.last is not None and self.last.id is not None

    def one(self, model: str, id: Any) -> "RequestBuilder":
        return self._push(StackEntry(self.client.resource_path_for(model, id), model, id))

    def all(self, model: str) -> "RequestBuilder":
        return self._push(StackEntry(self.client.collection_path_for(model), model))

    def relationships(self, name: Optional[str] = None) -> "RequestBuilder":
        """
        Append the "relationships" segment, followed by the relationship `name` if given
        :param name: relationship of the model of the preceding segment
        """
        if not name:
            return self._push(StackEntry("relationships"))
        model_name = self.model
        if not model_name:
            raise ConfigurationError("Relationships must be called with a preceding model.")
        spec = self.client.relationship_for(model_name, name)
        rel_spec = as_relationship(spec)
        if rel_spec is None:
            raise ConfigurationError(f'Attribute "{name}" of model "{model_name}" is not a relationship.')
        return self._push(StackEntry("relationships"), StackEntry(name, rel_spec.type))

    def reset(self) -> "RequestBuilder":
        return RequestBuilder(self.client)

    def add_slash(self) -> bool:
        return self.client.trailing_slash["resource" if self.is_resource else "collection"]

    def build_path(self) -> str:
        return "/".join(str(entry.path) for entry in self.stack)

    def build_url(self) -> str:
        path = self.build_path()
        slash = "/" if path and self.add_slash() else ""
        return f"{self.client.api_url}/{path}{slash}"

    #
    # Verbs: the request is built from this builder and executed by the client middleware
    #
    def get(self, params: Optional[dict] = None):
        req = {"method": "GET", "url": self.build_url(), "data": {}, "params": params or {}}
        return self.client.run_middleware(req)

    def post(self, payload, params: Optional[dict] = None, meta: Optional[dict] = None):
        req = {"method": "POST", "url": self.build_url(), "model": self.model, "data": payload, "params": params or {}, "meta": meta or {}}
        return self.client.run_middleware(req)

    def patch(self, payload, params: Optional[dict] = None, meta: Optional[dict] = None):
        req = {"method": "PATCH", "url": self.build_url(), "model": self.model, "data": payload, "params": params or {}, "meta": meta or {}}
        return self.client.run_middleware(req)

    def destroy(self, payload=None, meta: Optional[dict] = None):
        req = {"method": "DELETE", "url": self.build_url(), "model": self.model, "data": payload or {}, "meta": meta or {}}
        return self.client.run_middleware(req)
