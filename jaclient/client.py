#
# JsonApiClient: model registry, url construction and request execution
#
# Requests are executed by running the middleware stack:
#   request stages -> transport (send-request middleware) -> response stages
# a failure in any stage runs the error stages instead, the caller receives the processed error.
#
# Example:
#   client = JsonApiClient(api_url="http://localhost:5000/api")
#   client.define("post", {"title": "", "comments": has_many("comment")})
#   client.define("comment", {"body": ""})
#   post = client.find("post", 1, params={"include": "comments"})
#   comments = client.one("post", 1).relationships("comments").get()
#
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote
import jaclient
from .config import get_config
from .errors import ConfigurationError, RequestError
from .jaclient_init import enable_logging
from .builder import RequestBuilder
from .deserialize import Deserializer
from .serialize import Serializer
from .registry import ModelRegistry
from .pluralize import get_pluralizer
from .transport import RequestsTransport
from .middleware import JSONAPI_MIDDLEWARE, MiddlewareStack, Payload


def encode_uri_component(value: Any) -> str:
    return quote(str(value), safe="!*'()")


class JsonApiClient:
    """
    :param api_url: url prefix of the API, eg. "http://localhost:5000/api"
    :param middleware: middleware units, defaults to JSONAPI_MIDDLEWARE
    :param logger: enable the (process-wide) jaclient log
    :param auth: (username, password) for HTTP basic auth
    :param headers: headers added to every request
    :param trailing_slash: True to end all urls with a slash, or {"collection": bool, "resource": bool}
    :param pluralize: None for inflect based pluralization, False to disable, or an object implementing plural() and singular()
    :param transport: callable executing the request descriptor, defaults to RequestsTransport
    :param timeout: request timeout for the default transport
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        middleware=None,
        logger: Optional[bool] = None,
        auth=None,
        headers: Optional[dict] = None,
        trailing_slash=None,
        pluralize=None,
        transport=None,
        timeout: Optional[float] = None,
    ) -> None:
        if api_url is None:
            api_url = get_config("API_URL")
        if not isinstance(api_url, str):
            raise TypeError(f"api_url should be a string, got {api_url!r}")
        self.api_url = api_url.rstrip("/")
        self._original_middleware = MiddlewareStack(JSONAPI_MIDDLEWARE if middleware is None else middleware)
        self.middleware = self._original_middleware
        self.auth = auth or ()
        self.headers = dict(headers or {})
        self.trailing_slash = self._trailing_slash_policy(trailing_slash)
        self.pluralize = get_pluralizer(pluralize)
        self.content_type = get_config("JSONAPI_CONTENT_TYPE")
        self.registry = ModelRegistry()
        self.deserializer = Deserializer(self.registry, self.pluralize)
        self.serializer = Serializer(self.registry, self.pluralize)
        if transport is None:
            transport = RequestsTransport(timeout=timeout if timeout is not None else get_config("TIMEOUT"))
        self.transport = transport
        self.enable_logging(get_config("LOGGER") if logger is None else logger)

    @staticmethod
    def _trailing_slash_policy(trailing_slash) -> dict:
        result = {"collection": get_config("TRAILING_SLASH_COLLECTION"), "resource": get_config("TRAILING_SLASH_RESOURCE")}
        if isinstance(trailing_slash, bool):
            result = {"collection": trailing_slash, "resource": trailing_slash}
        elif isinstance(trailing_slash, Mapping):
            result.update({k: bool(v) for k, v in trailing_slash.items() if k in result})
        elif trailing_slash is not None:
            raise TypeError(f"trailing_slash should be a bool or a dict, got {trailing_slash!r}")
        return result

    @staticmethod
    def enable_logging(enabled: bool = True) -> None:
        enable_logging(enabled)

    #
    # Model definitions
    #
    def define(self, model_name: str, attributes, options=None):
        """
        Define (or redefine) a model
        :param model_name: singular model name, eg. "post"
        :param attributes: attribute name => default value or relationship spec (has_one/has_many)
        :param options: ModelOptions or dict, eg. {"collection_path": "blog-posts"}
        """
        return self.registry.define(model_name, attributes, options)

    def model_for(self, model_name: str):
        return self.registry.model_for(model_name)

    def relationship_for(self, model_name: str, relationship_name: str):
        return self.registry.relationship_for(model_name, relationship_name)

    @property
    def models(self) -> ModelRegistry:
        return self.registry

    #
    # Path builder
    #
    def builder(self) -> RequestBuilder:
        """
        :return: an empty RequestBuilder for this client
        """
        return RequestBuilder(self)

    reset_builder = builder

    def one(self, model: str, id: Any) -> RequestBuilder:
        return self.builder().one(model, id)

    def all(self, model: str) -> RequestBuilder:
        return self.builder().all(model)

    def relationships(self, name: Optional[str] = None) -> RequestBuilder:
        return self.builder().relationships(name)

    def collection_path_for(self, model_name: str) -> str:
        model = self.registry.get(model_name)
        if model is not None and model.options.collection_path:
            return model.options.collection_path
        return self.pluralize.plural(model_name)

    def resource_path_for(self, model_name: str, id: Any) -> str:
        return f"{self.collection_path_for(model_name)}/{encode_uri_component(id)}"

    def collection_url_for(self, model_name: str) -> str:
        slash = "/" if self.trailing_slash["collection"] else ""
        return f"{self.api_url}/{self.collection_path_for(model_name)}{slash}"

    def resource_url_for(self, model_name: str, id: Any) -> str:
        slash = "/" if self.trailing_slash["resource"] else ""
        return f"{self.api_url}/{self.resource_path_for(model_name, id)}{slash}"

    def url_for(self, model: Optional[str] = None, id: Any = None, builder: Optional[RequestBuilder] = None) -> str:
        if model is not None and id is not None:
            return self.resource_url_for(model, id)
        if model is not None:
            return self.collection_url_for(model)
        return (builder or self.builder()).build_url()

    def path_for(self, model: Optional[str] = None, id: Any = None, builder: Optional[RequestBuilder] = None) -> str:
        if model is not None and id is not None:
            return self.resource_path_for(model, id)
        if model is not None:
            return self.collection_path_for(model)
        return (builder or self.builder()).build_path()

    #
    # Middleware configuration
    #
    def insert_middleware_before(self, middleware_name: str, middleware) -> None:
        self.middleware = self.middleware.insert_before(middleware_name, middleware)

    def insert_middleware_after(self, middleware_name: str, middleware) -> None:
        self.middleware = self.middleware.insert_after(middleware_name, middleware)

    def replace_middleware(self, middleware_name: str, middleware) -> None:
        self.middleware = self.middleware.replace(middleware_name, middleware)

    def reset_middleware(self) -> None:
        """
        Restore the middleware this client was created with
        """
        self.middleware = self._original_middleware

    def run_middleware(self, req: dict):
        """
        Execute a request
        :param req: request record: method, url, model, data, params, meta
        :return: value returned by the last response stage (the deserialized data)
        :raises RequestError: when the error stages produced normalized errors
        """
        middleware = self.middleware
        payload = Payload(req=req, jsonapi=self)
        try:
            payload.res = middleware.apply("req", payload)
            return middleware.apply("res", payload)
        except ConfigurationError:
            raise
        except Exception as exc:
            jaclient.log.error(f"{req.get('method')} {req.get('url')} failed: {exc}")
            error = middleware.apply("error", exc)
            if error is exc:
                raise
            if isinstance(error, BaseException):
                raise error from exc
            raise RequestError(error, getattr(exc, "status_code", None)) from exc

    #
    # Direct verbs
    #
    def request(self, url: str, method: str = "GET", params: Optional[dict] = None, data=None):
        req = {"url": url, "method": method, "params": params or {}, "data": data if data is not None else {}}
        return self.run_middleware(req)

    def find(self, model_name: str, id: Any, params: Optional[dict] = None):
        req = {"method": "GET", "url": self.url_for(model_name, id), "model": model_name, "data": {}, "params": params or {}}
        return self.run_middleware(req)

    def find_all(self, model_name: str, params: Optional[dict] = None):
        req = {"method": "GET", "url": self.url_for(model_name), "model": model_name, "data": {}, "params": params or {}}
        return self.run_middleware(req)

    def create(self, model_name: str, payload, params: Optional[dict] = None, meta: Optional[dict] = None):
        req = {
            "method": "POST",
            "url": self.url_for(model_name),
            "model": model_name,
            "data": payload,
            "params": params or {},
            "meta": meta or {},
        }
        return self.run_middleware(req)

    def update(self, model_name: str, payload, params: Optional[dict] = None, meta: Optional[dict] = None):
        req = {
            "method": "PATCH",
            "url": self.url_for(model_name, payload.get("id")),
            "model": model_name,
            "data": payload,
            "params": params or {},
            "meta": meta or {},
        }
        return self.run_middleware(req)

    def destroy(self, model_name: str, id: Any, data=None, meta: Optional[dict] = None):
        if not model_name:
            raise ConfigurationError("No model specified")
        if id is None:
            raise ConfigurationError("No ID specified")
        req = {"method": "DELETE", "url": self.url_for(model_name, id), "model": model_name, "data": data or {}, "meta": meta or {}}
        return self.run_middleware(req)
