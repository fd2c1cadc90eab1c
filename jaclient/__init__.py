# flake8: noqa: F401
from .jaclient_init import JAClient, log, enable_logging
from .errors import JsonapiError, ConfigurationError, NotFoundError, TransportError, RequestError, SchemaDriftWarning
from .model_config import ModelDefinition, ModelOptions, RelationshipSpec, has_one, has_many, is_relationship
from .registry import ModelRegistry
from .deserialize import Deserializer, DeserializationCache
from .serialize import Serializer
from .middleware import Middleware, MiddlewareStack, JSONAPI_MIDDLEWARE
from .transport import RequestsTransport, TransportResponse
from .builder import RequestBuilder
from .client import JsonApiClient
from .__about__ import __version__, __description__

__all__ = (
    "__version__",
    "__description__",
    #
    "JsonApiClient",
    "RequestBuilder",
    "enable_logging",
    # models:
    "ModelDefinition",
    "ModelOptions",
    "ModelRegistry",
    "RelationshipSpec",
    "has_one",
    "has_many",
    "is_relationship",
    # (de)serialization:
    "Deserializer",
    "DeserializationCache",
    "Serializer",
    # middleware:
    "Middleware",
    "MiddlewareStack",
    "JSONAPI_MIDDLEWARE",
    # transport:
    "RequestsTransport",
    "TransportResponse",
    # Errors:
    "JsonapiError",
    "ConfigurationError",
    "NotFoundError",
    "TransportError",
    "RequestError",
    "SchemaDriftWarning",
)
