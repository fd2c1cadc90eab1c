# flake8: noqa: F401
#
# Default middleware, executed in this order:
# request phase: auth, method specific serialization, headers, params, transport call
# response phase: deserialization
# error phase: error normalization
#
from .base import Middleware, MiddlewareStack, Payload
from .req_headers import http_basic_auth_middleware, headers_middleware
from .req_methods import post_middleware, patch_middleware, delete_middleware, get_middleware
from .req_params import params_middleware
from .send_request import send_request_middleware
from .res_errors import errors_middleware
from .res_deserialize import deserialize_middleware

JSONAPI_MIDDLEWARE = (
    http_basic_auth_middleware,
    post_middleware,
    patch_middleware,
    delete_middleware,
    get_middleware,
    headers_middleware,
    params_middleware,
    send_request_middleware,
    errors_middleware,
    deserialize_middleware,
)

__all__ = ("Middleware", "MiddlewareStack", "Payload", "JSONAPI_MIDDLEWARE")
