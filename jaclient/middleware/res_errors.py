# Error normalization
#
# A server error document
# {"errors": [{"title": "Invalid Attribute", "detail": "...", "source": {"pointer": "/data/attributes/title"}}]}
# is transformed to
# {"title": {"title": "Invalid Attribute", "detail": "..."}}
# (errors without a source pointer are keyed by their index)
#
from collections.abc import Mapping
import jaclient
from .base import Middleware
from ..errors import TransportError
from ..jsonapi_types import ErrorDocument


def error_key(index, source):
    if not source or source.get("pointer") is None:
        return index
    return source["pointer"].split("/")[-1]


def build_errors(server_errors: ErrorDocument):
    if not server_errors:
        jaclient.log.error("Unidentified error")
        return None
    errors = {}
    for index, error in enumerate(server_errors.get("errors") or []):
        if not isinstance(error, Mapping):
            continue
        errors[error_key(index, error.get("source"))] = {"title": error.get("title"), "detail": error.get("detail")}
    if server_errors.get("error"):
        errors["data"] = {"title": server_errors["error"]}
    return errors


def res_errors(error):
    """
    :param error: exception raised by a request or response stage
    :return: normalized errors for transport errors, other exceptions are passed on unchanged
    """
    response = getattr(error, "response", None)
    if isinstance(error, TransportError) and response is not None:
        data = getattr(response, "data", None)
        if data:
            if not isinstance(data, Mapping):
                # text or a json body that is not an error document
                return build_errors({"error": f"{response.reason}: {data}"})
            return build_errors(data)
        return build_errors({"error": response.reason})
    if isinstance(error, Exception):
        return error
    return None


errors_middleware = Middleware("errors", error=res_errors)
