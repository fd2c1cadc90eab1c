# Query parameter serialization:
# nested parameters are flattened to the bracket notation used by JSON:API servers
#   {"page": {"offset": 0, "limit": 10}, "include": "author"} => {"page[offset]": 0, "page[limit]": 10, "include": "author"}
#   {"filter": {"id": [1, 2]}} => {"filter[id][]": [1, 2]}
from collections.abc import Mapping
from .base import Middleware


def flatten_params(params, prefix=""):
    result = {}
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            result.update(flatten_params(value, name))
        elif isinstance(value, (list, tuple)):
            result[f"{name}[]"] = list(value)
        elif value is not None:
            result[name] = value
    return result


def req_params(payload):
    params = payload.req.get("params")
    if params:
        payload.req["params"] = flatten_params(params)
    return payload


params_middleware = Middleware("params-serializer", req=req_params)
