from http import HTTPStatus
from typing import cast
from ..jsonapi_types import ResponseDocument
from .base import Middleware

DESERIALIZE_METHODS = ("GET", "POST", "PATCH")


def res_deserialize(payload):
    """
    :return: the deserialized primary data of the response document
    """
    response = payload.res
    if payload.req.get("method") not in DESERIALIZE_METHODS or response.status_code == HTTPStatus.NO_CONTENT:
        return None
    if not isinstance(response.data, dict):
        return None
    document = cast(ResponseDocument, response.data)
    data = document.get("data")
    included = document.get("included") or []
    deserializer = payload.jsonapi.deserializer
    if isinstance(data, list):
        return deserializer.collection(data, included, use_cache=True)
    if data:
        return deserializer.resource(data, included, use_cache=True)
    return None


deserialize_middleware = Middleware("response", res=res_deserialize)
