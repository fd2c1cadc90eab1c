# Request middleware per HTTP method:
# set the JSON:API content negotiation headers and serialize the outgoing body
from .base import Middleware
from ..jsonapi_types import RequestDocument


def jsonapi_headers(payload):
    content_type = payload.jsonapi.content_type
    payload.req["headers"] = {**payload.req.get("headers", {}), "Content-Type": content_type, "Accept": content_type}


def serialize_body(payload):
    """
    Wrap the serialized request data in a JSON:API document
    """
    req = payload.req
    serializer = payload.jsonapi.serializer
    data = req.get("data")
    if isinstance(data, (list, tuple)):
        document: RequestDocument = {"data": serializer.collection(req.get("model"), data)}
    else:
        document = {"data": serializer.resource(req.get("model"), data)}
    if req.get("meta"):
        document["meta"] = req["meta"]
    req["data"] = document


def req_get(payload):
    if payload.req.get("method") == "GET":
        jsonapi_headers(payload)
        payload.req["data"] = None
    return payload


def req_post(payload):
    if payload.req.get("method") == "POST":
        jsonapi_headers(payload)
        serialize_body(payload)
    return payload


def req_patch(payload):
    if payload.req.get("method") == "PATCH":
        jsonapi_headers(payload)
        serialize_body(payload)
    return payload


def req_delete(payload):
    if payload.req.get("method") == "DELETE":
        jsonapi_headers(payload)
        # a DELETE carries a body when removing members of a to-many relationship
        if payload.req.get("data"):
            serialize_body(payload)
        else:
            payload.req["data"] = None
    return payload


get_middleware = Middleware("GET", req=req_get)
post_middleware = Middleware("POST", req=req_post)
patch_middleware = Middleware("PATCH", req=req_patch)
delete_middleware = Middleware("DELETE", req=req_delete)
