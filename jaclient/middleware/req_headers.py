from .base import Middleware


def req_http_basic_auth(payload):
    """
    Attach the client credentials to the request
    """
    if payload.jsonapi.auth:
        payload.req["auth"] = tuple(payload.jsonapi.auth)
    return payload


def req_headers(payload):
    """
    Merge the client headers over the request headers
    """
    if payload.jsonapi.headers:
        payload.req["headers"] = {**payload.req.get("headers", {}), **payload.jsonapi.headers}
    return payload


http_basic_auth_middleware = Middleware("HTTP_BASIC_AUTH", req=req_http_basic_auth)
headers_middleware = Middleware("HEADER", req=req_headers)
