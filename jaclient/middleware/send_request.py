from .base import Middleware

TRANSPORT_FIELDS = ("method", "url", "data", "params", "headers", "auth")


def send_request(payload):
    """
    Hand the request to the client transport
    :return: the transport response, the value passed on to the response phase
    """
    request = {key: payload.req.get(key) for key in TRANSPORT_FIELDS}
    return payload.jsonapi.transport(request)


send_request_middleware = Middleware("send-request", req=send_request)
