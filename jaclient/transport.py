#
# HTTP transport, the client calls transport(request) with a request descriptor:
# {"method", "url", "data", "params", "headers", "auth"}
# and expects a TransportResponse, or a TransportError for non-2xx responses.
# Any callable following this contract can be passed to the client as `transport`.
#
from typing import Any, NamedTuple, Optional
import requests
import jaclient
from .errors import TransportError


class TransportResponse(NamedTuple):
    status_code: int
    reason: str
    data: Any
    headers: Optional[dict] = None


def parse_body(response: requests.Response) -> Any:
    """
    :return: the decoded json body, the text if it is not json, None if there is no body
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class RequestsTransport:
    """
    Transport using a requests Session
    :param session: optional requests.Session, eg. for connection pooling or custom adapters
    :param timeout: request timeout in seconds
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def __call__(self, request: dict) -> TransportResponse:
        method = request.get("method") or "GET"
        jaclient.log.debug(f"{method} {request.get('url')} params={request.get('params')}")
        # connection errors (requests.RequestException) are propagated unchanged
        response = self.session.request(
            method,
            request.get("url"),
            params=request.get("params") or None,
            json=request.get("data") or None,
            headers=request.get("headers") or None,
            auth=request.get("auth") or None,
            timeout=self.timeout,
        )
        result = TransportResponse(response.status_code, response.reason, parse_body(response), dict(response.headers))
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise TransportError(result, str(exc)) from exc
        return result
