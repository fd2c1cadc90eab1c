# Shapes of the documents the client reads and writes
from typing import Any, Optional, TypedDict, Union


class Linkage(TypedDict):
    """relationships.<name>.data item"""

    type: str
    id: str


class RelationshipObject(TypedDict, total=False):
    data: Union[Linkage, list[Linkage], None]
    links: dict[str, Any]


class ResourceObject(Linkage, total=False):
    attributes: dict[str, Any]
    relationships: dict[str, RelationshipObject]
    meta: dict[str, Any]
    links: dict[str, Any]


class ResponseDocument(TypedDict, total=False):
    """Successful response: primary data and the side-loaded resources"""

    data: Union[ResourceObject, list[ResourceObject], None]
    included: list[ResourceObject]


class ErrorObject(TypedDict, total=False):
    title: str
    detail: str
    source: dict[str, str]


class ErrorDocument(TypedDict, total=False):
    """Failed response body, "error" is the single message form some servers use"""

    errors: list[ErrorObject]
    error: str


class RequestDocument(TypedDict, total=False):
    data: Union[ResourceObject, list[ResourceObject]]
    meta: dict[str, Any]


class RequestRecord(TypedDict, total=False):
    """
    Request descriptor threaded through the middleware, the transport receives
    method, url, data, params, headers and auth
    """

    method: str
    url: str
    model: str
    data: Union[RequestDocument, Any]
    params: dict[str, Any]
    meta: dict[str, Any]
    headers: dict[str, str]
    auth: Optional[tuple]
