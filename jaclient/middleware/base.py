#
# Middleware units and the ordered middleware stack
#
# A unit contributes up to three stages:
# - req(payload) -> value : request phase, the value returned by the last req stage is the transport response
# - res(value) -> value   : response phase, the first res stage receives the payload
# - error(value) -> value : error phase, the first error stage receives the exception
# Units without a given stage are skipped for that phase.
#
from dataclasses import dataclass
from typing import Any, Callable, Optional
from ..errors import ConfigurationError
from ..jsonapi_types import RequestRecord

Stage = Callable[[Any], Any]


@dataclass
class Payload:
    """
    The value threaded through the request and response stages
    :param req: the request record, stages may replace its fields
    :param jsonapi: the JsonApiClient executing the request
    :param res: transport response, set when the request phase completed
    """

    req: RequestRecord
    jsonapi: Any
    res: Any = None


@dataclass(frozen=True)
class Middleware:
    name: str
    req: Optional[Stage] = None
    res: Optional[Stage] = None
    error: Optional[Stage] = None


class MiddlewareStack:
    """
    Immutable ordered sequence of middleware units, the mutators return a new stack
    """

    def __init__(self, middleware=()) -> None:
        self._middleware = tuple(middleware)

    def __iter__(self):
        return iter(self._middleware)

    def __len__(self) -> int:
        return len(self._middleware)

    def __getitem__(self, index):
        return self._middleware[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, MiddlewareStack):
            return self._middleware == other._middleware
        return NotImplemented

    def __repr__(self) -> str:
        return f"MiddlewareStack({self.names})"

    @property
    def names(self) -> list:
        return [middleware.name for middleware in self._middleware]

    def index(self, name: str) -> int:
        """
        :return: position of the first unit named `name`
        """
        for index, middleware in enumerate(self._middleware):
            if middleware.name == name:
                return index
        raise ConfigurationError(f'Middleware "{name}" not found. Available middleware: {self.names}')

    def insert_before(self, name: str, middleware: Middleware) -> "MiddlewareStack":
        index = self.index(name)
        return MiddlewareStack(self._middleware[:index] + (middleware,) + self._middleware[index:])

    def insert_after(self, name: str, middleware: Middleware) -> "MiddlewareStack":
        index = self.index(name) + 1
        return MiddlewareStack(self._middleware[:index] + (middleware,) + self._middleware[index:])

    def replace(self, name: str, middleware: Middleware) -> "MiddlewareStack":
        index = self.index(name)
        return MiddlewareStack(self._middleware[:index] + (middleware,) + self._middleware[index + 1 :])

    def stages(self, phase: str) -> list:
        """
        :param phase: "req", "res" or "error"
        :return: the stage callables for `phase`, in stack order
        """
        return [getattr(middleware, phase) for middleware in self._middleware if getattr(middleware, phase) is not None]

    def apply(self, phase: str, value):
        """
        Run the `phase` stages sequentially, each stage receives the value returned by the previous one
        """
        for stage in self.stages(phase):
            value = stage(value)
        return value
