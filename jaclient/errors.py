# Exceptions
#
# ConfigurationError (and NotFoundError) are raised synchronously at the call site,
# they are never routed through the error middleware.
# TransportError is raised by the transport for non-2xx responses and handled by the pipeline,
# the caller receives a RequestError holding the normalized errors, eg.:
# {
#      "title": {"title": "Invalid Attribute", "detail": "title must not be empty"}
# }
#
from http import HTTPStatus
import jaclient
from .config import is_debug

HIDDEN_LOG = "(debug logging disabled)"


class JsonapiError(Exception):
    """
    Base class for the jaclient exceptions
    """

    status_code = None
    message = ""

    def __str__(self):
        return self.message


class ConfigurationError(JsonapiError):
    """
    This exception is raised when the client is used in a way its model definitions don't allow,
    eg. a relationship call without a preceding model
    """

    message = "Configuration Error: "

    def __init__(self, message=""):
        JsonapiError.__init__(self, message)
        jaclient.log.error("ConfigurationError: %s", message)
        self.message += message


class NotFoundError(ConfigurationError):
    """
    This exception is raised when a model or model attribute definition was not found
    """

    message = "NotFoundError "

    def __init__(self, message=""):
        JsonapiError.__init__(self, message)
        jaclient.log.error("Not found: %s", message)
        self.message += message


class TransportError(JsonapiError):
    """
    This exception is raised by the transport when the server responds with a non-2xx status
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    message = "Transport Error: "

    def __init__(self, response, message=""):
        """
        :param response: the transport response, exposes `status_code`, `reason` and `data`
        :param message: error description
        """
        JsonapiError.__init__(self, message)
        self.response = response
        self.status_code = getattr(response, "status_code", self.status_code)
        jaclient.log.warning("TransportError (%s): %s", self.status_code, message)
        self.message += message or str(getattr(response, "reason", ""))


class RequestError(JsonapiError):
    """
    This exception is raised when a request failed, `errors` contains the errors as processed
    by the error middleware
    """

    message = "Request Error: "

    def __init__(self, errors, status_code=None):
        JsonapiError.__init__(self, errors)
        self.errors = errors
        self.status_code = status_code
        if is_debug():
            self.message += str(errors)
        else:
            self.message += HIDDEN_LOG


class SchemaDriftWarning(UserWarning):
    """
    Issued when a response contains attributes or relationships that are not part of the model definition,
    the data is dropped
    """
