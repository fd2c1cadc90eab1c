import logging
import os
import sys


class JAClient:
    """Default client configuration
    Configuration settings are stored as class variables, they can be overridden with
    JACLIENT_<OPTION> environment variables (cfr. config.get_config) or client constructor arguments
    """

    API_URL = ""
    TIMEOUT = 30
    LOGGER = True
    TRAILING_SLASH_COLLECTION = False
    TRAILING_SLASH_RESOURCE = False
    JSONAPI_CONTENT_TYPE = "application/vnd.api+json"

    @staticmethod
    def init_logging(loglevel: int = logging.WARNING) -> logging.Logger:
        """
        Specify the log format used by the client
        """
        log = logging.getLogger(__name__)
        if log.level == logging.NOTSET:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            log.setLevel(loglevel)
            log.addHandler(handler)
        return log


def enable_logging(enabled: bool = True) -> None:
    """Process-wide switch for the client log, not scoped to a client instance
    :param enabled: False silences all jaclient log output
    """
    log.disabled = not enabled


#
# logging initialization
#
try:
    DEBUG = os.getenv("DEBUG", logging.WARNING)
    LOGLEVEL = int(DEBUG)
except ValueError:  # pragma: no cover
    print(f'Invalid LogLevel in DEBUG Environment Variable! "{DEBUG}"')
    LOGLEVEL = logging.INFO

log = JAClient.init_logging(LOGLEVEL)
