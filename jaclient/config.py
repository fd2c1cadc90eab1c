# Configuration settings are class variables of JAClient,
# they can be overridden with JACLIENT_<OPTION> environment variables
import os
import logging
from functools import lru_cache
from typing import Any, Optional
import jaclient

ENV_PREFIX = "JACLIENT_"


@lru_cache(maxsize=128)
def get_config(option: str) -> Optional[Any]:
    """Retrieve a configuration parameter
    :param option: configuration parameter, eg. "TIMEOUT"
    :return: configuration value, environment values are cast to the type of the default
    """
    default = getattr(jaclient.JAClient, option, None)
    env_val = os.environ.get(ENV_PREFIX + option, None)
    if env_val is None:
        return default
    if isinstance(default, bool):
        return env_val.lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        try:
            return int(env_val)
        except ValueError:
            jaclient.log.warning(f"Invalid value for {ENV_PREFIX}{option}: {env_val!r}, using {default}")
            return default
    return env_val


def is_debug() -> bool:
    """
    We use the loglevel to check whether we're running in debug mode
    :return: whether the client is in debug mode
    :rtype: Boolean
    """
    return jaclient.log.getEffectiveLevel() < logging.INFO
