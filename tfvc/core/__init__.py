"""Core types shared by every layer."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .context import Credential, ServerContext
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # context
    "Credential",
    "ServerContext",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
