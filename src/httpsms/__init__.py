"""httpsms - admission checks and request validation for SMS forwarding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("httpsms")
except PackageNotFoundError:
    __version__ = "0+local"
from httpsms.config import HttpSmsConfig
from httpsms.context import AppContext
from httpsms.exceptions import (
    HttpSmsConfigError,
    HttpSmsError,
    HttpSmsSettingsError,
    HttpSmsValidationError,
)
from httpsms.gate import LineActivationRegistry, ReceiverGate, SessionStateProvider, is_valid
from httpsms.models import (
    MessageEvent,
    MessageEventName,
    MessageIndex,
    MessageOutstanding,
    MessageReceive,
    MessageSend,
    SimLine,
)
from httpsms.settings import Settings
from httpsms.validators import MessageHandlerValidator, raise_for_errors

__all__ = [
    "__version__",
    "AppContext",
    "HttpSmsConfig",
    "HttpSmsConfigError",
    "HttpSmsError",
    "HttpSmsSettingsError",
    "HttpSmsValidationError",
    "LineActivationRegistry",
    "MessageEvent",
    "MessageEventName",
    "MessageHandlerValidator",
    "MessageIndex",
    "MessageOutstanding",
    "MessageReceive",
    "MessageSend",
    "ReceiverGate",
    "SessionStateProvider",
    "Settings",
    "SimLine",
    "is_valid",
    "raise_for_errors",
]
