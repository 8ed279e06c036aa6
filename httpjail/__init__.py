"""Per-client request limiting with cooloff sentences for FastAPI apps."""

from .config import Settings, get_settings
from .jail import Decision, Jail, JailConfig
from .logging_config import configure_logging
from .middleware import DENIAL_MESSAGE, install_jail
from .sentences import SentenceBoard
from .visits import VisitLedger, VisitorLog

__all__ = [
    "DENIAL_MESSAGE",
    "Decision",
    "Jail",
    "JailConfig",
    "SentenceBoard",
    "Settings",
    "VisitLedger",
    "VisitorLog",
    "configure_logging",
    "get_settings",
    "install_jail",
]
