"""
FileCrypt — AES-CBC encryption, SHA-256 digests and HMAC-SHA256 tags for
files held in memory.
"""

from .config.settings import Settings
from .core.session import ProcessingSession, Operation, SessionState

__version__ = Settings.APP_VERSION

__all__ = ["ProcessingSession", "Operation", "SessionState", "Settings"]
