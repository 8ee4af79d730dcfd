"""Exception hierarchy for the FTP client wrapper.

The wrapper distinguishes three failure classes:
- FTPConnectionError: a session could not be established (never retried here)
- FTPTransportError: I/O failure on a live session (reconnect + retry once)
- DirectoryRestoreError: working directory could not be restored after a
  fallback listing (fatal, never retried)
"""

from typing import Optional


class FTPError(Exception):
    """Base exception for FTP operations."""
    pass


class FTPConnectionError(FTPError):
    """Raised when connecting or authenticating to the FTP server fails.

    Attributes:
        host: Server host the connection was attempted against
        reply_string: Last server reply, if one was received
    """

    def __init__(self, message: str, host: Optional[str] = None, reply_string: Optional[str] = None):
        super().__init__(message)
        self.host = host
        self.reply_string = reply_string


class FTPTransportError(FTPError):
    """Raised when an in-flight command fails at the socket level."""
    pass


class DirectoryRestoreError(FTPError):
    """Raised when the working directory cannot be restored after a listing.

    Relative paths used by later commands would resolve against the wrong
    directory, so the session state can no longer be trusted.
    """

    def __init__(self, working_directory: Optional[str]):
        super().__init__(
            f"Could not change back to working directory {working_directory!r} after listing"
        )
        self.working_directory = working_directory
