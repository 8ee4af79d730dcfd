"""Connection ID management for log correlation.

Each FTP session installed by the wrapper gets its own ID so that log lines
from reconnects can be told apart.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

# Context variable for connection_id
connection_id_var: ContextVar[Optional[str]] = ContextVar("connection_id", default=None)


def generate_connection_id() -> str:
    """Generate a new unique connection ID.

    Returns:
        str: Short hex ID (first 8 chars of a UUID4)
    """
    return uuid.uuid4().hex[:8]


def get_connection_id() -> str:
    """Get current connection ID from context.

    Returns:
        str: Current connection ID or "no-connection-id" if not set
    """
    return connection_id_var.get() or "no-connection-id"


def set_connection_id(connection_id: Optional[str]) -> None:
    connection_id_var.set(connection_id)
