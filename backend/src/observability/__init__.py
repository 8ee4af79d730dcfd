"""Observability module for the FTP client wrapper.

Provides structured logging, connection correlation IDs and metrics.
"""

from .logging_config import configure_logging, get_logger
from .metrics import (
    ftp_connections_total,
    ftp_operation_retries_total,
    ftp_listing_fallbacks_total,
)
from .connection_id import (
    connection_id_var,
    get_connection_id,
    set_connection_id,
    generate_connection_id,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Metrics
    "ftp_connections_total",
    "ftp_operation_retries_total",
    "ftp_listing_fallbacks_total",
    # Connection ID
    "connection_id_var",
    "get_connection_id",
    "set_connection_id",
    "generate_connection_id",
]
