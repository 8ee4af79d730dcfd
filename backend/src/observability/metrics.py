"""Prometheus metrics for the FTP client wrapper.

Defines operational counters for connection churn, retries and listing
fallbacks.
"""

from prometheus_client import Counter

# Connection metrics
ftp_connections_total = Counter(
    "ftp_connections_total",
    "Total FTP connection attempts",
    ["status"]  # status: success|error
)

# Resilience metrics
ftp_operation_retries_total = Counter(
    "ftp_operation_retries_total",
    "Total operations retried after a transport failure",
    ["operation"]
)

ftp_listing_fallbacks_total = Counter(
    "ftp_listing_fallbacks_total",
    "Total directory listings that fell back to cd + list + cd back",
    ["outcome"]  # outcome: listed|not_found|restore_failed
)
