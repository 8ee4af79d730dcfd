"""Query string parsing for proxy and timeout parameters of an FTP URI."""

from dataclasses import dataclass
from typing import Dict, Optional

PROXY_HOST = "proxyHost"
PROXY_PORT = "proxyPort"
PROXY_USERNAME = "proxyUsername"
PROXY_PASSWORD = "proxyPassword"
TIMEOUT = "timeout"
RETRY_COUNT = "retryCount"


def parse_query_params(query_string: Optional[str]) -> Dict[str, str]:
    """Split a raw query string into a name -> value mapping.

    Tokens without a value (``name`` or ``name=``) are dropped. A repeated
    name keeps the value of its last occurrence. Values are returned verbatim
    (no percent-decoding).

    Args:
        query_string: Raw query string without the leading ``?``

    Returns:
        Mapping of parameter names to values (empty if nothing usable)
    """
    params: Dict[str, str] = {}
    if not query_string:
        return params

    for token in query_string.split("&"):
        parts = token.split("=")
        # trailing empty parts do not count as a value
        while parts and not parts[-1]:
            parts.pop()
        if len(parts) >= 2:
            params[parts[0]] = parts[1]

    return params


@dataclass(frozen=True)
class ProxyParams:
    """Proxy settings passed through to the transport's connect routine.

    All values stay strings as given in the URI; the transport interprets them.
    Empty values count as absent.
    """
    host: Optional[str] = None
    port: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[str] = None
    retry_count: Optional[str] = None

    @classmethod
    def from_query_string(cls, query_string: Optional[str]) -> "ProxyParams":
        params = parse_query_params(query_string)
        return cls(
            host=params.get(PROXY_HOST) or None,
            port=params.get(PROXY_PORT) or None,
            username=params.get(PROXY_USERNAME) or None,
            password=params.get(PROXY_PASSWORD) or None,
            timeout=params.get(TIMEOUT) or None,
            retry_count=params.get(RETRY_COUNT) or None,
        )
