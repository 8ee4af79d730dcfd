"""User authentication data resolution for FTP connections."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

USERNAME = "username"
PASSWORD = "password"

AUTHENTICATOR_TYPES = (USERNAME, PASSWORD)


class UserAuthenticationData:
    """Credential material handed out by an authenticator.

    Holders must call cleanup() once the credentials have been used.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}

    def set_data(self, data_type: str, value: Optional[str]) -> None:
        if value is None:
            self._data.pop(data_type, None)
        else:
            self._data[data_type] = value

    def get_data(self, data_type: str) -> Optional[str]:
        return self._data.get(data_type)

    def cleanup(self) -> None:
        """Drop every stored credential."""
        self._data.clear()


class UserAuthenticator(ABC):
    """Strategy that supplies credentials when a connection is opened."""

    @abstractmethod
    def request_authentication_data(self, types: Iterable[str]) -> Optional[UserAuthenticationData]:
        """Return credentials for the requested types, or None to fall back."""
        pass


class StaticUserAuthenticator(UserAuthenticator):
    """Authenticator returning a fixed username/password pair."""

    def __init__(self, username: Optional[str] = None, password: Optional[str] = None):
        self._username = username
        self._password = password

    def request_authentication_data(self, types: Iterable[str]) -> Optional[UserAuthenticationData]:
        data = UserAuthenticationData()
        for data_type in types:
            if data_type == USERNAME:
                data.set_data(USERNAME, self._username)
            elif data_type == PASSWORD:
                data.set_data(PASSWORD, self._password)
        return data

    def __repr__(self) -> str:
        return f"StaticUserAuthenticator(username={self._username!r})"


def authenticate(
    authenticator: Optional[UserAuthenticator],
    types: Iterable[str] = AUTHENTICATOR_TYPES,
) -> Optional[UserAuthenticationData]:
    """Ask the configured authenticator for credentials, if there is one."""
    if authenticator is None:
        return None
    return authenticator.request_authentication_data(types)


def get_data(
    auth_data: Optional[UserAuthenticationData],
    data_type: str,
    default: Optional[str],
) -> Optional[str]:
    """Return a credential from auth_data, falling back to default."""
    if auth_data is None:
        return default
    value = auth_data.get_data(data_type)
    return value if value is not None else default


def cleanup(auth_data: Optional[UserAuthenticationData]) -> None:
    if auth_data is not None:
        auth_data.cleanup()
