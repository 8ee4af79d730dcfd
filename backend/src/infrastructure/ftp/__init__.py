"""FTP infrastructure module - reconnecting FTP client for the virtual file system."""

from .auth import StaticUserAuthenticator, UserAuthenticationData, UserAuthenticator
from .client_factory import FTPClientFactory
from .errors import DirectoryRestoreError, FTPConnectionError, FTPError, FTPTransportError
from .listing import FTPFile, FTPFileType
from .options import FTPFileName, FTPFileSystemOptions
from .ports import FTPClientPort
from .query_params import ProxyParams, parse_query_params
from .transport import DataConnectionMode, FTPTransport, FtplibTransport
from .wrapper import FTPClientWrapper, ListingOutcome

__all__ = [
    "FTPClientWrapper",
    "FTPClientPort",
    "FTPClientFactory",
    "FTPTransport",
    "FtplibTransport",
    "DataConnectionMode",
    "FTPFile",
    "FTPFileType",
    "FTPFileName",
    "FTPFileSystemOptions",
    "ListingOutcome",
    "ProxyParams",
    "parse_query_params",
    "UserAuthenticator",
    "StaticUserAuthenticator",
    "UserAuthenticationData",
    "FTPError",
    "FTPConnectionError",
    "FTPTransportError",
    "DirectoryRestoreError",
]
