"""FTP transport port and its ftplib implementation.

The wrapper only talks to FTPTransport. Boolean commands report negative
server replies as False (the reply code stays readable through reply_code),
while socket-level failures raise FTPTransportError.
"""

import ftplib
import logging
import socket
from abc import ABC, abstractmethod
from enum import Enum
from typing import BinaryIO, Callable, List, Optional, TypeVar

from .errors import FTPConnectionError, FTPTransportError
from .listing import FTPFile, parse_listing
from .query_params import ProxyParams

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 421: service not available, closing control connection
SERVICE_NOT_AVAILABLE = 421


def is_positive_completion(reply_code: Optional[int]) -> bool:
    """True for 2xx replies."""
    return reply_code is not None and 200 <= reply_code < 300


class DataConnectionMode(str, Enum):
    ACTIVE_LOCAL = "active_local"
    PASSIVE_LOCAL = "passive_local"


class FTPTransport(ABC):
    """Port for one FTP control connection.

    Implementations keep the reply code and text of the last command so
    callers can inspect outcomes that did not raise.
    """

    @abstractmethod
    def connect(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        proxy: Optional[ProxyParams] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Open the control connection and log in.

        Raises:
            FTPConnectionError: If the server cannot be reached or rejects login
        """
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass

    @property
    @abstractmethod
    def reply_code(self) -> Optional[int]:
        pass

    @property
    @abstractmethod
    def reply_string(self) -> Optional[str]:
        pass

    @abstractmethod
    def list(self, path: Optional[str] = None) -> List[FTPFile]:
        """List a directory, or the working directory when path is None.

        Returns:
            Parsed entries, or an empty list on a negative reply

        Raises:
            FTPTransportError: On socket failure or a 421 reply
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def delete_file(self, path: str) -> bool:
        pass

    @abstractmethod
    def rename(self, old_name: str, new_name: str) -> bool:
        pass

    @abstractmethod
    def make_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def complete_pending_command(self) -> bool:
        pass

    @abstractmethod
    def retrieve_file_stream(self, path: str, restart_offset: int = 0) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def append_file_stream(self, path: str) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def store_file_stream(self, path: str) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def print_working_directory(self) -> Optional[str]:
        pass

    @abstractmethod
    def change_working_directory(self, path: str) -> bool:
        pass

    @abstractmethod
    def enter_local_passive_mode(self) -> None:
        pass

    @abstractmethod
    def enter_local_active_mode(self) -> None:
        pass

    @property
    @abstractmethod
    def data_connection_mode(self) -> DataConnectionMode:
        pass

    @abstractmethod
    def set_file_type(self, binary: bool) -> bool:
        pass

    @abstractmethod
    def set_data_timeout(self, timeout: Optional[float]) -> None:
        pass


class DataConnectionStream:
    """Binary file object over an FTP data connection.

    Closing it closes the data socket; the transfer's final reply must then be
    read with complete_pending_command().
    """

    def __init__(self, conn: socket.socket, mode: str):
        self._conn = conn
        self._file = conn.makefile(mode)
        self.mode = mode

    def read(self, size: int = -1) -> bytes:
        return self._file.read(size)

    def write(self, data: bytes) -> int:
        return self._file.write(data)

    def flush(self) -> None:
        self._file.flush()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        try:
            self._file.close()
        finally:
            self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class FtplibTransport(FTPTransport):
    """FTPTransport backed by ftplib.FTP."""

    def __init__(self, encoding: str = "utf-8", ftp_factory: Callable[..., ftplib.FTP] = ftplib.FTP):
        self._encoding = encoding
        self._ftp_factory = ftp_factory
        self._ftp: Optional[ftplib.FTP] = None
        self._reply_code: Optional[int] = None
        self._reply_string: Optional[str] = None
        self._data_timeout: Optional[float] = None
        self._file_type: Optional[str] = None

    # -- reply bookkeeping -------------------------------------------------

    def _record_reply(self, response: Optional[str]) -> None:
        if not response:
            return
        self._reply_string = response
        try:
            self._reply_code = int(response[:3])
        except ValueError:
            self._reply_code = None

    def _call(self, func: Callable[[], T], default: T) -> T:
        """Run an ftplib call, mapping outcomes onto the port contract.

        Negative replies are recorded and turned into ``default``; socket
        failures and 421 replies raise FTPTransportError.
        """
        if self._ftp is None:
            raise FTPTransportError("FTP transport is not connected")
        try:
            return func()
        except ftplib.error_temp as e:
            self._record_reply(str(e))
            if self._reply_code == SERVICE_NOT_AVAILABLE:
                raise FTPTransportError(str(e)) from e
            return default
        except ftplib.Error as e:
            self._record_reply(str(e))
            return default
        except (OSError, EOFError) as e:
            raise FTPTransportError(f"FTP connection failure: {e}") from e

    def _send(self, command: str) -> bool:
        def run() -> bool:
            response = self._ftp.sendcmd(command)
            self._record_reply(response)
            return is_positive_completion(self._reply_code)

        return self._call(run, False)

    # -- connection lifecycle ----------------------------------------------

    def connect(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        proxy: Optional[ProxyParams] = None,
        timeout: Optional[float] = None,
    ) -> None:
        proxy = proxy or ProxyParams()
        try:
            if proxy.timeout is not None:
                timeout = float(proxy.timeout)
            attempts = 1 + (int(proxy.retry_count) if proxy.retry_count is not None else 0)
            connect_host, connect_port = host, port
            if proxy.host:
                connect_host = proxy.host
                connect_port = int(proxy.port) if proxy.port else port
        except ValueError as e:
            raise FTPConnectionError(f"Invalid proxy parameter: {e}", host=host) from e

        ftp = self._open(connect_host, connect_port, timeout, attempts)
        self._ftp = ftp

        try:
            if proxy.host:
                if proxy.username:
                    self._record_reply(ftp.login(proxy.username, proxy.password or ""))
                target = host if port == 21 else f"{host}:{port}"
                username = f"{username or 'anonymous'}@{target}"
            self._record_reply(ftp.login(username or "anonymous", password or ""))
        except ftplib.Error as e:
            self._record_reply(str(e))
            self._close_quietly()
            raise FTPConnectionError(
                f"Login to {host} failed", host=host, reply_string=self._reply_string
            ) from e
        except (OSError, EOFError) as e:
            self._close_quietly()
            raise FTPConnectionError(f"Connection to {host} lost during login: {e}", host=host) from e

    def _open(self, host: str, port: int, timeout: Optional[float], attempts: int) -> ftplib.FTP:
        last_error: Optional[Exception] = None
        for attempt in range(1, attempts + 1):
            ftp = self._ftp_factory(encoding=self._encoding)
            try:
                if timeout is not None:
                    welcome = ftp.connect(host, port, timeout=timeout)
                else:
                    welcome = ftp.connect(host, port)
                self._record_reply(welcome)
                # ftplib defaults to passive; start in active mode and let
                # callers opt in explicitly
                ftp.set_pasv(False)
                return ftp
            except ftplib.Error as e:
                self._record_reply(str(e))
                last_error = e
            except (OSError, EOFError) as e:
                last_error = e
            ftp.close()
            logger.debug(f"Connect attempt {attempt}/{attempts} to {host}:{port} failed: {last_error}")

        raise FTPConnectionError(
            f"Could not connect to FTP server {host}:{port}: {last_error}",
            host=host,
            reply_string=self._reply_string,
        ) from last_error

    def _close_quietly(self) -> None:
        if self._ftp is not None:
            try:
                self._ftp.close()
            except OSError:
                logger.debug("Ignoring error while closing half-open FTP connection", exc_info=True)
            self._ftp = None

    def is_connected(self) -> bool:
        return self._ftp is not None and self._ftp.sock is not None

    def disconnect(self) -> None:
        if self._ftp is None:
            return
        ftp, self._ftp = self._ftp, None
        try:
            ftp.close()
        except OSError as e:
            raise FTPTransportError(f"Error closing FTP connection: {e}") from e

    @property
    def reply_code(self) -> Optional[int]:
        return self._reply_code

    @property
    def reply_string(self) -> Optional[str]:
        return self._reply_string

    # -- commands ----------------------------------------------------------

    def list(self, path: Optional[str] = None) -> List[FTPFile]:
        """List a directory over a data connection.

        retrlines switches the session to TYPE A; data streams send the
        configured type again before their next transfer.
        """
        lines: List[str] = []
        command = "LIST" if path is None else f"LIST {path}"

        def run() -> List[FTPFile]:
            self._record_reply(self._ftp.retrlines(command, lines.append))
            return parse_listing(lines)

        return self._call(run, [])

    def remove_directory(self, path: str) -> bool:
        return self._send(f"RMD {path}")

    def delete_file(self, path: str) -> bool:
        return self._send(f"DELE {path}")

    def rename(self, old_name: str, new_name: str) -> bool:
        def run() -> bool:
            self._record_reply(self._ftp.rename(old_name, new_name))
            return is_positive_completion(self._reply_code)

        return self._call(run, False)

    def make_directory(self, path: str) -> bool:
        return self._send(f"MKD {path}")

    def complete_pending_command(self) -> bool:
        """Read the final reply of a transfer whose stream was closed."""
        def run() -> bool:
            self._record_reply(self._ftp.voidresp())
            return True

        return self._call(run, False)

    def _open_data_stream(self, command: str, mode: str, rest: Optional[int] = None) -> Optional[BinaryIO]:
        """Send the configured TYPE and start a transfer, like retrbinary does."""
        def run() -> Optional[BinaryIO]:
            if self._file_type is not None:
                self._record_reply(self._ftp.voidcmd(f"TYPE {self._file_type}"))
            conn = self._ftp.transfercmd(command, rest)
            self._record_reply(self._ftp.lastresp)
            if self._data_timeout is not None:
                conn.settimeout(self._data_timeout)
            return DataConnectionStream(conn, mode)

        return self._call(run, None)

    def retrieve_file_stream(self, path: str, restart_offset: int = 0) -> Optional[BinaryIO]:
        """Open a download stream for path.

        Args:
            path: Remote file path
            restart_offset: Byte offset sent as REST; 0 starts at the beginning

        Returns:
            Readable stream, or None if the server refused the transfer

        Raises:
            FTPTransportError: On socket failure or a 421 reply
        """
        return self._open_data_stream(f"RETR {path}", "rb", restart_offset or None)

    def append_file_stream(self, path: str) -> Optional[BinaryIO]:
        return self._open_data_stream(f"APPE {path}", "wb")

    def store_file_stream(self, path: str) -> Optional[BinaryIO]:
        """Open an upload stream replacing path; None if refused."""
        return self._open_data_stream(f"STOR {path}", "wb")

    def print_working_directory(self) -> Optional[str]:
        """Return the working directory from a 257 reply, or None."""
        def run() -> Optional[str]:
            response = self._ftp.sendcmd("PWD")
            self._record_reply(response)
            if not response.startswith("257"):
                return None
            return ftplib.parse257(response)

        return self._call(run, None)

    def change_working_directory(self, path: str) -> bool:
        return self._send(f"CWD {path}")

    def enter_local_passive_mode(self) -> None:
        if self._ftp is None:
            raise FTPTransportError("FTP transport is not connected")
        self._ftp.set_pasv(True)

    def enter_local_active_mode(self) -> None:
        if self._ftp is None:
            raise FTPTransportError("FTP transport is not connected")
        self._ftp.set_pasv(False)

    @property
    def data_connection_mode(self) -> DataConnectionMode:
        if self._ftp is not None and self._ftp.passiveserver:
            return DataConnectionMode.PASSIVE_LOCAL
        return DataConnectionMode.ACTIVE_LOCAL

    def set_file_type(self, binary: bool) -> bool:
        """Set the transfer type used by every later data stream."""
        file_type = "I" if binary else "A"
        if not self._send(f"TYPE {file_type}"):
            return False
        self._file_type = file_type
        return True

    def set_data_timeout(self, timeout: Optional[float]) -> None:
        self._data_timeout = timeout
