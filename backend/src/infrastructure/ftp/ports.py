"""
FTPClientPort - Port interface consumed by the virtual file system layer

File objects of the FTP file system depend only on this Port, not on how the
connection is kept alive. FTPClientWrapper is the production implementation.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional

from .listing import FTPFile
from .options import FTPFileName, FTPFileSystemOptions


class FTPClientPort(ABC):
    """
    Abstract interface for FTP clients used by the file system layer.

    Boolean operations return False when the server refuses the command;
    stream operations return None in that case. Callers must close a returned
    stream and then call complete_pending_command().
    """

    @property
    @abstractmethod
    def root(self) -> FTPFileName:
        pass

    @property
    @abstractmethod
    def file_system_options(self) -> FTPFileSystemOptions:
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass

    @abstractmethod
    def list_files(self, rel_path: Optional[str]) -> Optional[List[FTPFile]]:
        pass

    @abstractmethod
    def remove_directory(self, rel_path: str) -> bool:
        pass

    @abstractmethod
    def delete_file(self, rel_path: str) -> bool:
        pass

    @abstractmethod
    def rename(self, old_name: str, new_name: str) -> bool:
        pass

    @abstractmethod
    def make_directory(self, rel_path: str) -> bool:
        pass

    @abstractmethod
    def complete_pending_command(self) -> bool:
        pass

    @abstractmethod
    def retrieve_file_stream(self, rel_path: str, restart_offset: int = 0) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def append_file_stream(self, rel_path: str) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def store_file_stream(self, rel_path: str) -> Optional[BinaryIO]:
        pass

    @abstractmethod
    def abort(self) -> bool:
        pass

    @abstractmethod
    def get_reply_string(self) -> Optional[str]:
        pass
