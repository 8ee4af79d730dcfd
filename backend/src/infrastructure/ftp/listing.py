"""Parsing of FTP LIST output into directory entries.

Handles the two formats servers commonly return:
- Unix ``ls -l`` style: ``drwxr-xr-x 2 user group 4096 Jan 01 12:00 name``
- DOS/IIS style: ``01-01-24  12:00PM       <DIR>          name``
Lines matching neither are kept with type UNKNOWN so callers still see them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class FTPFileType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symbolic_link"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FTPFile:
    """One entry of a directory listing."""
    name: str
    type: FTPFileType
    size: int = -1
    raw_listing: str = ""
    link: Optional[str] = None

    @property
    def is_directory(self) -> bool:
        return self.type == FTPFileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.type == FTPFileType.FILE

    @property
    def is_symbolic_link(self) -> bool:
        return self.type == FTPFileType.SYMBOLIC_LINK


_UNIX_LINE = re.compile(
    r"^(?P<kind>[-dlbcps])[rwxsStT-]{9}[+@.]?\s+"
    r"\d+\s+\S+\s+\S+\s+"
    r"(?P<size>\d+)\s+"
    r"\w{3}\s+\d{1,2}\s+(?:\d{1,2}:\d{2}|\d{4})\s"
    r"(?P<name>.+)$"
)

_DOS_LINE = re.compile(
    r"^\d{2}-\d{2}-\d{2,4}\s+\d{1,2}:\d{2}(?:AM|PM)?\s+"
    r"(?:(?P<dir><DIR>)|(?P<size>\d+))\s+"
    r"(?P<name>.+)$",
    re.IGNORECASE,
)

_UNIX_TYPES = {
    "-": FTPFileType.FILE,
    "d": FTPFileType.DIRECTORY,
    "l": FTPFileType.SYMBOLIC_LINK,
}


def parse_list_line(line: str) -> Optional[FTPFile]:
    """Parse one LIST line. Returns None for blank and ``total N`` lines."""
    line = line.rstrip("\r\n")
    if not line.strip() or line.startswith("total "):
        return None

    match = _UNIX_LINE.match(line)
    if match:
        kind = _UNIX_TYPES.get(match.group("kind"), FTPFileType.UNKNOWN)
        name = match.group("name")
        link = None
        if kind == FTPFileType.SYMBOLIC_LINK and " -> " in name:
            name, link = name.split(" -> ", 1)
        return FTPFile(
            name=name,
            type=kind,
            size=int(match.group("size")),
            raw_listing=line,
            link=link,
        )

    match = _DOS_LINE.match(line)
    if match:
        if match.group("dir"):
            return FTPFile(name=match.group("name"), type=FTPFileType.DIRECTORY, raw_listing=line)
        return FTPFile(
            name=match.group("name"),
            type=FTPFileType.FILE,
            size=int(match.group("size")),
            raw_listing=line,
        )

    return FTPFile(name=line, type=FTPFileType.UNKNOWN, raw_listing=line)


def parse_listing(lines: List[str]) -> List[FTPFile]:
    """Parse LIST output, skipping entries that carry no file."""
    files = []
    for line in lines:
        entry = parse_list_line(line)
        if entry is not None and entry.name not in (".", ".."):
            files.append(entry)
    return files
