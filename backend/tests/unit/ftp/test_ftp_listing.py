"""Unit tests for LIST output parsing."""

import pytest

from infrastructure.ftp.listing import FTPFileType, parse_list_line, parse_listing


class TestParseListLine:
    """Test single line parsing for Unix and DOS formats."""

    def test_unix_file(self):
        entry = parse_list_line("-rw-r--r--    1 ftp      ftp          1024 Mar 03 14:05 data.csv")

        assert entry.name == "data.csv"
        assert entry.is_file
        assert entry.size == 1024

    def test_unix_directory_with_year_and_spaces(self):
        entry = parse_list_line("drwxr-xr-x 3 ftp ftp 4096 Dec  1  2023 Annual Reports")

        assert entry.name == "Annual Reports"
        assert entry.is_directory

    def test_unix_symbolic_link(self):
        entry = parse_list_line("lrwxrwxrwx 1 root root 11 Jan  5 10:00 latest -> release-2.1")

        assert entry.is_symbolic_link
        assert entry.name == "latest"
        assert entry.link == "release-2.1"

    def test_dos_directory(self):
        entry = parse_list_line("01-15-24  09:41AM       <DIR>          My Folder")

        assert entry.name == "My Folder"
        assert entry.is_directory

    def test_dos_file(self):
        entry = parse_list_line("01-15-24  09:41AM                 2048 notes.txt")

        assert entry.name == "notes.txt"
        assert entry.size == 2048
        assert entry.type == FTPFileType.FILE

    def test_unknown_format_is_kept(self):
        entry = parse_list_line("something unexpected")

        assert entry.type == FTPFileType.UNKNOWN
        assert entry.raw_listing == "something unexpected"

    @pytest.mark.parametrize("line", ["", "   ", "total 12", "\r\n"])
    def test_lines_without_entry(self, line):
        assert parse_list_line(line) is None


class TestParseListing:

    def test_skips_dot_entries(self):
        lines = [
            "total 8",
            "drwxr-xr-x 2 ftp ftp 4096 Jan 10 09:30 .",
            "drwxr-xr-x 9 ftp ftp 4096 Jan 10 09:30 ..",
            "-rw-r--r-- 1 ftp ftp 12 Jan 10 09:30 readme.txt",
        ]

        assert [entry.name for entry in parse_listing(lines)] == ["readme.txt"]
