import csv
import io
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from csv2pydantic.utils.exceptions import ConfigError, HeaderParseError, RecordParseError


# ------------------------------------------------------------------
# Input helpers
# ------------------------------------------------------------------
def parse_delimiter(value: str) -> str:
    """
    Delimiter must be exactly one single-byte character.
    """
    if not isinstance(value, str):
        raise ConfigError(f"Delimiter must be a string, got {value!r}")
    if len(value) != 1:
        raise ConfigError(f"Delimiter must be a single character, got {value!r}")
    if not value.isascii():
        raise ConfigError(f"Delimiter must be an ASCII character, got {value!r}")
    return value


@contextmanager
def open_source(path: Optional[str] = None) -> Iterator[TextIO]:
    """
    Open a CSV file, or stdin when no path is given.
    A UTF-8 BOM is dropped. Stdin is left open on exit.
    """
    if path is None:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8-sig", newline="")
        try:
            yield stream
        finally:
            stream.detach()
        return

    with open(path, encoding="utf-8-sig", newline="") as stream:
        yield stream


# ------------------------------------------------------------------
# CSV Adapter
# ------------------------------------------------------------------
class CSVAdapter:
    """
    Streams header and data rows out of a CSV text stream.
    Responsibilities:
    - Strict quoting (malformed rows are errors, not skipped)
    - Trim whitespace around every header and token
    - Skip completely blank lines
    DOES NOT:
    - Check row lengths against the header (inference does)
    - Buffer rows
    """

    def __init__(self, stream: TextIO, delimiter: str = ","):
        self.delimiter = parse_delimiter(delimiter)
        self._reader = csv.reader(stream, delimiter=self.delimiter, strict=True)
        self._headers: Optional[List[str]] = None

    @classmethod
    def from_text(cls, text: str, delimiter: str = ",") -> "CSVAdapter":
        return cls(io.StringIO(text, newline=""), delimiter=delimiter)

    @property
    def line_num(self) -> int:
        return self._reader.line_num

    def _next_row(self) -> List[str]:
        while True:
            row = next(self._reader)
            if row:
                return [token.strip() for token in row]

    def headers(self) -> List[str]:
        """
        Header row; empty input gives an empty header.
        """
        if self._headers is None:
            try:
                self._headers = self._next_row()
            except StopIteration:
                self._headers = []
            except (csv.Error, UnicodeDecodeError) as e:
                raise HeaderParseError(f"Could not parse headers: {e}") from e
        return self._headers

    def records(self) -> Iterator[List[str]]:
        self.headers()
        while True:
            try:
                row = self._next_row()
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise RecordParseError(
                    f"Could not parse record at line {self.line_num}: {e}",
                    row_number=self.line_num,
                ) from e
            yield row
