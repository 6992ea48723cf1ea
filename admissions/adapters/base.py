"""Abstract base adapter for reading admission records from a file."""

from abc import ABC, abstractmethod

from admissions.core.errors import InvalidFormatError


class BaseAdapter(ABC):
    def parse(self, data_path: str) -> list:
        """Read data_path (UTF-8) and return its StudentRecords in file order.

        OSError from opening the file propagates to the caller.
        """
        with open(data_path, 'r', encoding='utf-8') as f:
            try:
                return self.parse_lines(f)
            except UnicodeDecodeError as e:
                raise InvalidFormatError('<undecodable input>', detail=str(e)) from e

    @abstractmethod
    def parse_lines(self, lines) -> list:
        """Parse an iterable of text lines into StudentRecords.

        Must raise a RecordParseError subclass on the first invalid line.
        """
        pass
