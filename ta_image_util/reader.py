"""
Record-oriented access to TA 1600 disk images.

The reader owns the image handle and the "current record": field
extraction always works on the record returned by the most recent
read. Callers must not interleave unrelated reads between a read and
the field lookups that depend on it.
"""

import os
from typing import BinaryIO

from . import codec
from .constants import SECTOR_SIZE
from .exceptions import (
    DiskError,
    FieldOutOfRangeError,
    SeekError,
    TruncatedRecordError,
)
from .geometry import Position, to_byte_offset
from .logging_config import get_logger
from .models import TADate
from .utils import parse_digits, strip_blanks

log = get_logger('reader')


class RecordReader:
    """Reads fixed-size records from a disk image at explicit positions."""

    def __init__(self, source: BinaryIO, name: str = '<image>'):
        self._file: BinaryIO | None = source
        self.name = name
        self.position = 0
        self.record: bytes = b''

        source.seek(0, os.SEEK_END)
        self.size = source.tell()
        source.seek(0)

    @classmethod
    def open(cls, image_path: str) -> 'RecordReader':
        """Open a disk image file read-only."""
        try:
            source = open(image_path, 'rb')
        except OSError as e:
            raise DiskError(f"Can't read '{image_path}': {e}")
        return cls(source, name=image_path)

    def seek(self, position: Position | int) -> int:
        """Move to a structured position or byte offset, returning the offset."""
        if self._file is None:
            raise DiskError("Disk image not open")

        offset = to_byte_offset(position)
        if offset > self.size:
            raise SeekError(f"Cannot seek to {offset} (image is {self.size} bytes)")

        self._file.seek(offset)
        self.position = offset
        log.debug("Seeked to 0x%x", offset)
        return offset

    def read_record(self, size: int = SECTOR_SIZE) -> bytes:
        """Read exactly size bytes at the current position."""
        if self._file is None:
            raise DiskError("Disk image not open")

        data = self._file.read(size)
        if len(data) < size:
            raise TruncatedRecordError(
                f"Short read at 0x{self.position:x}: wanted {size} bytes, got {len(data)}"
            )

        self.position += size
        self.record = data
        return data

    def read_record_at(self, position: Position | int, size: int = SECTOR_SIZE) -> bytes:
        self.seek(position)
        return self.read_record(size)

    # =========================================================================
    # Field extraction (1-based offsets, as ECMA numbers them)
    # =========================================================================

    def field(self, start: int, length: int, record: bytes | None = None) -> bytes:
        """Return length bytes starting at 1-based offset start."""
        if record is None:
            record = self.record
        if start < 1 or length < 0 or start - 1 + length > len(record):
            raise FieldOutOfRangeError(
                f"Field {start}:{length} outside record of {len(record)} bytes"
            )
        return record[start - 1:start - 1 + length]

    def raw_text_field(self, start: int, length: int) -> str:
        return codec.decode(self.field(start, length))

    def text_field(self, start: int, length: int) -> str:
        return strip_blanks(self.raw_text_field(start, length))

    def digit_field(self, start: int, length: int) -> int:
        return parse_digits(self.raw_text_field(start, length))

    def date_field(self, start: int) -> TADate:
        """Parse a 6-digit YYMMDD field."""
        return TADate.from_text(self.text_field(start, 6))

    def find_label(self, identifier: str, at: Position | int | None = None) -> str | None:
        """
        Read one record and check its label identifier.

        Returns the 1-character label number if the 3-character
        identifier matches, otherwise None.
        """
        if at is not None:
            self.seek(at)
        record = self.read_record()
        label = codec.decode(record[0:3])
        number = codec.decode(record[3:4])
        if label == identifier:
            return number
        return None

    # =========================================================================
    # Resource handling
    # =========================================================================

    def close(self) -> None:
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
