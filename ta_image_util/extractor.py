"""
File content extraction for TA 1600 disk images.

Content is returned exactly as stored, one chunk per ADU run. Text
files stay EBCDIC; only metadata fields are ever translated.
"""

from pathlib import Path
from typing import Iterator

from .exceptions import InvalidFileNameError
from .logging_config import get_logger
from .models import DirectoryEntry
from .reader import RecordReader

log = get_logger('extractor')

# Characters that would leave the destination directory or that the OS rejects
UNSAFE_NAME_CHARS = ('/', '\\', '\x00')


def extract(entry: DirectoryEntry, reader: RecordReader) -> Iterator[bytes]:
    """Yield the bytes of every ADU run of entry, in chain order."""
    for adu in entry.adus:
        log.debug("%s: reading %s", entry.full_name, adu)
        reader.seek(adu.position)
        yield reader.read_record(adu.size)


def destination_path(entry: DirectoryEntry, dest_dir: str | Path = '.') -> Path:
    """
    Local path for entry inside dest_dir.

    Names are raw bytes from the image; one holding a path separator or
    a NUL raises InvalidFileNameError instead of escaping dest_dir.
    """
    name = entry.full_name
    if any(c in name for c in UNSAFE_NAME_CHARS):
        raise InvalidFileNameError(f"Unsafe file name {name!r}")
    return Path(dest_dir) / name


def write_entry(entry: DirectoryEntry, reader: RecordReader, dest_dir: str | Path = '.') -> tuple[Path, int]:
    """
    Write the content of entry to dest_dir / 'NAME.ORG'.

    Returns the destination path and the number of bytes written.
    """
    dest = destination_path(entry, dest_dir)
    dest.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with open(dest, 'wb') as f:
        for chunk in extract(entry, reader):
            f.write(chunk)
            written += len(chunk)

    return dest, written
