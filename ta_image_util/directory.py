"""
Hierarchical directory of a TA 1600 disk image.

A directory occupies a chain of ADUs. Its first 128 bytes hold up to 16
eight-byte names; the entry for name slot i is the 128-byte record at
(i + 1) * 256. Subdirectories are expanded in place, so the tree is held
as one flat, depth-first list of entries.
"""

from typing import Iterator

from .constants import (
    DIR_ENTRY_SIZE,
    DIR_ENTRY_STRIDE,
    DIR_MAX_SLOTS,
    DIR_NAME_SIZE,
    SYSTEM_ADU_COUNT,
    SYSTEM_ADU_START,
    SYSTEM_CHAIN_LENGTH,
    SYSTEM_CHAIN_OFFSET,
)
from .exceptions import DirectoryDecodeError, FileNotFoundError, TADiskError
from .logging_config import get_logger
from .models import AllocationUnit, DirectoryEntry, decode_chain
from .reader import RecordReader
from .utils import decode_name

log = get_logger('directory')


class DirectoryTree:
    """
    Directory read from an ADU chain, with subdirectories flattened in.

    Decoding errors do not propagate: the level that hit the error stops,
    entries decoded before it are kept, and the error is collected in
    `errors` (including those of nested levels).
    """

    def __init__(
        self,
        reader: RecordReader,
        adus: tuple[AllocationUnit, ...],
        parent: 'DirectoryTree | None' = None,
        visited: frozenset[int] = frozenset()
    ):
        self.reader = reader
        self.adus = tuple(adus)
        self.parent = parent
        self.level = parent.level + 1 if parent is not None else 0
        self.entries: list[DirectoryEntry] = []
        self.errors: list[DirectoryDecodeError] = []

        self._visited = visited | {adu.start for adu in self.adus}
        self._load(self._read_blob())

    @classmethod
    def build_root(cls, reader: RecordReader) -> 'DirectoryTree':
        """Bootstrap the system directory from its reserved ADU."""
        system = AllocationUnit(SYSTEM_ADU_COUNT, SYSTEM_ADU_START)
        data = reader.read_record_at(system.position, system.size)
        adus = decode_chain(data[SYSTEM_CHAIN_OFFSET:SYSTEM_CHAIN_OFFSET + SYSTEM_CHAIN_LENGTH])
        log.debug("System directory chain: %s", ', '.join(str(adu) for adu in adus))
        return cls(reader, adus)

    def _read_blob(self) -> bytes:
        """Concatenate every ADU of the chain."""
        data = bytearray()
        for adu in self.adus:
            self.reader.seek(adu.position)
            data.extend(self.reader.read_record(adu.size))
        return bytes(data)

    def _load(self, blob: bytes) -> None:
        for number in range(DIR_MAX_SLOTS):
            name = decode_name(blob[number * DIR_NAME_SIZE:(number + 1) * DIR_NAME_SIZE])
            if not name:
                break

            offset = (number + 1) * DIR_ENTRY_STRIDE
            try:
                entry = DirectoryEntry.from_bytes(self, name, blob[offset:offset + DIR_ENTRY_SIZE])
                self.entries.append(entry)
                if entry.is_directory:
                    self._expand(entry)
            except TADiskError as e:
                self._report(e)
                break

    def _expand(self, entry: DirectoryEntry) -> None:
        """Splice the entries of a subdirectory in after its own entry."""
        starts = {adu.start for adu in entry.adus}
        if starts & self._visited:
            self._report(DirectoryDecodeError(
                f"Directory {entry.full_name} reuses ADUs of an enclosing directory, not expanded"
            ))
            return

        child = DirectoryTree(self.reader, entry.adus, parent=self, visited=self._visited)
        self.entries.extend(child.entries)
        self.errors.extend(child.errors)

    def _report(self, error: TADiskError) -> None:
        if not isinstance(error, DirectoryDecodeError):
            error = DirectoryDecodeError(str(error))
        self.errors.append(error)
        log.warning("Bad directory at level %d (after %d entries): %s",
                    self.level, len(self.entries), error)

    def find(self, name: str) -> DirectoryEntry | None:
        """Find an entry by 'NAME.ORG'; the argument is matched uppercased."""
        wanted = name.upper()
        for entry in self.entries:
            if entry.full_name == wanted:
                return entry
        return None

    def get(self, name: str) -> DirectoryEntry:
        """Like find(), but raises FileNotFoundError on a miss."""
        entry = self.find(name)
        if entry is None:
            raise FileNotFoundError(f"File \"{name}\" not found")
        return entry

    def total_allocated(self) -> int:
        """
        ADUs allocated, as the legacy listing reports it.

        Only the first entry is considered: its first ADU plus its unit
        count. Other entries do not contribute.
        """
        if not self.entries:
            return 0
        first = self.entries[0]
        return first.first_adu + first.count

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
