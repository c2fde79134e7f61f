"""
Data model classes for TA 1600 disk image utilities.
"""

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .constants import (
    ADU_BASE,
    ADU_LIST_OFFSET,
    ADU_PAIR_SIZE,
    ADU_SENTINEL,
    ADU_SIZE,
    DIR_ENTRY_SIZE,
    ENT_BLOCK_SIZE,
    ENT_FLAGS,
    ENT_ORGANIZATION,
    ENT_PRIVILEGE,
    ENT_RECORD_LENGTH,
    FLAG_COMPRESSED,
    FLAG_DELETED,
    OWNER_WIDTH_LONG,
    OWNER_WIDTHS,
    VOL1_CYLINDER,
    VOL1_SECTOR,
    VOL1_SIDE,
    VOL_ACCESSIBILITY,
    VOL_ALLOCATION,
    VOL_IDENTIFIER,
    VOL_OWNER,
    VOL_RECORD_LENGTH,
    VOL_SECTOR_SEQUENCE,
    VOL_SURFACE,
    VOL_VERSION,
)
from .exceptions import DirectoryDecodeError, VolumeLabelNotFoundError
from .geometry import Position
from .utils import parse_digits, strip_blanks

if TYPE_CHECKING:
    from .directory import DirectoryTree
    from .reader import RecordReader


MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)


@dataclass(frozen=True)
class TADate:
    """
    Date stored as 6 EBCDIC digits, YYMMDD. Day 0 means no date.

    Rendered the way the TA tools print it, with German month names,
    e.g. "14. März 1985".
    """
    year: int
    month: int
    day: int

    @classmethod
    def from_text(cls, text: str) -> 'TADate':
        return cls(
            year=parse_digits(text[0:2]),
            month=parse_digits(text[2:4]),
            day=parse_digits(text[4:6]),
        )

    def __str__(self) -> str:
        if self.day == 0:
            return ""
        if 1 <= self.month <= 12:
            month = MONTHS[self.month - 1]
        else:
            month = str(self.month)
        return f"{self.day}. {month} 19{self.year:02d}"


# =============================================================================
# Allocation data units
# =============================================================================

@dataclass(frozen=True)
class AllocationUnit:
    """A run of count ADUs starting at ADU number start."""
    count: int
    start: int

    @property
    def position(self) -> int:
        """Byte offset of the run within the image."""
        return (self.start - ADU_BASE) * ADU_SIZE

    @property
    def size(self) -> int:
        return self.count * ADU_SIZE

    def byte_range(self) -> tuple[int, int]:
        return self.position, self.size

    def __str__(self) -> str:
        return f"{self.count} @ 0x{self.start:x}(0x{self.position:x})"


def decode_chain(data: bytes, offset: int = ADU_LIST_OFFSET) -> tuple[AllocationUnit, ...]:
    """
    Decode the allocation list embedded in a record.

    Pairs of big-endian (count, start) words follow each other from
    offset 28. The list ends at a blank byte, at a zero count, or at
    the end of the record.
    """
    adus = []
    while offset + ADU_PAIR_SIZE <= len(data):
        if data[offset] == ADU_SENTINEL:
            break
        count, start = struct.unpack_from('>HH', data, offset)
        if count == 0:
            break
        adus.append(AllocationUnit(count, start))
        offset += ADU_PAIR_SIZE
    return tuple(adus)


def total_units(chain: tuple[AllocationUnit, ...] | list[AllocationUnit]) -> int:
    return sum(adu.count for adu in chain)


# =============================================================================
# Directory entries
# =============================================================================

class Organization(IntEnum):
    """File organization codes."""
    INX = 1
    SEQ = 2
    REL = 4
    PGM = 5
    DIR = 8
    VCT = 9


UNKNOWN_ORGANIZATION = "UNKNOWN"


@dataclass
class DirectoryEntry:
    """Represents one 128-byte directory entry and its name slot."""
    name: str
    org_code: int           # Signed byte
    privilege: int
    flags: int              # Signed byte
    block_size: int
    record_length: int
    adus: tuple[AllocationUnit, ...]
    count: int              # Total ADUs allocated
    directory: 'DirectoryTree | None' = field(default=None, repr=False, compare=False)

    @classmethod
    def from_bytes(cls, directory: 'DirectoryTree | None', name: str, data: bytes) -> 'DirectoryEntry':
        """Parse a 128-byte directory entry."""
        if len(data) < DIR_ENTRY_SIZE:
            raise DirectoryDecodeError(
                f"Directory entry {name!r} truncated: {len(data)} of {DIR_ENTRY_SIZE} bytes"
            )

        org_code = struct.unpack_from('>b', data, ENT_ORGANIZATION)[0]
        privilege = struct.unpack_from('>H', data, ENT_PRIVILEGE)[0]
        flags = struct.unpack_from('>b', data, ENT_FLAGS)[0]
        block_size = struct.unpack_from('>H', data, ENT_BLOCK_SIZE)[0]
        record_length = struct.unpack_from('>H', data, ENT_RECORD_LENGTH)[0]
        adus = decode_chain(data)

        return cls(
            name=name,
            org_code=org_code,
            privilege=privilege,
            flags=flags,
            block_size=block_size,
            record_length=record_length,
            adus=adus,
            count=total_units(adus),
            directory=directory,
        )

    @property
    def organization(self) -> Organization | None:
        """Organization for known codes, None for anything else."""
        try:
            return Organization(self.org_code)
        except ValueError:
            return None

    @property
    def extension(self) -> str:
        org = self.organization
        return org.name if org is not None else UNKNOWN_ORGANIZATION

    @property
    def full_name(self) -> str:
        """Return 'NAME.ORG' format."""
        return f"{self.name}.{self.extension}"

    @property
    def is_directory(self) -> bool:
        return self.org_code == Organization.DIR

    @property
    def is_system(self) -> bool:
        return self.org_code == Organization.VCT

    @property
    def is_deleted(self) -> bool:
        return bool(self.flags & FLAG_DELETED)

    @property
    def is_compressed(self) -> bool:
        return bool(self.flags & FLAG_COMPRESSED)

    @property
    def type_flags(self) -> str:
        """Return 'DEL', 'COMP', both, or an empty string."""
        flags = []
        if self.is_deleted:
            flags.append('DEL')
        if self.is_compressed:
            flags.append('COMP')
        return ' '.join(flags)

    @property
    def size(self) -> int:
        """Bytes allocated to the file."""
        return self.count * ADU_SIZE

    @property
    def first_adu(self) -> int:
        """Start unit of the first ADU, 0 when nothing is allocated."""
        return self.adus[0].start if self.adus else 0

    @property
    def level(self) -> int:
        # System files are always reported at the top level
        if self.is_system or self.directory is None:
            return 0
        return self.directory.level

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "name": self.name,
            "full_name": self.full_name,
            "org": self.extension,
            "org_code": self.org_code,
            "priv": self.privilege,
            "bksz": self.block_size,
            "lrec": self.record_length,
            "adus": self.count,
            "adu": self.first_adu,
            "flags": self.type_flags,
            "size": self.size,
            "chain": [[adu.count, adu.start] for adu in self.adus],
        }


# =============================================================================
# Volume label
# =============================================================================

VOL1_POSITION = Position(VOL1_CYLINDER, VOL1_SIDE, VOL1_SECTOR)

SURFACES = {
    '': "ECMA-54 single side",
    '1': "ECMA-54 single side",
    '2': "ECMA-59 both sides",
    'M': "ECMA-69 both sides",
}

RECORD_LENGTHS = {
    '': 128,
    '1': 256,
    '2': 512,
    '3': 1024,
}

ALLOCATIONS = {
    '': "single-sided",
    '1': "double-sided",
}


@dataclass
class VolumeLabel:
    """Decoded VOL1 label (ECMA-58 section 7.3)."""
    number: str
    identifier: str
    accessibility: str
    owner: str
    surface: str
    record_length: int | str
    sector_sequence: int
    allocation: str
    version: str

    @classmethod
    def from_reader(cls, reader: 'RecordReader', owner_width: int = OWNER_WIDTH_LONG) -> 'VolumeLabel':
        """
        Locate and decode VOL1 at cylinder 0, side 0, sector 7.

        Raises VolumeLabelNotFoundError unless the record starts with
        'VOL' and carries label number '1'. The owner field has been
        seen both 7 and 14 bytes wide; owner_width selects which.
        """
        if owner_width not in OWNER_WIDTHS:
            raise ValueError(f"Owner width must be one of {OWNER_WIDTHS}, not {owner_width}")

        number = reader.find_label("VOL", VOL1_POSITION)
        if number != "1":
            raise VolumeLabelNotFoundError(f"VOL1 not found at {VOL1_POSITION}")

        surface = reader.text_field(VOL_SURFACE, 1)
        record_length = reader.text_field(VOL_RECORD_LENGTH, 1)
        allocation = reader.text_field(VOL_ALLOCATION, 1)

        return cls(
            number=number,
            identifier=reader.text_field(VOL_IDENTIFIER, 6),
            accessibility=reader.text_field(VOL_ACCESSIBILITY, 1),
            owner=reader.raw_text_field(VOL_OWNER, owner_width),
            surface=SURFACES.get(surface, surface),
            record_length=RECORD_LENGTHS.get(record_length, record_length),
            sector_sequence=reader.digit_field(VOL_SECTOR_SEQUENCE, 2),
            allocation=ALLOCATIONS.get(allocation, allocation),
            version=reader.text_field(VOL_VERSION, 1),
        )

    @property
    def is_unrestricted(self) -> bool:
        return strip_blanks(self.accessibility) == ''

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "accessibility": self.accessibility,
            "owner": self.owner,
            "surface": self.surface,
            "record_length": self.record_length,
            "sector_sequence": self.sector_sequence,
            "allocation": self.allocation,
            "version": self.version,
        }
