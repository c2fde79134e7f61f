"""
TA 1600 Disk Image Utility

A Python package for reading TA 1600 (ECMA-58 family) 5 1/4" floppy disk
images: the VOL1 volume label, the hierarchical directory, and file
contents.
"""

from .constants import (
    ADU_SIZE,
    BYTES_PER_CYLINDER,
    DIR_ENTRY_SIZE,
    FLAG_COMPRESSED,
    FLAG_DELETED,
    OWNER_WIDTH_LONG,
    OWNER_WIDTH_SHORT,
    SECTOR_SIZE,
    SECTORS_PER_CYLINDER,
)
from .exceptions import (
    DirectoryDecodeError,
    DiskError,
    FieldOutOfRangeError,
    FileNotFoundError,
    InvalidAddressError,
    InvalidFileNameError,
    SeekError,
    TADiskError,
    TruncatedRecordError,
    VolumeLabelNotFoundError,
)
from .codec import decode as decode_ebcdic
from .geometry import Position, to_byte_offset
from .models import (
    AllocationUnit,
    DirectoryEntry,
    Organization,
    TADate,
    VolumeLabel,
    decode_chain,
    total_units,
)
from .reader import RecordReader
from .directory import DirectoryTree
from .extractor import destination_path, extract, write_entry
from .disk import TADiskImage
from .formatter import OutputFormatter, format_entry, format_volume
from .commands import cmd_copy, cmd_dir, cmd_info

__version__ = "0.1.0"

__all__ = [
    # Disk image
    "TADiskImage",
    "RecordReader",
    "DirectoryTree",
    # Data models
    "AllocationUnit",
    "DirectoryEntry",
    "Organization",
    "TADate",
    "VolumeLabel",
    # Exceptions
    "TADiskError",
    "DiskError",
    "InvalidAddressError",
    "InvalidFileNameError",
    "SeekError",
    "TruncatedRecordError",
    "FieldOutOfRangeError",
    "VolumeLabelNotFoundError",
    "DirectoryDecodeError",
    "FileNotFoundError",
    # Decoding
    "Position",
    "to_byte_offset",
    "decode_ebcdic",
    "decode_chain",
    "total_units",
    "extract",
    "destination_path",
    "write_entry",
    # Commands
    "cmd_info",
    "cmd_dir",
    "cmd_copy",
    # Output
    "OutputFormatter",
    "format_entry",
    "format_volume",
    # Constants
    "SECTOR_SIZE",
    "SECTORS_PER_CYLINDER",
    "BYTES_PER_CYLINDER",
    "ADU_SIZE",
    "DIR_ENTRY_SIZE",
    "FLAG_DELETED",
    "FLAG_COMPRESSED",
    "OWNER_WIDTH_SHORT",
    "OWNER_WIDTH_LONG",
]
