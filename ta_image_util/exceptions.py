"""
Custom exceptions for TA 1600 disk image utilities.
"""


class TADiskError(Exception):
    """Base exception for all TA 1600 disk errors."""
    pass


class DiskError(TADiskError):
    """Error opening or reading the disk image."""
    pass


class InvalidAddressError(TADiskError):
    """Cylinder/side/sector address or byte offset is invalid."""
    pass


class SeekError(DiskError):
    """Position lies beyond the end of the disk image."""
    pass


class TruncatedRecordError(DiskError):
    """Fewer bytes available than the record requires."""
    pass


class FieldOutOfRangeError(TADiskError):
    """Field request exceeds the bounds of the current record."""
    pass


class VolumeLabelNotFoundError(TADiskError):
    """No VOL1 label at the index cylinder."""
    pass


class DirectoryDecodeError(TADiskError):
    """Directory entry is malformed or cannot be expanded."""
    pass


class FileNotFoundError(TADiskError):
    """File not found in disk image."""
    pass


class InvalidFileNameError(TADiskError):
    """Entry name cannot be used as a local file name."""
    pass
