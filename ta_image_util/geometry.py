"""
Sector addressing for TA 1600 floppy disk images.

Cylinders and sides count from 0, sectors count from 1 (see ECMA-58).
"""

from typing import NamedTuple

from .constants import SECTOR_SIZE, SECTORS_PER_CYLINDER
from .exceptions import InvalidAddressError


class Position(NamedTuple):
    """Physical (cylinder, side, sector) address on the disk."""
    cylinder: int
    side: int
    sector: int

    def __str__(self) -> str:
        return f"Cyl{self.cylinder},Sid{self.side},Sec{self.sector}"


def to_byte_offset(position: Position | tuple[int, int, int] | int) -> int:
    """
    Convert a position into a linear byte offset within the image.

    Accepts a Position (or plain 3-tuple) or an already linear offset.
    Raises InvalidAddressError for negative values, a side other than
    0 or 1, or a sector below 1.
    """
    if isinstance(position, bool):
        raise InvalidAddressError(f"Unknown position value {position!r}")

    if isinstance(position, int):
        if position < 0:
            raise InvalidAddressError(f"Negative byte offset {position}")
        return position

    if isinstance(position, tuple) and len(position) == 3:
        cylinder, side, sector = position
        if cylinder < 0:
            raise InvalidAddressError(f"Negative cylinder {cylinder}")
        if side not in (0, 1):
            raise InvalidAddressError(f"Invalid side {side} (must be 0 or 1)")
        if sector < 1:
            raise InvalidAddressError(f"Invalid sector {sector} (sectors count from 1)")

        return ((cylinder * (side + 1)) * SECTORS_PER_CYLINDER
                + side * SECTORS_PER_CYLINDER
                + (sector - 1)) * SECTOR_SIZE

    raise InvalidAddressError(f"Unknown position value {position!r}")
