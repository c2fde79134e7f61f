"""
Output formatting for TA 1600 disk image utilities.
"""

import json
import sys

from .directory import DirectoryTree
from .models import DirectoryEntry, VolumeLabel

LISTING_HEADER = " LVL FILE     ORG   PRIV  BKSZ  LREC  ADUS  ADU  TYPE"


def format_entry(entry: DirectoryEntry) -> str:
    """Format one directory listing row."""
    row = "  %d  %-8s %3s  %5d   %3d   %3d   %3d  %3d  %s" % (
        entry.level,
        entry.name,
        entry.extension,
        entry.privilege,
        entry.block_size,
        entry.record_length,
        entry.count,
        entry.first_adu,
        entry.type_flags,
    )
    return row.rstrip()


def format_volume(volume: VolumeLabel) -> list[str]:
    """Format the VOL1 label as labeled lines."""
    if volume.is_unrestricted:
        access = "- unrestricted -"
    else:
        access = f'"{volume.accessibility}"'

    return [
        f'    Volume Identifier                 "{volume.identifier}"',
        f'    Volume Accessibility Indicator    {access}',
        f'    Owner                             "{volume.owner}"',
        f'    Surface Indicator                 {volume.surface}',
        f'    Physical Record Length Identifier {volume.record_length} bytes per physical record',
        f'    Sector Sequence Indicator         {volume.sector_sequence}',
        f'    File Label Allocation             {volume.allocation}',
        f'    Label Standard Version            "{volume.version}"',
    ]


class OutputFormatter:
    """Handle output formatting (text or JSON)."""

    def __init__(self, json_mode: bool = False):
        self.json_mode = json_mode

    def success(self, message: str, **data) -> None:
        """Output success message."""
        if self.json_mode:
            output = {"status": "success", "message": message, **data}
            print(json.dumps(output))
        else:
            print(message)

    def error(self, message: str) -> None:
        """Output error message."""
        if self.json_mode:
            output = {"status": "error", "message": message}
            print(json.dumps(output))
        else:
            print(f"Error: {message}", file=sys.stderr)

    def volume_summary(self, volume: VolumeLabel, image_path: str = "") -> None:
        """Output the volume label."""
        if self.json_mode:
            output = {"status": "success", "image": image_path, "volume": volume.to_dict()}
            print(json.dumps(output))
        else:
            print(f"Volume {image_path}:" if image_path else "Volume:")
            for line in format_volume(volume):
                print(line)

    def list_directory(self, volume: VolumeLabel, directory: DirectoryTree, image_path: str = "") -> None:
        """Output volume summary, every entry, and the allocation total."""
        if self.json_mode:
            output = {
                "status": "success",
                "image": image_path,
                "volume": volume.to_dict(),
                "files": [entry.to_dict() for entry in directory],
                "total_adus": directory.total_allocated(),
                "errors": [str(e) for e in directory.errors],
            }
            print(json.dumps(output))
        else:
            self.volume_summary(volume, image_path)
            print()
            print(LISTING_HEADER)
            for entry in directory:
                print(format_entry(entry))
            print(f"TOTAL ADUS ALLOCATED:  {directory.total_allocated()}")

    def list_entries(self, entries: list[DirectoryEntry]) -> None:
        """Output listing rows for selected entries."""
        if self.json_mode:
            output = {"status": "success", "files": [entry.to_dict() for entry in entries]}
            print(json.dumps(output))
        else:
            for entry in entries:
                print(format_entry(entry))

    def copied(self, entry: DirectoryEntry) -> None:
        """Output one line per extracted file."""
        if not self.json_mode:
            first = entry.adus[0] if entry.adus else ''
            print(f"{entry.full_name}: {first}")
