"""
Command handlers for TA 1600 disk image utilities.
"""

from pathlib import Path

from .constants import OWNER_WIDTH_LONG
from .disk import TADiskImage
from .exceptions import DiskError, FileNotFoundError, TADiskError
from .extractor import destination_path, write_entry
from .formatter import OutputFormatter
from .logging_config import get_logger
from .models import DirectoryEntry

log = get_logger('commands')

WILDCARD = '*'


def _open_disk(args, formatter: OutputFormatter) -> TADiskImage | None:
    """Open the image named in args, reporting failures."""
    owner_width = getattr(args, 'owner_width', OWNER_WIDTH_LONG)
    try:
        return TADiskImage(args.image, owner_width=owner_width)
    except DiskError as e:
        formatter.error(str(e))
    except TADiskError as e:
        formatter.error(f"Can't recognize {args.image} as disk image: {e}")
    return None


def _select_entries(disk: TADiskImage, names: list[str], formatter: OutputFormatter) -> tuple[list[DirectoryEntry], bool]:
    """
    Resolve names ('*' selects everything) against the directory.

    Returns the entries found and whether every name was found. Misses
    are reported and skipped.
    """
    entries = []
    all_found = True
    for name in names:
        if name == WILDCARD:
            entries.extend(disk.directory)
            continue

        try:
            entries.append(disk.directory.get(name))
        except FileNotFoundError as e:
            formatter.error(str(e))
            all_found = False
    return entries, all_found


def cmd_info(args, formatter: OutputFormatter) -> int:
    """Handle the 'info' command."""
    disk = _open_disk(args, formatter)
    if disk is None:
        return 1

    with disk:
        formatter.volume_summary(disk.volume, args.image)
    return 0


def cmd_dir(args, formatter: OutputFormatter) -> int:
    """Handle the 'dir' command."""
    disk = _open_disk(args, formatter)
    if disk is None:
        return 1

    names = getattr(args, 'names', None) or []

    with disk:
        if not names:
            formatter.list_directory(disk.volume, disk.directory, args.image)
            return 0

        entries, all_found = _select_entries(disk, names, formatter)
        formatter.list_entries(entries)
        return 0 if all_found else 1


def cmd_copy(args, formatter: OutputFormatter) -> int:
    """Handle the 'copy' command."""
    names = getattr(args, 'names', None) or []
    if not names:
        formatter.error("Missing filename after 'copy'")
        return 1

    disk = _open_disk(args, formatter)
    if disk is None:
        return 1

    dest_dir = Path(getattr(args, 'dest', None) or '.')
    status = 0

    with disk:
        entries, all_found = _select_entries(disk, names, formatter)
        if not all_found:
            status = 1

        total_files = 0
        total_bytes = 0
        copied_files = []
        written_paths = set()

        for entry in entries:
            try:
                dest = destination_path(entry, dest_dir)
                if dest in written_paths:
                    log.warning("%s: %s already copied in this batch, overwriting", entry.full_name, dest)
                dest, size = write_entry(entry, disk.reader, dest_dir)
            except (TADiskError, OSError, ValueError) as e:
                formatter.error(f"{entry.full_name}: {e}")
                status = 1
                continue

            written_paths.add(dest)
            formatter.copied(entry)
            total_files += 1
            total_bytes += size
            copied_files.append({
                "name": entry.full_name,
                "size": size,
                "dest": str(dest)
            })

        formatter.success(
            f"Copied {total_files} file(s), {total_bytes:,} bytes total",
            source=args.image,
            dest=str(dest_dir),
            files=total_files,
            bytes=total_bytes,
            copied=copied_files
        )

    return status
