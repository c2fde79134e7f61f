"""
TA 1600 floppy disk image.

Ties the record reader, the VOL1 label and the directory tree together.
"""

from .constants import OWNER_WIDTH_LONG
from .directory import DirectoryTree
from .logging_config import get_logger
from .models import VolumeLabel
from .reader import RecordReader

log = get_logger('disk')


class TADiskImage:
    """A TA 1600 disk image opened read-only."""

    def __init__(self, image_path: str, owner_width: int = OWNER_WIDTH_LONG):
        self.image_path = image_path
        self.reader = RecordReader.open(image_path)
        try:
            self.volume = VolumeLabel.from_reader(self.reader, owner_width=owner_width)
            log.debug("Volume %r, owner %r", self.volume.identifier, self.volume.owner)
            self.directory = DirectoryTree.build_root(self.reader)
        except Exception:
            self.reader.close()
            raise

    def close(self) -> None:
        self.reader.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
