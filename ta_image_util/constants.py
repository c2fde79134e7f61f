"""
Constants for TA 1600 disk image utilities.
"""

# Disk geometry (ECMA-58 index cylinder layout)
SECTOR_SIZE = 128
SECTORS_PER_CYLINDER = 16
BYTES_PER_CYLINDER = SECTOR_SIZE * SECTORS_PER_CYLINDER  # 2048 bytes

# Allocation data units
ADU_SIZE = 512
ADU_BASE = 4                 # ADU numbering starts 4 units before image offset 0
ADU_LIST_OFFSET = 0x1C       # Allocation list starts at byte 28 of a record
ADU_PAIR_SIZE = 4            # count (u16 BE) + start (u16 BE)
ADU_SENTINEL = 0x20          # Blank byte terminates the allocation list

# System directory bootstrap
SYSTEM_ADU_COUNT = 1
SYSTEM_ADU_START = 8
SYSTEM_CHAIN_OFFSET = 256    # Second half of the system ADU holds the root chain
SYSTEM_CHAIN_LENGTH = 128

# Directory layout
DIR_NAME_SIZE = 8
DIR_MAX_SLOTS = 16           # 16 * 8 = 128 bytes of name table
DIR_ENTRY_STRIDE = 256       # Entry i lives at (i + 1) * 256 in the directory blob
DIR_ENTRY_SIZE = 128

# Directory entry offsets (0-based)
ENT_ORGANIZATION = 0
ENT_PRIVILEGE = 2
ENT_FLAGS = 4
ENT_BLOCK_SIZE = 6
ENT_RECORD_LENGTH = 8

# Directory entry flags
FLAG_DELETED = 0x04
FLAG_COMPRESSED = 0x20

# Organization codes
ORG_INX = 1
ORG_SEQ = 2
ORG_REL = 4
ORG_PGM = 5
ORG_DIR = 8
ORG_VCT = 9

# Volume label (VOL1) location and field offsets (1-based, as in ECMA-58)
VOL1_CYLINDER = 0
VOL1_SIDE = 0
VOL1_SECTOR = 7
VOL_IDENTIFIER = 5           # 6 bytes
VOL_ACCESSIBILITY = 11       # 1 byte
VOL_OWNER = 38               # 7 or 14 bytes
VOL_SURFACE = 72             # 1 byte
VOL_RECORD_LENGTH = 76       # 1 byte
VOL_SECTOR_SEQUENCE = 77     # 2 digits
VOL_ALLOCATION = 79          # 1 byte
VOL_VERSION = 80             # 1 byte

# The owner field width differs between revisions of the label layout
OWNER_WIDTH_SHORT = 7
OWNER_WIDTH_LONG = 14
OWNER_WIDTHS = (OWNER_WIDTH_SHORT, OWNER_WIDTH_LONG)
