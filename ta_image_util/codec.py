"""
EBCDIC to text translation for TA 1600 label and directory fields.

The table maps every byte value to one character. Codes without a
printable counterpart map to PLACEHOLDER. File contents are never
translated, only metadata fields.
"""

PLACEHOLDER = '·'

#                0123456789ABCDEF
EBCDIC_TABLE = (
    '\x00····\x08·\x7f·····\x0d··'     # 0x00
    '·····\x0a\x08·········'           # 0x10
    '·····\x0a·\x1b·······\x07'        # 0x20
    '················'                 # 0x30
    ' ·········¢.<(+|'                 # 0x40
    '&·········!$*);¬'                 # 0x50
    '-/········|,%_>?'                 # 0x60
    '·········`:#@\'="'                # 0x70
    '·abcdefghi·····±'                 # 0x80
    '·jklmnopqr······'                 # 0x90
    '·~stuvwxyz······'                 # 0xA0
    '^·········[]····'                 # 0xB0
    '{ABCDEFGHI······'                 # 0xC0
    '}JKLMNOPQR······'                 # 0xD0
    '\\ÜSTUVWXYZ······'                # 0xE0
    '0123456789······'                 # 0xF0
)


def decode(data: bytes) -> str:
    """Translate EBCDIC bytes to a string, one character per byte."""
    return ''.join(EBCDIC_TABLE[b] for b in data)
