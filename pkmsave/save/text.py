"""Text and number encodings used inside save files.

Gen 1 text:   0x50 terminates, 0x80-0x99 = A-Z, 0xA0-0xB9 = a-z, 0xE8 = the
              brand glyph (rendered as 'P'). The last byte of a fixed-width
              field is always treated as the terminator.
Gen 2/3 text: byte value indexes an ordered symbol table, 0xFF terminates.
Money:        3 bytes of packed decimal, one digit per nibble.
"""
from __future__ import annotations

from typing import Union

from pkmsave.config import MAX_NAME_LENGTH

GEN1_TERMINATOR = 0x50
GEN2_TERMINATOR = 0xFF
UNKNOWN_CHAR = "?"

_GEN2_CHARSET = (
    " ", "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L", "M", "N", "O",
    "P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z", "(", ")", ":", ";", "[",
    "]", "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m", "n", "o",
    "p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z", "Ä", "Ö", "Ü", "ä", "ö",
    "ü", "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "!", "?", ".", "-", "&",
    "é", "→", "←", "‘", "’", "♂", "♀", "/", ",", ".", "…",
)


def _gen1_char(byte: int) -> str:
    if 0x80 <= byte <= 0x99:
        return chr(ord("A") + byte - 0x80)
    if 0xA0 <= byte <= 0xB9:
        return chr(ord("a") + byte - 0xA0)
    if byte == 0xE8:
        return "P"
    return UNKNOWN_CHAR


def decode_gen1_text(data: bytes, length: int = MAX_NAME_LENGTH) -> str:
    """Decode a fixed-width Gen 1 string of `length` bytes.

    The final slot is reserved for the terminator, so at most `length - 1`
    characters come back even when no 0x50 byte is present.
    """
    chars = []
    for byte in data[:max(length - 1, 0)]:
        if byte == GEN1_TERMINATOR:
            break
        chars.append(_gen1_char(byte))
    return "".join(chars)


def decode_gen2_text(data: bytes, length: int = MAX_NAME_LENGTH) -> str:
    """Decode a Gen 2/3 string, stopping at 0xFF, `length` bytes or the name limit."""
    chars: list[str] = []
    for byte in data[:length]:
        if byte == GEN2_TERMINATOR or len(chars) >= MAX_NAME_LENGTH:
            break
        if byte < len(_GEN2_CHARSET):
            chars.append(_GEN2_CHARSET[byte])
        else:
            chars.append(UNKNOWN_CHAR)
    return "".join(chars)


def clip_name(text: str) -> str:
    """Apply the 10-character display limit shared by all names."""
    return text[:MAX_NAME_LENGTH]


def decode_bcd(raw: bytes) -> int:
    """Decode 3 packed-decimal bytes into an integer (nibbles are not validated)."""
    b0, b1, b2 = raw[0], raw[1], raw[2]
    return (
        (b0 & 0x0F) * 100000 + ((b0 >> 4) & 0x0F) * 1000000
        + (b1 & 0x0F) * 1000 + ((b1 >> 4) & 0x0F) * 10000
        + (b2 & 0x0F) * 10 + ((b2 >> 4) & 0x0F) * 100
    )


def count_bits(data: Union[int, bytes]) -> int:
    """Population count of an integer bit-field or of every byte in a buffer."""
    if isinstance(data, int):
        return bin(data).count("1")
    return sum(bin(b).count("1") for b in data)
