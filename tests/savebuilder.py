"""Build synthetic save buffers with known values at the real offsets."""
from __future__ import annotations

import struct

from pkmsave.save.constants import GEN1_LAYOUT, GEN2_LAYOUT, GameBoyLayout

GEN1_TEXT_END = 0x50
GEN2_TEXT_END = 0xFF


def gen1_text(text: str) -> bytes:
    """Encode A-Z / a-z in the Gen 1 charset, terminated with 0x50."""
    out = bytearray()
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(0x80 + ord(ch) - ord("A"))
        elif "a" <= ch <= "z":
            out.append(0xA0 + ord(ch) - ord("a"))
        else:
            raise ValueError(ch)
    out.append(GEN1_TEXT_END)
    return bytes(out)


def gen2_text(text: str) -> bytes:
    """Encode A-Z / a-z in the Gen 2/3 charset, terminated with 0xFF."""
    out = bytearray()
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(1 + ord(ch) - ord("A"))
        elif "a" <= ch <= "z":
            out.append(0x21 + ord(ch) - ord("a"))
        else:
            raise ValueError(ch)
    out.append(GEN2_TEXT_END)
    return bytes(out)


def put(buf: bytearray, offset: int, data: bytes) -> None:
    buf[offset:offset + len(data)] = data


def put_creature(buf: bytearray, layout: GameBoyLayout, index: int, *, species: int,
                 level: int, hp: tuple[int, int] = (20, 20),
                 stats: tuple[int, ...] = (10, 11, 12, 13, 14),
                 moves: tuple[int, ...] = (0, 0, 0, 0),
                 pp: tuple[int, ...] = (0, 0, 0, 0),
                 nickname: bytes | None = None) -> None:
    """Write one party slot. `stats` is attack, defense, speed, special, special defense."""
    buf[layout.party_species + index] = species
    base = layout.party_data + index * layout.party_stride
    current_hp, max_hp = hp
    struct.pack_into(">H", buf, base + 0x01, current_hp)
    struct.pack_into(">H", buf, base + 0x22, max_hp)
    attack, defense, speed, special, special_defense = stats
    struct.pack_into(">HHHH", buf, base + 0x24, attack, defense, speed, special)
    if layout.has_special_defense:
        struct.pack_into(">H", buf, base + 0x2C, special_defense)
    buf[base + layout.level_field] = level
    put(buf, base + 0x08, bytes(moves))
    put(buf, base + 0x0C, bytes(pp))
    end = GEN1_TEXT_END if layout is GEN1_LAYOUT else GEN2_TEXT_END
    put(buf, layout.nicknames + index * 11, nickname if nickname is not None else bytes([end]))


def gen1_save(name: str = "RED", money: bytes = b"\x00\x03\x00", badges: int = 0,
              playtime: tuple[int, int, int] = (0, 0, 0), party_count: int = 0) -> bytearray:
    layout = GEN1_LAYOUT
    buf = bytearray(layout.save_size)
    put(buf, layout.player_name, gen1_text(name))
    put(buf, layout.money, money)
    buf[layout.badges] = badges
    buf[layout.playtime_hours], buf[layout.playtime_minutes], buf[layout.playtime_seconds] = playtime
    buf[layout.party_count] = party_count
    return buf


def gen2_save(name: str = "GOLD", money: bytes = b"\x00\x00\x00", badges: int = 0,
              playtime: tuple[int, int, int] = (0, 0, 0), party_count: int = 0) -> bytearray:
    layout = GEN2_LAYOUT
    buf = bytearray(layout.save_size)
    put(buf, layout.player_name, gen2_text(name))
    put(buf, layout.money, money)
    struct.pack_into("<H", buf, layout.badges, badges)
    buf[layout.playtime_hours], buf[layout.playtime_minutes], buf[layout.playtime_seconds] = playtime
    buf[layout.party_count] = party_count
    return buf
