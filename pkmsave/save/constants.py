"""Save layout constants: absolute offsets, strides and field positions.

Offsets are those of the English releases. Multi-byte stats in the Game Boy
generations are big-endian; Gen 3 species ids are little-endian.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameBoyLayout:
    """Absolute offsets of the trainer block and party for a Gen 1/2 save."""
    save_size: int
    player_name: int
    money: int
    badges: int
    badge_bytes: int        # 1 (Kanto) or 2 (Johto + Kanto)
    playtime_hours: int
    playtime_minutes: int
    playtime_seconds: int
    party_count: int
    party_species: int
    party_data: int
    party_stride: int       # bytes per party creature record
    nicknames: int
    level_field: int        # level offset inside a creature record
    has_special_defense: bool


GEN1_LAYOUT = GameBoyLayout(
    save_size=32768,
    player_name=0x2598,
    money=0x25F3,
    badges=0x2602,
    badge_bytes=1,
    playtime_hours=0x2CED,
    playtime_minutes=0x2CEE,
    playtime_seconds=0x2CEF,
    party_count=0x2F2C,
    party_species=0x2F2D,
    party_data=0x2F34,
    party_stride=44,
    nicknames=0x307E,
    level_field=0x21,
    has_special_defense=False,
)

GEN2_LAYOUT = GameBoyLayout(
    save_size=65536,
    player_name=0x2009,
    money=0x23DB,
    badges=0x23E4,
    badge_bytes=2,
    playtime_hours=0x2054,
    playtime_minutes=0x2055,
    playtime_seconds=0x2056,
    party_count=0x288A,
    party_species=0x288B,
    party_data=0x2897,
    party_stride=48,
    nicknames=0x2A15,
    level_field=0x1F,
    has_special_defense=True,
)

# Gen 1 extras
GEN1_RIVAL_NAME = 0x25F6
GEN1_POKEDEX_OWNED = 0x25A3
GEN1_POKEDEX_SEEN = 0x25B6
GEN1_POKEDEX_BYTES = 19         # 151 flags, one bit each

# Creature record fields (relative to the start of a Gen 1/2 party entry)
MON_CURRENT_HP = 0x01
MON_MOVES = 0x08
MON_PP = 0x0C
MON_MAX_HP = 0x22
MON_ATTACK = 0x24
MON_DEFENSE = 0x26
MON_SPEED = 0x28
MON_SPECIAL = 0x2A              # "Special" in Gen 1, Special Attack in Gen 2
MON_SPECIAL_DEFENSE = 0x2C
MOVE_SLOTS = 4

# Gen 3 heuristic scan
GEN3_SCAN_STRIDE = 4
GEN3_SCAN_TAIL = 0x1000         # bytes at the end of the save that are never scanned
GEN3_SPECIES_LIST = 4           # species entries start this far past the count byte
GEN3_PARTY_DATA = 8             # party records start this far past the count byte
GEN3_PARTY_STRIDE = 100
GEN3_MAX_SPECIES = 386
GEN3_PLACEHOLDER_MOVE = "Unknown"
GEN3_PLACEHOLDER_PP = 10
GEN3_PLACEHOLDER_TRAINER = "Unknown"

# (species_id, nickname, level, hp, attack, defense, speed, sp_atk, sp_def)
GEN3_SAMPLE_PARTY = (
    (252, "Treecko", 18, 52, 36, 30, 45, 40, 35),
    (276, "Taillow", 15, 40, 32, 20, 38, 22, 18),
    (304, "Aron", 14, 45, 35, 50, 18, 20, 25),
)
