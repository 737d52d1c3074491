"""Save decoders for the three handheld generations.

Gen 1 and Gen 2 share one layout-driven decoder: both store a trainer block at
fixed offsets, a party count byte, a species list, fixed-stride party records
and a table of 11-byte nicknames. Gen 3 offsets are not treated as reliable,
so its party is located by scanning the save for a plausible species list.
"""
from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Callable

from pkmsave.config import GEN3_SAVE_SIZE, MAX_PARTY_SIZE, NAME_FIELD_SIZE
from pkmsave.save.constants import (
    GEN1_LAYOUT,
    GEN1_POKEDEX_BYTES,
    GEN1_POKEDEX_OWNED,
    GEN1_POKEDEX_SEEN,
    GEN1_RIVAL_NAME,
    GEN2_LAYOUT,
    GEN3_MAX_SPECIES,
    GEN3_PARTY_DATA,
    GEN3_PARTY_STRIDE,
    GEN3_PLACEHOLDER_MOVE,
    GEN3_PLACEHOLDER_PP,
    GEN3_PLACEHOLDER_TRAINER,
    GEN3_SAMPLE_PARTY,
    GEN3_SCAN_STRIDE,
    GEN3_SCAN_TAIL,
    GEN3_SPECIES_LIST,
    MON_ATTACK,
    MON_CURRENT_HP,
    MON_DEFENSE,
    MON_MAX_HP,
    MON_MOVES,
    MON_PP,
    MON_SPECIAL,
    MON_SPECIAL_DEFENSE,
    MON_SPEED,
    MOVE_SLOTS,
    GameBoyLayout,
)
from pkmsave.save.detect import Generation, detect_generation
from pkmsave.save.models import Creature, DecodeResult, DecodeStatus, TrainerRecord
from pkmsave.save.tables import (
    NO_MOVE,
    UNKNOWN_NAME,
    move_base_pp,
    move_name,
    species_name,
)
from pkmsave.save.text import (
    clip_name,
    count_bits,
    decode_bcd,
    decode_gen1_text,
    decode_gen2_text,
)

logger = logging.getLogger(__name__)

_U16_BE = struct.Struct(">H")   # Game Boy stats
_U16_LE = struct.Struct("<H")   # Gen 3 species ids

_NAME_BYTES = NAME_FIELD_SIZE - 1

TextDecoder = Callable[[bytes, int], str]


def _size_mismatch(data: bytes, expected: int, generation: Generation) -> DecodeResult:
    message = f"{generation.label} saves are {expected} bytes, got {len(data)}"
    logger.warning(message)
    return DecodeResult(status=DecodeStatus.SIZE_MISMATCH, size=len(data), message=message)


def _read_name(data: bytes, offset: int, decode_text: TextDecoder) -> str:
    return clip_name(decode_text(data[offset:offset + _NAME_BYTES], _NAME_BYTES))


def _resolve_move(move_id: int) -> str:
    return clip_name(move_name(move_id) or UNKNOWN_NAME)


def _fallback_nickname(species_id: int) -> str:
    return clip_name(species_name(species_id) or UNKNOWN_NAME)


def _read_game_boy_creature(data: bytes, layout: GameBoyLayout, index: int,
                            decode_text: TextDecoder) -> Creature:
    """Decode party slot `index` of a Gen 1/2 save."""
    species_id = data[layout.party_species + index]
    base = layout.party_data + index * layout.party_stride

    def u16(field_offset: int) -> int:
        return _U16_BE.unpack_from(data, base + field_offset)[0]

    special_attack = u16(MON_SPECIAL)
    # Gen 1 has a single Special stat
    special_defense = u16(MON_SPECIAL_DEFENSE) if layout.has_special_defense else special_attack

    move_ids = data[base + MON_MOVES:base + MON_MOVES + MOVE_SLOTS]
    moves = tuple(_resolve_move(move_id) for move_id in move_ids)
    move_pp = tuple(data[base + MON_PP + m] for m in range(MOVE_SLOTS))

    nickname = _read_name(data, layout.nicknames + index * NAME_FIELD_SIZE, decode_text)
    if not nickname:
        nickname = _fallback_nickname(species_id)

    return Creature(
        species_id=species_id,
        nickname=nickname,
        level=data[base + layout.level_field],
        current_hp=u16(MON_CURRENT_HP),
        max_hp=u16(MON_MAX_HP),
        attack=u16(MON_ATTACK),
        defense=u16(MON_DEFENSE),
        speed=u16(MON_SPEED),
        special_attack=special_attack,
        special_defense=special_defense,
        moves=moves,  # type: ignore[arg-type]
        move_pp=move_pp,  # type: ignore[arg-type]
        move_max_pp=tuple(move_base_pp(move_id) for move_id in move_ids),
    )


def _decode_game_boy(data: bytes, layout: GameBoyLayout, generation: Generation,
                     decode_text: TextDecoder) -> DecodeResult:
    if len(data) != layout.save_size:
        return _size_mismatch(data, layout.save_size, generation)

    badges = 0
    for i in range(layout.badge_bytes):
        badges |= data[layout.badges + i] << (8 * i)

    raw_count = data[layout.party_count]
    party_count = min(raw_count, MAX_PARTY_SIZE)
    if raw_count > MAX_PARTY_SIZE:
        logger.debug("Party count byte 0x%02X at 0x%04X clamped to %d",
                     raw_count, layout.party_count, MAX_PARTY_SIZE)

    party = tuple(
        _read_game_boy_creature(data, layout, i, decode_text)
        for i in range(party_count)
    )

    extras = {}
    if generation is Generation.GEN1:
        extras = {
            "rival_name": _read_name(data, GEN1_RIVAL_NAME, decode_text),
            "pokedex_owned": count_bits(
                data[GEN1_POKEDEX_OWNED:GEN1_POKEDEX_OWNED + GEN1_POKEDEX_BYTES]),
            "pokedex_seen": count_bits(
                data[GEN1_POKEDEX_SEEN:GEN1_POKEDEX_SEEN + GEN1_POKEDEX_BYTES]),
        }

    record = TrainerRecord(
        name=_read_name(data, layout.player_name, decode_text),
        money=decode_bcd(data[layout.money:layout.money + 3]),
        badges=badges,
        play_time=(data[layout.playtime_hours] * 3600
                   + data[layout.playtime_minutes] * 60
                   + data[layout.playtime_seconds]),
        generation=generation,
        party=party,
        **extras,
    )
    logger.debug("Decoded %s save: trainer=%r party=%d",
                 generation.name, record.name, record.party_count)
    return DecodeResult(status=DecodeStatus.DECODED, record=record, size=len(data))


def decode_gen1(data: bytes) -> DecodeResult:
    """Decode a Red/Blue/Yellow save (32 KiB)."""
    return _decode_game_boy(data, GEN1_LAYOUT, Generation.GEN1, decode_gen1_text)


def decode_gen2(data: bytes) -> DecodeResult:
    """Decode a Gold/Silver/Crystal save (64 KiB)."""
    return _decode_game_boy(data, GEN2_LAYOUT, Generation.GEN2, decode_gen2_text)


def find_gen3_party(data: bytes) -> int | None:
    """Return the offset of the first plausible party count byte, or None.

    A candidate is a byte in 1..6 on a 4-byte boundary whose following
    little-endian species entries all fall in 1..386.
    """
    for offset in range(0, len(data) - GEN3_SCAN_TAIL, GEN3_SCAN_STRIDE):
        count = data[offset]
        if not 1 <= count <= MAX_PARTY_SIZE:
            continue
        species_start = offset + GEN3_SPECIES_LIST
        if all(
            1 <= _U16_LE.unpack_from(data, species_start + 2 * i)[0] <= GEN3_MAX_SPECIES
            for i in range(count)
        ):
            return offset
    return None


def _synthesized_creature(species_id: int, index: int) -> Creature:
    """Party member with a real species id and stats derived from its slot."""
    stat = 40 + 5 * index
    hp = 50 + 10 * index
    nickname = species_name(species_id) or f"Pokemon {species_id}"
    return Creature(
        species_id=species_id,
        nickname=clip_name(nickname),
        level=30 + 5 * index,
        current_hp=hp,
        max_hp=hp,
        attack=stat,
        defense=stat,
        speed=stat,
        special_attack=stat,
        special_defense=stat,
        moves=(GEN3_PLACEHOLDER_MOVE,) * MOVE_SLOTS,  # type: ignore[arg-type]
        move_pp=(GEN3_PLACEHOLDER_PP,) * MOVE_SLOTS,  # type: ignore[arg-type]
    )


def _sample_party() -> tuple[Creature, ...]:
    return tuple(
        Creature(
            species_id=species_id,
            nickname=nickname,
            level=level,
            current_hp=hp,
            max_hp=hp,
            attack=attack,
            defense=defense,
            speed=speed,
            special_attack=sp_atk,
            special_defense=sp_def,
            moves=(NO_MOVE,) * MOVE_SLOTS,  # type: ignore[arg-type]
            move_pp=(0,) * MOVE_SLOTS,  # type: ignore[arg-type]
            move_max_pp=(0,) * MOVE_SLOTS,
        )
        for species_id, nickname, level, hp, attack, defense, speed, sp_atk, sp_def
        in GEN3_SAMPLE_PARTY
    )


def decode_gen3(data: bytes) -> DecodeResult:
    """Decode a Ruby/Sapphire/Emerald/FireRed/LeafGreen save (128 KiB).

    Trainer fields stay at placeholder values. The party is located by
    find_gen3_party(); only species ids are read, everything else is
    synthesized (status HEURISTIC). When no candidate exists a fixed sample
    party is returned (status FABRICATED). Both count as successful decodes.
    """
    if len(data) != GEN3_SAVE_SIZE:
        return _size_mismatch(data, GEN3_SAVE_SIZE, Generation.GEN3)

    offset = find_gen3_party(data)
    if offset is None:
        message = "No party data located, returning sample party"
        logger.warning(message)
        status = DecodeStatus.FABRICATED
        party = _sample_party()
        warnings = (message,)
    else:
        count = data[offset]
        party_start = offset + GEN3_PARTY_DATA
        logger.debug("Gen 3 party candidate at 0x%05X (count=%d)", offset, count)
        party = tuple(
            _synthesized_creature(
                _U16_LE.unpack_from(data, party_start + i * GEN3_PARTY_STRIDE)[0], i)
            for i in range(count)
        )
        status = DecodeStatus.HEURISTIC
        warnings = (f"Party located by scan at 0x{offset:05X}; stats and moves are estimated",)

    record = TrainerRecord(
        name=GEN3_PLACEHOLDER_TRAINER,
        money=0,
        badges=0,
        play_time=0,
        generation=Generation.GEN3,
        party=party,
    )
    return DecodeResult(status=status, record=record, size=len(data), warnings=warnings)


_DECODERS: dict[Generation, Callable[[bytes], DecodeResult]] = {
    Generation.GEN1: decode_gen1,
    Generation.GEN2: decode_gen2,
    Generation.GEN3: decode_gen3,
}


def decode_save(data: bytes) -> DecodeResult:
    """Detect the generation of `data` and run the matching decoder."""
    generation = detect_generation(data)
    decoder = _DECODERS.get(generation)
    if decoder is None:
        message = f"Unknown or unsupported save format ({len(data)} bytes)"
        logger.warning(message)
        return DecodeResult(status=DecodeStatus.UNKNOWN_GENERATION,
                            size=len(data), message=message)
    return decoder(data)


def decode_file(path: Path) -> DecodeResult:
    """Read a save file from disk and decode it."""
    with open(path, "rb") as f:
        data = f.read()
    logger.debug("Read %s (%d bytes)", path, len(data))
    return decode_save(data)


def main():
    """Quick test: decode a save and print the trainer summary."""
    import sys
    if len(sys.argv) < 2:
        print("Usage: python -m pkmsave.save.reader <path/to/game.sav>")
        sys.exit(1)

    path = Path(sys.argv[1])
    result = decode_file(path)
    print(f"{path.name}: {result.status.value} ({result.size:,} bytes)")
    if result.record is None:
        print(result.message)
        sys.exit(1)

    rec = result.record
    print(f"\n{rec.generation.label}")
    print(f"Trainer: {rec.name}  Money: ${rec.money}  Badges: {rec.badge_count}  "
          f"Time: {rec.play_time_formatted}")
    for i, mon in enumerate(rec.party, 1):
        print(f"  {i}. #{mon.species_id:03d} {mon.nickname:<10} Lv.{mon.level}")


if __name__ == "__main__":
    main()
