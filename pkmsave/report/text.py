"""Plain-text rendering of decoded trainer records."""
from __future__ import annotations

from typing import Optional

from pkmsave.save.detect import Generation
from pkmsave.save.models import TrainerRecord
from pkmsave.save.tables import UNKNOWN_SPECIES, species_name


def format_pp(pp: int, max_pp: Optional[int]) -> str:
    """"35/35", or just "35" when the maximum is unknown."""
    return f"{pp}/{max_pp}" if max_pp is not None else str(pp)


def render_text(record: TrainerRecord) -> str:
    lines = []
    lines.append(f"Trainer: {record.name}")
    lines.append(f"Game:    {record.generation.label}")
    lines.append(f"Money:   ${record.money}")
    lines.append(f"Badges:  {record.badge_count} (0x{record.badges:04X})")
    lines.append(f"Time:    {record.play_time_formatted}")
    if record.rival_name:
        lines.append(f"Rival:   {record.rival_name}")
    if record.pokedex_owned is not None:
        lines.append(f"Pokedex: {record.pokedex_owned} owned, {record.pokedex_seen} seen")
    lines.append("")

    lines.append(f"=== PARTY ({record.party_count}) ===")
    for i, mon in enumerate(record.party, 1):
        species = species_name(mon.species_id) or UNKNOWN_SPECIES
        lines.append(f"  {i}. #{mon.species_id:03d} {species:<16} {mon.nickname:<10}  Lv.{mon.level}")
        stats = (f"      HP {mon.current_hp}/{mon.max_hp}  Atk {mon.attack}  "
                 f"Def {mon.defense}  Spe {mon.speed}  ")
        if record.generation is Generation.GEN1:
            stats += f"Spc {mon.special_attack}"
        else:
            stats += f"SpA {mon.special_attack}  SpD {mon.special_defense}"
        lines.append(stats)
        for move, pp, max_pp in mon.known_moves():
            lines.append(f"      - {move:<10} PP {format_pp(pp, max_pp)}")

    return "\n".join(lines)
