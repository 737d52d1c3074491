"""Export decoded records as JSON."""
from __future__ import annotations

import json
from typing import Optional

from pkmsave.save.models import DecodeStatus, TrainerRecord
from pkmsave.save.tables import species_name


def record_to_dict(record: TrainerRecord) -> dict:
    """Convert a trainer record into plain JSON-serialisable data."""
    data = {
        "name": record.name,
        "generation": int(record.generation),
        "game": record.generation.label,
        "money": record.money,
        "badges": f"0x{record.badges:04X}",
        "badge_count": record.badge_count,
        "play_time": record.play_time,
        "play_time_formatted": record.play_time_formatted,
        "party_count": record.party_count,
        "party": [],
    }
    if record.rival_name is not None:
        data["rival_name"] = record.rival_name
    if record.pokedex_owned is not None:
        data["pokedex"] = {"owned": record.pokedex_owned, "seen": record.pokedex_seen}

    for mon in record.party:
        data["party"].append({
            "species_id": mon.species_id,
            "species": species_name(mon.species_id),
            "nickname": mon.nickname,
            "level": mon.level,
            "hp": {"current": mon.current_hp, "max": mon.max_hp},
            "stats": {
                "attack": mon.attack,
                "defense": mon.defense,
                "speed": mon.speed,
                "special_attack": mon.special_attack,
                "special_defense": mon.special_defense,
            },
            "moves": [
                {"name": move, "pp": pp, "max_pp": max_pp}
                for move, pp, max_pp in zip(mon.moves, mon.move_pp, mon.move_max_pp)
            ],
        })
    return data


def export_json(record: TrainerRecord, status: Optional[DecodeStatus] = None) -> str:
    """Export a record as a JSON string, optionally tagged with its decode status."""
    data = record_to_dict(record)
    if status is not None:
        data = {"status": status.value, **data}
    return json.dumps(data, indent=2, ensure_ascii=False)
