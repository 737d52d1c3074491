"""Species and move name lookups (representative subset of the catalog)."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


def lookup_name(table: Mapping[int, str], value: int) -> Optional[str]:
    """Return the display name for an id, or None when the table has no entry."""
    return table.get(value)


SPECIES_NAMES: Mapping[int, str] = MappingProxyType({
    0: "None",
    1: "Bulbasaur", 2: "Ivysaur", 3: "Venusaur",
    4: "Charmander", 5: "Charmeleon", 6: "Charizard",
    7: "Squirtle", 8: "Wartortle", 9: "Blastoise",
    10: "Caterpie", 11: "Metapod", 12: "Butterfree",
    13: "Weedle", 14: "Kakuna", 15: "Beedrill",
    16: "Pidgey", 17: "Pidgeotto", 18: "Pidgeot",
    19: "Rattata", 20: "Raticate", 21: "Spearow",
    22: "Fearow", 23: "Ekans", 24: "Arbok",
    25: "Pikachu", 26: "Raichu",
    # Johto starters
    152: "Chikorita", 155: "Cyndaquil", 158: "Totodile",
    # Hoenn starters and the Gen 3 sample party
    252: "Treecko", 255: "Torchic", 258: "Mudkip",
    276: "Taillow", 304: "Aron",
})

MOVE_NAMES: Mapping[int, str] = MappingProxyType({
    0: "None",
    1: "Pound", 2: "Karate Chop", 3: "Double Slap",
    4: "Comet Punch", 5: "Mega Punch", 6: "Pay Day",
    7: "Fire Punch", 8: "Ice Punch", 9: "Thunder Punch",
    10: "Scratch", 11: "Vice Grip", 12: "Guillotine",
    13: "Razor Wind", 14: "Swords Dance", 15: "Cut",
    16: "Gust", 17: "Wing Attack", 18: "Whirlwind",
    19: "Fly", 20: "Bind", 21: "Slam",
    22: "Vine Whip", 23: "Stomp", 24: "Double Kick",
    25: "Mega Kick", 26: "Jump Kick", 27: "Rolling Kick",
    28: "Sand Attack", 29: "Headbutt", 30: "Horn Attack",
    31: "Fury Attack", 32: "Horn Drill", 33: "Tackle",
    34: "Body Slam", 35: "Wrap", 36: "Take Down",
    37: "Thrash", 38: "Double-Edge", 39: "Tail Whip",
    40: "Poison Sting", 41: "Twineedle", 42: "Pin Missile",
    43: "Leer", 44: "Bite", 45: "Growl",
    46: "Roar", 47: "Sing", 48: "Supersonic",
    49: "Sonic Boom", 50: "Disable", 51: "Acid",
    52: "Ember", 53: "Flamethrower", 54: "Mist",
    55: "Water Gun", 56: "Hydro Pump", 57: "Surf",
    58: "Ice Beam", 59: "Blizzard", 60: "Psybeam",
    85: "Thunderbolt", 86: "Thunder Wave", 87: "Thunder",
    98: "Quick Attack",
})

# Base PP before PP Ups; ids missing here have no known maximum.
MOVE_BASE_PP: Mapping[int, int] = MappingProxyType({
    0: 0,
    1: 35, 2: 25, 3: 10, 4: 15, 5: 20, 6: 20,
    7: 15, 8: 15, 9: 15, 10: 35, 11: 30, 12: 5,
    13: 10, 14: 30, 15: 30, 16: 35, 17: 35, 18: 20,
    19: 15, 20: 20, 21: 20, 22: 10, 23: 20, 24: 30,
    25: 5, 26: 25, 27: 15, 28: 15, 29: 15, 30: 25,
    31: 20, 32: 5, 33: 35, 34: 15, 35: 20, 36: 20,
    37: 20, 38: 15, 39: 30, 40: 35, 41: 20, 42: 20,
    43: 30, 44: 25, 45: 40, 46: 20, 47: 15, 48: 20,
    49: 20, 50: 20, 51: 30, 52: 25, 53: 15, 54: 30,
    55: 25, 56: 5, 57: 15, 58: 10, 59: 5, 60: 20,
    85: 15, 86: 20, 87: 10,
    98: 30,
})

NO_MOVE = "None"
UNKNOWN_NAME = "???"
UNKNOWN_SPECIES = "Unknown Pokemon"


def species_name(species_id: int) -> Optional[str]:
    return lookup_name(SPECIES_NAMES, species_id)


def move_name(move_id: int) -> Optional[str]:
    return lookup_name(MOVE_NAMES, move_id)


def move_base_pp(move_id: int) -> Optional[int]:
    return MOVE_BASE_PP.get(move_id)
