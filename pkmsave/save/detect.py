"""Save generation detection."""
from __future__ import annotations

from enum import IntEnum

from pkmsave.config import GEN1_SAVE_SIZE, GEN2_SAVE_SIZE, GEN3_SAVE_SIZE


class Generation(IntEnum):
    UNKNOWN = 0
    GEN1 = 1    # Red / Blue / Yellow
    GEN2 = 2    # Gold / Silver / Crystal
    GEN3 = 3    # Ruby / Sapphire / Emerald / FireRed / LeafGreen

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Generation.UNKNOWN: "Unknown",
    Generation.GEN1: "Generation 1 (Red/Blue/Yellow)",
    Generation.GEN2: "Generation 2 (Gold/Silver/Crystal)",
    Generation.GEN3: "Generation 3 (Ruby/Sapphire/Emerald/FireRed/LeafGreen)",
}

_SIZES = {
    GEN1_SAVE_SIZE: Generation.GEN1,
    GEN2_SAVE_SIZE: Generation.GEN2,
    GEN3_SAVE_SIZE: Generation.GEN3,
}


def detect_generation(data: bytes) -> Generation:
    """Classify a save by its total length. The contents are not inspected."""
    return _SIZES.get(len(data), Generation.UNKNOWN)
