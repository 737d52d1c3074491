"""Default paths and constants for save-file decoding."""
from pathlib import Path


_REPORT_SUFFIXES = {
    "text": ".txt",
    "json": ".json",
    "html": ".html",
    "page": ".html",
}


def derive_report_path(save: Path, fmt: str) -> Path:
    """Derive the report path for a save (sibling file, suffix by format)."""
    return save.with_suffix(_REPORT_SUFFIXES.get(fmt, ".txt"))


# Save file sizes, one per generation
GEN1_SAVE_SIZE = 32768      # Red / Blue / Yellow
GEN2_SAVE_SIZE = 65536      # Gold / Silver / Crystal
GEN3_SAVE_SIZE = 131072     # Ruby / Sapphire / Emerald / FireRed / LeafGreen

# Party and name limits shared by all generations
MAX_PARTY_SIZE = 6
MAX_NAME_LENGTH = 10        # printable characters, terminator not counted
NAME_FIELD_SIZE = 11        # bytes per name slot in the save (10 + terminator)

# Output formats understood by `pkmsave show`
OUTPUT_FORMATS = ("text", "json", "html", "page")
DEFAULT_FORMAT = "text"
