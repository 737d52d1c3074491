"""Save profiles: a named save file plus how to report on it.

Each profile remembers the save path, the generation the file had when the
profile was added, the preferred output format and whether a Gen 3 save
without a locatable party should be rejected. Profiles live in a TOML file
under click's per-user app dir:

    default_profile = "red"

    [profiles.red]
    save = "/home/ash/saves/red.sav"
    generation = 1
    format = "text"
    strict = false
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

from pkmsave.config import DEFAULT_FORMAT, OUTPUT_FORMATS
from pkmsave.save.detect import Generation, detect_generation

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_PROFILE_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

_TOML_ESCAPES = {
    "\\": "\\\\", '"': '\\"',
    "\b": "\\b", "\t": "\\t", "\n": "\\n", "\f": "\\f", "\r": "\\r",
}


@dataclass
class Profile:
    name: str
    save: Path
    generation: Generation = Generation.UNKNOWN
    fmt: str = DEFAULT_FORMAT
    strict: bool = False

    def describe(self) -> str:
        details = [self.generation.label, self.fmt]
        if self.strict:
            details.append("strict")
        return f"{self.save} [{', '.join(details)}]"


@dataclass
class Config:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)


def get_config_path() -> Path:
    """Return the TOML config file path via click.get_app_dir."""
    return Path(click.get_app_dir("pkmsave")) / "config.toml"


def _toml_string(value: str) -> str:
    """Quote `value` as a TOML basic string."""
    chars = []
    for ch in value:
        if ch in _TOML_ESCAPES:
            chars.append(_TOML_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            chars.append(f"\\u{ord(ch):04X}")
        else:
            chars.append(ch)
    return '"' + "".join(chars) + '"'


def _read_profile(name: str, info: dict, path: Path) -> Profile:
    fmt = info.get("format", DEFAULT_FORMAT)
    if fmt not in OUTPUT_FORMATS:
        raise click.UsageError(
            f"Invalid format '{fmt}' for profile '{name}' in {path}. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
        )
    try:
        generation = Generation(info.get("generation", Generation.UNKNOWN))
    except ValueError:
        raise click.UsageError(
            f"Invalid generation {info['generation']!r} for profile '{name}' in {path}"
        ) from None
    return Profile(
        name=name,
        save=Path(info["save"]),
        generation=generation,
        fmt=fmt,
        strict=bool(info.get("strict", False)),
    )


def load_config() -> Config:
    """Read the TOML config. Returns an empty Config if the file is missing."""
    path = get_config_path()
    if not path.exists():
        return Config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise click.UsageError(f"Cannot read config {path}: {e}") from e

    config = Config(default_profile=data.get("default_profile"))
    for name, info in data.get("profiles", {}).items():
        config.profiles[name] = _read_profile(name, info, path)
    return config


def save_config(config: Config) -> Path:
    """Write the config as TOML. Paths are written as escaped basic strings."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    if config.default_profile:
        lines.append(f"default_profile = {_toml_string(config.default_profile)}")
        lines.append("")

    for name, profile in config.profiles.items():
        lines.append(f"[profiles.{name}]")
        lines.append(f"save = {_toml_string(str(profile.save))}")
        lines.append(f"generation = {int(profile.generation)}")
        lines.append(f"format = {_toml_string(profile.fmt)}")
        lines.append(f"strict = {'true' if profile.strict else 'false'}")
        lines.append("")

    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def validate_profile_name(name: str) -> bool:
    """Check that a profile name is a valid TOML bare key."""
    return bool(_PROFILE_NAME_RE.match(name))


def inspect_save(save: Path) -> Generation:
    """Return the generation of the save at `save`.

    Raises click.UsageError when the file is missing or its size matches
    no supported generation.
    """
    if not save.is_file():
        raise click.UsageError(f"Save file not found: {save}")
    data = save.read_bytes()
    generation = detect_generation(data)
    if generation is Generation.UNKNOWN:
        raise click.UsageError(
            f"{save} is {len(data):,} bytes, not a supported save size "
            "(32,768 / 65,536 / 131,072 bytes)"
        )
    return generation


def resolve_profile(save: Path | None, profile_name: str | None) -> Profile:
    """Pick the profile to run with: --save > --profile > default profile.

    An explicit --save gets default report settings. A stored profile is
    checked against its file: the file must exist and still have the
    generation recorded when the profile was added.
    """
    if save is not None:
        if not save.exists():
            raise click.UsageError(f"Save file not found: {save}")
        return Profile(name="", save=save)

    config = load_config()

    name = profile_name or config.default_profile
    if name is None:
        raise click.UsageError(
            "No save file provided. Either:\n"
            "  1. Run 'pkmsave init' to add a save profile\n"
            "  2. Pass --save <path> explicitly\n"
            "  3. Pass --profile <name> to use a named profile"
        )

    profile = config.profiles.get(name)
    if profile is None:
        available = ", ".join(config.profiles) or "(none)"
        raise click.UsageError(f"Profile '{name}' not found. Available profiles: {available}")

    if not profile.save.exists():
        raise click.UsageError(
            f"Save file not found for profile '{name}': {profile.save}\n"
            "Run 'pkmsave init' to update the path."
        )

    if profile.generation is not Generation.UNKNOWN:
        current = inspect_save(profile.save)
        if current is not profile.generation:
            raise click.UsageError(
                f"Profile '{name}' was added for a {profile.generation.label} save, "
                f"but {profile.save} is now {current.label}.\n"
                "Run 'pkmsave init' to update the profile."
            )
    return profile
