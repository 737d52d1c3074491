"""Click CLI for the save-file reader."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from pkmsave.config import DEFAULT_FORMAT, OUTPUT_FORMATS, derive_report_path
from pkmsave.profiles import (
    Config,
    Profile,
    inspect_save,
    load_config,
    resolve_profile,
    save_config,
    validate_profile_name,
)
from pkmsave.save.detect import Generation


class Context:
    """Holds the profile selected by --save / --profile / config, resolved on first use."""

    def __init__(self, save: Path | None = None, profile: str | None = None):
        self._explicit_save = save
        self._profile_name = profile
        self._profile: Profile | None = None

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            self._profile = resolve_profile(self._explicit_save, self._profile_name)
        return self._profile

    @property
    def save(self) -> Path:
        return self.profile.save


pass_ctx = click.make_pass_decorator(Context)


@click.group()
@click.option(
    "--save", "-s", "save_path", required=False, default=None,
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="Path to a .sav file (optional if profiles configured)",
)
@click.option(
    "--profile", "-p", default=None, type=str,
    help="Named profile to use (from pkmsave init)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show decoder debug logging")
@click.version_option(package_name="pkmsave")
@click.pass_context
def cli(ctx, save_path: Optional[Path], profile: Optional[str], verbose: bool):
    """pkmsave - handheld monster-collecting game save reader.

    Detects Gen 1 / Gen 2 / Gen 3 saves by size, decodes the trainer and
    party, and renders them as text, JSON or HTML.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj = Context(save=save_path, profile=profile)


def _prompt_save() -> tuple[Path, Generation]:
    while True:
        save = Path(click.prompt("Path to save file").strip().strip('"').strip("'"))
        try:
            return save, inspect_save(save)
        except click.UsageError as e:
            click.echo(e.format_message())


def _echo_profiles(config: Config) -> None:
    for name, p in config.profiles.items():
        marker = " (default)" if name == config.default_profile else ""
        missing = "" if p.save.exists() else " (file missing)"
        click.echo(f"  {name}: {p.describe()}{marker}{missing}")


@cli.command()
def init():
    """Add or update a save profile (interactive).

    The save file is checked before it is stored: its size must match a
    supported generation, and that generation is recorded with the profile.
    """
    config = load_config()
    if config.profiles:
        click.echo("Current profiles:")
        _echo_profiles(config)
        click.echo()

    while True:
        name = click.prompt("Profile name", default="default" if not config.profiles else None)
        name = name.strip()
        if validate_profile_name(name):
            break
        click.echo(f"Invalid profile name '{name}'. Use letters, digits, hyphens, underscores.")

    previous = config.profiles.get(name)
    if previous is not None and not click.confirm(
            f"Replace profile '{name}' ({previous.save})?", default=False):
        click.echo("Aborted.")
        return

    save, generation = _prompt_save()
    click.echo(f"Detected {generation.label}")

    fmt = click.prompt(
        "Output format", type=click.Choice(OUTPUT_FORMATS),
        default=previous.fmt if previous else DEFAULT_FORMAT,
    )
    # only Gen 3 decoding can fall back to a sample party
    strict = generation is Generation.GEN3 and click.confirm(
        "Fail instead of showing a sample party when no party data is found?",
        default=previous.strict if previous else False,
    )

    config.profiles[name] = Profile(name=name, save=save, generation=generation,
                                    fmt=fmt, strict=strict)
    if config.default_profile not in config.profiles:
        config.default_profile = name
    elif config.default_profile != name and click.confirm(
            f"Make '{name}' the default profile?", default=False):
        config.default_profile = name

    saved_path = save_config(config)
    click.echo(f"\nConfig saved to {saved_path}\n")

    click.echo("Example commands:")
    click.echo(f"  pkmsave -p {name} show")
    click.echo(f"  pkmsave -p {name} show --format page --report")
    click.echo("  pkmsave --save <path> detect   (skip profiles)")


@cli.command("profiles")
def list_profiles():
    """List configured profiles with their generation and report settings."""
    config = load_config()
    if not config.profiles:
        click.echo("No profiles configured. Run 'pkmsave init'.")
        return
    _echo_profiles(config)


@cli.command()
@pass_ctx
def detect(ctx: Context):
    """Detect the save generation from its size."""
    from pkmsave.save.detect import detect_generation

    save = ctx.save
    data = save.read_bytes()
    generation = detect_generation(data)
    click.echo(f"{save.name}: {len(data):,} bytes")
    click.echo(f"Generation: {generation.label}")
    if generation is Generation.UNKNOWN:
        raise click.ClickException("Unknown or unsupported save file format")


@cli.command()
@click.option("--format", "-f", "fmt", default=None,
              type=click.Choice(OUTPUT_FORMATS),
              help="Output format (default: from the profile, else text)")
@click.option("--output", "-o", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Write to this file instead of stdout")
@click.option("--report", is_flag=True,
              help="Write next to the save file (e.g. red.sav -> red.html)")
@click.option("--strict/--no-strict", default=None,
              help="Fail instead of returning a sample party for unrecognized Gen 3 saves "
                   "(default: from the profile)")
@pass_ctx
def show(ctx: Context, fmt: Optional[str], output: Optional[Path], report: bool,
         strict: Optional[bool]):
    """Decode a save and render the trainer and party."""
    from pkmsave.report.formats import format_record
    from pkmsave.save.models import SaveFormatError
    from pkmsave.save.reader import decode_file

    profile = ctx.profile
    if fmt is None:
        fmt = profile.fmt
    if strict is None:
        strict = profile.strict

    save = profile.save
    result = decode_file(save)
    try:
        record = result.unwrap(strict=strict)
    except SaveFormatError as e:
        raise click.ClickException(f"{save.name}: {e}") from e

    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)

    text = format_record(record, fmt, status=result.status)

    if report and output is None:
        output = derive_report_path(save, fmt)
    if output:
        output.write_text(text, encoding="utf-8")
        click.echo(f"Wrote {fmt} report to {output}")
    else:
        click.echo(text)

