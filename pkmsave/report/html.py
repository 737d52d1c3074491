"""HTML rendering of decoded trainer records."""
from __future__ import annotations

from typing import Optional

from pkmsave.save.detect import Generation
from pkmsave.save.models import Creature, TrainerRecord
from pkmsave.report.text import format_pp
from pkmsave.save.tables import UNKNOWN_SPECIES, species_name


_HTML_CSS = """\
/* --- Base --- */
*, *::before, *::after { box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
       background: #1a1a2e; color: #e0e0e0; margin: 2rem; }
h1, h2, h3 { color: #00d4aa; }

/* --- Trainer summary --- */
.trainer-info { background: #16213e; padding: 1rem 1.5rem; border-radius: 8px;
    border-left: 4px solid #0f3460; margin-bottom: 1.5rem; }
.trainer-info p { margin: 0.25rem 0; }

/* --- Party cards --- */
.pokemon-party { display: flex; gap: 1rem; flex-wrap: wrap; }
.pokemon-card { background: #16213e; padding: 1rem 1.5rem; border-radius: 8px;
    border-left: 4px solid #4ade80; min-width: 220px; transition: transform 0.15s; }
.pokemon-card:hover { transform: translateY(-2px); }
.pokemon-card p { margin: 0.2rem 0; }
.pokemon-card ul { margin: 0.25rem 0 0 0; padding-left: 1.25rem; }
"""


def _esc(text: Optional[str]) -> str:
    """Escape HTML special characters."""
    if not text:
        return ""
    return (text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
            .replace('"', "&quot;").replace("'", "&#x27;"))


def _badges_str(record: TrainerRecord) -> str:
    if record.badges > 0:
        return f"{record.badge_count} badges"
    return "None"


def _creature_card(mon: Creature, generation: Generation) -> str:
    species = species_name(mon.species_id) or UNKNOWN_SPECIES
    parts = [
        "<div class='pokemon-card'>",
        f"<h3>{_esc(species)}</h3>",
        f"<p>Nickname: {_esc(mon.nickname)}</p>",
        f"<p>Level: {mon.level}</p>",
        f"<p>HP: {mon.current_hp}/{mon.max_hp}</p>",
        f"<p>Attack: {mon.attack}</p>",
        f"<p>Defense: {mon.defense}</p>",
        f"<p>Speed: {mon.speed}</p>",
        f"<p>Special Attack: {mon.special_attack}</p>",
    ]
    # Gen 1 has one Special stat, already shown above
    if generation is not Generation.GEN1:
        parts.append(f"<p>Special Defense: {mon.special_defense}</p>")

    parts.append("<p>Moves:</p><ul>")
    for move, pp, max_pp in mon.known_moves():
        parts.append(f"<li>{_esc(move)} (PP: {format_pp(pp, max_pp)})</li>")
    parts.append("</ul></div>")
    return "".join(parts)


def render_html(record: TrainerRecord) -> str:
    """Render a trainer record as a self-contained HTML fragment."""
    parts = [
        "<div class='trainer-info'>",
        f"<h2>Trainer: {_esc(record.name)}</h2>",
        f"<p>Game: {_esc(record.generation.label)}</p>",
        f"<p>Money: ${record.money}</p>",
        f"<p>Badges: {_badges_str(record)}</p>",
        f"<p>Play Time: {record.play_time_formatted}</p>",
    ]
    if record.rival_name:
        parts.append(f"<p>Rival: {_esc(record.rival_name)}</p>")
    if record.pokedex_owned is not None:
        parts.append(f"<p>Pok&eacute;dex: {record.pokedex_owned} owned, "
                     f"{record.pokedex_seen} seen</p>")
    parts.append("</div>")

    parts.append(f"<h2>Party Pok&eacute;mon ({record.party_count})</h2>")
    parts.append("<div class='pokemon-party'>")
    for mon in record.party:
        parts.append(_creature_card(mon, record.generation))
    parts.append("</div>")
    return "".join(parts)


def html_wrap(title: str, body: str) -> str:
    """Wrap body content in a full HTML document with shared CSS."""
    return (
        f"<!DOCTYPE html>\n<html><head><meta charset='utf-8'>\n"
        f"<meta name='viewport' content='width=device-width, initial-scale=1'>\n"
        f"<title>{_esc(title)}</title>\n"
        f"<style>{_HTML_CSS}</style></head>\n"
        f"<body>\n{body}\n</body></html>"
    )


def render_page(record: TrainerRecord) -> str:
    """Render a trainer record as a complete HTML document."""
    return html_wrap(f"Save: {record.name}", render_html(record))
