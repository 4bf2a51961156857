"""Static HTML scoreboard rendering."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .constants import TEMPLATE_NAME, TOTAL_ROW_NAME
from .models import TeamResult
from .utils import save_json, write_text_atomic

logger = logging.getLogger('golfpool.renderer')

TEMPLATE_DIR = Path(__file__).parent / 'templates'


def format_to_par(value: int) -> str:
    """Display form of a score relative to par: -3, E, +2."""
    if value == 0:
        return 'E'
    return f'{value:+d}'


def format_timestamp(when: datetime) -> str:
    """Format like "Jan 2, 2006 3:04PM MST"."""
    hour = when.hour % 12 or 12
    return f'{when:%b} {when.day}, {when:%Y} {hour}:{when:%M%p} {when:%Z}'.rstrip()


def is_total(name: str) -> bool:
    return name == TOTAL_ROW_NAME


def make_environment(template_dir: Optional[Path] = None) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=select_autoescape(['html']),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters['to_par'] = format_to_par
    env.globals['is_total'] = is_total
    return env


def render_html(
    results: list[TeamResult],
    template_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> str:
    """Render the scoreboard page to a string."""
    now = now or datetime.now().astimezone()
    template = make_environment(template_dir).get_template(TEMPLATE_NAME)
    return template.render(teams=results, last_updated=format_timestamp(now))


def render_scoreboard(
    results: list[TeamResult],
    output_path: str | Path,
    template_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> Path:
    """
    Render the scoreboard and write it to output_path.

    The page is fully rendered before anything touches disk and then
    swapped in atomically, so a failure leaves the previous page in place.

    Args:
        results: Teams in display order
        output_path: Destination HTML file (e.g. docs/index.html)
        template_dir: Directory containing scoreboard.html (default: bundled)
        now: Timestamp shown as "last updated" (default: current local time)

    Returns:
        Path of the written file
    """
    html = render_html(results, template_dir, now)
    output_path = Path(output_path)
    write_text_atomic(output_path, html)
    logger.info(f'Scoreboard written to {output_path}')
    return output_path


def save_scoreboard_json(
    results: list[TeamResult],
    output_path: str | Path,
    now: Optional[datetime] = None,
) -> None:
    """Save the scored teams as JSON alongside the rendered page."""
    now = now or datetime.now().astimezone()
    data = {
        'updated_at': now.isoformat(),
        'teams': [
            {
                'id': team.team_id,
                'name': team.team_name,
                'history': team.history,
                'total': team.total,
                'players': [p.to_dict() for p in team.players],
            }
            for team in results
        ],
    }
    save_json(output_path, data)
    logger.info(f'Scores saved to {output_path}')
