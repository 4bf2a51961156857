"""Constants and defaults for the golf pool scoreboard."""

# Number of lowest-total players per team that count toward the team total
DEFAULT_SQUAD_SIZE = 4

# Strokes added on top of the cut line for each unplayed weekend round
DEFAULT_CUT_PENALTY_OFFSET = 3

# Leaderboard position value for players who missed the cut
CUT_POSITION = 'CUT'

# Even-par marker used by the leaderboard feed
EVEN_PAR = 'E'

# Rounds in a stroke-play tournament
ROUNDS_PER_TOURNAMENT = 4

# Rounds 3 and 4 (0-based) are the ones a cut player never plays
WEEKEND_ROUNDS = (2, 3)

# Name of the synthetic team aggregate row
TOTAL_ROW_NAME = 'Total'

# Full names that don't split as "first last"
NAME_OVERRIDES: dict[str, tuple[str, str]] = {
    'Min Woo Lee': ('Min Woo', 'Lee'),
}

# RapidAPI live golf data
RAPIDAPI_HOST = 'live-golf-data.p.rapidapi.com'
LEADERBOARD_URL = f'https://{RAPIDAPI_HOST}/leaderboard'
LEADERBOARD_ROWS_KEY = 'leaderboardRows'
API_KEY_ENV = 'RAPID_GOLF_API_KEY'

# Default file layout, relative to the data directory
SNAPSHOT_FILENAME = 'leaderboard.json'
TEAMS_DIRNAME = 'teams'
CONFIG_FILENAME = 'league_config.json'

# Rendered output
DEFAULT_OUTPUT_PATH = 'docs/index.html'
TEMPLATE_NAME = 'scoreboard.html'
