"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .constants import CONFIG_FILENAME
from .schemas import LeagueConfig
from .utils import load_json

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / CONFIG_FILENAME


@lru_cache(maxsize=4)
def get_config(config_path: Path | str | None = None) -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached per path after first load.

    Args:
        config_path: Optional path to a config file (default: data/league_config.json)

    Returns:
        LeagueConfig object with validated settings

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from golfpool.config import get_config
        config = get_config()
        print(f"Teams: {config.teams}")
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    return load_json(path, schema=LeagueConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
