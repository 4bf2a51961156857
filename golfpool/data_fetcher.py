"""Leaderboard fetching from the RapidAPI live golf data feed."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import requests

from .constants import API_KEY_ENV, LEADERBOARD_ROWS_KEY, LEADERBOARD_URL, RAPIDAPI_HOST
from .utils import save_json

logger = logging.getLogger('golfpool.data_fetcher')


class LeaderboardFetcher:
    """Fetches the live leaderboard and persists it as a snapshot file."""

    def __init__(
        self,
        tourn_id: str,
        year: int,
        org_id: str = '1',
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.tourn_id = tourn_id
        self.year = year
        self.org_id = org_id
        self.api_key = api_key if api_key is not None else os.environ.get(API_KEY_ENV, '')
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def params(self) -> dict[str, str]:
        return {'orgId': self.org_id, 'tournId': self.tourn_id, 'year': str(self.year)}

    @property
    def headers(self) -> dict[str, str]:
        return {'x-rapidapi-key': self.api_key, 'x-rapidapi-host': RAPIDAPI_HOST}

    def fetch(self) -> dict[str, Any]:
        """
        Fetch the current leaderboard.

        Returns:
            Raw leaderboard JSON as a dict

        Raises:
            requests.HTTPError: On a non-200 response
            requests.RequestException: On connection failures
            ValueError: If the body isn't a leaderboard JSON object
        """
        if not self.api_key:
            logger.warning(f'{API_KEY_ENV} is not set, request will likely be rejected')

        logger.info(f'Fetching leaderboard for tournament {self.tourn_id} ({self.year})...')
        response = self.session.get(
            LEADERBOARD_URL, params=self.params, headers=self.headers, timeout=self.timeout
        )
        if response.status_code != 200:
            raise requests.HTTPError(
                f'Unexpected status code: {response.status_code} {response.reason}',
                response=response,
            )

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f'Expected a JSON object from leaderboard API, got {type(data).__name__}')
        if LEADERBOARD_ROWS_KEY not in data:
            message = data.get('message', 'no message')
            raise ValueError(f'Leaderboard API response has no {LEADERBOARD_ROWS_KEY}: {message}')
        return data

    def refresh(self, snapshot_path: str | Path) -> dict[str, Any]:
        """Fetch the leaderboard and save it, pretty-printed, to snapshot_path."""
        data = self.fetch()
        save_json(snapshot_path, data)
        logger.info(f'Saved leaderboard data to {snapshot_path}')
        return data
