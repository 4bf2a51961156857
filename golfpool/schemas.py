"""Pydantic schemas for leaderboard, roster and league config JSON."""

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_CUT_PENALTY_OFFSET, DEFAULT_SQUAD_SIZE


def _as_text(v) -> str:
    """Coerce provider values (numbers, null) to the string form parsed later."""
    if v is None:
        return ''
    return str(v)


class Round(BaseModel):
    """One recorded round for a player."""

    score_to_par: str = Field(default='', alias='scoreToPar')

    @field_validator('score_to_par', mode='before')
    @classmethod
    def coerce_text(cls, v):
        return _as_text(v)

    class Config:
        populate_by_name = True


class CutLine(BaseModel):
    """Cut line reported by the leaderboard feed."""

    cut_score: str = Field(default='', alias='cutScore')

    @field_validator('cut_score', mode='before')
    @classmethod
    def coerce_text(cls, v):
        return _as_text(v)

    class Config:
        populate_by_name = True


class LeaderboardEntry(BaseModel):
    """A single player row on the tournament leaderboard."""

    first_name: str = Field(default='', alias='firstName')
    last_name: str = Field(default='', alias='lastName')
    position: str = ''
    total: str = ''
    rounds: list[Round] = Field(default_factory=list)

    @field_validator('first_name', 'last_name', 'position', 'total', mode='before')
    @classmethod
    def coerce_text(cls, v):
        return _as_text(v)

    @field_validator('rounds', mode='before')
    @classmethod
    def null_rounds(cls, v):
        """Treat a null rounds list as no rounds recorded."""
        return [] if v is None else v

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()

    class Config:
        populate_by_name = True


class LeaderboardSnapshot(BaseModel):
    """Complete leaderboard.json file structure (one point-in-time fetch)."""

    cut_lines: list[CutLine] = Field(default_factory=list, alias='cutLines')
    leaderboard_rows: list[LeaderboardEntry] = Field(..., alias='leaderboardRows')

    @field_validator('cut_lines', 'leaderboard_rows', mode='before')
    @classmethod
    def null_lists(cls, v):
        """An explicit null means an empty list; a missing leaderboardRows is still an error."""
        return [] if v is None else v

    @property
    def cut_score(self) -> str | None:
        """Score of the first cut line, or None when no cut has been set."""
        if not self.cut_lines:
            return None
        return self.cut_lines[0].cut_score

    class Config:
        populate_by_name = True
        frozen = True


class Roster(BaseModel):
    """A fantasy team's roster file (teams/<id>.json)."""

    team_name: str = Field(..., min_length=1, alias='teamName')
    players: list[str] = Field(default_factory=list)
    history: list[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class LeagueConfig(BaseModel):
    """League configuration settings."""

    teams: list[str] = Field(..., min_length=1)
    squad_size: int = Field(default=DEFAULT_SQUAD_SIZE, ge=1, le=20)
    cut_penalty_offset: int = Field(default=DEFAULT_CUT_PENALTY_OFFSET, ge=0, le=20)
    name_overrides: dict[str, tuple[str, str]] = Field(default_factory=dict)
    org_id: str = '1'
    tourn_id: str = Field(..., min_length=1)
    year: int = Field(..., ge=2000, le=2100)

    @field_validator('teams')
    @classmethod
    def validate_unique_teams(cls, v):
        """Ensure no team is listed twice."""
        seen = set()
        for team in v:
            if team in seen:
                raise ValueError(f'Duplicate team: {team}')
            seen.add(team)
        return v

    @field_validator('name_overrides')
    @classmethod
    def validate_overrides(cls, v):
        """Ensure override name parts are non-empty."""
        for full_name, (first, last) in v.items():
            if not first.strip() or not last.strip():
                raise ValueError(f'Invalid name override for {full_name}: {first!r}, {last!r}')
        return v

    class Config:
        extra = 'forbid'
