"""Data models for scored golf pool results."""

from dataclasses import dataclass, field

from .constants import TOTAL_ROW_NAME


@dataclass
class ScoredPlayer:
    """A player's per-round scores relative to par."""
    name: str
    r1: int = 0
    r2: int = 0
    r3: int = 0
    r4: int = 0
    excluded: bool = False
    missed_cut: bool = False  # Display only

    @property
    def rounds(self) -> tuple[int, int, int, int]:
        return (self.r1, self.r2, self.r3, self.r4)

    @property
    def total(self) -> int:
        return self.r1 + self.r2 + self.r3 + self.r4

    @property
    def is_total(self) -> bool:
        return self.name == TOTAL_ROW_NAME

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'r1': self.r1,
            'r2': self.r2,
            'r3': self.r3,
            'r4': self.r4,
            'total': self.total,
            'excluded': self.excluded,
            'missed_cut': self.missed_cut,
        }


@dataclass
class TeamResult:
    """Container for a fantasy team's scored roster."""
    team_id: str
    team_name: str
    players: list[ScoredPlayer] = field(default_factory=list)
    # players is sorted by total; the synthetic Total row is always last
    history: list[str] = field(default_factory=list)

    @property
    def total_row(self) -> ScoredPlayer | None:
        if self.players and self.players[-1].is_total:
            return self.players[-1]
        return None

    @property
    def scored_players(self) -> list[ScoredPlayer]:
        """All real players, without the Total row."""
        return [p for p in self.players if not p.is_total]

    @property
    def counting_players(self) -> list[ScoredPlayer]:
        return [p for p in self.scored_players if not p.excluded]

    @property
    def total(self) -> int:
        row = self.total_row
        return row.total if row else 0
