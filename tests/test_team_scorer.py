"""Unit tests for team scoring and best-K selection."""

import pytest

from golfpool.models import ScoredPlayer
from golfpool.schemas import LeaderboardSnapshot, Roster
from golfpool.team_scorer import (
    build_team_result,
    find_entry,
    rank_teams,
    score_team,
)
from golfpool.validators import validate_team_result


def row(first, last, rounds, position='T1', total='E'):
    return {
        'firstName': first,
        'lastName': last,
        'position': position,
        'total': total,
        'rounds': [{'scoreToPar': r} for r in rounds],
    }


@pytest.fixture
def snapshot():
    """Leaderboard mid-tournament with a +5 cut line."""
    return LeaderboardSnapshot.model_validate(
        {
            'cutLines': [{'cutScore': '+5'}],
            'leaderboardRows': [
                row('Scottie', 'Scheffler', ['-5', '-4', '-3'], position='1'),
                row('Rory', 'McIlroy', ['-2', '-1', 'E'], position='T2'),
                row('Min Woo', 'Lee', ['-1', '-1', '-1'], position='T2'),
                row('Xander', 'Schauffele', ['+1', 'E', '-2'], position='T4'),
                row('Jon', 'Rahm', ['E', '+1', '-2'], position='T4'),
                row('Shane', 'Lowry', ['+4', '+3'], position='CUT'),
                row('Jordan', 'Spieth', [], total='+1', position='T30'),
            ],
        }
    )


def names(players):
    return [p.name for p in players]


class TestFindEntry:
    """Tests for leaderboard lookup."""

    def test_exact_match(self, snapshot):
        """Test a player is found by exact first and last name."""
        entry = find_entry(snapshot, 'Rory', 'McIlroy')
        assert entry is not None
        assert entry.position == 'T2'

    def test_case_sensitive(self, snapshot):
        """Test matching does not ignore case."""
        assert find_entry(snapshot, 'rory', 'mcilroy') is None

    def test_first_match_wins(self):
        """Test duplicate rows resolve to the first occurrence."""
        snap = LeaderboardSnapshot.model_validate(
            {
                'cutLines': [],
                'leaderboardRows': [
                    row('Kevin', 'Kim', ['-4'], position='T5'),
                    row('Kevin', 'Kim', ['+6'], position='T80'),
                ],
            }
        )
        assert find_entry(snap, 'Kevin', 'Kim').position == 'T5'
        players = score_team(['Kevin Kim'], snap)
        assert players[0].total == -4


class TestScoreTeam:
    """Tests for the best-K team scoring rule."""

    def test_sorted_by_total_with_total_row_last(self, snapshot):
        """Test players come back lowest total first, Total row last."""
        players = score_team(
            ['Rory McIlroy', 'Shane Lowry', 'Scottie Scheffler', 'Min Woo Lee'], snapshot
        )
        assert names(players) == [
            'Scottie Scheffler',
            'Rory McIlroy',
            'Min Woo Lee',
            'Shane Lowry',
            'Total',
        ]
        totals = [p.total for p in players[:-1]]
        assert totals == sorted(totals)

    def test_total_equals_round_sum(self, snapshot):
        """Test every player's total is the sum of the four rounds."""
        players = score_team(
            ['Scottie Scheffler', 'Shane Lowry', 'Jordan Spieth', 'Jon Rahm'], snapshot
        )
        for p in players:
            assert p.total == p.r1 + p.r2 + p.r3 + p.r4

    def test_only_best_four_count(self, snapshot):
        """Test the four lowest totals count and the rest are excluded."""
        roster = [
            'Shane Lowry',
            'Jon Rahm',
            'Scottie Scheffler',
            'Xander Schauffele',
            'Rory McIlroy',
            'Min Woo Lee',
        ]
        players = score_team(roster, snapshot)
        scored = players[:-1]
        counting = [p for p in scored if not p.excluded]
        assert len(counting) == 4
        assert names(counting) == ['Scottie Scheffler', 'Rory McIlroy', 'Min Woo Lee', 'Jon Rahm']
        assert names([p for p in scored if p.excluded]) == ['Xander Schauffele', 'Shane Lowry']

    def test_total_row_sums_counting_players_only(self, snapshot):
        """Test the Total row ignores excluded players."""
        roster = [
            'Shane Lowry',
            'Scottie Scheffler',
            'Rory McIlroy',
            'Min Woo Lee',
            'Jon Rahm',
        ]
        players = score_team(roster, snapshot)
        total = players[-1]
        counting = [p for p in players[:-1] if not p.excluded]

        assert total.name == 'Total'
        assert not total.excluded
        assert total.r1 == sum(p.r1 for p in counting)
        assert total.r2 == sum(p.r2 for p in counting)
        assert total.r3 == sum(p.r3 for p in counting)
        assert total.r4 == sum(p.r4 for p in counting)
        assert total.total == sum(p.total for p in counting)
        # Scheffler -12, McIlroy -3, Lee -3, Rahm -1
        assert total.total == -19

    def test_ties_keep_roster_order(self, snapshot):
        """Test equal totals are ordered as on the roster."""
        # McIlroy and Lee are both -3, Xander and Rahm both -1
        players = score_team(['Min Woo Lee', 'Jon Rahm', 'Rory McIlroy', 'Xander Schauffele'], snapshot)
        assert names(players[:-1]) == ['Min Woo Lee', 'Rory McIlroy', 'Jon Rahm', 'Xander Schauffele']

    def test_tie_at_cutoff_resolved_by_roster_order(self, snapshot):
        """Test a tie across the squad boundary keeps the earlier roster entry."""
        players = score_team(['Xander Schauffele', 'Jon Rahm'], snapshot, squad_size=1)
        assert names(players[:-1]) == ['Xander Schauffele', 'Jon Rahm']
        assert [p.excluded for p in players[:-1]] == [False, True]

    def test_cut_player_penalty(self, snapshot):
        """Test a cut player's weekend rounds are cut line + 3."""
        players = score_team(['Shane Lowry'], snapshot)
        lowry = players[0]
        assert lowry.rounds == (4, 3, 8, 8)
        assert lowry.total == 23
        assert lowry.missed_cut

    def test_zero_rounds_fallback(self, snapshot):
        """Test a player with no rounds is scored on their total."""
        players = score_team(['Jordan Spieth'], snapshot)
        assert players[0].rounds == (1, 0, 0, 0)

    def test_missing_player_omitted(self, snapshot, caplog):
        """Test a player not on the leaderboard is skipped, not scored as zero."""
        with caplog.at_level('WARNING', logger='golfpool'):
            players = score_team(['Tiger Woods', 'Rory McIlroy'], snapshot)
        assert names(players) == ['Rory McIlroy', 'Total']
        assert players[-1].total == -3
        assert 'Tiger Woods' in caplog.text

    def test_missing_player_does_not_change_others(self, snapshot):
        """Test adding an absent player leaves the other scores untouched."""
        base = score_team(['Rory McIlroy', 'Jon Rahm'], snapshot)
        with_missing = score_team(['Rory McIlroy', 'Tiger Woods', 'Jon Rahm'], snapshot)
        assert base == with_missing

    def test_unsplittable_name_skipped(self, snapshot):
        """Test a single-word roster name is skipped."""
        players = score_team(['Scheffler', 'Jon Rahm'], snapshot)
        assert names(players) == ['Jon Rahm', 'Total']

    def test_fewer_players_than_squad(self, snapshot):
        """Test a short roster counts everyone."""
        players = score_team(['Jon Rahm', 'Rory McIlroy'], snapshot)
        assert not any(p.excluded for p in players)
        assert players[-1].total == -4

    def test_empty_roster(self, snapshot):
        """Test a roster with nobody found still gets a zero Total row."""
        players = score_team([], snapshot)
        assert len(players) == 1
        assert players[0] == ScoredPlayer(name='Total')

    def test_custom_squad_size(self, snapshot):
        """Test squad size controls how many players count."""
        roster = ['Scottie Scheffler', 'Rory McIlroy', 'Jon Rahm']
        players = score_team(roster, snapshot, squad_size=2)
        assert [p.excluded for p in players[:-1]] == [False, False, True]
        assert players[-1].total == -15

    def test_explicit_penalty_overrides_snapshot(self, snapshot):
        """Test a precomputed penalty is used as given."""
        players = score_team(['Shane Lowry'], snapshot, penalty=10)
        assert players[0].rounds == (4, 3, 10, 10)

    def test_idempotent(self, snapshot):
        """Test scoring twice gives identical results."""
        roster = ['Shane Lowry', 'Scottie Scheffler', 'Jon Rahm', 'Min Woo Lee', 'Rory McIlroy']
        assert score_team(roster, snapshot) == score_team(roster, snapshot)


class TestBuildTeamResult:
    """Tests for TeamResult assembly."""

    def test_team_result(self, snapshot):
        """Test roster identity and history carry through."""
        roster = Roster.model_validate(
            {
                'teamName': 'Matt',
                'players': ['Scottie Scheffler', 'Shane Lowry', 'Jon Rahm', 'Rory McIlroy', 'Min Woo Lee'],
                'history': ['2024 Masters'],
            }
        )
        result = build_team_result('Matt', roster, snapshot)

        assert result.team_id == 'Matt'
        assert result.team_name == 'Matt'
        assert result.history == ['2024 Masters']
        assert result.total_row.name == 'Total'
        assert len(result.counting_players) == 4
        assert result.total == -19
        assert validate_team_result(result) == []

    def test_rank_teams(self, snapshot):
        """Test standings order lowest team total first."""
        a = build_team_result('A', Roster(team_name='A', players=['Shane Lowry']), snapshot)
        b = build_team_result('B', Roster(team_name='B', players=['Scottie Scheffler']), snapshot)
        c = build_team_result('C', Roster(team_name='C', players=['Jon Rahm']), snapshot)
        assert [t.team_id for t in rank_teams([a, b, c])] == ['B', 'C', 'A']
