"""
Tests for the move selector and the greedy player.

The selector tests pin down each rule of the priority order; the player
tests cover the invariants that must hold for any board.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, Board, Coord, GameState, Snake  # noqa: E402
from players.greedy_player import GreedyPlayer, select_move  # noqa: E402
from players.safety import neck_direction, safe_moves  # noqa: E402
from services.move_trace import TraceRecorder  # noqa: E402

ALL_MOVES = [UP, DOWN, LEFT, RIGHT]
HEAD = Coord(5, 5)


def choose(safe, target, seed=0, legacy=False):
    recorder = TraceRecorder()
    move = select_move(
        safe, HEAD, target, random.Random(seed), tracer=recorder, legacy_vertical_gate=legacy
    )
    event = recorder.named("move_chosen")[-1]
    assert event.fields["direction"] is move
    return move, event.fields["branch"]


def make_state(body, food=(), others=(), width=11, height=11, turn=0):
    you = Snake(id="me", body=tuple(body))
    board = Board(
        width=width,
        height=height,
        food=tuple(food),
        snakes=(you,) + tuple(Snake(id=f"e{i}", body=tuple(o)) for i, o in enumerate(others)),
    )
    return GameState(turn=turn, board=board, you=you)


class TestSelectMoveHorizontalFirst:
    """Rules that close the horizontal gap first."""

    def test_moves_toward_food_on_x(self):
        move, branch = choose(ALL_MOVES, Coord(3, 2))
        assert (move, branch) == (LEFT, "food_x")

    def test_moves_right_when_food_is_right(self):
        move, branch = choose(ALL_MOVES, Coord(7, 8))
        assert (move, branch) == (RIGHT, "food_x")

    def test_blocked_x_switches_to_y(self):
        move, branch = choose([UP, DOWN, RIGHT], Coord(3, 2))
        assert (move, branch) == (DOWN, "food_y_after_x")

    def test_blocked_x_without_vertical_takes_other_x(self):
        move, branch = choose([RIGHT], Coord(3, 2))
        assert (move, branch) == (RIGHT, "food_x_fallback")

    def test_blocked_x_and_wrong_y_falls_back_to_random(self):
        move, branch = choose([UP, RIGHT], Coord(3, 2))
        assert branch == "random"
        assert move in (UP, RIGHT)


class TestSelectMoveAligned:
    """Rules for a target on the same row or column as the head."""

    def test_adjacent_food_on_the_right(self):
        """Head (5,5), food (6,5), everything safe: go right."""
        move, branch = choose(ALL_MOVES, Coord(6, 5))
        assert (move, branch) == (RIGHT, "food_x_aligned")

    def test_same_row_blocked_falls_back_to_random(self):
        move, branch = choose([UP, DOWN, LEFT], Coord(8, 5))
        assert branch == "random"
        assert move in (UP, DOWN, LEFT)

    def test_same_column_goes_up(self):
        move, branch = choose(ALL_MOVES, Coord(5, 8))
        assert (move, branch) == (UP, "food_y")

    def test_same_column_goes_down(self):
        move, branch = choose(ALL_MOVES, Coord(5, 0))
        assert (move, branch) == (DOWN, "food_y")


class TestSelectMoveVerticalFirst:
    """Rules that close the vertical gap first."""

    def test_shorter_y_gap_moves_on_y(self):
        move, branch = choose(ALL_MOVES, Coord(9, 6))
        assert (move, branch) == (UP, "food_y")

    def test_blocked_y_takes_the_other_vertical(self):
        move, branch = choose([DOWN, LEFT, RIGHT], Coord(5, 8))
        assert (move, branch) == (DOWN, "food_y_fallback")

    def test_no_vertical_moves_heads_along_x(self):
        move, branch = choose([LEFT, RIGHT], Coord(8, 6))
        assert (move, branch) == (RIGHT, "food_blocked_x")

    def test_no_vertical_moves_and_blocked_x_is_random(self):
        move, branch = choose([LEFT], Coord(8, 6))
        assert (move, branch) == (LEFT, "random")


class TestLegacyVerticalGate:
    """The legacy gate only counts DOWN as a vertical move."""

    def test_up_only_vertical_is_ignored_by_legacy_gate(self):
        assert choose([UP, LEFT, RIGHT], Coord(9, 6)) == (UP, "food_y")
        assert choose([UP, LEFT, RIGHT], Coord(9, 6), legacy=True) == (RIGHT, "food_blocked_x")

    def test_legacy_gate_takes_the_other_x_instead_of_random(self):
        assert choose([UP, RIGHT], Coord(3, 2), legacy=True) == (RIGHT, "food_x_fallback")

    def test_legacy_gate_still_goes_up_on_same_column(self):
        assert choose([UP, LEFT, RIGHT], Coord(5, 8), legacy=True) == (UP, "food_blocked_y")

    def test_legacy_gate_agrees_when_down_is_safe(self):
        for target in (Coord(3, 2), Coord(5, 8), Coord(9, 6), Coord(6, 5)):
            assert choose(ALL_MOVES, target) == choose(ALL_MOVES, target, legacy=True)


class TestSelectMoveFallbacks:
    """Random and terminal fallbacks."""

    def test_no_target_picks_a_safe_move(self):
        for seed in range(20):
            move, branch = choose([UP, RIGHT], None, seed=seed)
            assert branch == "random"
            assert move in (UP, RIGHT)

    def test_no_target_is_deterministic_for_a_seed(self):
        assert choose(ALL_MOVES, None, seed=42) == choose(ALL_MOVES, None, seed=42)

    def test_random_fallback_uses_canonical_order(self):
        # Input order must not leak into the choice
        a = select_move([RIGHT, LEFT, DOWN, UP], HEAD, None, random.Random(7))
        b = select_move([UP, DOWN, LEFT, RIGHT], HEAD, None, random.Random(7))
        assert a is b

    @pytest.mark.parametrize("target", [None, Coord(6, 5), Coord(0, 0)])
    def test_no_safe_moves_returns_down(self, target):
        recorder = TraceRecorder()
        move = select_move([], HEAD, target, random.Random(0), tracer=recorder)
        assert move is DOWN
        assert len(recorder.named("no_safe_move")) == 1
        assert recorder.named("move_chosen")[-1].fields["branch"] == "no_safe_move"

    def test_trace_carries_the_decision_inputs(self):
        recorder = TraceRecorder()
        select_move(ALL_MOVES, HEAD, Coord(3, 2), random.Random(0), tracer=recorder)
        fields = recorder.named("move_chosen")[0].fields
        assert fields["xdiff"] == 2
        assert fields["ydiff"] == 3
        assert fields["min_diff"] == 2
        assert fields["prefer_x"] is True
        assert fields["can_move_x"] is True
        assert fields["can_move_y"] is True


class TestGreedyPlayer:
    """End-to-end behavior of GreedyPlayer."""

    def test_adjacent_food(self):
        state = make_state([(5, 5), (4, 5), (3, 5)], food=[(6, 5)])
        assert GreedyPlayer(rng=random.Random(0)).get_move(state) is RIGHT

    def test_nearest_of_several_foods(self):
        state = make_state([(5, 5), (5, 4)], food=[(0, 5), (5, 8), (10, 10)])
        assert GreedyPlayer(rng=random.Random(0)).get_move(state) is UP

    def test_never_reverses_toward_food_behind(self):
        # Food straight behind us: the only approach move is the reversal
        state = make_state([(3, 3), (2, 3), (1, 3)], food=[(0, 3)])
        for seed in range(30):
            move = GreedyPlayer(rng=random.Random(seed)).get_move(state)
            assert move in (UP, DOWN, RIGHT)

    def test_boxed_in_returns_down(self):
        state = make_state([(0, 0), (0, 1)], others=[[(1, 0), (2, 0)]], food=[(5, 5)])
        assert GreedyPlayer(rng=random.Random(0)).get_move(state) is DOWN

    def test_no_food_still_moves_safely(self):
        state = make_state([(0, 0), (0, 1)])
        for seed in range(10):
            assert GreedyPlayer(rng=random.Random(seed)).get_move(state) is RIGHT

    def test_same_seed_same_move(self):
        state = make_state([(5, 5), (5, 4)], others=[[(7, 7), (7, 6)]])
        first = GreedyPlayer(rng=random.Random(1234)).get_move(state)
        second = GreedyPlayer(rng=random.Random(1234)).get_move(state)
        assert first is second

    def test_player_does_not_mutate_state(self):
        state = make_state([(5, 5), (5, 4)], food=[(1, 1)])
        before = (state.you.body, state.board.food, state.board.snakes)
        GreedyPlayer(rng=random.Random(0)).get_move(state)
        assert (state.you.body, state.board.food, state.board.snakes) == before

    def test_traces_a_full_turn(self):
        recorder = TraceRecorder()
        state = make_state([(5, 5), (4, 5)], food=[(6, 5)], turn=12)
        GreedyPlayer(rng=random.Random(0), tracer=recorder).get_move(state)
        names = [e.name for e in recorder.events]
        assert names[0] == "turn"
        assert recorder.events[0].fields["turn"] == 12
        assert "unsafe_move" in names
        assert "target_selected" in names
        assert names[-1] == "move_chosen"

    @pytest.mark.parametrize("legacy", [False, True])
    def test_move_is_always_safe_when_possible(self, legacy):
        """Sweep heads, headings and food over a board with a rival in the middle."""
        rival = [(3, 3), (3, 4), (4, 4)]
        rng = random.Random(99)
        for hx in range(7):
            for hy in range(7):
                for heading in ALL_MOVES:
                    dx, dy = heading.delta
                    neck = (hx - dx, hy - dy)
                    cells = {(hx, hy), neck}
                    if cells & set(rival) or not (0 <= neck[0] < 7 and 0 <= neck[1] < 7):
                        continue
                    food = [(rng.randrange(7), rng.randrange(7)) for _ in range(rng.randrange(3))]
                    state = make_state([(hx, hy), neck], food=food, others=[rival], width=7, height=7)
                    player = GreedyPlayer(rng=random.Random(0), legacy_vertical_gate=legacy)

                    move = player.get_move(state)
                    safe = safe_moves(state.you, state.board)
                    if safe:
                        assert move in safe
                        assert move is not neck_direction(state.you)
                    else:
                        assert move is DOWN
