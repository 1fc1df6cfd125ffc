from lines.core.grid import Color
from lines.events.bus import (
    EVENT_BOARD_UNLOCKED,
    EVENT_COMBO_CHANGED,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_FOUND,
    EVENT_PATH_PREVIEW,
    EVENT_PIECES_SPAWNED,
    EVENT_SCORE_CHANGED,
    EVENT_SPAWN_REQUEST,
    EVENT_TURN_RESOLVED,
)
from lines.utils.singletons import get_board_lock, get_game_state, get_score_state, get_selection
from tests.helpers import build_session, drive_ticks, place

ROW = [(x, 0) for x in range(5)]
COLUMN = [(6, y) for y in range(2, 7)]


def record(bus, name):
    received = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def test_match_destroys_pieces_and_scores():
    session = build_session()
    place(session.grid, ROW, Color.RED)
    session.grid.set_color(8, 8, Color.BLUE)
    found = record(session.bus, EVENT_MATCH_FOUND)
    cleared = record(session.bus, EVENT_MATCH_CLEARED)
    scores = record(session.bus, EVENT_SCORE_CHANGED)
    spawns = record(session.bus, EVENT_SPAWN_REQUEST)

    assert session.turns.resolve_turn() is True

    assert all(session.grid.is_empty(x, y) for x, y in ROW)
    assert session.grid.color_at(8, 8) is Color.BLUE
    assert found[0]["positions"] == ROW
    assert found[0]["directions"] == 1
    assert cleared == [{"positions": ROW, "destroyed": 5}]
    assert scores == [{"score": 5, "delta": 5}]
    assert spawns == []
    score_state = get_score_state(session.world)
    assert score_state.destroyed_pieces == 5
    assert score_state.combo == 1.5


def test_crossing_lines_score_both_directions():
    session = build_session()
    place(session.grid, [(x, 4) for x in range(2, 7)], Color.GREEN)
    place(session.grid, [(4, y) for y in range(2, 7)], Color.GREEN)

    session.turns.resolve_turn()

    score_state = get_score_state(session.world)
    # (5 + 5) * 1.5 with the shared cell listed in both directions.
    assert score_state.score == 15
    assert score_state.destroyed_pieces == 9
    assert session.grid.occupied_cells() == []


def test_consecutive_matches_grow_combo():
    session = build_session()
    combos = record(session.bus, EVENT_COMBO_CHANGED)
    place(session.grid, ROW, Color.RED)
    session.turns.resolve_turn()
    place(session.grid, COLUMN, Color.BLUE)
    session.turns.resolve_turn()

    score_state = get_score_state(session.world)
    assert score_state.score == 5 + 7
    assert score_state.combo == 2.25
    assert combos == [{"combo": 1.5}, {"combo": 2.25}]


def test_turn_without_match_spawns_and_resets_combo():
    session = build_session()
    score_state = get_score_state(session.world)
    score_state.combo = 2.25
    combos = record(session.bus, EVENT_COMBO_CHANGED)
    spawns = record(session.bus, EVENT_SPAWN_REQUEST)
    resolved = record(session.bus, EVENT_TURN_RESOLVED)

    assert session.turns.resolve_turn() is False

    assert spawns == [{"reason": "no_match"}]
    assert len(session.grid.occupied_cells()) == 3
    assert score_state.combo == 1.0
    assert combos == [{"combo": 1.0}]
    assert resolved == [{"matched": False, "turn": 1}]
    assert score_state.score == 0


def test_base_combo_not_reannounced():
    session = build_session()
    combos = record(session.bus, EVENT_COMBO_CHANGED)
    session.turns.resolve_turn()
    assert combos == []


def test_lock_counts_down_before_resolving():
    session = build_session(lock_duration=0.5)
    place(session.grid, ROW[:4], Color.RED)
    session.grid.set_color(4, 2, Color.RED)
    unlocked = record(session.bus, EVENT_BOARD_UNLOCKED)
    previews = record(session.bus, EVENT_PATH_PREVIEW)
    resolved = record(session.bus, EVENT_TURN_RESOLVED)

    assert session.movement.try_move((4, 2), (4, 0))
    drive_ticks(session.bus, count=3, dt=0.1)
    assert get_board_lock(session.world).locked
    assert resolved == []
    assert get_selection(session.world).path == [(4, 2), (4, 1), (4, 0)]

    drive_ticks(session.bus, count=3, dt=0.1)

    assert not get_board_lock(session.world).locked
    assert len(unlocked) == 1
    assert previews[-1] == {"path": None, "color": None}
    assert get_selection(session.world).path == []
    assert resolved == [{"matched": True, "turn": 1}]
    assert get_score_state(session.world).score == 5
    assert session.grid.occupied_cells() == []


def test_unmatched_move_leads_to_spawn():
    session = build_session()
    session.grid.set_color(0, 0, Color.RED)
    spawned = record(session.bus, EVENT_PIECES_SPAWNED)

    session.movement.try_move((0, 0), (8, 8))
    drive_ticks(session.bus)

    assert len(spawned) == 1
    assert len(session.grid.occupied_cells()) == 4
    assert get_game_state(session.world).turns == 1


def test_ticks_without_lock_do_nothing():
    session = build_session()
    resolved = record(session.bus, EVENT_TURN_RESOLVED)
    drive_ticks(session.bus)
    assert resolved == []
