from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep systems alive even when nothing else holds them.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y
EVENT_TILE_CLICK = "tile_click"                    # payload: x, y, button
EVENT_TILE_HOVER = "tile_hover"                    # payload: x, y


# ============================================================================
# SELECTION & MOVEMENT
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: x, y, color=Color
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev=(x,y)
EVENT_MOVE_REQUEST = "move_request"                # payload: start=(x,y), end=(x,y)
EVENT_MOVE_REJECTED = "move_rejected"              # payload: start, end, reason=str
EVENT_PIECE_MOVED = "piece_moved"                  # payload: start, end, path=[(x,y),...], color=Color
EVENT_PATH_PREVIEW = "path_preview"                # payload: path=[(x,y),...] | None, color=Color|None


# ============================================================================
# TURN RESOLUTION
# ============================================================================
EVENT_BOARD_LOCKED = "board_locked"                # payload: duration=float
EVENT_BOARD_UNLOCKED = "board_unlocked"            # payload: None
EVENT_MATCH_FOUND = "match_found"                  # payload: results=[DirectionResult], positions=[(x,y),...], directions=int
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(x,y),...], destroyed=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_COMBO_CHANGED = "combo_changed"              # payload: combo=float
EVENT_TURN_RESOLVED = "turn_resolved"              # payload: matched=bool, turn=int


# ============================================================================
# SPAWNING
# ============================================================================
EVENT_SPAWN_REQUEST = "spawn_request"              # payload: reason=str
EVENT_PIECES_SPAWNED = "pieces_spawned"            # payload: pieces=[((x,y), Color),...]
EVENT_PREVIEW_CHANGED = "preview_changed"          # payload: colors=[Color,...]
EVENT_BOARD_FULL = "board_full"                    # payload: empty=int, requested=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_START = "game_start"                    # payload: None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: score, destroyed, elapsed, score_per_piece, turns
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
