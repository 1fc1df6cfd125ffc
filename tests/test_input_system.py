from lines.constants import BOTTOM_MARGIN, GRID_HEIGHT, GRID_WIDTH, MIN_TILE_SIZE
from lines.events.bus import (
    EventBus,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_TILE_HOVER,
)
from lines.systems.input import InputSystem
from lines.ui.layout import cell_center, compute_board_geometry, point_to_cell
from lines.utils.singletons import get_board_lock
from lines.world import create_world


class DummyWindow:
    def __init__(self, width=640, height=760):
        self.width = width
        self.height = height


def record(bus, name):
    received = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def center_of(window, x, y, cols=GRID_WIDTH, rows=GRID_HEIGHT):
    tile_size, start_x, start_y = compute_board_geometry(window.width, window.height, cols, rows)
    return cell_center(x, y, rows, tile_size, start_x, start_y)


def test_board_is_centered_above_bottom_margin():
    tile_size, start_x, start_y = compute_board_geometry(640, 760, 9, 9)
    assert tile_size >= MIN_TILE_SIZE
    assert start_y == BOTTOM_MARGIN
    assert start_x == (640 - 9 * tile_size) / 2


def test_tiny_window_uses_minimum_tile_size():
    tile_size, _, _ = compute_board_geometry(100, 200, 9, 9)
    assert tile_size == MIN_TILE_SIZE


def test_row_zero_is_drawn_at_the_top():
    tile_size, start_x, start_y = compute_board_geometry(640, 760, 9, 9)
    _, top_y = cell_center(0, 0, 9, tile_size, start_x, start_y)
    _, bottom_y = cell_center(0, 8, 9, tile_size, start_x, start_y)
    assert top_y > bottom_y
    assert bottom_y == start_y + tile_size / 2


def test_point_to_cell_inverts_cell_center():
    tile_size, start_x, start_y = compute_board_geometry(640, 760, 7, 5)
    for x, y in [(0, 0), (6, 4), (3, 2)]:
        px, py = cell_center(x, y, 5, tile_size, start_x, start_y)
        assert point_to_cell(px, py, 7, 5, tile_size, start_x, start_y) == (x, y)
    assert point_to_cell(start_x - 1, start_y, 7, 5, tile_size, start_x, start_y) is None
    assert point_to_cell(start_x, start_y + 5 * tile_size, 7, 5, tile_size, start_x, start_y) is None


def test_mouse_press_translates_to_tile_click():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    received = record(bus, EVENT_TILE_CLICK)

    px, py = center_of(window, 2, 6)
    bus.emit(EVENT_MOUSE_PRESS, x=px, y=py, button=1)

    assert received == [{"x": 2, "y": 6, "button": 1}]


def test_press_outside_board_and_other_buttons_ignored():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    received = record(bus, EVENT_TILE_CLICK)

    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    px, py = center_of(window, 2, 6)
    bus.emit(EVENT_MOUSE_PRESS, x=px, y=py, button=4)

    assert received == []


def test_board_size_comes_from_world():
    bus = EventBus()
    window = DummyWindow()
    world = create_world(bus, width=5, height=4)
    input_system = InputSystem(bus, window, world=world)

    px, py = center_of(window, 4, 3, cols=5, rows=4)

    assert input_system.cell_at(px, py) == (4, 3)


def test_press_ignored_while_board_locked():
    bus = EventBus()
    window = DummyWindow()
    world = create_world(bus)
    InputSystem(bus, window, world=world)
    received = record(bus, EVENT_TILE_CLICK)
    get_board_lock(world).locked = True

    px, py = center_of(window, 0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=px, y=py, button=1)

    assert received == []


def test_hover_emitted_only_when_cell_changes():
    bus = EventBus()
    window = DummyWindow()
    InputSystem(bus, window)
    hovers = record(bus, EVENT_TILE_HOVER)

    px, py = center_of(window, 1, 1)
    bus.emit(EVENT_MOUSE_MOVE, x=px, y=py)
    bus.emit(EVENT_MOUSE_MOVE, x=px + 1, y=py + 1)
    qx, qy = center_of(window, 2, 1)
    bus.emit(EVENT_MOUSE_MOVE, x=qx, y=qy)

    assert hovers == [{"x": 1, "y": 1}, {"x": 2, "y": 1}]
