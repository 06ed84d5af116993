"""
Tests for the selection controller state machine
"""

import random

import numpy as np
import pytest

from core.enums import InteractionMode, PointerEventType
from core.geometry import Circle, DisplayRect, is_circle_contained
from core.selection_controller import PointerEvent, SelectionController


def draw(controller, cx, cy, px, py):
    controller.pointer_down(cx, cy)
    controller.pointer_move(px, py)
    controller.pointer_up()


class TestDrawing:
    """Drawing a new circle"""

    def test_down_starts_drawing(self, controller):
        assert controller.pointer_down(150, 150)
        assert controller.mode == InteractionMode.DRAWING
        assert controller.circle == Circle(150, 150, 0)
        assert controller.drag_offset is None

    def test_move_sets_radius_from_pointer_distance(self, controller):
        controller.pointer_down(150, 150)
        controller.pointer_move(150, 230)
        assert controller.circle.center_x == 150
        assert controller.circle.center_y == 150
        assert controller.circle.radius == pytest.approx(80)

    def test_radius_capped_at_half_smaller_dimension(self, wide_image):
        controller = SelectionController(image=wide_image)
        controller.pointer_down(300, 200)
        controller.pointer_move(600, 200)
        assert controller.circle.radius == 200

    def test_radius_limited_by_nearest_edge(self, controller):
        controller.pointer_down(40, 150)
        controller.pointer_move(200, 150)
        assert controller.circle.radius == 40
        assert is_circle_contained(controller.circle, 300, 300)

    def test_up_keeps_circle(self, controller):
        draw(controller, 150, 150, 250, 150)
        assert controller.mode == InteractionMode.IDLE
        assert controller.circle == Circle(150, 150, 100)

    def test_leave_ends_drawing(self, controller):
        controller.pointer_down(150, 150)
        controller.pointer_move(200, 150)
        assert controller.dispatch(PointerEvent(type=PointerEventType.LEAVE))
        assert controller.mode == InteractionMode.IDLE
        assert controller.circle.radius == 50

    def test_down_outside_replaces_circle(self, controller):
        draw(controller, 100, 100, 150, 100)
        controller.pointer_down(260, 260)
        assert controller.mode == InteractionMode.DRAWING
        assert controller.circle == Circle(260, 260, 0)


class TestMoving:
    """Dragging an existing circle"""

    def test_down_inside_starts_moving(self, controller):
        draw(controller, 150, 150, 200, 150)
        controller.pointer_down(160, 140)
        assert controller.mode == InteractionMode.MOVING
        assert controller.drag_offset.dx == 10
        assert controller.drag_offset.dy == -10

    def test_move_keeps_grab_offset(self, controller):
        draw(controller, 150, 150, 200, 150)
        controller.pointer_down(160, 150)
        controller.pointer_move(170, 160)
        assert (controller.circle.center_x, controller.circle.center_y) == (160, 160)
        assert controller.circle.radius == 50

    def test_move_clamped_to_image(self, controller):
        draw(controller, 150, 150, 200, 150)
        controller.pointer_down(150, 150)
        controller.pointer_move(0, 0)
        assert (controller.circle.center_x, controller.circle.center_y) == (50, 50)

        controller.pointer_move(1000, 1000)
        assert (controller.circle.center_x, controller.circle.center_y) == (250, 250)

    def test_drag_toward_corner_stops_at_radius(self, controller):
        draw(controller, 100, 100, 150, 100)
        controller.pointer_down(100, 100)
        controller.pointer_move(10, 10)
        assert (controller.circle.center_x, controller.circle.center_y) == (50, 50)

    def test_up_clears_drag_offset(self, controller):
        draw(controller, 150, 150, 200, 150)
        controller.pointer_down(150, 150)
        controller.pointer_up()
        assert controller.mode == InteractionMode.IDLE
        assert controller.drag_offset is None


class TestIdle:
    """Events that do nothing"""

    def test_move_while_idle_is_ignored(self, controller):
        revision = controller.revision
        assert not controller.pointer_move(100, 100)
        assert controller.circle is None
        assert controller.revision == revision

    def test_up_while_idle_is_ignored(self, controller):
        assert not controller.pointer_up()

    def test_dispatch_without_image(self):
        with pytest.raises(RuntimeError):
            SelectionController().dispatch(PointerEvent(type=PointerEventType.DOWN))


class TestDispatch:
    """Device coordinates through dispatch"""

    def test_scaled_display_maps_to_image_space(self, wide_image):
        controller = SelectionController(image=wide_image)
        display = DisplayRect(left=10, top=20, width=300, height=200)

        controller.dispatch(PointerEvent(PointerEventType.DOWN, 160, 120, display))
        controller.dispatch(PointerEvent(PointerEventType.MOVE, 210, 120, display))
        controller.dispatch(PointerEvent(PointerEventType.UP))

        assert controller.circle.center_x == 300
        assert controller.circle.center_y == 200
        assert controller.circle.radius == 100

    def test_down_outside_image_clamps_center(self, controller):
        controller.pointer_down(-20, 400)
        assert (controller.circle.center_x, controller.circle.center_y) == (0, 300)

    def test_random_sequences_keep_circle_inside(self, wide_image):
        controller = SelectionController(image=wide_image)
        rng = random.Random(1234)
        kinds = [PointerEventType.DOWN, PointerEventType.MOVE, PointerEventType.MOVE,
                 PointerEventType.UP, PointerEventType.LEAVE]

        for _ in range(2000):
            kind = rng.choice(kinds)
            event = PointerEvent(kind, rng.randint(-100, 700), rng.randint(-100, 500))
            controller.dispatch(event)
            if controller.circle is not None:
                assert is_circle_contained(controller.circle, 600, 400)


class TestImageAndRendering:
    """Image replacement, reset and overlay rendering"""

    def test_load_image_resets_state(self, controller, wide_image):
        draw(controller, 150, 150, 200, 150)
        controller.pointer_down(150, 150)
        controller.load_image(wide_image)
        assert controller.circle is None
        assert controller.mode == InteractionMode.IDLE
        assert (controller.width, controller.height) == (600, 400)

    def test_reset_clears_selection(self, controller):
        draw(controller, 150, 150, 200, 150)
        controller.reset()
        assert controller.circle is None
        assert not controller.has_selection

    def test_every_transition_redraws(self, controller):
        frames = []
        controller.add_redraw_listener(frames.append)
        draw(controller, 150, 150, 200, 150)
        assert len(frames) == 3
        assert all(frame.shape == (300, 300, 3) for frame in frames)

    def test_render_without_selection_is_plain_image(self, controller, square_image):
        assert np.array_equal(controller.render(), square_image)

    def test_render_is_cached_until_next_transition(self, controller):
        draw(controller, 150, 150, 200, 150)
        first = controller.render()
        assert controller.render() is first
        controller.pointer_down(150, 150)
        assert controller.render() is not first
