"""Tests for drag_controller module (state machine and scroll speed)."""

import pytest

from photogrid.ui.photo_grid.auto_scroll import ScrollSpeedSignal
from photogrid.ui.photo_grid.drag_controller import (
    DragController,
    DragSession,
    DragState,
    compute_scroll_speed,
)
from photogrid.ui.photo_grid.selection_model import SelectionModel
from photogrid.utils.exceptions import DragContractError


def _make_controller(viewport, selected=None, threshold=40.0):
    selection = SelectionModel(selected)
    speed = ScrollSpeedSignal()
    controller = DragController(viewport, selection, speed, auto_scroll_threshold=threshold)
    return controller, selection, speed


class TestComputeScrollSpeed:
    def test_zero_away_from_edges(self):
        assert compute_scroll_speed(400, 800, 40) == 0.0

    def test_exactly_at_threshold_is_zero(self):
        assert compute_scroll_speed(760, 800, 40) == 0.0
        assert compute_scroll_speed(40, 800, 40) == 0.0

    def test_near_bottom_is_positive(self):
        assert compute_scroll_speed(795, 800, 40) == 35

    def test_near_top_is_negative(self):
        assert compute_scroll_speed(5, 800, 40) == -35

    def test_scales_linearly(self):
        speeds = [compute_scroll_speed(800 - d, 800, 40) for d in (30, 20, 10)]
        assert speeds == [10, 20, 30]

    def test_bottom_wins_when_both_edges_apply(self):
        # Viewport shorter than two thresholds: both edges are in range
        assert compute_scroll_speed(30, 60, 40) == 10

    def test_pointer_below_viewport(self):
        assert compute_scroll_speed(810, 800, 40) == 50


class TestLongPress:
    def test_starts_drag_on_unselected_item(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        assert controller.long_press(viewport.center_of(42)) is True
        assert controller.state is DragState.DRAGGING
        assert controller.session == DragSession(anchor_key=42, last_key=42)
        assert selection.selected_keys() == [42]

    def test_over_empty_space_stays_idle(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        assert controller.long_press((20, 790)) is False
        assert controller.state is DragState.IDLE
        assert selection.is_empty()

    def test_on_selected_item_stays_idle(self, viewport):
        controller, selection, _speed = _make_controller(viewport, selected={42})
        assert controller.long_press(viewport.center_of(42)) is False
        assert controller.state is DragState.IDLE
        assert controller.session.anchor_key is None

        controller.move(viewport.center_of(47))
        assert selection.selected_keys() == [42]

    def test_long_press_while_dragging_restarts(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(10))
        controller.long_press(viewport.center_of(30))
        assert controller.session.anchor_key == 30
        assert selection.selected_keys() == [10, 30]


class TestMove:
    def test_extends_and_retracts(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move(viewport.center_of(47))
        assert selection.selected_keys() == [42, 43, 44, 45, 46, 47]
        assert controller.session.last_key == 47
        controller.move(viewport.center_of(44))
        assert selection.selected_keys() == [42, 43, 44]

    def test_drag_backwards_over_rows(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move(viewport.center_of(38))
        assert selection.selected_keys() == [38, 39, 40, 41, 42]

    def test_round_trip_restores_selection(self, viewport):
        controller, selection, _speed = _make_controller(viewport, selected={5})
        controller.long_press(viewport.center_of(42))
        after_start = selection.selected_keys()
        controller.move(viewport.center_of(71))
        controller.move(viewport.center_of(42))
        assert selection.selected_keys() == after_start

    def test_empty_space_keeps_selection(self, viewport):
        controller, selection, speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move(viewport.center_of(45))
        controller.move((20, 795))
        assert selection.selected_keys() == [42, 43, 44, 45]
        assert controller.session.last_key == 45
        assert speed.value == 35

    def test_move_while_idle_is_ignored(self, viewport):
        controller, selection, speed = _make_controller(viewport)
        controller.move(viewport.center_of(42))
        assert selection.is_empty()
        assert speed.value == 0

    def test_same_key_does_not_touch_selection(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        changes = []
        selection.connect(changes.append)
        x, y = viewport.center_of(42)
        controller.move((x + 3, y - 3))
        assert changes == []

    def test_scroll_speed_follows_pointer(self, viewport):
        controller, _selection, speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move((20, 795))
        assert speed.value == 35
        controller.move((500, 10))
        assert speed.value == -30
        controller.move((20, 400))
        assert speed.value == 0

    def test_missing_anchor_while_dragging_fails_fast(self, viewport):
        controller, _selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.session.anchor_key = None
        with pytest.raises(DragContractError):
            controller.move(viewport.center_of(47))


class TestEndAndCancel:
    def test_end_keeps_selection_and_zeroes_speed(self, viewport):
        controller, selection, speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move((viewport.center_of(47)[0], 795))
        controller.end()
        assert controller.state is DragState.IDLE
        assert controller.session == DragSession()
        assert speed.value == 0
        assert selection.selected_keys() == [42]

    def test_cancel_resets(self, viewport):
        controller, selection, speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.move(viewport.center_of(44))
        controller.move((500, 5))
        controller.cancel()
        assert controller.state is DragState.IDLE
        assert speed.value == 0
        assert selection.selected_keys() == [42, 43, 44]

    def test_move_after_end_is_ignored(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        controller.long_press(viewport.center_of(42))
        controller.end()
        controller.move(viewport.center_of(47))
        assert selection.selected_keys() == [42]


class TestEndToEnd:
    def test_drag_across_row(self, viewport):
        controller, selection, speed = _make_controller(viewport)

        controller.long_press(viewport.center_of(42))
        assert selection.selected_keys() == [42]

        controller.move(viewport.center_of(47))
        assert selection.selected_keys() == [42, 43, 44, 45, 46, 47]

        controller.move(viewport.center_of(44))
        assert selection.selected_keys() == [42, 43, 44]

        controller.end()
        assert selection.selected_keys() == [42, 43, 44]
        assert speed.value == 0


class TestTapAndSelectAction:
    def test_tap_outside_selection_mode_does_nothing(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        assert controller.tap(viewport.center_of(3)) == 3
        assert selection.is_empty()

    def test_tap_toggles_in_selection_mode(self, viewport):
        controller, selection, _speed = _make_controller(viewport, selected={1})
        controller.tap(viewport.center_of(3))
        assert selection.selected_keys() == [1, 3]
        controller.tap(viewport.center_of(3))
        assert selection.selected_keys() == [1]

    def test_tap_on_empty_space(self, viewport):
        controller, selection, _speed = _make_controller(viewport, selected={1})
        assert controller.tap((20, 790)) is None
        assert selection.selected_keys() == [1]

    def test_select_action_only_outside_selection_mode(self, viewport):
        controller, selection, _speed = _make_controller(viewport)
        assert controller.select_action(8) is True
        assert selection.selected_keys() == [8]
        assert controller.select_action(9) is False
        assert selection.selected_keys() == [8]
