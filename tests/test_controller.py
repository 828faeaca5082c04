"""Tests for hit testing and nudge dragging."""

from unittest.mock import MagicMock

import pytest

from radclock.animator import AngleAnimator, linear
from radclock.controller import DragController, hit_test
from radclock.dial import Dial


@pytest.fixture
def dial():
    """Dial centred at (150, 25), box 125..175 x 0..50."""
    d = Dial("start")
    d.place(150, 150, 125, 50)
    return d


@pytest.fixture
def animator():
    animator = MagicMock(spec=AngleAnimator)
    animator.start.return_value = True
    return animator


@pytest.fixture
def controller(animator):
    return DragController(animator)


class TestHitTest:
    """Tests for dial targeting."""

    def test_hit(self, dial):
        assert hit_test(150, 25, [dial]) is dial

    def test_miss(self, dial):
        assert hit_test(150, 150, [dial]) is None

    def test_first_match_wins(self, dial):
        twin = Dial("twin")
        twin.place(150, 150, 125, 50)
        assert hit_test(150, 25, [dial, twin]) is dial

    def test_skips_non_draggable(self, dial):
        marker = Dial("selected", draggable=False)
        marker.place(150, 150, 125, 50)
        assert hit_test(150, 25, [marker, dial]) is dial
        assert hit_test(150, 25, [marker]) is None


class TestNudge:
    """Tests for the direction-only drag rule."""

    def test_rightward_move_starts_animation(self, controller, animator, dial):
        result = controller.on_pointer_move(155, 25, 150, 25, [dial])
        assert result is dial
        animator.start.assert_called_once_with(dial)

    def test_downward_move_starts_animation(self, controller, animator, dial):
        controller.on_pointer_move(150, 30, 150, 25, [dial])
        animator.start.assert_called_once_with(dial)

    def test_left_and_down_starts_animation(self, controller, animator, dial):
        controller.on_pointer_move(145, 30, 150, 25, [dial])
        animator.start.assert_called_once_with(dial)

    def test_left_and_up_does_nothing(self, controller, animator, dial):
        result = controller.on_pointer_move(145, 20, 150, 25, [dial])
        assert result is dial
        animator.start.assert_not_called()

    def test_no_motion_does_nothing(self, controller, animator, dial):
        controller.on_pointer_move(150, 25, 150, 25, [dial])
        animator.start.assert_not_called()

    def test_magnitude_ignored(self, controller, animator, dial):
        controller.on_pointer_move(170, 25, 130, 25, [dial])
        animator.start.assert_called_once_with(dial)

    def test_outside_any_dial(self, controller, animator, dial):
        result = controller.on_pointer_move(160, 160, 150, 150, [dial])
        assert result is None
        animator.start.assert_not_called()

    def test_hit_uses_current_position(self, controller, animator, dial):
        # Previous inside, current outside
        result = controller.on_pointer_move(180, 25, 170, 25, [dial])
        assert result is None
        animator.start.assert_not_called()


class TestActiveDial:
    """Tests for single-dial interaction tracking."""

    def test_first_target_becomes_active(self, controller, dial):
        controller.on_pointer_move(150, 25, 150, 25, [dial])
        assert controller.active is dial

    def test_other_dial_ignored_while_active(self, controller, animator, dial):
        other = Dial("end", angle=90)
        other.place(150, 150, 125, 50)
        controller.on_pointer_move(150, 25, 150, 25, [dial, other])
        result = controller.on_pointer_move(280, 150, 270, 150, [dial, other])
        assert result is None
        animator.start.assert_not_called()

    def test_release(self, controller, dial):
        controller.on_pointer_move(150, 25, 150, 25, [dial])
        controller.release()
        assert controller.active is None


class TestWithRealAnimator:
    """Controller driving an actual animator."""

    def test_repeated_moves_start_once(self, dial):
        animator = AngleAnimator(increment=30.0, interpolator=linear)
        controller = DragController(animator)

        controller.on_pointer_move(151, 25, 150, 25, [dial])
        controller.on_pointer_move(152, 25, 151, 25, [dial])
        assert animator.is_running
        assert animator.dial is dial

        animator.on_tick(1.0)
        assert dial.angle == pytest.approx(30)
        assert not animator.is_running
