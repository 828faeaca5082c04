"""Pointer hit testing and nudge dragging for dials."""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .animator import AngleAnimator
    from .dial import Dial

logger = logging.getLogger(__name__)


def hit_test(x: float, y: float, dials: Iterable["Dial"]) -> Optional["Dial"]:
    """Return the first draggable dial whose box contains the point."""
    for dial in dials:
        if dial.draggable and dial.contains_point(x, y):
            return dial
    return None


class DragController:
    """
    Turns pointer moves over a dial into one-tick nudges.

    Only the direction of motion matters: any rightward or downward
    component starts the animator, anything else is ignored. The
    distance moved is never used.
    """

    def __init__(self, animator: "AngleAnimator"):
        self.animator = animator
        self.active: Optional["Dial"] = None

    def on_pointer_move(
        self,
        x: float,
        y: float,
        previous_x: float,
        previous_y: float,
        dials: Iterable["Dial"],
    ) -> Optional["Dial"]:
        """
        Handle a pointer move.

        Args:
            x: Current pointer X
            y: Current pointer Y
            previous_x: Pointer X at the previous event
            previous_y: Pointer Y at the previous event
            dials: Candidate dials, in priority order

        Returns:
            The dial under the pointer, or None
        """
        dial = hit_test(x, y, dials)
        if dial is None:
            return None

        if self.active is None:
            self.active = dial
        elif dial is not self.active:
            return None

        dx = x - previous_x
        dy = y - previous_y
        if dx > 0 or dy > 0:
            if self.animator.start(dial):
                logger.debug(f"Nudge {dial.name} (dx={dx:.1f}, dy={dy:.1f})")
        return dial

    def release(self) -> None:
        """End the current interaction."""
        self.active = None
