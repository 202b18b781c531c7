"""Player input consumed by the step reducer.

The window/input collaborator samples the pointer every frame and hands the
kernel an :class:`Input`: the cursor position in window pixels (origin at the
top-left of the map) and whether the confirm button is held.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Input:
    """One tick worth of player intent.

    Attributes:
        cursor_x: Pointer x in pixels, measured from the map's left edge.
        cursor_y: Pointer y in pixels, measured from the map's top edge.
        confirm: True while the confirm (pointer) button is held.
    """

    cursor_x: int = 0
    cursor_y: int = 0
    confirm: bool = False


IDLE = Input()
