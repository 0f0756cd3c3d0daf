"""Interaction state: tracking which texts are showing and which seats are free."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Optional

from huaweiwall.fsm import BaseState


class InteractionState(BaseState):
    """State active while visitors interact with the wall."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self.shower_text_id_array: list[int] = []
        self.ui_text_toggle_track_array: list[list[int]] = []
        self._rng = rng if rng is not None else random.Random()

    def check_id_is_showing(self, text_id: int) -> int:
        """Return the position of ``text_id`` among the shown texts, or -1."""
        for position, shown in enumerate(self.shower_text_id_array):
            if shown == text_id:
                return position
        return -1

    def init_ui_text_toggle_track_array(self, count: int) -> None:
        """Reset the toggle tracker to ``count`` entries of two cells set to 1."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self.ui_text_toggle_track_array = [[1, 1] for _ in range(count)]

    def get_random_unused_seat(self, animate_array: Iterable[bool]) -> int:
        """Pick at random the index of a seat that is not animating."""
        free = [index for index, busy in enumerate(animate_array) if not busy]
        if not free:
            raise ValueError("no unused seat available")
        return self._rng.choice(free)