"""Position state saved as snapshots and restored through a history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["State", "Snapshot", "Original", "History"]


@dataclass(frozen=True)
class State:
    """A 2-D position."""

    pos_x: int = 0
    pos_y: int = 0

    def __str__(self) -> str:
        return f"State{{x={self.pos_x}, y={self.pos_y}}}"


@dataclass(frozen=True)
class Snapshot:
    """An immutable capture of a state."""

    state: State


class Original:
    """The object whose state is saved and restored."""

    def __init__(self, state: State | None = None) -> None:
        self._state = state if state is not None else State()

    @property
    def state(self) -> State:
        return self._state

    def snap(self) -> Snapshot:
        """Capture the current state."""
        return Snapshot(self._state)

    def restore(self, snapshot: Snapshot) -> None:
        """Return to the state held by ``snapshot``."""
        self._state = snapshot.state

    def move(self, x: int, y: int) -> None:
        """Move to the position ``(x, y)``."""
        self._state = State(x, y)


class History:
    """A stack of snapshots."""

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def add_snapshot(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def undo(self) -> Optional[Snapshot]:
        """Drop the latest snapshot and return the one before it, if any."""
        if not self._snapshots:
            return None
        self._snapshots.pop()
        if not self._snapshots:
            return None
        return self._snapshots[-1]