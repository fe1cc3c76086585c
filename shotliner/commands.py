"""Undoable editing commands and the history that tracks them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Deque, Optional, Union
from uuid import UUID

if TYPE_CHECKING:
    from shotliner.document import ShotLine, Tag


class HistoryLimitError(Exception):
    """Raised when the command history cannot advance any further."""


class CommandHistoryStatus(Enum):
    """Outcome of an operation on the command history."""

    EXECUTE_SUCCESS = auto()
    UNDO_SUCCESS = auto()
    UNDO_LIMIT_REACHED = auto()
    REDO_LIMIT_REACHED = auto()


@dataclass
class AddShotline:
    shotline_id: UUID
    shotline: "ShotLine"


@dataclass
class RemoveShotline:
    shotline_id: UUID
    old_shotline: Optional["ShotLine"] = None


@dataclass
class ModifyShotline:
    shotline_id: UUID
    old_shotline: Optional["ShotLine"] = None


@dataclass
class AddTag:
    tag_id: UUID
    tag: "Tag"


@dataclass
class ModifyTag:
    tag_id: UUID
    old_tag: Optional["Tag"] = None


@dataclass
class RemoveTag:
    tag_id: UUID
    old_tag: Optional["Tag"] = None


Command = Union[AddShotline, RemoveShotline, ModifyShotline, AddTag, ModifyTag, RemoveTag]


@dataclass
class CommandHistory:
    """A bounded cursor over executed commands."""

    max_history_size: int
    index: int = 0
    current_history_size: int = 0
    history: Deque[Command] = field(default_factory=deque)

    def execute(self) -> CommandHistoryStatus:
        """Advance the cursor; raise HistoryLimitError once the limit is reached."""
        if self.index >= self.max_history_size:
            raise HistoryLimitError(
                f"history limit of {self.max_history_size} reached"
            )
        self.index += 1
        return CommandHistoryStatus.EXECUTE_SUCCESS

    def undo(self) -> None:
        """Step the cursor back, staying at zero."""
        if self.index > 0:
            self.index -= 1

    def redo(self) -> None:
        """Step the cursor forward while recorded history remains."""
        if self.index + 1 <= self.current_history_size:
            self.index += 1