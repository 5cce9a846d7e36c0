"""Command execution with undo and redo history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

MAX_UNDO_STACK_SIZE = 50


class Command(ABC):
    """An undoable edit."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the edit."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the edit."""


class UndoRedoManager:
    """Runs commands and keeps bounded undo and redo stacks."""

    def __init__(self, on_command_executed: Callable[[], None] | None = None) -> None:
        self.on_command_executed = on_command_executed
        self._undo: list[Command] = []
        self._redo: list[Command] = []

    def execute_command(self, command: Command) -> None:
        """Run ``command``, record it for undo and drop the redo history."""
        command.execute()
        self._undo.append(command)
        self._redo.clear()
        if self.on_command_executed is not None:
            self.on_command_executed()
        if len(self._undo) > MAX_UNDO_STACK_SIZE:
            del self._undo[0]

    def undo(self) -> Command | None:
        """Undo the most recent command; return it, or None if there was none."""
        if not self._undo:
            return None
        command = self._undo.pop()
        command.undo()
        self._redo.append(command)
        return command

    def redo(self) -> Command | None:
        """Re-run the most recently undone command; return it, or None."""
        if not self._redo:
            return None
        command = self._redo.pop()
        command.execute()
        self._undo.append(command)
        return command

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo_stack(self) -> tuple[Command, ...]:
        """Commands that can be undone, oldest first."""
        return tuple(self._undo)

    def redo_stack(self) -> tuple[Command, ...]:
        """Commands that can be redone, oldest first."""
        return tuple(self._redo)

    def clear_history(self) -> None:
        self._undo.clear()
        self._redo.clear()