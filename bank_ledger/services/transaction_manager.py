"""
Transaction manager — the undo stack.

Executed commands are kept in order with a cursor on the
most recent one that has not been undone (-1 when there is
none). Executing a new command discards everything above
the cursor, so an undone command can never come back.
"""

import logging

from bank_ledger.services.commands import Command

logger = logging.getLogger(__name__)


class TransactionManager:

    def __init__(self):
        self._commands: list[Command] = []
        self._cursor = -1

    @property
    def cursor(self) -> int:
        return self._cursor

    def execute_command(self, command: Command):
        """
        Execute a command and push it on the stack.

        If execute() raises, the error propagates and the
        stack is left exactly as it was. A command that has
        already executed is not run again or pushed twice.
        """
        if command.executed:
            logger.debug("Ignoring already executed %r", command)
            return None

        result = command.execute()

        del self._commands[self._cursor + 1:]
        self._commands.append(command)
        self._cursor += 1

        logger.debug("Executed %r (cursor=%d)", command, self._cursor)
        return result

    def undo_last(self) -> bool:
        """Undo the command at the cursor. Returns False if there is none."""
        if self._cursor < 0:
            return False

        command = self._commands[self._cursor]
        command.undo()
        self._cursor -= 1
        return True

    def can_undo(self) -> bool:
        return self._cursor >= 0

    def history(self) -> tuple[Command, ...]:
        """Commands up to and including the cursor, oldest first."""
        return tuple(self._commands[:self._cursor + 1])
