"""A stack of human-readable steps used to report where a failure happened."""

from __future__ import annotations

import logging

_logger = logging.getLogger(__name__)


class Profile:
    """Records nested processing steps so errors can show a trace."""

    def __init__(self) -> None:
        self.stack: list[str] = []

    def push(self, message: str) -> None:
        """Enter a new step."""
        self.stack.append(message)

    def next(self, message: str) -> None:
        """Replace the current step with a new one."""
        self.pop()
        self.push(message)

    def pop(self) -> None:
        """Leave the current step; logs an error if there is none."""
        if not self.stack:
            _logger.error("pop stack when stack is empty")
            return
        self.stack.pop()

    def clear(self) -> None:
        """Forget all steps."""
        self.stack.clear()

    def stack_trace(self) -> str:
        """Return the recorded steps, one per line."""
        return "\n".join(self.stack)

    def print_and_clear(self, error: BaseException) -> str:
        """Log ``error`` with the current trace, clear the stack and return the message."""
        message = f"{error}\nstack trace:\n{self.stack_trace()}"
        _logger.error(message)
        self.stack.clear()
        return message