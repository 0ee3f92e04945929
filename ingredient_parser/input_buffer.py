# ingredient_parser/input_buffer.py
"""
Input Buffer: character cursor with nested checkpoint / rollback.

The buffer knows nothing about grammar. Readers and rules move the cursor
forward with peek / consume / next; anything that may need to back out wraps
its work in a checkpoint:

    with buffer.checkpoint() as cp:
        if rule.execute(buffer).succeeded:
            cp.commit()
    # uncommitted -> cursor is back where the checkpoint was taken

Checkpoints form a strict LIFO stack. Releasing anything other than the top
checkpoint raises CheckpointOrderError.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from .errors import (
    BufferOutOfBoundsError,
    CheckpointOrderError,
    ConsumptionMismatchError,
)

log = logging.getLogger(__name__)


CharPredicate = Callable[[str], bool]


class InputBuffer:
    """Forward-only cursor over an immutable string."""

    def __init__(self, text: str):
        self._text = text
        self._position = 0
        self._checkpoints: List[Checkpoint] = []

    def __repr__(self) -> str:
        return f"InputBuffer(position={self._position}, remaining={self.remaining()!r})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    @property
    def depth(self) -> int:
        """Number of checkpoints currently held."""
        return len(self._checkpoints)

    def remaining(self) -> str:
        return self._text[self._position:]

    # ── Reads ────────────────────────────────────────

    def has_next(self) -> bool:
        return self._position < len(self._text)

    def peek(self) -> str:
        """Return the next character without consuming it."""
        if self._position < len(self._text):
            return self._text[self._position]
        raise BufferOutOfBoundsError(
            "Unable to read next character as all characters have been consumed."
        )

    def peek_ahead(self, offset: int, count: int = 1) -> str:
        """Return up to *count* characters starting *offset* past the cursor.

        Never raises; the result is short (or empty) near the end of input.
        """
        if offset < 0 or count <= 0:
            return ""
        start = self._position + offset
        return self._text[start:start + count]

    def matches(self, predicate: CharPredicate) -> bool:
        """True if the next character satisfies *predicate* (False at end)."""
        return self.has_next() and predicate(self._text[self._position])

    def is_digit(self) -> bool:
        return self.matches(str.isdecimal)

    def is_letter(self) -> bool:
        return self.matches(str.isalpha)

    def is_whitespace(self) -> bool:
        return self.matches(str.isspace)

    # ── Consumption ──────────────────────────────────

    def consume(self, expected: str) -> None:
        if not self.matches(lambda c: c == expected):
            raise ConsumptionMismatchError(
                f"Unable to consume character {expected!r} at position {self._position}."
            )
        self._position += 1

    def try_consume(self, expected: str) -> bool:
        if self.matches(lambda c: c == expected):
            self._position += 1
            return True
        return False

    def optionally_consume(self, expected: str) -> bool:
        """Consume *expected* if present. Always True, for use in conditions."""
        self.try_consume(expected)
        return True

    def next(self) -> str:
        c = self.peek()
        self.consume(c)
        return c

    def reset(self) -> None:
        """Rewind to the start of input. Not allowed while checkpoints are held."""
        if self._checkpoints:
            raise CheckpointOrderError(
                f"Cannot reset buffer with {len(self._checkpoints)} checkpoint(s) held."
            )
        self._position = 0

    # ── Checkpoints ──────────────────────────────────

    def checkpoint(self) -> "Checkpoint":
        cp = Checkpoint(self, self._position)
        self._checkpoints.append(cp)
        return cp

    def _release(self, cp: "Checkpoint") -> None:
        if not self._checkpoints or self._checkpoints[-1] is not cp:
            raise CheckpointOrderError(
                f"Checkpoint at position {cp.saved_position} released out of order "
                f"(stack depth {len(self._checkpoints)})."
            )
        if not cp.committed:
            self._position = cp.saved_position
        self._checkpoints.pop()


class Checkpoint:
    """Saved cursor position. Rolls back on release unless committed."""

    __slots__ = ("_buffer", "saved_position", "committed", "released")

    def __init__(self, buffer: InputBuffer, saved_position: int):
        self._buffer = buffer
        self.saved_position = saved_position
        self.committed = False
        self.released = False

    def commit(self) -> None:
        self.committed = True

    def release(self) -> None:
        if self.released:
            raise CheckpointOrderError(
                f"Checkpoint at position {self.saved_position} released twice."
            )
        self._buffer._release(self)
        self.released = True

    def __enter__(self) -> "Checkpoint":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.release()
            return
        # body already raised: log the release error, the body's exception propagates
        try:
            self.release()
        except CheckpointOrderError:
            log.error("Checkpoint release failed while unwinding %s", exc_type.__name__, exc_info=True)


class ParserContext:
    """Per-call parse state: the sanitized line and the buffer over it."""

    def __init__(self, text: str):
        self.text = text
        self.buffer = InputBuffer(text)
