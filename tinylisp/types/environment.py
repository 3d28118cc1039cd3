"""Runtime environment for tinylisp.

The Environment is a stack of frames, each a mapping from symbol name to a
Node. Lookups scan from the innermost frame outwards; bindings always land in
the innermost frame. A frame is pushed for every closure call and popped on
the way out, which is the only scoping mechanism the language has (dynamic
scope).

The environment also carries the evaluation depth counter used to bound
recursion, since it is the one object threaded through every evaluation.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from tinylisp import Node
from tinylisp.config import get_max_depth
from tinylisp.errors import EnvironmentStackError

logger = logging.getLogger(__name__)


class Environment:
    """Stack of variable frames, innermost last."""

    __slots__ = ("frames", "depth", "max_depth")

    def __init__(self, max_depth: Optional[int] = None):
        # The outermost frame lives for the whole session
        self.frames: list[dict[str, Node]] = [{}]
        self.depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def _innermost(self, operation: str) -> dict[str, Node]:
        if not self.frames:
            raise EnvironmentStackError(f"cannot {operation}: environment has no frames")
        return self.frames[-1]

    def lookup(self, name: str) -> Optional[Node]:
        """Return the value bound to `name` in the innermost frame holding it, or None."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        return None

    def bind(self, name: str, value: Node) -> None:
        """Bind `name` to `value` in the innermost frame, replacing any binding there."""
        frame = self._innermost("bind")
        frame[name] = value

    def unbind(self, name: str) -> None:
        """Remove `name` from the innermost frame. Outer frames are untouched."""
        self._innermost("unbind").pop(name, None)

    def push_frame(self) -> None:
        self.frames.append({})
        logger.debug("pushed frame %d", len(self.frames))

    def pop_frame(self) -> None:
        if not self.frames:
            raise EnvironmentStackError("cannot pop a frame: environment has no frames")
        self.frames.pop()
        logger.debug("popped frame, %d left", len(self.frames))

    @contextmanager
    def frame(self) -> Iterator[dict[str, Node]]:
        """Push a frame for the duration of the block; it is popped on every exit path."""
        self.push_frame()
        try:
            yield self.frames[-1]
        finally:
            self.pop_frame()

    def __len__(self) -> int:
        return len(self.frames)

    def _write_frame(self, frame: dict[str, Node], buffer: StringIO) -> None:
        """Write one frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for outer frames."""
        with StringIO() as buffer:
            if self.frames:
                self._write_frame(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Every frame, innermost first, for debugging."""
        with StringIO() as buffer:
            buffer.write("<Environment frames: ")
            chain = []
            for frame in reversed(self.frames):
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
