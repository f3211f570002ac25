"""
Loop frames for `while ... end` control flow.

A frame is pushed when a `while` statement executes and consulted by the
matching `end`, which either jumps back to the frame's origin or pops it
once the counter has reached the bound. Frames are addressed by nesting
depth: index 0 is the outermost open loop, the top is the innermost.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class LoopStackError(Exception):
    pass


@dataclass(frozen=True)
class LoopFrame:
    counter: str
    bound: int
    origin_index: int    # 0-based index of the owning `while`

    def is_satisfied(self, value: int) -> bool:
        return value == self.bound

    def __str__(self):
        return (f"loop{{counter={self.counter},bound={self.bound},"
                f"lineNumber={self.origin_index + 1}}}")


class LoopStack:
    def __init__(self):
        self._frames: List[LoopFrame] = []

    def push(self, frame: LoopFrame):
        self._frames.append(frame)
        logger.debug("push %s (depth %d)", frame, len(self._frames))

    def pop(self) -> LoopFrame:
        if not self._frames:
            raise LoopStackError("pop from empty loop stack")
        frame = self._frames.pop()
        logger.debug("pop %s (depth %d)", frame, len(self._frames))
        return frame

    def peek(self) -> Optional[LoopFrame]:
        return self._frames[-1] if self._frames else None

    @property
    def depth(self) -> int:
        return len(self._frames)

    def clear(self):
        self._frames.clear()

    def frames(self) -> List[LoopFrame]:
        return list(self._frames)

    def format_lines(self) -> List[str]:
        return [str(frame) for frame in self._frames]

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self):
        return f"LoopStack({self._frames!r})"
