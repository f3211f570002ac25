from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoopPolicy(Enum):
    # Push a frame only on first entry; a `while` reached by a backward
    # jump reuses the frame already on top of the stack.
    STABLE = "stable"
    # Push on every execution of `while`, including re-entries.
    REPUSH = "repush"


@dataclass
class InterpreterConfig:
    """Runtime options shared by the command line, sessions and tests."""
    max_steps: Optional[int] = None      # None = run until halted
    loop_policy: LoopPolicy = LoopPolicy.STABLE
    verbose: bool = False

    def __post_init__(self):
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {self.max_steps}")
        if isinstance(self.loop_policy, str):
            self.loop_policy = LoopPolicy(self.loop_policy)


def from_args(args) -> InterpreterConfig:
    """Build a config from an argparse namespace."""
    return InterpreterConfig(
        max_steps=getattr(args, "max_steps", None),
        loop_policy=LoopPolicy(getattr(args, "loop_policy", LoopPolicy.STABLE.value)),
        verbose=getattr(args, "verbose", False),
    )
