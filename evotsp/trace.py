"""Tagged trace output for the evolutionary run."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TextIO


class TraceOp(str, enum.Enum):
    """Single-character tag naming the operation that produced a trace line."""

    EVO = "E"
    SELECT = "S"
    CROSS = "C"
    MUT = "M"
    FITNESS = "F"
    INIT = "I"
    ERROR = "!"


class TraceStage(enum.Enum):
    """Stage of the algorithm a trace line belongs to, with its label."""

    OK = "OK"
    INIT = "INITIALIZATION"
    FITNESS = "FITNESS CALCULATION"
    SELECTION = "SELECTION PROCESS"
    CROSSOVER = "CROSSOVER OPERATION"
    MUTATION = "MUTATION OPERATION"
    GENERATION = "GENERATION PROCESS"


class TraceFlag(enum.IntFlag):
    """Trace categories that can be switched on and off."""

    BASIC = 1
    VERB = 2
    ALL = BASIC | VERB


_STATE_LABELS = {True: "ENABLED", False: "DISABLED"}


@dataclass
class Tracer:
    """Writes trace lines to a stream (standard output when ``stream`` is None)."""

    enabled: bool = True
    flags: TraceFlag = TraceFlag.ALL
    verbose: bool = False
    stream: TextIO | None = None

    def is_enabled(self, flag: TraceFlag) -> bool:
        """True when tracing is on globally and ``flag`` is among the enabled flags."""
        return self.enabled and bool(self.flags & flag)

    def enable_flags(self, flags: TraceFlag) -> None:
        self.flags |= flags

    def disable_flags(self, flags: TraceFlag) -> None:
        self.flags &= ~flags

    def trace(self, op: TraceOp, stage: TraceStage, message: str) -> None:
        """Write one tagged trace line."""
        if not self.enabled:
            return
        print(f"[TRACE] {op.value} -> {stage.value} - {message}", file=self.stream)

    def status(self) -> str:
        """Describe the current trace configuration."""
        basic = self.is_enabled(TraceFlag.BASIC)
        verbose = self.verbose and self.is_enabled(TraceFlag.VERB)
        lines = [
            "TRACE CONFIG:",
            f"    GLOBAL TRACE:      {_STATE_LABELS[bool(self.enabled)]}",
            f"    BASIC TRACE:       {_STATE_LABELS[bool(basic)]}",
            f"    VERBOSE:           {_STATE_LABELS[bool(verbose)]}",
        ]
        return "\n".join(lines) + "\n\n"