"""Logical simulation time: whole ticks plus a micro-tick fraction."""

from __future__ import annotations

from dataclasses import dataclass

SUBTICKS_PER_TICK = 1_000_000


@dataclass(frozen=True, slots=True, order=True)
class Time:
    """Immutable timestamp ordered lexicographically by (ticks, subticks).

    Construction normalizes ``subticks`` into ``[0, SUBTICKS_PER_TICK)``,
    carrying any overflow into ``ticks``.
    """

    ticks: int = 0
    subticks: int = 0

    def __post_init__(self) -> None:
        if self.ticks < 0 or self.subticks < 0:
            raise ValueError(f"Time components must be non-negative, got ({self.ticks}, {self.subticks})")
        carry, rest = divmod(self.subticks, SUBTICKS_PER_TICK)
        if carry:
            object.__setattr__(self, "ticks", self.ticks + carry)
            object.__setattr__(self, "subticks", rest)

    def __add__(self, other: Time | int) -> Time:
        if isinstance(other, Time):
            return Time(self.ticks + other.ticks, self.subticks + other.subticks)
        if isinstance(other, int):
            return Time(self.ticks + other, self.subticks)
        return NotImplemented

    __radd__ = __add__

    def __format__(self, spec: str) -> str:
        # Only a precision is understood: "{:.3}" -> "1.001"
        precision = 6
        if spec.startswith("."):
            precision = max(0, min(6, int(spec[1:])))
        elif spec:
            raise ValueError(f"Unsupported Time format spec {spec!r}")
        if precision == 0:
            return str(self.ticks)
        digits = self.subticks // 10 ** (6 - precision)
        return f"{self.ticks}.{digits:0{precision}d}"

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Time({self.ticks}, {self.subticks})"


ZERO = Time()
ONE_TICK = Time(1, 0)
