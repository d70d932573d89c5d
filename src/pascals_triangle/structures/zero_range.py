from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ZeroRange:
    """
    The integer interval `[0, max]`, used as the index domain of rows and centres.

    Parameters
    ----------
    max : int
        The last index in the range. Must be non-negative.
    """
    max: int

    def __post_init__(self) -> None:
        if self.max < 0:
            raise ValueError("end of range must be nonnegative")

    @property
    def first(self) -> int:
        return 0

    @property
    def last(self) -> int:
        return self.max

    def __len__(self) -> int:
        return self.max + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.max + 1))

    def __getitem__(self, i: int) -> int:
        if not 0 <= i <= self.max:
            raise IndexError(f"ZeroRange index out of range: {i} not in 0..{self.max}")
        return i

    def __contains__(self, i: object) -> bool:
        return isinstance(i, int) and 0 <= i <= self.max

    def as_range(self) -> range:
        """The equivalent built-in `range(0, max + 1)`."""
        return range(self.max + 1)

    def __repr__(self) -> str:
        return f"ZeroRange({self.max})"
