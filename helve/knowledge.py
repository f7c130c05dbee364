"""Facts established while checking a certificate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}.")


class Knowledge:
    """Base of all kinds of knowledge; not instantiated directly."""

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is Knowledge:
            raise TypeError("Knowledge is abstract; use one of its subclasses.")
        return super().__new__(cls)


@dataclass(frozen=True)
class SubsetKnowledge(Knowledge, Generic[T]):
    """The set with ``left_id`` is a subset of the set with ``right_id``."""

    left_id: int
    right_id: int

    def __post_init__(self) -> None:
        _require_non_negative("left_id", self.left_id)
        _require_non_negative("right_id", self.right_id)


@dataclass(frozen=True)
class DeadKnowledge(Knowledge):
    """The state set with ``set_id`` is dead."""

    set_id: int

    def __post_init__(self) -> None:
        _require_non_negative("set_id", self.set_id)


@dataclass(frozen=True)
class UnsolvableKnowledge(Knowledge):
    """The task is unsolvable."""


@dataclass(frozen=True)
class BoundKnowledge(Knowledge):
    """Every plan from the state set ``set_id`` costs at least ``bound``."""

    set_id: int
    bound: int

    def __post_init__(self) -> None:
        _require_non_negative("set_id", self.set_id)
        _require_non_negative("bound", self.bound)


@dataclass(frozen=True)
class OptimalCostKnowledge(Knowledge):
    """The optimal plan cost is at least ``lower_bound``."""

    lower_bound: int

    def __post_init__(self) -> None:
        _require_non_negative("lower_bound", self.lower_bound)