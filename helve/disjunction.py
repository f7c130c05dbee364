"""Disjunctions of CNF formulas, viewed as a conjunction of clauses."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product
from typing import Optional

from .cnfformula import Clause, CNFFormula


def _merge_clauses(clauses: Iterable[Clause]) -> Optional[Clause]:
    """Union of clauses, or None if the union holds a literal and its negation."""
    merged: Clause = {}
    for clause in clauses:
        for var, value in clause.items():
            if merged.setdefault(var, value) != value:
                return None
    return merged


class Disjunction:
    """The disjunction of several CNF formulas.

    Iterating yields the clauses of an equivalent CNF formula: one clause for
    every choice of a clause from each disjunct, with tautological clauses
    left out.
    """

    def __init__(self, formulas: Iterable[CNFFormula]) -> None:
        self._varamount = 0
        self._disjuncts: list[CNFFormula] = []
        for formula in formulas:
            # A valid disjunct makes the whole disjunction valid.
            if formula.has_no_clauses:
                self._disjuncts = [formula]
                return
            # An unsatisfiable disjunct can be ignored.
            if not formula.contains_empty_clause:
                self._disjuncts.append(formula)
                self._varamount = max(self._varamount, formula.varamount)

        if not self._disjuncts:
            unsatisfiable = CNFFormula.unsatisfiable()
            self._disjuncts = [unsatisfiable]
            self._varamount = unsatisfiable.varamount

    @property
    def varamount(self) -> int:
        """Largest variable count among the disjuncts that were kept."""
        return self._varamount

    def __iter__(self) -> Iterator[Clause]:
        if not self._disjuncts:
            return
        clause_lists = [list(disjunct) for disjunct in self._disjuncts]
        for combination in product(*clause_lists):
            merged = _merge_clauses(combination)
            if merged is not None:
                yield merged

    def is_valid(self) -> bool:
        """Whether the equivalent CNF formula has no clauses at all."""
        return next(iter(self), None) is None