"""Disjunctions of Horn-type formulas."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product

from .disjunction import Disjunction
from .horntypeformula import HornTypeFormula


class HornTypeDisjunction(Disjunction):
    """The disjunction of Horn-type formulas, iterated as a set of clauses.

    A valid disjunct leaves no disjuncts at all, so iteration yields nothing
    and the variable count is zero.
    """

    def __init__(self, formulas: Iterable[HornTypeFormula]) -> None:
        self._varamount = 0
        self._disjuncts = []
        for formula in formulas:
            if formula.has_no_clauses:
                self._disjuncts = []
                self._varamount = 0
                return
            if not formula.contains_empty_clause:
                self._disjuncts.append(formula)
                self._varamount = max(self._varamount, formula.varamount)

        if not self._disjuncts:
            unsatisfiable = HornTypeFormula.unsatisfiable(False)
            self._disjuncts = [unsatisfiable]
            self._varamount = unsatisfiable.varamount

    def __iter__(self) -> Iterator[dict[int, bool]]:
        """Yield every non-tautological clause of the distributed disjunction."""
        if not self._disjuncts:
            return
        clause_lists = [list(disjunct) for disjunct in self._disjuncts]
        for combination in product(*clause_lists):
            clause: dict[int, bool] = {}
            tautology = False
            for part in combination:
                for var, val in part.items():
                    if clause.setdefault(var, val) != val:
                        tautology = True
                        break
                if tautology:
                    break
            if not tautology:
                yield clause

    @property
    def varamount(self) -> int:
        """The largest variable count among the kept disjuncts."""
        return self._varamount

    def is_valid(self) -> bool:
        """Whether the disjunction has no clauses left, i.e. is always true."""
        return next(iter(self), None) is None