"""Horn and dual Horn formulas, where entailment is decided by unit propagation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .cnfformula import Clause, CNFFormula
from .tokens import ParseError, TokenReader

_UNSATISFIABLE_TEXT = "p cnf 1 2 1 0 -1 0 ;"


class HornTypeFormula(CNFFormula):
    """A CNF formula whose clauses hold at most one positive literal (Horn)
    or at most one negative literal (dual Horn)."""

    _dual: bool

    @classmethod
    def _blank(cls) -> "HornTypeFormula":
        formula = super()._blank()
        formula._dual = False
        return formula

    @property
    def dual(self) -> bool:
        """True for a dual Horn formula, False for a Horn formula."""
        return self._dual

    def _verify_horn_type(self) -> None:
        for clause in self._clauses:
            positive = sum(1 for value in clause.values() if value)
            negative = len(clause) - positive
            description = self.format(False).rstrip("\n")
            if not self._dual and positive > 1:
                raise ParseError(f"{description} is not a horn formula.")
            if self._dual and negative > 1:
                raise ParseError(f"{description} is not a dual horn formula.")

    @classmethod
    def from_dimacs(cls, reader: TokenReader, dual: bool = False) -> "HornTypeFormula":
        """Read a DIMACS formula and check that it is (dual) Horn."""
        formula = super().from_dimacs(reader)
        formula._dual = dual
        formula._verify_horn_type()
        return formula

    @classmethod
    def conjunction(
        cls, conjuncts: Iterable["HornTypeFormula"], dual: bool = False
    ) -> "HornTypeFormula":
        """The conjunction of formulas that are all Horn or all dual Horn."""
        conjuncts = list(conjuncts)
        if any(conjunct.dual != dual for conjunct in conjuncts):
            raise ValueError("Cannot mix horn and dual horn formulas.")
        formula = super().conjunction(conjuncts)
        formula._dual = dual
        return formula

    @classmethod
    def from_assignment(
        cls, assignment: Mapping[int, bool], dual: bool = False
    ) -> "HornTypeFormula":
        """The conjunction of the literals of a partial assignment."""
        formula = super().from_assignment(assignment)
        formula._dual = dual
        return formula

    @classmethod
    def unsatisfiable(cls, dual: bool = False) -> "HornTypeFormula":
        """A formula over one variable that contains the empty clause."""
        return cls.from_dimacs(TokenReader(_UNSATISFIABLE_TEXT), dual)

    def entails(self, clause: Mapping[int, bool]) -> bool:
        """Whether every model of the formula satisfies ``clause``."""
        negated: Clause = {var: not value for var, value in clause.items()}
        return CNFFormula.unit_propagation([self], negated) is None

    def dump(self) -> None:
        """Print the clauses, one per line, as ``var->value`` pairs."""
        if self.has_no_clauses:
            print("TRUE")
        elif self.contains_empty_clause:
            print("FALSE")
        else:
            for var, value in self._unit_clauses:
                print(f"{var}->{int(value)}")
            for clause in self._clauses:
                print("".join(f"{var}->{int(value)} " for var, value in clause.items()))