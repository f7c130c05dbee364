"""Formulas in conjunctive normal form with unit propagation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .tokens import ParseError, TokenReader

Clause = dict[int, bool]
Literal = tuple[int, bool]
Assignment = dict[int, bool]

_UNSATISFIABLE_DIMACS = "p cnf 1 2 1 0 -1 0 ;"


def _format_literal(literal: Literal) -> str:
    var, value = literal
    return f"{var}" if value else f"¬{var}"


class CNFFormula:
    """A CNF formula kept split into an empty-clause flag, unit clauses and longer clauses.

    Variables are zero-based integers; a clause maps each of its variables to
    the value that satisfies the literal. If the formula has an empty clause
    it holds no other clauses.
    """

    _varamount: int
    _has_empty_clause: bool
    _unit_clauses: list[Literal]
    _clauses: list[Clause]
    _occurrences: dict[int, list[int]]

    @classmethod
    def _blank(cls) -> "CNFFormula":
        formula = cls.__new__(cls)
        formula._varamount = 0
        formula._has_empty_clause = False
        formula._unit_clauses = []
        formula._clauses = []
        formula._occurrences = {}
        return formula

    # -- construction -----------------------------------------------------

    @classmethod
    def from_dimacs(cls, reader: TokenReader) -> "CNFFormula":
        """Read a formula of the form ``p cnf <vars> <clauses> ... ;``."""
        formula = cls._blank()
        if reader.read_word() != "p" or reader.read_word() != "cnf":
            raise ParseError("Invalid DIMACS format")
        formula._varamount = reader.read_uint()
        clause_amount = reader.read_uint()

        unit_map: Assignment = {}
        for _ in range(clause_amount):
            clause: Clause = {}
            tautology = False
            var = reader.read_int()
            while var != 0:
                value = var > 0
                index = abs(var) - 1
                if index in clause:
                    if clause[index] != value:
                        tautology = True
                else:
                    clause[index] = value
                var = reader.read_int()

            if tautology:
                continue
            if not clause:
                formula._has_empty_clause = True
            elif len(clause) == 1:
                (index, value), = clause.items()
                known = unit_map.setdefault(index, value)
                if known != value:
                    formula._has_empty_clause = True
            else:
                formula._add_clause(clause)

        if reader.read_word() != ";":
            raise ParseError("Invalid CNF syntax: expected ';' after the clauses.")

        if formula._has_empty_clause:
            formula._clauses = []
            formula._occurrences = {}
        else:
            formula._unit_clauses = list(unit_map.items())
            formula._simplify_with_unit_propagation()
        return formula

    @classmethod
    def conjunction(cls, conjuncts: Iterable["CNFFormula"]) -> "CNFFormula":
        """The conjunction of the given formulas, simplified by unit propagation."""
        conjuncts = list(conjuncts)
        formula = cls._blank()
        formula._varamount = max((c._varamount for c in conjuncts), default=0)

        units = CNFFormula.unit_propagation(conjuncts, {})
        if units is None:
            formula._has_empty_clause = True
            return formula
        formula._unit_clauses = list(units.items())

        for conjunct in conjuncts:
            for clause in conjunct._clauses:
                new_clause: Clause = {}
                satisfied = False
                for var, value in clause.items():
                    known = units.get(var)
                    if known is None:
                        new_clause[var] = value
                    elif known == value:
                        satisfied = True
                        break
                if not satisfied:
                    formula._add_clause(new_clause)
        return formula

    @classmethod
    def from_assignment(cls, assignment: Mapping[int, bool]) -> "CNFFormula":
        """The conjunction of the literals of a partial assignment."""
        formula = cls._blank()
        for var, value in assignment.items():
            formula._varamount = max(formula._varamount, var + 1)
            formula._unit_clauses.append((var, bool(value)))
        return formula

    @classmethod
    def from_clauses(cls, clauses: Iterable[Mapping[int, bool]]) -> "CNFFormula":
        """Build a formula from arbitrary clauses and simplify it."""
        formula = cls._blank()
        all_clauses = [dict(clause) for clause in clauses]
        if any(not clause for clause in all_clauses):
            formula._has_empty_clause = True
            all_clauses = []

        for clause in all_clauses:
            for var in clause:
                formula._varamount = max(formula._varamount, var + 1)
            if len(clause) == 1:
                formula._unit_clauses.append(next(iter(clause.items())))
            else:
                formula._add_clause(clause)
        formula._simplify_with_unit_propagation()
        return formula

    @classmethod
    def unsatisfiable(cls) -> "CNFFormula":
        """A formula over one variable that contains the empty clause."""
        return CNFFormula.from_dimacs(TokenReader(_UNSATISFIABLE_DIMACS))

    # -- internals ----------------------------------------------------------

    def _add_clause(self, clause: Clause) -> None:
        index = len(self._clauses)
        for var in clause:
            self._occurrences.setdefault(var, []).append(index)
        self._clauses.append(clause)

    def _make_unsatisfiable(self) -> None:
        self._has_empty_clause = True
        self._unit_clauses = []
        self._clauses = []
        self._occurrences = {}

    def _simplify_with_unit_propagation(self) -> None:
        units = CNFFormula.unit_propagation([self], {})
        if units is None:
            self._make_unsatisfiable()
            return

        self._unit_clauses = list(units.items())
        satisfied: set[int] = set()
        for var, value in units.items():
            for index in self._occurrences.get(var, ()):
                clause = self._clauses[index]
                if clause[var] == value:
                    satisfied.add(index)
                else:
                    del clause[var]

        remaining = [
            clause for index, clause in enumerate(self._clauses) if index not in satisfied
        ]
        self._clauses = []
        self._occurrences = {}
        for clause in remaining:
            self._add_clause(clause)

    # -- reasoning ------------------------------------------------------------

    @staticmethod
    def unit_propagation(
        formulas: Iterable["CNFFormula"], assignment: Optional[Mapping[int, bool]] = None
    ) -> Optional[Assignment]:
        """Propagate unit clauses of the conjunction of ``formulas``.

        Starts from ``assignment`` and returns it extended by all existing and
        inferred unit literals, or None if propagation shows that the
        conjunction is unsatisfiable. The formulas are not modified.
        """
        formulas = list(formulas)
        if any(formula._has_empty_clause for formula in formulas):
            return None

        result: Assignment = dict(assignment or {})
        sizes = [[len(clause) for clause in formula._clauses] for formula in formulas]
        queue: deque[Literal] = deque(result.items())
        processed: set[int] = set()

        def enqueue(var: int, value: bool) -> bool:
            known = result.get(var)
            if known is not None:
                return known == value
            result[var] = value
            queue.append((var, value))
            return True

        for formula in formulas:
            for var, value in formula._unit_clauses:
                if not enqueue(var, value):
                    return None

        while queue:
            var, value = queue.popleft()
            processed.add(var)
            for formula, formula_sizes in zip(formulas, sizes):
                for index in formula._occurrences.get(var, ()):
                    clause = formula._clauses[index]
                    if clause[var] == value:
                        # A satisfied clause is marked with a negative size.
                        formula_sizes[index] = -1
                        continue
                    formula_sizes[index] -= 1
                    if formula_sizes[index] == 1:
                        remaining = next(
                            (lit for lit in clause.items() if lit[0] not in processed),
                            None,
                        )
                        if remaining is not None and not enqueue(*remaining):
                            return None
        return result

    # -- inspection -------------------------------------------------------------

    @property
    def varamount(self) -> int:
        """Number of variables the formula is declared over."""
        return self._varamount

    @property
    def number_of_clauses(self) -> int:
        """Count of clauses, the empty clause and unit clauses included."""
        return int(self._has_empty_clause) + len(self._unit_clauses) + len(self._clauses)

    @property
    def contains_empty_clause(self) -> bool:
        """Whether the formula is trivially unsatisfiable."""
        return self._has_empty_clause

    @property
    def has_no_clauses(self) -> bool:
        """Whether the formula is trivially valid."""
        return self.number_of_clauses == 0

    def __len__(self) -> int:
        return self.number_of_clauses

    def __iter__(self) -> Iterator[Clause]:
        """Yield every clause: the empty clause, unit clauses, then the rest."""
        if self._has_empty_clause:
            yield {}
        for var, value in self._unit_clauses:
            yield {var: value}
        for clause in self._clauses:
            yield dict(clause)

    def rename(self, renames: Iterable[tuple[int, int]]) -> None:
        """Rename variables in place, applying each ``(old, new)`` pair in turn."""
        for old_var, new_var in renames:
            self._unit_clauses = [
                (new_var if var == old_var else var, value)
                for var, value in self._unit_clauses
            ]
            occurrences = self._occurrences.pop(old_var, None)
            if occurrences is None:
                continue
            for index in occurrences:
                clause = self._clauses[index]
                clause[new_var] = clause.pop(old_var)
            self._occurrences[new_var] = occurrences

    def format(self, long_version: bool = True) -> str:
        """Readable form of the formula, optionally with variable occurrences."""
        if self._has_empty_clause:
            return "false\n"
        if not self._unit_clauses and not self._clauses:
            return "true\n"
        parts = [f"({_format_literal(lit)})" for lit in self._unit_clauses]
        parts.extend(
            "(" + " v ".join(_format_literal(lit) for lit in clause.items()) + ")"
            for clause in self._clauses
        )
        text = " ^ ".join(parts) + "\n"
        if long_version:
            lines = ["Variable occurences:\n"]
            for var, indices in self._occurrences.items():
                lines.append(f"{var}: " + "".join(f"{i} " for i in indices) + "\n")
            text += "".join(lines)
        return text

    def __str__(self) -> str:
        return self.format(False)