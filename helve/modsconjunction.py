"""Lazy conjunction of MODS formulas with possibly different variable orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from .modsformula import Model, ModsFormula

# (conjunct index, position within that conjunct's variable order)
_VarPosition = tuple[int, int]


class ModsConjunction:
    """The conjunction of MODS formulas, iterated as models in one variable order.

    Formulas sharing a variable order are merged first. Consistent combinations
    of models of the conjuncts are enumerated and projected onto the variable
    order of the conjunction; variables of that order that occur in no conjunct
    take every possible value.

    If a restriction variable order is given, an extra conjunct over it is
    placed first. It has no models until :meth:`set_restriction` is called,
    and afterwards exactly the model last set.
    """

    def __init__(
        self,
        elements: Iterable[ModsFormula],
        variable_order: Sequence[int] = (),
        restriction_variable_order: Sequence[int] = (),
    ) -> None:
        self._restriction_variable_order = tuple(restriction_variable_order)
        self._restriction = ModsFormula(self._restriction_variable_order, [])
        self._conjuncts: list[ModsFormula] = ModsFormula.aggregate_by_varorder(
            elements, True
        )
        self._has_restriction = bool(self._restriction_variable_order)
        if self._has_restriction:
            self._conjuncts.insert(0, self._restriction)

        self._variable_order = tuple(variable_order)
        if not self._variable_order:
            self._variable_order = self._order_from_conjunction()

        first_positions: dict[int, _VarPosition] = {}
        self._previous_positions: list[list[tuple[int, _VarPosition]]] = []
        self._variable_order_index: Optional[int] = None
        for c_index, conjunct in enumerate(self._conjuncts):
            order = conjunct.variable_order
            if order == self._variable_order:
                self._variable_order_index = c_index
            previous = []
            for position, var in enumerate(order):
                if var in first_positions:
                    previous.append((position, first_positions[var]))
                else:
                    first_positions[var] = (c_index, position)
            self._previous_positions.append(previous)

        # For each output variable: where to read it, or None plus the bit index
        # of the assignment of variables occurring in no conjunct.
        self._output_positions: list[tuple[Optional[int], int]] = []
        self._missing_amount = 0
        if self._variable_order_index is None:
            for var in self._variable_order:
                found = first_positions.get(var)
                if found is not None:
                    self._output_positions.append(found)
                else:
                    self._output_positions.append((None, self._missing_amount))
                    self._missing_amount += 1

    def _order_from_conjunction(self) -> tuple[int, ...]:
        seen: dict[int, None] = {}
        for conjunct in self._conjuncts:
            for var in conjunct.variable_order:
                seen.setdefault(var, None)
        for conjunct in self._conjuncts:
            if len(conjunct.variable_order) == len(seen):
                return conjunct.variable_order
        return tuple(seen)

    @property
    def variable_order(self) -> tuple[int, ...]:
        """Variable order of the models yielded by iteration."""
        return self._variable_order

    def set_restriction(self, restriction: Sequence[bool]) -> None:
        """Restrict the restriction variables to the single given model."""
        self._restriction = ModsFormula(self._restriction_variable_order, [restriction])
        if self._has_restriction:
            self._conjuncts[0] = self._restriction

    def _consistent(self, chosen: list[Model], index: int, model: Model) -> bool:
        return all(
            model[position] == chosen[other][other_position]
            for position, (other, other_position) in self._previous_positions[index]
        )

    def _combinations(self) -> Iterator[list[Model]]:
        chosen: list[Model] = []

        def extend(index: int) -> Iterator[list[Model]]:
            if index == len(self._conjuncts):
                yield chosen
                return
            for model in self._conjuncts[index]:
                if self._consistent(chosen, index, model):
                    chosen.append(model)
                    yield from extend(index + 1)
                    chosen.pop()

        return extend(0)

    def __iter__(self) -> Iterator[Model]:
        for chosen in self._combinations():
            if self._variable_order_index is not None:
                yield chosen[self._variable_order_index]
                continue
            for assignment in range(1 << self._missing_amount):
                yield tuple(
                    bool((assignment >> position) & 1)
                    if conjunct is None
                    else chosen[conjunct][position]
                    for conjunct, position in self._output_positions
                )