"""Formulas given explicitly by their set of models over a variable order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .cnfformula import CNFFormula
from .decisiontree import DecisionTree
from .tokens import ParseError, TokenReader

Model = tuple[bool, ...]

_HEX_DIGITS = "0123456789abcdef"


def bool_vector_from_hex(hex_string: str, varamount: int) -> Model:
    """Decode a model from lower-case hex, most significant bit first.

    The string must have exactly ceil(varamount / 4) digits; surplus low bits
    of the last digit are ignored.
    """
    if varamount <= 0 or len(hex_string) != -(-varamount // 4):
        raise ParseError(
            f"Hex model {hex_string!r} does not fit {varamount} variables."
        )
    bits: list[bool] = []
    for digit in hex_string:
        value = _HEX_DIGITS.find(digit)
        if value < 0:
            raise ParseError(f"Invalid hex digit {digit!r} in model {hex_string!r}.")
        bits.extend(bool((value >> shift) & 1) for shift in (3, 2, 1, 0))
    return tuple(bits[:varamount])


class ModsFormula:
    """A formula represented by the explicit set of its models."""

    def __init__(self, variable_order: Sequence[int], models: Iterable[Sequence[bool]]) -> None:
        self._variable_order = tuple(variable_order)
        self._models: set[Model] = {tuple(bool(v) for v in model) for model in models}
        for model in self._models:
            if len(model) != len(self._variable_order):
                raise ValueError(
                    f"Model of length {len(model)} does not match the variable "
                    f"order of length {len(self._variable_order)}."
                )

    @classmethod
    def combine(cls, elements: Sequence["ModsFormula"], conjunction: bool) -> "ModsFormula":
        """Conjunction or disjunction of at least two formulas with one variable order."""
        elements = list(elements)
        if len(elements) < 2:
            raise ValueError("Combining needs at least two formulas.")
        variable_order = elements[0].variable_order
        if any(element.variable_order != variable_order for element in elements[1:]):
            raise ValueError("Combined formulas must share their variable order.")

        if conjunction:
            smallest = min(elements, key=len)
            models = set(smallest._models)
            for element in elements:
                if element is not smallest:
                    models &= element._models
        else:
            models = set().union(*(element._models for element in elements))
        return cls(variable_order, models)

    @classmethod
    def from_text(cls, reader: TokenReader) -> "ModsFormula":
        """Read ``<n> <var>... : <hex model>... ;``."""
        varamount = reader.read_uint()
        variable_order = [reader.read_uint() for _ in range(varamount)]
        if reader.read_word() != ":":
            raise ParseError("Wrong MODS syntax: Colon after variable order missing.")
        models: set[Model] = set()
        word = reader.read_word()
        while word != ";":
            models.add(bool_vector_from_hex(word, len(variable_order)))
            word = reader.read_word()
        return cls(variable_order, models)

    @staticmethod
    def aggregate_by_varorder(
        elements: Iterable["ModsFormula"], conjunction: bool
    ) -> list["ModsFormula"]:
        """Merge elements sharing a variable order into one formula each.

        Neutral elements are skipped; a dominating element (unsatisfiable in a
        conjunction, valid in a disjunction) is returned alone. If nothing
        remains, a single constant formula over no variables is returned.
        """
        groups: dict[tuple[int, ...], list[ModsFormula]] = {}
        for element in elements:
            if (conjunction and element.is_unsatisfiable()) or (
                not conjunction and element.is_valid()
            ):
                return [element]
            if (conjunction and element.is_valid()) or (
                not conjunction and element.is_unsatisfiable()
            ):
                continue
            groups.setdefault(element.variable_order, []).append(element)

        result = [
            group[0] if len(group) == 1 else ModsFormula.combine(group, conjunction)
            for _, group in sorted(groups.items())
        ]
        if not result:
            result.append(ModsFormula((), [()] if conjunction else []))
        return result

    @property
    def variable_order(self) -> tuple[int, ...]:
        """The variables each model assigns, in order."""
        return self._variable_order

    @property
    def models(self) -> frozenset[Model]:
        """All models of the formula."""
        return frozenset(self._models)

    def transform_to_cnf(self) -> CNFFormula:
        """An equivalent CNF formula."""
        tree = DecisionTree(self._variable_order)
        for model in self._models:
            tree.insert_model(model)
        return tree.to_cnf()

    def is_valid(self) -> bool:
        """Whether every assignment is a model."""
        return len(self._models) == 1 << len(self._variable_order)

    def is_unsatisfiable(self) -> bool:
        """Whether there is no model."""
        return not self._models

    def __contains__(self, model: object) -> bool:
        if not isinstance(model, Sequence):
            return False
        return tuple(bool(v) for v in model) in self._models

    def __iter__(self) -> Iterator[Model]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def dump(self) -> None:
        """Print the variable order and one model per line."""
        print("".join(f"{var} " for var in self._variable_order))
        print("-----------------------------------------------")
        for model in self._models:
            print("".join(f"{int(value)} " for value in model))