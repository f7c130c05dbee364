"""Applying an action to models given in some variable order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

Model = tuple[bool, ...]


class ActionLike(Protocol):
    """An action: precondition variables and a change per variable (-1, 0, 1)."""

    pre: Sequence[int]
    change: Sequence[int]


class ActionApplier:
    """Maps models to their successors (progression) or predecessors (regression).

    The output variable order holds every variable set by the action plus every
    input variable the action leaves untouched; input variables that have a
    value before the action but none after it are dropped.
    """

    def __init__(self, varorder: Sequence[int], action: Any, progress: bool) -> None:
        self._input_varorder = tuple(varorder)
        self._action = action
        self._progress = bool(progress)

        positions = {var: index for index, var in enumerate(self._input_varorder)}
        preconditions = {var: True for var in action.pre}
        # Preconditions stay true in the successor unless the effect changes them.
        effects = {var: True for var in action.pre}
        for var, change in enumerate(action.change):
            if change == 1:
                effects[var] = True
            elif change == -1:
                effects[var] = False

        before, after = (preconditions, effects) if progress else (effects, preconditions)
        after = dict(after)

        self._to_check = [
            (positions[var], value) for var, value in before.items() if var in positions
        ]

        output: list[int] = []
        template: list[bool] = []
        copies: list[tuple[int, int]] = []
        for index, var in enumerate(self._input_varorder):
            if var in before and var not in after:
                continue
            output.append(var)
            if var in after:
                template.append(after.pop(var))
            else:
                template.append(False)
                copies.append((index, len(output) - 1))
        for var, value in after.items():
            output.append(var)
            template.append(value)

        self._output_varorder = tuple(output)
        self._template = template
        self._copies = copies

    @property
    def variable_order(self) -> tuple[int, ...]:
        """Variable order of the models returned by :meth:`apply`."""
        return self._output_varorder

    @property
    def action(self) -> Any:
        """The action being applied."""
        return self._action

    @property
    def progress(self) -> bool:
        """True for progression, False for regression."""
        return self._progress

    def is_applicable(self, model: Sequence[bool]) -> bool:
        """Whether the action can be applied to ``model`` (in the input order)."""
        return all(bool(model[index]) == value for index, value in self._to_check)

    def apply(self, model: Sequence[bool]) -> Model:
        """Apply the action without checking applicability."""
        result = list(self._template)
        for source, target in self._copies:
            result[target] = bool(model[source])
        return tuple(result)