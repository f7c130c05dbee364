"""Binary decision trees over a fixed variable order, turned into CNF."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import partial
from typing import Optional

from .cnfformula import Clause, CNFFormula


class Node:
    """An inner node of a decision tree, or one of the two leaf sentinels."""

    __slots__ = ("true_child", "false_child")

    def __init__(
        self, true_child: Optional["Node"] = None, false_child: Optional["Node"] = None
    ) -> None:
        self.true_child = true_child
        self.false_child = false_child

    def child(self, value: bool) -> Optional["Node"]:
        """The child reached when the node's variable takes ``value``."""
        return self.true_child if value else self.false_child

    def set_child(self, value: bool, node: "Node") -> None:
        """Replace the child reached when the node's variable takes ``value``."""
        if value:
            self.true_child = node
        else:
            self.false_child = node


class DecisionTree:
    """A set of models over a variable order, stored as a decision tree.

    Subtrees whose every assignment is a model collapse to the true leaf.
    """

    def __init__(self, variable_order: Sequence[int]) -> None:
        self._variable_order = tuple(variable_order)
        self._true = Node()
        self._true.false_child = self._true
        self._false = Node()
        self._false.true_child = self._false
        self._root = self._false

    @property
    def variable_order(self) -> tuple[int, ...]:
        """The variables tested at each depth of the tree."""
        return self._variable_order

    def _set_root(self, node: Node) -> None:
        self._root = node

    def insert_model(self, model: Iterable[bool]) -> None:
        """Add a model given in the tree's variable order."""
        model = tuple(bool(value) for value in model)
        if len(model) != len(self._variable_order):
            raise ValueError(
                f"Model has {len(model)} values but the variable order has "
                f"{len(self._variable_order)}."
            )

        set_current: Callable[[Node], None] = self._set_root
        set_insert: Callable[[Node], None] = self._set_root
        current = self._root
        for value in model:
            if current is self._true:
                # The model is already covered by a collapsed subtree.
                return
            if current is self._false:
                current = Node(self._false, self._false)
                set_current(current)
            other_child_is_true = current.child(not value) is self._true
            parent = current
            set_current = partial(parent.set_child, value)
            if not other_child_is_true:
                set_insert = set_current
            current = parent.child(value)
        set_insert(self._true)

    def to_cnf(self) -> CNFFormula:
        """A CNF formula whose models are exactly the stored models."""
        clauses: list[Clause] = []
        stack: list[tuple[Node, tuple[bool, ...]]] = [(self._root, ())]
        while stack:
            node, path = stack.pop()
            if node is self._false:
                clauses.append(
                    {var: not value for var, value in zip(self._variable_order, path)}
                )
            elif node is not self._true:
                stack.append((node.true_child, path + (True,)))
                stack.append((node.false_child, path + (False,)))
        return CNFFormula.from_clauses(clauses)