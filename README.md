# helve

Building blocks for checking unsolvability certificates of classical
planning tasks. A certificate describes sets of states with propositional
formulas and states facts about them, such as one set being a subset of
another or a set being dead. This package holds the formula machinery
those checks rest on.

## What is inside

- `helve.tokens`: `TokenReader` reads whitespace-separated words
  (`read_word`), 32-bit integers (`read_int`) and non-negative identifiers
  (`read_uint`) from a line of text; `at_end` tells whether every word has
  been read. It raises `ParseError` (a `ValueError`) on a premature end of
  line, a word that is not a number, or a negative id. `ExitCode` names
  the outcomes of a verification run and `ExitCode.message()` gives the
  line reported for each; `exit_with` prints that line and raises
  `SystemExit` with the code. `get_peak_memory_in_kb` reads the peak
  memory from `/proc/self/status` and returns -1 where that is not
  available.
- `helve.knowledge`: frozen dataclasses for the kinds of knowledge a
  certificate can establish: `SubsetKnowledge`, `DeadKnowledge`,
  `UnsolvableKnowledge`, `BoundKnowledge` and `OptimalCostKnowledge`, all
  derived from the abstract `Knowledge`. Negative ids and bounds are
  rejected with `ValueError`.
- `helve.cnfformula`: `CNFFormula`, a CNF formula kept in simplified form.
  An empty clause, unit clauses and longer clauses are stored apart, and
  the formula is simplified by unit propagation. It is built with
  `from_dimacs`, `from_clauses`, `from_assignment`, `conjunction` or
  `unsatisfiable`; `unit_propagation` propagates over several formulas at
  once and returns the extended assignment, or `None` on a conflict.
  Formulas can be iterated clause by clause, renamed in place and shown
  with `format`.
- `helve.disjunction`: `Disjunction` yields the clauses of a CNF formula
  equivalent to a disjunction of CNF formulas, with tautological clauses
  left out; `is_valid` tells whether no clause remains.
- `helve.horntypeformula`: `HornTypeFormula`, a Horn or dual-Horn formula.
  Reading one that is not of its type raises `ParseError`. `entails`
  decides clause entailment by unit propagation.
- `helve.horntypedisjunction`: `HornTypeDisjunction`, a disjunction of
  Horn-type formulas; a valid disjunct leaves it with no clauses.
- `helve.modsformula`: `ModsFormula`, a set given by listing its models
  over a variable order. It supports `in`, iteration and `len`, can be
  read with `from_text`, merged with `combine` and `aggregate_by_varorder`,
  and turned into CNF with `transform_to_cnf`. `bool_vector_from_hex`
  decodes the hexadecimal model notation.
- `helve.decisiontree`: `DecisionTree` stores models in a decision tree
  and turns them into an equivalent `CNFFormula` with `to_cnf`.
- `helve.actionapplier`: `ActionApplier` progresses or regresses models
  through a planning action given by its precondition variables (`pre`)
  and per-variable changes (`change`, each -1, 0 or 1).
- `helve.modsconjunction`: `ModsConjunction` enumerates the models of a
  conjunction of MODS formulas over different variable orders, optionally
  restricted by `set_restriction`.

## Example

```python
from helve.tokens import TokenReader
from helve.horntypeformula import HornTypeFormula

# x0 and (not x0 or x1), in DIMACS form with a closing ";"
reader = TokenReader("p cnf 2 2 1 0 -1 2 0 ;")
formula = HornTypeFormula.from_dimacs(reader, False)

formula.entails({1: True})    # True: x1 follows
formula.entails({1: False})   # False
```

DIMACS variables are numbered from 1; inside the package they are
numbered from 0. A clause is a mapping from a variable to the value of
its literal.

## What it does not do

The package has no command and no complete certificate checker. It does
not read planning task files or certificate files, keeps no registry of
declared state or action sets, and does not apply the proof rules that
combine knowledge. It offers no BDD-based representation of state sets.
It provides the formula representations and operations such a checker
would be built on.

## Requirements

Python 3.10 or later. There are no runtime dependencies; the tests use
pytest (`pip install helve[test]`).