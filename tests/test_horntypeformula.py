import pytest

from helve.horntypeformula import HornTypeFormula
from helve.tokens import ParseError, TokenReader


def horn(text, dual=False):
    return HornTypeFormula.from_dimacs(TokenReader(text), dual)


def test_horn_formula_is_accepted():
    formula = horn("p cnf 3 1 -1 -2 3 0 ;")
    assert formula.dual is False
    assert list(formula) == [{0: False, 1: False, 2: True}]


def test_non_horn_formula_is_rejected():
    with pytest.raises(ParseError, match="is not a horn formula"):
        horn("p cnf 2 1 1 2 0 ;")


def test_non_dual_horn_formula_is_rejected():
    with pytest.raises(ParseError, match="is not a dual horn formula"):
        horn("p cnf 2 1 -1 -2 0 ;", dual=True)


def test_dual_horn_accepts_positive_clause():
    formula = horn("p cnf 2 1 1 2 0 ;", dual=True)
    assert formula.dual is True
    assert formula.number_of_clauses == 1


def test_entails_with_propagation():
    formula = horn("p cnf 2 2 1 0 -1 2 0 ;")
    assert formula.entails({1: True})
    assert formula.entails({0: True})
    assert not formula.entails({1: False})
    assert not formula.entails({})


def test_entails_clause_by_chain():
    formula = horn("p cnf 3 2 -1 2 0 -2 3 0 ;")
    assert formula.entails({0: False, 2: True})
    assert not formula.entails({2: True})


def test_unsatisfiable_entails_everything():
    formula = HornTypeFormula.unsatisfiable(True)
    assert formula.dual is True
    assert formula.contains_empty_clause
    assert formula.entails({})
    assert formula.entails({0: False})


def test_conjunction_combines_knowledge():
    first = horn("p cnf 2 1 1 0 ;")
    second = horn("p cnf 2 1 -1 2 0 ;")
    combined = HornTypeFormula.conjunction([first, second], False)
    assert isinstance(combined, HornTypeFormula)
    assert combined.entails({1: True})
    assert not first.entails({1: True})


def test_conjunction_of_contradiction_is_unsatisfiable():
    combined = HornTypeFormula.conjunction(
        [horn("p cnf 1 1 1 0 ;"), horn("p cnf 1 1 -1 0 ;")], False
    )
    assert combined.contains_empty_clause


def test_conjunction_rejects_mixed_types():
    with pytest.raises(ValueError):
        HornTypeFormula.conjunction(
            [horn("p cnf 1 1 1 0 ;"), horn("p cnf 1 1 1 0 ;", dual=True)], False
        )


def test_from_assignment_entails_its_literals():
    formula = HornTypeFormula.from_assignment({0: True, 3: False}, False)
    assert formula.entails({0: True})
    assert formula.entails({3: False})
    assert not formula.entails({3: True})
    assert formula.varamount == 4


def test_dump_true(capsys):
    horn("p cnf 2 0 ;").dump()
    assert capsys.readouterr().out == "TRUE\n"


def test_dump_false(capsys):
    HornTypeFormula.unsatisfiable(False).dump()
    assert capsys.readouterr().out == "FALSE\n"


def test_dump_units_and_clauses(capsys):
    HornTypeFormula.from_assignment({0: True}, False).dump()
    horn("p cnf 3 1 -1 2 0 ;").dump()
    assert capsys.readouterr().out == "0->1\n0->0 1->1 \n"