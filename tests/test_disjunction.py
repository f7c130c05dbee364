from helve.cnfformula import CNFFormula
from helve.disjunction import Disjunction
from helve.tokens import TokenReader


def cnf(text):
    return CNFFormula.from_dimacs(TokenReader(text))


def test_single_disjunct_yields_its_clauses():
    formula = cnf("p cnf 3 2 1 0 -2 3 0 ;")
    disjunction = Disjunction([formula])
    assert list(disjunction) == list(formula)
    assert disjunction.varamount == formula.varamount


def test_two_unit_formulas_combine_into_one_clause():
    disjunction = Disjunction([cnf("p cnf 3 1 1 0 ;"), cnf("p cnf 3 1 2 0 ;")])
    assert list(disjunction) == [{0: True, 1: True}]
    assert not disjunction.is_valid()


def test_product_order_and_count():
    first = cnf("p cnf 4 2 1 0 2 0 ;")
    second = cnf("p cnf 4 1 3 0 ;")
    clauses = list(Disjunction([first, second]))
    assert len(clauses) == len(first) * len(second)
    assert clauses == [{0: True, 2: True}, {1: True, 2: True}]


def test_tautological_clauses_are_skipped():
    disjunction = Disjunction([cnf("p cnf 1 1 1 0 ;"), cnf("p cnf 1 1 -1 0 ;")])
    assert list(disjunction) == []
    assert disjunction.is_valid()


def test_valid_disjunct_makes_disjunction_valid():
    disjunction = Disjunction([cnf("p cnf 3 1 1 0 ;"), cnf("p cnf 2 0 ;")])
    assert disjunction.is_valid()
    assert list(disjunction) == []


def test_unsatisfiable_disjuncts_are_ignored():
    formula = cnf("p cnf 2 1 -1 2 0 ;")
    disjunction = Disjunction([CNFFormula.unsatisfiable(), formula])
    assert list(disjunction) == list(formula)
    assert disjunction.varamount == 2


def test_no_disjuncts_is_unsatisfiable():
    disjunction = Disjunction([])
    assert list(disjunction) == [{}]
    assert disjunction.varamount == 1
    assert not disjunction.is_valid()


def test_all_unsatisfiable_gives_empty_clause():
    disjunction = Disjunction([CNFFormula.unsatisfiable(), cnf("p cnf 5 1 0 ;")])
    assert list(disjunction) == [{}]


def test_varamount_is_maximum():
    disjunction = Disjunction([cnf("p cnf 3 1 1 0 ;"), cnf("p cnf 7 1 2 0 ;")])
    assert disjunction.varamount == 7


def test_iteration_can_be_repeated():
    disjunction = Disjunction([cnf("p cnf 4 2 1 0 2 0 ;"), cnf("p cnf 4 1 3 0 ;")])
    expected = [{0: True, 2: True}, {1: True, 2: True}]
    assert list(disjunction) == expected
    assert list(disjunction) == expected