import pytest

from helve.modsconjunction import ModsConjunction
from helve.modsformula import ModsFormula

T, F = True, False


def test_shared_variables_must_agree():
    f1 = ModsFormula((0, 1), [(T, T), (F, F)])
    f2 = ModsFormula((1, 2), [(T, F), (F, T)])
    conj = ModsConjunction([f1, f2])
    assert conj.variable_order == (0, 1, 2)
    assert sorted(conj) == [(F, F, T), (T, T, F)]


def test_projection_onto_given_order_is_consistent():
    f1 = ModsFormula((0, 1), [(T, T), (F, F), (T, F)])
    f2 = ModsFormula((1, 2), [(T, F), (F, T)])
    conj = ModsConjunction([f1, f2], (2, 0))
    for z, x in conj:
        assert any((x, y) in f1 and (y, z) in f2 for y in (F, T))


def test_missing_variable_takes_every_value():
    f = ModsFormula((0,), [(T,)])
    conj = ModsConjunction([f], (0, 5))
    assert sorted(conj) == [(T, F), (T, T)]


def test_order_equal_to_conjunct_uses_its_models():
    f1 = ModsFormula((0, 1), [(T, F), (F, T)])
    f2 = ModsFormula((0, 1), [(T, F), (T, T)])
    conj = ModsConjunction([f1, f2], (0, 1))
    assert list(conj) == [(T, F)]


def test_unsatisfiable_element_gives_no_models():
    f1 = ModsFormula((0,), [(T,)])
    f2 = ModsFormula((1,), [])
    assert list(ModsConjunction([f1, f2])) == []


def test_empty_conjunction_is_true():
    conj = ModsConjunction([])
    assert conj.variable_order == ()
    assert list(conj) == [()]


def test_restriction_without_model_blocks_everything():
    f = ModsFormula((0, 1), [(T, F), (F, F)])
    conj = ModsConjunction([f], (0, 1), (0,))
    assert list(conj) == []


def test_set_restriction_filters_models():
    f = ModsFormula((0, 1), [(T, F), (F, F), (F, T)])
    conj = ModsConjunction([f], (0, 1), (0,))
    conj.set_restriction((F,))
    assert sorted(conj) == [(F, F), (F, T)]
    conj.set_restriction((T,))
    assert list(conj) == [(T, F)]


def test_set_restriction_with_wrong_length_raises():
    f = ModsFormula((0,), [(T,)])
    conj = ModsConjunction([f], (0,), (0,))
    with pytest.raises(ValueError):
        conj.set_restriction((T, F))