import pytest
from Cnfbuilder.core.errors import EncodingContractError, ValidationError
from Cnfbuilder.lits import (
    Literal, LiteralLike, pos, neg, negate, variable_of, polarity_of, remap,
    check_literal, Orig, Temp, orig, temp, project
)

def test_literal_negation_and_equality():
    a = pos("a")
    assert -a == neg("a")
    assert negate(negate(a)) == a
    assert a != neg("a")
    assert len({a, Literal("a", True), neg("a")}) == 2

def test_int_literals_follow_dimacs():
    assert negate(3) == -3
    assert variable_of(-3) == 3
    assert polarity_of(-3) is False
    assert polarity_of(7) is True

def test_remap_keeps_polarity():
    assert remap(neg("x"), str.upper) == neg("X")
    assert remap(-2, lambda v: v + 10) == -12
    assert remap(2, lambda v: f"v{v}") == Literal("v2", True)

def test_rejects_non_literals():
    for bad in [0, True, "a", None, 1.5]:
        with pytest.raises(ValidationError):
            check_literal(bad)

def test_protocol_is_structural():
    assert isinstance(pos("a"), LiteralLike)
    assert not isinstance("a", LiteralLike)

def test_extended_literals():
    lifted = orig(neg("a"))
    assert lifted == Literal(Orig("a"), False)
    assert orig(-4) == Literal(Orig(4), False)
    assert temp(2, positive=False) == Literal(Temp(2), False)
    assert project(lifted) == neg("a")
    assert project(orig(-4)) == -4

def test_project_rejects_temporaries():
    with pytest.raises(EncodingContractError):
        project(temp(0))
