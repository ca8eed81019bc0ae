import pytest
from Cnfbuilder.core.errors import EncodingContractError, ValidationError
from Cnfbuilder.encode import EncodingState, VarMap, run, pure, imply, add_clause
from Cnfbuilder.lits import pos, Orig, Temp

def test_initial_state_enumerates_universe():
    state = EncodingState.initial(["x", "y", "z"])
    assert state.next_var == 4
    assert state.clauses == []
    assert state.assumptions == ()
    assert state.var_map.as_dict() == {"x": 1, "y": 2, "z": 3}
    state.check()

def test_empty_universe_is_allowed():
    result = run([], pure())
    assert result.num_vars == 0
    assert result.clauses == []
    assert result.var_map == {}

def test_duplicate_universe_member_rejected():
    with pytest.raises(ValidationError, match="Duplicate"):
        VarMap.from_universe(["a", "b", "a"])

def test_unhashable_universe_member_rejected():
    with pytest.raises(ValidationError):
        VarMap.from_universe([["a"]])

def test_custom_embedding():
    result = run(["a", "b"], imply(pos("a"), pos("b")), embedding={"a": 2, "b": 1})
    assert result.var_map == {"a": 2, "b": 1}
    assert result.clauses == [[-2, 1]]

@pytest.mark.parametrize("embedding", [
    {"a": 1, "b": 1},
    {"a": 1, "b": 3},
    {"a": 1},
    {"a": 1, "b": 2, "c": 3},
    {"a": 1.0, "b": 2},
    {"a": True, "b": 2},
])
def test_bad_embedding_is_contract_violation(embedding):
    with pytest.raises(EncodingContractError):
        VarMap.from_universe(["a", "b"], embedding)

def test_unknown_variable_fails_fast():
    state = EncodingState.initial(["a"])
    with pytest.raises(EncodingContractError, match="Unknown variable"):
        add_clause([pos("nope")]).run_on(state)
    assert state.clauses == []

def test_extended_map_lookup():
    base = VarMap.from_universe(["a", "b"])
    ext = base.extend(3, 2)
    assert ext.index(Orig("b")) == 2
    assert ext.index(Temp(1)) == 4
    assert list(ext.images()) == [1, 2, 3, 4]
    with pytest.raises(EncodingContractError):
        ext.index(Temp(2))
    with pytest.raises(EncodingContractError, match="orig"):
        ext.index("a")

def test_check_catches_corruption():
    state = EncodingState.initial(["a", "b"])
    state.clauses.append([1, 5])
    with pytest.raises(EncodingContractError):
        state.check()

def test_emit_refuses_unallocated_index():
    state = EncodingState.initial(["a"])
    state.var_map = VarMap({"a": 1, "ghost": 9})
    with pytest.raises(EncodingContractError, match="not yet allocated"):
        add_clause([pos("ghost")]).run_on(state)

def test_int_universe():
    result = run(range(1, 4), imply(1, -3))
    assert result.clauses == [[-1, -3]]
