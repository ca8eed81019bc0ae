from Cnfbuilder import run, seq, imply, pos, add_assignment
from Cnfbuilder.cnf import read_dimacs_from_string
from Cnfbuilder.verify import solve, is_satisfiable, models_of

def chain():
    return seq(imply(pos("A"), pos("B")), imply(pos("B"), pos("C")))

def test_chain_of_implications():
    result = run(["A", "B", "C"], chain())
    assert result.var_map == {"A": 1, "B": 2, "C": 3}
    assert result.clauses == [[-1, 2], [-2, 3]]

    assert solve(result, {"A": True, "C": False}) is None
    model = solve(result, {"A": False})
    assert model is not None and model["A"] is False

def test_chain_with_forced_assignment():
    unsat = run(["A", "B", "C"], seq(chain(), add_assignment({"A": True, "C": False})))
    assert not is_satisfiable(unsat.clauses)
    assert models_of(unsat) == []

    sat = run(["A", "B", "C"], seq(chain(), add_assignment({"A": False})))
    assert is_satisfiable(sat.clauses)

def test_dimacs_output():
    result = run(["A", "B", "C"], chain())
    text = result.to_dimacs()
    assert text.splitlines() == ["p cnf 3 2", "-1 2 0", "-2 3 0"]
    assert read_dimacs_from_string(text).clauses == result.clauses

def test_decode_defaults_missing_indices_to_false():
    result = run(["A", "B", "C"], chain())
    assert result.decode([1, 2]) == {"A": True, "B": True, "C": False}

def test_stats_split_named_and_aux_vars():
    from Cnfbuilder import with_temps, add_clause
    enc = seq(chain(), with_temps(2, lambda s: add_clause([s[0], s[1]])))
    stats = run(["A", "B", "C"], enc).stats()
    assert stats["n_named_vars"] == 3
    assert stats["n_aux_vars"] == 2
    assert stats["n_clauses"] == 3
