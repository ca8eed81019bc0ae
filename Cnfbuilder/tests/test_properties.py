from hypothesis import given, settings, strategies as st
from Cnfbuilder.encode import (
    run, seq, pure, add_clause, get_snapshot, new_context, unless_one_of,
    assuming, with_temps, for_all, def_disj
)
from Cnfbuilder.lits import Literal, Temp, orig
from Cnfbuilder.verify.oracle import find_mismatches, models_of

VARS = ["a", "b", "c", "d"]

def lit_desc(n_temps):
    named = st.tuples(st.just("v"), st.sampled_from(VARS), st.booleans())
    if n_temps:
        return named | st.tuples(st.just("t"), st.integers(0, n_temps - 1), st.booleans())
    return named

@st.composite
def programs(draw, depth=0, n_temps=0, allow_temps=True):
    ops = []
    for _ in range(draw(st.integers(0, 3))):
        kinds = ["clause", "clause"]
        if depth < 3:
            kinds += ["unless", "assume", "ctx"]
            if allow_temps:
                kinds.append("temps")
        kind = draw(st.sampled_from(kinds))
        if kind == "clause":
            ops.append(("clause", draw(st.lists(lit_desc(n_temps), max_size=3))))
        elif kind in ("unless", "assume"):
            guards = draw(st.lists(lit_desc(n_temps), min_size=1, max_size=2))
            ops.append((kind, guards, draw(programs(depth + 1, n_temps, allow_temps))))
        elif kind == "ctx":
            ops.append(("ctx", draw(st.sampled_from(["x", "y"])), draw(programs(depth + 1, n_temps, allow_temps))))
        else:
            n = draw(st.integers(0, 3))
            ops.append(("temps", n, draw(programs(depth + 1, n, allow_temps))))
    return ops

def to_lit(desc, temp_depth):
    kind, x, positive = desc
    if kind == "t":
        return Literal(Temp(x), positive)
    lit = Literal(x, positive)
    for _ in range(temp_depth):
        lit = orig(lit)
    return lit

def build(ops, log, temp_depth=0):
    """Turns a program into an encoder that records snapshots around every scope."""
    def checked(enc, growth=0):
        return get_snapshot().bind(
            lambda before: enc.then(get_snapshot().map(lambda after: log.append((before, after, growth))))
        )

    encs = []
    for op in ops:
        kind = op[0]
        if kind == "clause":
            encs.append(add_clause([to_lit(d, temp_depth) for d in op[1]]))
        elif kind == "unless":
            encs.append(checked(unless_one_of([to_lit(d, temp_depth) for d in op[1]], build(op[2], log, temp_depth))))
        elif kind == "assume":
            encs.append(checked(assuming([to_lit(d, temp_depth) for d in op[1]], build(op[2], log, temp_depth))))
        elif kind == "ctx":
            encs.append(checked(new_context(op[1], build(op[2], log, temp_depth))))
        else:
            encs.append(checked(with_temps(op[1], build(op[2], log, temp_depth + 1)), growth=op[1]))
    return seq(*encs)

def holds(ops, m, guards=()):
    """Reference semantics for temp-free programs."""
    value = lambda desc: m[desc[1]] == desc[2]
    for op in ops:
        kind = op[0]
        if kind == "clause":
            if not (any(guards) or any(value(d) for d in op[1])):
                return False
        elif kind == "unless":
            if not holds(op[2], m, guards + tuple(value(d) for d in op[1])):
                return False
        elif kind == "assume":
            if not holds(op[2], m, guards + tuple(not value(d) for d in op[1])):
                return False
        elif not holds(op[2], m, guards):
            return False
    return True

@settings(max_examples=150, deadline=None)
@given(ops=programs())
def test_state_invariants_hold(ops):
    log = []
    result = run(VARS, build(ops, log))

    # bounded indices
    for clause in result.clauses:
        assert all(0 < abs(l) <= result.num_vars for l in clause)
    # injective map, untouched by temporary scopes
    assert result.var_map == {v: i + 1 for i, v in enumerate(VARS)}

    for before, after, growth in log:
        assert after.assumptions == before.assumptions
        assert after.contexts == before.contexts
        assert after.next_var >= before.next_var + growth
        assert after.num_clauses >= before.num_clauses

@settings(max_examples=100, deadline=None)
@given(ops=programs())
def test_allocation_is_monotonic(ops):
    timeline = []
    def record(enc):
        return get_snapshot().bind(lambda s: pure(timeline.append(s.next_var))).then(enc)
    # snapshot before every top-level step and once at the end
    steps = [record(build([op], [])) for op in ops]
    run(VARS, seq(*steps).then(record(pure())))
    assert timeline == sorted(timeline)

@settings(max_examples=100, deadline=None)
@given(ops=programs(allow_temps=False))
def test_guarded_clauses_mean_what_they_say(ops):
    result = run(VARS, build(ops, []))
    assert find_mismatches(result, lambda m: holds(ops, m)) == []

@given(targets=st.lists(st.sampled_from(VARS), min_size=1, max_size=3, unique=True))
def test_for_all_is_conjunction(targets):
    f = lambda v: def_disj(Literal(v), [Literal("d"), Literal("a")])
    combined = models_of(run(VARS, for_all(targets, f)))
    separate = [models_of(run(VARS, f(v))) for v in targets]
    everything = models_of(run(VARS, pure()))
    assert combined == [m for m in everything if all(m in s for s in separate)]
