from typing import Iterable, List, Optional, Set, Union
from Cnfbuilder.core.config import EncoderConfig
from Cnfbuilder.core.errors import IRCompileError
from Cnfbuilder.encode.builder import Encoder, EncodingResult, for_all, run, seq
from Cnfbuilder.encode.cardinality import at_least_k, at_most_k, exactly_k
from Cnfbuilder.encode.gates import def_conj, def_disj, def_iff
from Cnfbuilder.encode.scoping import TempScope, add_clause, with_temps
from Cnfbuilder.ir.ir_normalize import count_gates, normalize_ir
from Cnfbuilder.ir.ir_types import (
    AtLeast, AtMost, BoolExpr, Constraint, Exactly, Iff, Imp, Lit, Not, And, Or, Xor
)
from Cnfbuilder.lits.literal import Literal, negate
from Cnfbuilder.trace.trace_types import EncodingTrace

def _literal(lit: Lit) -> Literal[str]:
    return Literal(lit.var.name, not lit.neg)

def encode_expr(expr: BoolExpr) -> Encoder[None]:
    """
    Asserts `expr` over variables named by their `VarRef` names.

    Top-level conjunctions and flat clauses are emitted directly; anything
    else gets a Tseitin definition per gate inside one temporary scope.
    """
    expr = normalize_ir(expr)

    if isinstance(expr, Lit):
        return add_clause([_literal(expr)])
    if isinstance(expr, And):
        return for_all(expr.terms, encode_expr)
    if isinstance(expr, Or) and all(isinstance(t, Lit) for t in expr.terms):
        return add_clause([_literal(t) for t in expr.terms])

    n = count_gates(expr)

    def tseitin(scope: TempScope) -> Encoder[None]:
        defs: List[Encoder[None]] = []
        fresh = iter(range(n))

        def walk(e: BoolExpr):
            if isinstance(e, Lit):
                return scope.lift(_literal(e))
            if isinstance(e, Not):
                return negate(walk(e.term))
            out = scope[next(fresh)]
            if isinstance(e, And):
                defs.append(def_conj(out, [walk(t) for t in e.terms]))
            elif isinstance(e, Or):
                defs.append(def_disj(out, [walk(t) for t in e.terms]))
            elif isinstance(e, Imp):
                defs.append(def_disj(out, [negate(walk(e.a)), walk(e.b)]))
            elif isinstance(e, Iff):
                defs.append(def_iff(out, walk(e.a), walk(e.b)))
            elif isinstance(e, Xor):
                defs.append(def_iff(negate(out), walk(e.a), walk(e.b)))
            else:
                raise IRCompileError(f"Unsupported expression for Tseitin: {type(e).__name__}")
            return out

        root = walk(expr)
        return seq(*defs, add_clause([root]))

    return with_temps(n, tseitin)

def encode_constraint(obj: Constraint) -> Encoder[None]:
    if isinstance(obj, (AtLeast, AtMost, Exactly)):
        lits = [Literal(v.name) for v in obj.vars]
        if isinstance(obj, AtMost):
            return at_most_k(lits, obj.k)
        if isinstance(obj, AtLeast):
            return at_least_k(lits, obj.k)
        return exactly_k(lits, obj.k)
    if isinstance(obj, (Lit, Not, And, Or, Imp, Iff, Xor)):
        return encode_expr(obj)
    raise IRCompileError(f"Unsupported constraint: {type(obj).__name__}")

def collect_vars(obj: Constraint, names: Set[str]) -> None:
    if isinstance(obj, Lit):
        names.add(obj.var.name)
    elif isinstance(obj, Not):
        collect_vars(obj.term, names)
    elif isinstance(obj, (And, Or)):
        for t in obj.terms:
            collect_vars(t, names)
    elif isinstance(obj, (Imp, Iff, Xor)):
        collect_vars(obj.a, names)
        collect_vars(obj.b, names)
    elif isinstance(obj, (AtLeast, AtMost, Exactly)):
        names.update(v.name for v in obj.vars)
    else:
        raise IRCompileError(f"Unsupported constraint: {type(obj).__name__}")

def compile_ir(ir_obj: Union[Constraint, List[Constraint]],
               universe: Optional[Iterable[str]] = None,
               config: Optional[EncoderConfig] = None,
               trace: Optional[EncodingTrace] = None) -> EncodingResult[None]:
    """Compiles constraints to CNF. Named variables get indices 1..n in sorted order."""
    objs = ir_obj if isinstance(ir_obj, list) else [ir_obj]

    names: Set[str] = set()
    for obj in objs:
        collect_vars(obj, names)
    if universe is None:
        universe = sorted(names)
    else:
        universe = list(universe)
        missing = names.difference(universe)
        if missing:
            raise IRCompileError(f"Constraints mention variables outside the universe: {sorted(missing)}")

    if trace is not None:
        for i, obj in enumerate(objs):
            trace.record("IR_NODE", step_index=i, type=type(obj).__name__)

    return run(universe, for_all(objs, encode_constraint), config=config, trace=trace)
