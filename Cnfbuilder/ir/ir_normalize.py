from typing import List
from Cnfbuilder.ir.ir_types import BoolExpr, Lit, Not, And, Or, Imp, Iff, Xor

def negate_expr(expr: BoolExpr) -> BoolExpr:
    """Negation with literals and double negations folded."""
    if isinstance(expr, Lit):
        return Lit(var=expr.var, neg=not expr.neg)
    if isinstance(expr, Not):
        return expr.term
    return Not(term=expr)

def normalize_ir(expr: BoolExpr) -> BoolExpr:
    """
    Pushes Not down to the gates it can cross and merges nested And/Or.

    Imp/Iff/Xor are kept as gates: each costs one definition in the
    Tseitin encoding, same as an And/Or.
    """
    if isinstance(expr, Lit):
        return expr

    if isinstance(expr, Not):
        inner = expr.term
        if isinstance(inner, Lit):
            return negate_expr(inner)
        if isinstance(inner, Not):
            return normalize_ir(inner.term)
        if isinstance(inner, And):
            return normalize_ir(Or(terms=[Not(term=t) for t in inner.terms]))
        if isinstance(inner, Or):
            return normalize_ir(And(terms=[Not(term=t) for t in inner.terms]))
        if isinstance(inner, Imp):
            # !(a -> b) == a /\ !b
            return normalize_ir(And(terms=[inner.a, Not(term=inner.b)]))
        if isinstance(inner, Iff):
            return normalize_ir(Xor(a=inner.a, b=inner.b))
        if isinstance(inner, Xor):
            return normalize_ir(Iff(a=inner.a, b=inner.b))
        return expr

    if isinstance(expr, (And, Or)):
        gate = type(expr)
        terms: List[BoolExpr] = []
        for t in expr.terms:
            t = normalize_ir(t)
            if isinstance(t, gate):
                terms.extend(t.terms)
            else:
                terms.append(t)
        if len(terms) == 1:
            return terms[0]
        return gate(terms=terms)

    if isinstance(expr, (Imp, Iff, Xor)):
        return type(expr)(a=normalize_ir(expr.a), b=normalize_ir(expr.b))

    return expr

def count_gates(expr: BoolExpr) -> int:
    """Number of Tseitin definitions `expr` needs (literals and Not are free)."""
    if isinstance(expr, Lit):
        return 0
    if isinstance(expr, Not):
        return count_gates(expr.term)
    if isinstance(expr, (And, Or)):
        return 1 + sum(count_gates(t) for t in expr.terms)
    return 1 + count_gates(expr.a) + count_gates(expr.b)
