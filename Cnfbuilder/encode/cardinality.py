"""
Cardinality constraints over literals.

`at_most_k` uses the sequential counter (Sinz 2005) with its register bits
held in a temporary scope; the others reduce to it or to plain clauses.
"""
from itertools import combinations
from typing import Iterable, List
from Cnfbuilder.encode.builder import Encoder, for_all, pure, seq
from Cnfbuilder.encode.scoping import TempScope, add_clause, add_clauses, with_temps
from Cnfbuilder.lits.literal import LitT, check_literal, negate

def at_least_one(lits: Iterable[LitT]) -> Encoder[None]:
    return add_clause(lits)

def at_most_one(lits: Iterable[LitT]) -> Encoder[None]:
    """Pairwise encoding: no two literals hold together."""
    lits = [check_literal(l) for l in lits]
    return for_all(combinations(lits, 2), lambda pair: add_clause([negate(pair[0]), negate(pair[1])]))

def exactly_one(lits: Iterable[LitT]) -> Encoder[None]:
    lits = [check_literal(l) for l in lits]
    return seq(at_least_one(lits), at_most_one(lits))

def at_most_k(lits: Iterable[LitT], k: int) -> Encoder[None]:
    lits = [check_literal(l) for l in lits]
    n = len(lits)
    if k < 0:
        return add_clause([])
    if k >= n:
        return pure(None)
    if k == 0:
        return for_all(lits, lambda lit: add_clause([negate(lit)]))

    def counter(scope: TempScope) -> Encoder[None]:
        x = [scope.lift(lit) for lit in lits]

        # s(i, j): at least j of x[0..i] hold
        def s(i: int, j: int):
            return scope[i * k + (j - 1)]

        clauses: List[List] = [[-x[0], s(0, 1)]]
        for j in range(2, k + 1):
            clauses.append([-s(0, j)])
        for i in range(1, n - 1):
            clauses.append([-x[i], s(i, 1)])
            clauses.append([-s(i - 1, 1), s(i, 1)])
            for j in range(2, k + 1):
                clauses.append([-x[i], -s(i - 1, j - 1), s(i, j)])
                clauses.append([-s(i - 1, j), s(i, j)])
            clauses.append([-x[i], -s(i - 1, k)])
        clauses.append([-x[n - 1], -s(n - 2, k)])
        return add_clauses(clauses)

    return with_temps((n - 1) * k, counter)

def at_least_k(lits: Iterable[LitT], k: int) -> Encoder[None]:
    lits = [check_literal(l) for l in lits]
    n = len(lits)
    if k <= 0:
        return pure(None)
    if k > n:
        return add_clause([])
    return at_most_k([negate(lit) for lit in lits], n - k)

def exactly_k(lits: Iterable[LitT], k: int) -> Encoder[None]:
    lits = [check_literal(l) for l in lits]
    return seq(at_most_k(lits, k), at_least_k(lits, k))
