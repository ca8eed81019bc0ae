"""
Gate combinators.

Each combinator is a composition of `add_clause`, `assuming` and the
sequencing helpers; none of them touch the state directly. Hypotheses and
conclusions are iterables of literals and are materialized when the
combinator is built.
"""
from typing import Iterable, List
from Cnfbuilder.encode.builder import Encoder, for_all, guard, ite, seq
from Cnfbuilder.encode.scoping import add_clause, assuming
from Cnfbuilder.lits.literal import LitT, check_literal

def _lits(lits: Iterable[LitT]) -> List[LitT]:
    return [check_literal(lit) for lit in lits]

def and_imply_or(hyps: Iterable[LitT], concs: Iterable[LitT]) -> Encoder[None]:
    """(h1 ∧ ... ∧ hk) → (c1 ∨ ... ∨ cm), as the single clause ¬h1 ∨ ... ∨ ¬hk ∨ c1 ∨ ... ∨ cm."""
    return assuming(_lits(hyps), add_clause(_lits(concs)))

def and_imply(hyps: Iterable[LitT], conc: LitT) -> Encoder[None]:
    return and_imply_or(hyps, [conc])

def imply_or(hyp: LitT, concs: Iterable[LitT]) -> Encoder[None]:
    return and_imply_or([hyp], concs)

def or_imply_or(hyps: Iterable[LitT], concs: Iterable[LitT]) -> Encoder[None]:
    """(h1 ∨ ... ∨ hk) → (c1 ∨ ... ∨ cm), one clause per hypothesis."""
    concs = _lits(concs)
    return for_all(_lits(hyps), lambda h: imply_or(h, concs))

def or_imply(hyps: Iterable[LitT], conc: LitT) -> Encoder[None]:
    return or_imply_or(hyps, [conc])

def and_imply_and(hyps: Iterable[LitT], concs: Iterable[LitT]) -> Encoder[None]:
    """(h1 ∧ ... ∧ hk) → (c1 ∧ ... ∧ cm), one clause per conclusion."""
    hyps = _lits(hyps)
    return for_all(_lits(concs), lambda c: and_imply(hyps, c))

def imply_and(hyp: LitT, concs: Iterable[LitT]) -> Encoder[None]:
    return and_imply_and([hyp], concs)

def or_imply_and(hyps: Iterable[LitT], concs: Iterable[LitT]) -> Encoder[None]:
    """(h1 ∨ ... ∨ hk) → (c1 ∧ ... ∧ cm): the k·m binary clauses ¬hi ∨ cj."""
    concs = _lits(concs)
    return for_all(_lits(hyps), lambda h: imply_and(h, concs))

def imply(a: LitT, b: LitT) -> Encoder[None]:
    return imply_or(a, [b])

def bi_impl(a: LitT, b: LitT) -> Encoder[None]:
    return seq(imply(a, b), imply(b, a))

def def_conj(v: LitT, vs: Iterable[LitT]) -> Encoder[None]:
    """v ↔ (v1 ∧ ... ∧ vn). With no conjuncts, v is forced true."""
    vs = _lits(vs)
    return seq(imply_and(v, vs), and_imply(vs, v))

def def_disj(v: LitT, vs: Iterable[LitT]) -> Encoder[None]:
    """v ↔ (v1 ∨ ... ∨ vn). With no disjuncts, v is forced false."""
    vs = _lits(vs)
    return seq(imply_or(v, vs), or_imply(vs, v))

def def_iff(v: LitT, a: LitT, b: LitT) -> Encoder[None]:
    """v ↔ (a ↔ b)."""
    v, a, b = check_literal(v), check_literal(a), check_literal(b)
    return seq(
        and_imply_or([v, a], [b]),
        and_imply_or([v, b], [a]),
        and_imply_or([a, b], [v]),
        add_clause([a, b, v]),
    )

__all__ = [
    "and_imply_or", "and_imply", "imply_or", "or_imply_or", "or_imply",
    "and_imply_and", "imply_and", "or_imply_and", "imply", "bi_impl",
    "def_conj", "def_disj", "def_iff",
    "for_all", "guard", "ite", "seq",
]
