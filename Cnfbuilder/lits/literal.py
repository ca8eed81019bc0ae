"""
Literal capability.

Two literal representations are understood everywhere in the builder:

* ``Literal(var, positive)`` over any hashable abstract variable, and
* plain non-zero ``int`` literals in DIMACS style (variable ``abs(x)``,
  polarity ``x > 0``).

Third-party literal types take part by satisfying ``LiteralLike``.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Protocol, TypeVar, Union, runtime_checkable
from Cnfbuilder.core.errors import ValidationError

V = TypeVar("V", bound=Hashable)
W = TypeVar("W", bound=Hashable)

@runtime_checkable
class LiteralLike(Protocol):
    """Structural interface every literal representation must provide."""

    def negate(self) -> "LiteralLike": ...

    @property
    def var(self) -> Any: ...

    @property
    def positive(self) -> bool: ...

    def remap(self, f: Callable[[Any], Any]) -> "LiteralLike": ...

@dataclass(frozen=True)
class Literal(Generic[V]):
    """A variable together with a polarity."""
    var: V
    positive: bool = True

    def negate(self) -> "Literal[V]":
        return Literal(self.var, not self.positive)

    def __neg__(self) -> "Literal[V]":
        return self.negate()

    def remap(self, f: Callable[[V], W]) -> "Literal[W]":
        return Literal(f(self.var), self.positive)

    def __repr__(self) -> str:
        return f"{'' if self.positive else '-'}{self.var!r}"

LitT = Union[Literal, int, LiteralLike]

def pos(var: V) -> Literal[V]:
    return Literal(var, True)

def neg(var: V) -> Literal[V]:
    return Literal(var, False)

def _is_int_lit(lit: Any) -> bool:
    return isinstance(lit, int) and not isinstance(lit, bool)

def check_literal(lit: Any) -> Any:
    """Returns `lit` unchanged, raising ValidationError if it is not a literal."""
    if _is_int_lit(lit):
        if lit == 0:
            raise ValidationError("Literal cannot be zero")
        return lit
    if isinstance(lit, (Literal, LiteralLike)):
        return lit
    raise ValidationError(f"Not a literal: {lit!r} ({type(lit).__name__})")

def negate(lit: LitT) -> LitT:
    lit = check_literal(lit)
    if _is_int_lit(lit):
        return -lit
    return lit.negate()

def variable_of(lit: LitT) -> Any:
    lit = check_literal(lit)
    if _is_int_lit(lit):
        return abs(lit)
    return lit.var

def polarity_of(lit: LitT) -> bool:
    lit = check_literal(lit)
    if _is_int_lit(lit):
        return lit > 0
    return lit.positive

def remap(lit: LitT, f: Callable[[Any], Any]) -> LitT:
    """Applies `f` to the variable of `lit`, keeping its polarity."""
    lit = check_literal(lit)
    if _is_int_lit(lit):
        new_var = f(abs(lit))
        if _is_int_lit(new_var):
            return new_var if lit > 0 else -new_var
        return Literal(new_var, lit > 0)
    return lit.remap(f)