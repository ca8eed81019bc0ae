"""
Variables of a temporary scope: the outer variables plus ``n`` fresh ones.

The extended universe is the disjoint sum ``Orig(v) | Temp(i)``; literals
over it are ordinary ``Literal`` values.
"""
from dataclasses import dataclass
from typing import Any, Generic, Hashable, List, TypeVar, Union
from Cnfbuilder.core.errors import EncodingContractError
from Cnfbuilder.lits.literal import Literal, LitT, remap, variable_of, polarity_of

V = TypeVar("V", bound=Hashable)

@dataclass(frozen=True)
class Orig(Generic[V]):
    """An outer variable seen from inside a temporary scope."""
    var: V

    def __repr__(self) -> str:
        return f"Orig({self.var!r})"

@dataclass(frozen=True)
class Temp:
    """The `index`-th temporary of its scope (0-based)."""
    index: int

    def __repr__(self) -> str:
        return f"Temp({self.index})"

ExtVar = Union[Orig, Temp]

def orig(lit: LitT) -> Literal:
    """Embeds an outer literal into the extended literal type."""
    lifted = remap(lit, Orig)
    if not isinstance(lifted, Literal):
        lifted = Literal(variable_of(lifted), polarity_of(lifted))
    return lifted

def temp(index: int, positive: bool = True) -> Literal[Temp]:
    return Literal(Temp(index), positive)

def temps(n: int) -> List[Literal[Temp]]:
    return [temp(i) for i in range(n)]

def project(lit: Literal) -> Any:
    """Maps an extended literal over an `Orig` variable back to the outer literal."""
    var = variable_of(lit)
    if not isinstance(var, Orig):
        raise EncodingContractError(f"Cannot project {lit!r}: not an outer variable")
    inner = var.var
    positive = polarity_of(lit)
    if isinstance(inner, int) and not isinstance(inner, bool):
        return inner if positive else -inner
    return Literal(inner, positive)
