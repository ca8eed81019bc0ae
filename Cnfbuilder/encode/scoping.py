"""
Primitive operations over the encoding state.

`add_clause` is the only operation that appends to the formula. The others
change when emitted clauses are active (`unless_one_of`, `assuming`), label
parts of an encoding (`new_context`), or open a scope of fresh temporaries
(`with_temps`).
"""
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, List, Mapping, Union
from Cnfbuilder.core.errors import ValidationError
from Cnfbuilder.core.logging import get_logger
from Cnfbuilder.encode.builder import Encoder, as_encoder, for_all
from Cnfbuilder.encode.state import EncodingState, StateSnapshot
from Cnfbuilder.lits.literal import Literal, LitT, check_literal, negate
from Cnfbuilder.lits.extended import Temp, orig, temp, temps as make_temps

logger = get_logger(__name__)

def add_clause(clause: Iterable[LitT]) -> Encoder[None]:
    """Adds `assumptions ∨ clause` to the formula."""
    lits = [check_literal(lit) for lit in clause]
    def step(state: EncodingState) -> None:
        state.emit(lits)
    return Encoder(step)

def add_clauses(clauses: Iterable[Iterable[LitT]]) -> Encoder[None]:
    return for_all([list(c) for c in clauses], add_clause)

def get_snapshot() -> Encoder[StateSnapshot]:
    return Encoder(lambda state: state.snapshot())

def new_context(name: str, body: Encoder[Any]) -> Encoder[Any]:
    """Runs `body` under a label. No effect on the formula."""
    body = as_encoder(body)
    def step(state: EncodingState) -> Any:
        state.contexts.append(name)
        path = "/".join(state.contexts)
        record = state.trace is not None and state.trace_contexts
        logger.debug(f"enter context {path}")
        if record:
            state.trace.record("CONTEXT_ENTER", context=path,
                               next_var=state.next_var, clauses=len(state.clauses))
        try:
            value = body.run_on(state)
        finally:
            state.contexts.pop()
        if record:
            state.trace.record("CONTEXT_EXIT", context=path,
                               next_var=state.next_var, clauses=len(state.clauses))
        return value
    return Encoder(step)

def unless_one_of(guards: Iterable[LitT], body: Encoder[Any]) -> Encoder[Any]:
    """Runs `body` so that each clause it emits is satisfied whenever a guard literal holds."""
    guards = tuple(check_literal(g) for g in guards)
    body = as_encoder(body)
    def step(state: EncodingState) -> Any:
        saved = state.assumptions
        state.assumptions = saved + guards
        try:
            return body.run_on(state)
        finally:
            state.assumptions = saved
    return Encoder(step)

def assuming(lits: Iterable[LitT], body: Encoder[Any]) -> Encoder[Any]:
    """Runs `body` so that its clauses only bind when every literal in `lits` holds."""
    return unless_one_of([negate(lit) for lit in lits], body)

@dataclass(frozen=True)
class TempScope:
    """Handle given to the body of `with_temps`."""
    n: int

    @property
    def temps(self) -> List[Literal[Temp]]:
        return make_temps(self.n)

    def __getitem__(self, index: int) -> Literal[Temp]:
        if not 0 <= index < self.n:
            raise IndexError(f"Temporary {index} out of range for a scope of {self.n}")
        return temp(index)

    def __len__(self) -> int:
        return self.n

    @staticmethod
    def lift(lit: LitT) -> Literal:
        return orig(lit)

TempBody = Union[Encoder[Any], Callable[[TempScope], Encoder[Any]]]

def with_temps(n: int, body: TempBody) -> Encoder[Any]:
    """
    Runs `body` over the outer variables extended with `n` fresh temporaries.

    Inside the scope, variables are `Orig(v)` for outer variables and
    `Temp(i)` for the temporaries. The temporaries keep their indices for
    the rest of the run and are never handed out again, so outside the scope
    they are existentially quantified. `body` may be an encoder over the
    extended variables, or a callable taking a `TempScope` and returning one.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        logger.warning(f"Rejected temporary scope size {n!r}")
        raise ValidationError(f"with_temps needs a non-negative int, got {n!r}")
    scope = TempScope(n)
    if isinstance(body, Encoder):
        inner_body = body
    elif callable(body):
        inner_body = as_encoder(body(scope))
    else:
        raise ValidationError(f"with_temps body must be an Encoder or a callable, got {type(body).__name__}")

    def step(state: EncodingState) -> Any:
        base = state.allocate(n)
        if state.trace is not None:
            state.trace.record("TEMPS_ALLOC", base=base, count=n, context="/".join(state.contexts))
        logger.debug(f"allocated {n} temporaries at {base}")
        inner = state.enter_temps(base, n)
        try:
            return inner_body.run_on(inner)
        finally:
            state.exit_temps(inner)
    return Encoder(step)

def block_assignment(assignment: Mapping[Hashable, bool]) -> Encoder[None]:
    """Forbids exactly this (partial) assignment."""
    return add_clause([Literal(var, not value) for var, value in assignment.items()])

def add_assignment(assignment: Mapping[Hashable, bool]) -> Encoder[None]:
    """Forces every variable of `assignment` to its value with a unit clause."""
    return for_all(list(assignment.items()), lambda item: add_clause([Literal(item[0], bool(item[1]))]))
