"""
The `Encoder` type: a deferred, composable mutation of an `EncodingState`.

An `Encoder` does nothing until it is run. `pure` and `bind` compose
encoders sequentially; `run` executes one against a fresh state built from
a universe of abstract variables and returns an `EncodingResult`.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Mapping, Optional, TypeVar, Union
from Cnfbuilder.cnf.cnf_types import CnfDocument
from Cnfbuilder.cnf.cnf_io import to_dimacs_string
from Cnfbuilder.cnf.cnf_stats import compute_cnf_stats
from Cnfbuilder.core.config import EncoderConfig
from Cnfbuilder.core.errors import EncodingContractError, ValidationError
from Cnfbuilder.core.logging import get_logger
from Cnfbuilder.encode.state import EncodingState
from Cnfbuilder.trace.trace_types import EncodingTrace

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

class Encoder(Generic[T]):
    """A builder step: runs against a state, mutating it, and returns a value."""
    __slots__ = ("_step",)

    def __init__(self, step: Callable[[EncodingState], T]):
        self._step = step

    def run_on(self, state: EncodingState) -> T:
        before = state.next_var
        value = self._step(state)
        if state.next_var < before:
            raise EncodingContractError(
                f"Index counter decreased from {before} to {state.next_var}"
            )
        return value

    @staticmethod
    def pure(value: T = None) -> "Encoder[T]":
        return Encoder(lambda state: value)

    def bind(self, continuation: Callable[[T], "Encoder[U]"]) -> "Encoder[U]":
        def step(state: EncodingState) -> U:
            value = self.run_on(state)
            return as_encoder(continuation(value)).run_on(state)
        return Encoder(step)

    def map(self, f: Callable[[T], U]) -> "Encoder[U]":
        return Encoder(lambda state: f(self.run_on(state)))

    def then(self, other: "Encoder[U]") -> "Encoder[U]":
        other = as_encoder(other)
        def step(state: EncodingState) -> U:
            self.run_on(state)
            return other.run_on(state)
        return Encoder(step)

    __rshift__ = then

    def run(self, universe: Iterable[Hashable], **kwargs: Any) -> "EncodingResult[T]":
        return run(universe, self, **kwargs)

def as_encoder(value: Any) -> Encoder:
    if isinstance(value, Encoder):
        return value
    raise ValidationError(f"Expected an Encoder, got {type(value).__name__}")

def pure(value: T = None) -> Encoder[T]:
    return Encoder.pure(value)

def bind(encoder: Encoder[T], continuation: Callable[[T], Encoder[U]]) -> Encoder[U]:
    return as_encoder(encoder).bind(continuation)

Deferred = Union[Encoder, Callable[[], Encoder]]

def force(body: Deferred) -> Encoder:
    """Accepts an encoder or a zero-argument callable producing one."""
    if isinstance(body, Encoder):
        return body
    if callable(body):
        return as_encoder(body())
    raise ValidationError(f"Expected an Encoder or a callable, got {type(body).__name__}")

# Sequencing

def for_all(items: Iterable[Any], f: Callable[[Any], Encoder]) -> Encoder[None]:
    """Runs `f(item)` for every item in order, conjoining the effects."""
    items = list(items)
    def step(state: EncodingState) -> None:
        for item in items:
            as_encoder(f(item)).run_on(state)
    return Encoder(step)

def seq(*encoders: Encoder) -> Encoder[None]:
    encoders = tuple(as_encoder(e) for e in encoders)
    def step(state: EncodingState) -> None:
        for e in encoders:
            e.run_on(state)
    return Encoder(step)

def guard(cond: bool, body: Deferred) -> Encoder[None]:
    """`body` if `cond`, else a no-op."""
    if cond:
        return force(body).map(lambda _: None)
    return pure(None)

def ite(cond: bool, then_body: Deferred, else_body: Deferred) -> Encoder:
    return force(then_body) if cond else force(else_body)

# Running

@dataclass
class EncodingResult(Generic[T]):
    """Final artifact of a run: the formula and the map back to abstract variables."""
    value: T
    clauses: List[List[int]]
    var_map: Dict[Hashable, int]
    num_vars: int

    def to_document(self) -> CnfDocument:
        return CnfDocument(num_vars=self.num_vars, clauses=self.clauses)

    def to_dimacs(self) -> str:
        return to_dimacs_string(self.to_document())

    def stats(self) -> Dict[str, Any]:
        return compute_cnf_stats(self.to_document(), num_named_vars=len(self.var_map))

    def decode(self, model: Iterable[int]) -> Dict[Hashable, bool]:
        """Reads a solver model (signed ints) back onto the universe; absent indices are False."""
        values = {abs(lit): lit > 0 for lit in model}
        return {var: values.get(idx, False) for var, idx in self.var_map.items()}

    def encode_assignment(self, assignment: Mapping[Hashable, bool]) -> List[int]:
        """Signed-int literals fixing `assignment` (e.g. as solver assumptions)."""
        lits = []
        for var, value in assignment.items():
            if var not in self.var_map:
                raise ValidationError(f"Unknown variable {var!r}")
            idx = self.var_map[var]
            lits.append(idx if value else -idx)
        return lits

def run(universe: Iterable[Hashable],
        encoder: Encoder[T],
        embedding: Optional[Mapping[Hashable, int]] = None,
        config: Optional[EncoderConfig] = None,
        trace: Optional[EncodingTrace] = None) -> EncodingResult[T]:
    """Runs `encoder` over the universe (indices 1..n in iteration order unless `embedding` is given)."""
    config = config or EncoderConfig()
    state = EncodingState.initial(
        universe,
        embedding=embedding,
        trace=trace,
        check_invariants=config.check_invariants,
        trace_contexts=config.trace_contexts,
    )
    n_named = state.next_var - 1

    value = as_encoder(encoder).run_on(state)

    if config.check_invariants:
        state.check()
    if state.assumptions or state.contexts:
        raise EncodingContractError("Scopes left open at the end of the run")

    num_vars = state.next_var - 1
    logger.debug(
        f"Encoding finished: {len(state.clauses)} clauses, {n_named} named vars, "
        f"{num_vars - n_named} aux vars"
    )
    if trace is not None:
        trace.record("CNF_EMIT", clauses=len(state.clauses), vars=n_named, aux_vars=num_vars - n_named)

    return EncodingResult(
        value=value,
        clauses=state.clauses,
        var_map=state.var_map.as_dict(),
        num_vars=num_vars,
    )
