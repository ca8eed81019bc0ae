"""
Encoding state threaded through every `Encoder`.

The state is created once per run from the universe of abstract variables
and only ever changed by the primitives in `Cnfbuilder.encode.scoping`.
Invariants:

1. every literal in `clauses` has index `< next_var`;
2. every image of `var_map` is `< next_var`;
3. `var_map` is injective;
4. `next_var` never decreases.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple
from Cnfbuilder.core.errors import EncodingContractError, ValidationError
from Cnfbuilder.core.logging import get_logger
from Cnfbuilder.lits.literal import LitT, variable_of, polarity_of
from Cnfbuilder.lits.extended import Orig, Temp, orig
from Cnfbuilder.trace.trace_types import EncodingTrace

logger = get_logger(__name__)

class BaseVarMap:
    """Total injective map from the variables of one scope to indices."""

    def index(self, var: Any) -> int:
        raise NotImplementedError

    def images(self) -> Iterator[int]:
        raise NotImplementedError

    def translate(self, lit: LitT) -> int:
        """Returns the DIMACS literal for `lit`."""
        idx = self.index(variable_of(lit))
        return idx if polarity_of(lit) else -idx

    def extend(self, base: int, n: int) -> "ExtendedVarMap":
        return ExtendedVarMap(self, base, n)

    def check_injective(self) -> None:
        seen = set()
        for idx in self.images():
            if idx in seen:
                raise EncodingContractError(f"Variable map is not injective: index {idx} used twice")
            seen.add(idx)

class VarMap(BaseVarMap):
    """The run-level map, fixed once the universe is enumerated."""

    def __init__(self, mapping: Mapping[Hashable, int]):
        self._map: Dict[Hashable, int] = dict(mapping)

    @classmethod
    def from_universe(cls, universe: Iterable[Hashable],
                      embedding: Optional[Mapping[Hashable, int]] = None) -> "VarMap":
        mapping: Dict[Hashable, int] = {}
        for var in universe:
            try:
                if var in mapping:
                    logger.warning(f"Rejected universe with duplicate variable {var!r}")
                    raise ValidationError(f"Duplicate variable in universe: {var!r}")
            except TypeError as e:
                raise ValidationError(f"Universe variables must be hashable: {e}")
            mapping[var] = len(mapping) + 1

        if embedding is not None:
            n = len(mapping)
            if set(embedding.keys()) != set(mapping.keys()):
                raise EncodingContractError("Embedding must cover exactly the universe")
            for var, idx in embedding.items():
                if not isinstance(idx, int) or isinstance(idx, bool):
                    raise EncodingContractError(f"Embedding index for {var!r} must be an int, got {idx!r}")
            if sorted(embedding.values()) != list(range(1, n + 1)):
                raise EncodingContractError(f"Embedding must be a bijection onto 1..{n}")
            mapping = {var: embedding[var] for var in mapping}

        return cls(mapping)

    def index(self, var: Any) -> int:
        try:
            return self._map[var]
        except KeyError:
            raise EncodingContractError(f"Unknown variable {var!r}: not in the variable map")
        except TypeError:
            raise ValidationError(f"Variables must be hashable, got {var!r}")

    def images(self) -> Iterator[int]:
        return iter(self._map.values())

    def as_dict(self) -> Dict[Hashable, int]:
        return dict(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, var: Any) -> bool:
        return var in self._map

class ExtendedVarMap(BaseVarMap):
    """Map of a temporary scope: `Orig(v)` defers to the parent, `Temp(i)` is `base + i`."""

    def __init__(self, parent: BaseVarMap, base: int, n: int):
        self.parent = parent
        self.base = base
        self.n = n

    def index(self, var: Any) -> int:
        if isinstance(var, Temp):
            if 0 <= var.index < self.n:
                return self.base + var.index
            raise EncodingContractError(f"{var!r} out of range for a scope of {self.n} temporaries")
        if isinstance(var, Orig):
            return self.parent.index(var.var)
        raise EncodingContractError(
            f"{var!r} is not a variable of this temporary scope (wrap outer literals with orig())"
        )

    def images(self) -> Iterator[int]:
        yield from self.parent.images()
        yield from range(self.base, self.base + self.n)

@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view of an `EncodingState` at one point of a run."""
    next_var: int
    num_clauses: int
    assumptions: Tuple[Any, ...]
    contexts: Tuple[str, ...]

@dataclass
class EncodingState:
    next_var: int
    clauses: List[List[int]]
    var_map: BaseVarMap
    assumptions: Tuple[Any, ...] = ()
    contexts: List[str] = field(default_factory=list)
    trace: Optional[EncodingTrace] = None
    check_invariants: bool = True
    trace_contexts: bool = True

    @classmethod
    def initial(cls, universe: Iterable[Hashable],
                embedding: Optional[Mapping[Hashable, int]] = None,
                trace: Optional[EncodingTrace] = None,
                check_invariants: bool = True,
                trace_contexts: bool = True) -> "EncodingState":
        var_map = VarMap.from_universe(universe, embedding)
        return cls(
            next_var=len(var_map) + 1,
            clauses=[],
            var_map=var_map,
            trace=trace,
            check_invariants=check_invariants,
            trace_contexts=trace_contexts,
        )

    def allocate(self, n: int) -> int:
        """Reserves `n` fresh indices and returns the first one."""
        base = self.next_var
        self.next_var += n
        return base

    def emit(self, clause: List[LitT]) -> None:
        """Appends `assumptions ∨ clause` translated to indices."""
        translated = [self.var_map.translate(lit) for lit in self.assumptions]
        translated.extend(self.var_map.translate(lit) for lit in clause)
        if self.check_invariants:
            for lit in translated:
                if abs(lit) >= self.next_var:
                    raise EncodingContractError(
                        f"Literal {lit} references an index not yet allocated (next free: {self.next_var})"
                    )
        self.clauses.append(translated)

    def enter_temps(self, base: int, n: int) -> "EncodingState":
        """State of a temporary scope whose `n` temporaries start at `base`."""
        return EncodingState(
            next_var=self.next_var,
            clauses=self.clauses,
            var_map=self.var_map.extend(base, n),
            assumptions=tuple(orig(lit) for lit in self.assumptions),
            contexts=self.contexts,
            trace=self.trace,
            check_invariants=self.check_invariants,
            trace_contexts=self.trace_contexts,
        )

    def exit_temps(self, inner: "EncodingState") -> None:
        if inner.next_var < self.next_var:
            raise EncodingContractError(
                f"Temporary scope moved the index counter backwards ({self.next_var} -> {inner.next_var})"
            )
        self.next_var = inner.next_var

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            next_var=self.next_var,
            num_clauses=len(self.clauses),
            assumptions=self.assumptions,
            contexts=tuple(self.contexts),
        )

    def check(self) -> None:
        """Checks invariants 1-3 over the whole state."""
        self.var_map.check_injective()
        for idx in self.var_map.images():
            if not 0 < idx < self.next_var:
                raise EncodingContractError(f"Variable map image {idx} outside 1..{self.next_var - 1}")
        for i, clause in enumerate(self.clauses):
            for lit in clause:
                if lit == 0 or abs(lit) >= self.next_var:
                    raise EncodingContractError(
                        f"Clause {i} has literal {lit} outside 1..{self.next_var - 1}"
                    )
