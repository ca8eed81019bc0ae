from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional
from pysat.solvers import NoSuchSolverError, Solver
from Cnfbuilder.core.config import EncoderConfig
from Cnfbuilder.core.errors import VerificationError
from Cnfbuilder.core.logging import get_logger
from Cnfbuilder.core.types import validate_cnf
from Cnfbuilder.encode.builder import Encoder, EncodingResult, for_all, run
from Cnfbuilder.encode.scoping import block_assignment

logger = get_logger(__name__)

DEFAULT_SOLVER = EncoderConfig().solver_name

def _solve_clauses(clauses: List[List[int]],
                   assumptions: Optional[List[int]] = None,
                   solver_name: str = DEFAULT_SOLVER) -> Optional[List[int]]:
    """Returns a model, or None when unsatisfiable."""
    if any(not c for c in clauses):
        return None
    try:
        with Solver(name=solver_name, bootstrap_with=clauses) as solver:
            if not solver.solve(assumptions=assumptions or []):
                return None
            return solver.get_model() or []
    except (NoSuchSolverError, NotImplementedError) as e:
        raise VerificationError(f"Solver '{solver_name}' unavailable: {e}")

def is_satisfiable(clauses: List[List[int]],
                   assumptions: Optional[List[int]] = None,
                   solver_name: str = DEFAULT_SOLVER) -> bool:
    validate_cnf(clauses)
    return _solve_clauses(clauses, assumptions, solver_name) is not None

def solve(result: EncodingResult,
          assumptions: Optional[Mapping[Hashable, bool]] = None,
          solver_name: str = DEFAULT_SOLVER) -> Optional[Dict[Hashable, bool]]:
    """Solves a compiled encoding; returns the model over the universe or None."""
    lits = result.encode_assignment(assumptions) if assumptions else None
    model = _solve_clauses(result.clauses, lits, solver_name)
    if model is None:
        return None
    return result.decode(model)

def enumerate_solutions(universe: Iterable[Hashable],
                        encoder: Encoder[Any],
                        limit: Optional[int] = None,
                        config: Optional[EncoderConfig] = None) -> List[Dict[Hashable, bool]]:
    """
    All assignments of the universe for which the encoding is satisfiable.

    After each solution the encoding is rerun with that assignment blocked.
    Auxiliary variables are not part of a solution, so each universe
    assignment is reported once.
    """
    config = config or EncoderConfig()
    if limit is None:
        limit = config.max_solutions
    universe = list(universe)
    found: List[Dict[Hashable, bool]] = []

    while limit is None or len(found) < limit:
        blocked = list(found)
        enc = encoder.then(for_all(blocked, block_assignment))
        result = run(universe, enc, config=config)
        model = solve(result, solver_name=config.solver_name)
        if model is None:
            break
        found.append(model)

    logger.debug(f"Enumerated {len(found)} solutions")
    return found
