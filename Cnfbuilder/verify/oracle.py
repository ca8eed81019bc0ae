"""
Brute-force semantics of a compiled encoding, for cross-checking small
instances without a solver.

An assignment of the universe is a model of the encoding when some
assignment of the auxiliary variables satisfies every clause.
"""
import itertools
from typing import Callable, Dict, Hashable, List, Sequence
from Cnfbuilder.encode.builder import EncodingResult

def satisfies(clauses: Sequence[Sequence[int]], values: Dict[int, bool]) -> bool:
    return all(any(values[abs(l)] == (l > 0) for l in c) for c in clauses)

def is_model(result: EncodingResult, assignment: Dict[Hashable, bool]) -> bool:
    values = {idx: bool(assignment[var]) for var, idx in result.var_map.items()}
    aux = [i for i in range(1, result.num_vars + 1) if i not in values]
    for bits in itertools.product([False, True], repeat=len(aux)):
        values.update(zip(aux, bits))
        if satisfies(result.clauses, values):
            return True
    return False

def models_of(result: EncodingResult) -> List[Dict[Hashable, bool]]:
    names = list(result.var_map)
    models = []
    for bits in itertools.product([False, True], repeat=len(names)):
        assignment = dict(zip(names, bits))
        if is_model(result, assignment):
            models.append(assignment)
    return models

def find_mismatches(result: EncodingResult,
                    predicate: Callable[[Dict[Hashable, bool]], bool]) -> List[Dict[Hashable, bool]]:
    """Universe assignments on which the encoding and `predicate` disagree."""
    names = list(result.var_map)
    mismatches = []
    for bits in itertools.product([False, True], repeat=len(names)):
        assignment = dict(zip(names, bits))
        if is_model(result, assignment) != bool(predicate(assignment)):
            mismatches.append(assignment)
    return mismatches

def check_equivalence(result: EncodingResult,
                      predicate: Callable[[Dict[Hashable, bool]], bool]) -> bool:
    """True when the models of the encoding are exactly the assignments satisfying `predicate`."""
    return not find_mismatches(result, predicate)
