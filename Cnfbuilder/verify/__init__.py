from Cnfbuilder.verify.solving import is_satisfiable, solve, enumerate_solutions
from Cnfbuilder.verify.oracle import satisfies, is_model, models_of, find_mismatches, check_equivalence

__all__ = [
    "is_satisfiable", "solve", "enumerate_solutions",
    "satisfies", "is_model", "models_of", "find_mismatches", "check_equivalence"
]
