from Cnfbuilder.encode.state import EncodingState, StateSnapshot, VarMap, ExtendedVarMap
from Cnfbuilder.encode.builder import (
    Encoder, EncodingResult, pure, bind, run, for_all, seq, guard, ite
)
from Cnfbuilder.encode.scoping import (
    add_clause, add_clauses, get_snapshot, new_context, unless_one_of, assuming,
    with_temps, TempScope, block_assignment, add_assignment
)
from Cnfbuilder.encode.gates import (
    and_imply_or, and_imply, imply_or, or_imply_or, or_imply, and_imply_and,
    imply_and, or_imply_and, imply, bi_impl, def_conj, def_disj, def_iff
)
from Cnfbuilder.encode.cardinality import (
    at_least_one, at_most_one, exactly_one, at_most_k, at_least_k, exactly_k
)

__all__ = [
    "EncodingState", "StateSnapshot", "VarMap", "ExtendedVarMap",
    "Encoder", "EncodingResult", "pure", "bind", "run", "for_all", "seq", "guard", "ite",
    "add_clause", "add_clauses", "get_snapshot", "new_context", "unless_one_of", "assuming",
    "with_temps", "TempScope", "block_assignment", "add_assignment",
    "and_imply_or", "and_imply", "imply_or", "or_imply_or", "or_imply", "and_imply_and",
    "imply_and", "or_imply_and", "imply", "bi_impl", "def_conj", "def_disj", "def_iff",
    "at_least_one", "at_most_one", "exactly_one", "at_most_k", "at_least_k", "exactly_k"
]
