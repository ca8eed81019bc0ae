"""
Cnfbuilder: compile constraints over abstract variables into CNF.
"""
from Cnfbuilder.lits import Literal, pos, neg, negate, Orig, Temp, orig, temp
from Cnfbuilder.encode import (
    Encoder, EncodingResult, pure, bind, run, for_all, seq, guard, ite,
    add_clause, add_clauses, new_context, unless_one_of, assuming, with_temps,
    block_assignment, add_assignment,
    and_imply_or, and_imply, imply_or, or_imply_or, or_imply, and_imply_and,
    imply_and, or_imply_and, imply, bi_impl, def_conj, def_disj
)
from Cnfbuilder.core.config import EncoderConfig

__all__ = [
    "Literal", "pos", "neg", "negate", "Orig", "Temp", "orig", "temp",
    "Encoder", "EncodingResult", "pure", "bind", "run", "for_all", "seq", "guard", "ite",
    "add_clause", "add_clauses", "new_context", "unless_one_of", "assuming", "with_temps",
    "block_assignment", "add_assignment",
    "and_imply_or", "and_imply", "imply_or", "or_imply_or", "or_imply", "and_imply_and",
    "imply_and", "or_imply_and", "imply", "bi_impl", "def_conj", "def_disj",
    "EncoderConfig"
]
