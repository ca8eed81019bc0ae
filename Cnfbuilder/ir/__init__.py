from Cnfbuilder.ir.ir_types import (
    VarRef, Lit, Not, And, Or, Imp, Iff, Xor, AtLeast, AtMost, Exactly, BoolExpr, Constraint, var
)
from Cnfbuilder.ir.ir_normalize import normalize_ir, count_gates
from Cnfbuilder.ir.ir_compile import compile_ir, encode_expr, encode_constraint

__all__ = [
    "VarRef", "Lit", "Not", "And", "Or", "Imp", "Iff", "Xor",
    "AtLeast", "AtMost", "Exactly", "BoolExpr", "Constraint", "var",
    "normalize_ir", "count_gates", "compile_ir", "encode_expr", "encode_constraint"
]
