from Cnfbuilder.lits.literal import (
    Literal, LiteralLike, LitT, pos, neg, negate, variable_of, polarity_of, remap, check_literal
)
from Cnfbuilder.lits.extended import Orig, Temp, ExtVar, orig, temp, temps, project

__all__ = [
    "Literal", "LiteralLike", "LitT", "pos", "neg", "negate", "variable_of",
    "polarity_of", "remap", "check_literal",
    "Orig", "Temp", "ExtVar", "orig", "temp", "temps", "project"
]
