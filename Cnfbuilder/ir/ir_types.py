import re
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field, field_validator, model_validator

# --- VarRef ---

class VarRef(BaseModel, frozen=True):
    """Reference to a named variable."""
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Variable name cannot be empty")
        if len(v) > 64:
            raise ValueError("Variable name too long (max 64)")
        if not re.match(r"^[a-zA-Z0-9_]+$", v):
            raise ValueError("Variable name must be alphanumeric/underscore")
        return v

# --- BoolExpr ---

class Lit(BaseModel):
    kind: Literal["lit"] = "lit"
    var: VarRef
    neg: bool = False

class Not(BaseModel):
    kind: Literal["not"] = "not"
    term: "BoolExpr"

class And(BaseModel):
    kind: Literal["and"] = "and"
    terms: List["BoolExpr"]

class Or(BaseModel):
    kind: Literal["or"] = "or"
    terms: List["BoolExpr"]

class Imp(BaseModel):
    kind: Literal["imp"] = "imp"
    a: "BoolExpr"
    b: "BoolExpr"

class Iff(BaseModel):
    kind: Literal["iff"] = "iff"
    a: "BoolExpr"
    b: "BoolExpr"

class Xor(BaseModel):
    kind: Literal["xor"] = "xor"
    a: "BoolExpr"
    b: "BoolExpr"

BoolExpr = Annotated[
    Union[Lit, Not, And, Or, Imp, Iff, Xor],
    Field(discriminator="kind")
]

Not.model_rebuild()
And.model_rebuild()
Or.model_rebuild()
Imp.model_rebuild()
Iff.model_rebuild()
Xor.model_rebuild()

# --- Cardinality ---

class CardinalityBase(BaseModel):
    k: int
    vars: List[VarRef]

    @field_validator('vars')
    @classmethod
    def validate_unique(cls, v: List[VarRef]) -> List[VarRef]:
        names = [vr.name for vr in v]
        if len(names) != len(set(names)):
            raise ValueError("Variable names must be unique in cardinality constraint")
        return v

    @model_validator(mode='after')
    def validate_k_range(self) -> 'CardinalityBase':
        if not (0 <= self.k <= len(self.vars)):
            raise ValueError(f"k must be in range [0, {len(self.vars)}]")
        return self

class AtLeast(CardinalityBase):
    kind: Literal["at_least"] = "at_least"

class AtMost(CardinalityBase):
    kind: Literal["at_most"] = "at_most"

class Exactly(CardinalityBase):
    kind: Literal["exactly"] = "exactly"

Cardinality = Annotated[
    Union[AtLeast, AtMost, Exactly],
    Field(discriminator="kind")
]

Constraint = Union[Lit, Not, And, Or, Imp, Iff, Xor, AtLeast, AtMost, Exactly]

def var(name: str, neg: bool = False) -> Lit:
    return Lit(var=VarRef(name=name), neg=neg)
