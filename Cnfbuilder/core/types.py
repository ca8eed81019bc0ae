import hashlib
from typing import Annotated, List
from pydantic import RootModel, AfterValidator
from Cnfbuilder.core.errors import ValidationError

def check_nonzero(v: int) -> int:
    if v == 0:
        raise ValueError("Literal cannot be zero")
    return v

DimacsLit = Annotated[int, AfterValidator(check_nonzero)]

class Clause(RootModel):
    """A list of DIMACS literals; the empty clause is the false clause."""
    root: List[DimacsLit]

class CNF(RootModel):
    """A list of clauses."""
    root: List[Clause]

def validate_cnf(cnf: List[List[int]]) -> None:
    """
    Validates a raw CNF structure.
    Raises ValidationError if the structure is invalid.
    """
    try:
        CNF.model_validate(cnf)
    except Exception as e:
        raise ValidationError(f"Invalid CNF structure: {e}")

def sha256_bytes(data: bytes) -> str:
    """Returns the SHA256 hash of bytes as a hex string."""
    return hashlib.sha256(data).hexdigest()
