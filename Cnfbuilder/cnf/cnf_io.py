from pathlib import Path
from typing import Iterable, List, Optional, Union
from Cnfbuilder.cnf.cnf_types import CnfDocument
from Cnfbuilder.core.errors import CNFError

def to_dimacs_string(doc: CnfDocument, comments: Optional[Iterable[str]] = None) -> str:
    """Renders a document in DIMACS CNF, one clause per line terminated by 0."""
    lines = [f"c {c}" for c in (comments or [])]
    lines.append(f"p cnf {doc.num_vars} {len(doc.clauses)}")
    for clause in doc.clauses:
        lines.append(" ".join([str(lit) for lit in clause] + ["0"]))
    return "\n".join(lines) + "\n"

def write_dimacs(doc: CnfDocument, path: Union[str, Path],
                 comments: Optional[Iterable[str]] = None) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        f.write(to_dimacs_string(doc, comments))

def read_dimacs_from_string(text: str) -> CnfDocument:
    """
    Parses DIMACS CNF text.

    Clauses may span lines or share a line. A missing header is tolerated and
    the variable count is then inferred; a header smaller than the largest
    variable seen is widened.
    """
    declared_vars = None
    clauses: List[List[int]] = []
    current: List[int] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("c") or line.startswith("%"):
            continue
        if line.startswith("p"):
            parts = line.split()
            if len(parts) != 4 or parts[1] != "cnf":
                raise CNFError(f"Malformed header on line {line_no}: {line!r}")
            try:
                declared_vars = int(parts[2])
                int(parts[3])
            except ValueError:
                raise CNFError(f"Malformed header on line {line_no}: {line!r}")
            continue
        for token in line.split():
            try:
                lit = int(token)
            except ValueError:
                raise CNFError(f"Invalid literal {token!r} on line {line_no}")
            if lit == 0:
                clauses.append(current)
                current = []
            else:
                current.append(lit)

    if current:
        raise CNFError("Missing terminating 0 after last clause")

    max_var = max((abs(l) for c in clauses for l in c), default=0)
    num_vars = max(declared_vars or 0, max_var)
    return CnfDocument(num_vars=num_vars, clauses=clauses)

def read_dimacs(path: Union[str, Path]) -> CnfDocument:
    p = Path(path)
    if not p.exists():
        raise CNFError(f"DIMACS file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        return read_dimacs_from_string(f.read())
