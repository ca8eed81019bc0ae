from Cnfbuilder.cnf.cnf_types import CnfDocument, CNFEncoding, canonicalize_clause, canonicalize_cnf
from Cnfbuilder.cnf.cnf_io import read_dimacs, write_dimacs, read_dimacs_from_string, to_dimacs_string
from Cnfbuilder.cnf.cnf_stats import compute_cnf_stats

__all__ = [
    "CnfDocument", "CNFEncoding", "canonicalize_clause", "canonicalize_cnf",
    "read_dimacs", "write_dimacs", "read_dimacs_from_string", "to_dimacs_string",
    "compute_cnf_stats"
]
