from typing import Any, Dict
import numpy as np
from Cnfbuilder.cnf.cnf_types import CnfDocument

def compute_cnf_stats(doc: CnfDocument, num_named_vars: int = 0) -> Dict[str, Any]:
    """
    Size and shape statistics of a compiled formula.

    `num_named_vars` is the size of the universe; every index above it is an
    auxiliary variable introduced by a temporary scope.
    """
    lens = np.fromiter((len(c) for c in doc.clauses), dtype=np.int64, count=len(doc.clauses))
    lits = np.fromiter((l for c in doc.clauses for l in c), dtype=np.int64)

    if lits.size:
        occurrences = np.bincount(np.abs(lits), minlength=doc.num_vars + 1)[1:]
        polarity_ratio = float(np.count_nonzero(lits > 0) / lits.size)
    else:
        occurrences = np.zeros(doc.num_vars, dtype=np.int64)
        polarity_ratio = 0.5

    return {
        "n_vars": doc.num_vars,
        "n_named_vars": num_named_vars,
        "n_aux_vars": max(doc.num_vars - num_named_vars, 0),
        "n_clauses": len(doc.clauses),
        "n_units": int(np.count_nonzero(lens == 1)),
        "n_empty": int(np.count_nonzero(lens == 0)),
        "clause_len": {
            "min": int(lens.min()) if lens.size else 0,
            "mean": float(lens.mean()) if lens.size else 0.0,
            "max": int(lens.max()) if lens.size else 0,
        },
        "polarity_ratio": polarity_ratio,
        "unused_vars": int(np.count_nonzero(occurrences == 0)),
    }
