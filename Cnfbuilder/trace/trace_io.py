from pathlib import Path
from typing import Union
from Cnfbuilder.trace.trace_types import EncodingTrace

def save_trace_json(trace: EncodingTrace, path: Union[str, Path]) -> None:
    """Writes a trace as indented JSON, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(trace.model_dump_json(indent=2), encoding="utf-8")

def load_trace_json(path: Union[str, Path]) -> EncodingTrace:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Trace file not found: {p}")
    return EncodingTrace.model_validate_json(p.read_text(encoding="utf-8"))
