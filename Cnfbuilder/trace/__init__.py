from Cnfbuilder.trace.trace_types import TraceEvent, EncodingTrace
from Cnfbuilder.trace.trace_io import save_trace_json, load_trace_json

__all__ = ["TraceEvent", "EncodingTrace", "save_trace_json", "load_trace_json"]
