from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone

class TraceEvent(BaseModel):
    """
    A single step in building an encoding.
    """
    kind: str  # e.g., "CONTEXT_ENTER", "TEMPS_ALLOC", "CNF_EMIT"
    payload: Dict[str, Any]
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

class EncodingTrace(BaseModel):
    """
    Record of how an encoding was built, in execution order.
    """
    trace_version: str = "1.0"
    run_id: Optional[str] = None
    events: List[TraceEvent] = Field(default_factory=list)
    summary: Dict[str, Any] = Field(default_factory=dict)

    def record(self, kind: str, **payload: Any) -> TraceEvent:
        event = TraceEvent(kind=kind, payload=payload)
        self.events.append(event)
        return event

    def of_kind(self, kind: str) -> List[TraceEvent]:
        return [e for e in self.events if e.kind == kind]
