"""Context variables for structured logging."""

from contextvars import ContextVar
from typing import Dict, Optional

_provider: ContextVar[str] = ContextVar("provider", default="")
_region: ContextVar[str] = ContextVar("region", default="")
_trace_id: ContextVar[str] = ContextVar("trace_id", default="")


def set_log_context(
    provider: Optional[str] = None,
    region: Optional[str] = None,
    trace_id: Optional[str] = None,
) -> None:
    if provider is not None:
        _provider.set(provider)
    if region is not None:
        _region.set(str(getattr(region, "value", region)))
    if trace_id is not None:
        _trace_id.set(trace_id)


def get_log_context() -> Dict[str, str]:
    return {
        "provider": _provider.get(),
        "region": _region.get(),
        "trace_id": _trace_id.get(),
    }


def clear_log_context() -> None:
    _provider.set("")
    _region.set("")
    _trace_id.set("")
