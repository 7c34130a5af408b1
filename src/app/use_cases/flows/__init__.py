"""Use cases do endpoint de WhatsApp Flows."""

from .dispatcher import STATUS_BY_KIND, FlowDispatcher, FlowHttpResult, status_for

__all__ = [
    "STATUS_BY_KIND",
    "FlowDispatcher",
    "FlowHttpResult",
    "status_for",
]
