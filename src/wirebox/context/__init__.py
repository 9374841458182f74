"""Wirebox Context: per-request state."""

from wirebox.context.request_context import RequestContext

__all__ = ["RequestContext"]
