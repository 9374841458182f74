"""Wirebox Kernel: shared exception hierarchy."""

from wirebox.kernel.exceptions import InfrastructureException, WireboxException

__all__ = ["InfrastructureException", "WireboxException"]
