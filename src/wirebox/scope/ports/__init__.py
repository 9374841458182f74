"""Scope ports."""

from wirebox.scope.ports.outbound import Scope

__all__ = ["Scope"]
