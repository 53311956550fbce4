"""Persistence helpers for compliance check history."""

from .audit import JsonlAuditLogger

__all__ = ["JsonlAuditLogger"]
