"""
Service layer modules coordinating project compliance checks.

This package exposes the primary classes via lazy imports to avoid circular
dependencies (the rule engine imports `promopack.services.types`).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict

__all__ = [
    "ComplianceChecker",
    "NoClaimsError",
    "ClaimInput",
    "ComplianceIssue",
    "ComplianceResult",
    "ComplianceSummary",
    "ProjectComplianceReport",
]

_MODULE_ATTRS: Dict[str, str] = {
    "ComplianceChecker": "promopack.services.checker",
    "NoClaimsError": "promopack.services.checker",
    "ClaimInput": "promopack.services.types",
    "ComplianceIssue": "promopack.services.types",
    "ComplianceResult": "promopack.services.types",
    "ComplianceSummary": "promopack.services.types",
    "ProjectComplianceReport": "promopack.services.types",
}


def __getattr__(name: str) -> Any:
    module_path = _MODULE_ATTRS.get(name)
    if not module_path:
        raise AttributeError(f"module 'promopack.services' has no attribute '{name}'")  # pragma: no cover
    module = import_module(module_path)
    return getattr(module, name)


def __dir__() -> list[str]:  # pragma: no cover - convenience helper
    return sorted(__all__)
