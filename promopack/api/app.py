"""
FastAPI application exposing the compliance engine.

The service is stateless apart from the optional audit log: claims arrive in
the request body (as persisted by extraction or manual entry) and results are
returned for the caller to store or display.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from promopack import get_version
from promopack.compliance.rules import RULES, evaluate_claim
from promopack.config.settings import Settings, load_settings
from promopack.services.checker import ComplianceChecker, NoClaimsError
from promopack.services.types import ClaimInput
from promopack.storage.audit import JsonlAuditLogger

from .schema import serialize_report, serialize_result, serialize_rule

logger = logging.getLogger("promopack.api")


class ClaimPayload(BaseModel):
    id: str
    text: str


class ProjectCheckRequest(BaseModel):
    claims: List[ClaimPayload]
    requested_by: Optional[str] = None


def _build_checker(settings: Settings) -> ComplianceChecker:
    audit_logger = JsonlAuditLogger(settings.audit_log_path) if settings.audit_enabled else None
    return ComplianceChecker(audit_logger=audit_logger)


def create_app(checker: ComplianceChecker | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        checker: Optional pre-configured checker (tests inject one with a
            temporary audit log). Built from settings when omitted.
        settings: Optional settings; read from the environment when omitted.
    """

    settings = settings or load_settings()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level)

    project_checker = checker or _build_checker(settings)
    app = FastAPI(title="PromoPack Compliance API", version=get_version())

    def get_checker() -> ComplianceChecker:
        return project_checker

    @app.get("/")
    def root() -> dict:
        return {"status": "ok", "service": "promopack-compliance", "version": get_version()}

    @app.get("/rules")
    def list_rules() -> List[Dict[str, Any]]:
        return [serialize_rule(rule) for rule in RULES]

    @app.post("/claims/check")
    def check_claim(payload: ClaimPayload) -> Dict[str, Any]:
        return serialize_result(evaluate_claim(payload.text, payload.id))

    @app.post("/projects/{project_id}/compliance")
    def check_project(
        project_id: str,
        payload: ProjectCheckRequest,
        checker_dep: ComplianceChecker = Depends(get_checker),
    ) -> Dict[str, Any]:
        """
        Run the compliance check over every claim of a project.
        """

        claims = [ClaimInput(id=claim.id, text=claim.text) for claim in payload.claims]
        metadata = {"requested_by": payload.requested_by} if payload.requested_by else None
        try:
            report = checker_dep.check_project(project_id, claims, metadata=metadata)
        except NoClaimsError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return serialize_report(report)

    @app.get("/projects/{project_id}/compliance/history")
    def compliance_history(
        project_id: str,
        limit: int = Query(20, ge=1, le=500),
        checker_dep: ComplianceChecker = Depends(get_checker),
    ) -> List[Dict[str, Any]]:
        if checker_dep.audit_logger is None:
            return []
        return checker_dep.audit_logger.history(project_id, limit=limit)

    return app


__all__ = ["create_app", "ClaimPayload", "ProjectCheckRequest"]
