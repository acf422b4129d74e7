"""
Standalone code quality scoring route.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from backend.src.adapters.inbound.api.dependencies import get_current_user
from backend.src.core.entities.user import User
from backend.src.core.value_objects.quality_score import grade_color, grade_description

router = APIRouter()


class AnalyzeBody(BaseModel):
    html: Optional[str] = ""
    css: Optional[str] = ""
    js: Optional[str] = ""


@router.post("/analyze")
async def analyze(
    body: AnalyzeBody,
    request: Request,
    user: User = Depends(get_current_user),
):
    """Score arbitrary HTML/CSS/JS without spending a credit."""
    analyzer = request.app.state.container.quality_analyzer()
    score = analyzer.analyze(body.html or "", body.css or "", body.js or "")
    payload = score.to_dict()
    payload["gradeColor"] = grade_color(score.grade)
    payload["gradeDescription"] = grade_description(score.grade)
    return payload
