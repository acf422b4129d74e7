from backend.src.core.value_objects.credit_pack import CREDIT_PACKS, CreditPack, find_credit_pack
from backend.src.core.value_objects.generated_code import GeneratedCode
from backend.src.core.value_objects.quality_score import (
    Grade,
    QualityBreakdown,
    QualityScore,
    grade_color,
    grade_description,
)

__all__ = [
    "CREDIT_PACKS",
    "CreditPack",
    "find_credit_pack",
    "GeneratedCode",
    "Grade",
    "QualityBreakdown",
    "QualityScore",
    "grade_color",
    "grade_description",
]
