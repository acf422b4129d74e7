from backend.src.core.services.code_quality import CodeQualityAnalyzer, analyze_code_quality

__all__ = ["CodeQualityAnalyzer", "analyze_code_quality"]
