"""
Heuristic code quality analysis for generated HTML/CSS/JS.

Every check is a shallow substring or regex scan, not a parser. Scores
for a given input must stay stable across releases.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from backend.src.core.value_objects.quality_score import QualityBreakdown, QualityScore

SEMANTIC_ELEMENTS = (
    "header", "nav", "main", "section", "article",
    "aside", "footer", "figure", "figcaption",
)
MAX_DIV_DEPTH = 8
EMPTY_STYLESHEET_SCORE = 50

_HEADING_RE = re.compile(r"<h[1-6]")
_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")
_IMG_RE = re.compile(r"<img[^>]*>")
_INPUT_RE = re.compile(r"<input[^>]*>")
_BUTTON_RE = re.compile(r"<button[^>]*>")
_LINK_RE = re.compile(r"<a[^>]*>")
_VAR_RE = re.compile(r"\bvar\b")


@dataclass
class AnalyzerResult:
    """Score and feedback produced by a single sub-analyzer."""

    score: int = 100
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def penalize(self, points: int, issue: Optional[str], suggestion: Optional[str]) -> None:
        self.score -= points
        if issue:
            self.issues.append(issue)
        if suggestion:
            self.suggestions.append(suggestion)

    def clamped(self) -> AnalyzerResult:
        self.score = max(0, self.score)
        return self


def _is_blank(text: str) -> bool:
    return not text or not text.strip()


def _has_flex(css: str) -> bool:
    return "display: flex" in css or "display:flex" in css


def _has_grid(css: str) -> bool:
    return "display: grid" in css or "display:grid" in css


# ── Sub-analyzers ─────────────────────────────────────────────────────


def analyze_semantics(html: str) -> AnalyzerResult:
    """Reward HTML5 landmark elements, headings and real list markup."""
    result = AnalyzerResult()

    found = [el for el in SEMANTIC_ELEMENTS if f"<{el}" in html]
    if len(found) < 3:
        result.penalize(
            20,
            "Limited use of semantic HTML5 elements",
            "Use semantic elements like header, nav, main, section for better structure",
        )

    if "<h1" not in html:
        result.penalize(15, "Missing H1 heading", "Add a single H1 heading for page title")

    if not _HEADING_RE.search(html):
        result.penalize(
            10,
            "No heading structure found",
            "Use headings (h1-h6) to create content hierarchy",
        )

    has_lists = "<ul" in html or "<ol" in html or "<dl" in html
    if not has_lists and ("•" in html or "-" in html or "*" in html):
        result.penalize(
            10,
            "Bullet points not using proper list elements",
            "Use <ul> or <ol> for lists instead of plain text bullets",
        )

    return result.clamped()


def analyze_structure(html: str) -> AnalyzerResult:
    """Check document scaffolding: doctype, html/head/body, meta tags, balanced divs."""
    result = AnalyzerResult()

    if "<!DOCTYPE" not in html:
        result.penalize(20, "Missing DOCTYPE declaration", "Add <!DOCTYPE html> at the beginning")

    if "<html" not in html or "<head" not in html or "<body" not in html:
        result.penalize(
            15,
            "Incomplete HTML document structure",
            "Ensure proper HTML structure with html, head, and body tags",
        )

    if "viewport" not in html:
        result.penalize(
            10,
            "Missing viewport meta tag",
            'Add <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        )

    if "charset" not in html:
        result.penalize(5, "Missing charset meta tag", 'Add <meta charset="UTF-8">')

    if html.count("<div") != html.count("</div>"):
        result.penalize(
            25,
            "Mismatched div tags",
            "Check that all opening div tags have corresponding closing tags",
        )

    return result.clamped()


def analyze_styling(css: str) -> AnalyzerResult:
    """Score stylesheet units, organisation, layout system and colour reuse."""
    result = AnalyzerResult()

    if _is_blank(css):
        result.penalize(
            100 - EMPTY_STYLESHEET_SCORE,
            "No CSS provided",
            "Add CSS styling for visual presentation",
        )
        return result.clamped()

    if not any(unit in css for unit in ("rem", "em", "%", "vw", "vh")):
        result.penalize(
            15,
            "No relative CSS units found",
            "Use relative units (rem, em, %) for better scalability",
        )

    if "/*" not in css and len(css) > 500:
        result.penalize(10, "CSS lacks organization comments", "Add comments to organize CSS sections")

    if not _has_flex(css) and not _has_grid(css):
        result.penalize(
            20,
            "No modern layout systems (Flexbox/Grid) found",
            "Use Flexbox or Grid for modern layouts",
        )

    # Hardcoded colours only count once a colour declaration exists at all.
    if "color:" in css or "background:" in css:
        if len(_HEX_COLOR_RE.findall(css)) > 5:
            result.penalize(
                10,
                "Many hardcoded colors detected",
                "Consider using CSS variables for consistent color scheme",
            )

    return result.clamped()


def analyze_responsiveness(css: str) -> AnalyzerResult:
    """Look for media queries, flexible sizing and responsive images."""
    if _is_blank(css):
        return AnalyzerResult(score=EMPTY_STYLESHEET_SCORE)

    result = AnalyzerResult()

    has_media_queries = "@media" in css
    if not has_media_queries:
        result.penalize(
            40,
            "No media queries for responsive design",
            "Add @media queries for different screen sizes",
        )
    elif "min-width" not in css:
        result.penalize(
            15,
            "Not using mobile-first approach",
            "Use min-width media queries for mobile-first design",
        )

    has_flexible_units = "%" in css or "vw" in css or "vh" in css
    if not has_flexible_units and not _has_flex(css):
        result.penalize(
            20,
            "Layout may not be responsive",
            "Use flexible units or Flexbox for responsive layouts",
        )

    if ("img" in css or "image" in css) and "max-width" not in css:
        result.penalize(
            15,
            "Images may not be responsive",
            "Add max-width: 100% to images for responsiveness",
        )

    return result.clamped()


def analyze_accessibility(html: str) -> AnalyzerResult:
    """Flag images without alt text, unlabeled inputs and missing interactive elements."""
    result = AnalyzerResult()

    missing_alt = [img for img in _IMG_RE.findall(html) if "alt=" not in img]
    if missing_alt:
        result.penalize(
            20,
            f"{len(missing_alt)} image(s) missing alt text",
            "Add descriptive alt text to all images",
        )

    if _INPUT_RE.search(html) and "<label" not in html:
        result.penalize(
            25,
            "Form inputs without labels",
            "Add labels to all form inputs for accessibility",
        )

    if not _BUTTON_RE.search(html) and not _LINK_RE.search(html):
        result.penalize(10, "No interactive elements found", "Add buttons or links for user interaction")

    if len(html) > 2000 and "skip" not in html and "Skip" not in html:
        result.penalize(5, None, "Consider adding skip navigation link for keyboard users")

    return result.clamped()


def analyze_best_practices(html: str, css: str, js: str) -> AnalyzerResult:
    """Penalise inline styles and scripts, layout tables, deep div nesting and sloppy JS."""
    result = AnalyzerResult()

    if html.count("style=") > 3:
        result.penalize(
            15,
            "Excessive inline CSS styles",
            "Move styles to external CSS for better maintainability",
        )

    if "<script>" in html:
        result.penalize(10, "Inline JavaScript detected", "Move JavaScript to external files")

    if "<table" in html and "<th" not in html and "<thead" not in html:
        result.penalize(
            20,
            "Tables possibly used for layout",
            "Use CSS for layout, reserve tables for data",
        )

    if max_div_depth(html) > MAX_DIV_DEPTH:
        result.penalize(
            10,
            "Excessively nested divs",
            "Simplify HTML structure, use semantic elements",
        )

    if js:
        if js.count("console.log") > 2:
            result.penalize(5, "Console.log statements in production code", "Remove console.log statements")
        if _VAR_RE.search(js):
            result.penalize(10, "Using var instead of const/let", "Use const and let instead of var")

    return result.clamped()


def max_div_depth(html: str) -> int:
    """Deepest running count of ``<div`` opens minus ``</div>`` closes.

    Matching is by prefix at each ``<``, so a tag such as ``<divider>``
    also counts as an open. Stray closes can drive the counter negative.
    """
    depth = 0
    deepest = 0
    pos = html.find("<")
    while pos != -1:
        if html.startswith("<div", pos):
            depth += 1
            deepest = max(deepest, depth)
        elif html.startswith("</div>", pos):
            depth -= 1
        pos = html.find("<", pos + 1)
    return deepest


# ── Aggregator ────────────────────────────────────────────────────────

_Analyzer = Callable[[str, str, str], AnalyzerResult]

# (breakdown field, analyzer) in run order; the order fixes issue ordering.
ANALYZERS: tuple[tuple[str, _Analyzer], ...] = (
    ("semantics", lambda html, css, js: analyze_semantics(html)),
    ("structure", lambda html, css, js: analyze_structure(html)),
    ("styling", lambda html, css, js: analyze_styling(css)),
    ("responsiveness", lambda html, css, js: analyze_responsiveness(css)),
    ("accessibility", lambda html, css, js: analyze_accessibility(html)),
    ("best_practices", analyze_best_practices),
)


def analyze_code_quality(html: Optional[str], css: Optional[str], js: Optional[str]) -> QualityScore:
    """Score generated markup, stylesheet and script text.

    Pure and total: any strings (including empty ones) produce a score,
    malformed input only lowers it.
    """
    html = html or ""
    css = css or ""
    js = js or ""

    scores: dict[str, int] = {}
    issues: list[str] = []
    suggestions: list[str] = []

    for name, analyzer in ANALYZERS:
        result = analyzer(html, css, js)
        scores[name] = result.score
        issues.extend(result.issues)
        suggestions.extend(result.suggestions)

    return QualityScore.from_breakdown(
        QualityBreakdown(**scores),
        issues=issues,
        suggestions=suggestions,
    )


class CodeQualityAnalyzer:
    """Thin object wrapper so the analyzer can be injected like other services."""

    def analyze(self, html: str, css: str, js: str) -> QualityScore:
        return analyze_code_quality(html, css, js)
