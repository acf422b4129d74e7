"""Unit tests for the heuristic code quality analyzer."""
from __future__ import annotations

import math
import os
import random

import pytest

from backend.src.core.services.code_quality import (
    CodeQualityAnalyzer,
    analyze_accessibility,
    analyze_best_practices,
    analyze_code_quality,
    analyze_responsiveness,
    analyze_semantics,
    analyze_structure,
    analyze_styling,
    max_div_depth,
)
from backend.src.core.value_objects.quality_score import (
    QUALITY_WEIGHTS,
    Grade,
    QualityBreakdown,
    QualityScore,
)

DOCUMENT = (
    '<!DOCTYPE html><html><head><meta charset="UTF-8">'
    '<meta name="viewport" content="width=device-width"></head><body>'
    "<header>...</header><nav>...</nav><main><h1>Title</h1></main>"
    "<footer>...</footer></body></html>"
)


class TestEmptyInput:
    """All three inputs empty."""

    @pytest.fixture
    def score(self):
        return analyze_code_quality("", "", "")

    def test_sub_scores(self, score):
        assert score.breakdown.to_dict() == {
            "semantics": 55,
            "structure": 50,
            "styling": 50,
            "responsiveness": 50,
            "accessibility": 90,
            "bestPractices": 100,
        }

    def test_overall_and_grade(self, score):
        assert score.overall == 60
        assert score.grade == Grade.D

    def test_issue_order_follows_analyzer_order(self, score):
        assert list(score.issues) == [
            "Limited use of semantic HTML5 elements",
            "Missing H1 heading",
            "No heading structure found",
            "Missing DOCTYPE declaration",
            "Incomplete HTML document structure",
            "Missing viewport meta tag",
            "Missing charset meta tag",
            "No CSS provided",
            "No interactive elements found",
        ]
        assert len(score.suggestions) == 9

    def test_none_treated_as_empty(self, score):
        assert analyze_code_quality(None, None, None) == score


class TestWellFormedDocument:
    def test_spec_document_grades_a(self, responsive_css):
        score = analyze_code_quality(DOCUMENT, responsive_css, "")

        # "width=device-width" reads as a plain-text bullet without a list element
        assert score.breakdown.semantics == 90
        assert score.breakdown.structure == 100
        assert score.breakdown.styling == 100
        assert score.breakdown.responsiveness == 100
        assert score.breakdown.accessibility == 90
        assert score.breakdown.best_practices == 100
        assert score.overall == 97
        assert score.grade == Grade.A

    def test_document_with_list(self, well_formed_html, responsive_css):
        score = analyze_code_quality(well_formed_html, responsive_css, "const x = 1;")
        assert score.overall == 99
        assert score.issues == ("No interactive elements found",)


class TestEmptyStylesheet:
    @pytest.mark.parametrize("css", ["", "   ", "\n\t  \n"])
    def test_whitespace_stylesheet_scores_fifty(self, css):
        score = analyze_code_quality(DOCUMENT, css, "var x;")
        assert score.breakdown.styling == 50
        assert score.breakdown.responsiveness == 50

    def test_empty_responsiveness_adds_no_feedback(self):
        result = analyze_responsiveness("  ")
        assert result.score == 50
        assert result.issues == []
        assert result.suggestions == []


class TestAccessibility:
    def test_missing_alt_is_flat_penalty(self):
        base = "<button>Go</button>"
        one = base + '<img src="a.jpg">'
        four = base + '<img src="a.jpg">' * 4

        assert analyze_accessibility(base).score == 100
        assert analyze_accessibility(one).score == 80
        result = analyze_accessibility(four)
        assert result.score == 80
        assert result.issues == ["4 image(s) missing alt text"]

    def test_images_with_alt_pass(self):
        html = '<a href="/">home</a><img src="a.jpg" alt="logo">'
        assert analyze_accessibility(html).score == 100

    def test_input_without_label(self):
        assert analyze_accessibility('<input type="text"><button>Send</button>').score == 75
        assert analyze_accessibility('<label>Name</label><input type="text"><button>Send</button>').score == 100

    def test_skip_link_suggestion_only(self):
        html = "<button>b</button>" + "x" * 2000
        result = analyze_accessibility(html)
        assert result.score == 95
        assert result.issues == []
        assert result.suggestions == ["Consider adding skip navigation link for keyboard users"]

    def test_skip_link_present(self):
        html = '<a href="#main">Skip to content</a>' + "x" * 2000
        assert analyze_accessibility(html).score == 100


class TestBestPractices:
    def test_var_and_console_log(self):
        js = "var x = 1; var y = 2; console.log(x); console.log(x); console.log(x);"
        assert analyze_code_quality("", "", js).breakdown.best_practices == 85
        assert analyze_code_quality(DOCUMENT, "a{}", js).breakdown.best_practices == 85

    def test_two_console_logs_allowed(self):
        assert analyze_best_practices("", "", "console.log(1); console.log(2);").score == 100

    def test_var_inside_identifier_not_flagged(self):
        assert analyze_best_practices("", "", "const variable = 1; let avar = 2;").score == 100

    def test_inline_styles(self):
        html = '<p style="a"></p>' * 4
        assert analyze_best_practices(html, "", "").score == 85
        assert analyze_best_practices('<p style="a"></p>' * 3, "", "").score == 100

    def test_inline_script(self):
        assert analyze_best_practices("<script>alert(1)</script>", "", "").score == 90

    def test_layout_table(self):
        assert analyze_best_practices("<table><tr><td>x</td></tr></table>", "", "").score == 80
        assert analyze_best_practices("<table><tr><th>x</th></tr></table>", "", "").score == 100

    def test_deep_div_nesting(self):
        nested_nine = "<div>" * 9 + "</div>" * 9
        nested_eight = "<div>" * 8 + "</div>" * 8
        assert analyze_best_practices(nested_nine, "", "").score == 90
        assert analyze_best_practices(nested_eight, "", "").score == 100

    def test_penalties_accumulate(self):
        html = (
            '<p style="a"></p>' * 4 + "<script></script><table></table>"
            + "<div>" * 9 + "</div>" * 9
        )
        js = "var a; console.log(1); console.log(2); console.log(3);"
        # 15 + 10 + 20 + 10 + 5 + 10 = 70
        assert analyze_best_practices(html, "", js).score == 30


class TestDivDepth:
    def test_sequential_divs(self):
        assert max_div_depth("<div></div><div></div>") == 1

    def test_nested_divs(self):
        assert max_div_depth("<div><div><div></div></div></div>") == 3

    def test_prefix_match_counts_divider(self):
        assert max_div_depth("<divider><div></div>") == 2

    def test_no_tags(self):
        assert max_div_depth("") == 0
        assert max_div_depth("plain text") == 0

    def test_stray_close_goes_negative(self):
        assert max_div_depth("</div></div><div>") == 0


class TestSemantics:
    def test_plain_text_bullets_without_list(self):
        html = "<header></header><nav></nav><main><h1>T</h1><p>a * b</p></main>"
        result = analyze_semantics(html)
        assert result.score == 90
        assert result.issues == ["Bullet points not using proper list elements"]

    def test_list_elements_suppress_bullet_penalty(self):
        html = "<header></header><nav></nav><main><h1>T</h1><ol><li>• a</li></ol></main>"
        assert analyze_semantics(html).score == 100

    def test_h2_counts_as_heading_but_not_h1(self):
        html = "<section></section><article></article><aside></aside><h2>x</h2>"
        result = analyze_semantics(html)
        assert result.score == 85
        assert result.issues == ["Missing H1 heading"]


class TestStructure:
    def test_complete_document(self):
        assert analyze_structure(DOCUMENT).score == 100

    def test_mismatched_divs(self):
        result = analyze_structure(DOCUMENT + "<div><div></div>")
        assert result.score == 75
        assert result.issues == ["Mismatched div tags"]

    def test_every_check_fails(self):
        assert analyze_structure("<div>").score == 25


class TestStyling:
    def test_bare_stylesheet(self):
        result = analyze_styling("p { color: red; }")
        assert result.score == 65
        assert "No relative CSS units found" in result.issues
        assert "No modern layout systems (Flexbox/Grid) found" in result.issues

    def test_grid_counts_as_modern_layout(self):
        assert analyze_styling(".g { display: grid; gap: 1rem; }").score == 100

    def test_long_stylesheet_without_comments(self):
        css = ".a { display:flex; margin: 1rem; }\n" * 20
        assert len(css) > 500
        assert analyze_styling(css).score == 90
        assert analyze_styling("/* base */\n" + css).score == 100

    def test_hex_colours_counted_only_with_colour_declaration(self):
        hexes = " ".join(f"--c{i}: #{i}{i}{i}{i}{i}{i};" for i in range(1, 7))
        gated = f".a {{ display:flex; margin: 1rem; {hexes} }}"
        assert analyze_styling(gated).score == 100
        assert analyze_styling(gated + " .b { color: #000000; }").score == 90

    def test_five_hex_colours_allowed(self):
        hexes = " ".join(f"--c{i}: #{i}{i}{i}{i}{i}{i};" for i in range(1, 6))
        assert analyze_styling(f".a {{ display:flex; margin: 1rem; color: red; {hexes} }}").score == 100


class TestResponsiveness:
    def test_desktop_first_media_query(self):
        result = analyze_responsiveness("@media (max-width: 600px) { .a { display:flex } }")
        assert result.score == 85
        assert result.issues == ["Not using mobile-first approach"]

    def test_fixed_layout_with_images(self):
        assert analyze_responsiveness("img { width: 50px }").score == 25

    def test_images_with_max_width(self):
        css = "@media (min-width: 1px) { img { max-width: 100%; } }"
        assert analyze_responsiveness(css).score == 100


class TestAggregate:
    def test_deterministic(self, well_formed_html, responsive_css):
        first = analyze_code_quality(well_formed_html, responsive_css, "var a;")
        second = analyze_code_quality(well_formed_html, responsive_css, "var a;")
        assert first == second

    def test_weights_sum_to_one(self):
        assert sum(QUALITY_WEIGHTS.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "breakdown",
        [
            QualityBreakdown(94, 100, 100, 100, 100, 100),
            QualityBreakdown(90, 100, 100, 100, 100, 100),
            QualityBreakdown(100, 80, 50, 60, 90, 85),
            QualityBreakdown(33, 47, 71, 13, 59, 97),
            QualityBreakdown(0, 0, 0, 0, 0, 0),
        ],
    )
    def test_overall_is_half_up_weighted_sum(self, breakdown):
        expected = sum(getattr(breakdown, name) * weight for name, weight in QUALITY_WEIGHTS.items())
        score = QualityScore.from_breakdown(breakdown)
        assert score.overall == math.floor(expected + 0.5)

    def test_half_point_rounds_up(self):
        assert QualityScore.from_breakdown(QualityBreakdown(94, 100, 100, 100, 100, 100)).overall == 99

    def test_analyzed_half_point_rounds_up(self, well_formed_html, responsive_css):
        html = well_formed_html.replace("<ul><li>x</li></ul>", '<a href="#">x</a>')

        score = analyze_code_quality(html, responsive_css, "const x = 1;")

        assert score.breakdown.to_dict() == {
            "semantics": 90, "structure": 100, "styling": 100,
            "responsiveness": 100, "accessibility": 100, "bestPractices": 100,
        }
        assert score.overall == 98

    def test_overall_matches_breakdown_for_analyzed_input(self, responsive_css):
        score = analyze_code_quality(DOCUMENT, responsive_css, "var x;")
        b = score.breakdown
        expected = sum(getattr(b, name) * weight for name, weight in QUALITY_WEIGHTS.items())
        assert score.overall == math.floor(expected + 0.5)

    def test_one_megabyte_of_random_bytes(self):
        noise = os.urandom(1_000_000).decode("latin-1")

        score = analyze_code_quality(noise, noise, noise)

        assert 0 <= score.overall <= 100
        assert score.grade in set(Grade)

    def test_random_input_stays_in_range(self):
        rng = random.Random(1234)
        alphabet = ["<div>", "</div>", "<img>", "<h1", "style=", "var ", "#abcdef", "@media", "-", " ", "x"]
        html = "".join(rng.choice(alphabet) for _ in range(200_000))
        css = "".join(rng.choice(alphabet) for _ in range(50_000))
        js = "".join(rng.choice(alphabet) for _ in range(50_000))

        score = analyze_code_quality(html, css, js)

        assert 0 <= score.overall <= 100
        for value in score.breakdown.to_dict().values():
            assert 0 <= value <= 100
        assert score.grade in set(Grade)

    def test_analyzer_object_delegates(self):
        assert CodeQualityAnalyzer().analyze("", "", "") == analyze_code_quality("", "", "")


@pytest.mark.parametrize(
    "analyzer",
    [
        analyze_semantics,
        analyze_structure,
        analyze_styling,
        analyze_responsiveness,
        analyze_accessibility,
        analyze_best_practices,
    ],
)
def test_sub_analyzers_documented(analyzer):
    assert analyzer.__doc__ and analyzer.__doc__.strip()
