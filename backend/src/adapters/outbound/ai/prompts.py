"""Prompts and reply parsing shared by every code generation adapter."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from backend.src.core.value_objects.generated_code import GeneratedCode

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert web developer who converts hand-drawn wireframes into production-ready code.

When analyzing a wireframe image:
1. Identify all UI components (headers, navigation, buttons, forms, cards, images, text blocks)
2. Understand the layout structure (grid, flexbox patterns)
3. **IMPORTANT: Pay special attention to handwritten labels and text annotations**
4. If you see text labels like "Header", "Navigation", "Sidebar", "Main Content", "Footer", "Button", "Card", etc., use these as semantic HTML elements
5. Use labels to determine element hierarchy and structure
6. Infer reasonable styling based on the sketch

Generate clean, semantic, responsive code that:
- Uses modern HTML5 elements
- Includes comprehensive CSS with flexbox/grid layouts
- Is mobile-responsive with media queries
- Uses a modern color palette (indigo/purple primary, gray neutrals)
- Includes hover states and transitions
- Has placeholder content that matches the wireframe intent

Always respond with a valid JSON object containing:
{
  "html": "<!-- The body content HTML -->",
  "css": "/* Complete CSS styles */",
  "js": "// Optional JavaScript for interactivity",
  "react": "// Complete React functional component with inline styles or Tailwind classes",
  "structure": { /* JSON representation of the page structure */ }
}

Make the generated website look professional and polished, not like a wireframe."""

USER_PROMPT = """Convert this wireframe to production-ready code.

**IMPORTANT INSTRUCTIONS:**
- Look for handwritten labels and create appropriate HTML elements (all work in static sites):
- **Layout:** "Header" -> <header>, "Navigation"/"Nav" -> <nav>, "Sidebar" -> <aside>, "Main Content" -> <main>, "Footer" -> <footer>, "Section" -> <section>
- **Marketing:** "Hero" -> hero section, "CTA" -> call-to-action section, "Testimonial" -> testimonial cards, "Pricing" -> pricing table, "Features" -> feature grid
- **Content:** "Article" -> <article>, "Form" -> contact form (works with email services), "Grid" -> grid container, "Card" -> card components
- **UI:** "Button" -> <button>, "Modal" -> modal dialog, "Accordion" -> collapsible content, "Tabs" -> tab navigation, "Carousel" -> image slider, "Dropdown" -> dropdown menu
- **Navigation:** "Breadcrumb" -> breadcrumb navigation
- **Important:** All generated code must work as standalone HTML/CSS/JS files without backend dependencies
- Use the labels to understand the layout structure and create semantic, accessible HTML

Focus on creating a beautiful, modern, responsive website. Return ONLY a valid JSON object with html, css, js, react, and structure fields."""

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: Optional[str]) -> Optional[dict[str, Any]]:
    """Return the JSON object in a model reply, or None.

    Tries the whole text first, then the widest ``{...}`` span so that
    Prose or code fences around the object are tolerated.
    """
    if not text:
        return None
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_OBJECT_RE.search(text)
        if not match:
            return None
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            return None
    return parsed if isinstance(parsed, dict) else None


def parse_generated_code(text: Optional[str]) -> GeneratedCode:
    """Turn a model reply into code, falling back to the placeholder artifact."""
    payload = extract_json_object(text)
    if payload is None:
        logger.warning("No JSON object found in model reply (%d chars)", len(text or ""))
        return GeneratedCode.placeholder()
    return GeneratedCode.from_payload(payload)
