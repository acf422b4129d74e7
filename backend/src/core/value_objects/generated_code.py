"""GeneratedCode value object - the artifact a vision model returns."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_PLACEHOLDER_HTML = """<div class="container">
  <header class="header">
    <h1>Generated Website</h1>
    <nav><a href="#">Home</a> <a href="#">About</a> <a href="#">Contact</a></nav>
  </header>
  <main class="main">
    <section class="hero">
      <h2>Welcome to Your Website</h2>
      <p>This is a placeholder. The AI couldn't fully parse the wireframe.</p>
      <button class="btn">Get Started</button>
    </section>
  </main>
  <footer class="footer">
    <p>&copy; Your Website</p>
  </footer>
</div>"""

_PLACEHOLDER_CSS = """* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: system-ui, sans-serif; line-height: 1.6; color: #1f2937; }
.container { max-width: 1200px; margin: 0 auto; padding: 0 1rem; }
.header { display: flex; justify-content: space-between; align-items: center; padding: 1rem 0; border-bottom: 1px solid #e5e7eb; }
.header h1 { font-size: 1.5rem; color: #6366f1; }
.header nav a { margin-left: 1.5rem; color: #4b5563; text-decoration: none; }
.header nav a:hover { color: #6366f1; }
.hero { text-align: center; padding: 4rem 0; }
.hero h2 { font-size: 2.5rem; margin-bottom: 1rem; }
.hero p { color: #6b7280; max-width: 600px; margin: 0 auto 2rem; }
.btn { background: linear-gradient(to right, #6366f1, #8b5cf6); color: white; border: none; padding: 0.75rem 2rem; border-radius: 0.5rem; font-size: 1rem; cursor: pointer; }
.btn:hover { opacity: 0.9; }
.footer { text-align: center; padding: 2rem 0; border-top: 1px solid #e5e7eb; color: #6b7280; }
@media (max-width: 768px) { .header { flex-direction: column; gap: 1rem; } .hero h2 { font-size: 1.75rem; } }"""

_PLACEHOLDER_REACT = """export default function GeneratedComponent() {
  return (
    <div className="min-h-screen bg-white">
      <header className="border-b">
        <div className="container mx-auto px-4 py-4 flex justify-between items-center">
          <h1 className="text-xl font-bold text-indigo-600">Generated Website</h1>
          <nav className="space-x-6">
            <a href="#" className="text-gray-600 hover:text-indigo-600">Home</a>
            <a href="#" className="text-gray-600 hover:text-indigo-600">About</a>
            <a href="#" className="text-gray-600 hover:text-indigo-600">Contact</a>
          </nav>
        </div>
      </header>
      <main className="container mx-auto px-4 py-16 text-center">
        <h2 className="text-4xl font-bold mb-4">Welcome to Your Website</h2>
        <p className="text-gray-600 max-w-xl mx-auto mb-8">This is placeholder content.</p>
        <button className="bg-gradient-to-r from-indigo-500 to-purple-500 text-white px-8 py-3 rounded-lg hover:opacity-90">
          Get Started
        </button>
      </main>
    </div>
  );
}"""


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@dataclass(frozen=True)
class GeneratedCode:
    """Website code produced from one wireframe image."""

    html: str = ""
    css: str = ""
    js: str = ""
    react: str = ""
    structure: Any = field(default_factory=dict)
    is_placeholder: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> GeneratedCode:
        """Build from the model's JSON reply; missing fields become empty."""
        return cls(
            html=_as_text(payload.get("html")),
            css=_as_text(payload.get("css")),
            js=_as_text(payload.get("js")),
            react=_as_text(payload.get("react")),
            structure=payload.get("structure") or {},
        )

    @classmethod
    def placeholder(cls) -> GeneratedCode:
        """Fixed artifact substituted when the model reply is not parseable."""
        return cls(
            html=_PLACEHOLDER_HTML,
            css=_PLACEHOLDER_CSS,
            js="",
            react=_PLACEHOLDER_REACT,
            structure={"type": "page", "sections": ["header", "hero", "footer"]},
            is_placeholder=True,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "html": self.html,
            "css": self.css,
            "js": self.js,
            "react": self.react,
            "structure": self.structure,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
