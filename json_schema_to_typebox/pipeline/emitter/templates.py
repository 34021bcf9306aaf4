"""
Jinja2 templates for the declarations of a generated TypeScript file.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

TEMPLATES_DIR = Path(__file__).parent.parent.parent.resolve().absolute() / "templates" / "typescript"

TEMPLATE_NAMES = ("prefix", "suffix", "enum", "union", "one_of")


class TemplateRenderer:
    """Loads the TypeScript templates once and renders them by name."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, undefined=jinja2.StrictUndefined)
        self.templates = {name: self.jinja_env.from_string((templates_dir / f"{name}.ts.jinja2").read_text(encoding="utf-8")) for name in TEMPLATE_NAMES}

    def render(self, name: str, /, **context) -> str:
        return self.templates[name].render(**context)
