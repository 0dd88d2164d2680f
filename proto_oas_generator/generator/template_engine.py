"""
Protobuf Template Engine

This module renders protobuf documents from Jinja2 templates with the naming
filters registered, and normalizes declaration spacing in the output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from proto_oas_generator.generator.filters import FILTERS
from proto_oas_generator.generator.spacing import clean_spacing
from proto_oas_generator.naming.endpoint import Endpoint


class ProtoTemplateEngine:
    """Template engine for generating protobuf documents."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine.

        Args:
            template_dir: Directory templates are loaded from by name. Defaults
                to the current working directory.
        """
        self.template_dir = Path(template_dir) if template_dir is not None else Path.cwd()
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._register_filters()
        self._register_globals()

    def _register_filters(self) -> None:
        """Register the naming filters."""
        self.env.filters.update(FILTERS)

    def _register_globals(self) -> None:
        """Register global functions available in templates."""
        self.env.globals.update({"Endpoint": Endpoint})

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template from the template directory with the given context."""
        template = self.env.get_template(template_name)
        return clean_spacing(template.render(**context))

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        """Render template source with the given context."""
        template = self.env.from_string(source)
        return clean_spacing(template.render(**context))
