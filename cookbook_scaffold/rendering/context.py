"""Template rendering context."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError


class ScaffoldError(Exception):
    """Base class for fatal template errors."""


class UndefinedVariableError(ScaffoldError):
    """Raised when a template references a variable missing from the context."""


class TemplateRenderError(ScaffoldError):
    """Raised when a template cannot be parsed."""


def build_environment() -> Environment:
    """Create the Jinja2 environment used for cookbook templates."""
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class Context:
    """Fixed set of named values available to templates."""

    def __init__(self, variables: Mapping[str, Any]):
        self._variables = MappingProxyType(dict(variables))
        self._environment = build_environment()

    @property
    def variables(self) -> Mapping[str, Any]:
        return self._variables

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __repr__(self) -> str:
        return f"Context({dict(self._variables)!r})"

    def evaluate(self, template_text: str, name: str | None = None) -> str:
        """Render ``template_text`` against the held variables.

        Args:
            template_text: Jinja2 template source
            name: Template name used in error messages

        Returns:
            Rendered text

        Raises:
            UndefinedVariableError: A referenced variable is not defined
            TemplateRenderError: The template source is invalid
        """
        label = name or "<string>"
        try:
            template = self._environment.from_string(template_text)
        except TemplateSyntaxError as e:
            raise TemplateRenderError(f"{label}:{e.lineno}: {e.message}") from e

        try:
            return template.render(**self._variables)
        except UndefinedError as e:
            raise UndefinedVariableError(f"{label}: {e.message}") from e
