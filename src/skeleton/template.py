"""Placeholder substitution for the generated build metadata."""

from __future__ import annotations

import re
from typing import Any, Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot resolve a placeholder."""


class TemplateRenderer:
    """Render templates containing ``{{ name }}`` placeholders.

    Only bare identifiers are recognised, so single braces (f-strings, TOML
    inline tables) pass through untouched.
    """

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        A placeholder missing from ``context`` raises
        :class:`TemplateRenderingError`.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")
            return str(context[key])

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
