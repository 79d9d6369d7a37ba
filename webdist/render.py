"""Resolve asset placeholders in the HTML entry page.

Placeholders are plain Jinja2 variables, e.g.::

    <link rel="stylesheet" href="/{{ css }}">
    <script src="/{{ js }}"></script>

Rendering is strict: a placeholder with no published asset behind it aborts
the publish instead of shipping a page with a dangling reference.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping

from jinja2 import (Environment, StrictUndefined, TemplateError,
                    TemplateSyntaxError, meta)

from .errors import MissingAssetError, RenderError

logger = logging.getLogger(__name__)

_env = Environment(
    undefined=StrictUndefined,
    autoescape=True,
    keep_trailing_newline=True,
)


def placeholders(template_text: str) -> set[str]:
    """Return the placeholder names referenced by ``template_text``."""
    try:
        ast = _env.parse(template_text)
    except TemplateSyntaxError as exc:
        raise RenderError(f"invalid template syntax on line {exc.lineno}: {exc.message}") from exc
    return meta.find_undeclared_variables(ast)


def render(
    template_text: str,
    mapping: Mapping[str, str],
    *,
    require_all: bool = True,
) -> str:
    """Substitute published filenames into ``template_text``.

    Parameters
    ----------
    template_text: str
        HTML template containing ``{{ name }}`` placeholders.
    mapping: Mapping[str, str]
        Logical asset name to published filename.
    require_all: bool
        When true every key of ``mapping`` must be referenced by the template.

    Raises :class:`RenderError` for unresolved placeholders, unused mapping
    keys (with ``require_all``) and template syntax errors.
    """
    referenced = placeholders(template_text)

    unresolved = sorted(referenced - set(mapping))
    if unresolved:
        raise RenderError(f"unresolved placeholders in template: {', '.join(unresolved)}")

    if require_all:
        unused = sorted(set(mapping) - referenced)
        if unused:
            raise RenderError(f"template does not reference assets: {', '.join(unused)}")

    try:
        return _env.from_string(template_text).render(**mapping)
    except (TemplateError, TypeError) as exc:
        # Attribute access such as ``{{ css.url }}`` only fails at render time,
        # ``{% include %}`` raises TypeError as there is no loader.
        raise RenderError(str(exc)) from exc


def render_file(
    template_path: str | os.PathLike,
    mapping: Mapping[str, str],
    output_path: str | os.PathLike,
    *,
    require_all: bool = True,
) -> str:
    """Render the template at ``template_path`` and write it to ``output_path``."""
    try:
        with open(template_path, encoding="utf-8") as f:
            template_text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingAssetError(template_path, str(exc)) from exc

    output = render(template_text, mapping, require_all=require_all)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(output)
    logger.info("Rendered %s -> %s", template_path, output_path)
    return output
