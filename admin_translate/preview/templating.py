"""Templating utilities for the translation preview page.

This module handles page template loading, placeholder extraction and
context-driven rendering. Placeholders are tokens of the form ``{name}``.
Values are inserted as given, so callers pass already rendered or escaped
markup.

Boundaries
----------
- Does not write to disk; only reads template files.
- No HTML interpretation; deterministic given inputs.
- The missing-value placeholder is empty: an unknown placeholder renders as
  nothing rather than leaking its name into the page.

Examples
--------
>>> from admin_translate.preview.templating import render_template
>>> render_template("<h1>{title}</h1>", {"title": "Posts"})
'<h1>Posts</h1>'
"""

from __future__ import annotations

import re
from pathlib import Path

_PLACEHOLDER = re.compile(r"\{([a-zA-Z0-9_]+)\}")


def load_template(path: Path) -> str:
    r"""Read the contents of a template file as a string.

    Parameters
    ----------
    path : Path
        Path to the template file to be loaded.

    Returns
    -------
    str
        Contents of the template file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    OSError
        If the file cannot be read.
    """
    with path.open("r", encoding="utf-8") as fh:
        return fh.read()


def extract_placeholders_from_template(content: str) -> list[str]:
    """Return a sorted list of unique placeholders found in the template."""
    return sorted(set(_PLACEHOLDER.findall(content)))


def render_template(template_content: str, context: dict[str, str]) -> str:
    """Replace each ``{name}`` placeholder with ``context[name]``.

    Parameters
    ----------
    template_content : str
        The template text containing ``{placeholders}``.
    context : dict[str, str]
        Mapping from placeholder names to their values.

    Returns
    -------
    str
        The rendered template.
    """

    def replace_func(match: re.Match[str]) -> str:
        return str(context.get(match.group(1), ""))

    return _PLACEHOLDER.sub(replace_func, template_content)


def load_template_and_placeholders(path: Path) -> tuple[str, list[str]]:
    """Load a template and return its content along with found placeholders.

    Raises
    ------
    ValueError
        If the template has no ``{forms_html}`` placeholder.
    """
    content = load_template(path)
    placeholders = extract_placeholders_from_template(content)
    if "forms_html" not in placeholders:
        raise ValueError("Template has no {forms_html} placeholder.")
    return content, placeholders
