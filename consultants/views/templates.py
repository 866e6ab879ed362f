# consultants/views/templates.py
"""
Placeholder substitution for the page templates.

Two kinds of token are understood:

    {{key}}          replaced by options[key] when that value is a string
    {{person.prop}}  replaced by each own property of options["person"]

Tokens that nothing matches are left in the page as they are. Every value is
HTML-escaped on the way in, except Markup (the card fragments), which is
already safe.
"""

import logging
from typing import Any, Mapping, Optional

import anyio
from markupsafe import escape

from consultants import config
from consultants.models.people import Person

logger = logging.getLogger(__name__)


def _person_properties(person: Any) -> Mapping[str, Any]:
    if isinstance(person, Person):
        return person.properties()
    if isinstance(person, Mapping):
        return person
    return {}


def substitute(content: str, options: Optional[Mapping[str, Any]] = None) -> str:
    options = options or {}

    # Flat keys first, in insertion order
    for key, value in options.items():
        if isinstance(value, str):
            content = content.replace("{{" + key + "}}", str(escape(value)))

    # Then {{person.prop}} tokens
    person = options.get("person")
    if person:
        for prop, value in _person_properties(person).items():
            if value is None:
                value = ""
            content = content.replace("{{person." + prop + "}}", str(escape(value)))

    return content


async def render_template(template_name: str, options: Optional[Mapping[str, Any]] = None) -> str:
    """
    Read templates/<template_name> and fill in its placeholders from options.

    A missing template raises FileNotFoundError; callers turn that into a 500.
    """
    path = anyio.Path(config.TEMPLATE_DIR) / template_name
    content = await path.read_text(encoding="utf-8")
    logger.debug("Rendering template %s", template_name)
    return substitute(content, options)
