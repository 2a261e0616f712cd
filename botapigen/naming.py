"""Convert schema identifiers to Python identifiers.

Schema names are lower snake_case (chat_id, reply_markup) or, for methods,
already camelCase (sendMessage). Two conventions are derived from them:

  exported (title) -> each "_" segment capitalized, joined:   reply_markup -> ReplyMarkup
  local (camel)    -> title with the first character lowered: reply_markup -> replyMarkup

Only the first character of a segment is touched, so camelCase input keeps
its inner capitals: sendMessage -> SendMessage / sendMessage.
"""

from __future__ import annotations

import keyword

from pydantic import BaseModel

# Names the generated bindings use for themselves
RESERVED = {"self", "opts"}


def snake_to_title(name: str) -> str:
    """Exported-convention identifier for a snake_case name."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def snake_to_camel(name: str) -> str:
    """Local-convention identifier for a snake_case name."""
    title = snake_to_title(name)
    return title[:1].lower() + title[1:]


def python_identifier(name: str) -> str:
    """Make a schema field name usable as a model member or argument.

    Keywords (from, and, ...), names that would shadow BaseModel
    attributes (json, copy, ...) and the binding arguments self and opts
    get a trailing underscore.
    """
    if keyword.iskeyword(name) or name in RESERVED or hasattr(BaseModel, name):
        return name + "_"
    return name
