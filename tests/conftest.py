"""Shared fixtures: a small Telegram-style schema document.

The document mirrors api.json: "Yes"/"Optional" required flags, multi-type
fields ("Integer or String" chat_id), self references, upload types and
nested arrays.
"""

from __future__ import annotations

import copy
import importlib
import json
import sys
from pathlib import Path
from typing import Any

import pytest

from botapigen.codegen import generate
from botapigen.loader import parse_schema
from botapigen.model import APIDescription


SCHEMA: dict[str, Any] = {
    "types": {
        "User": {
            "description": ["This object represents a Telegram user or bot."],
            "fields": [
                {"field": "id", "types": ["Integer"], "description": "Unique identifier for this user or bot."},
                {"field": "is_bot", "types": ["Boolean"], "description": "True, if this user is a bot."},
                {"field": "first_name", "types": ["String"], "description": "User's or bot's first name."},
                {"field": "username", "types": ["String"], "description": "Optional. User's or bot's username."},
            ],
        },
        "Chat": {
            "description": ["This object represents a chat."],
            "fields": [
                {"field": "id", "types": ["Integer"], "description": "Unique identifier for this chat."},
                {"field": "type", "types": ["String"], "description": "Type of chat."},
                {"field": "title", "types": ["String"], "description": "Optional. Title, for groups."},
            ],
        },
        "Message": {
            "description": ["This object represents a message."],
            "fields": [
                {"field": "message_id", "types": ["Integer"], "description": "Unique message identifier."},
                {"field": "from", "types": ["User"], "description": "Optional. Sender of the message."},
                {"field": "chat", "types": ["Chat"], "description": "Chat the message belongs to."},
                {"field": "text", "types": ["String"], "description": "Optional. The actual UTF-8 text."},
                {
                    "field": "entities",
                    "types": ["Array of MessageEntity"],
                    "description": "Optional. Special entities like usernames, URLs, bot commands.",
                },
                {
                    "field": "reply_to_message",
                    "types": ["Message"],
                    "description": "Optional. For replies, the original message.",
                },
            ],
        },
        "MessageEntity": {
            "description": ["This object represents one special entity in a text message."],
            "fields": [
                {"field": "type", "types": ["String"], "description": "Type of the entity."},
                {"field": "offset", "types": ["Integer"], "description": "Offset in UTF-16 code units."},
                {"field": "length", "types": ["Integer"], "description": "Length of the entity."},
                {"field": "user", "types": ["User"], "description": "Optional. For text_mention only."},
            ],
        },
        "Update": {
            "description": ["This object represents an incoming update."],
            "fields": [
                {"field": "update_id", "types": ["Integer"], "description": "The update's unique identifier."},
                {"field": "message", "types": ["Message"], "description": "Optional. New incoming message."},
            ],
        },
        "InlineKeyboardButton": {
            "description": ["This object represents one button of an inline keyboard."],
            "fields": [
                {"field": "text", "types": ["String"], "description": "Label text on the button."},
                {"field": "callback_data", "types": ["String"], "description": "Optional. Data sent in a callback query."},
            ],
        },
        "InlineKeyboardMarkup": {
            "description": ["This object represents an inline keyboard."],
            "fields": [
                {
                    "field": "inline_keyboard",
                    "types": ["Array of Array of InlineKeyboardButton"],
                    "description": "Array of button rows.",
                },
            ],
        },
        "InputFile": {
            "description": ["This object represents the contents of a file to be uploaded."],
            "fields": [],
        },
    },
    "methods": {
        "sendMessage": {
            "description": ["Use this method to send text messages.", "On success, the sent Message is returned."],
            "returns": ["Message"],
            "fields": [
                {
                    "parameter": "chat_id",
                    "types": ["Integer", "String"],
                    "required": "Yes",
                    "description": "Unique identifier for the target chat.",
                },
                {"parameter": "text", "types": ["String"], "required": "Yes", "description": "Text of the message."},
                {"parameter": "parse_mode", "types": ["String"], "required": "Optional", "description": "Mode for parsing entities."},
                {
                    "parameter": "entities",
                    "types": ["Array of MessageEntity"],
                    "required": "Optional",
                    "description": "A JSON-serialized list of special entities.",
                },
                {
                    "parameter": "disable_notification",
                    "types": ["Boolean"],
                    "required": "Optional",
                    "description": "Sends the message silently.",
                },
                {
                    "parameter": "reply_markup",
                    "types": ["InlineKeyboardMarkup"],
                    "required": "Optional",
                    "description": "Additional interface options.",
                },
            ],
        },
        "getMe": {
            "description": ["A simple method for testing your bot's authentication token."],
            "returns": ["User"],
            "fields": [],
        },
        "getUpdates": {
            "description": ["Use this method to receive incoming updates."],
            "returns": ["Array of Update"],
            "fields": [
                {"parameter": "offset", "types": ["Integer"], "required": "Optional", "description": "Identifier of the first update."},
                {"parameter": "timeout", "types": ["Float"], "required": "Optional", "description": "Timeout in seconds."},
                {
                    "parameter": "allowed_updates",
                    "types": ["Array of String"],
                    "required": "Optional",
                    "description": "A JSON-serialized list of update types.",
                },
            ],
        },
        "sendPhoto": {
            "description": ["Use this method to send photos."],
            "returns": ["Message"],
            "fields": [
                {"parameter": "chat_id", "types": ["Integer", "String"], "required": "Yes", "description": "Target chat."},
                {"parameter": "photo", "types": ["InputFile", "String"], "required": "Yes", "description": "Photo to send."},
                {"parameter": "caption", "types": ["String"], "required": "Optional", "description": "Photo caption."},
            ],
        },
        "deleteMessage": {
            "description": ["Use this method to delete a message."],
            "returns": ["Boolean"],
            "fields": [
                {"parameter": "chat_id", "types": ["Integer", "String"], "required": "Yes", "description": "Target chat."},
                {"parameter": "message_id", "types": ["Integer"], "required": "Yes", "description": "Message to delete."},
            ],
        },
        "getChatMemberCount": {
            "description": ["Use this method to get the number of members in a chat."],
            "returns": ["Integer"],
            "fields": [
                {"parameter": "chat_id", "types": ["Integer", "String"], "required": "Yes", "description": "Target chat."},
            ],
        },
        "exportChatInviteLink": {
            "description": ["Use this method to generate a new primary invite link for a chat."],
            "returns": ["String"],
            "fields": [
                {"parameter": "chat_id", "types": ["Integer", "String"], "required": "Yes", "description": "Target chat."},
            ],
        },
    },
}


@pytest.fixture
def schema() -> dict[str, Any]:
    """A fresh copy of the sample schema document."""
    return copy.deepcopy(SCHEMA)


@pytest.fixture
def api(schema) -> APIDescription:
    return parse_schema(json.dumps(schema))


@pytest.fixture
def schema_file(tmp_path: Path, schema) -> Path:
    path = tmp_path / "api.json"
    path.write_text(json.dumps(schema))
    return path


# ---------------------------------------------------------------------------
# Generated package, written to disk and imported
# ---------------------------------------------------------------------------

@pytest.fixture
def import_generated(tmp_path: Path, monkeypatch):
    """Generate units into a throwaway package and import the methods unit.

    The package is named after the test's tmp dir so repeated imports never
    hit a stale sys.modules entry.
    """
    def _import(api: APIDescription):
        package = "gen_" + tmp_path.name
        generate(api, tmp_path / package)
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        return importlib.import_module(f"{package}.gen_methods")

    yield _import

    for name in list(sys.modules):
        if name.startswith("gen_" + tmp_path.name):
            sys.modules.pop(name)
