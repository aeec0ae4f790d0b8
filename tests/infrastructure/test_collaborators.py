"""Collaborators: Markdown renderer, random tokens and JSON log formatting.

Tests cover:
    - render_markdown handles headings, fenced code, tables and empty input
    - random_string length, alphabet and freshness
    - JSONFormatter surfaces page_name/error_code extras
"""

import json
import logging

import pytest

from app.infrastructure.markdown_renderer import render_markdown
from app.infrastructure.observability import JSONFormatter
from app.infrastructure.random_tokens import TOKEN_ALPHABET, random_string


# ─── render_markdown ─────────────────────────────────────────────

def test_render_heading():
    assert render_markdown("# Hello") == "<h1>Hello</h1>"


def test_render_empty_source():
    assert render_markdown("") == ""


def test_render_fenced_code_and_table():
    html = render_markdown(
        "```\nprint(1)\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n",
    )
    assert "<code>print(1)" in html
    assert "<table>" in html


def test_render_is_repeatable():
    source = "Text[^1]\n\n[^1]: note"
    assert render_markdown(source) == render_markdown(source)


# ─── random_string ───────────────────────────────────────────────

def test_random_string_has_requested_length_and_alphabet():
    token = random_string(16)
    assert len(token) == 16
    assert set(token) <= set(TOKEN_ALPHABET)


def test_random_string_is_fresh_per_call():
    tokens = {random_string(16) for _ in range(200)}
    assert len(tokens) == 200


def test_random_string_rejects_non_positive_length():
    with pytest.raises(ValueError):
        random_string(0)


# ─── JSONFormatter ───────────────────────────────────────────────

def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, "Page created", None, None,
    )
    record.page_name = "hello-abc"
    record.error_code = "VALIDATION_ERROR"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "Page created"
    assert payload["page_name"] == "hello-abc"
    assert payload["error_code"] == "VALIDATION_ERROR"
    assert "operation" not in payload
