"""Tests for dialect-driven message normalization and transcript rendering."""
from __future__ import annotations

import pytest

from chatbot_providers.base.models import Message, WireMessage
from chatbot_providers.base.utils.messages import (
    DIALECTS,
    get_dialect,
    last_user_content,
    normalize,
    render_transcript,
)


def test_gemini_merges_system_into_first_user_message():
    msgs = [Message.system("S"), Message.user("Q")]
    assert normalize(msgs, "gemini") == [  # nosec B101
        WireMessage(role="user", content="[System Instructions: S]\n\nQ")
    ]


def test_gemini_joins_multiple_system_messages_in_order():
    msgs = [
        Message.system("A"),
        Message.user("first"),
        Message.system("B"),
        Message.assistant("reply"),
        Message.user("second"),
    ]
    out = normalize(msgs, "gemini")
    assert [m.role for m in out] == ["user", "model", "user"]  # nosec B101
    assert out[0].content == "[System Instructions: A\n\nB]\n\nfirst"  # nosec B101
    assert out[2].content == "second"  # nosec B101


def test_gemini_user_preceded_by_assistant_gets_merge():
    msgs = [Message.system("S"), Message.assistant("hi"), Message.user("Q")]
    out = normalize(msgs, "gemini")
    assert out == [  # nosec B101
        WireMessage(role="model", content="hi"),
        WireMessage(role="user", content="[System Instructions: S]\n\nQ"),
    ]


def test_gemini_without_user_message_drops_system_text():
    # Known behavior: with nowhere to merge, system text is silently lost.
    msgs = [Message.system("S"), Message.assistant("hello")]
    assert normalize(msgs, "gemini") == [WireMessage(role="model", content="hello")]  # nosec B101


def test_chat_dialect_is_passthrough():
    msgs = [Message.system("S"), Message.user("Q"), Message.assistant("A")]
    out = normalize(msgs, "chat")
    assert [(m.role, m.content) for m in out] == [(m.role, m.content) for m in msgs]  # nosec B101


def test_ollama_labels_roles():
    out = normalize([Message.system("S"), Message.user("Q"), Message.assistant("A")], "ollama")
    assert [m.role for m in out] == ["System", "User", "Assistant"]  # nosec B101


def test_idempotent_without_system_messages():
    msgs = [Message.user("Q"), Message.assistant("A"), Message.user("again")]
    for name in DIALECTS:
        once = normalize(msgs, name)
        if name == "ollama":
            continue  # labels are not roles of the input vocabulary
        assert normalize(once, name) == once  # nosec B101


def test_inputs_are_not_mutated():
    msgs = [Message.system("S"), Message.user("Q")]
    snapshot = list(msgs)
    normalize(msgs, "gemini")
    assert msgs == snapshot  # nosec B101


def test_unknown_dialect_raises():
    with pytest.raises(ValueError):
        get_dialect("klingon")
    with pytest.raises(ValueError):
        normalize([Message.user("x")], "klingon")


def test_render_transcript_ends_with_reply_cue():
    wire = normalize([Message.system("be brief"), Message.user("hi")], "ollama")
    assert render_transcript(wire) == "System: be brief\n\nUser: hi\n\nAssistant: "  # nosec B101


def test_last_user_content():
    msgs = [Message.user("one"), Message.assistant("a"), Message.user("two")]
    assert last_user_content(msgs) == "two"  # nosec B101
    assert last_user_content([Message.assistant("a")]) == ""  # nosec B101


def test_message_rejects_unknown_role():
    with pytest.raises(ValueError):
        Message(role="tool", content="x")  # type: ignore[arg-type]
