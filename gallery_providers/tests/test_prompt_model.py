from __future__ import annotations

import dataclasses

import pytest

from gallery_providers import ChatOptions, GalleryChatOptions, Message, MessageType, Prompt


def test_string_becomes_single_user_message() -> None:
    prompt = Prompt("hello")
    assert prompt.instructions == (Message(MessageType.USER, "hello"),)
    assert prompt.options is None


def test_single_message_is_wrapped() -> None:
    msg = Message.system("rules")
    assert Prompt(msg).instructions == (msg,)


def test_sequence_order_preserved() -> None:
    msgs = [Message.user("a"), Message.assistant("b"), Message.user("c")]
    prompt = Prompt(msgs)
    assert [m.content for m in prompt.instructions] == ["a", "b", "c"]
    assert prompt.contents == "a\nb\nc"


def test_non_message_instruction_rejected() -> None:
    with pytest.raises(ValueError, match="Message instances: str"):
        Prompt([Message.user("a"), "b"])  # type: ignore[list-item]


def test_invalid_options_rejected_at_construction() -> None:
    with pytest.raises(ValueError, match="not of type ChatOptions: int"):
        Prompt("x", 3)


def test_with_options_returns_new_prompt() -> None:
    base = Prompt("x")
    updated = base.with_options(ChatOptions(temperature=0.2))
    assert base.options is None
    assert updated.options == ChatOptions(temperature=0.2)
    assert updated.instructions == base.instructions


def test_prompt_is_frozen() -> None:
    prompt = Prompt("x", GalleryChatOptions(max_tokens=1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        prompt.options = None  # type: ignore[misc]


def test_message_properties_do_not_affect_equality() -> None:
    assert Message.user("a", trace="1") == Message.user("a")
    assert Message.user("a", trace="1").properties == {"trace": "1"}


@pytest.mark.parametrize("instructions, name", [(None, "None"), (42, "int")])
def test_unusable_instructions_rejected_with_value_error(instructions, name) -> None:
    with pytest.raises(ValueError, match=name):
        Prompt(instructions)  # type: ignore[arg-type]
