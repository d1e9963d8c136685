"""Structured request construction (``GalleryChatClient.create_request``)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gallery_providers import ChatOptions, GalleryChatClient, GalleryChatOptions, Message, Prompt
from gallery_providers.gallery.helpers import to_role
from gallery_providers.gallery.request import GalleryChatMessage, GalleryChatReq
from gallery_providers.tests.utils import FakeGalleryClient


@pytest.fixture()
def client() -> GalleryChatClient:
    return GalleryChatClient(FakeGalleryClient())


def test_roles_and_order_preserved_function_messages_dropped(client: GalleryChatClient) -> None:
    prompt = Prompt(
        [
            Message.system("be brief"),
            Message.user("q1"),
            Message.function("{\"tool\": 1}"),
            Message.assistant("a1"),
            Message.user("q2"),
        ]
    )

    req = client.create_request(prompt, stream=False)

    assert req.messages == [
        GalleryChatMessage("system", "be brief"),
        GalleryChatMessage("user", "q1"),
        GalleryChatMessage("assistant", "a1"),
        GalleryChatMessage("user", "q2"),
    ]


def test_defaults_used_without_runtime_options(client: GalleryChatClient) -> None:
    req = client.create_request(Prompt([Message.user("a"), Message.user("b")]), stream=False)
    assert req.temperature == 0.7
    assert req.top_p == 0.8
    assert req.max_tokens is None
    assert req.is_stream is False


def test_runtime_options_override_per_field(client: GalleryChatClient) -> None:
    prompt = Prompt(
        [Message.user("a"), Message.user("b")],
        GalleryChatOptions(top_p=0.5, max_tokens=64, answer_num=2, user="u-7"),
    )

    req = client.create_request(prompt, stream=True)

    assert req.temperature == 0.7
    assert req.top_p == 0.5
    assert req.max_tokens == 64
    assert req.answer_num == 2
    assert req.user == "u-7"
    assert req.is_stream is True


def test_portable_chat_options_are_converted(client: GalleryChatClient) -> None:
    prompt = Prompt([Message.user("a"), Message.user("b")], ChatOptions(temperature=0.1, top_k=5))
    req = client.create_request(prompt, stream=False)
    assert req.temperature == 0.1
    assert req.top_p == 0.8


def test_mapping_options_validated_at_prompt(client: GalleryChatClient) -> None:
    prompt = Prompt([Message.user("a"), Message.user("b")], {"presence_penalty": 1.5, "with_prompt": True})
    assert isinstance(prompt.options, GalleryChatOptions)
    req = client.create_request(prompt, stream=False)
    assert req.presence_penalty == 1.5
    assert req.with_prompt is True


def test_out_of_range_mapping_options_rejected() -> None:
    with pytest.raises(ValidationError):
        Prompt("x", {"temperature": 5})


def test_sampling_values_are_floats() -> None:
    client = GalleryChatClient(FakeGalleryClient(), options=GalleryChatOptions(temperature=1, top_p=1))
    req = client.create_request(Prompt([Message.user("a"), Message.user("b")]), stream=False)
    assert isinstance(req.temperature, float)
    assert isinstance(req.top_p, float)


def test_unset_sampling_values_stay_unset() -> None:
    client = GalleryChatClient(FakeGalleryClient(), options=GalleryChatOptions())
    req = client.create_request(Prompt([Message.user("a"), Message.user("b")]), stream=False)
    assert req.temperature is None
    assert req.top_p is None


def test_to_dict_uses_wire_keys_and_omits_unset() -> None:
    req = GalleryChatReq(
        messages=[GalleryChatMessage("user", "hi")],
        temperature=0.7,
        answer_num=3,
        is_stream=True,
    )
    assert req.to_dict() == {
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.7,
        "n": 3,
        "stream": True,
    }


def test_to_role_rejects_function_messages() -> None:
    with pytest.raises(ValueError, match="function"):
        to_role(Message.function("x"))
