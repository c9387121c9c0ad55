"""Unit tests for data models."""

from unittest.mock import patch

import pytest

from git_commit_ai.models import ChatRequest, ChoiceRecord, ServiceIdentity, StagedDiff


class TestChatRequest:
    """Tests for ChatRequest."""

    def test_seed_is_drawn_from_range(self):
        with patch("git_commit_ai.models.random.randint", return_value=42) as mock_randint:
            request = ChatRequest.create("m", "p", 0.5, 100)

        mock_randint.assert_called_once_with(10, 1000)
        assert request.random_seed == 42

    def test_seed_is_within_range(self):
        seeds = {ChatRequest.create("m", "p", 0.5, 100).random_seed for _ in range(50)}

        assert all(10 <= seed <= 1000 for seed in seeds)

    def test_to_body(self):
        request = ChatRequest(model="m", prompt="p", temperature=0.5, max_tokens=100, random_seed=7)

        assert request.to_body() == {
            "model": "m",
            "messages": [{"role": "user", "content": "p"}],
            "temperature": 0.5,
            "top_p": 1,
            "max_tokens": 100,
            "stream": False,
            "safe_prompt": False,
            "random_seed": 7,
        }


class TestChoiceRecord:

    def test_defaults(self):
        record = ChoiceRecord(name="[X] feat: a", value="feat: a")

        assert record.is_error is False
        assert record.disabled is False

    def test_is_immutable(self):
        record = ChoiceRecord(name="n", value="v")

        with pytest.raises(AttributeError):
            record.value = "other"


class TestServiceIdentity:

    def test_label(self):
        identity = ServiceIdentity("MistralAI", "#FC4A0A")

        assert identity.tag == "[MistralAI]"
        assert identity.label("feat: a") == "[MistralAI] feat: a"
        assert identity.secondary_color == "#fff"


def test_staged_diff_defaults():
    diff = StagedDiff()

    assert diff.files == []
    assert diff.diff == ""
