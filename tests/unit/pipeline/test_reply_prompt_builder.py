"""Unit tests for ReplyPromptBuilder."""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from chatterjoy.pipeline.prompt_builder import ReplyPromptBuilder


def test_bundled_template_includes_text_and_emotion(prompt_builder):
    prompt = prompt_builder.build("I lost my keys again", "sadness")

    assert '"I lost my keys again"' in prompt
    assert "sadness" in prompt


def test_text_is_stripped_before_rendering(prompt_builder):
    prompt = prompt_builder.build("  I got the job!\n", "joy")

    assert '"I got the job!"' in prompt


def test_prompt_is_deterministic(prompt_builder):
    assert prompt_builder.build("hello", "neutral") == prompt_builder.build("hello", "neutral")


def test_custom_template_path(tmp_path):
    template = tmp_path / "short.txt"
    template.write_text("[{{ emotion }}] {{ text }}")

    builder = ReplyPromptBuilder(template)

    assert builder.build("so tired", "sadness") == "[sadness] so tired"


def test_missing_template_raises(tmp_path):
    with pytest.raises(TemplateNotFound):
        ReplyPromptBuilder(tmp_path / "does_not_exist.txt")


def test_undefined_variable_is_an_error(tmp_path):
    """Templates referencing unknown variables fail loudly instead of rendering blanks."""
    template = tmp_path / "bad.txt"
    template.write_text("{{ text }} {{ mood }}")

    builder = ReplyPromptBuilder(template)

    with pytest.raises(UndefinedError):
        builder.build("hello", "joy")
