"""
Tests for photoshoot prompt composition.
"""

from photoshoot.prompts import INSTRUCTIONS_PREFIX, PHOTOSHOOT_PROMPT, build_prompt


def test_template_used_unchanged_without_instructions():
    assert build_prompt() == PHOTOSHOOT_PROMPT
    assert build_prompt(None) == PHOTOSHOOT_PROMPT
    assert build_prompt("") == PHOTOSHOOT_PROMPT


def test_whitespace_only_instructions_are_ignored():
    assert build_prompt("   \n\t ") == PHOTOSHOOT_PROMPT


def test_instructions_appended_after_template():
    prompt = build_prompt("make it blue")

    assert prompt.startswith(PHOTOSHOOT_PROMPT)
    assert prompt.endswith(f"{INSTRUCTIONS_PREFIX} make it blue")


def test_instructions_are_trimmed_but_otherwise_verbatim():
    prompt = build_prompt("  Beach at sunset, *no* hats!  ")

    assert prompt.endswith("Beach at sunset, *no* hats!")


def test_template_describes_the_composition():
    assert "image 1" in PHOTOSHOOT_PROMPT
    assert "image 2" in PHOTOSHOOT_PROMPT
    assert "photorealistic" in PHOTOSHOOT_PROMPT
    assert "studio lighting" in PHOTOSHOOT_PROMPT
