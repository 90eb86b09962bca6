"""
Tests for the Gemini prompt compiler.
"""
import pytest

from image_enhancer.adjustments import AdjustmentSettings, ArtisticEffect
from image_enhancer.prompts import BASE_PROMPT, EFFECT_PROMPTS, compile_prompt, compile_prompt_for


class TestCompilePrompt:

    def test_defaults_give_base_prompt_only(self):
        assert compile_prompt(100, 100, 0, ArtisticEffect.NONE) == BASE_PROMPT

    def test_all_clauses_in_order(self):
        prompt = compile_prompt(120, 80, 30, ArtisticEffect.SEPIA)
        assert prompt == (
            BASE_PROMPT
            + " Adjust the brightness to be around 120%."
            + " Adjust the contrast to be around 80%."
            + " Apply noise reduction at an intensity of about 30%."
            + " Apply a warm sepia tone to the image."
        )

    def test_only_contrast(self):
        assert compile_prompt(100, 150, 0, "none") == BASE_PROMPT + " Adjust the contrast to be around 150%."

    @pytest.mark.parametrize("effect", [e for e in ArtisticEffect if e is not ArtisticEffect.NONE])
    def test_effect_clause_appended_last(self, effect):
        prompt = compile_prompt(100, 100, 0, effect)
        assert prompt.startswith(BASE_PROMPT)
        assert prompt.endswith(" " + EFFECT_PROMPTS[effect])

    @pytest.mark.parametrize("brightness,contrast,noise", [(50, 150, 100), (150, 50, 1), (99, 101, 0)])
    def test_no_stray_whitespace(self, brightness, contrast, noise):
        prompt = compile_prompt(brightness, contrast, noise, "cartoon")
        assert "  " not in prompt
        assert ".." not in prompt
        assert prompt == prompt.strip()

    def test_pure(self):
        assert compile_prompt(60, 140, 10, "bw") == compile_prompt(60, 140, 10, "bw")

    def test_from_settings(self):
        settings = AdjustmentSettings()
        settings.set_noise_reduction(45)
        settings.set_artistic_effect("oil-painting")
        assert compile_prompt_for(settings) == compile_prompt(100, 100, 45, ArtisticEffect.OIL_PAINTING)

    def test_sketch_prompt_differs_from_preview(self):
        # preview uses grayscale ops; the prompt asks for a pencil sketch
        assert "pencil sketch" in compile_prompt(100, 100, 0, "sketch")
