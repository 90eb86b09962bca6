"""
Prompt construction for the Gemini enhancement request.

The output is deterministic: a fixed base sentence followed by the brightness,
contrast, noise-reduction and effect clauses, in that order, each only when it
applies.
"""
from image_enhancer.adjustments import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_CONTRAST,
    AdjustmentSettings,
    ArtisticEffect,
)

BASE_PROMPT = (
    "Fix this old and damaged photo. Improve its overall quality, and adjust the lighting "
    "and contrast to make it look more vibrant and clear."
)

EFFECT_PROMPTS = {
    ArtisticEffect.VINTAGE: "Apply a vintage effect to the image.",
    ArtisticEffect.BW: "Convert the image to artistic black and white, preserving details.",
    ArtisticEffect.SEPIA: "Apply a warm sepia tone to the image.",
    ArtisticEffect.SKETCH: "Turn the image into a pencil sketch, emphasizing lines and shading.",
    ArtisticEffect.OIL_PAINTING: "Make the image look like an oil painting with visible brush strokes and rich colors.",
    ArtisticEffect.CARTOON: "Apply a cartoon effect to the image with vibrant colors and bold outlines.",
}


def compile_prompt(brightness: int, contrast: int, noise_reduction: int, artistic_effect) -> str:
    clauses = [BASE_PROMPT]
    if brightness != DEFAULT_BRIGHTNESS:
        clauses.append(f"Adjust the brightness to be around {brightness}%.")
    if contrast != DEFAULT_CONTRAST:
        clauses.append(f"Adjust the contrast to be around {contrast}%.")
    if noise_reduction > 0:
        clauses.append(f"Apply noise reduction at an intensity of about {noise_reduction}%.")
    effect_clause = EFFECT_PROMPTS.get(ArtisticEffect(artistic_effect))
    if effect_clause:
        clauses.append(effect_clause)
    return " ".join(clauses)


def compile_prompt_for(settings: AdjustmentSettings) -> str:
    return compile_prompt(settings.brightness, settings.contrast, settings.noise_reduction, settings.artistic_effect)
