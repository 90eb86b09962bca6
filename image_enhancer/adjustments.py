"""User-tunable adjustment settings and the artistic effect choices."""
from dataclasses import dataclass
from enum import Enum

BRIGHTNESS_RANGE = (50, 150)
CONTRAST_RANGE = (50, 150)
NOISE_REDUCTION_RANGE = (0, 100)

DEFAULT_BRIGHTNESS = 100
DEFAULT_CONTRAST = 100
DEFAULT_NOISE_REDUCTION = 0


class ArtisticEffect(str, Enum):
    NONE = "none"
    VINTAGE = "vintage"
    BW = "bw"
    SEPIA = "sepia"
    SKETCH = "sketch"
    OIL_PAINTING = "oil-painting"
    CARTOON = "cartoon"

    @property
    def label(self) -> str:
        return EFFECT_LABELS[self]


EFFECT_LABELS = {
    ArtisticEffect.NONE: "None",
    ArtisticEffect.VINTAGE: "Vintage",
    ArtisticEffect.BW: "B&W",
    ArtisticEffect.SEPIA: "Sepia",
    ArtisticEffect.SKETCH: "Sketch",
    ArtisticEffect.OIL_PAINTING: "Oil Painting",
    ArtisticEffect.CARTOON: "Cartoon",
}


def clamp(value: int, bounds: tuple) -> int:
    low, high = bounds
    return max(low, min(high, int(value)))


@dataclass
class AdjustmentSettings:
    """Mutable slider/effect state. Use the setters so values stay in range."""
    brightness: int = DEFAULT_BRIGHTNESS
    contrast: int = DEFAULT_CONTRAST
    noise_reduction: int = DEFAULT_NOISE_REDUCTION
    artistic_effect: ArtisticEffect = ArtisticEffect.NONE

    def set_brightness(self, value: int) -> None:
        self.brightness = clamp(value, BRIGHTNESS_RANGE)

    def set_contrast(self, value: int) -> None:
        self.contrast = clamp(value, CONTRAST_RANGE)

    def set_noise_reduction(self, value: int) -> None:
        self.noise_reduction = clamp(value, NOISE_REDUCTION_RANGE)

    def set_artistic_effect(self, effect) -> None:
        # accepts the enum or its string value ("oil-painting")
        self.artistic_effect = ArtisticEffect(effect)

    def reset(self) -> None:
        self.brightness = DEFAULT_BRIGHTNESS
        self.contrast = DEFAULT_CONTRAST
        self.noise_reduction = DEFAULT_NOISE_REDUCTION
        self.artistic_effect = ArtisticEffect.NONE

    def is_default(self) -> bool:
        return self == AdjustmentSettings()
