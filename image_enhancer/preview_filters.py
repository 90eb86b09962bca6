"""
Preview filters for the original image.

The descriptor is rendered as a CSS `filter` value and applied by the browser to
the original image only. It approximates an effect visually and is independent of
the prompt clauses in `image_enhancer.prompts`.
"""
import html
from typing import NamedTuple, Tuple

from image_enhancer.adjustments import ArtisticEffect


class FilterOp(NamedTuple):
    name: str
    amount: int  # percent

    def css(self) -> str:
        return f"{self.name}({self.amount}%)"


FilterDescriptor = Tuple[FilterOp, ...]

EFFECT_FILTERS = {
    ArtisticEffect.NONE: (),
    ArtisticEffect.VINTAGE: (FilterOp("sepia", 60),),
    ArtisticEffect.BW: (FilterOp("grayscale", 100),),
    ArtisticEffect.SEPIA: (FilterOp("sepia", 100),),
    ArtisticEffect.SKETCH: (FilterOp("grayscale", 100), FilterOp("contrast", 150), FilterOp("brightness", 110)),
    ArtisticEffect.OIL_PAINTING: (FilterOp("saturate", 180), FilterOp("contrast", 130)),
    ArtisticEffect.CARTOON: (FilterOp("saturate", 200), FilterOp("contrast", 150)),
}


def compile_preview_filter(brightness: int, contrast: int, artistic_effect) -> FilterDescriptor:
    """brightness and contrast first, then the effect's own ops (left to right)."""
    base = (FilterOp("brightness", brightness), FilterOp("contrast", contrast))
    return base + EFFECT_FILTERS[ArtisticEffect(artistic_effect)]


def to_css(descriptor: FilterDescriptor) -> str:
    return " ".join(op.css() for op in descriptor)


def preview_html(data_url: str, css_filter: str) -> str:
    """<img> tag showing `data_url` with the filter applied by the browser."""
    return (
        f'<img src="{html.escape(data_url)}" alt="Original" '
        f'style="width:100%; object-fit:contain; filter:{html.escape(css_filter)};"/>'
    )
