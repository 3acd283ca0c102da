from __future__ import annotations

from typing import List, Sequence

from .constants import CHANNEL_ALPHA, CHANNEL_BLUE, CHANNEL_GREEN, CHANNEL_RED, OPAQUE


def _to_byte(value: float) -> int:
    return max(0, min(OPAQUE, int(value + 0.5)))


def _composite_alpha(dest_alpha: int, src_alpha: int) -> float:
    return src_alpha + dest_alpha * (OPAQUE - src_alpha) / OPAQUE


def blend_alpha(dest_alpha: int, src_alpha: int) -> int:
    """Return the source-over alpha of src painted on dest."""
    return _to_byte(_composite_alpha(dest_alpha, src_alpha))


def blend_channel(dest_channel: int, src_channel: int, dest_alpha: int, src_alpha: int) -> int:
    """Composite one color channel of src over dest.

    Both channels are weighted by their alphas and the sum is divided by the
    composite alpha, so an opaque source returns src_channel and a fully
    transparent source returns dest_channel. When neither side has any
    coverage the destination channel is kept rather than 0, which keeps a
    fully transparent source neutral even over a fully transparent pixel.
    """
    out_alpha = _composite_alpha(dest_alpha, src_alpha)
    if out_alpha == 0:
        return dest_channel
    weighted = src_channel * src_alpha + dest_channel * dest_alpha * (OPAQUE - src_alpha) / OPAQUE
    return _to_byte(weighted / out_alpha)


def blend_color(dest: Sequence[int], src: Sequence[int]) -> List[int]:
    """Composite a 4-channel src color over a 4-channel dest color."""
    dest_alpha = dest[CHANNEL_ALPHA]
    src_alpha = src[CHANNEL_ALPHA]
    return [
        blend_channel(dest[CHANNEL_RED], src[CHANNEL_RED], dest_alpha, src_alpha),
        blend_channel(dest[CHANNEL_GREEN], src[CHANNEL_GREEN], dest_alpha, src_alpha),
        blend_channel(dest[CHANNEL_BLUE], src[CHANNEL_BLUE], dest_alpha, src_alpha),
        blend_alpha(dest_alpha, src_alpha),
    ]
