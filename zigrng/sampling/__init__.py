from zigrng.sampling.engine import (
    DrawPath,
    DrawResult,
    ZigguratSampler,
    draw,
    draw_traced,
    fill,
)

__all__ = ["DrawPath", "DrawResult", "ZigguratSampler", "draw", "draw_traced", "fill"]
