"""Creative geometry: soft blobs, industrial blocks and chunky glyph strokes."""

from __future__ import annotations

from logoforge.engine.markup import luminance_mask, ref_id, rotate, scale, svg, url
from logoforge.engine.registry import Family, algorithm
from logoforge.engine.seed import string_hash
from logoforge.models.params import ParameterVector
from logoforge.svg.paint import PaintContext
from logoforge.svg.serializer import el

_BLOBS = (
    "M100,30 Q140,30 150,70 Q170,120 170,160 Q120,160 100,120 Q80,160 30,160 Q30,120 50,70 Q60,30 100,30 Z",
    "M100,80 Q130,50 160,80 Q150,130 110,140 Q70,150 50,100 Q60,50 100,80 Z",
    "M40,80 Q40,160 120,160 L120,120 Q80,120 80,80 Z",
)


@algorithm(id="bio_geo", family=Family.CREATIVE, description="Organic blob with a masked void")
def bio_geo(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("bio-mask", brand_name)
    style = seed % 3
    masked = url(mask_id)
    void = (
        el("circle", cx=100, cy=110, r=20, fill="black")
        if style == 1
        else el("circle", cx=100, cy=100, r=15, fill="black")
    )
    defs = el("defs", luminance_mask(mask_id, void))
    blob = el("path", d=_BLOBS[style], fill=paint.color, mask=masked)

    if style == 0:
        return svg(defs, blob)
    if style == 1:
        blob["transform"] = f"{rotate(seed % 360)} {scale(1.2)}"
        lobes = [
            el("circle", cx=x, cy=y, r=40, fill=paint.color, mask=masked)
            for x, y in ((100, 70), (130, 130), (70, 130))
        ]
        return svg(defs, blob, *lobes)
    cells = [el("circle", cx=c, cy=c, r=50, fill=paint.color, mask=masked) for c in (80, 120)]
    return svg(defs, *cells, blob)


@algorithm(id="swiss_block", family=Family.CREATIVE, description="Heavy blocks with hard cutouts")
def swiss_block(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    seed = string_hash(brand_name)
    mask_id = ref_id("block-mask", brand_name)
    masked = url(mask_id)
    style = seed % 3

    if style == 0:
        shapes = [el("rect", x=40, y=40, width=120, height=120, fill=paint.color, mask=masked)]
        cutouts = [
            el("path", d="M100,20 L130,80 L100,100 L110,160 L80,100 L110,80 Z", fill="black", transform=rotate(-15))
        ]
    elif style == 1:
        shapes = [el("path", d="M40,40 L160,40 L160,100 L100,100 L100,160 L40,160 Z", fill=paint.color, mask=masked)]
        cutouts = [el("circle", cx=100, cy=100, r=25, fill="black")]
    else:
        shapes = [
            el("rect", x=50, y=50, width=60, height=60, fill=paint.color, mask=masked),
            el("rect", x=90, y=90, width=60, height=60, fill=paint.color, opacity=0.8, mask=masked),
            el("rect", x=75, y=75, width=50, height=50, fill=paint.color),
        ]
        # A black frame around the overlap separates the two blocks.
        cutouts = [
            el("rect", x=70, y=70, width=60, height=60, fill="black"),
            el("rect", x=75, y=75, width=50, height=50, fill="white"),
        ]
    return svg(el("defs", luminance_mask(mask_id, *cutouts)), *shapes)


_GLYPH_STROKES = (
    ("M50,50 L150,50 L50,150 L150,150", "square"),
    ("M70,160 L70,40 L130,40 L130,100 L70,100", "square"),
    ("M150,50 L90,50 Q50,50 50,90 T90,130 L150,130", "round"),
)


@algorithm(id="chunky_glyph", family=Family.CREATIVE, description="Heavy single-stroke glyph")
def chunky_glyph(params: ParameterVector, brand_name: str, paint: PaintContext) -> str:
    d, cap = _GLYPH_STROKES[string_hash(brand_name) % 3]
    return svg(
        el(
            "path",
            d=d,
            fill="none",
            stroke=paint.color,
            stroke_width=45,
            stroke_linecap=cap,
            stroke_linejoin="round",
        )
    )
