from __future__ import annotations

import argparse
import csv
from typing import Protocol, cast

import numpy as np

from .penstroke.config import ContourType, StrokeConfig
from .penstroke.export_svg import export_stroke_svg
from .penstroke.pen_path import PenStroke
from .utils import debug, debug_helpers


class CliArgs(Protocol):
    input: str
    output: str
    contour: str
    buffer_size: int
    bias_level: float
    bias_x: float
    bias_y: float
    min_gap: float
    smooth: int
    upscale: int
    fill: str
    verbose: bool


def load_samples_csv(path: str) -> np.ndarray:
    """
    Returns samples: (N,3) rows of x, y, radius.
    A leading header row is skipped; blank lines are ignored.
    """
    rows: list[tuple[float, float, float]] = []
    with open(path, newline="", encoding="utf-8") as fh:
        for lineno, row in enumerate(csv.reader(fh), start=1):
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) < 3:
                raise ValueError(f"{path}:{lineno}: expected x,y,radius")
            try:
                x, y, r = (float(cell) for cell in row[:3])
            except ValueError:
                if not rows and lineno == 1:
                    continue
                raise ValueError(
                    f"{path}:{lineno}: non-numeric sample {row!r}"
                ) from None
            rows.append((x, y, r))
    if not rows:
        raise ValueError(f"{path}: no samples found")
    return np.asarray(rows, dtype=np.float64)


def build_stroke(
    samples: np.ndarray,
    contour_type: ContourType,
    config: StrokeConfig,
    smooth: int = 0,
    upscale: int = 1,
) -> PenStroke:
    stroke = PenStroke(contour_type, config)
    x0, y0, r0 = samples[0]
    stroke.move_to(float(x0), float(y0), float(r0))
    for x, y, r in samples[1:]:
        stroke.line_to(float(x), float(y), float(r))
    stroke.finish()
    if smooth > 0:
        stroke.quad_smooth(smooth, upscale)
    return stroke


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        description="Render pointer samples (x,y,radius CSV) as a filled stroke SVG"
    )
    ap.add_argument("--input", required=True, help="CSV with x,y,radius rows")
    ap.add_argument("--output", required=True, help="Output SVG for the outline")
    ap.add_argument(
        "--contour",
        choices=[t.value for t in ContourType],
        default=ContourType.CIRCLE_SEQUENCE.value,
        help="Outline strategy: overlapping circles or tangent hull",
    )
    ap.add_argument(
        "--buffer_size", type=int, default=3, help="Input averaging window (1-100)"
    )
    ap.add_argument(
        "--bias_level",
        type=float,
        default=0.7,
        help="Thickness variation with direction (0-1)",
    )
    ap.add_argument("--bias_x", type=float, default=1.0 / np.sqrt(2.0))
    ap.add_argument("--bias_y", type=float, default=-1.0 / np.sqrt(2.0))
    ap.add_argument(
        "--min_gap",
        type=float,
        default=0.1,
        help="Minimum vertex spacing relative to the radius",
    )
    ap.add_argument(
        "--smooth", type=int, default=0, help="Quadratic smoothing level (0 = off)"
    )
    ap.add_argument(
        "--upscale", type=int, default=1, help="Vertex multiplier when smoothing"
    )
    ap.add_argument("--fill", default="#111111", help="Fill colour")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")

    args = cast(CliArgs, ap.parse_args(argv))
    debug.set_verbose(args.verbose)

    if args.upscale < 1:
        raise ValueError("upscale must be >= 1")

    samples = load_samples_csv(args.input)
    debug_helpers.log_array("samples", samples)

    config = StrokeConfig(
        min_gap_factor=args.min_gap,
        direction_bias_vector=(args.bias_x, args.bias_y),
        direction_bias_level=args.bias_level,
        input_buffer_size=args.buffer_size,
    )
    stroke = build_stroke(
        samples,
        ContourType(args.contour),
        config,
        smooth=args.smooth,
        upscale=args.upscale,
    )
    debug_helpers.log_array("spine", stroke.spine.as_array())

    export_stroke_svg(args.output, stroke, fill=args.fill)
    print(
        f"Saved: {args.output}  vertices={len(stroke.spine)} "
        f"primitives={len(stroke.contour_path)}"
    )


if __name__ == "__main__":
    main()
