from __future__ import annotations

import svgwrite  # type: ignore[reportMissingTypeStubs]

from .path import ShapePath
from .pen_path import PenStroke


class SvgRenderer:
    """Renderer that collects drawn paths as filled SVG <path> elements.

    Paths are converted when drawn, so a ``last_segment`` cleared right
    after drawing is still rendered.
    """

    def __init__(
        self,
        fill: str = "#000000",
        opacity: float | None = None,
    ) -> None:
        self.fill = fill
        self.opacity = opacity
        self.layers: list[str] = []
        self._extent: tuple[float, float, float, float] | None = None

    def __len__(self) -> int:
        return len(self.layers)

    def draw_path(self, path: ShapePath) -> None:
        d = path.to_svg_d()
        if not d:
            return
        self.layers.append(d)
        b = path.bounds()
        if b is None:
            return
        if self._extent is None:
            self._extent = b
        else:
            e = self._extent
            self._extent = (
                min(e[0], b[0]),
                min(e[1], b[1]),
                max(e[2], b[2]),
                max(e[3], b[3]),
            )

    def clear(self) -> None:
        self.layers.clear()
        self._extent = None

    def _drawing(
        self,
        out_path: str,
        viewbox: tuple[float, float, float, float] | None,
        canvas_size: tuple[float, float] | tuple[str, str] | None,
        pad: float,
    ) -> svgwrite.Drawing:
        # Determine viewBox from drawn geometry if not provided
        if viewbox is None:
            if self._extent is None:
                viewbox = (0.0, 0.0, 0.0, 0.0)
            else:
                minx, miny, maxx, maxy = self._extent
                viewbox = (
                    float(minx - pad),
                    float(miny - pad),
                    float((maxx - minx) + 2 * pad),
                    float((maxy - miny) + 2 * pad),
                )

        if canvas_size is None:
            dwg = svgwrite.Drawing(out_path, profile="tiny", debug=False)
        else:
            dwg = svgwrite.Drawing(
                out_path, profile="tiny", size=canvas_size, debug=False
            )
        dwg.attribs["viewBox"] = f"{viewbox[0]} {viewbox[1]} {viewbox[2]} {viewbox[3]}"

        kwargs: dict[str, object] = {"fill": self.fill, "fill_rule": "nonzero"}
        if self.opacity is not None:
            kwargs["fill_opacity"] = self.opacity
        for d in self.layers:
            dwg.add(dwg.path(d=d, **kwargs))
        return dwg

    def to_string(
        self,
        viewbox: tuple[float, float, float, float] | None = None,
        pad: float = 0.0,
    ) -> str:
        return self._drawing("noname.svg", viewbox, None, pad).tostring()

    def save(
        self,
        out_path: str,
        viewbox: tuple[float, float, float, float] | None = None,
        canvas_size: tuple[float, float] | tuple[str, str] | None = None,
        pad: float = 0.0,
    ) -> None:
        self._drawing(out_path, viewbox, canvas_size, pad).save()


def export_stroke_svg(
    out_path: str,
    stroke: PenStroke,
    fill: str = "#000000",
    canvas_size: tuple[float, float] | tuple[str, str] | None = None,
) -> None:
    """Write the stroke outline as one filled path, framed by its bounds."""
    renderer = SvgRenderer(fill=fill)
    stroke.draw(renderer)
    viewbox = stroke.bounds.as_viewbox() if not stroke.is_empty else None
    renderer.save(out_path, viewbox=viewbox, canvas_size=canvas_size)
