"""
SVG drawing surface.

A small imperative canvas over ``xml.etree.ElementTree``. Every ``add_*``
call appends exactly one shape to the current parent element; nothing that
was already added is ever read back or changed. ``start()`` emits the
document header (definitions, background, grid) and ``end()`` closes the
document for further additions.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pycircuitlessons.model.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLOR_ARROW,
    COLOR_BACKGROUND,
    COLOR_GRID,
    COLOR_HIGHLIGHT,
    COLOR_TEXT,
    GRID_SIZE,
    SVG_NAMESPACE,
    TEXT_FONT_FAMILY,
)

logger = logging.getLogger(__name__)


def _num(value: float) -> str:
    """Format a number compactly: 150.0 -> '150', 112.50 -> '112.5'."""
    value = round(float(value), 3)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class DrawingSurface:
    """
    Accumulates SVG primitives into an ordered document.

    Usage::

        surface = DrawingSurface(800, 600)
        surface.start()
        surface.add_circle(100, 100, 20, fill="red")
        surface.end()
        markup = surface.build()
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self._root: ET.Element | None = None
        self._stack: list[ET.Element] = []
        self._closed = False

    # ------------------------------------------------------------------
    # Document framing
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Emit the header: root element, reusable defs, background and grid."""
        if self._root is not None:
            return

        w, h = _num(self.width), _num(self.height)
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": w,
                "height": h,
                "viewBox": f"0 0 {w} {h}",
            },
        )
        defs = ET.SubElement(root, "defs")

        pattern = ET.SubElement(
            defs,
            "pattern",
            {
                "id": "grid",
                "width": _num(GRID_SIZE),
                "height": _num(GRID_SIZE),
                "patternUnits": "userSpaceOnUse",
            },
        )
        ET.SubElement(
            pattern,
            "path",
            {
                "d": f"M {GRID_SIZE} 0 L 0 0 0 {GRID_SIZE}",
                "fill": "none",
                "stroke": COLOR_GRID,
                "stroke-width": "1",
            },
        )

        glow = ET.SubElement(defs, "filter", {"id": "glow"})
        ET.SubElement(
            glow, "feGaussianBlur", {"stdDeviation": "4", "result": "coloredBlur"}
        )
        merge = ET.SubElement(glow, "feMerge")
        ET.SubElement(merge, "feMergeNode", {"in": "coloredBlur"})
        ET.SubElement(merge, "feMergeNode", {"in": "SourceGraphic"})

        marker = ET.SubElement(
            defs,
            "marker",
            {
                "id": "arrowhead",
                "markerWidth": "10",
                "markerHeight": "7",
                "refX": "9",
                "refY": "3.5",
                "orient": "auto",
            },
        )
        ET.SubElement(
            marker, "polygon", {"points": "0 0, 10 3.5, 0 7", "fill": COLOR_ARROW}
        )

        ET.SubElement(root, "rect", {"width": w, "height": h, "fill": COLOR_BACKGROUND})
        ET.SubElement(root, "rect", {"width": w, "height": h, "fill": "url(#grid)"})

        self._root = root
        self._stack = [root]

    def end(self) -> None:
        """Emit the footer. Shapes added afterwards are dropped."""
        self.start()
        self._stack = [self._root]
        self._closed = True

    def build(self) -> str:
        """Serialize the document. Calling it repeatedly yields the same text."""
        self.start()
        return ET.tostring(self._root, encoding="unicode")

    def save(self, path: str | Path) -> None:
        """Write the document as UTF-8 with an XML declaration."""
        self.start()
        tree = ET.ElementTree(self._root)
        tree.write(str(path), encoding="utf-8", xml_declaration=True)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _append(self, tag: str, attrib: dict[str, str]) -> ET.Element | None:
        self.start()
        if self._closed:
            logger.warning("Ignoring <%s> added after the document footer", tag)
            return None
        return ET.SubElement(self._stack[-1], tag, attrib)

    def add_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: str = "#ccc",
        stroke: str | None = None,
        stroke_width: float = 1,
        rx: float = 0,
    ) -> None:
        attrib = {
            "x": _num(x),
            "y": _num(y),
            "width": _num(width),
            "height": _num(height),
            "fill": fill,
        }
        if stroke is not None:
            attrib["stroke"] = stroke
            attrib["stroke-width"] = _num(stroke_width)
        if rx > 0:
            attrib["rx"] = _num(rx)
        self._append("rect", attrib)

    def add_circle(
        self,
        cx: float,
        cy: float,
        r: float,
        fill: str = "#ccc",
        stroke: str | None = None,
        stroke_width: float = 1,
        opacity: float | None = None,
    ) -> None:
        attrib = {"cx": _num(cx), "cy": _num(cy), "r": _num(r), "fill": fill}
        if stroke is not None:
            attrib["stroke"] = stroke
            attrib["stroke-width"] = _num(stroke_width)
        if opacity is not None:
            attrib["opacity"] = _num(opacity)
        self._append("circle", attrib)

    def add_ellipse(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        fill: str = "#ccc",
        stroke: str | None = None,
        stroke_width: float = 1,
        opacity: float | None = None,
    ) -> None:
        attrib = {
            "cx": _num(cx),
            "cy": _num(cy),
            "rx": _num(rx),
            "ry": _num(ry),
            "fill": fill,
        }
        if stroke is not None:
            attrib["stroke"] = stroke
            attrib["stroke-width"] = _num(stroke_width)
        if opacity is not None:
            attrib["opacity"] = _num(opacity)
        self._append("ellipse", attrib)

    def add_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        stroke: str = "#333",
        stroke_width: float = 2,
        linecap: str | None = None,
        marker_end: str | None = None,
        filter: str | None = None,
    ) -> None:
        """
        Add a straight line. Zero-length lines are emitted as given.

        Args:
            linecap: Optional ``stroke-linecap`` value, e.g. "round".
            marker_end: Id of a marker in the defs, e.g. "arrowhead".
            filter: Id of a filter in the defs, e.g. "glow".
        """
        attrib = {
            "x1": _num(x1),
            "y1": _num(y1),
            "x2": _num(x2),
            "y2": _num(y2),
            "stroke": stroke,
            "stroke-width": _num(stroke_width),
        }
        if linecap is not None:
            attrib["stroke-linecap"] = linecap
        if marker_end is not None:
            attrib["marker-end"] = f"url(#{marker_end})"
        if filter is not None:
            attrib["filter"] = f"url(#{filter})"
        self._append("line", attrib)

    def add_path(
        self,
        d: str,
        fill: str | None = None,
        stroke: str | None = None,
        stroke_width: float = 2,
        filter: str | None = None,
    ) -> None:
        attrib = {"d": d, "fill": fill if fill is not None else "none"}
        if stroke is not None:
            attrib["stroke"] = stroke
            attrib["stroke-width"] = _num(stroke_width)
        if filter is not None:
            attrib["filter"] = f"url(#{filter})"
        self._append("path", attrib)

    def add_cubic(
        self,
        start: tuple[float, float],
        control1: tuple[float, float],
        control2: tuple[float, float],
        end: tuple[float, float],
        stroke: str = "#333",
        stroke_width: float = 2,
        filter: str | None = None,
    ) -> None:
        """Add a single cubic bezier segment from *start* to *end*."""
        d = (
            f"M {_num(start[0])} {_num(start[1])} "
            f"C {_num(control1[0])} {_num(control1[1])}, "
            f"{_num(control2[0])} {_num(control2[1])}, "
            f"{_num(end[0])} {_num(end[1])}"
        )
        self.add_path(d, None, stroke, stroke_width, filter)

    def add_text(
        self,
        x: float,
        y: float,
        text: str,
        font_size: int = 16,
        fill: str = COLOR_TEXT,
        anchor: str = "middle",
        weight: str | None = None,
    ) -> None:
        attrib = {
            "x": _num(x),
            "y": _num(y),
            "font-size": _num(font_size),
            "fill": fill,
            "text-anchor": anchor,
            "font-family": TEXT_FONT_FAMILY,
        }
        if weight is not None:
            attrib["font-weight"] = weight
        element = self._append("text", attrib)
        if element is not None:
            element.text = text

    @contextmanager
    def group(
        self,
        transform: str | None = None,
        filter: str | None = None,
        css_class: str | None = None,
        element_id: str | None = None,
    ) -> Iterator[None]:
        """
        Wrap every shape added inside the ``with`` block in a ``<g>``.

        Example::

            with surface.group(css_class="component led", element_id="led1"):
                surface.add_circle(10, 10, 5)
        """
        attrib: dict[str, str] = {}
        if element_id is not None:
            attrib["id"] = element_id
        if css_class is not None:
            attrib["class"] = css_class
        if transform is not None:
            attrib["transform"] = transform
        if filter is not None:
            attrib["filter"] = f"url(#{filter})"

        element = self._append("g", attrib)
        if element is None:
            yield
            return

        self._stack.append(element)
        try:
            yield
        finally:
            if self._stack and self._stack[-1] is element:
                self._stack.pop()

    def add_highlight_box(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str = COLOR_HIGHLIGHT,
    ) -> None:
        """Add a dashed, glowing outline used to mark the current step's parts."""
        self._append(
            "rect",
            {
                "x": _num(x),
                "y": _num(y),
                "width": _num(width),
                "height": _num(height),
                "fill": "none",
                "stroke": color,
                "stroke-width": "3",
                "stroke-dasharray": "8,4",
                "rx": "8",
                "filter": "url(#glow)",
                "class": "highlight",
            },
        )

    def add_arrow(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: str = COLOR_ARROW,
        label: str | None = None,
    ) -> None:
        """Add an arrowed line with an optional label above its midpoint."""
        self.add_line(x1, y1, x2, y2, color, 3, marker_end="arrowhead")
        if label is not None:
            mid_x = (x1 + x2) / 2
            mid_y = (y1 + y2) / 2
            self.add_text(mid_x, mid_y - 10, label, 14, color, "middle", "bold")
