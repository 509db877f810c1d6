from .. import util
from . import surface


def _path_data(subpaths, closed):
    parts = []
    for points in subpaths:
        it = iter(points)
        p = next(it)
        parts.append("M{:.6g},{:.6g}".format(p.x, p.y))
        for p in it:
            parts.append("L{:.6g},{:.6g}".format(p.x, p.y))
        if closed:
            parts.append("Z")
    return "".join(parts)


class SvgSurface(surface.Surface):
    """ Surface collecting SVG path elements.
    "lighter" compositing is expressed as the plus-lighter blend mode. """

    def __init__(self, width, height):
        super().__init__(width, height)
        self.elements = []

    def _blend_style(self):
        if self.composite_operation == "lighter":
            return ' style="mix-blend-mode:plus-lighter"'
        else:
            return ""

    def _fill_polygons(self, polygons, color):
        self.elements.append(
            '<path d="{}" fill="{}" fill-opacity="{:.6g}"{}/>'.format(
                _path_data(polygons, True), color.as_hex(), color.a, self._blend_style()
            )
        )

    def _stroke_polylines(self, polylines, color, width):
        self.elements.append(
            '<path d="{}" fill="none" stroke="{}" stroke-opacity="{:.6g}" '
            'stroke-width="{:.6g}" stroke-linejoin="round"{}/>'.format(
                _path_data(polylines, False), color.as_hex(), color.a, width, self._blend_style()
            )
        )

    def write(self, fp):
        fp.write('<svg xmlns="http://www.w3.org/2000/svg" ')
        fp.write('width="{:.6g}" height="{:.6g}" '.format(self.width, self.height))
        fp.write('viewBox="0 0 {:.6g} {:.6g}">'.format(self.width, self.height))
        fp.write('<g style="isolation:isolate">')
        for element in self.elements:
            fp.write(element)
        fp.write('</g>')
        fp.write('</svg>')


def render_svg(draw, filename, size=(512, 512)):
    width, height = size
    svg_surface = SvgSurface(width, height)
    with util.status_block("drawing"):
        draw(svg_surface, width, height)

    with open(filename, "w") as fp:
        svg_surface.write(fp)
