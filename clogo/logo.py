""" The "C" ribbon logo.

The logo is a ribbon of triangles following an elliptical arc, drawn with
additive blending over a dark square backdrop. Geometry is built by pure
functions, `draw_logo` only issues drawing calls on a Surface. """

import math
import collections

from . import util
from .rendering import surface

LogoParams = collections.namedtuple("LogoParams", [
    "ellipse_padding",  # Backdrop inset, fraction of min(width, height)
    "horizontal_size",  # Width of the arc, fraction of width
    "vertical_size",  # Height of the arc, fraction of height
    "angle_start",
    "angle_stop",
    "segment_count",  # Number of centerline points
    "stroke_width",  # Ribbon half width, fraction of min(width, height)
    "outline_width",  # Outline line width, fraction of min(width, height)
    "ribbon_offset",  # Horizontal shift of the ribbon, fraction of width
    "triangle_inset",  # Shrink of ribbon triangles, fraction of min(width, height)
    "background_color",
    "backdrop_color",
    "ribbon_color",
    "outline_color",
    "centerline_color",  # None disables drawing the centerline
])


DEFAULT_PARAMS = LogoParams(
    ellipse_padding=0.03,
    horizontal_size=0.55,
    vertical_size=0.65,
    angle_start=math.pi / 4,
    angle_stop=math.pi * 2 - math.pi / 4,
    segment_count=9,
    stroke_width=0.06,
    outline_width=0.006,
    ribbon_offset=0.05,
    triangle_inset=0,
    background_color="white",
    backdrop_color="black",
    ribbon_color="crimson",
    outline_color="black",
    centerline_color=None,
)

SHIMMER_HUE = 0.15
SHIMMER_MAX_ALPHA = 0.25


def build_centerline(width, height, params=DEFAULT_PARAMS):
    """ Sample the arc of the C.

    Points go by increasing angle, y axis points down so the angle grows
    counter clockwise on screen. The gap between angle_stop and angle_start
    is the opening of the C. """
    count = params.segment_count
    if count < 2:
        raise ValueError("Centerline needs at least two segments, got {}".format(count))

    center = util.Vector2(width / 2, height / 2)
    radius_x = width * params.horizontal_size / 2
    radius_y = height * params.vertical_size / 2
    step = (params.angle_stop - params.angle_start) / (count - 1)

    centerline = util.Polyline()
    for i in range(count):
        angle = params.angle_start + i * step
        centerline.append(center.x + radius_x * math.cos(angle),
                          center.y - radius_y * math.sin(angle))
    return centerline


def build_ribbon_outline(centerline, half_width):
    """ Offset every centerline point to both sides along its tangent.
    Points alternate outer, inner, outer, inner ... """
    outline = util.Polyline()
    for i, p in enumerate(centerline):
        t = centerline.tangent(i)
        outer = p + t * half_width
        inner = p - t * half_width
        outline.append(outer.x, outer.y)
        outline.append(inner.x, inner.y)
    return outline


def triangulate_ribbon(outline):
    """ Triangle strip over consecutive outline points.
    Consecutive triangles have opposite winding, fills don't care. """
    triangles = util.TriangleMesh()
    for i in range(len(outline) - 2):
        triangles.append(outline[i], outline[i + 1], outline[i + 2])
    return triangles


def shimmer(seed):
    """ Deterministic pseudo random value in [0, 1] for a given seed """
    return math.sin(seed * 1451331.814145) / 2 + 0.5


def draw_polyline(surf, polyline):
    """ Stroke polyline with the current stroke style of the surface """
    if len(polyline) < 2:
        raise util.InvalidGeometryError(
            "Polyline contains no lines, {} points total".format(len(polyline))
        )

    surf.begin_path()
    it = iter(polyline)
    first = next(it)
    surf.move_to(first.x, first.y)
    for p in it:
        surf.line_to(p.x, p.y)
    surf.stroke()


def draw_triangle(surf, triangle, seed):
    """ Fill triangle with the current fill style, then overlay it with
    a translucent highlight whose alpha depends on seed.
    Leaves the fill style set to the highlight color. """
    surf.begin_path()
    surf.move_to(triangle.a.x, triangle.a.y)
    surf.line_to(triangle.b.x, triangle.b.y)
    surf.line_to(triangle.c.x, triangle.c.y)
    surf.fill()

    surf.fill_style = surface.hsla(SHIMMER_HUE, 1, 0.5, shimmer(seed) * SHIMMER_MAX_ALPHA)
    surf.fill()


def draw_logo(surf, width, height, params=DEFAULT_PARAMS):
    """ Draw the whole logo onto surf, covering the area (0, 0) - (width, height).

    Drawing state of the surface is left as it was before the call.
    Returns the triangle mesh of the ribbon. """
    base_size = min(width, height)

    with surf.saved():
        surf.fill_style = params.background_color
        surf.fill_rect(0, 0, width, height)

        padding = base_size * params.ellipse_padding
        surf.fill_style = params.backdrop_color
        surf.fill_rect(padding, padding, width - padding * 2, height - padding * 2)

        centerline = build_centerline(width, height, params)
        outline = build_ribbon_outline(centerline, base_size * params.stroke_width)
        triangles = triangulate_ribbon(outline)
        if params.triangle_inset:
            triangles.shrink_by(base_size * params.triangle_inset)

        surf.composite_operation = "lighter"
        surf.translate(params.ribbon_offset * width, 0)

        for i, triangle in enumerate(triangles):
            surf.fill_style = params.ribbon_color
            draw_triangle(surf, triangle, i)

        surf.composite_operation = "source-over"
        surf.stroke_style = params.outline_color
        surf.line_width = params.outline_width * base_size
        draw_polyline(surf, outline)

        if params.centerline_color is not None:
            surf.stroke_style = params.centerline_color
            draw_polyline(surf, centerline)

    return triangles
