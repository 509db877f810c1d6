import abc
import collections
import colorsys
import contextlib

import PIL.ImageColor

from .. import util

COMPOSITE_OPERATIONS = ("source-over", "lighter")


class Color(collections.namedtuple("Color", "r g b a")):
    """ RGB color with integer 0-255 channels and alpha between 0 and 1.
    Channels are rounded and clamped to their range. """
    __slots__ = ()

    def __new__(cls, r, g, b, a=1):
        r, g, b = (int(util.clamp(round(c), 0, 255)) for c in (r, g, b))
        return super().__new__(cls, r, g, b, util.clamp(a, 0, 1))

    def as_hex(self):
        return "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)


def parse_color(value):
    """ Convert value to Color.

    Accepts Color instances, (r, g, b) or (r, g, b, a) tuples and any string
    that PIL.ImageColor understands (names, hex codes, "rgb(...)", "hsl(...)"). """
    if isinstance(value, Color):
        return value
    elif isinstance(value, str):
        rgb = PIL.ImageColor.getrgb(value)
        if len(rgb) == 4:
            return Color(rgb[0], rgb[1], rgb[2], rgb[3] / 255)
        return Color(*rgb)
    else:
        return Color(*value)


def hsla(h, s, l, a=1):
    """ Color from hue, saturation, lightness and alpha, all in range [0, 1]. """
    r, g, b = colorsys.hls_to_rgb(h % 1, util.clamp(l, 0, 1), util.clamp(s, 0, 1))
    return Color(round(r * 255), round(g * 255), round(b * 255), util.clamp(a, 0, 1))


class Surface(metaclass=abc.ABCMeta):
    """ Abstract 2D drawing surface with a canvas-like interface.

    Path coordinates are offset by the current translation at the moment they
    are added to the path. Subclasses only have to rasterize (or otherwise
    output) filled polygons and stroked polylines given in surface coordinates. """

    def __init__(self, width, height):
        self.width = width
        self.height = height

        self._fill_style = Color(0, 0, 0)
        self._stroke_style = Color(0, 0, 0)
        self.line_width = 1
        self._composite_operation = "source-over"
        self._offset = util.Vector2(0, 0)

        self._stack = []
        self._subpaths = []

    @property
    def fill_style(self):
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value):
        self._fill_style = parse_color(value)

    @property
    def stroke_style(self):
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value):
        self._stroke_style = parse_color(value)

    @property
    def composite_operation(self):
        return self._composite_operation

    @composite_operation.setter
    def composite_operation(self, value):
        if value not in COMPOSITE_OPERATIONS:
            raise ValueError("Unknown composite operation {!r}".format(value))
        self._composite_operation = value

    @property
    def offset(self):
        return self._offset

    def translate(self, x, y):
        self._offset = self._offset + util.Vector2(x, y)

    def save(self):
        self._stack.append((self._fill_style,
                            self._stroke_style,
                            self.line_width,
                            self._composite_operation,
                            self._offset))

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        (self._fill_style,
         self._stroke_style,
         self.line_width,
         self._composite_operation,
         self._offset) = self._stack.pop()

    @contextlib.contextmanager
    def saved(self):
        """ Save the drawing state, restore it when the block exits. """
        self.save()
        try:
            yield self
        finally:
            self.restore()

    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append([self._offset + util.Vector2(x, y)])

    def line_to(self, x, y):
        if not self._subpaths:
            self.move_to(x, y)
        else:
            self._subpaths[-1].append(self._offset + util.Vector2(x, y))

    def close_path(self):
        if self._subpaths and len(self._subpaths[-1]) > 1:
            subpath = self._subpaths[-1]
            subpath.append(subpath[0])
            self._subpaths.append([subpath[0]])

    def fill(self):
        polygons = [subpath for subpath in self._subpaths if len(subpath) >= 3]
        if polygons:
            self._fill_polygons(polygons, self._fill_style)

    def stroke(self):
        polylines = [subpath for subpath in self._subpaths if len(subpath) >= 2]
        if polylines:
            self._stroke_polylines(polylines, self._stroke_style, self.line_width)

    def fill_rect(self, x, y, w, h):
        """ Fill a rectangle without touching the current path. """
        corner = self._offset + util.Vector2(x, y)
        self._fill_polygons([[corner,
                              corner + util.Vector2(w, 0),
                              corner + util.Vector2(w, h),
                              corner + util.Vector2(0, h)]],
                            self._fill_style)

    @abc.abstractmethod
    def _fill_polygons(self, polygons, color):
        """ Fill the union of polygons (lists of Vector2 in surface coordinates)
        using the current composite operation.
        Must be overridden by subclasses. """

    @abc.abstractmethod
    def _stroke_polylines(self, polylines, color, width):
        """ Stroke polylines (lists of Vector2 in surface coordinates)
        using the current composite operation.
        Must be overridden by subclasses. """
