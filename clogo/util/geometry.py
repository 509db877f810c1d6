import math
import collections
import numbers

from . import types


class InvalidGeometryError(ValueError):
    """ Geometry is too degenerate for the requested operation
    (zero length vectors, polylines without any segments). """


class Vector2(collections.namedtuple("Vector2", "x y")):
    __slots__ = ()

    def __new__(cls, x=0, y=0):
        if not isinstance(x, numbers.Real):
            x = 0
        if not isinstance(y, numbers.Real):
            y = 0
        return super().__new__(cls, x, y)

    def __str__(self):
        return "Vector2({},{})".format(self.x, self.y)

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        return Vector2(self.x * other, self.y * other)

    def __truediv__(self, other):
        return Vector2(self.x / other, self.y / other)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __pos__(self):
        return self

    def __abs__(self):
        return math.sqrt(self.abs_squared())

    def abs_squared(self):
        return self.dot(self)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def add(self, other):
        return self + other

    def scale(self, factor):
        return self * factor

    def normalized(self):
        length = abs(self)
        if length == 0:
            raise InvalidGeometryError("Cannot normalize a zero length vector")
        return self / length

    def perpendicular(self):
        """ Vector rotated by 90 degrees clockwise in y-up coordinates
        (counter clockwise on screen). """
        return Vector2(self.y, -self.x)


def perpendicular_direction(a, b):
    """ Unit vector perpendicular to the segment from a to b. """
    return (b - a).perpendicular().normalized()


class Polyline:
    """ Ordered sequence of points.
    The order defines the direction of the path and which points are adjacent. """

    def __init__(self):
        self.points = []

    @classmethod
    def from_points(cls, points):
        ret = cls()
        for p in points:
            ret.append(*types.wrap_vector_like(p))
        return ret

    def append(self, x, y):
        if isinstance(x, bool) or not isinstance(x, numbers.Real):
            raise TypeError("'x' is not a number")
        if isinstance(y, bool) or not isinstance(y, numbers.Real):
            raise TypeError("'y' is not a number")
        self.points.append(Vector2(x, y))

    def size(self):
        return len(self.points)

    def at(self, i):
        return self.points[i]

    def __len__(self):
        return len(self.points)

    def __getitem__(self, i):
        return self.points[i]

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return "Polyline({})".format(", ".join(str(p) for p in self.points))

    def tangent(self, i):
        """ Direction perpendicular to the path at point i.

        End points use the single adjacent segment, interior points the
        renormalized average of both adjacent segments. """
        n = len(self.points)
        if n < 2:
            raise InvalidGeometryError(
                "Tangent needs at least two points, polyline has {}".format(n)
            )
        if not 0 <= i < n:
            raise IndexError("Point index {} out of range".format(i))

        if i == 0:
            return perpendicular_direction(self.points[0], self.points[1])
        elif i == n - 1:
            return perpendicular_direction(self.points[i - 1], self.points[i])
        else:
            t1 = perpendicular_direction(self.points[i - 1], self.points[i])
            t2 = perpendicular_direction(self.points[i], self.points[i + 1])
            return ((t1 + t2) / 2).normalized()


class Triangle:
    def __init__(self, a, b, c):
        self.a = types.wrap_vector_like(a)
        self.b = types.wrap_vector_like(b)
        self.c = types.wrap_vector_like(c)

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c

    def __repr__(self):
        return "Triangle({}, {}, {})".format(self.a, self.b, self.c)

    def centroid(self):
        return (self.a + self.b + self.c) / 3

    def shrink_by(self, pixels):
        """ Move every vertex by `pixels` towards the centroid, in place.

        The distance is measured along each vertex's own direction to the
        centroid, so the inset of the edges depends on the triangle shape. """
        centroid = self.centroid()
        self.a = self.a + (centroid - self.a).normalized() * pixels
        self.b = self.b + (centroid - self.b).normalized() * pixels
        self.c = self.c + (centroid - self.c).normalized() * pixels


class TriangleMesh:
    """ Ordered sequence of triangles, insertion order is the drawing order. """

    def __init__(self):
        self.triangles = []

    def append(self, a, b, c):
        self.triangles.append(Triangle(a, b, c))

    def size(self):
        return len(self.triangles)

    def at(self, i):
        return self.triangles[i]

    def __len__(self):
        return len(self.triangles)

    def __getitem__(self, i):
        return self.triangles[i]

    def __iter__(self):
        return iter(self.triangles)

    def shrink_by(self, pixels):
        for triangle in self.triangles:
            triangle.shrink_by(pixels)
