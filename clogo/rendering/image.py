import math

import numpy
import PIL.Image
import PIL.ImageDraw

from .. import util
from . import surface


class ImageSurface(surface.Surface):
    """ Raster surface backed by a float RGB numpy array.

    Shapes are rasterized into coverage masks by PIL.ImageDraw at `supersample`
    (an integer factor, fractions are truncated) times the output resolution and composited onto the array, the final image
    is box filtered down to the requested size. The surface starts white. """

    def __init__(self, width, height, supersample=2):
        super().__init__(width, height)
        self.supersample = max(1, int(supersample))
        self.pixel_size = (max(1, int(math.ceil(width * self.supersample))),
                           max(1, int(math.ceil(height * self.supersample))))
        self.pixels = numpy.ones((self.pixel_size[1], self.pixel_size[0], 3),
                                 dtype=numpy.float32)

    def _scaled(self, points):
        return [(p.x * self.supersample, p.y * self.supersample) for p in points]

    def _new_mask(self):
        mask = PIL.Image.new("L", self.pixel_size, 0)
        return mask, PIL.ImageDraw.Draw(mask)

    def _composite(self, mask, color):
        coverage = numpy.asarray(mask, dtype=numpy.float32)[:, :, numpy.newaxis] / 255
        alpha = coverage * color.a
        source = numpy.array((color.r, color.g, color.b), dtype=numpy.float32) / 255

        if self.composite_operation == "lighter":
            self.pixels = numpy.minimum(self.pixels + source * alpha, 1)
        else:
            self.pixels = self.pixels * (1 - alpha) + source * alpha

    def _fill_polygons(self, polygons, color):
        mask, draw = self._new_mask()
        for polygon in polygons:
            draw.polygon(self._scaled(polygon), fill=255)
        self._composite(mask, color)

    def _stroke_polylines(self, polylines, color, width):
        mask, draw = self._new_mask()
        pixel_width = max(1, int(round(width * self.supersample)))
        for polyline in polylines:
            draw.line(self._scaled(polyline), fill=255, width=pixel_width, joint="curve")
        self._composite(mask, color)

    def pixel(self, x, y):
        """ Color of the output pixel at (x, y), averaged over the supersampled block. """
        block = self.pixels[y * self.supersample:(y + 1) * self.supersample,
                            x * self.supersample:(x + 1) * self.supersample]
        r, g, b = (numpy.mean(block, axis=(0, 1)) * 255).round().astype(int)
        return surface.Color(int(r), int(g), int(b))

    def to_image(self):
        data = (numpy.clip(self.pixels, 0, 1) * 255).round().astype(numpy.uint8)
        image = PIL.Image.fromarray(data)
        output_size = (max(1, int(round(self.width))), max(1, int(round(self.height))))
        if image.size != output_size:
            image = image.resize(output_size, PIL.Image.Resampling.BOX)
        return image


def render_pil_image(draw, size=(512, 512), supersample=2):
    width, height = size
    image_surface = ImageSurface(width, height, supersample)
    with util.status_block("drawing"):
        draw(image_surface, width, height)
    return image_surface.to_image()


def render_image(draw, filename, size=(512, 512), supersample=2):
    render_pil_image(draw, size, supersample).save(filename)
