import sys
import os
import argparse
import importlib

import PIL.Image

from .surface import Surface, Color, parse_color, hsla


def commandline_render(draw, default_size=(512, 512), argv=None):
    """ Reads commandline arguments, chooses a renderer and passes the parameters to it.

    `draw` is called as `draw(surface, width, height)`. """

    parser = argparse.ArgumentParser(description='Render a drawing')
    parser.add_argument('--output', '-o',
                        help='File name of the output.')
    parser.add_argument('--renderer', '-r', choices=_renderers,
                        help='Renderer to use.')
    parser.add_argument('--width', type=int, default=default_size[0],
                        help='Width of the output.')
    parser.add_argument('--height', type=int, default=default_size[1],
                        help='Height of the output.')

    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    renderer = args.renderer

    if args.output is not None:
        output = args.output
        if renderer is None:
            extension = os.path.splitext(output)[1].lower()
            try:
                renderer = _extensions[extension]
            except KeyError:
                raise ValueError("Don't know how to render to a {!r} file".format(extension))
    else:
        if renderer is None:
            renderer = "image"
        output = "output" + _renderers[renderer][1]

    _render_one(renderer, draw, output, (args.width, args.height))
    return output


def _render_one(renderer, draw, output, size):
    print("Rendering with renderer {} to file {}".format(renderer, output))
    _renderers[renderer][0](draw, filename=output, size=size)


def _register(name, module_name, extensions, default_extension=None):
    module = importlib.import_module("." + module_name, __name__)

    if default_extension is None and len(extensions):
        default_extension = extensions[0]

    for extension in extensions:
        _extensions[extension] = name

    setattr(sys.modules[__name__], module_name, module)
    _renderers[name] = (getattr(module, "render_" + name), default_extension)


_renderers = {}
_extensions = {}

PIL.Image.init()

_register("image", "image", list(PIL.Image.registered_extensions()), ".png")
_register("svg", "svg", [".svg"])
