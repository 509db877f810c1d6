from . import util
from . import rendering

from .rendering import commandline_render
from .logo import draw_logo, LogoParams, DEFAULT_PARAMS

# pylama:ignore=W0611
