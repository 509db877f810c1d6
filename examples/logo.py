#!/usr/bin/env python3
""" The C logo! """

import clogo

if __name__ == "__main__":
    clogo.commandline_render(clogo.draw_logo, (512, 512))
