"""Rendering subpackage.

Turns parsed render instructions into an SVG fragment. The renderer focuses on:

* A single left-to-right pass with a running horizontal cursor.
* Sideways (called) tiles drawn through a fixed ``rotate(-90)`` transform,
  with their origins computed in the rotated frame.
* Deterministic, byte-identical output for identical inputs.

See :mod:`mahjong_svg.renderer.svg` for the layout fold and markup writer.
"""
