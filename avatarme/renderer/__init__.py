"""Rendering subpackage.

Turns a fully built :class:`avatarme.identicon.Identicon` into pixels:

* A transparent square RGBA canvas sized from :class:`avatarme.config.Config`.
* One opaque filled square per entry of ``Identicon.pixel_map``.
* PNG encoding either to ``<output_dir>/<name>.png`` or to in-memory bytes.

See :mod:`avatarme.renderer.raster` for the drawing routines.
"""
