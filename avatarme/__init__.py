"""avatarme
========

Deterministic identicon generation.

An input string is hashed, the digest is expanded into a mirrored 5×5 grid,
even-valued cells are kept, and each kept cell is drawn as a filled square
on a PNG canvas. Every stage is a pure ``Identicon -> Identicon`` function;
see :mod:`avatarme.pipeline` for how they are chained::

    from avatarme.pipeline import create_identicon

    create_identicon("banana")  # writes ./banana.png
"""
