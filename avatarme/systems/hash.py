"""Hashing stage.

Entry point of the pipeline: turns raw input into an :class:`Identicon`
carrying the name and its MD5 digest. MD5 is used purely as a deterministic
byte spreader; collision resistance plays no part here.
"""

import hashlib
from typing import Union

from avatarme.identicon import Identicon


def hash_input(data: Union[str, bytes]) -> Identicon:
    """Hash ``data`` into a fresh identicon record.

    Args:
        data: Input string (UTF-8 encoded before hashing) or raw bytes (hashed
            as-is; the name is their UTF-8 decoding with replacement characters).

    Returns:
        Identicon: Record with ``name`` and a 16-byte ``digest`` set.
    """
    if isinstance(data, str):
        name, raw = data, data.encode("utf-8")
    else:
        name, raw = data.decode("utf-8", errors="replace"), bytes(data)
    digest = hashlib.md5(raw, usedforsecurity=False).digest()
    return Identicon(name=name, digest=digest)
