"""Random identifier generation."""
from __future__ import annotations

import random
from typing import Optional

UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def generate_uuid(rng: Optional[random.Random] = None) -> str:
    """
    Return a random version 4 style identifier such as
    ``"3b241101-e2bb-4255-8caf-4136c566a962"``.

    Digits come from :mod:`random`, so the result is not suitable for
    secrets; use :func:`uuid.uuid4` or :mod:`secrets` for that.
    """
    source = rng or random
    chars = []
    for char in UUID_TEMPLATE:
        if char == "x":
            chars.append(format(source.getrandbits(4), "x"))
        elif char == "y":
            chars.append(format(source.getrandbits(2) | 0x8, "x"))
        else:
            chars.append(char)
    return "".join(chars)
