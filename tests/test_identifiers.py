from __future__ import annotations

import random
import re

from handykit import generate_uuid

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


def test_uuid_shape() -> None:
    for _ in range(200):
        value = generate_uuid()
        assert len(value) == 36
        assert UUID_PATTERN.match(value), value


def test_uuid_is_reproducible_with_seeded_rng() -> None:
    assert generate_uuid(random.Random(7)) == generate_uuid(random.Random(7))
    assert generate_uuid(random.Random(7)) != generate_uuid(random.Random(8))


def test_uuids_differ() -> None:
    assert len({generate_uuid() for _ in range(100)}) == 100
