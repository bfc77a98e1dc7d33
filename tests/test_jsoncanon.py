from __future__ import annotations

import math

import pytest

from contracts.jsoncanon import jcs_dump, jcs_sha256


def test_canonical_order_and_numbers():
    payload_a = {"b": 2, "a": 1.0}
    payload_b = {"a": 1, "b": 2}
    assert jcs_dump(payload_a) == jcs_dump(payload_b)
    assert jcs_sha256(payload_a) == jcs_sha256(payload_b)


def test_tuples_dump_like_lists():
    assert jcs_dump({"grid": (1, 0, 3)}) == b'{"grid":[1,0,3]}'


def test_digest_format():
    digest = jcs_sha256({"size": 9})
    assert digest.startswith("sha256-")
    assert len(digest) == len("sha256-") + 64


def test_rejects_nan():
    with pytest.raises(ValueError):
        jcs_dump({"value": math.nan})


def test_rejects_unknown_types():
    with pytest.raises(TypeError):
        jcs_dump({"value": object()})
