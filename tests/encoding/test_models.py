from __future__ import annotations

import dataclasses

import pytest

from mint.encoding.domain.models import Sqid, SqidsOptions
from mint.encoding.utils.constants import DEFAULT_ALPHABET


def test_sqid_string_forms() -> None:
    sqid = Sqid("86Rf07", (1, 2, 3))

    assert str(sqid) == "86Rf07"
    assert sqid.to_string() == "86Rf07"
    assert sqid.to_bytes() == b"86Rf07"
    assert sqid.to_json() == {"value": "86Rf07"}


def test_sqid_has_no_time_component() -> None:
    sqid = Sqid("Uk", (1,))

    assert sqid.timestamp is None
    assert sqid.is_sortable is False


def test_sqid_number_accessors() -> None:
    sqid = Sqid("x", [5, 10, 15])

    assert sqid.numbers == (5, 10, 15)
    assert sqid.number == 5
    assert sqid.decode() == [5, 10, 15]


def test_sqid_without_numbers() -> None:
    sqid = Sqid("test")

    assert sqid.number is None
    assert sqid.decode() == []


def test_sqid_equality_uses_string_form() -> None:
    assert Sqid("abc", (1,)).equals(Sqid("abc", (2,)))
    assert Sqid("abc").equals("abc")
    assert not Sqid("abc").equals("abd")


def test_sqid_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Sqid("abc").value = "xyz"  # type: ignore[misc]


def test_options_with_methods_return_new_instances() -> None:
    base = SqidsOptions()
    changed = base.with_alphabet("abc").with_min_length(4).with_blocklist(["foo"])

    assert base == SqidsOptions()
    assert changed == SqidsOptions(alphabet="abc", min_length=4, blocklist=("foo",))


def test_options_merge_keeps_explicit_empty_blocklist() -> None:
    defaults = SqidsOptions(alphabet="abcdef", min_length=8, blocklist=("word",))

    merged = SqidsOptions(blocklist=()).merged_over(defaults)

    assert merged == SqidsOptions(alphabet="abcdef", min_length=8, blocklist=())


def test_options_cache_key_normalises_defaults() -> None:
    assert SqidsOptions().cache_key() == SqidsOptions(alphabet=DEFAULT_ALPHABET, min_length=0).cache_key()
    assert SqidsOptions(blocklist=["B", "a"]).cache_key() == SqidsOptions(blocklist=["a", "b"]).cache_key()
    assert SqidsOptions().cache_key() != SqidsOptions(blocklist=()).cache_key()
