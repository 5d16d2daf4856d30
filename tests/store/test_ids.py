"""Tests for loose id comparison and id generation."""

import pytest

from eventgraph.store.ids import ids_match, new_record_id


class TestIdsMatch:
    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (1, 1),
            (1, "1"),
            ("1", 1),
            (" 1 ", 1),
            (1, "1.0"),
            (1.0, 1),
            ("abc", "abc"),
            (0, ""),
            (True, 1),
            (1, "0x1"),
            (255, "0XFF"),
            (5, "0b101"),
            (8, "0o10"),
            (1, ".1e1"),
            (float("inf"), "Infinity"),
            (None, None),
        ],
    )
    def test_matching_ids(self, left, right) -> None:
        assert ids_match(left, right)

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (1, 2),
            ("1", "01"),
            ("1", " 1"),
            (1, "one"),
            (1, "1_0"),
            (None, 0),
            ("", None),
            ("abc", "ABC"),
            (float("nan"), "nan"),
            (float("inf"), "inf"),
            (1, "0x 1"),
            (16, "0x1_0"),
            (-1, "-0x1"),
            (2, "0b2"),
        ],
    )
    def test_non_matching_ids(self, left, right) -> None:
        assert not ids_match(left, right)

    def test_string_compared_with_number_is_coerced(self) -> None:
        # Two strings are never coerced, a string and a number always are
        assert ids_match(10, "010")
        assert not ids_match("10", "010")


class TestNewRecordId:
    def test_ids_are_strings(self) -> None:
        assert isinstance(new_record_id(), str)

    def test_ids_are_unique(self) -> None:
        ids = {new_record_id() for _ in range(500)}
        assert len(ids) == 500

    def test_generated_id_never_matches_seed_integer(self) -> None:
        generated = new_record_id()
        assert not any(ids_match(generated, n) for n in range(1, 51))
