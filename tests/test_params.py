"""Tests for request parameter and path helpers."""

import pytest

from mailgunner.params import encode_path_segment, expand_params, merge_params


class TestExpandParams:
    def test_preserves_mapping_order(self):
        assert list(expand_params({"limit": 2, "skip": 1}).items()) == [
            ("limit", "2"),
            ("skip", "1"),
        ]

    def test_list_values_keep_element_order(self):
        assert expand_params({"event": ["sent", "opened", "clicked"]}) == {
            "event": ["sent", "opened", "clicked"],
        }

    def test_tuple_values(self):
        assert expand_params({"event": ("sent", "opened")}) == {"event": ["sent", "opened"]}

    def test_any_sequence_is_expanded(self):
        assert expand_params({"limit": range(1, 4)}) == {"limit": ["1", "2", "3"]}

    def test_strings_are_scalars(self):
        assert expand_params({"event": "sent"}) == {"event": "sent"}

    def test_none_is_dropped(self):
        assert expand_params({"skip": None, "limit": 10}) == {"limit": "10"}

    def test_booleans(self):
        assert expand_params({"o:testmode": True, "o:tracking": False}) == {
            "o:testmode": "true",
            "o:tracking": "false",
        }

    @pytest.mark.parametrize("params", [None, {}])
    def test_empty(self, params):
        assert expand_params(params) == {}


class TestPathSegment:
    def test_email_address(self):
        assert encode_path_segment("ev@mailgun.net") == "ev%40mailgun.net"

    def test_slash_is_encoded(self):
        assert encode_path_segment("a/b") == "a%2Fb"

    def test_plain_id_unchanged(self):
        assert encode_path_segment("4f3bad2335335426750048c6") == "4f3bad2335335426750048c6"


class TestMergeParams:
    def test_keywords_follow_mapping(self):
        merged = merge_params({"skip": 1}, {"limit": 2})

        assert list(merged.items()) == [("skip", 1), ("limit", 2)]

    def test_none_mapping(self):
        assert merge_params(None, {}) == {}
