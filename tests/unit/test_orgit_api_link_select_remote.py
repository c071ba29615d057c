"""Tests for public remote selection."""

import pytest

from orgit.api.link.select_remote import select_remote


@pytest.mark.parametrize(
    ("preferred", "default"),
    [
        (None, "origin"),
        ("upstream", "origin"),
        ("does-not-exist", "also-missing"),
        ("", ""),
    ],
)
def test_single_remote_always_wins(preferred, default):
    assert select_remote(["fork"], preferred, default) == "fork"


@pytest.mark.parametrize("preferred", [None, "origin", "upstream"])
def test_no_remotes_selects_nothing(preferred):
    assert select_remote([], preferred, "origin") is None


def test_preferred_override_beats_default():
    assert select_remote(["origin", "upstream"], "upstream", "origin") == "upstream"


def test_unknown_override_falls_through_to_default():
    assert select_remote(["origin", "upstream"], "mirror", "origin") == "origin"


def test_default_used_without_override():
    assert select_remote(["upstream", "origin"], None, "origin") == "origin"


def test_ambiguous_remotes_without_usable_names():
    assert select_remote(["a", "b"], "c", "origin") is None
