"""Tests for URL template substitution."""

import pytest

from orgit.api.link.ErrorKind import ErrorKind
from orgit.api.link.MalformedTemplate import MalformedTemplate
from orgit.api.link.substitute import substitute


def test_substitute_binds_name_and_revision():
    assert substitute("%n/%r", {"n": "a/b", "r": "v1"}) == "a/b/v1"


def test_substitute_double_percent_is_literal():
    assert substitute("100%%", {}) == "100%"


def test_substitute_double_percent_before_bound_letter():
    """'%%r' is a literal '%' followed by 'r', not a placeholder."""
    assert substitute("%%r", {"r": "x"}) == "%r"


def test_substitute_unbound_placeholder_raises():
    with pytest.raises(MalformedTemplate, match="'%x'") as exc_info:
        substitute("%x", {})
    assert exc_info.value.kind is ErrorKind.MALFORMED_TEMPLATE


def test_substitute_trailing_percent_raises():
    with pytest.raises(MalformedTemplate, match="lone '%'"):
        substitute("https://example.com/%", {"r": "v1"})


def test_substitute_revision_without_binding_raises():
    with pytest.raises(MalformedTemplate):
        substitute("https://example.com/%r", {"n": "a/b"})


def test_substitute_inserts_values_verbatim():
    """Bound values are not re-scanned for placeholders."""
    assert substitute("%r", {"r": "%n%%"}) == "%n%%"


def test_substitute_repeats_placeholder():
    assert substitute("%r..%r", {"r": "v2"}) == "v2..v2"


def test_substitute_without_placeholders_is_identity():
    assert substitute("https://example.com/", {}) == "https://example.com/"
