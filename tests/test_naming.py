"""Tests for the naming module."""

from clientgen.naming import (
    accessor_key,
    module_path,
    sanitize_segment,
    sanitized_segments,
    split_path,
)


class TestSanitizeSegment:
    """Test path segment sanitization."""

    def test_plain_segment_unchanged(self):
        assert sanitize_segment("users") == "users"

    def test_param(self):
        assert sanitize_segment("{id}") == "_param_id"

    def test_param_named_param(self):
        assert sanitize_segment("{param}") == "_param_param"

    def test_embedded_param(self):
        assert sanitize_segment("file.{ext}") == "file._param_ext"

    def test_idempotent(self):
        once = sanitize_segment("{userId}")
        assert sanitize_segment(once) == once


class TestSplitPath:
    """Test path template splitting."""

    def test_strips_single_leading_slash(self):
        assert split_path("/users/{id}") == ["users", "{id}"]

    def test_root(self):
        assert split_path("/") == [""]

    def test_only_one_slash_stripped(self):
        assert split_path("//a") == ["", "a"]


class TestAccessorAndModulePath:
    """Location and accessor must be built from the same segments."""

    def test_accessor_key(self):
        assert accessor_key(("users", "_param_id")) == "['users']['_param_id']"

    def test_module_path(self):
        assert module_path(("users", "_param_id")) == "users/_param_id"

    def test_location_and_accessor_agree(self):
        segments = sanitized_segments("/orgs/{org}/repos/{repo}")
        assert module_path(segments) == "orgs/_param_org/repos/_param_repo"
        assert accessor_key(segments) == (
            "['orgs']['_param_org']['repos']['_param_repo']"
        )
