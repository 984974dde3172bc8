"""Tests for raw URL derivation."""

from resource_hub.utils.urls import raw_url


def test_raw_url_rewrites_github_tree_url():
    assert raw_url("https://github.com/a/b/tree/main/c") == "https://raw.githubusercontent.com/a/b/main/c"


def test_raw_url_applies_rules_regardless_of_order():
    assert raw_url("/tree/x/github.com") == "/x/raw.githubusercontent.com"


def test_raw_url_leaves_other_urls_unchanged():
    url = "https://gitlab.com/a/b/-/blob/main/c.yaml"
    assert raw_url(url) == url
    assert raw_url("") == ""


def test_raw_url_is_idempotent_on_raw_urls():
    once = raw_url("https://github.com/tektoncd/catalog/tree/main/task/buildah/0.1/buildah.yaml")
    assert once == "https://raw.githubusercontent.com/tektoncd/catalog/main/task/buildah/0.1/buildah.yaml"
    assert raw_url(once) == once


def test_raw_url_is_single_pass():
    """Text produced by a replacement is not rescanned."""
    assert raw_url("a/tree/tree/b") == "a/tree/b"
