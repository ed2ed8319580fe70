"""
Tests for core.domain.parsing: key=value pairs, URL validation and
command construction.
"""

import pytest
from pydantic import ValidationError

from core.domain.models import GetCommand, KvPair, PostCommand
from core.domain.parsing import build_command, parse_kv_pair, validate_url
from core.errors import (
    InvalidUrlError,
    MissingSeparatorError,
    ParseError,
    UsageError,
)


# =============================================================================
# parse_kv_pair
# =============================================================================


class TestParseKvPair:
    def test_simple_pair(self):
        assert parse_kv_pair("a=1") == KvPair(key="a", value="1")

    def test_empty_value(self):
        assert parse_kv_pair("b=") == KvPair(key="b", value="")

    def test_missing_separator(self):
        with pytest.raises(MissingSeparatorError) as info:
            parse_kv_pair("a")
        assert info.value.token == "a"
        assert "a" in str(info.value)

    @pytest.mark.parametrize(
        "token",
        ["a=b=c", "=", "=x", "url=http://h/?q=1&r=2", "k==", "spaces are= kept ", "ключ=значение"],
    )
    def test_only_first_separator_splits(self, token):
        pair = parse_kv_pair(token)
        index = token.index("=")
        assert pair.key == token[:index]
        assert pair.value == token[index + 1:]

    @pytest.mark.parametrize("token", ["", "abc", "key:value", " "])
    def test_tokens_without_separator_fail(self, token):
        with pytest.raises(MissingSeparatorError):
            parse_kv_pair(token)

    def test_no_trimming(self):
        pair = parse_kv_pair(" a = 1 ")
        assert pair.key == " a "
        assert pair.value == " 1 "

    def test_value_is_required(self):
        with pytest.raises(ValidationError):
            KvPair(key="a")

    def test_pair_is_immutable(self):
        pair = parse_kv_pair("a=1")
        with pytest.raises(Exception):
            pair.key = "b"


# =============================================================================
# validate_url
# =============================================================================


class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "http://abc.xyz",
            "http://httpbin.org/post",
            "https://example.com:8443/a/b?c=d#frag",
            "http://127.0.0.1:8080/",
        ],
    )
    def test_absolute_urls_pass_unchanged(self, url):
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url",
        ["abc", "", "/path/only", "httpbin.org/post", "http://", "mailto:someone@example.com"],
    )
    def test_rejects_non_absolute(self, url):
        with pytest.raises(InvalidUrlError) as info:
            validate_url(url)
        assert info.value.url == url


# =============================================================================
# build_command
# =============================================================================


class TestBuildCommand:
    def test_get(self):
        command = build_command("get", ["http://abc.xyz"])
        assert command == GetCommand(url="http://abc.xyz")
        assert command.method == "GET"

    def test_get_invalid_url(self):
        with pytest.raises(InvalidUrlError):
            build_command("get", ["abc"])

    def test_get_requires_exactly_one_argument(self):
        with pytest.raises(UsageError):
            build_command("get", [])
        with pytest.raises(UsageError):
            build_command("get", ["http://a.b", "x=1"])

    def test_post_with_body(self):
        command = build_command("post", ["http://httpbin.org/post", "a=1", "b=2"])
        assert isinstance(command, PostCommand)
        assert command.url == "http://httpbin.org/post"
        assert command.body == (KvPair(key="a", value="1"), KvPair(key="b", value="2"))

    def test_post_without_body(self):
        command = build_command("post", ["http://httpbin.org/post"])
        assert command == PostCommand(url="http://httpbin.org/post", body=())

    def test_post_keeps_body_order_and_duplicates(self):
        command = build_command("post", ["http://h.io", "a=1", "a=2"])
        assert [p.value for p in command.body] == ["1", "2"]

    def test_post_bad_pair_short_circuits(self):
        with pytest.raises(MissingSeparatorError) as info:
            build_command("post", ["http://h.io", "a=1", "oops", "also-bad"])
        assert info.value.token == "oops"

    def test_post_invalid_url_checked_first(self):
        with pytest.raises(InvalidUrlError):
            build_command("post", ["nope", "bad"])

    def test_unknown_subcommand(self):
        with pytest.raises(UsageError):
            build_command("delete", ["http://h.io"])

    def test_all_parse_errors_share_a_base(self):
        for exc_type in (InvalidUrlError, MissingSeparatorError, UsageError):
            assert issubclass(exc_type, ParseError)
