from datetime import datetime, timedelta, timezone

import pytest

from phpgen.artifact import ArtifactBuilder, format_banner, split_open_tag
from phpgen.canonical import canonicalize
from phpgen.providers import ContentHasher, FixedClock


class TestCanonicalize:

    def test_tab_only_line_becomes_empty(self):
        assert canonicalize("a\n\t\t\nb") == "a\n\nb\n"

    def test_leading_tabs_expand_to_four_spaces(self):
        assert canonicalize("\t\tfoo") == "        foo\n"

    def test_spaces_after_leading_tab_are_kept(self):
        assert canonicalize("\t  foo") == "      foo\n"

    def test_line_starting_with_space_is_not_expanded(self):
        assert canonicalize("  foo") == "  foo\n"

    def test_line_endings_are_normalized(self):
        assert canonicalize("a\r\nb\rc") == "a\nb\nc\n"

    def test_trailing_whitespace_is_removed(self):
        assert canonicalize("a  \nb\t\n") == "a\nb\n"

    def test_outer_blank_lines_are_trimmed(self):
        assert canonicalize("\n\n  \nx\n\n\n") == "x\n"

    def test_custom_indent_width(self):
        assert canonicalize("\tx", indent=2) == "  x\n"


@pytest.fixture
def builder(clock):
    return ArtifactBuilder(clock=clock, hasher=ContentHasher("blake2b-64"))


def test_split_open_tag():
    assert split_open_tag("<?php\n\nx") == (True, "\n\nx")
    assert split_open_tag("x") == (False, "x")


def test_banner_layout(clock):
    banner = format_banner("Foo", clock.now(), "gen", "abc")
    lines = banner.split("\n")
    assert lines[0] == "/*" + "-" * 54 + f"%{int(clock.now().timestamp())}%-"
    assert lines[2] == "   Name      : Foo"
    assert lines[3] == "   Generated : 2026-10-19 12:00:00 UTC"
    assert lines[4] == "   Generator : gen"
    assert lines[6] == "   Do not edit it manually."
    assert lines[-1] == "-#abc#" + "-" * 48 + "*/"


def test_wrap_php_body(builder):
    art = builder.wrap("<?php\n\nclass Foo\n{\n\tpublic int $x;\n}\n", name="Foo", generator="gen")
    assert art.text.startswith("<?php\n\n/*")
    assert art.text.endswith("*/\n\nclass Foo\n{\n    public int $x;\n}\n")
    assert len(art.content_hash) == 16
    assert str(art) == art.text


def test_wrap_non_php_body(builder):
    art = builder.wrap("hello\n", name="note", generator="gen")
    assert art.text.startswith("/*---")
    assert art.text.endswith("*/\n\nhello\n")


def test_hash_ignores_open_tag_and_timestamp(builder):
    body = "<?php\n\nreturn 1;\n"
    first = builder.wrap(body, name="a", generator="g")
    later = ArtifactBuilder(
        clock=FixedClock(first.generated_at + timedelta(days=1)),
        hasher=ContentHasher("blake2b-64"),
    ).wrap(body, name="a", generator="g")

    assert first.content_hash == later.content_hash
    assert first.text != later.text
    assert first.content_hash == ContentHasher("blake2b-64").hexdigest("\n\nreturn 1;\n")


def test_any_change_in_body_changes_hash(builder):
    base = builder.content_hash("<?php\n\nreturn 1;\n")
    assert builder.content_hash("<?php\n\nreturn 2;\n") != base
    assert builder.content_hash("<?php\n\nreturn 1; \n") != base


def test_zone_identifier_in_timestamp():
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    try:
        zone = ZoneInfo("Europe/Berlin")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")

    moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=zone)
    banner = format_banner("x", moment, "g", "h")
    assert "Generated : 2026-01-02 03:04:05 Europe/Berlin" in banner


def test_naive_fixed_clock_is_utc():
    clock = FixedClock(datetime(2026, 1, 1))
    assert clock.now().tzinfo is timezone.utc
