"""
Tests for the meta.txt, tags and stats parsers.
"""
from contentgen.utils.parsing import coerce_number, parse_meta_text, parse_stats, parse_tags, split_meta_text


class TestMetaText:
    def test_header_and_body(self):
        meta = parse_meta_text("title: Drone\ndate: 2024-05-01\n---\n\nBuilt in a week.\n\n")
        assert meta == {"title": "Drone", "date": "2024-05-01", "description": "Built in a week."}

    def test_only_first_delimiter_splits(self):
        text = "title: X\n---\nfirst part\n---\nsecond part\n"
        meta = parse_meta_text(text)
        assert meta["description"] == "first part\n---\nsecond part"
        assert set(meta) == {"title", "description"}

    def test_no_delimiter_means_header_only(self):
        meta = parse_meta_text("title: X\nstatus: done\n")
        assert meta == {"title": "X", "status": "done", "description": ""}

    def test_delimiter_must_be_on_its_own_line(self):
        header, body = split_meta_text("title: a---b\nnote: ---\n")
        assert body == ""
        assert parse_meta_text("title: a---b")["title"] == "a---b"

    def test_leading_delimiter_is_not_a_split(self):
        # needs a newline before it
        assert parse_meta_text("---\nbody")["description"] == ""

    def test_crlf_documents(self):
        meta = parse_meta_text("title: Win\r\nrole: Head\r\n---\r\nBody text\r\n")
        assert meta == {"title": "Win", "role": "Head", "description": "Body text"}

    def test_keys_and_values_are_trimmed_and_split_on_first_colon(self):
        meta = parse_meta_text("  links :  https://example.org/a:b  \n")
        assert meta["links"] == "https://example.org/a:b"

    def test_malformed_and_blank_lines_are_skipped(self):
        meta = parse_meta_text("no colon here\n\n   \ntitle: ok\n")
        assert meta == {"title": "ok", "description": ""}

    def test_keys_are_case_sensitive(self):
        meta = parse_meta_text("Title: A\ntitle: b\n")
        assert meta["Title"] == "A"
        assert meta["title"] == "b"

    def test_body_overrides_description_key(self):
        meta = parse_meta_text("description: header value\n---\nbody value")
        assert meta["description"] == "body value"

    def test_header_description_dropped_without_body(self):
        assert parse_meta_text("description: header value")["description"] == ""

    def test_empty_input(self):
        assert parse_meta_text("") == {"description": ""}


class TestTags:
    def test_empty_segments_dropped(self):
        assert parse_tags("a, b ,, c") == ["a", "b", "c"]

    def test_order_preserved(self):
        assert parse_tags("zeta,alfa") == ["zeta", "alfa"]

    def test_missing(self):
        assert parse_tags(None) == []
        assert parse_tags("") == []
        assert parse_tags(" , ") == []


class TestStats:
    def test_numbers_and_strings(self):
        assert parse_stats("users: 42\nactive: true") == {"users": 42, "active": "true"}

    def test_numeric_forms(self):
        stats = parse_stats("a: 3.5\nb: -7\nc: 1e3\nd: .5\ne: 10 km\nf: 0x10\n")
        assert stats == {"a": 3.5, "b": -7, "c": 1000, "d": 0.5, "e": "10 km", "f": "0x10"}
        assert isinstance(stats["b"], int)
        assert isinstance(stats["a"], float)

    def test_integral_floats_become_ints(self):
        stats = parse_stats("exp: 1e3\npoint: 3.0\nneg: -2.50e1\n")
        assert stats == {"exp": 1000, "point": 3, "neg": -25}
        assert all(type(v) is int for v in stats.values())

    def test_non_ascii_digits_stay_strings(self):
        assert parse_stats("a: \u0664\u0662\nb: \uff11\uff12\n") == {"a": "\u0664\u0662", "b": "\uff11\uff12"}

    def test_non_finite_stays_string(self):
        assert coerce_number("NaN") == "NaN"
        assert coerce_number("Infinity") == "Infinity"
        assert coerce_number("1e999") == "1e999"

    def test_empty_value_stays_string(self):
        assert parse_stats("empty:\n") == {"empty": ""}

    def test_blank_and_malformed_lines(self):
        assert parse_stats("\nnot a pair\n  members : 12  \n") == {"members": 12}
