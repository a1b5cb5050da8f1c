"""Tests for struct-to-query-string encoding."""

import dataclasses
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID

import pytest

from card_issuing_client.params import CardListParams, TransactionListParams, TransactionResult
from card_issuing_client.query import (
    NOT_GIVEN,
    ArrayFormat,
    Format,
    NestedFormat,
    NotGivenOr,
    QueryEncoder,
    QueryPairs,
    QuerySettings,
    encode,
    encode_default,
    format_scalar,
    param,
)

REPEAT = QuerySettings(array_format=ArrayFormat.REPEAT)
INDICES = QuerySettings(array_format=ArrayFormat.INDICES)
BRACKETS = QuerySettings(array_format=ArrayFormat.BRACKETS)
DOTS = QuerySettings(nested_format=NestedFormat.DOTS)


class Color(Enum):
    RED = "red"
    BLUE = "blue"


@dataclass(kw_only=True)
class Leaf:
    b: NotGivenOr[str] = param("b")


@dataclass(kw_only=True)
class Branch:
    a: NotGivenOr[Leaf] = param("a")


@dataclass(kw_only=True)
class Numbers:
    n: NotGivenOr[list[int]] = param("n")


@dataclass(kw_only=True)
class PathAndQuery:
    card_token: str = param("card_token", path=True)
    memo: NotGivenOr[str] = param("memo")


@dataclass(kw_only=True)
class WithNestedPath:
    inner: NotGivenOr[PathAndQuery] = param("inner")
    items: NotGivenOr[list[PathAndQuery]] = param("items")


class Custom:
    """Value that encodes itself."""

    def __init__(self, pairs):
        self.pairs = pairs

    def url_query(self):
        return self.pairs


@dataclass(kw_only=True)
class HoldsCustom:
    x: NotGivenOr[object] = param("x")


class TestEndToEnd:
    """Encoding real request records with default settings."""

    @pytest.mark.unit
    def test_card_list_params_elides_absent_fields(self):
        """Absent begin and page_size are left out."""
        params = CardListParams(account_token="abc", page=2)

        pairs = encode_default(params)

        assert pairs == [("account_token", "abc"), ("page", "2")]
        assert pairs.to_dict() == {"account_token": ["abc"], "page": ["2"]}

    @pytest.mark.unit
    def test_field_order_follows_declaration(self):
        """Pairs come out in field-declaration order, not argument order."""
        params = TransactionListParams(
            page_size=10,
            result=TransactionResult.DECLINED,
            account_token="acct",
        )

        assert encode_default(params).keys() == ["account_token", "result", "page_size"]

    @pytest.mark.unit
    def test_datetime_fields(self):
        """Timestamps render as RFC 3339 in UTC."""
        params = CardListParams(begin=datetime(2023, 1, 2, 3, 4, 5, tzinfo=UTC))

        assert encode_default(params) == [("begin", "2023-01-02T03:04:05Z")]

    @pytest.mark.unit
    def test_empty_record_encodes_to_nothing(self):
        """A record with every field absent yields no pairs."""
        assert encode_default(CardListParams()) == []

    @pytest.mark.unit
    def test_encoding_is_deterministic(self):
        """The same input and settings give identical output."""
        params = WithNestedPath(
            inner=PathAndQuery(card_token="t", memo="m"),
            items=[PathAndQuery(card_token="t", memo="a"), PathAndQuery(card_token="t", memo="b")],
        )

        assert encode(params, INDICES) == encode(params, INDICES)
        assert list(encode(params, INDICES)) == list(encode(params, INDICES))


class TestTopLevel:
    """Top-level values that are not records."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, NOT_GIVEN, 5, "text", [1, 2], object()])
    def test_non_record_top_level_yields_empty(self, value):
        """Absent, scalar and sequence top-level values have no key and encode to nothing."""
        pairs = encode_default(value)

        assert isinstance(pairs, QueryPairs)
        assert pairs == []

    @pytest.mark.unit
    def test_top_level_mapping(self):
        """A mapping at the top level uses its keys directly."""
        assert encode_default({"a": 1, "b": {"c": True}}) == [("a", "1"), ("b[c]", "true")]

    @pytest.mark.unit
    def test_top_level_custom_encoding_is_used_as_is(self):
        """A self-encoding value at the top level is not prefixed."""
        value = Custom(QueryPairs([("k", "v")]))

        assert encode_default(value) == [("k", "v")]


class TestNesting:
    """Nested records and mappings."""

    @pytest.mark.unit
    def test_brackets(self):
        """A field b inside field a yields a[b]."""
        assert encode_default(Branch(a=Leaf(b="x"))) == [("a[b]", "x")]

    @pytest.mark.unit
    def test_dots(self):
        """With dot nesting, a field b inside field a yields a.b."""
        assert encode(Branch(a=Leaf(b="x")), DOTS) == [("a.b", "x")]

    @pytest.mark.unit
    def test_absent_nested_record_emits_nothing(self):
        """An absent nested record and its descendants are omitted."""
        assert encode_default(Branch()) == []
        assert encode_default(Branch(a=Leaf())) == []

    @pytest.mark.unit
    def test_mapping_keeps_insertion_order_and_skips_absent(self):
        """Mapping entries are emitted in insertion order, absent values skipped."""

        @dataclass
        class Filters:
            meta: dict = param("meta", default_factory=dict)

        params = Filters(meta={"z": 1, "gone": None, "a": "x", "later": NOT_GIVEN})

        assert encode_default(params) == [("meta[z]", "1"), ("meta[a]", "x")]

    @pytest.mark.unit
    def test_mapping_keeps_falsy_values(self):
        """Mapping entries are never skipped for holding a zero value."""
        assert encode_default({"f": {"zero": 0, "no": False, "empty": ""}}) == [
            ("f[zero]", "0"),
            ("f[no]", "false"),
            ("f[empty]", ""),
        ]

    @pytest.mark.unit
    def test_mapping_with_empty_key_is_skipped(self):
        """Entries without a usable key are dropped."""
        assert encode_default({"m": {"": "x", "k": "y"}}) == [("m[k]", "y")]

    @pytest.mark.unit
    def test_mapping_enum_keys(self):
        """Enum keys use their value."""
        assert encode_default({Color.RED: 1}) == [("red", "1")]


class TestArrayFormats:
    """Array formats on n = [1, 2, 3]."""

    @pytest.mark.unit
    def test_comma(self):
        """Comma joins the elements into one pair."""
        assert encode_default(Numbers(n=[1, 2, 3])) == [("n", "1,2,3")]

    @pytest.mark.unit
    def test_repeat(self):
        """Repeat emits one pair per element under the same key."""
        assert encode(Numbers(n=[1, 2, 3]), REPEAT) == [("n", "1"), ("n", "2"), ("n", "3")]

    @pytest.mark.unit
    def test_indices_brackets(self):
        """Indices with bracket nesting yields n[0], n[1], n[2]."""
        assert encode(Numbers(n=[1, 2, 3]), INDICES) == [("n[0]", "1"), ("n[1]", "2"), ("n[2]", "3")]

    @pytest.mark.unit
    def test_indices_dots(self):
        """Indices with dot nesting yields n.0, n.1, n.2."""
        settings = QuerySettings(nested_format=NestedFormat.DOTS, array_format=ArrayFormat.INDICES)

        assert encode(Numbers(n=[1, 2, 3]), settings) == [("n.0", "1"), ("n.1", "2"), ("n.2", "3")]

    @pytest.mark.unit
    def test_brackets(self):
        """Brackets emits n[] for every element."""
        assert encode(Numbers(n=[1, 2, 3]), BRACKETS) == [("n[]", "1"), ("n[]", "2"), ("n[]", "3")]

    @pytest.mark.unit
    def test_tuple_is_a_sequence(self):
        """Tuples encode like lists."""
        assert encode_default({"n": (1, 2)}) == [("n", "1,2")]

    @pytest.mark.unit
    @pytest.mark.parametrize("settings", [QuerySettings(), REPEAT, INDICES, BRACKETS])
    def test_empty_sequence_emits_nothing(self, settings):
        """An empty sequence yields no pair in any format."""
        assert encode(Numbers(n=[]), settings) == []

    @pytest.mark.unit
    def test_absent_elements_are_skipped(self):
        """None elements do not produce pairs."""
        assert encode_default(Numbers(n=[1, None, 3])) == [("n", "1,3")]
        assert encode(Numbers(n=[1, None, 3]), REPEAT) == [("n", "1"), ("n", "3")]
        assert encode(Numbers(n=[1, None, 3]), INDICES) == [("n[0]", "1"), ("n[2]", "3")]

    @pytest.mark.unit
    def test_comma_omits_non_scalar_elements(self):
        """Records inside a comma-joined array are dropped, scalars kept."""
        value = {"n": [1, Leaf(b="x"), {"k": "v"}, 2]}

        assert encode_default(value) == [("n", "1,2")]

    @pytest.mark.unit
    def test_comma_with_only_non_scalar_elements(self):
        """A comma array of records produces nothing."""
        assert encode_default({"n": [Leaf(b="x")]}) == []

    @pytest.mark.unit
    def test_indices_recurse_into_records(self):
        """Records inside an indexed array are nested under the index key."""
        value = WithNestedPath(items=[PathAndQuery(card_token="t", memo="a"), PathAndQuery(card_token="t", memo="b")])

        assert encode(value, INDICES) == [("items[0][memo]", "a"), ("items[1][memo]", "b")]

    @pytest.mark.unit
    def test_brackets_recurse_into_records(self):
        """Records inside a bracket array share the [] key segment."""
        value = {"items": [{"a": 1}, {"a": 2}]}

        assert encode(value, BRACKETS) == [("items[][a]", "1"), ("items[][a]", "2")]


class TestFieldEligibility:
    """Which declared fields are emitted."""

    @pytest.mark.unit
    def test_path_params_are_excluded(self):
        """Path parameters never appear in the query."""
        assert encode_default(PathAndQuery(card_token="tok", memo="m")) == [("memo", "m")]

    @pytest.mark.unit
    @pytest.mark.parametrize("settings", [QuerySettings(), DOTS, REPEAT, INDICES, BRACKETS])
    def test_path_params_are_excluded_at_any_depth(self, settings):
        """Nested path parameters are excluded as well."""
        value = WithNestedPath(inner=PathAndQuery(card_token="tok"), items=[PathAndQuery(card_token="tok")])

        pairs = encode(value, settings)

        assert all("card_token" not in key for key, _ in pairs)
        assert all(value != "tok" for _, value in pairs)

    @pytest.mark.unit
    def test_falsy_values_are_present(self):
        """0, False and empty string are values, not absence."""

        @dataclass(kw_only=True)
        class Flags:
            count: NotGivenOr[int] = param("count")
            enabled: NotGivenOr[bool] = param("enabled")
            name: NotGivenOr[str] = param("name")

        assert encode_default(Flags(count=0, enabled=False, name="")) == [
            ("count", "0"),
            ("enabled", "false"),
            ("name", ""),
        ]

    @pytest.mark.unit
    def test_omit_empty_skips_zero_values(self):
        """omit_empty fields are left out when they hold a zero value."""

        @dataclass(kw_only=True)
        class Sparse:
            count: int = param("count", omit_empty=True, default=0)
            tags: list = param("tags", omit_empty=True, default_factory=list)
            name: str = param("name", omit_empty=True, default="")

        assert encode_default(Sparse()) == []
        assert encode_default(Sparse(count=3, tags=["a"], name="n")) == [
            ("count", "3"),
            ("tags", "a"),
            ("name", "n"),
        ]

    @pytest.mark.unit
    def test_omit_empty_skips_zero_decimals_and_enums(self):
        """A zero decimal or an enum whose value is empty counts as a zero value."""

        class Blank(Enum):
            NONE = ""
            SOME = "some"

        @dataclass(kw_only=True)
        class Sparse:
            amount: Decimal = param("amount", omit_empty=True, default=Decimal(0))
            kind: Blank = param("kind", omit_empty=True, default=Blank.NONE)

        assert encode_default(Sparse()) == []
        assert encode_default(Sparse(amount=Decimal("1.5"), kind=Blank.SOME)) == [
            ("amount", "1.5"),
            ("kind", "some"),
        ]

    @pytest.mark.unit
    def test_skipped_fields(self):
        """Fields marked skip, or with query metadata False, are never emitted."""

        @dataclass(kw_only=True)
        class Skips:
            hidden: str = param("hidden", skip=True, default="h")
            internal: str = dataclasses.field(default="i", metadata={"query": False})
            shown: str = param("shown", default="s")

        assert encode_default(Skips()) == [("shown", "s")]

    @pytest.mark.unit
    def test_plain_dataclass_fields_use_attribute_name(self):
        """Fields declared without param() are keyed by their name."""

        @dataclass
        class Plain:
            page_size: int = 10
            cursor: str | None = None

        assert encode_default(Plain()) == [("page_size", "10")]

    @pytest.mark.unit
    def test_empty_key_is_skipped(self):
        """A field whose key is empty is not emitted."""

        @dataclass(kw_only=True)
        class NoKey:
            a: str = param("", default="x")
            b: str = param("b", default="y")

        assert encode_default(NoKey()) == [("b", "y")]

    @pytest.mark.unit
    def test_unencodable_values_are_dropped(self):
        """Values that cannot be classified are omitted without raising."""
        assert encode_default({"a": object(), "b": 1, "c": {1, 2}}) == [("b", "1")]


class TestCustomEncoding:
    """Values exposing url_query()."""

    @pytest.mark.unit
    def test_splice_under_prefix_brackets(self):
        """Produced pairs are nested under the field key."""
        value = HoldsCustom(x=Custom(QueryPairs([("k", "v"), ("j", "w")])))

        assert encode_default(value) == [("x[k]", "v"), ("x[j]", "w")]

    @pytest.mark.unit
    def test_splice_under_prefix_dots(self):
        """Dot nesting is applied to produced keys."""
        value = HoldsCustom(x=Custom(QueryPairs([("k", "v")])))

        assert encode(value, DOTS) == [("x.k", "v")]

    @pytest.mark.unit
    def test_splice_keeps_bracket_suffix(self):
        """A produced key with its own brackets keeps them after the prefix."""
        value = HoldsCustom(x=Custom(QueryPairs([("a[b]", "c")])))

        assert encode_default(value) == [("x[a][b]", "c")]

    @pytest.mark.unit
    def test_mapping_and_iterable_results(self):
        """url_query may return a mapping or an iterable of pairs."""
        assert encode_default(HoldsCustom(x=Custom({"k": ["1", "2"]}))) == [("x[k]", "1"), ("x[k]", "2")]
        assert encode_default(HoldsCustom(x=Custom([("k", "v")]))) == [("x[k]", "v")]

    @pytest.mark.unit
    def test_custom_encoding_is_not_walked(self):
        """A dataclass with url_query() is not decomposed field by field."""

        @dataclass
        class Range:
            low: int = 1
            high: int = 9

            def url_query(self):
                return [("range", f"{self.low}-{self.high}")]

        assert encode_default({"f": Range()}) == [("f[range]", "1-9")]

    @pytest.mark.unit
    def test_custom_encoding_returning_none(self):
        """A url_query() returning None contributes nothing."""
        assert encode_default(HoldsCustom(x=Custom(None))) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("produced", ["ab", b"ab", 5, [("a", "b", "c")], [("k",)], [7]])
    def test_malformed_result_is_dropped(self, produced):
        """A url_query() result that is not a collection of pairs contributes nothing."""
        assert encode_default(HoldsCustom(x=Custom(produced))) == []

    @pytest.mark.unit
    def test_malformed_items_are_dropped_individually(self):
        """Well-formed pairs survive next to malformed ones."""
        value = HoldsCustom(x=Custom([("k", "v"), ("a", "b", "c"), (3, "n"), ("j", 2)]))

        assert encode_default(value) == [("x[k]", "v"), ("x[j]", "2")]

    @pytest.mark.unit
    def test_record_class_is_not_encoded(self):
        """A dataclass type defining url_query() is a class, not a value to encode."""

        @dataclass
        class Range:
            low: int = 1

            def url_query(self):
                return [("low", str(self.low))]

        assert encode_default(HoldsCustom(x=Range)) == []

    @pytest.mark.unit
    def test_absent_mapping_values_are_dropped(self):
        """None and NOT_GIVEN in a produced mapping add no pair."""
        value = HoldsCustom(x=Custom({"k": None, "j": "v", "n": NOT_GIVEN, "l": ["1", None]}))

        assert encode_default(value) == [("x[j]", "v"), ("x[l]", "1")]

    @pytest.mark.unit
    def test_empty_produced_key_is_dropped(self):
        """An empty produced key does not collapse to a bare bracket or dot."""
        assert encode_default(HoldsCustom(x=Custom([("", "v"), ("k", "w")]))) == [("x[k]", "w")]
        assert encode(HoldsCustom(x=Custom({"": "v"})), DOTS) == []


class TestScalarFormatting:
    """Scalar text representation."""

    @pytest.mark.unit
    def test_booleans(self):
        assert format_scalar(True) == "true"
        assert format_scalar(False) == "false"

    @pytest.mark.unit
    def test_integers(self):
        assert format_scalar(0) == "0"
        assert format_scalar(-42) == "-42"
        assert format_scalar(10**20) == "100000000000000000000"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.5, "1.5"), (2.0, "2"), (0.1, "0.1"), (1e-05, "0.00001"), (-3.25, "-3.25")],
    )
    def test_floats(self, value, expected):
        """Floats use plain decimal notation without a trailing .0."""
        assert format_scalar(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
    def test_non_finite_numbers_are_not_scalars(self, value):
        """NaN and infinity have no query form and are dropped."""
        assert format_scalar(value) is None
        assert encode_default({"v": value}) == []

    @pytest.mark.unit
    def test_decimal(self):
        assert format_scalar(Decimal("12.50")) == "12.50"

    @pytest.mark.unit
    def test_strings_are_not_escaped(self):
        """Percent-encoding is left to query-string serialization."""
        assert format_scalar("a b&c=d") == "a b&c=d"

    @pytest.mark.unit
    def test_enums_use_their_value(self):
        assert format_scalar(Color.BLUE) == "blue"
        assert format_scalar(TransactionResult.APPROVED) == "APPROVED"

    @pytest.mark.unit
    def test_uuid(self):
        token = UUID("12345678-1234-5678-1234-567812345678")

        assert format_scalar(token) == "12345678-1234-5678-1234-567812345678"

    @pytest.mark.unit
    def test_datetime_is_converted_to_utc(self):
        """Aware datetimes are shifted to UTC."""
        value = datetime(2023, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert format_scalar(value, Format.DATE_TIME) == "2023-01-02T03:00:00Z"

    @pytest.mark.unit
    def test_naive_datetime_is_treated_as_utc(self):
        assert format_scalar(datetime(2023, 6, 1, 12, 30)) == "2023-06-01T12:30:00Z"

    @pytest.mark.unit
    def test_datetime_with_date_hint(self):
        """The date hint keeps only the UTC calendar date."""
        value = datetime(2023, 1, 2, 23, 30, tzinfo=timezone(timedelta(hours=-2)))

        assert format_scalar(value, Format.DATE) == "2023-01-03"

    @pytest.mark.unit
    def test_date(self):
        assert format_scalar(date(2023, 1, 2)) == "2023-01-02"
        assert format_scalar(date(2023, 1, 2), Format.DATE_TIME) == "2023-01-02T00:00:00Z"

    @pytest.mark.unit
    def test_bytes(self):
        """Binary hint gives standard base64, otherwise URL-safe base64."""
        assert format_scalar(b"\xfb\xff", Format.BINARY) == "+/8="
        assert format_scalar(b"\xfb\xff") == "-_8="

    @pytest.mark.unit
    def test_non_scalars(self):
        assert format_scalar([1]) is None
        assert format_scalar({"a": 1}) is None
        assert format_scalar(object()) is None

    @pytest.mark.unit
    def test_format_hint_applies_to_sequence_elements(self):
        """A field's format hint reaches the elements of its sequence."""

        @dataclass(kw_only=True)
        class Days:
            days: NotGivenOr[list[datetime]] = param("days", format=Format.DATE)

        value = Days(days=[datetime(2023, 1, 1, tzinfo=UTC), datetime(2023, 1, 2, tzinfo=UTC)])

        assert encode_default(value) == [("days", "2023-01-01,2023-01-02")]


@pytest.mark.unit
def test_encoder_instance_is_reusable():
    """One encoder can be shared across calls."""
    encoder = QueryEncoder(REPEAT)

    assert encoder.encode(Numbers(n=[1])) == [("n", "1")]
    assert encoder.encode(Numbers(n=[2, 3])) == [("n", "2"), ("n", "3")]
    assert encoder.settings is REPEAT
