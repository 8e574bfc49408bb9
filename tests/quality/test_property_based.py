"""Property-based tests using Hypothesis.

The serializer, the compiler and result aggregation are pure, so their
invariants are checked over generated inputs instead of hand-picked ones:
ordering of compiled parameters, distinctness of rendered values, shape of
rendered dates, associativity of page merging.

These tests do NOT mock anything; they call pure functions directly.
"""

from __future__ import annotations

import datetime as dt
import string

import pytest
from hypothesis import given, settings, assume, HealthCheck
from hypothesis import strategies as st

from typed_fhir.search.compiler import compile_query
from typed_fhir.search.operators import multiple_and, reference, token
from typed_fhir.search.query import SearchQuery
from typed_fhir.search.response import SearchResponseFailure, SearchResponseSuccess
from typed_fhir.search.serializer import format_date, serialize
from typed_fhir.utils import camel_to_kebab
from tests.fixtures.bundles import make_bundle, make_operation_outcome, make_patient

pytestmark = pytest.mark.quality

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

safe_id = st.text(alphabet=string.ascii_letters + string.digits + "-.", min_size=1, max_size=40)

resource_types = st.sampled_from(["Patient", "Encounter", "Observation", "Practitioner"])

field_names = st.from_regex(r"[a-z]{1,12}", fullmatch=True)

camel_names = st.from_regex(r"[a-z]{1,8}([A-Z][a-z]{1,8}){0,3}", fullmatch=True)

timezones = st.sampled_from(
    [None, dt.timezone.utc, dt.timezone(dt.timedelta(hours=5)), dt.timezone(dt.timedelta(hours=-9))]
)

one_line_text = st.text(
    alphabet=st.characters(exclude_characters="\n\r", exclude_categories=("Cs",)),
    min_size=1,
    max_size=80,
)

pages = st.lists(st.lists(safe_id, max_size=4), min_size=1, max_size=4).map(
    lambda ids: SearchResponseSuccess(
        resource_type="Patient",
        bundles=[make_bundle([make_patient(i) for i in page]) for page in ids],
    )
)


# ---------------------------------------------------------------------------
# Serializer properties
# ---------------------------------------------------------------------------

class TestSerializerProperties:

    @given(st.datetimes(min_value=dt.datetime(1900, 1, 2), max_value=dt.datetime(2100, 12, 30), timezones=timezones))
    def test_datetimes_render_as_dates(self, value: dt.datetime) -> None:
        rendered = format_date(value)
        assert len(rendered) == 10
        assert dt.date.fromisoformat(rendered)

    @given(st.datetimes(min_value=dt.datetime(1900, 1, 2), max_value=dt.datetime(2100, 12, 30), timezones=timezones))
    def test_aware_datetimes_use_utc_date(self, value: dt.datetime) -> None:
        expected = value.astimezone(dt.timezone.utc).date() if value.tzinfo else value.date()
        assert serialize(value) == expected.isoformat()

    @given(st.integers(), st.integers())
    def test_distinct_integers_render_distinctly(self, a: int, b: int) -> None:
        assume(a != b)
        assert serialize(a) != serialize(b)

    @given(st.text())
    def test_strings_pass_through(self, value: str) -> None:
        assert serialize(value) == value

    @given(resource_types, safe_id)
    def test_reference_renders_type_and_id(self, resource_type: str, ref_id: str) -> None:
        assert serialize(reference(resource_type, ref_id)) == f"{resource_type}/{ref_id}"

    @given(safe_id, safe_id)
    def test_token_renders_system_then_code(self, system: str, code: str) -> None:
        rendered = serialize(token(system, code))
        assert rendered.split("|") == [system, code]


# ---------------------------------------------------------------------------
# Compiler properties
# ---------------------------------------------------------------------------

class TestCompilerProperties:

    @given(st.dictionaries(field_names, st.text(), min_size=0, max_size=10))
    def test_field_order_preserved(self, parameters: dict[str, str]) -> None:
        params = compile_query(SearchQuery(resource_type="Patient", search_parameters=parameters))
        assert params == list(parameters.items())

    @given(field_names, st.lists(safe_id, min_size=1, max_size=8))
    def test_multiple_and_repeats_key(self, name: str, values: list[str]) -> None:
        params = compile_query(
            SearchQuery(resource_type="Patient", search_parameters={name: multiple_and(*values)})
        )
        assert params == [(name, v) for v in values]

    @given(field_names, st.lists(safe_id, min_size=1, max_size=8))
    def test_or_list_is_one_param(self, name: str, values: list[str]) -> None:
        params = compile_query(SearchQuery(resource_type="Patient", search_parameters={name: values}))
        assert params == [(name, ",".join(values))]

    @given(st.dictionaries(field_names, st.text(), max_size=5), st.dictionaries(field_names, safe_id, max_size=5))
    def test_raw_params_come_last(self, parameters: dict[str, str], raw: dict[str, str]) -> None:
        params = compile_query(
            SearchQuery(resource_type="Patient", search_parameters=parameters, raw_params=raw)
        )
        assert params[len(parameters):] == list(raw.items())

    @given(camel_names)
    def test_kebab_case_is_lowercase_and_reversible_in_length(self, name: str) -> None:
        kebab = camel_to_kebab(name)
        assert kebab == kebab.lower()
        assert len(kebab) == len(name) + sum(c.isupper() for c in name)


# ---------------------------------------------------------------------------
# Aggregation properties
# ---------------------------------------------------------------------------

class TestAggregationProperties:

    @given(pages, pages, pages)
    @settings(suppress_health_check=[HealthCheck.too_slow])
    def test_combine_is_associative(
        self, a: SearchResponseSuccess, b: SearchResponseSuccess, c: SearchResponseSuccess
    ) -> None:
        assert a.combine(b).combine(c) == a.combine(b.combine(c))

    @given(pages, pages)
    def test_combine_adds_totals(self, a: SearchResponseSuccess, b: SearchResponseSuccess) -> None:
        combined = a.combine(b)
        assert combined.total() == a.total() + b.total()
        assert combined.resources() == a.resources() + b.resources()

    @given(st.lists(one_line_text, max_size=6))
    def test_failure_message_lists_details_in_order(self, details: list[str]) -> None:
        failure = SearchResponseFailure(operation_outcome=make_operation_outcome(*details))
        assert failure.message == "\n".join(details)
