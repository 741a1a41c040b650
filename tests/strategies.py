"""Shared Hypothesis strategies for raw boundary values.

Values mimic what reaches the validators from a property editor or a
binding: absent values, scalars, numeric and JSON text, records, lists
and trigger expressions.
"""

from __future__ import annotations

import json

import hypothesis.strategies as st

# =============================================================================
# Constants
# =============================================================================

VALID_URLS = [
    "https://example.com",
    "http://example.com",
    "https://www.example.com",
    "http://www.example.org/path/to/page",
    "example.io",
    "sub.domain-name.co.uk",
    "api.example.com:8080",
    "https://example.com/search?q=widgets",
]

INVALID_URLS = [
    "",
    "not a url",
    "https://example",
    "HTTPS://EXAMPLE.COM",
    "https://Example.com",
    "ftp://example.com",
    "localhost:3000",
    "https://example.com:123456",
    "https://example.toolong",
]

# =============================================================================
# Scalar Strategies
# =============================================================================

# NaN is excluded: it never compares equal to itself
finite_floats = st.floats(allow_nan=False)

scalar_strategy = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    finite_floats,
    st.text(max_size=30),
)


@st.composite
def numeric_string_strategy(draw: st.DrawFn) -> str:
    """Generate strings that should coerce to a number."""
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        return str(draw(st.integers(min_value=-(10**12), max_value=10**12)))
    elif choice == 1:
        return repr(draw(st.floats(allow_nan=False, allow_infinity=False)))
    elif choice == 2:
        # Surrounding whitespace is trimmed
        return f"  {draw(st.integers(min_value=0, max_value=999))}  "
    else:
        return hex(draw(st.integers(min_value=0, max_value=10**6)))


# =============================================================================
# Structured Strategies
# =============================================================================

json_scalar_strategy = st.one_of(
    st.none(), st.booleans(), st.integers(), finite_floats, st.text(max_size=10)
)

json_value_strategy = st.recursive(
    json_scalar_strategy,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=8), children, max_size=4),
    ),
    max_leaves=10,
)

record_strategy = st.dictionaries(st.text(max_size=8), json_scalar_strategy, max_size=4)

option_strategy = st.fixed_dictionaries(
    {"label": st.text(max_size=10), "value": st.text(max_size=10)}
)


@st.composite
def trigger_strategy(draw: st.DrawFn) -> str:
    """Generate trigger expressions, some of them navigateToUrl calls."""
    url = draw(st.sampled_from(VALID_URLS + INVALID_URLS))
    return draw(
        st.sampled_from(
            [
                f"{{{{navigateToUrl('{url}')}}}}",
                f"{{{{navigateToUrl('{url}', 'NEW_WINDOW')}}}}",
                "{{showAlert('Saved', 'success')}}",
                "{{Query1.run()}}",
            ]
        )
    )


action_strategy = st.fixed_dictionaries(
    {"label": st.text(max_size=10), "dynamicTrigger": trigger_strategy()}
)


@st.composite
def json_text_strategy(draw: st.DrawFn) -> str:
    """Serialize a generated JSON value."""
    return json.dumps(draw(json_value_strategy))


raw_value_strategy = st.one_of(
    scalar_strategy,
    numeric_string_strategy(),
    json_text_strategy(),
    json_value_strategy,
    # Records that JSON cannot encode
    st.dictionaries(st.tuples(st.integers()), st.text(max_size=5), max_size=3),
    st.lists(record_strategy, max_size=4),
    st.lists(option_strategy, max_size=4),
    st.lists(action_strategy, max_size=4),
    trigger_strategy(),
    st.datetimes(),
    st.sampled_from(["true", "false", "[1,2,3]", "not json", "2024-03-15T10:30:00"]),
)
