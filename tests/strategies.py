"""Hypothesis strategies for property-based testing of okerr types."""

from hypothesis import strategies as st

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# JSON-encodable values
json_scalars = st.none() | st.booleans() | st.integers(min_value=-(2**63), max_value=2**64 - 1) | st.text(max_size=20)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=10), children, max_size=4),
    max_leaves=10,
)

# Exception strategies
exceptions = st.sampled_from(
    [
        ValueError('test'),
        TypeError('test'),
        RuntimeError('test'),
    ]
)

# Error payloads accepted by err()
list_payloads = st.lists(integers, max_size=5)
mapping_payloads = st.dictionaries(st.text(min_size=1, max_size=10), integers, max_size=5)
error_payloads = exceptions | list_payloads | mapping_payloads | st.just(True)
