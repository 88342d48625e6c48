"""Hypothesis property-based tests for the traversal functions.

Properties tested:
- clone(o) equals assign({}, o) and is never o itself
- Enumeration: own keys first, then inherited keys not already seen
- filter/map/map_keys leave their input untouched
- filter with a constant-true predicate and map with identity copy the object
"""

from hypothesis import given, settings
from hypothesis import strategies as st

import objectware as _
from objectware import LayeredObject


# =============================================================================
# Strategy Definitions
# =============================================================================

safe_keys = st.text(
    alphabet=st.characters(
        categories=("Lu", "Ll", "Nd"),
        min_codepoint=48,
        max_codepoint=122,
    ),
    min_size=1,
    max_size=10,
)

primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-1_000_000, max_value=1_000_000),
    st.text(max_size=20),
)

plain_objects = st.dictionaries(safe_keys, primitives, max_size=8)


@st.composite
def layered_objects(draw):
    """A LayeredObject over a dict prototype, plus its expected items."""
    prototype = draw(plain_objects)
    own = draw(plain_objects)
    obj = LayeredObject.create(prototype, own)
    expected = list(own.items()) + [
        (key, value) for key, value in prototype.items() if key not in own
    ]
    return obj, expected


any_objects = st.one_of(
    plain_objects,
    layered_objects().map(lambda pair: pair[0]),
)


# =============================================================================
# Copy Properties
# =============================================================================


class TestCopyProperties:
    @given(obj=any_objects)
    @settings(max_examples=100)
    def test_clone_equals_assign_onto_empty(self, obj):
        assert _.clone(obj) == _.assign({}, obj)

    @given(obj=any_objects)
    @settings(max_examples=100)
    def test_clone_is_new_object(self, obj):
        result = _.clone(obj)
        assert result is not obj
        assert type(result) is dict

    @given(first=plain_objects, second=plain_objects)
    @settings(max_examples=100)
    def test_later_source_wins(self, first, second):
        result = _.assign({}, first, second)
        for key, value in second.items():
            assert result[key] == value
        assert set(result) == set(first) | set(second)


# =============================================================================
# Enumeration Properties
# =============================================================================


class TestEnumerationProperties:
    @given(pair=layered_objects())
    @settings(max_examples=100)
    def test_keys_and_values_follow_layer_order(self, pair):
        obj, expected = pair
        assert _.keys(obj) == [key for key, _value in expected]
        assert _.values(obj) == [value for _key, value in expected]

    @given(pair=layered_objects())
    @settings(max_examples=100)
    def test_is_empty_matches_keys(self, pair):
        obj, expected = pair
        assert _.is_empty(obj) == (not expected)

    @given(pair=layered_objects())
    @settings(max_examples=50)
    def test_clone_preserves_order(self, pair):
        obj, expected = pair
        assert list(_.clone(obj).items()) == expected


# =============================================================================
# Non-Mutation Properties
# =============================================================================


class TestNonMutationProperties:
    @given(obj=any_objects)
    @settings(max_examples=100)
    def test_helpers_leave_input_untouched(self, obj):
        before = list(obj.items())

        _.filter(obj, lambda value: value is None)
        _.map(obj, lambda value, key: key)
        _.map_keys(obj, lambda key: key + "_")

        assert list(obj.items()) == before

    @given(obj=any_objects)
    @settings(max_examples=100)
    def test_identity_transforms_copy(self, obj):
        assert _.filter(obj, lambda: True) == _.clone(obj)
        assert _.map(obj, lambda value: value) == _.clone(obj)
        assert _.map_keys(obj, lambda key: key) == _.clone(obj)
