"""Property-based tests for the entity codec and newline collapsing.

Test Coverage:
- Decoding is the identity on text without ampersands
- Decoding inverts encoding over letters, digits and the escaped characters
- Decoding never raises on arbitrary text
- Newline collapsing is idempotent and leaves no blank-line runs
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from plugdoc.utils.entities import decode_entities, encode_entities
from plugdoc.utils.text import collapse_newlines

_ESCAPABLE_ALPHABET = st.sampled_from(list("abcXYZ0123456789&<>\"'"))


@pytest.mark.unit
@pytest.mark.fuzzing
class TestEntityProperties:
    """Property-based tests for decode_entities and encode_entities."""

    @given(st.text().filter(lambda s: "&" not in s))
    def test_decode_without_ampersand_is_identity(self, text):
        assert decode_entities(text) == text

    @given(st.text(alphabet=st.one_of(st.characters(categories=("Lu", "Ll", "Nd")), _ESCAPABLE_ALPHABET)))
    def test_decode_inverts_encode(self, text):
        assert decode_entities(encode_entities(text)) == text

    @given(st.text())
    def test_decode_never_raises(self, text):
        assert isinstance(decode_entities(text), str)

    @given(st.text())
    def test_encoded_text_has_no_raw_specials(self, text):
        encoded = encode_entities(text)
        assert not any(char in encoded for char in "<>\"'")


@pytest.mark.unit
@pytest.mark.fuzzing
class TestCollapseProperties:
    """Property-based tests for collapse_newlines."""

    @given(st.text(alphabet=st.sampled_from(list("ab \t\n\r"))))
    def test_idempotent(self, text):
        once = collapse_newlines(text)
        assert collapse_newlines(once) == once

    @given(st.text(alphabet=st.sampled_from(list("ab \n"))))
    def test_no_triple_newlines_remain(self, text):
        assert "\n\n\n" not in collapse_newlines(text)

    @given(st.text(alphabet=st.sampled_from(list("ab \t"))))
    def test_single_line_unchanged(self, text):
        assert collapse_newlines(text) == text
