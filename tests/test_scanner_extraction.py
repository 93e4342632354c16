"""Tests for {{variable}} token scanning, extraction and detection."""

import pytest

from varengine.variables import (
    Token,
    extract_variables,
    has_variables,
    is_valid_variable_name,
    iter_tokens,
    unique_variables,
)


class TestTokenScanner:
    """Test the linear tokenizer."""

    def test_token_offsets(self):
        """Tokens carry slice offsets covering the braces."""
        text = 'GET {{base}}/users'
        tokens = list(iter_tokens(text))

        assert tokens == [Token('base', 4, 12)]
        assert text[4:12] == '{{base}}'

    def test_adjacent_tokens(self):
        assert [t.name for t in iter_tokens('{{a}}{{b}}{{c}}')] == ['a', 'b', 'c']

    @pytest.mark.parametrize('text', [
        '{ not a variable }',
        '{{incomplete',
        'incomplete}}',
        '{single}',
        '{{ spaced }}',
        '{{1starts_with_digit}}',
        '{{has-hyphen}}',
        '{{}}',
        '{',
        '',
    ])
    def test_malformed_syntax_is_literal(self, text):
        """Malformed placeholders are never reported."""
        assert list(iter_tokens(text)) == []

    def test_extra_opening_brace(self):
        """The token starts at the last pair of opening braces."""
        tokens = list(iter_tokens('{{{a}}}'))

        assert tokens == [Token('a', 1, 6)]

    def test_unterminated_opener_before_valid_token(self):
        assert [t.name for t in iter_tokens('{{broken {{ok}}')] == ['ok']

    def test_non_ascii_identifier_rejected(self):
        assert list(iter_tokens('{{café}}')) == []

    def test_variable_name_grammar(self):
        assert is_valid_variable_name('base_url')
        assert is_valid_variable_name('_private')
        assert is_valid_variable_name('API_KEY2')
        assert not is_valid_variable_name('2fast')
        assert not is_valid_variable_name('has space')
        assert not is_valid_variable_name('trailing\n')
        assert not is_valid_variable_name('')
        assert not is_valid_variable_name(None)


class TestExtractVariables:
    """Test extract_variables utility."""

    def test_extracts_in_order(self):
        assert extract_variables('{{baseUrl}}/users/{{userId}}') == ['baseUrl', 'userId']

    def test_no_variables(self):
        assert extract_variables('https://api.example.com') == []

    def test_duplicates_preserved(self):
        """Every occurrence is reported, in left-to-right order."""
        assert extract_variables('{{x}} and {{x}}') == ['x', 'x']

    def test_does_not_resolve(self):
        """Extraction only looks at the text itself."""
        assert extract_variables('{{outer}} contains {{inner}}') == ['outer', 'inner']

    def test_ignores_malformed(self):
        assert extract_variables('{a} {{b}} {{ c }} {{d') == ['b']

    def test_unique_variables(self):
        assert unique_variables('{{b}} {{a}} {{b}} {{c}} {{a}}') == ['b', 'a', 'c']


class TestHasVariables:
    """Test has_variables utility."""

    def test_true_when_present(self):
        assert has_variables('{{baseUrl}}/users') is True

    def test_false_when_absent(self):
        assert has_variables('https://api.example.com') is False

    def test_false_for_empty(self):
        assert has_variables('') is False

    def test_false_for_partial_syntax(self):
        assert has_variables('{ not a variable }') is False
        assert has_variables('{{incomplete') is False

    @pytest.mark.parametrize('text', [
        '{{a}}',
        'x {{a}} {{b}}',
        '{ {{_x}}',
        'no vars {{ bad }}',
    ])
    def test_agrees_with_extract(self, text):
        assert has_variables(text) == bool(extract_variables(text))
