"""Tests for message template substitution."""

from vertexai_sdk.errors import ERROR_MESSAGES, VertexAIErrorCode, placeholders, replace_template


class TestReplaceTemplate:
    """Tests for replace_template."""

    def test_replaces_all_occurrences(self) -> None:
        """Test repeated placeholders are all filled."""
        assert replace_template("{$a}-{$a}-{$b}", {"a": "x", "b": 2}) == "x-x-2"

    def test_stringifies_values(self) -> None:
        """Test non-string values use str()."""
        assert replace_template("[{$status}]", {"status": 404}) == "[404]"

    def test_missing_field_left_as_token(self) -> None:
        """Test unknown placeholders stay literal."""
        assert replace_template("from {$url}: {$message}", {"url": "u"}) == "from u: {$message}"

    def test_none_field_left_as_token(self) -> None:
        """Test None values stay literal."""
        assert replace_template("{$message}", {"message": None}) == "{$message}"

    def test_empty_string_is_substituted(self) -> None:
        """Test empty string is a real value."""
        assert replace_template("a{$message}b", {"message": ""}) == "ab"

    def test_no_placeholders(self) -> None:
        """Test static template is returned unchanged."""
        template = ERROR_MESSAGES[VertexAIErrorCode.NO_API_KEY]
        assert replace_template(template, {}) == template

    def test_plain_braces_untouched(self) -> None:
        """Test braces without $ are not placeholders."""
        template = ERROR_MESSAGES[VertexAIErrorCode.NO_MODEL]
        assert replace_template(template, {"model": "x"}) == template


class TestPlaceholders:
    """Tests for placeholder discovery."""

    def test_bad_response_placeholders(self) -> None:
        """Test placeholder order in the bad response template."""
        assert placeholders(ERROR_MESSAGES[VertexAIErrorCode.BAD_RESPONSE]) == [
            "url",
            "status",
            "status_text",
            "message",
        ]

    def test_static_templates_have_none(self) -> None:
        """Test configuration templates are static."""
        for code in (
            VertexAIErrorCode.NO_API_KEY,
            VertexAIErrorCode.NO_MODEL,
            VertexAIErrorCode.NO_PROJECT_ID,
        ):
            assert placeholders(ERROR_MESSAGES[code]) == []
