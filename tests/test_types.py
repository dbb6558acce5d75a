# Test selector types
import pytest
from pydantic import ValidationError
from openai_model_catalog import GPT4, Other


class TestOther:
    def test_positional_and_keyword(self):
        assert Other("custom") == Other(name="custom")

    def test_frozen_and_hashable(self):
        model = Other("custom")
        with pytest.raises(ValidationError):
            model.name = "changed"
        assert {Other("custom"), Other("custom")} == {model}

    def test_requires_string(self):
        with pytest.raises(ValidationError):
            Other(None)

    def test_serializes(self):
        assert Other("custom").model_dump() == {"name": "custom"}
        assert Other.model_validate({"name": "custom"}) == Other("custom")


class TestFamilyEnums:
    def test_members_are_strings(self):
        """Test members can be placed directly in a request body."""
        assert isinstance(GPT4.GPT4, str)
        assert {"model": GPT4.GPT4_32K_0613} == {"model": "gpt-4-32k-0613"}

    def test_lookup_by_value(self):
        assert GPT4("gpt-4-1106-preview") is GPT4.GPT4_1106_PREVIEW


if __name__ == "__main__":
    pytest.main([__file__])
