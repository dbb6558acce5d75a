# Test descriptive model metadata
import pytest
from pydantic import ValidationError
from openai_model_catalog import (
    GPT3,
    GPT4,
    Chat,
    Codex,
    GPT3Base,
    ModelInfo,
    Moderation,
    Other,
    family_of,
    get_families,
    get_model_info,
    get_models,
    is_deprecated,
    resolve,
)
from openai_model_catalog.model_info import MODEL_INFO


class TestModelInfo:
    def test_every_member_has_metadata(self):
        for family in get_families():
            for model_type in get_models(family):
                info = get_model_info(model_type)
                assert info is not None, model_type
                assert info.id == resolve(model_type)
                assert info.family == family_of(model_type)

    def test_no_orphan_metadata(self):
        """Test every metadata record belongs to a catalog member."""
        keys = {
            (family, resolve(m)) for family in get_families() for m in get_models(family)
        }
        records = [(info.family, info.id) for info in MODEL_INFO]
        assert len(records) == len(set(records))
        assert set(records) == keys

    def test_alias_shares_metadata(self):
        assert get_model_info(GPT3Base.CURIE) == get_model_info(GPT3Base.DAVINCI)

    def test_colliding_identifiers_have_separate_records(self):
        chat_info = get_model_info(Chat.CHATGPT4)
        gpt4_info = get_model_info(GPT4.GPT4)
        assert chat_info.id == gpt4_info.id == "gpt-4"
        assert chat_info.family == "chat"
        assert gpt4_info.family == "gpt4"

    def test_token_limits(self):
        assert get_model_info(GPT4.GPT4).max_tokens == 8192
        assert get_model_info(GPT4.GPT4_32K_0613).max_tokens == 32768
        assert get_model_info(GPT3Base.BABBAGE).max_tokens == 16384

    def test_other_has_no_metadata(self):
        assert get_model_info(Other("my-fine-tuned-model")) is None

    def test_info_is_frozen(self):
        info = get_model_info(Moderation.STABLE)
        with pytest.raises(ValidationError):
            info.max_tokens = 1

    def test_info_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ModelInfo(id="x", family="other", name="X", context_window=1)


class TestDeprecation:
    def test_deprecated_members_still_resolve(self):
        assert is_deprecated(GPT3.DAVINCI)
        assert is_deprecated(Codex.CUSHMAN)
        assert resolve(GPT3.DAVINCI) == "text-davinci-003"
        assert resolve(Codex.CUSHMAN) == "code-cushman-001"

    def test_current_members(self):
        assert not is_deprecated(Chat.CHATGPT)
        assert not is_deprecated(Moderation.LATEST)

    def test_other_is_never_deprecated(self):
        assert not is_deprecated(Other("text-davinci-003"))


if __name__ == "__main__":
    pytest.main([__file__])
