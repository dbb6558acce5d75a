# Test environment variable model selection
import pytest
from openai_model_catalog import Chat, GPT4, Other, get_env_model, resolve


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    monkeypatch.delenv("OPENAI_MODEL_FAMILY", raising=False)


class TestEnvModel:
    def test_unset_returns_default(self):
        assert get_env_model() is None
        assert get_env_model(default=Chat.CHATGPT) is Chat.CHATGPT

    def test_model_without_family_is_custom(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "my-fine-tuned-model")
        model = get_env_model(default=Chat.CHATGPT)
        assert model == Other("my-fine-tuned-model")
        assert resolve(model) == "my-fine-tuned-model"

    def test_model_with_family(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4")
        monkeypatch.setenv("OPENAI_MODEL_FAMILY", "gpt4")
        assert get_env_model() is GPT4.GPT4

    def test_empty_model_passes_through(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "")
        assert get_env_model(default=Chat.CHATGPT) == Other("")

    def test_model_not_in_family(self, monkeypatch):
        monkeypatch.setenv("OPENAI_MODEL", "gpt-5")
        monkeypatch.setenv("OPENAI_MODEL_FAMILY", "gpt4")
        with pytest.raises(ValueError):
            get_env_model()


if __name__ == "__main__":
    pytest.main([__file__])
