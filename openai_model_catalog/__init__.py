"""
openai-model-catalog: typed catalog of OpenAI model identifiers.
"""

from openai_model_catalog.types import (
    GPT3,
    GPT4,
    GPT35,
    Chat,
    Codex,
    Embedding,
    Feature,
    GPT3Base,
    ModelFamily,
    ModelInfo,
    ModelType,
    Moderation,
    Other,
)
from openai_model_catalog.models import (
    family_of,
    find_models,
    get_families,
    get_model_info,
    get_models,
    is_deprecated,
    models_are_equal,
    parse_model_type,
    resolve,
)
from openai_model_catalog.env_models import get_env_model

__version__ = "0.1.0"

__all__ = [
    # Types
    "GPT3",
    "GPT3Base",
    "GPT35",
    "Codex",
    "Feature",
    "Chat",
    "GPT4",
    "Embedding",
    "Moderation",
    "Other",
    "ModelFamily",
    "ModelInfo",
    "ModelType",
    # Models
    "family_of",
    "find_models",
    "get_families",
    "get_model_info",
    "get_models",
    "is_deprecated",
    "models_are_equal",
    "parse_model_type",
    "resolve",
    # Env
    "get_env_model",
]
