"""
Core types for openai-model-catalog.

Each closed model family is a ``str``-backed enum whose values are the exact
identifiers the OpenAI API expects. ``Other`` is the open variant for models
the catalog does not know about yet.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from typing_extensions import Literal, TypeAlias

ModelFamily: TypeAlias = Literal[
    "gpt3",
    "gpt3_base",
    "gpt3_5",
    "codex",
    "feature",
    "chat",
    "gpt4",
    "embedding",
    "moderation",
    "other",
]


class _ModelEnum(str, Enum):
    """Base for closed model families. Members are their wire identifiers."""

    def __str__(self) -> str:
        return self.value


class GPT3(_ModelEnum):
    """
    A set of models that can understand and generate natural language.

    [GPT-3 Models OpenAI API Docs](https://beta.openai.com/docs/models/gpt-3)
    """

    # Most capable GPT-3 model. Can do any task the other models can do, often
    # with higher quality, longer output and better instruction-following.
    # Also supports inserting completions within text.
    # Max Tokens: 4,000 tokens. Training Data: up to Jun 2021.
    DAVINCI = "text-davinci-003"

    # Very capable, but faster and lower cost than Davinci.
    # Max Tokens: 2,048 tokens. Training Data: up to Oct 2019.
    CURIE = "text-curie-001"

    # Capable of straightforward tasks, very fast, and lower cost.
    # Max Tokens: 2,048 tokens. Training Data: up to Oct 2019.
    BABBAGE = "text-babbage-001"

    # Capable of very simple tasks, usually the fastest model in the GPT-3
    # series, and lowest cost.
    # Max Tokens: 2,048 tokens. Training Data: up to Oct 2019.
    ADA = "text-ada-001"


class GPT3Base(_ModelEnum):
    """
    GPT base models that can understand and generate natural language.

    [GPT-Base Models OpenAI API Docs](https://platform.openai.com/docs/models/gpt-base)
    """

    # Replacement for the GPT-3 ada and babbage base models. 16,384 tokens.
    BABBAGE = "babbage-002"

    # Replacement for the GPT-3 curie and davinci base models. 16,384 tokens.
    DAVINCI = "davinci-002"

    # Earlier name for DAVINCI, kept so existing references still resolve.
    CURIE = "davinci-002"


class GPT35(_ModelEnum):
    """
    GPT-3.5 completion models.

    [GPT-3.5 Models OpenAI API Docs](https://beta.openai.com/docs/models/gpt-3.5)
    """

    # Similar capabilities to text-davinci-003 but compatible with the legacy
    # Completions endpoint, not Chat Completions.
    # Max Tokens: 4,097 tokens. Training Data: up to Sep 2021.
    TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"

    # Can do any language task with better quality, longer output, and
    # consistent instruction-following than the curie, babbage, or ada models.
    # Max Tokens: 4,097 tokens. Training Data: up to Jun 2021.
    DAVINCI = "text-davinci-003"

    # Similar capabilities to text-davinci-003 but trained with supervised
    # fine-tuning instead of reinforcement learning.
    # Max Tokens: 4,097 tokens. Training Data: up to Jun 2021.
    DAVINCI_002 = "text-davinci-002"


class Codex(_ModelEnum):
    """
    A set of models that can understand and generate code.

    [Codex Models OpenAI API Docs](https://beta.openai.com/docs/models/codex)
    """

    # Most capable Codex model. Particularly good at translating natural
    # language to code.
    # Max Tokens: 8,000 tokens. Training Data: up to Jun 2021.
    DAVINCI = "code-davinci-002"

    # Almost as capable as Davinci Codex, but slightly faster. This speed
    # advantage may make it preferable for real-time applications.
    # Max Tokens: 2,048 tokens.
    CUSHMAN = "code-cushman-001"


class Feature(_ModelEnum):
    """
    Models that are feature specific.

    Using the Edits endpoint, for example, requires a specific model.
    [API Docs](https://beta.openai.com/docs/guides/completion/editing-text)
    """

    DAVINCI = "text-davinci-edit-001"


class Chat(_ModelEnum):
    """
    Models for chat completions.

    [API Docs](https://platform.openai.com/docs/api-reference/chat/create)
    """

    # Most capable GPT-3.5 model and optimized for chat at 1/10th the cost of
    # text-davinci-003. Will be updated with the latest model iteration.
    CHATGPT = "gpt-3.5-turbo"

    # Snapshot of gpt-3.5-turbo from March 1st 2023. Does not receive updates
    # and was only supported for a three month period ending June 1st 2023.
    CHATGPT_0301 = "gpt-3.5-turbo-0301"

    # Snapshot of gpt-3.5-turbo from November 6th 2023 with improved
    # instruction following, JSON mode and parallel function calling.
    # Max Tokens: 16,385 tokens. Training Data: up to Sep 2021.
    CHATGPT_1106 = "gpt-3.5-turbo-1106"

    # More capable than any GPT-3.5 model, able to do more complex tasks, and
    # optimized for chat. Will be updated with the latest model iteration.
    # Max Tokens: 8,192 tokens. Training Data: up to Sep 2021.
    CHATGPT4 = "gpt-4"

    # Same capabilities as the base gpt-4 model but with 4x the context length.
    # Max Tokens: 32,768 tokens. Training Data: up to Sep 2021.
    CHATGPT4_32K = "gpt-4-32k"


class GPT4(_ModelEnum):
    """
    Models for GPT-4 chat completions.

    Access may need to be requested first: https://openai.com/waitlist/gpt-4-api
    [API Docs](https://platform.openai.com/docs/api-reference/chat/create)
    """

    # More capable than any GPT-3.5 model, able to do more complex tasks, and
    # optimized for chat. Will be updated with the latest model iteration.
    # Max Tokens: 8,192 tokens. Training Data: up to Sep 2021.
    GPT4 = "gpt-4"

    # Snapshot of gpt-4 from March 14th 2023. Will not receive updates.
    GPT4_0314 = "gpt-4-0314"

    # Improved instruction following, JSON mode, reproducible outputs and
    # parallel function calling. Returns at most 4,096 output tokens.
    # Preview model, not yet suited for production traffic.
    # Max Tokens: 128,000 tokens. Training Data: up to Apr 2023.
    GPT4_1106_PREVIEW = "gpt-4-1106-preview"

    # Currently points to gpt-4-32k-0613.
    # Max Tokens: 32,768 tokens.
    GPT4_32K = "gpt-4-32k"

    # Snapshot of gpt-4-32k from March 14th 2023. Will not receive updates.
    GPT4_32K_0314 = "gpt-4-32k-0314"

    # Snapshot of gpt-4-32k from June 13th 2023 with improved function
    # calling support.
    GPT4_32K_0613 = "gpt-4-32k-0613"


class Embedding(_ModelEnum):
    """
    Models for embeddings.

    [API Docs](https://platform.openai.com/docs/api-reference/embeddings)
    """

    # Replaces five separate models for text search, text similarity, and code
    # search, and outperforms the previous most capable model, Davinci, at most
    # tasks while being priced 99.8% lower.
    ADA = "text-embedding-ada-002"


class Moderation(_ModelEnum):
    """
    Models for the moderations endpoint.

    [API Docs](https://platform.openai.com/docs/api-reference/moderations)
    """

    # Default. Automatically upgraded over time.
    LATEST = "text-moderation-latest"

    # Advance notice is given before this model is updated. Accuracy may be
    # slightly lower than text-moderation-latest.
    STABLE = "text-moderation-stable"


class Other(BaseModel):
    """A model identifier outside the catalog, passed through as given."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str

    def __init__(self, name: str, **data: object) -> None:
        super().__init__(name=name, **data)

    def __str__(self) -> str:
        return self.name


ModelType: TypeAlias = Union[
    GPT3,
    GPT3Base,
    GPT35,
    Codex,
    Feature,
    Chat,
    GPT4,
    Embedding,
    Moderation,
    Other,
]

# Closed families in declaration order, keyed by family tag.
FAMILIES: dict[str, type[_ModelEnum]] = {
    "gpt3": GPT3,
    "gpt3_base": GPT3Base,
    "gpt3_5": GPT35,
    "codex": Codex,
    "feature": Feature,
    "chat": Chat,
    "gpt4": GPT4,
    "embedding": Embedding,
    "moderation": Moderation,
}


class ModelInfo(BaseModel):
    """
    Descriptive metadata for a catalog member.

    Guidance for choosing a model only. None of these fields are checked
    against requests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    family: ModelFamily
    name: str
    description: str = ""
    max_tokens: Optional[int] = None
    training_data: Optional[str] = None
    deprecated: bool = False
    docs_url: Optional[str] = None
