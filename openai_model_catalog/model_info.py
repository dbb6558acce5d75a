"""
Descriptive metadata for every catalog member.

Keep in step with the enums in types.py; tests check that each canonical
member has exactly one entry here.
"""

from typing import List

from .types import ModelInfo

_GPT3_DOCS = "https://beta.openai.com/docs/models/gpt-3"
_GPT_BASE_DOCS = "https://platform.openai.com/docs/models/gpt-base"
_GPT35_DOCS = "https://beta.openai.com/docs/models/gpt-3.5"
_CODEX_DOCS = "https://beta.openai.com/docs/models/codex"
_EDITS_DOCS = "https://beta.openai.com/docs/guides/completion/editing-text"
_CHAT_DOCS = "https://platform.openai.com/docs/api-reference/chat/create"
_EMBEDDINGS_DOCS = "https://platform.openai.com/docs/api-reference/embeddings"
_MODERATIONS_DOCS = "https://platform.openai.com/docs/api-reference/moderations"

MODEL_INFO: List[ModelInfo] = [
    # GPT-3
    ModelInfo(
        id="text-davinci-003",
        family="gpt3",
        name="GPT-3 Davinci",
        description="Most capable GPT-3 model, highest quality and cost of the series.",
        max_tokens=4000,
        training_data="Jun 2021",
        deprecated=True,
        docs_url=_GPT3_DOCS,
    ),
    ModelInfo(
        id="text-curie-001",
        family="gpt3",
        name="GPT-3 Curie",
        description="Very capable, but faster and lower cost than Davinci.",
        max_tokens=2048,
        training_data="Oct 2019",
        deprecated=True,
        docs_url=_GPT3_DOCS,
    ),
    ModelInfo(
        id="text-babbage-001",
        family="gpt3",
        name="GPT-3 Babbage",
        description="Straightforward tasks, very fast, lower cost.",
        max_tokens=2048,
        training_data="Oct 2019",
        deprecated=True,
        docs_url=_GPT3_DOCS,
    ),
    ModelInfo(
        id="text-ada-001",
        family="gpt3",
        name="GPT-3 Ada",
        description="Very simple tasks, fastest and lowest cost of the series.",
        max_tokens=2048,
        training_data="Oct 2019",
        deprecated=True,
        docs_url=_GPT3_DOCS,
    ),
    # GPT base
    ModelInfo(
        id="babbage-002",
        family="gpt3_base",
        name="Babbage 002",
        description="Replacement for the GPT-3 ada and babbage base models.",
        max_tokens=16384,
        training_data="Sep 2021",
        docs_url=_GPT_BASE_DOCS,
    ),
    ModelInfo(
        id="davinci-002",
        family="gpt3_base",
        name="Davinci 002",
        description="Replacement for the GPT-3 curie and davinci base models.",
        max_tokens=16384,
        training_data="Sep 2021",
        docs_url=_GPT_BASE_DOCS,
    ),
    # GPT-3.5
    ModelInfo(
        id="gpt-3.5-turbo-instruct",
        family="gpt3_5",
        name="GPT-3.5 Turbo Instruct",
        description="text-davinci-003 class capabilities on the legacy Completions endpoint.",
        max_tokens=4097,
        training_data="Sep 2021",
        docs_url=_GPT35_DOCS,
    ),
    ModelInfo(
        id="text-davinci-003",
        family="gpt3_5",
        name="GPT-3.5 Davinci",
        description="Better quality, longer output and more consistent instruction-following than curie, babbage or ada.",
        max_tokens=4097,
        training_data="Jun 2021",
        deprecated=True,
        docs_url=_GPT35_DOCS,
    ),
    ModelInfo(
        id="text-davinci-002",
        family="gpt3_5",
        name="GPT-3.5 Davinci 002",
        description="Like text-davinci-003, trained with supervised fine-tuning.",
        max_tokens=4097,
        training_data="Jun 2021",
        deprecated=True,
        docs_url=_GPT35_DOCS,
    ),
    # Codex
    ModelInfo(
        id="code-davinci-002",
        family="codex",
        name="Codex Davinci",
        description="Most capable Codex model, good at translating natural language to code.",
        max_tokens=8000,
        training_data="Jun 2021",
        deprecated=True,
        docs_url=_CODEX_DOCS,
    ),
    ModelInfo(
        id="code-cushman-001",
        family="codex",
        name="Codex Cushman",
        description="Almost as capable as Davinci Codex, slightly faster.",
        max_tokens=2048,
        deprecated=True,
        docs_url=_CODEX_DOCS,
    ),
    # Feature
    ModelInfo(
        id="text-davinci-edit-001",
        family="feature",
        name="Davinci Edit",
        description="Model for the Edits endpoint.",
        deprecated=True,
        docs_url=_EDITS_DOCS,
    ),
    # Chat
    ModelInfo(
        id="gpt-3.5-turbo",
        family="chat",
        name="ChatGPT",
        description="Most capable GPT-3.5 model, optimized for chat at 1/10th the cost of text-davinci-003.",
        max_tokens=4096,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-3.5-turbo-0301",
        family="chat",
        name="ChatGPT 0301",
        description="Snapshot of gpt-3.5-turbo from March 1st 2023.",
        max_tokens=4096,
        training_data="Sep 2021",
        deprecated=True,
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-3.5-turbo-1106",
        family="chat",
        name="ChatGPT 1106",
        description="Snapshot of gpt-3.5-turbo from November 6th 2023.",
        max_tokens=16385,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4",
        family="chat",
        name="GPT-4",
        description="More capable than any GPT-3.5 model, optimized for chat.",
        max_tokens=8192,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-32k",
        family="chat",
        name="GPT-4 32K",
        description="Same capabilities as gpt-4 with 4x the context length.",
        max_tokens=32768,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    # GPT-4
    ModelInfo(
        id="gpt-4",
        family="gpt4",
        name="GPT-4",
        description="More capable than any GPT-3.5 model, optimized for chat.",
        max_tokens=8192,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-0314",
        family="gpt4",
        name="GPT-4 0314",
        description="Snapshot of gpt-4 from March 14th 2023.",
        max_tokens=8192,
        training_data="Sep 2021",
        deprecated=True,
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-1106-preview",
        family="gpt4",
        name="GPT-4 Turbo Preview",
        description="JSON mode, reproducible outputs and parallel function calling. At most 4,096 output tokens.",
        max_tokens=128000,
        training_data="Apr 2023",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-32k",
        family="gpt4",
        name="GPT-4 32K",
        description="Currently points to gpt-4-32k-0613.",
        max_tokens=32768,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-32k-0314",
        family="gpt4",
        name="GPT-4 32K 0314",
        description="Snapshot of gpt-4-32k from March 14th 2023.",
        max_tokens=32768,
        training_data="Sep 2021",
        deprecated=True,
        docs_url=_CHAT_DOCS,
    ),
    ModelInfo(
        id="gpt-4-32k-0613",
        family="gpt4",
        name="GPT-4 32K 0613",
        description="Snapshot of gpt-4-32k from June 13th 2023 with improved function calling.",
        max_tokens=32768,
        training_data="Sep 2021",
        docs_url=_CHAT_DOCS,
    ),
    # Embedding
    ModelInfo(
        id="text-embedding-ada-002",
        family="embedding",
        name="Ada Embedding 002",
        description="Replaces five earlier search and similarity models at 99.8% lower price than Davinci.",
        max_tokens=8191,
        docs_url=_EMBEDDINGS_DOCS,
    ),
    # Moderation
    ModelInfo(
        id="text-moderation-latest",
        family="moderation",
        name="Moderation Latest",
        description="Default. Automatically upgraded over time.",
        max_tokens=32768,
        docs_url=_MODERATIONS_DOCS,
    ),
    ModelInfo(
        id="text-moderation-stable",
        family="moderation",
        name="Moderation Stable",
        description="Updated only with advance notice. Accuracy may be slightly lower than latest.",
        max_tokens=32768,
        docs_url=_MODERATIONS_DOCS,
    ),
]
