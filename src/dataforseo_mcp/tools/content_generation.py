from typing import List, Optional

from pydantic import BaseModel, Field

from ..registry import ToolRegistry
from .common import live

MODULE = "CONTENT_GENERATION"


class GenerateTextParameters(BaseModel):
    topic: str = Field(..., description="Subject of the generated text")
    word_count: int = Field(..., description="Target number of words")
    sub_topics: Optional[List[str]] = Field(None, description="Subtopics to cover")
    description: Optional[str] = Field(None, description="Short description of the text")
    meta_keywords: Optional[List[str]] = Field(
        None, description="Keywords to include in the text"
    )
    creativity_index: Optional[float] = Field(
        None, description="Text creativity between 0 and 1"
    )


class TextParameters(BaseModel):
    text: str = Field(..., description="Input text")


class ParaphraseParameters(TextParameters):
    creativity_index: Optional[float] = Field(
        None, description="Paraphrase creativity between 0 and 1"
    )


class GrammarParameters(TextParameters):
    language_code: Optional[str] = Field(
        None, description="Language of the text, e.g. 'en-US'"
    )


class MetaTagsParameters(TextParameters):
    creativity_index: Optional[float] = Field(
        None, description="Creativity between 0 and 1"
    )


def register_content_generation_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "content_generation_generate_text",
        GenerateTextParameters,
        live("/content_generation/generate_text/live"),
        "Generate an article on a topic",
    )
    tools.tool(
        "content_generation_paraphrase",
        ParaphraseParameters,
        live("/content_generation/paraphrase/live"),
        "Paraphrase a text",
    )
    tools.tool(
        "content_generation_check_grammar",
        GrammarParameters,
        live("/content_generation/check_grammar/live"),
        "Check a text for grammar and spelling errors",
    )
    tools.tool(
        "content_generation_generate_meta_tags",
        MetaTagsParameters,
        live("/content_generation/generate_meta_tags/live"),
        "Generate a title and meta description for a text",
    )
    return tools.registered
