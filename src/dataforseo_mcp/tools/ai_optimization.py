from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..registry import ToolRegistry
from .common import FilterParameters, LocationParameters, PaginationParameters, live

MODULE = "AI_OPTIMIZATION"


class LlmResponsesParameters(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    user_prompt: str = Field(..., description="Prompt sent to the model")
    model_name: str = Field(..., description="Model to query, e.g. 'gpt-4o-mini'")
    system_message: Optional[str] = Field(None, description="Optional system message")
    max_output_tokens: Optional[int] = Field(None, description="Output token limit")
    temperature: Optional[float] = Field(None, description="Sampling temperature")
    web_search: Optional[bool] = Field(None, description="Let the model search the web")


class LlmMentionsParameters(LocationParameters, PaginationParameters, FilterParameters):
    target: List[dict] = Field(
        ...,
        description="Targets to look up, e.g. [{'domain': 'example.com'}] or [{'keyword': 'seo'}]",
    )
    platform: Optional[str] = Field(None, description="'google' or 'chat_gpt'")


class AiKeywordVolumeParameters(LocationParameters):
    keywords: List[str] = Field(..., description="Keywords to look up (max 1000)")


def register_ai_optimization_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "ai_optimization_chat_gpt_llm_responses",
        LlmResponsesParameters,
        live("/ai_optimization/chat_gpt/llm_responses/live"),
        "Get a ChatGPT response to a prompt, with cited sources",
    )
    tools.tool(
        "ai_optimization_llm_mentions_search",
        LlmMentionsParameters,
        live("/ai_optimization/llm_mentions/search/live"),
        "Find mentions of a domain or keyword in LLM answers",
    )
    tools.tool(
        "ai_optimization_keyword_search_volume",
        AiKeywordVolumeParameters,
        live("/ai_optimization/ai_keyword_data/keywords_search_volume/live"),
        "Get AI search volume estimates for keywords",
    )
    return tools.registered
