import logging

from ..clients.factory import ProviderClients, create_clients
from ..config import Settings
from ..registry import ToolFilter, ToolRegistry
from . import (
    ai_optimization,
    app_data,
    backlinks,
    business_data,
    content_analysis,
    content_generation,
    domain_analytics,
    keywords,
    labs,
    localfalcon,
    merchant,
    onpage,
    serp,
)

logger = logging.getLogger("dataforseo-mcp-tools")

# DataForSEO categories, in registration order
DATAFORSEO_MODULES = {
    serp.MODULE: serp.register_serp_tools,
    keywords.MODULE: keywords.register_keywords_tools,
    labs.MODULE: labs.register_labs_tools,
    backlinks.MODULE: backlinks.register_backlinks_tools,
    onpage.MODULE: onpage.register_onpage_tools,
    domain_analytics.MODULE: domain_analytics.register_domain_analytics_tools,
    content_analysis.MODULE: content_analysis.register_content_analysis_tools,
    content_generation.MODULE: content_generation.register_content_generation_tools,
    merchant.MODULE: merchant.register_merchant_tools,
    app_data.MODULE: app_data.register_app_data_tools,
    business_data.MODULE: business_data.register_business_data_tools,
    ai_optimization.MODULE: ai_optimization.register_ai_optimization_tools,
}

ALL_MODULES = list(DATAFORSEO_MODULES) + [localfalcon.MODULE]


def register_all_tools(registry: ToolRegistry, clients: ProviderClients) -> ToolRegistry:
    """Register every category against its provider client"""
    for module, register in DATAFORSEO_MODULES.items():
        names = register(registry, clients.dataforseo)
        if names:
            logger.info(f"Registered {len(names)} {module} tools")

    if clients.localfalcon is not None:
        logger.info("Registering Local Falcon tools")
        localfalcon.register_localfalcon_tools(registry, clients.localfalcon)
    else:
        logger.info("Local Falcon not configured (optional)")

    logger.info(f"Tool registry ready with {len(registry)} tools")
    return registry


def build_registry(settings: Settings, clients=None) -> ToolRegistry:
    """
    Create and fill the registry for a process

    Args:
        settings: Loaded Settings, used for the module and tool allow-lists
        clients: Provider clients; created from settings when omitted
    """
    if clients is None:
        clients = create_clients(settings)
    registry = ToolRegistry(ToolFilter.from_settings(settings))
    return register_all_tools(registry, clients)
