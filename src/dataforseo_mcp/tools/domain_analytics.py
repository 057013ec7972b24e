from typing import List, Optional

from pydantic import BaseModel, Field

from ..registry import ToolRegistry
from .common import FilterParameters, PaginationParameters, live

MODULE = "DOMAIN_ANALYTICS"


class DomainTechnologiesParameters(BaseModel):
    target: str = Field(..., description="Domain, without https:// and www.")


class DomainsByTechnologyParameters(PaginationParameters, FilterParameters):
    technologies: Optional[List[str]] = Field(
        None, description="Technology names, e.g. ['Nginx']"
    )
    groups: Optional[List[str]] = Field(None, description="Technology group ids")
    categories: Optional[List[str]] = Field(
        None, description="Technology category ids"
    )


class WhoisOverviewParameters(PaginationParameters, FilterParameters):
    pass


def register_domain_analytics_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "domain_analytics_technologies_domain_technologies",
        DomainTechnologiesParameters,
        live("/domain_analytics/technologies/domain_technologies/live"),
        "Get the technologies used by a domain",
    )
    tools.tool(
        "domain_analytics_technologies_domains_by_technology",
        DomainsByTechnologyParameters,
        live("/domain_analytics/technologies/domains_by_technology/live"),
        "Find domains that use the given technologies",
    )
    tools.tool(
        "domain_analytics_whois_overview",
        WhoisOverviewParameters,
        live("/domain_analytics/whois/overview/live"),
        "Get WHOIS data enriched with backlink and ranking metrics",
    )
    return tools.registered
