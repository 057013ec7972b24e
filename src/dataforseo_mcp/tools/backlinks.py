from typing import Dict, List, Optional

from pydantic import Field

from ..registry import ToolRegistry
from .common import FilterParameters, PaginationParameters, live

MODULE = "BACKLINKS"


class BacklinksTargetParameters(PaginationParameters, FilterParameters):
    target: str = Field(..., description="Domain, subdomain or page URL")
    include_subdomains: Optional[bool] = Field(
        None, description="Include subdomains of the target"
    )
    backlinks_status_type: Optional[str] = Field(
        None, description="'all', 'live' or 'lost'"
    )


class BacklinksListParameters(BacklinksTargetParameters):
    mode: Optional[str] = Field(
        None, description="'as_is', 'one_per_domain' or 'one_per_anchor'"
    )


class BulkRanksParameters(PaginationParameters):
    targets: List[str] = Field(..., description="Domains or pages (max 1000)")
    rank_scale: Optional[str] = Field(
        None, description="'one_hundred' or 'one_thousand'"
    )


class DomainIntersectionParameters(PaginationParameters, FilterParameters):
    targets: Dict[str, str] = Field(
        ...,
        description="Object of up to 20 domains keyed by index, e.g. {'1': 'a.com', '2': 'b.com'}",
    )
    exclude_targets: Optional[List[str]] = Field(
        None, description="Domains whose backlinks are excluded"
    )


def register_backlinks_tools(registry: ToolRegistry, client):
    tools = registry.registrar(client, module=MODULE)

    tools.tool(
        "backlinks_summary",
        BacklinksTargetParameters,
        live("/backlinks/summary/live"),
        "Get a backlink profile overview for a target",
    )
    tools.tool(
        "backlinks_backlinks",
        BacklinksListParameters,
        live("/backlinks/backlinks/live"),
        "List backlinks pointing to a target",
    )
    tools.tool(
        "backlinks_referring_domains",
        BacklinksTargetParameters,
        live("/backlinks/referring_domains/live"),
        "List domains linking to a target",
    )
    tools.tool(
        "backlinks_anchors",
        BacklinksTargetParameters,
        live("/backlinks/anchors/live"),
        "List anchor texts used in links to a target",
    )
    tools.tool(
        "backlinks_bulk_ranks",
        BulkRanksParameters,
        live("/backlinks/bulk_ranks/live"),
        "Get rank scores for many domains or pages at once",
    )
    tools.tool(
        "backlinks_domain_intersection",
        DomainIntersectionParameters,
        live("/backlinks/domain_intersection/live"),
        "Find domains that link to several targets at once",
    )
    return tools.registered
