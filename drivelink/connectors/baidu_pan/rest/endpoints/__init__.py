"""Baidu Pan REST endpoint registry."""

from __future__ import annotations

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from .account_info import SPEC as AccountInfoSpec  # noqa: N811
from .account_info import Adapter as AccountInfoAdapter
from .list_items import SPEC as ListItemsSpec  # noqa: N811
from .list_items import Adapter as ListItemsAdapter
from .move import SPEC as MoveSpec  # noqa: N811
from .move import Adapter as MoveAdapter
from .public_link import SPEC as PublicLinkSpec  # noqa: N811
from .public_link import Adapter as PublicLinkAdapter
from .remove import SPEC as RemoveSpec  # noqa: N811
from .remove import Adapter as RemoveAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "account_info": (AccountInfoSpec, AccountInfoAdapter),
    "list_items": (ListItemsSpec, ListItemsAdapter),
    "move": (MoveSpec, MoveAdapter),
    "public_link": (PublicLinkSpec, PublicLinkAdapter),
    "remove": (RemoveSpec, RemoveAdapter),
}

__all__ = ["_ENDPOINT_REGISTRY"]
