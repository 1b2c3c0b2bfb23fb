"""Box REST endpoint registry."""

from __future__ import annotations

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from .list_items import SPEC as ListItemsSpec  # noqa: N811
from .list_items import Adapter as ListItemsAdapter
from .move import SPEC as MoveSpec  # noqa: N811
from .move import Adapter as MoveAdapter
from .remove import SPEC as RemoveSpec  # noqa: N811
from .remove import Adapter as RemoveAdapter
from .storage_info import SPEC as StorageInfoSpec  # noqa: N811
from .storage_info import Adapter as StorageInfoAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "list_items": (ListItemsSpec, ListItemsAdapter),
    "storage_info": (StorageInfoSpec, StorageInfoAdapter),
    "remove": (RemoveSpec, RemoveAdapter),
    "move": (MoveSpec, MoveAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


__all__ = ["_ENDPOINT_REGISTRY", "get_endpoint_spec", "get_endpoint_adapter"]
