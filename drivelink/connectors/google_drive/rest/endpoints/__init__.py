"""Google Drive REST endpoint registry."""

from __future__ import annotations

from drivelink.runtime.rest import ResponseAdapter, RestEndpointSpec

from .copy import SPEC as CopySpec  # noqa: N811
from .copy import Adapter as CopyAdapter
from .create_folder import SPEC as CreateFolderSpec  # noqa: N811
from .create_folder import Adapter as CreateFolderAdapter
from .list_items import SPEC as ListItemsSpec  # noqa: N811
from .list_items import Adapter as ListItemsAdapter
from .remove import SPEC as RemoveSpec  # noqa: N811
from .remove import Adapter as RemoveAdapter
from .storage_info import SPEC as StorageInfoSpec  # noqa: N811
from .storage_info import Adapter as StorageInfoAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "list_items": (ListItemsSpec, ListItemsAdapter),
    "storage_info": (StorageInfoSpec, StorageInfoAdapter),
    "remove": (RemoveSpec, RemoveAdapter),
    "create_folder": (CreateFolderSpec, CreateFolderAdapter),
    "copy": (CopySpec, CopyAdapter),
}

__all__ = ["_ENDPOINT_REGISTRY"]
