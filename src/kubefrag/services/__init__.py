"""Business services for kubefrag."""

from kubefrag.services.resource_list_service import ResourceListService, build_resource_list

__all__ = [
    "ResourceListService",
    "build_resource_list",
]
