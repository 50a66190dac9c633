"""API version lookup per resource kind."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from kubefrag.core.config import KubefragConfig

# Kind groups served outside the core API, keyed by the ResourceVersioning field
_KIND_GROUPS: dict[str, tuple[str, ...]] = {
    "apps_version": ("Deployment", "ReplicaSet", "StatefulSet", "DaemonSet"),
    "batch_version": ("Job", "CronJob"),
    "networking_version": ("Ingress", "NetworkPolicy"),
    "rbac_version": ("Role", "RoleBinding", "ClusterRole", "ClusterRoleBinding"),
    "apiextensions_version": ("CustomResourceDefinition",),
    "openshift_apps_version": ("DeploymentConfig",),
    "openshift_route_version": ("Route",),
    "openshift_build_version": ("BuildConfig",),
    "openshift_image_version": ("ImageStream", "ImageStreamTag"),
    "openshift_template_version": ("Template",),
    "openshift_project_version": ("Project", "ProjectRequest"),
}


@runtime_checkable
class ApiVersionResolver(Protocol):
    """Anything that can map a kind to its API version."""

    def for_kind(self, kind: str | None) -> str | None:
        """Return the API version for ``kind`` or None when unknown."""
        ...


class ResourceVersioning(BaseModel):
    """Default API versions, grouped the way the Kubernetes API groups kinds.

    Kinds not listed in any group resolve to ``core_version``.
    """

    core_version: str = "v1"
    apps_version: str = "apps/v1"
    batch_version: str = "batch/v1"
    networking_version: str = "networking.k8s.io/v1"
    rbac_version: str = "rbac.authorization.k8s.io/v1"
    apiextensions_version: str = "apiextensions.k8s.io/v1"
    openshift_apps_version: str = "apps.openshift.io/v1"
    openshift_route_version: str = "route.openshift.io/v1"
    openshift_build_version: str = "build.openshift.io/v1"
    openshift_image_version: str = "image.openshift.io/v1"
    openshift_template_version: str = "template.openshift.io/v1"
    openshift_project_version: str = "project.openshift.io/v1"
    overrides: dict[str, str] = Field(
        default_factory=dict, description="Explicit kind -> apiVersion entries"
    )

    @classmethod
    def from_config(cls, config: KubefragConfig) -> ResourceVersioning:
        """Build versioning from the ``*_version`` settings of ``config``."""
        values = {
            name: getattr(config, name)
            for name in cls.model_fields
            if name.endswith("_version")
        }
        return cls(**values)

    def for_kind(self, kind: str | None) -> str | None:
        if kind is None:
            return None
        if kind in self.overrides:
            return self.overrides[kind]
        for field_name, kinds in _KIND_GROUPS.items():
            if kind in kinds:
                return getattr(self, field_name)
        return self.core_version

    def with_overrides(self, overrides: dict[str, str]) -> ResourceVersioning:
        """Return a copy with additional explicit kind -> apiVersion entries."""
        return self.model_copy(update={"overrides": {**self.overrides, **overrides}})
