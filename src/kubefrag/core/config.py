"""Global configuration for kubefrag.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class KubefragConfig(BaseSettings):
    """kubefrag configuration settings.

    Values can be overridden via environment variables with KUBEFRAG_ prefix.
    Example: KUBEFRAG_APPS_VERSION=apps/v1beta2 overrides apps_version.
    """

    # Enrichment
    default_app_name: str = Field(
        default="app",
        min_length=1,
        description="Resource name used when a fragment file carries no name segment",
    )
    mappings_file: Path | None = Field(
        default=None,
        description="YAML file with additional kind/filename mappings",
    )

    # Output
    output_format: Literal["yaml", "json"] = Field(
        default="yaml",
        description="Serialization format for built resource lists",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI",
    )

    # API versions per kind group
    core_version: str = Field(default="v1", description="Core API version")
    apps_version: str = Field(default="apps/v1", description="Deployments, StatefulSets, ...")
    batch_version: str = Field(default="batch/v1", description="Jobs and CronJobs")
    networking_version: str = Field(
        default="networking.k8s.io/v1", description="Ingress and NetworkPolicy"
    )
    rbac_version: str = Field(
        default="rbac.authorization.k8s.io/v1", description="Roles and bindings"
    )
    apiextensions_version: str = Field(
        default="apiextensions.k8s.io/v1", description="CustomResourceDefinition"
    )
    openshift_apps_version: str = Field(
        default="apps.openshift.io/v1", description="DeploymentConfig"
    )
    openshift_route_version: str = Field(default="route.openshift.io/v1", description="Route")
    openshift_build_version: str = Field(
        default="build.openshift.io/v1", description="BuildConfig"
    )
    openshift_image_version: str = Field(
        default="image.openshift.io/v1", description="ImageStream and ImageStreamTag"
    )
    openshift_template_version: str = Field(
        default="template.openshift.io/v1", description="Template"
    )
    openshift_project_version: str = Field(
        default="project.openshift.io/v1", description="Project and ProjectRequest"
    )

    model_config = {
        "env_prefix": "KUBEFRAG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> KubefragConfig:
    """Get cached configuration instance.

    Returns:
        KubefragConfig singleton instance.
    """
    return KubefragConfig()


def reload_config() -> KubefragConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh KubefragConfig instance.
    """
    get_config.cache_clear()
    return get_config()
