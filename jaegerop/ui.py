"""The UI configuration config map and how the query component mounts it."""

from __future__ import annotations

import re

from .meta import ConfigMap, KeyToPath, ObjectMeta, Volume, VolumeMount
from .types import Jaeger, JaegerCommonSpec

_UI_CONFIG_OPTION = "--query.ui-config=/etc/config/ui.json"


def _dns_name(name: str) -> str:
    """Lower-case ``name`` and keep only characters valid in a DNS name."""
    cleaned = re.sub(r"[^a-z0-9.-]", "-", name.lower())
    return cleaned.strip("-.")


def _config_map_name(jaeger: Jaeger) -> str:
    return f"{jaeger.name}-ui-configuration"


def _volume_name(jaeger: Jaeger) -> str:
    return _dns_name(f"{jaeger.name}-ui-configuration-volume")


class UIConfig:
    """Builds the UI config map for a Jaeger instance."""

    def __init__(self, jaeger: Jaeger) -> None:
        self.jaeger = jaeger

    def get(self) -> ConfigMap | None:
        """The config map, or ``None`` when no UI options are set."""
        options = self.jaeger.spec.ui.options
        if options.is_empty():
            return None

        self.jaeger.logger().debug("Assembling the UI configmap")
        name = _config_map_name(self.jaeger)
        return ConfigMap(
            api_version="v1",
            kind="ConfigMap",
            metadata=ObjectMeta(
                name=name,
                namespace=self.jaeger.namespace,
                labels={
                    "app": "jaeger",
                    "app.kubernetes.io/name": name,
                    "app.kubernetes.io/instance": self.jaeger.name,
                    "app.kubernetes.io/component": "ui-configuration",
                    "app.kubernetes.io/part-of": "jaeger",
                    "app.kubernetes.io/managed-by": "jaeger-operator",
                },
                owner_references=[self.jaeger.owner_reference()],
            ),
            data={"ui": options.to_json()},
        )


def update(jaeger: Jaeger, common_spec: JaegerCommonSpec) -> list[str]:
    """Add the UI volume and mount to ``common_spec`` when UI options are set.

    Returns the command-line options to add, empty when nothing was changed.
    """
    if jaeger.spec.ui.options.is_empty():
        return []

    volume_name = _volume_name(jaeger)
    common_spec.volumes.append(
        Volume(
            name=volume_name,
            config_map_name=_config_map_name(jaeger),
            items=[KeyToPath(key="ui", path="ui.json")],
        )
    )
    common_spec.volume_mounts.append(
        VolumeMount(name=volume_name, mount_path="/etc/config", read_only=True)
    )
    return [_UI_CONFIG_OPTION]