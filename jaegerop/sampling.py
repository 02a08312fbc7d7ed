"""The sampling strategies config map and how components mount it."""

from __future__ import annotations

import re

from .meta import ConfigMap, KeyToPath, ObjectMeta, Volume, VolumeMount
from .types import Jaeger, JaegerCommonSpec

_DEFAULT_SAMPLING_STRATEGY = '{"default_strategy":{"param":1,"type":"probabilistic"}}'
_STRATEGIES_OPTION = "--sampling.strategies-file=/etc/jaeger/sampling/sampling.json"


def _dns_name(name: str) -> str:
    """Lower-case ``name`` and keep only characters valid in a DNS name."""
    cleaned = re.sub(r"[^a-z0-9.-]", "-", name.lower())
    return cleaned.strip("-.")


def _config_map_name(jaeger: Jaeger) -> str:
    return f"{jaeger.name}-sampling-configuration"


def _volume_name(jaeger: Jaeger) -> str:
    return _dns_name(f"{jaeger.name}-sampling-configuration-volume")


class SamplingConfig:
    """Builds the sampling config map for a Jaeger instance."""

    def __init__(self, jaeger: Jaeger) -> None:
        self.jaeger = jaeger

    def get(self) -> ConfigMap:
        """The config map, with a default strategy when none is configured."""
        options = self.jaeger.spec.sampling.options
        if options.is_empty():
            sampling = _DEFAULT_SAMPLING_STRATEGY
        else:
            sampling = options.to_json()

        self.jaeger.logger().debug("Assembling the Sampling configmap")
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
                    "app.kubernetes.io/component": "sampling-configuration",
                    "app.kubernetes.io/part-of": "jaeger",
                    "app.kubernetes.io/managed-by": "jaeger-operator",
                },
                owner_references=[self.jaeger.owner_reference()],
            ),
            data={"sampling": sampling},
        )


def update(jaeger: Jaeger, common_spec: JaegerCommonSpec) -> list[str]:
    """Add the sampling volume and mount to ``common_spec``.

    Returns the command-line options that point the component at the file.
    """
    volume_name = _volume_name(jaeger)
    common_spec.volumes.append(
        Volume(
            name=volume_name,
            config_map_name=_config_map_name(jaeger),
            items=[KeyToPath(key="sampling", path="sampling.json")],
        )
    )
    common_spec.volume_mounts.append(
        VolumeMount(name=volume_name, mount_path="/etc/jaeger/sampling", read_only=True)
    )
    return [_STRATEGIES_OPTION]