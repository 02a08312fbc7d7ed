"""The legacy ``io.jaegertracing/v1alpha1`` Jaeger resource."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any

from .legacy_options import FreeForm, Options
from .meta import ObjectMeta, Volume, VolumeMount
from .types import (
    FLAG_PLATFORM_AUTO_DETECT,
    FLAG_PLATFORM_KUBERNETES,
    FLAG_PLATFORM_OPENSHIFT,
    FLAG_PROVISION_ELASTICSEARCH_AUTO,
    FLAG_PROVISION_ELASTICSEARCH_FALSE,
    FLAG_PROVISION_ELASTICSEARCH_TRUE,
)

__all__ = [
    "GROUP",
    "VERSION",
    "API_VERSION",
    "KIND",
    "FLAG_PLATFORM_KUBERNETES",
    "FLAG_PLATFORM_OPENSHIFT",
    "FLAG_PLATFORM_AUTO_DETECT",
    "FLAG_PROVISION_ELASTICSEARCH_AUTO",
    "FLAG_PROVISION_ELASTICSEARCH_TRUE",
    "FLAG_PROVISION_ELASTICSEARCH_FALSE",
    "IngressSecurityType",
    "JaegerCommonSpec",
    "JaegerQuerySpec",
    "JaegerUISpec",
    "JaegerSamplingSpec",
    "JaegerIngressSpec",
    "JaegerAllInOneSpec",
    "JaegerCollectorSpec",
    "JaegerIngesterSpec",
    "JaegerAgentSpec",
    "JaegerStorageSpec",
    "ElasticsearchSpec",
    "JaegerCassandraCreateSchemaSpec",
    "JaegerDependenciesSpec",
    "JaegerEsIndexCleanerSpec",
    "JaegerSpec",
    "JaegerStatus",
    "Jaeger",
    "JaegerList",
    "new_jaeger",
]

GROUP = "io.jaegertracing"
VERSION = "v1alpha1"
API_VERSION = f"{GROUP}/{VERSION}"
KIND = "Jaeger"

_log = logging.getLogger("jaegerop")


class IngressSecurityType(str, enum.Enum):
    """The security applied to ingress objects."""

    NONE = ""
    NONE_EXPLICIT = "none"
    OAUTH_PROXY = "oauth-proxy"


@dataclass
class JaegerCommonSpec:
    """Elements shared by the Jaeger spec and each component spec."""

    volumes: list[Volume] = field(default_factory=list)
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    resources: dict[str, Any] = field(default_factory=dict)


@dataclass
class JaegerQuerySpec(JaegerCommonSpec):
    size: int = 0
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerUISpec:
    options: FreeForm = field(default_factory=FreeForm)


@dataclass
class JaegerSamplingSpec:
    options: FreeForm = field(default_factory=FreeForm)


@dataclass
class JaegerIngressSpec(JaegerCommonSpec):
    enabled: bool | None = None
    security: IngressSecurityType = IngressSecurityType.NONE


@dataclass
class JaegerAllInOneSpec(JaegerCommonSpec):
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerCollectorSpec(JaegerCommonSpec):
    size: int = 0
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerIngesterSpec(JaegerCommonSpec):
    size: int = 0
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerAgentSpec(JaegerCommonSpec):
    # Either "DaemonSet" or "Sidecar" (the default).
    strategy: str = ""
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerCassandraCreateSchemaSpec:
    enabled: bool | None = None
    image: str = ""
    datacenter: str = ""
    mode: str = ""


@dataclass
class JaegerDependenciesSpec:
    enabled: bool | None = None
    spark_master: str = ""
    schedule: str = ""
    image: str = ""
    java_opts: str = ""
    cassandra_use_ssl: bool = False
    cassandra_local_dc: str = ""
    cassandra_client_auth_enabled: bool = False
    elasticsearch_client_node_only: bool = False
    elasticsearch_nodes_wan_only: bool = False


@dataclass
class JaegerEsIndexCleanerSpec:
    enabled: bool | None = None
    number_of_days: int = 0
    schedule: str = ""
    image: str = ""


@dataclass
class ElasticsearchSpec:
    """Settings handed down to the Elasticsearch operator."""

    resources: dict[str, Any] = field(default_factory=dict)
    node_count: int = 0
    node_selector: dict[str, str] = field(default_factory=dict)
    storage: dict[str, Any] = field(default_factory=dict)
    redundancy_policy: str = ""


@dataclass
class JaegerStorageSpec:
    # One of "memory" (default), "cassandra", "elasticsearch", "kafka" or "managed".
    type: str = ""
    secret_name: str = ""
    options: Options = field(default_factory=Options)
    cassandra_create_schema: JaegerCassandraCreateSchemaSpec = field(
        default_factory=JaegerCassandraCreateSchemaSpec
    )
    spark_dependencies: JaegerDependenciesSpec = field(
        default_factory=JaegerDependenciesSpec
    )
    es_index_cleaner: JaegerEsIndexCleanerSpec = field(
        default_factory=JaegerEsIndexCleanerSpec
    )
    elasticsearch: ElasticsearchSpec = field(default_factory=ElasticsearchSpec)


@dataclass
class JaegerSpec(JaegerCommonSpec):
    """The desired state of a legacy Jaeger instance."""

    strategy: str = ""
    all_in_one: JaegerAllInOneSpec = field(default_factory=JaegerAllInOneSpec)
    query: JaegerQuerySpec = field(default_factory=JaegerQuerySpec)
    collector: JaegerCollectorSpec = field(default_factory=JaegerCollectorSpec)
    ingester: JaegerIngesterSpec = field(default_factory=JaegerIngesterSpec)
    agent: JaegerAgentSpec = field(default_factory=JaegerAgentSpec)
    ui: JaegerUISpec = field(default_factory=JaegerUISpec)
    sampling: JaegerSamplingSpec = field(default_factory=JaegerSamplingSpec)
    storage: JaegerStorageSpec = field(default_factory=JaegerStorageSpec)
    ingress: JaegerIngressSpec = field(default_factory=JaegerIngressSpec)


@dataclass
class JaegerStatus:
    """Span counters summed across all collectors."""

    collector_spans_received: int = 0
    collector_spans_dropped: int = 0


@dataclass
class Jaeger:
    """The legacy Jaeger custom resource."""

    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: JaegerSpec = field(default_factory=JaegerSpec)
    status: JaegerStatus = field(default_factory=JaegerStatus)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def logger(self) -> logging.LoggerAdapter:
        """A logger carrying this instance's name and namespace."""
        return logging.LoggerAdapter(
            _log, {"instance": self.name, "namespace": self.namespace}
        )


@dataclass
class JaegerList:
    api_version: str = ""
    kind: str = ""
    items: list[Jaeger] = field(default_factory=list)


def new_jaeger(name: str) -> Jaeger:
    """Return a new legacy Jaeger instance with the given name."""
    return Jaeger(metadata=ObjectMeta(name=name))