"""The Jaeger custom resource and the specs that describe it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .freeform import FreeForm
from .meta import NamespacedName, ObjectMeta, OwnerReference, Volume, VolumeMount
from .options import Options

GROUP = "jaegertracing.io"
VERSION = "v1"
API_VERSION = f"{GROUP}/{VERSION}"
KIND = "Jaeger"

FLAG_PLATFORM_KUBERNETES = "kubernetes"
FLAG_PLATFORM_OPENSHIFT = "openshift"
FLAG_PLATFORM_AUTO_DETECT = "auto-detect"
FLAG_PROVISION_ELASTICSEARCH_AUTO = "auto"
FLAG_PROVISION_ELASTICSEARCH_TRUE = "true"
FLAG_PROVISION_ELASTICSEARCH_FALSE = "false"

_log = logging.getLogger("jaegerop")


class IngressSecurityType(str, Enum):
    """How the query ingress is secured."""

    NONE = ""
    NONE_EXPLICIT = "none"
    OAUTH_PROXY = "oauth-proxy"


@dataclass
class JaegerCommonSpec:
    """Elements shared by the Jaeger spec and each component spec."""

    volumes: list[Volume] = field(default_factory=list)
    volume_mounts: list[VolumeMount] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    resources: dict[str, Any] = field(default_factory=dict)
    affinity: Any | None = None
    tolerations: list[Any] = field(default_factory=list)
    security_context: Any | None = None
    service_account: str = ""


@dataclass
class JaegerQuerySpec(JaegerCommonSpec):
    # ``size`` is deprecated in favour of ``replicas``.
    size: int = 0
    replicas: int | None = None
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
    replicas: int | None = None
    image: str = ""
    options: Options = field(default_factory=Options)


@dataclass
class JaegerIngesterSpec(JaegerCommonSpec):
    size: int = 0
    replicas: int | None = None
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
    ttl_seconds_after_finished: int | None = None


@dataclass
class JaegerDependenciesSpec:
    enabled: bool | None = None
    spark_master: str = ""
    schedule: str = ""
    image: str = ""
    java_opts: str = ""
    cassandra_client_auth_enabled: bool = False
    elasticsearch_client_node_only: bool = False
    elasticsearch_nodes_wan_only: bool = False
    ttl_seconds_after_finished: int | None = None


@dataclass
class JaegerEsIndexCleanerSpec:
    enabled: bool | None = None
    number_of_days: int | None = None
    schedule: str = ""
    image: str = ""
    ttl_seconds_after_finished: int | None = None


@dataclass
class JaegerEsRolloverSpec:
    image: str = ""
    schedule: str = ""
    conditions: str = ""
    ttl_seconds_after_finished: int | None = None
    # A duration string such as "48h".
    read_ttl: str = ""


@dataclass
class ElasticsearchSpec:
    """Settings handed down to the Elasticsearch operator."""

    image: str = ""
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
    rollover: JaegerEsRolloverSpec = field(default_factory=JaegerEsRolloverSpec)
    elasticsearch: ElasticsearchSpec = field(default_factory=ElasticsearchSpec)


@dataclass
class JaegerSpec(JaegerCommonSpec):
    """The desired state of a Jaeger instance."""

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
    """The observed state of a Jaeger instance."""


@dataclass
class Jaeger:
    """The Jaeger custom resource."""

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

    @property
    def uid(self) -> str:
        return self.metadata.uid

    def logger(self) -> logging.LoggerAdapter:
        """A logger carrying this instance's name and namespace."""
        return logging.LoggerAdapter(
            _log, {"instance": self.name, "namespace": self.namespace}
        )

    def owner_reference(self) -> OwnerReference:
        """A controlling owner reference pointing at this instance."""
        return OwnerReference(
            api_version=self.api_version,
            kind=self.kind,
            name=self.name,
            uid=self.uid,
            controller=True,
        )


@dataclass
class JaegerList:
    api_version: str = ""
    kind: str = ""
    items: list[Jaeger] = field(default_factory=list)


def new_jaeger(nsn: NamespacedName) -> Jaeger:
    """Return a new Jaeger instance with the given name and namespace."""
    return Jaeger(metadata=ObjectMeta(name=nsn.name, namespace=nsn.namespace))