"""Plain object metadata and the few resource shapes the operator builds."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NamespacedName:
    """A name together with the namespace it lives in."""

    name: str = ""
    namespace: str = ""


@dataclass
class TypeMeta:
    api_version: str = ""
    kind: str = ""


@dataclass
class OwnerReference:
    api_version: str = ""
    kind: str = ""
    name: str = ""
    uid: str = ""
    controller: bool | None = None


@dataclass
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)

    def namespaced_name(self) -> NamespacedName:
        return NamespacedName(name=self.name, namespace=self.namespace)


@dataclass
class KeyToPath:
    key: str
    path: str


@dataclass
class Volume:
    """A volume backed by a config map."""

    name: str
    config_map_name: str | None = None
    items: list[KeyToPath] = field(default_factory=list)


@dataclass
class VolumeMount:
    name: str
    mount_path: str
    read_only: bool = False


@dataclass
class ConfigMap:
    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    data: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace


@dataclass
class ServiceAccount:
    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta = field(default_factory=ObjectMeta)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace