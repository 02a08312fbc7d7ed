from jaegerop import legacy_options
from jaegerop.legacy_types import (
    API_VERSION,
    IngressSecurityType,
    Jaeger,
    JaegerCommonSpec,
    JaegerList,
    JaegerStatus,
    new_jaeger,
)


def test_new_jaeger_sets_name_only():
    jaeger = new_jaeger("my-instance")
    assert jaeger.name == "my-instance"
    assert jaeger.namespace == ""
    assert jaeger.metadata.name == "my-instance"


def test_jaeger_carries_legacy_api_version():
    jaeger = Jaeger(api_version=API_VERSION, kind="Jaeger")
    assert jaeger.api_version == "io.jaegertracing/v1alpha1"
    assert jaeger.kind == "Jaeger"


def test_default_ingress_security_is_none():
    jaeger = new_jaeger("sec")
    assert jaeger.spec.ingress.security == IngressSecurityType.NONE
    assert jaeger.spec.ingress.enabled is None


def test_security_type_values():
    assert IngressSecurityType("oauth-proxy") is IngressSecurityType.OAUTH_PROXY
    assert IngressSecurityType("none") is IngressSecurityType.NONE_EXPLICIT
    assert IngressSecurityType("") is IngressSecurityType.NONE


def test_logger_carries_instance_and_namespace():
    jaeger = new_jaeger("logged")
    jaeger.metadata.namespace = "tenant1"
    adapter = jaeger.logger()
    assert adapter.extra == {"instance": "logged", "namespace": "tenant1"}


def test_default_status_counters_are_zero():
    status = JaegerStatus()
    assert status.collector_spans_received == 0
    assert status.collector_spans_dropped == 0


def test_component_options_use_legacy_types():
    jaeger = new_jaeger("opts")
    assert isinstance(jaeger.spec.collector.options, legacy_options.Options)
    assert isinstance(jaeger.spec.ui.options, legacy_options.FreeForm)
    assert jaeger.spec.ui.options.is_empty() is True
    assert jaeger.spec.storage.options.to_args() == []


def test_mutable_defaults_are_not_shared():
    first = new_jaeger("a")
    second = new_jaeger("b")
    first.spec.annotations["key"] = "value"
    first.spec.query.volumes.append("vol")
    assert second.spec.annotations == {}
    assert second.spec.query.volumes == []


def test_component_specs_share_common_fields():
    jaeger = new_jaeger("common")
    assert isinstance(jaeger.spec.agent, JaegerCommonSpec)
    assert isinstance(jaeger.spec, JaegerCommonSpec)
    jaeger.spec.agent.annotations["a"] = "b"
    assert jaeger.spec.agent.annotations == {"a": "b"}
    assert jaeger.spec.annotations == {}


def test_jaeger_list_holds_items():
    items = [new_jaeger("x"), new_jaeger("y")]
    jaeger_list = JaegerList(items=items)
    assert [j.name for j in jaeger_list.items] == ["x", "y"]


def test_equality_follows_content():
    assert new_jaeger("same") == new_jaeger("same")
    assert Jaeger() == Jaeger()
    assert not (new_jaeger("one") == new_jaeger("two"))


def test_storage_defaults():
    storage = new_jaeger("store").spec.storage
    assert storage.type == ""
    assert storage.es_index_cleaner.enabled is None
    assert storage.spark_dependencies.cassandra_use_ssl is False
    assert storage.elasticsearch.node_count == 0