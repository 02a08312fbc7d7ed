import json

from jaegerop.account import (
    Component,
    get_accounts,
    main_account,
    oauth_proxy,
    oauth_proxy_account_name,
    oauth_redirect_reference,
    service_account_for,
)
from jaegerop.meta import NamespacedName
from jaegerop.types import IngressSecurityType, new_jaeger


def test_with_security_nil():
    jaeger = new_jaeger(NamespacedName(name="TestWithOAuthProxyNil"))
    assert jaeger.spec.ingress.security == IngressSecurityType.NONE
    sas = get_accounts(jaeger)
    assert len(sas) == 1
    assert sas[0] == main_account(jaeger)


def test_with_security_none():
    jaeger = new_jaeger(NamespacedName(name="TestWithOAuthProxyFalse"))
    jaeger.spec.ingress.security = IngressSecurityType.NONE
    sas = get_accounts(jaeger)
    assert len(sas) == 1
    assert sas[0] == main_account(jaeger)


def test_with_security_oauth_proxy():
    jaeger = new_jaeger(NamespacedName(name="TestWithOAuthProxyTrue"))
    jaeger.spec.ingress.security = IngressSecurityType.OAUTH_PROXY
    sas = get_accounts(jaeger)
    assert len(sas) == 2
    assert sas[0].name == "TestWithOAuthProxyTrue-ui-proxy"
    assert sas[1].name == "TestWithOAuthProxyTrue"


def test_jaeger_name():
    jaeger = new_jaeger(NamespacedName(name="foo"))
    jaeger.spec.service_account = "bar"
    jaeger.spec.collector.service_account = "col-sa"
    jaeger.spec.query.service_account = "query-sa"
    jaeger.spec.agent.service_account = "agent-sa"
    jaeger.spec.all_in_one.service_account = "aio-sa"

    assert service_account_for(jaeger, "") == "foo"
    assert service_account_for(jaeger, None) == "foo"
    assert service_account_for(jaeger, Component.COLLECTOR) == "col-sa"
    assert service_account_for(jaeger, Component.QUERY) == "query-sa"
    assert service_account_for(jaeger, Component.ALL_IN_ONE) == "aio-sa"
    assert service_account_for(jaeger, Component.AGENT) == "agent-sa"
    assert service_account_for(jaeger, Component.INGESTER) == "bar"


def test_unknown_component_uses_instance_name():
    jaeger = new_jaeger(NamespacedName(name="foo"))
    jaeger.spec.service_account = "bar"
    assert service_account_for(jaeger, "unknown") == "foo"
    assert service_account_for(jaeger, "collector") == "bar"


def test_main_account_metadata():
    jaeger = new_jaeger(NamespacedName(name="main", namespace="ns"))
    account = main_account(jaeger)
    assert account.namespace == "ns"
    assert account.metadata.labels["app.kubernetes.io/component"] == "service-account"
    assert account.metadata.labels["app.kubernetes.io/instance"] == "main"
    assert account.metadata.owner_references[0].controller is True
    assert account.metadata.owner_references[0].name == "main"


def test_oauth_redirect_reference():
    jaeger = new_jaeger(NamespacedName(name="TestOAuthRedirectReference"))
    jaeger.spec.ingress.security = IngressSecurityType.OAUTH_PROXY
    reference = oauth_redirect_reference(jaeger)
    assert jaeger.name in reference
    assert json.loads(reference) == {
        "kind": "OAuthRedirectReference",
        "apiVersion": "v1",
        "reference": {"kind": "Route", "name": "TestOAuthRedirectReference"},
    }


def test_oauth_proxy():
    jaeger = new_jaeger(NamespacedName(name="TestOAuthProxy"))
    jaeger.spec.ingress.security = IngressSecurityType.OAUTH_PROXY
    account = oauth_proxy(jaeger)
    assert account.name == f"{jaeger.name}-ui-proxy"
    assert oauth_proxy_account_name(jaeger) == "TestOAuthProxy-ui-proxy"
    assert account.kind == "ServiceAccount"
    assert account.api_version == "v1"
    key = "serviceaccounts.openshift.io/oauth-redirectreference.primary"
    assert account.metadata.annotations[key] == oauth_redirect_reference(jaeger)
    assert (
        account.metadata.labels["app.kubernetes.io/component"]
        == "service-account-oauth-proxy"
    )