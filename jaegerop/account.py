"""Service accounts created for a Jaeger instance."""

from __future__ import annotations

from enum import Enum

from .meta import ObjectMeta, ServiceAccount
from .types import IngressSecurityType, Jaeger


class Component(str, Enum):
    """The Jaeger components that may run under their own service account."""

    COLLECTOR = "collector"
    QUERY = "query"
    INGESTER = "ingester"
    ALL_IN_ONE = "all-in-one"
    AGENT = "agent"


def _labels(name: str, instance: str, component: str) -> dict[str, str]:
    return {
        "app": "jaeger",
        "app.kubernetes.io/name": name,
        "app.kubernetes.io/instance": instance,
        "app.kubernetes.io/component": component,
        "app.kubernetes.io/part-of": "jaeger",
        "app.kubernetes.io/managed-by": "jaeger-operator",
    }


def get_accounts(jaeger: Jaeger) -> list[ServiceAccount]:
    """Return every service account to create for this Jaeger instance."""
    accounts = []
    if jaeger.spec.ingress.security == IngressSecurityType.OAUTH_PROXY:
        accounts.append(oauth_proxy(jaeger))
    accounts.append(main_account(jaeger))
    return accounts


def main_account(jaeger: Jaeger) -> ServiceAccount:
    """The service account the Jaeger components run under by default."""
    name = service_account_for(jaeger, None)
    return ServiceAccount(
        metadata=ObjectMeta(
            name=name,
            namespace=jaeger.namespace,
            labels=_labels(name, jaeger.name, "service-account"),
            owner_references=[jaeger.owner_reference()],
        )
    )


def service_account_for(jaeger: Jaeger, component: Component | str | None) -> str:
    """The service account name a component runs under.

    The component's own setting wins over the instance-wide one; without
    either, or without a known component, the instance name is used.
    """
    try:
        kind = Component(component) if component else None
    except ValueError:
        kind = None

    specs = {
        Component.COLLECTOR: jaeger.spec.collector,
        Component.QUERY: jaeger.spec.query,
        Component.INGESTER: jaeger.spec.ingester,
        Component.ALL_IN_ONE: jaeger.spec.all_in_one,
        Component.AGENT: jaeger.spec.agent,
    }
    account = ""
    if kind is not None:
        account = specs[kind].service_account or jaeger.spec.service_account
    return account or jaeger.name


def oauth_proxy(jaeger: Jaeger) -> ServiceAccount:
    """The service account acting as the OAuth Proxy's client."""
    name = oauth_proxy_account_name(jaeger)
    return ServiceAccount(
        api_version="v1",
        kind="ServiceAccount",
        metadata=ObjectMeta(
            name=name,
            namespace=jaeger.namespace,
            labels=_labels(name, jaeger.name, "service-account-oauth-proxy"),
            annotations={
                "serviceaccounts.openshift.io/oauth-redirectreference.primary": (
                    oauth_redirect_reference(jaeger)
                ),
            },
            owner_references=[jaeger.owner_reference()],
        ),
    )


def oauth_proxy_account_name(jaeger: Jaeger) -> str:
    return f"{jaeger.name}-ui-proxy"


def oauth_redirect_reference(jaeger: Jaeger) -> str:
    """The OAuth redirect reference pointing at the instance's route."""
    return (
        '{"kind":"OAuthRedirectReference","apiVersion":"v1",'
        '"reference":{"kind":"Route","name":"%s"}}' % jaeger.name
    )