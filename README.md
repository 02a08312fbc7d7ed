# jaegerop

`jaegerop` models the Jaeger custom resource that describes a Jaeger
tracing deployment on Kubernetes or OpenShift. It also builds some of the
Kubernetes objects such a deployment needs: service accounts and config
maps.

The package has no runtime dependencies.

## Resource model

`jaegerop.types` holds the `jaegertracing.io/v1` resource as dataclasses:
`Jaeger`, `JaegerSpec`, the per-component specs (`JaegerQuerySpec`,
`JaegerCollectorSpec`, `JaegerIngesterSpec`, `JaegerAgentSpec`,
`JaegerAllInOneSpec`, `JaegerIngressSpec`, `JaegerStorageSpec` and the
rest), `JaegerStatus` and `JaegerList`. `IngressSecurityType` lists the
ingress security settings (`NONE`, `NONE_EXPLICIT`, `OAUTH_PROXY`).

```python
from jaegerop.meta import NamespacedName
from jaegerop.types import new_jaeger

jaeger = new_jaeger(NamespacedName(name="simplest", namespace="observability"))
jaeger.spec.collector.service_account = "collector-sa"
jaeger.owner_reference()   # OwnerReference with controller=True
jaeger.logger().debug("ready")   # logger carrying instance and namespace
```

`jaegerop.meta` holds the plain metadata and object shapes used
throughout: `NamespacedName`, `TypeMeta`, `ObjectMeta`, `OwnerReference`,
`Volume`, `VolumeMount`, `KeyToPath`, `ConfigMap` and `ServiceAccount`.

`jaegerop.legacy_types` holds the older `io.jaegertracing/v1alpha1`
resource, with its own `new_jaeger(name)`.

## Options

`jaegerop.options.Options` flattens nested option documents into dotted
keys with string values, which become command-line arguments:

```python
from jaegerop.options import Options

opts = Options.from_json('{"log-level": "debug", "memory": {"max-traces": 10000}}')
sorted(opts.to_args())
# ['--log-level=debug', '--memory.max-traces=10000']

opts.filter("memory").as_dict()
# {'memory.max-traces': '10000'}
```

Numbers keep the text they were written with. JSON that is not valid, or
not an object, raises `ValueError`. Filtering by a prefix such as `es`
also keeps keys that start with `es-archive.`. `to_json` writes the
flattened entries back out as a JSON object.

`jaegerop.legacy_options.Options` behaves the same, except that numbers
are read as floating-point values and unreadable JSON gives empty options
instead of an error.

## Free-form documents

`jaegerop.freeform.FreeForm` keeps a JSON document with its hierarchy
intact; the UI and sampling settings use it. `is_empty` is true for no
document or `{}`, `to_json` returns the text (`{}` when unset), and
`get_map` decodes it, raising `ValueError` when nothing is set.
`jaegerop.legacy_options.FreeForm` is the same without `get_map`.

## Service accounts

`jaegerop.account` builds the service accounts for an instance:

- `get_accounts` returns them all: the main account from `main_account`,
  preceded by the account from `oauth_proxy` when ingress security is
  `oauth-proxy`.
- `service_account_for(jaeger, component)` gives the account name a
  `Component` runs under: the component's own setting, else the
  instance-wide one, else the instance name.
- `oauth_proxy_account_name` and `oauth_redirect_reference` give the
  proxy account's name and its redirect-reference annotation.

## Config maps

`jaegerop.sampling.SamplingConfig(jaeger).get()` returns the sampling
strategies config map, falling back to a probabilistic default when no
sampling options are set.

`jaegerop.ui.UIConfig(jaeger).get()` returns the UI config map, or `None`
when no UI options are set.

The `update(jaeger, common_spec)` function in each of these two modules
appends the config map's volume and volume mount to `common_spec` and
returns the command-line options to add to the component. The UI version
changes nothing and returns an empty list when no UI options are set.

## What it does not do

This package only models resources and builds objects in memory. It does
not talk to a Kubernetes API server, watch or reconcile resources, create
deployments, services, ingresses, routes or jobs, or provide a
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```