import json

from jaegerop.legacy_options import FreeForm, Options

UICONFIG = (
    '{"es":{"password":"password","server-urls":"http://elasticsearch:9200",'
    '"username":"elastic"}}'
)


def _es_form():
    return FreeForm(
        {
            "es": {
                "server-urls": "http://elasticsearch:9200",
                "username": "elastic",
                "password": "password",
            }
        }
    )


def test_simple_option():
    o = Options.from_json('{"key": "value"}')
    assert o.to_args()[0] == "--key=value"


def test_no_options():
    assert len(Options().to_args()) == 0


def test_nested_option():
    o = Options.from_json('{"log-level": "debug", "memory": {"max-traces": 10000}}')
    args = sorted(o.to_args())
    assert len(args) == 2
    assert args[0] == "--log-level=debug"
    assert args[1] == "--memory.max-traces=10000"


def test_marshalling():
    o = Options(
        {
            "es.server-urls": "http://elasticsearch.default.svc:9200",
            "es.username": "elastic",
            "es.password": "password",
        }
    )
    s = o.to_json()
    assert '"es.password":"password"' in s
    assert '"es.server-urls":"http://elasticsearch.default.svc:9200"' in s
    assert '"es.username":"elastic"' in s


def test_marshalling_with_filter():
    o = Options(
        {
            "es.server-urls": "http://elasticsearch.default.svc:9200",
            "memory.max-traces": "50000",
        }
    )
    o = o.filter("memory")
    assert len(o.to_args()) == 1
    assert o.as_dict()["memory.max-traces"] == "50000"


def test_filter_keeps_legacy_type():
    o = Options({"memory.max-traces": "50000"}).filter("memory")
    assert isinstance(o, Options)
    assert o.as_dict() == {"memory.max-traces": "50000"}


def test_multiple_sub_values():
    o = Options.from_json(
        '{"es": {"server-urls": "http://elasticsearch:9200", '
        '"username": "elastic", "password": "password"}}'
    )
    assert len(o.to_args()) == 3


def test_multiple_sub_values_with_filter():
    o = Options.from_json(
        '{"memory": {"max-traces": "50000"}, "es": {"server-urls": '
        '"http://elasticsearch:9200", "username": "elastic", "password": "password"}}'
    )
    o = o.filter("memory")
    assert len(o.to_args()) == 1
    assert o.as_dict()["memory.max-traces"] == "50000"


def test_multiple_sub_values_with_filter_with_archive():
    o = Options.from_json(
        '{"memory": {"max-traces": "50000"}, "es": {"server-urls": '
        '"http://elasticsearch:9200", "username": "elastic", "password": "password"}, '
        '"es-archive": {"server-urls": "http://elasticsearch2:9200"}}'
    )
    o = o.filter("es")
    assert len(o.to_args()) == 4
    m = o.as_dict()
    assert m["es.server-urls"] == "http://elasticsearch:9200"
    assert m["es-archive.server-urls"] == "http://elasticsearch2:9200"
    assert m["es.username"] == "elastic"
    assert m["es.password"] == "password"


def test_exposed_map():
    o = Options.from_json('{"cassandra": {"servers": "cassandra:9042"}}')
    assert o.as_dict()["cassandra.servers"] == "cassandra:9042"


def test_invalid_json_gives_empty_options():
    o = Options.from_json("^")
    assert o.to_args() == []
    assert o.as_dict() == {}


def test_non_object_json_gives_empty_options():
    assert Options.from_json("[1, 2]").as_dict() == {}


def test_to_json_round_trip():
    o = Options.from_json('{"a": {"b": "c"}, "d": "e"}')
    assert json.loads(o.to_json()) == {"a.b": "c", "d": "e"}
    assert Options.from_json(o.to_json()) == o


def test_free_form():
    o = _es_form()
    assert o.to_json() == UICONFIG


def test_free_form_unmarshal_marshal():
    o = FreeForm.from_json(UICONFIG)
    assert o.to_json() == UICONFIG


def test_free_form_is_empty_false():
    assert _es_form().is_empty() is False


def test_free_form_is_empty_true():
    assert FreeForm({}).is_empty() is True


def test_free_form_is_empty_none_true():
    o = FreeForm(None)
    assert o.is_empty() is True
    assert o.to_json() == "{}"