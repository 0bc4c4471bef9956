import pytest

from terradocs.items import (
    Input,
    ModuleCall,
    Position,
    Provider,
    Requirement,
    Resource,
    sort_inputs_by_name,
    sort_inputs_by_position,
    sort_inputs_by_required,
    sort_inputs_by_type,
    sort_modulecalls_by_name,
    sort_modulecalls_by_position,
    sort_modulecalls_by_source,
    sort_providers_by_name,
    sort_providers_by_position,
    sort_resources_by_type,
)
from terradocs.values import String, value_of


def _input(default, required):
    return Input(
        name="input",
        type=String("type"),
        description=String("description"),
        default=value_of(default),
        required=required,
        position=Position(filename="foo.tf", line=13),
    )


@pytest.mark.parametrize(
    "default, required, expect_value, expect_default",
    [
        (None, True, "", False),
        (None, False, "null", True),
        (True, False, "true", True),
        (False, False, "false", True),
        ("", False, '""', True),
        ("foo", False, '"foo"', True),
        (42, False, "42", True),
        (13.75, False, "13.75", True),
        (["a", "b", "c"], False, '[\n  "a",\n  "b",\n  "c"\n]', True),
        ([], False, "[]", True),
        ({"a": 1, "b": 2, "c": 3}, False, '{\n  "a": 1,\n  "b": 2,\n  "c": 3\n}', True),
        ({}, False, "{}", True),
    ],
)
def test_input_value(default, required, expect_value, expect_default):
    item = _input(default, required)
    assert item.get_value() == expect_value
    assert item.has_default() is expect_default


def _sample_inputs():
    return [
        Input("e", String(""), String("description of e"), value_of(True), False,
              Position("foo/variables.tf", 35)),
        Input("a", String("string"), String(""), value_of("a"), False,
              Position("foo/variables.tf", 10)),
        Input("d", String("string"), String("description for d"), value_of(None), True,
              Position("foo/variables.tf", 23)),
        Input("b", String("number"), String("description of b"), value_of(None), True,
              Position("foo/variables.tf", 42)),
        Input("c", String("list"), String("description of c"), value_of("c"), False,
              Position("foo/variables.tf", 51)),
        Input("f", String("string"), String("description of f"), value_of(None), False,
              Position("foo/variables.tf", 59)),
    ]


@pytest.mark.parametrize(
    "sorter, expected",
    [
        (sort_inputs_by_name, ["a", "b", "c", "d", "e", "f"]),
        (sort_inputs_by_required, ["b", "d", "a", "c", "e", "f"]),
        (sort_inputs_by_position, ["a", "d", "e", "b", "c", "f"]),
        (sort_inputs_by_type, ["e", "c", "b", "a", "d", "f"]),
    ],
)
def test_inputs_sorted(sorter, expected):
    assert [i.name for i in sorter(_sample_inputs())] == expected


@pytest.mark.parametrize(
    "call, expected",
    [
        (ModuleCall(name="provider", source="bar"), "bar"),
        (ModuleCall(name="provider", source="bar", version="1.2.3"), "bar,1.2.3"),
    ],
)
def test_modulecall_full_name(call, expected):
    assert call.full_name() == expected


def _sample_modulecalls():
    return [
        ModuleCall("a", "z", "1.2.3", Position("foo/main.tf", 35)),
        ModuleCall("b", "z", "1.2.3", Position("foo/main.tf", 10)),
        ModuleCall("c", "m", "1.2.3", Position("foo/main.tf", 23)),
        ModuleCall("e", "x", "1.2.3", Position("foo/main.tf", 42)),
        ModuleCall("d", "l", "1.2.3", Position("foo/main.tf", 51)),
        ModuleCall("f", "a", "1.2.3", Position("foo/main.tf", 59)),
    ]


@pytest.mark.parametrize(
    "sorter, expected",
    [
        (sort_modulecalls_by_name, ["a", "b", "c", "d", "e", "f"]),
        (sort_modulecalls_by_source, ["f", "d", "c", "e", "a", "b"]),
        (sort_modulecalls_by_position, ["b", "c", "a", "e", "d", "f"]),
    ],
)
def test_modulecall_sort(sorter, expected):
    assert [m.name for m in sorter(_sample_modulecalls())] == expected


@pytest.mark.parametrize(
    "alias, expected",
    [("", "provider"), ("alias", "provider.alias")],
)
def test_provider_full_name(alias, expected):
    provider = Provider("provider", String(alias), String(">= 1.2.3"), Position("foo.tf", 13))
    assert provider.full_name() == expected


def _sample_providers():
    return [
        Provider("d", String(""), String("1.3.2"), Position("foo/main.tf", 21)),
        Provider("d", String("a"), String("> 1.x"), Position("foo/main.tf", 25)),
        Provider("b", String(""), String("= 2.1.0"), Position("foo/main.tf", 13)),
        Provider("a", String(""), String(""), Position("foo/main.tf", 39)),
        Provider("c", String(""), String("~> 0.5.0"), Position("foo/main.tf", 53)),
        Provider("e", String(""), String(""), Position("foo/main.tf", 47)),
        Provider("e", String("a"), String("> 1.0"), Position("foo/main.tf", 5)),
    ]


@pytest.mark.parametrize(
    "sorter, expected",
    [
        (sort_providers_by_name, ["a", "b", "c", "d", "d.a", "e", "e.a"]),
        (sort_providers_by_position, ["e.a", "b", "d", "d.a", "a", "e", "c"]),
    ],
)
def test_providers_sort(sorter, expected):
    assert [p.full_name() for p in sorter(_sample_providers())] == expected


def test_requirement_fields():
    req = Requirement(name="terraform", version=String(">= 0.12"))
    assert req.name == "terraform"
    assert str(req.version) == ">= 0.12"


def test_resource_spec():
    resource = Resource("private_key", "baz", "tls", "hashicorp/tls", "managed", String("latest"))
    assert resource.spec() == "tls_private_key.baz"


@pytest.mark.parametrize(
    "resource, expected",
    [
        (Resource("private_key", "", "tls", "hashicorp/tls", "managed", String("latest")), "resource"),
        (Resource("caller_identity", "", "aws", "hashicorp/aws", "data", String("latest")), "data source"),
        (Resource("caller_identity", "", "aws", "hashicorp/aws", "", String("latest")), "invalid"),
    ],
)
def test_resource_mode(resource, expected):
    assert resource.get_mode() == expected


@pytest.mark.parametrize(
    "resource, expected",
    [
        (
            Resource("private_key", "", "tls", "hashicorp/tls", "managed", String("latest")),
            "https://registry.terraform.io/providers/hashicorp/tls/latest/docs/resources/private_key",
        ),
        (
            Resource("caller_identity", "", "aws", "hashicorp/aws", "data", String("latest")),
            "https://registry.terraform.io/providers/hashicorp/aws/latest/docs/data-sources/caller_identity",
        ),
        (
            Resource("custom", "", "nih", "http://nih.tld/some/path/to/provider/source",
                     "managed", String("latest")),
            "",
        ),
        (Resource("x", "", "aws", "hashicorp/aws", "", String("latest")), ""),
    ],
)
def test_resource_url(resource, expected):
    assert resource.url() == expected


def _sample_resources():
    rows = [
        ("e", "d", "c", "hashicorp/e", "managed", "1.5.0"),
        ("e", "c", "c", "hashicorp/e", "managed", "1.5.0"),
        ("e_x", "d", "c", "hashicorp/e", "managed", "1.5.0"),
        ("e_x", "c", "c", "hashicorp/e", "managed", "1.5.0"),
        ("a", "a", "a", "hashicorp/a", "managed", "1.1.0"),
        ("d", "d", "b", "hashicorp/d", "managed", "1.4.0"),
        ("b", "b", "b", "hashicorp/b", "managed", "1.2.0"),
        ("c", "c", "c", "hashicorp/c", "managed", "1.3.0"),
        ("f", "f", "a", "hashicorp/f", "managed", "1.6.0"),
        ("z", "z", "z", "hashicorp/a", "managed", "1.5.0"),
        ("z", "z", "z", "hashicorp/a", "data", "1.5.0"),
        ("a", "a", "a", "hashicorp/a", "data", "1.5.0"),
        ("z", "z", "z", "hashicorp/a", "", "1.5.0"),
        ("a", "a", "a", "hashicorp/a", "", "1.5.0"),
    ]
    return [Resource(t, n, p, s, m, String(v)) for t, n, p, s, m, v in rows]


def test_resources_sorted_by_type():
    actual = [r.spec() for r in sort_resources_by_type(_sample_resources())]
    assert actual == [
        "a_a.a", "a_f.f", "b_b.b", "b_d.d", "c_c.c", "c_e.c", "c_e.d",
        "c_e_x.c", "c_e_x.d", "z_z.z", "a_a.a", "z_z.z", "a_a.a", "z_z.z",
    ]


def test_resources_sorted_by_type_and_mode():
    suffix = {"managed": " (r)", "data": " (d)"}
    actual = [
        r.spec() + suffix.get(r.mode, "")
        for r in sort_resources_by_type(_sample_resources())
    ]
    assert actual == [
        "a_a.a (r)", "a_f.f (r)", "b_b.b (r)", "b_d.d (r)", "c_c.c (r)",
        "c_e.c (r)", "c_e.d (r)", "c_e_x.c (r)", "c_e_x.d (r)", "z_z.z (r)",
        "a_a.a (d)", "z_z.z (d)", "a_a.a", "z_z.z",
    ]


def test_sort_does_not_modify_argument():
    inputs = _sample_inputs()
    before = [i.name for i in inputs]
    sort_inputs_by_name(inputs)
    assert [i.name for i in inputs] == before