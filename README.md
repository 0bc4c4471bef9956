# terradocs

`terradocs` holds the data model used to document a Terraform module:
input variables, outputs, providers, requirements, managed and data
resources, calls to other modules, and the module's header and footer
text. It also provides the orderings used to list these items and the
helpers used while collecting them.

## Installation

```
pip install terradocs
```

For running the test suite:

```
pip install "terradocs[test]"
pytest
```

## What is in the package

- `terradocs.values`: typed default and output values (`Value` and its
  kinds `Nil`, `String`, `Empty`, `Number`, `Bool`, `List`, `Map`).
  `value_of` wraps a plain Python value in the matching kind and
  `type_of(t, v)` returns `t` when given, otherwise a Terraform type name
  guessed from `v` (`string`, `number`, `bool`, `list`, `map` or `any`).
  Each value has `has_default()`, `length()`, `raw()`, and renders itself
  as JSON (`marshal_json`), as an XML element (`marshal_xml(tag)`) and as
  YAML-ready plain data (`marshal_yaml`). An empty `String` renders as
  `null` in JSON and as `xsi:nil="true"` in XML. `dump_json(value,
  indent)` is the shared JSON encoder (keys sorted) and `to_xml(value,
  tag)` the shared XML one.
- `terradocs.items`: `Position`, `Input`, `ModuleCall`, `Provider`,
  `Requirement` and `Resource`. `Input.get_value()` gives the default as
  indented JSON (empty for a required input without one);
  `ModuleCall.full_name()` and `Provider.full_name()` add the version or
  alias; `Resource.spec()`, `Resource.get_mode()` and `Resource.url()`
  give the address, the normalised mode and a registry documentation URL.
  Ordering helpers return new sorted lists: `sort_inputs_by_name`,
  `sort_inputs_by_required`, `sort_inputs_by_position`,
  `sort_inputs_by_type`, `sort_modulecalls_by_name`,
  `sort_modulecalls_by_source`, `sort_modulecalls_by_position`,
  `sort_providers_by_name`, `sort_providers_by_position` and
  `sort_resources_by_type`.
- `terradocs.outputs`: `Output` with `get_value()`, `has_default()`,
  `to_json()`, `to_xml(tag)` and `to_yaml()`; the value and sensitivity
  appear only when `show_value` is set. `OutputValue.from_dict` reads one
  entry of the JSON printed by `terraform output -json`.
  `sort_outputs_by_name` and `sort_outputs_by_position` order outputs.
- `terradocs.options`: `SortBy`, `Options` and `new_options()` (the
  defaults: show the header from `main.tf`, use the lock file).
  `Options.merge` fills only empty fields from an override;
  `Options.merge_overwrite` replaces fields with every non-empty field of
  the override. Both raise `ValueError` when given `None`.
- `terradocs.module`: `Module` with its `has_*()` checks,
  `get_file_format`, `is_file_format_supported` (raises `ValueError`
  for a missing section, a missing file name, or a format other than
  `.adoc`, `.md`, `.tf` and `.txt`), `format_source` (splits a `?ref=`
  suffix off a module source), `resource_version`, `load_output_values`
  and `sort_items`.
- `terradocs.version`: `core()`, `short()` and `full(commit)`.

## Example

```python
from terradocs.items import Input, Position, sort_inputs_by_required
from terradocs.values import String, value_of

inputs = [
    Input(name="region", type=String("string"), description=String("AWS region"),
          default=value_of("eu-west-1"), required=False,
          position=Position("variables.tf", 1)),
    Input(name="name", type=String("string"), description=String("Resource name"),
          default=value_of(None), required=True,
          position=Position("variables.tf", 6)),
]

for item in sort_inputs_by_required(inputs):
    print(item.name, item.get_value() or "n/a")
```

Required inputs come first and print `n/a`. Optional ones print their
default as JSON, for example `"eu-west-1"`.

```python
from terradocs.options import Options, new_options

options = new_options()
options.merge(Options(path="./infra"))
print(options.path, options.header_from_file)   # ./infra main.tf
```

## Output values

`load_output_values(options)` reads the file named by
`options.output_values_path`; when that is empty it runs
`terraform output -json` in `options.path`, so a `terraform` executable
must then be on the `PATH`. Failures are raised as `RuntimeError`.

## What the package does not do

- It does not parse `.tf` or `.terraform.lock.hcl` files. There is no
  function that loads a `Module` from a directory; the items are built
  by the caller and then ordered with `sort_items`.
- It does not render documents in Markdown, AsciiDoc or other formats,
  and it has no command-line program.