"""A loaded Terraform module and the helpers used while loading it."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from terradocs.items import (
    Input,
    ModuleCall,
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
from terradocs.options import Options, SortBy
from terradocs.outputs import (
    Output,
    OutputValue,
    sort_outputs_by_name,
    sort_outputs_by_position,
)

_SUPPORTED_FORMATS = frozenset({".adoc", ".md", ".tf", ".txt"})
_REF_MARKER = "?ref="


@dataclass
class Module:
    """A Terraform module: its header, footer and discovered items."""

    header: str = ""
    footer: str = ""
    inputs: list[Input] = field(default_factory=list)
    module_calls: list[ModuleCall] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)
    requirements: list[Requirement] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)
    required_inputs: list[Input] = field(default_factory=list)
    optional_inputs: list[Input] = field(default_factory=list)

    def has_header(self) -> bool:
        """Whether the module has a header."""
        return bool(self.header)

    def has_footer(self) -> bool:
        """Whether the module has a footer."""
        return bool(self.footer)

    def has_inputs(self) -> bool:
        """Whether the module has inputs."""
        return bool(self.inputs)

    def has_module_calls(self) -> bool:
        """Whether the module calls other modules."""
        return bool(self.module_calls)

    def has_outputs(self) -> bool:
        """Whether the module has outputs."""
        return bool(self.outputs)

    def has_providers(self) -> bool:
        """Whether the module uses providers."""
        return bool(self.providers)

    def has_requirements(self) -> bool:
        """Whether the module declares requirements."""
        return bool(self.requirements)

    def has_resources(self) -> bool:
        """Whether the module creates resources."""
        return bool(self.resources)


def get_file_format(filename: str) -> str:
    """The extension of ``filename`` including its dot, or an empty string."""
    if not filename:
        return ""
    last = filename.rfind(".")
    if last == -1:
        return ""
    return filename[last:]


def is_file_format_supported(filename: str, section: str) -> bool:
    """Check that a header or footer can be read from ``filename``.

    Raises :class:`ValueError` describing why the file cannot be used.
    """
    if not section:
        raise ValueError("section is missing")
    if not filename:
        raise ValueError(f"--{section}-from value is missing")
    if get_file_format(filename) in _SUPPORTED_FORMATS:
        return True
    raise ValueError(
        f"only .adoc, .md, .tf, and .txt formats are supported to read {section} from"
    )


def format_source(source: str, version: str) -> tuple[str, str]:
    """Split a ``?ref=`` suffix off a module source unless a version is given."""
    if version:
        return source, version
    pos = source.rfind(_REF_MARKER)
    if pos == -1:
        return source, ""
    start = pos + len(_REF_MARKER)
    if start >= len(source):
        return source, ""
    return source[:pos], source[start:]


def resource_version(constraints: Sequence[str]) -> str:
    """The exact version pinned by the last constraint, or ``latest``."""
    if not constraints:
        return "latest"
    parts = constraints[-1].split(" ")
    if len(parts) == 1:
        first = parts[0][:1]
        if first and first in "0123456789":
            return parts[0]
        if first == "=":
            return parts[0][1:]
        return "latest"
    if len(parts) == 2 and parts[0] == "=":
        return parts[1]
    return "latest"


def load_output_values(options: Options) -> dict[str, OutputValue]:
    """Current output values, from a JSON file or from ``terraform output -json``."""
    if not options.output_values_path:
        try:
            completed = subprocess.run(
                ["terraform", "output", "-json"],
                cwd=options.path or None,
                capture_output=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as err:
            raise RuntimeError(
                f"caught error while reading the terraform outputs: {err}"
            ) from err
        raw = completed.stdout
    else:
        try:
            with open(options.output_values_path, "rb") as handle:
                raw = handle.read()
        except OSError as err:
            raise RuntimeError(
                "caught error while reading the terraform outputs file at "
                f"{options.output_values_path}: {err}"
            ) from err

    decoded = json.loads(raw)
    if decoded is None:
        return {}
    if not isinstance(decoded, Mapping):
        raise ValueError("terraform outputs must be a JSON object")
    return {
        name: OutputValue.from_dict(entry) if isinstance(entry, Mapping) else OutputValue()
        for name, entry in decoded.items()
    }


def sort_items(module: Module, sort_by: SortBy | None) -> None:
    """Order the items of ``module`` in place according to ``sort_by``."""
    criteria = sort_by or SortBy()

    if criteria.type:
        sort_inputs = sort_inputs_by_type
    elif criteria.required:
        sort_inputs = sort_inputs_by_required
    elif criteria.name:
        sort_inputs = sort_inputs_by_name
    else:
        sort_inputs = sort_inputs_by_position
    module.inputs = sort_inputs(module.inputs)
    module.required_inputs = sort_inputs(module.required_inputs)
    module.optional_inputs = sort_inputs(module.optional_inputs)

    any_criteria = criteria.name or criteria.required or criteria.type
    if any_criteria:
        module.outputs = sort_outputs_by_name(module.outputs)
        module.providers = sort_providers_by_name(module.providers)
    else:
        module.outputs = sort_outputs_by_position(module.outputs)
        module.providers = sort_providers_by_position(module.providers)

    module.resources = sort_resources_by_type(module.resources)

    if criteria.name or criteria.required:
        module.module_calls = sort_modulecalls_by_name(module.module_calls)
    elif criteria.type:
        module.module_calls = sort_modulecalls_by_source(module.module_calls)
    else:
        module.module_calls = sort_modulecalls_by_position(module.module_calls)