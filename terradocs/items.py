"""Items discovered in a Terraform module: inputs, module calls, providers,
requirements and resources, with the orderings used to list them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import TypeVar

from terradocs.values import Nil, String, Value, dump_json

_T = TypeVar("_T")


@dataclass(frozen=True)
class Position:
    """Where an item is declared: file name and line number."""

    filename: str = ""
    line: int = 0


@dataclass
class Input:
    """A Terraform input variable."""

    name: str = ""
    type: String = field(default_factory=lambda: String(""))
    description: String = field(default_factory=lambda: String(""))
    default: Value = field(default_factory=Nil)
    required: bool = False
    position: Position = field(default_factory=Position)

    def get_value(self) -> str:
        """Indented JSON of the default; empty for a required input without one."""
        value = dump_json(self.default, "  ").strip()
        if value == "null":
            return "" if self.required else "null"
        return value

    def has_default(self) -> bool:
        """Whether the variable has a default value set."""
        return self.default.has_default() or not self.required


@dataclass
class ModuleCall:
    """A submodule called by a Terraform module."""

    name: str = ""
    source: str = ""
    version: str = ""
    position: Position = field(default_factory=Position)

    def full_name(self) -> str:
        """The source, followed by the version when there is one."""
        if self.version:
            return f"{self.source},{self.version}"
        return self.source


@dataclass
class Provider:
    """A provider used by the resources of a module."""

    name: str = ""
    alias: String = field(default_factory=lambda: String(""))
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def full_name(self) -> str:
        """The name, followed by the alias when there is one."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


@dataclass
class Requirement:
    """A version requirement of a module: Terraform core or a provider."""

    name: str = ""
    version: String = field(default_factory=lambda: String(""))


@dataclass
class Resource:
    """A managed resource or data source created by a module."""

    type: str = ""
    name: str = ""
    provider_name: str = ""
    provider_source: str = ""
    mode: str = ""
    version: String = field(default_factory=lambda: String(""))
    position: Position = field(default_factory=Position)

    def spec(self) -> str:
        """Resource address in the form ``<provider>_<type>.<name>``."""
        return f"{self.provider_name}_{self.type}.{self.name}"

    def get_mode(self) -> str:
        """Normalised mode: ``resource``, ``data source`` or ``invalid``."""
        return {"managed": "resource", "data": "data source"}.get(self.mode, "invalid")

    def url(self) -> str:
        """Best guess at the registry documentation URL, or an empty string."""
        kind = {"managed": "resources", "data": "data-sources"}.get(self.mode)
        if kind is None or self.provider_source.count("/") > 1:
            return ""
        return (
            "https://registry.terraform.io/providers/"
            f"{self.provider_source}/{self.version}/docs/{kind}/{self.type}"
        )


def _sorted_by(items: Iterable[_T], less: Callable[[_T, _T], bool]) -> list[_T]:
    def compare(a: _T, b: _T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(items, key=cmp_to_key(compare))


def _position_less(a: Position, b: Position) -> bool:
    return a.filename < b.filename or a.line < b.line


def sort_inputs_by_name(inputs: Iterable[Input]) -> list[Input]:
    """Inputs ordered by name."""
    return sorted(inputs, key=lambda i: i.name)


def sort_inputs_by_required(inputs: Iterable[Input]) -> list[Input]:
    """Inputs without a default first, each group ordered by name."""
    return sorted(inputs, key=lambda i: (i.has_default(), i.name))


def sort_inputs_by_position(inputs: Iterable[Input]) -> list[Input]:
    """Inputs ordered by where they are declared."""
    return _sorted_by(inputs, lambda a, b: _position_less(a.position, b.position))


def sort_inputs_by_type(inputs: Iterable[Input]) -> list[Input]:
    """Inputs ordered by type, then by name."""
    return sorted(inputs, key=lambda i: (str(i.type), i.name))


def sort_modulecalls_by_name(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls ordered by name."""
    return sorted(calls, key=lambda c: c.name)


def sort_modulecalls_by_source(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls ordered by source, then by name."""
    return sorted(calls, key=lambda c: (c.source, c.name))


def sort_modulecalls_by_position(calls: Iterable[ModuleCall]) -> list[ModuleCall]:
    """Module calls ordered by where they are declared."""
    return _sorted_by(calls, lambda a, b: _position_less(a.position, b.position))


def sort_providers_by_name(providers: Iterable[Provider]) -> list[Provider]:
    """Providers ordered by name, then by alias."""
    return sorted(providers, key=lambda p: (p.name, str(p.alias)))


def sort_providers_by_position(providers: Iterable[Provider]) -> list[Provider]:
    """Providers ordered by where they are declared."""
    return _sorted_by(providers, lambda a, b: _position_less(a.position, b.position))


def sort_resources_by_type(resources: Iterable[Resource]) -> list[Resource]:
    """Resources grouped by mode (managed, data, other), each by spec then name."""
    by_spec = sorted(resources, key=lambda r: (r.spec(), r.name))
    return sorted(by_spec, key=lambda r: r.mode, reverse=True)