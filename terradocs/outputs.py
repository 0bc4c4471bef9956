"""Terraform outputs, their rendering and the orderings used to list them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

from terradocs.items import Position
from terradocs.values import String, Value, dump_json, to_xml

_HTML_ESCAPES = {ord("<"): "\\u003c", ord(">"): "\\u003e", ord("&"): "\\u0026"}


@dataclass
class Output:
    """A Terraform output, optionally carrying its current value."""

    name: str = ""
    description: String = field(default_factory=lambda: String(""))
    value: Value | None = None
    sensitive: bool = False
    position: Position = field(default_factory=Position)
    show_value: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.description, String):
            self.description = String(self.description or "")

    def get_value(self) -> str:
        """Indented JSON of the value; empty when values are hidden or null."""
        if not self.show_value or self.value is None:
            return ""
        value = dump_json(self.value, "  ").translate(_HTML_ESCAPES)
        if value == "null":
            return ""
        return value

    def has_default(self) -> bool:
        """Whether the output has a value set to show."""
        if not self.show_value or self.value is None:
            return False
        return self.value.has_default()

    def to_json(self) -> str:
        """Compact JSON object followed by a newline.

        ``value`` and ``sensitive`` appear only when values are shown.
        """
        parts = [
            '"name":' + dump_json(self.name),
            '"description":' + dump_json(self.description),
        ]
        if self.show_value:
            value = "null" if self.value is None else dump_json(self.value)
            parts.append('"value":' + value)
            parts.append('"sensitive":' + ("true" if self.sensitive else "false"))
        return "{" + ",".join(parts) + "}\n"

    def to_xml(self, tag: str = "output") -> str:
        """XML element named ``tag``; value and sensitivity only when shown."""
        parts = [to_xml(self.name, "name"), to_xml(self.description, "description")]
        if self.show_value:
            if self.value is not None:
                parts.append(self.value.marshal_xml("value"))
            parts.append(to_xml(self.sensitive, "sensitive"))
        return f"<{tag}>{''.join(parts)}</{tag}>"

    def to_yaml(self) -> dict[str, Any]:
        """Plain data for a YAML emitter; value keys only when values are shown."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description.marshal_yaml(),
        }
        if self.show_value:
            data["value"] = None if self.value is None else self.value.marshal_yaml()
            data["sensitive"] = self.sensitive
        return data


@dataclass(frozen=True)
class OutputValue:
    """One entry of the JSON printed by ``terraform output -json``."""

    sensitive: bool = False
    type: Any = None
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OutputValue:
        """Build an entry from its decoded JSON object."""
        return cls(
            sensitive=bool(data.get("sensitive", False)),
            type=data.get("type"),
            value=data.get("value"),
        )


def _sorted_by(
    outputs: Iterable[Output], less: Callable[[Output, Output], bool]
) -> list[Output]:
    def compare(a: Output, b: Output) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(outputs, key=cmp_to_key(compare))


def sort_outputs_by_name(outputs: Iterable[Output]) -> list[Output]:
    """Outputs ordered by name."""
    return sorted(outputs, key=lambda o: o.name)


def sort_outputs_by_position(outputs: Iterable[Output]) -> list[Output]:
    """Outputs ordered by where they are declared."""
    return _sorted_by(
        outputs,
        lambda a, b: a.position.filename < b.position.filename
        or a.position.line < b.position.line,
    )