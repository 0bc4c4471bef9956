"""Typed wrappers for the default and output values of Terraform items."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_JSON_ESCAPES: dict[int, str] = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}
_JSON_ESCAPES.update(
    {code: f"\\u{code:04x}" for code in range(0x20) if code not in _JSON_ESCAPES}
)

_XML_ESCAPES: dict[int, str] = {
    ord('"'): "&#34;",
    ord("'"): "&#39;",
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord("\t"): "&#x9;",
    ord("\n"): "&#xA;",
    ord("\r"): "&#xD;",
}
_XML_ESCAPES.update(
    {
        code: "\ufffd"
        for code in (*range(0x20), 0xFFFE, 0xFFFF)
        if code not in _XML_ESCAPES
    }
)


class Value(ABC):
    """A default value of an input or the value of an output."""

    __slots__ = ()

    def has_default(self) -> bool:
        """Whether the value counts as a set default."""
        return True

    def length(self) -> int:
        """Length of the underlying item."""
        return 0

    @abstractmethod
    def raw(self) -> Any:
        """The underlying plain Python value."""

    def marshal_json(self) -> str:
        """Compact JSON text of this value."""
        return dump_json(self)

    def marshal_xml(self, tag: str) -> str:
        """XML element named ``tag`` holding this value."""
        return _element(tag, _chardata(self.raw()))

    def marshal_yaml(self) -> Any:
        """Plain data to hand to a YAML emitter."""
        return self.raw()

    def _json_data(self) -> Any:
        return self.raw()


class Nil(Value):
    """No value at all; rendered as ``null``."""

    __slots__ = ()

    def has_default(self) -> bool:
        return False

    def raw(self) -> None:
        return None

    def marshal_xml(self, tag: str) -> str:
        return _nil_element(tag)

    def marshal_yaml(self) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nil)

    def __hash__(self) -> int:
        return hash(Nil)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nil()"


class String(Value, str):
    """A string value; an empty one is rendered as ``null``."""

    __slots__ = ()

    def length(self) -> int:
        return len(str(self).encode("utf-8"))

    def raw(self) -> str:
        return str(self)

    def marshal_xml(self, tag: str) -> str:
        if not self:
            return _nil_element(tag)
        return _element(tag, _escape_xml(str(self)))

    def marshal_yaml(self) -> str | None:
        text = str(self)
        if not text or text == '""':
            return None
        return text

    def _json_data(self) -> str | None:
        return str(self) if self else None

    def __repr__(self) -> str:
        return f"String({str.__repr__(self)})"


class Empty(Value, str):
    """An empty string value; always rendered as ``""`` in JSON."""

    __slots__ = ()

    def length(self) -> int:
        return len(str(self).encode("utf-8"))

    def raw(self) -> str:
        return str(self)

    def _json_data(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"Empty({str.__repr__(self)})"


class Number(Value, float):
    """A numeric value."""

    __slots__ = ()

    def raw(self) -> float:
        return float(self)

    def __repr__(self) -> str:
        return f"Number({float.__repr__(self)})"


@dataclass(frozen=True)
class Bool(Value):
    """A boolean value."""

    value: bool = False

    def raw(self) -> bool:
        return bool(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)


class List(Value, list):
    """A list of values."""

    __slots__ = ()

    def underlying(self) -> list:
        """A plain list copy of the elements."""
        return list(self)

    def length(self) -> int:
        return len(self)

    def raw(self) -> list:
        return self.underlying()

    def marshal_xml(self, tag: str) -> str:
        if not self:
            return _element(tag, "")
        items = "".join(_list_item_xml(item) for item in self)
        return f"<{tag}>{items}</{tag}>"

    def __repr__(self) -> str:
        return f"List({list.__repr__(self)})"


class Map(Value, dict):
    """A mapping of string keys to values."""

    __slots__ = ()

    def underlying(self) -> dict:
        """A plain dict copy of the entries."""
        return dict(self)

    def length(self) -> int:
        return len(self)

    def raw(self) -> dict:
        return self.underlying()

    def marshal_xml(self, tag: str) -> str:
        if not self:
            return _element(tag, "")
        parts = []
        for key in sorted(self, key=str):
            item = self[key]
            name = str(key)
            if isinstance(item, Mapping):
                parts.append(Map(item).marshal_xml(name))
            elif isinstance(item, (list, tuple)):
                parts.append(List(item).marshal_xml(name))
            else:
                parts.append(_element(name, _chardata(item)))
        return f"<{tag}>{''.join(parts)}</{tag}>"

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"


def value_of(v: Any) -> Value:
    """Wrap a plain value in the matching :class:`Value` type."""
    if isinstance(v, Value):
        v = v.raw()
    if v is None:
        return Nil()
    if isinstance(v, str):
        return String(v) if v else Empty("")
    if isinstance(v, bool):
        return Bool(v)
    if isinstance(v, (int, float)):
        return Number(v)
    if isinstance(v, (list, tuple)):
        return List(v)
    if isinstance(v, Mapping):
        return Map(v)
    return Nil()


def type_of(t: str, v: Any) -> String:
    """Terraform type name: ``t`` when given, else guessed from ``v``."""
    if t:
        return String(t)
    if isinstance(v, Value):
        v = v.raw()
    if isinstance(v, str):
        return String("string")
    if isinstance(v, bool):
        return String("bool")
    if isinstance(v, (int, float)):
        return String("number")
    if isinstance(v, (list, tuple)):
        return String("list")
    if isinstance(v, Mapping):
        return String("map")
    return String("any")


def dump_json(value: Any, indent: str | None = None) -> str:
    """Encode ``value`` as JSON with sorted keys; pretty-printed when ``indent`` is set."""
    return _encode_json(value, indent, 0)


def to_xml(value: Any, tag: str) -> str:
    """Render ``value`` as an XML element named ``tag``."""
    if not isinstance(value, Value):
        value = value_of(value)
    return value.marshal_xml(tag)


def _encode_json(value: Any, indent: str | None, level: int) -> str:
    if isinstance(value, Value):
        value = value._json_data()
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _json_float(value)
    if isinstance(value, str):
        return '"' + value.translate(_JSON_ESCAPES) + '"'
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        separator = ": " if indent is not None else ":"
        entries = [
            _encode_json(str(key), None, 0)
            + separator
            + _encode_json(item, indent, level + 1)
            for key, item in sorted(value.items(), key=lambda kv: str(kv[0]))
        ]
        return _wrap("{", "}", entries, indent, level)
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        entries = [_encode_json(item, indent, level + 1) for item in value]
        return _wrap("[", "]", entries, indent, level)
    raise TypeError(f"json: unsupported type: {type(value).__name__}")


def _wrap(
    opening: str, closing: str, entries: list[str], indent: str | None, level: int
) -> str:
    if indent is None:
        return opening + ",".join(entries) + closing
    inner = "\n" + indent * (level + 1)
    outer = "\n" + indent * level
    return opening + inner + ("," + inner).join(entries) + outer + closing


def _shortest_digits(f: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive finite float and its decimal point."""
    sign, digits, exponent = Decimal(repr(f)).as_tuple()
    digit_list = list(digits)
    while len(digit_list) > 1 and digit_list[-1] == 0:
        digit_list.pop()
        exponent += 1
    text = "".join(map(str, digit_list))
    return text, len(text) + exponent


def _fixed(digits: str, dp: int) -> str:
    if dp <= 0:
        return "0." + "0" * -dp + digits
    if dp >= len(digits):
        return digits + "0" * (dp - len(digits))
    return digits[:dp] + "." + digits[dp:]


def _scientific(digits: str, dp: int) -> str:
    exp = dp - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"


def _json_float(f: float) -> str:
    if not math.isfinite(f):
        raise ValueError(f"json: unsupported value: {f!r}")
    if f == 0:
        return "-0" if math.copysign(1.0, f) < 0 else "0"
    sign = "-" if f < 0 else ""
    magnitude = abs(f)
    digits, dp = _shortest_digits(magnitude)
    if magnitude < 1e-6 or magnitude >= 1e21:
        text = _scientific(digits, dp)
        if len(text) >= 4 and text[-4] == "e" and text[-3] == "-" and text[-2] == "0":
            text = text[:-2] + text[-1]
        return sign + text
    return sign + _fixed(digits, dp)


def _general_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    if f == 0:
        return "-0" if math.copysign(1.0, f) < 0 else "0"
    sign = "-" if f < 0 else ""
    digits, dp = _shortest_digits(abs(f))
    exp = dp - 1
    if exp < -4 or exp >= 6:
        return sign + _scientific(digits, dp)
    return sign + _fixed(digits, dp)


def _escape_xml(text: str) -> str:
    return text.translate(_XML_ESCAPES)


def _chardata(value: Any) -> str:
    if isinstance(value, Value):
        value = value.raw()
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _general_float(value)
    return _escape_xml(str(value))


def _element(tag: str, text: str) -> str:
    return f"<{tag}>{text}</{tag}>"


def _nil_element(tag: str) -> str:
    return f'<{tag} xsi:nil="true"></{tag}>'


def _list_item_xml(item: Any) -> str:
    if isinstance(item, Mapping):
        return Map(item).marshal_xml("item")
    if isinstance(item, (list, tuple)):
        return List(item).marshal_xml("item")
    return _element("item", _chardata(item))