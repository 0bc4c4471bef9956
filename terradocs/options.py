"""Options that control how a Terraform module is loaded."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass
class SortBy:
    """Sort criteria matching the available flags."""

    name: bool = False
    required: bool = False
    type: bool = False


@dataclass
class Options:
    """Options needed to load a module from a path.

    A bare ``Options()`` holds only empty values and serves as an override;
    :func:`new_options` gives the defaults.
    """

    path: str = ""
    show_header: bool = False
    header_from_file: str = ""
    show_footer: bool = False
    footer_from_file: str = ""
    use_lock_file: bool = False
    sort_by: SortBy | None = None
    output_values: bool = False
    output_values_path: str = ""

    def merge(self, override: Options | None) -> Options:
        """Fill empty fields from ``override``; set fields are kept."""
        return self._merge(override, overwrite=False)

    def merge_overwrite(self, override: Options | None) -> Options:
        """Replace fields with every non-empty field of ``override``."""
        return self._merge(override, overwrite=True)

    def _merge(self, override: Options | None, overwrite: bool) -> Options:
        if override is None:
            raise ValueError("cannot use nil as override value")
        _merge_into(self, override, overwrite)
        return self


def _merge_into(dst: Any, src: Any, overwrite: bool) -> None:
    for f in fields(dst):
        current = getattr(dst, f.name)
        incoming = getattr(src, f.name)
        if isinstance(incoming, SortBy):
            if current is None:
                setattr(dst, f.name, replace(incoming))
            else:
                _merge_into(current, incoming, overwrite)
        elif incoming and (overwrite or not current):
            setattr(dst, f.name, incoming)


def new_options() -> Options:
    """Options with the default settings."""
    return Options(
        path="",
        show_header=True,
        header_from_file="main.tf",
        show_footer=False,
        footer_from_file="",
        use_lock_file=True,
        sort_by=SortBy(),
        output_values=False,
        output_values_path="",
    )