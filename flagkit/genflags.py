"""Description of flag types from which flag code is generated."""

from __future__ import annotations

from dataclasses import dataclass, field


def _title(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest as is."""
    out = []
    at_word_start = True
    for ch in text:
        out.append(ch.upper() if at_word_start else ch)
        at_word_start = not ch.isalnum()
    return "".join(out)


@dataclass
class FlagStructField:
    """An extra field of a generated flag type."""

    name: str
    type: str


@dataclass
class FlagTypeConfig:
    """Per-type options for generated flag code."""

    skip_interfaces: list[str] = field(default_factory=list)
    struct_fields: list[FlagStructField] = field(default_factory=list)
    type_name: str = ""
    value_pointer: bool = False


def type_name(go_type: str, config: FlagTypeConfig | None = None) -> str:
    """Return the flag type name for a value type, honouring an override."""
    if config is not None and config.type_name.strip():
        return config.type_name.strip()

    base = go_type.split(".")[-1]
    if base.startswith("[]"):
        return _title(base[2:]) + "SliceFlag"
    return _title(base) + "Flag"


@dataclass
class FlagType:
    """A value type together with its generation options."""

    go_type: str
    config: FlagTypeConfig | None = None

    def struct_fields(self) -> list[FlagStructField]:
        if self.config is None:
            return []
        return list(self.config.struct_fields)

    def value_pointer(self) -> bool:
        return self.config is not None and self.config.value_pointer

    def type_name(self) -> str:
        return type_name(self.go_type, self.config)

    def generate_fmt_stringer_interface(self) -> bool:
        return self._keeps_interface("fmt.Stringer")

    def generate_flag_interface(self) -> bool:
        return self._keeps_interface("Flag")

    def generate_required_flag_interface(self) -> bool:
        return self._keeps_interface("RequiredFlag")

    def generate_visible_flag_interface(self) -> bool:
        return self._keeps_interface("VisibleFlag")

    def _keeps_interface(self, name: str) -> bool:
        if self.config is None:
            return True
        lowered = name.lower()
        return all(skip.lower() != lowered for skip in self.config.skip_interfaces)


@dataclass
class Spec:
    """The full set of flag types and package names for generation."""

    flag_types: dict[str, FlagTypeConfig | None] = field(default_factory=dict)
    package_name: str = ""
    test_package_name: str = ""
    cli_namespace: str = ""
    cli_test_namespace: str = ""

    def sorted_flag_types(self) -> list[FlagType]:
        """Return the flag types ordered by name.

        Slice types ("[]x") are renamed to "xSlice"; the configuration is then
        looked up under the new name.
        """
        names = sorted(
            name[2:] + "Slice" if name.startswith("[]") else name
            for name in self.flag_types
        )
        return [FlagType(go_type=name, config=self.flag_types.get(name)) for name in names]