"""Engine option descriptors announced with the ``option`` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from ucikit.lexicon import OPTION_KEYWORDS, check_int, check_text, check_value

# An option name runs up to the ``type`` keyword.
_NAME_RESERVED = ("type",)


@dataclass(frozen=True, slots=True)
class CheckOption:
    """A boolean option (``type check``)."""

    type_name: ClassVar[str] = "check"

    name: str
    default: bool | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=_NAME_RESERVED)


@dataclass(frozen=True, slots=True)
class SpinOption:
    """A signed integer option (``type spin``) with optional bounds."""

    type_name: ClassVar[str] = "spin"

    name: str
    default: int | None = None
    min: int | None = None
    max: int | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=_NAME_RESERVED)
        check_int(self.default, "Spin default", optional=True)
        check_int(self.min, "Spin min", optional=True)
        check_int(self.max, "Spin max", optional=True)


@dataclass(frozen=True, slots=True)
class ComboOption:
    """A choice between predefined strings (``type combo``)."""

    type_name: ClassVar[str] = "combo"

    name: str
    default: str | None = None
    variants: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=_NAME_RESERVED)
        object.__setattr__(self, "variants", tuple(self.variants))
        if self.default is not None:
            check_value(self.default, "Combo default", reserved=OPTION_KEYWORDS)
        for variant in self.variants:
            check_value(variant, "Combo variant", reserved=OPTION_KEYWORDS)


@dataclass(frozen=True, slots=True)
class ButtonOption:
    """An action without a value (``type button``)."""

    type_name: ClassVar[str] = "button"

    name: str

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=_NAME_RESERVED)


@dataclass(frozen=True, slots=True)
class StringOption:
    """A free text option (``type string``).

    ``default=""`` is an explicitly empty default and is sent as ``<empty>``;
    ``default=None`` means no default was announced.
    """

    type_name: ClassVar[str] = "string"

    name: str
    default: str | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Option name", reserved=_NAME_RESERVED)
        if self.default is not None:
            check_value(self.default, "String default", reserved=OPTION_KEYWORDS)


OptionConfig: TypeAlias = CheckOption | SpinOption | ComboOption | ButtonOption | StringOption

OPTION_TYPES: dict[str, type[OptionConfig]] = {
    cls.type_name: cls
    for cls in (CheckOption, SpinOption, ComboOption, ButtonOption, StringOption)
}
