"""Enum <-> config string conversion"""

from enum import Enum
from typing import Any, List, Type, TypeVar

E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Helpers for enums that appear in config.yaml and on the command line.

    Config files spell members in lowercase ("ws281x", "debug"); code uses
    the member names.
    """

    @staticmethod
    def to_enum(enum_class: Type[E], value: Any) -> E:
        """
        Resolve a member from its name (any case, surrounding blanks ignored).

        Raises:
            ValueError: no member has that name (message lists the choices)
            TypeError: value is neither a str nor a member of enum_class
        """
        if isinstance(value, enum_class):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Expected str or {enum_class.__name__}, got {type(value).__name__}")

        member = enum_class.__members__.get(value.strip().upper())
        if member is None:
            choices = ", ".join(EnumHelper.list_names(enum_class, lowercase=True))
            raise ValueError(f"Invalid {enum_class.__name__} '{value}' (expected one of: {choices})")
        return member

    @staticmethod
    def list_names(enum_class: Type[E], lowercase: bool = False) -> List[str]:
        if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
            raise TypeError(f"{enum_class!r} is not an Enum class")
        return [m.name.lower() if lowercase else m.name for m in enum_class]

    @staticmethod
    def to_name(value: Any) -> str:
        return value.name if isinstance(value, Enum) else str(value)
