"""Identifier naming for generated types and members."""


def type_name(index: int) -> str:
    """Name of the type at ``index``, zero-padded to four digits."""
    return f"Type{index:04d}"


def interface_name(index: int) -> str:
    return f"I{type_name(index)}"


def field_name(index: int) -> str:
    return f"field{index}"


def method_name(index: int) -> str:
    return f"Method{index}"
