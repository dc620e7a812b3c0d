"""Conversion between reflective JVM type names and descriptors.

Runtime reflection reports types as ``int``, ``java.lang.String`` or
``java.lang.String[]``; bytecode stores them as descriptors (``I``,
``Ljava/lang/String;``, ``[Ljava/lang/String;``). Signatures coming from
both sources have to agree, so reflected types are always rendered into
descriptor form here.
"""

from collections.abc import Iterable

__all__ = [
    "DescriptorError",
    "PRIMITIVE_DESCRIPTORS",
    "method_descriptor",
    "to_internal_name",
    "to_source_name",
    "type_descriptor",
]

PRIMITIVE_DESCRIPTORS: dict[str, str] = {
    "void": "V",
    "boolean": "Z",
    "byte": "B",
    "char": "C",
    "short": "S",
    "int": "I",
    "long": "J",
    "float": "F",
    "double": "D",
}


class DescriptorError(ValueError):
    """Raised when a type name cannot be rendered as a descriptor."""


def to_internal_name(dotted_name: str) -> str:
    """``java.lang.String`` -> ``java/lang/String``"""
    return dotted_name.replace(".", "/")


def to_source_name(internal_name: str) -> str:
    """``java/lang/String`` -> ``java.lang.String``"""
    return internal_name.replace("/", ".")


def type_descriptor(type_name: str) -> str:
    """
    Render a reflective type name as a field descriptor.

    Examples:
        'int' -> 'I'
        'java.lang.String' -> 'Ljava/lang/String;'
        'int[][]' -> '[[I'
        '[Ljava.lang.String;' -> '[Ljava/lang/String;'

    Args:
        type_name: Type name as reported by reflection

    Returns:
        The descriptor string

    Raises:
        DescriptorError: If the name is blank or malformed
    """
    name = type_name.strip()
    if not name:
        raise DescriptorError("Cannot build a descriptor for a blank type name")

    # Class.getName() already encodes arrays as descriptors
    if name.startswith("["):
        element = name.lstrip("[")
        if element in PRIMITIVE_DESCRIPTORS.values() and element != "V":
            return name
        if element.startswith("L") and element.endswith(";") and len(element) > 2:
            return to_internal_name(name)
        raise DescriptorError(f"Malformed array type name: {type_name!r}")

    dimensions = 0
    while name.endswith("[]"):
        dimensions += 1
        name = name[:-2].rstrip()
    if not name:
        raise DescriptorError(f"Missing element type in {type_name!r}")

    if name in PRIMITIVE_DESCRIPTORS:
        if name == "void" and dimensions:
            raise DescriptorError("Arrays of void are not valid")
        element = PRIMITIVE_DESCRIPTORS[name]
    else:
        element = f"L{to_internal_name(name)};"
    return "[" * dimensions + element


def method_descriptor(parameter_types: Iterable[str], return_type: str) -> str:
    """
    Render a reflective method shape as a method descriptor.

    Example:
        (['int', 'java.lang.String'], 'void') -> '(ILjava/lang/String;)V'
    """
    params = "".join(type_descriptor(param) for param in parameter_types)
    return f"({params}){type_descriptor(return_type)}"
