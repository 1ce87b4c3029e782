"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas._registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output dict against the schema registered for ``func``.

    The domain is taken from the module path (``doccheck.api.<domain>.cmd_x``)
    and the command name from the function name without its ``cmd_`` prefix.

    Raises:
        ValueError: If validation fails
    """
    from . import _output_schemas  # noqa: F401

    module_parts = func.__module__.split(".")
    if len(module_parts) < 3 or module_parts[0] != "doccheck" or module_parts[1] != "api":
        return output

    domain = module_parts[2]
    func_name = func.__name__
    if not func_name.startswith("cmd_"):
        return output

    command_name = func_name[4:]
    schema_class = schema_registry.get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        validated = schema_class(**output)
        return validated.model_dump(mode="python")
    except Exception as e:
        raise ValueError(
            f"Output validation failed for {domain}.{command_name}: {e}\n"
            f"Expected schema: {schema_class.model_json_schema()}\n"
            f"Got output: {output}"
        ) from e
