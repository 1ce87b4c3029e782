"""Output schemas for API commands.

Importing this package registers every command schema with the registry.
"""

from . import docs  # noqa: F401
