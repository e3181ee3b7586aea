"""Domain and tooling errors.

The builder itself never raises: these cover decoding serialized schemas and
resolving schema targets for the CLI.
"""


class ConfigGuardError(Exception):
    """Base for config-guard errors."""
    pass


class SchemaFormatError(ConfigGuardError):
    """A serialized schema could not be decoded into nodes and definitions."""
    pass


class SchemaTargetError(ConfigGuardError):
    """A ``module:attribute`` target could not be imported or is not a schema."""
    pass
