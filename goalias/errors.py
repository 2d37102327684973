"""goalias-specific exceptions."""


class GoAliasError(Exception):
    """Raised when the registry or a renderer is used in a way it cannot honour.

    Alias allocation itself never fails; this covers caller mistakes such as
    hinting a path that already has an alias.
    """


class GoAliasConfigError(GoAliasError):
    """Raised when configuration values cannot be used."""
