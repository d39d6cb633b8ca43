"""dbparam exception hierarchy."""


class DbParamError(Exception):
    """Base exception for dbparam errors."""


class UnsupportedDialectError(DbParamError):
    """Dialect has no textual column rules (neither MySQL nor PostgreSQL family)."""

    def __init__(self, driver_name: str, message: str | None = None) -> None:
        """
        Initialize unsupported dialect error.

        Args:
            driver_name: Driver/dialect name reported by the connection
            message: Optional custom message
        """
        self.driver_name = driver_name
        msg = message or f'Unsupported connection type: {driver_name}'
        super().__init__(msg)


class UnknownColumnTypeError(DbParamError):
    """Textual column type is not known for a supported dialect."""

    def __init__(self, column_type: str, driver_name: str | None = None) -> None:
        """
        Initialize unknown column type error.

        Args:
            column_type: Column type that was looked up
            driver_name: Optional driver name context
        """
        self.column_type = column_type
        self.driver_name = driver_name
        msg = f'Unknown textual column type: {column_type}'
        if driver_name:
            msg += f' (dialect: {driver_name})'
        super().__init__(msg)


class DialectNotConfiguredError(DbParamError):
    """No dialect was passed and no default dialect is configured."""

    def __init__(self) -> None:
        """Initialize dialect not configured error."""
        super().__init__('No database dialect given and DBPARAM_DEFAULT_DIALECT is not set')


class ConditionError(DbParamError, ValueError):
    """Condition tree holds something that cannot be converted."""

    def __init__(self, message: str, condition: object = None) -> None:
        """
        Initialize condition error.

        Args:
            message: Error message
            condition: Offending condition node
        """
        self.condition = condition
        super().__init__(message)
