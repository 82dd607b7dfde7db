"""Settings errors – raised while loading ``DatabaseSettings`` / ``QuerySettings``."""
from realty_query.kernel.errors import ApplicationError

MASKED = "***"


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """*setting_name* is the environment key to set, e.g. ``DATABASE_CONNECTION_STRING``."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A loaded value failed conversion or validation.

    With ``secret=True`` the value never reaches the message or ``detail``;
    connection strings carry credentials.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, secret: bool = False) -> None:
        shown = MASKED if secret else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "value": shown, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
