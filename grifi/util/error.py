"""Errors raised while wiring the application together."""


class ConfigurationError(Exception):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"{setting} {reason}")
