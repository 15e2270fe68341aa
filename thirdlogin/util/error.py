"""Utility layer errors."""


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing or unusable."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"{setting}: {reason}")
