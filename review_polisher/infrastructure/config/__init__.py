from .settings import (
    Settings,
    SynthesisSettings,
    WebhookSettings,
    SheetsSettings,
    FormSettings,
    FanoutSettings,
    ServerSettings,
    FORM_FIELD_ENV_VARS,
    get_settings,
)

__all__ = [
    "Settings",
    "SynthesisSettings",
    "WebhookSettings",
    "SheetsSettings",
    "FormSettings",
    "FanoutSettings",
    "ServerSettings",
    "FORM_FIELD_ENV_VARS",
    "get_settings",
]
