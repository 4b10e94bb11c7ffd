"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses, one group per external collaborator
- A collaborator with missing configuration is disabled, never fatal

EXTENSIBILITY:
- To add a sink: add a settings group here and an adapter under sinks/
- To switch inference provider: change the synthesis base URL and model
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class SynthesisSettings:
    """Cloudflare Workers AI settings for review synthesis."""

    account_id: str = field(default_factory=lambda: _env("CLOUDFLARE_ACCOUNT_ID"))
    api_token: str = field(default_factory=lambda: _env("CLOUDFLARE_API_TOKEN"))
    api_base_url: str = field(
        default_factory=lambda: _env(
            "CLOUDFLARE_AI_BASE_URL", "https://api.cloudflare.com/client/v4"
        )
    )
    model: str = field(default_factory=lambda: _env("AI_MODEL", "@cf/google/gemma-3-12b-it"))

    # Varied, human-sounding output
    temperature: float = 0.9
    max_tokens: int = 400
    timeout_seconds: float = field(default_factory=lambda: _env_float("AI_TIMEOUT_SECONDS", 30.0))

    @property
    def is_configured(self) -> bool:
        return bool(self.account_id and self.api_token)


@dataclass(frozen=True)
class WebhookSettings:
    """Generic JSON webhooks (primary and backup)."""

    url: str = field(default_factory=lambda: _env("WEBHOOK_URL"))
    backup_url: str = field(default_factory=lambda: _env("BACKUP_WEBHOOK_URL"))


@dataclass(frozen=True)
class SheetsSettings:
    """Google Sheets append settings."""

    api_key: str = field(default_factory=lambda: _env("GOOGLE_SHEETS_API_KEY"))
    spreadsheet_id: str = field(default_factory=lambda: _env("SPREADSHEET_ID"))
    sheet_name: str = field(default_factory=lambda: _env("SHEET_NAME"))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.spreadsheet_id and self.sheet_name)


# Form field name -> environment variable holding its external field id
FORM_FIELD_ENV_VARS = {
    "timestamp": "FORM_FIELD_TIMESTAMP",
    "date": "FORM_FIELD_DATE",
    "time": "FORM_FIELD_TIME",
    "text": "FORM_FIELD_TEXT",
    "tags": "FORM_FIELD_TAGS",
    "environment": "FORM_FIELD_ENVIRONMENT",
    "taste": "FORM_FIELD_TASTE",
    "service": "FORM_FIELD_SERVICE",
    "price": "FORM_FIELD_PRICE",
    "overall": "FORM_FIELD_OVERALL",
}


def _form_field_ids() -> Dict[str, str]:
    ids = {}
    for name, env_var in FORM_FIELD_ENV_VARS.items():
        value = _env(env_var)
        if value:
            ids[name] = value
    return ids


@dataclass(frozen=True)
class FormSettings:
    """Form submission endpoint (e.g. a Google Form formResponse URL)."""

    url: str = field(default_factory=lambda: _env("FORM_URL"))
    field_ids: Dict[str, str] = field(default_factory=_form_field_ids)


@dataclass(frozen=True)
class FanoutSettings:
    """Background sink delivery settings."""

    timeout_seconds: float = field(default_factory=lambda: _env_float("SINK_TIMEOUT_SECONDS", 10.0))
    max_workers: int = field(default_factory=lambda: _env_int("FANOUT_MAX_WORKERS", 8))


@dataclass(frozen=True)
class ServerSettings:
    """uvicorn bind address."""

    host: str = field(default_factory=lambda: _env("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("PORT", 8000))


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from review_polisher.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.synthesis.model)
    """

    synthesis: SynthesisSettings = field(default_factory=SynthesisSettings)
    webhooks: WebhookSettings = field(default_factory=WebhookSettings)
    sheets: SheetsSettings = field(default_factory=SheetsSettings)
    form: FormSettings = field(default_factory=FormSettings)
    fanout: FanoutSettings = field(default_factory=FanoutSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    def validate(self) -> List[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if every collaborator is configured.
        """
        issues = []

        if not self.synthesis.is_configured:
            issues.append(
                "WARNING: CLOUDFLARE_ACCOUNT_ID / CLOUDFLARE_API_TOKEN not set. "
                "Every polish request will fail with 500."
            )

        if not self.webhooks.url:
            issues.append("WARNING: WEBHOOK_URL not set. Webhook sink disabled.")

        if not self.webhooks.backup_url:
            issues.append("WARNING: BACKUP_WEBHOOK_URL not set. Backup webhook sink disabled.")

        if not self.sheets.is_configured:
            issues.append(
                "WARNING: GOOGLE_SHEETS_API_KEY, SPREADSHEET_ID, SHEET_NAME not all set. "
                "Google Sheets sink disabled."
            )

        if not self.form.url:
            issues.append("WARNING: FORM_URL not set. Form sink disabled.")
        else:
            missing = [
                env_var for name, env_var in FORM_FIELD_ENV_VARS.items()
                if name not in self.form.field_ids
            ]
            if missing:
                issues.append(
                    f"WARNING: Form field ids not set: {', '.join(missing)}. "
                    "Those fields will be left out of form submissions."
                )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
