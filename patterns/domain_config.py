"""Dataclass-based demo configuration.

Demos take the database endpoint, OTP provider credentials and scenario
constants (OTP code, customer name, vending stock, default channel and
region) from one frozen DemoConfig. Defaults let every demo run with no
setup; PATTERN_DEMOS_* environment variables override individual values.

The credentials are placeholders: no demo talks to a real provider.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DatabaseConfig:
    """Endpoint of the demo database connection."""

    host: str = "localhost"
    port: int = 5432

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class SmtpConfig:
    """Email OTP provider."""

    host: str = "smtp.gmail.com"
    port: int = 587


@dataclass(frozen=True)
class TwilioConfig:
    """SMS OTP provider."""

    api_key: str = "twilio-demo-key"
    account_sid: str = "AC-demo-sid"


@dataclass(frozen=True)
class WhatsAppConfig:
    """WhatsApp Business OTP provider."""

    business_id: str = "wa-business-demo"
    token: str = "wa-demo-token"


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram bot OTP provider."""

    bot_id: str = "tg-bot-demo"
    token: str = "tg-demo-token"


# ---------------------------------------------------------------------------
# Top-level demo config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DemoConfig:
    """Complete configuration for the pattern demos.

    Usage::

        config = DemoConfig.default()
        sender = create_otp_sender("email", config)
        sender.send_otp(config.otp_code)
    """

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    smtp: SmtpConfig = field(default_factory=SmtpConfig)
    twilio: TwilioConfig = field(default_factory=TwilioConfig)
    whatsapp: WhatsAppConfig = field(default_factory=WhatsAppConfig)
    telegram: TelegramConfig = field(default_factory=TelegramConfig)

    # Scenario constants
    otp_code: str = "847291"
    customer_name: str = "John Doe"
    vending_stock: int = 2
    default_channel: str = "email"
    default_region: str = "india"

    @classmethod
    def default(cls) -> "DemoConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "PATTERN_DEMOS_") -> "DemoConfig":
        """Create config from environment variables.

        Example: PATTERN_DEMOS_DB_HOST=db.internal PATTERN_DEMOS_OTP_CODE=123456
        """
        def env(name: str) -> str | None:
            value = os.getenv(f"{prefix}{name}")
            return value if value else None

        config = cls()

        database = config.database
        if env("DB_HOST"):
            database = replace(database, host=env("DB_HOST"))
        if env("DB_PORT"):
            database = replace(database, port=int(env("DB_PORT")))

        smtp = config.smtp
        if env("SMTP_HOST"):
            smtp = replace(smtp, host=env("SMTP_HOST"))
        if env("SMTP_PORT"):
            smtp = replace(smtp, port=int(env("SMTP_PORT")))

        overrides: dict = {"database": database, "smtp": smtp}
        if env("OTP_CODE"):
            overrides["otp_code"] = env("OTP_CODE")
        if env("CUSTOMER_NAME"):
            overrides["customer_name"] = env("CUSTOMER_NAME")
        if env("VENDING_STOCK"):
            overrides["vending_stock"] = int(env("VENDING_STOCK"))
        if env("DEFAULT_CHANNEL"):
            overrides["default_channel"] = env("DEFAULT_CHANNEL").lower()
        if env("DEFAULT_REGION"):
            overrides["default_region"] = env("DEFAULT_REGION").lower()

        return replace(config, **overrides)
