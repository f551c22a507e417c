"""Factory Method pattern: OTP services decide which sender they create.

OTPService.send_otp() is a template method. It calls the factory method
create_sender(), which each concrete service overrides. Adding a channel
means adding one sender and one service subclass; nothing existing changes.

The products are the OTPSender classes from the simple factory module.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from patterns.domain_config import DemoConfig
from patterns.simple_factory import (
    EmailOTP,
    OTPSender,
    SMSOTP,
    TelegramOTP,
    WhatsAppOTP,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Abstract creator
# ---------------------------------------------------------------------------

class OTPService(ABC):
    """Creator: holds the delivery logic, defers product choice to subclasses."""

    def __init__(self, config: Optional[DemoConfig] = None):
        self.config = config or DemoConfig.default()

    def send_otp(self, otp: str) -> OTPSender:
        sender = self.create_sender()
        logger.debug("%s created %s", type(self).__name__, type(sender).__name__)
        sender.send_otp(otp)
        return sender

    @abstractmethod
    def create_sender(self) -> OTPSender:
        """Factory method."""


# ---------------------------------------------------------------------------
# Concrete creators
# ---------------------------------------------------------------------------

class EmailOTPService(OTPService):
    def create_sender(self) -> OTPSender:
        return EmailOTP(self.config.smtp.host, self.config.smtp.port)


class SMSOTPService(OTPService):
    def create_sender(self) -> OTPSender:
        return SMSOTP(self.config.twilio.api_key, self.config.twilio.account_sid)


class WhatsAppOTPService(OTPService):
    def create_sender(self) -> OTPSender:
        return WhatsAppOTP(self.config.whatsapp.business_id, self.config.whatsapp.token)


class TelegramOTPService(OTPService):
    def create_sender(self) -> OTPSender:
        return TelegramOTP(self.config.telegram.bot_id, self.config.telegram.token)


_SERVICES: dict[str, type[OTPService]] = {
    "email": EmailOTPService,
    "sms": SMSOTPService,
    "whatsapp": WhatsAppOTPService,
    "telegram": TelegramOTPService,
}


def get_service(channel: str, config: Optional[DemoConfig] = None) -> OTPService:
    """Pick the service for ``channel``. Raises ValueError if unknown."""
    service_cls = _SERVICES.get(channel.lower())
    if service_cls is None:
        raise ValueError(f"Unknown channel: {channel}")
    return service_cls(config)
