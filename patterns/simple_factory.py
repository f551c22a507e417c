"""Simple Factory pattern: one function owns OTP sender construction.

Callers see only the OTPSender interface and create_otp_sender(). Which
class backs a channel, and which credentials it needs, stays inside this
module, so adding a channel or swapping a provider never touches callers.

Example domain: an auth service delivering one-time passwords.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from core.narration import narrate
from patterns.domain_config import DemoConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Product interface
# ---------------------------------------------------------------------------

class OTPSender(ABC):
    """What callers program against."""

    channel: str = ""

    @abstractmethod
    def send_otp(self, otp: str) -> None:
        ...

    def _report(self, otp: str) -> None:
        narrate(f"   [{type(self).__name__}] Sent OTP: {otp}")


# ---------------------------------------------------------------------------
# Concrete products
# ---------------------------------------------------------------------------

class EmailOTP(OTPSender):
    channel = "email"

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port

    def send_otp(self, otp: str) -> None:
        self._report(otp)


class SMSOTP(OTPSender):
    channel = "sms"

    def __init__(self, key: str, sid: str):
        self.key = key
        self.sid = sid

    def send_otp(self, otp: str) -> None:
        self._report(otp)


class WhatsAppOTP(OTPSender):
    channel = "whatsapp"

    def __init__(self, business_id: str, token: str):
        self.business_id = business_id
        self.token = token

    def send_otp(self, otp: str) -> None:
        self._report(otp)


class TelegramOTP(OTPSender):
    channel = "telegram"

    def __init__(self, bot_id: str, token: str):
        self.bot_id = bot_id
        self.token = token

    def send_otp(self, otp: str) -> None:
        self._report(otp)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

_CONSTRUCTORS: dict[str, Callable[[DemoConfig], OTPSender]] = {
    "email": lambda c: EmailOTP(c.smtp.host, c.smtp.port),
    "sms": lambda c: SMSOTP(c.twilio.api_key, c.twilio.account_sid),
    "whatsapp": lambda c: WhatsAppOTP(c.whatsapp.business_id, c.whatsapp.token),
    "telegram": lambda c: TelegramOTP(c.telegram.bot_id, c.telegram.token),
}


def supported_channels() -> list[str]:
    return list(_CONSTRUCTORS)


def create_otp_sender(channel: str, config: Optional[DemoConfig] = None) -> OTPSender:
    """Create the sender for ``channel`` (case-insensitive).

    Raises ValueError for an unknown channel.
    """
    constructor = _CONSTRUCTORS.get(channel.lower())
    if constructor is None:
        raise ValueError(f"Unknown: {channel}")
    sender = constructor(config or DemoConfig.default())
    logger.debug("Created %s for channel %s", type(sender).__name__, channel)
    return sender
