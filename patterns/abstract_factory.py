"""Abstract Factory pattern: regional families of OTP senders.

Each region has its own SMS gateway, WhatsApp Business account and SMTP
server. A regional factory creates all three, so a caller can never pair a
US SMS gateway with an Indian WhatsApp account by accident.

The auth service receives a factory and never names a concrete product.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from core.narration import narrate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Product interfaces
# ---------------------------------------------------------------------------

class _RegionalProduct:
    region: str = ""

    def _say(self, message: str) -> None:
        narrate(f"   [{type(self).__name__}] {message}")


class SMSSender(_RegionalProduct, ABC):
    @abstractmethod
    def send_sms(self, otp: str) -> None:
        ...


class WhatsAppSender(_RegionalProduct, ABC):
    @abstractmethod
    def send_whatsapp(self, otp: str) -> None:
        ...


class EmailSender(_RegionalProduct, ABC):
    @abstractmethod
    def send_email(self, otp: str) -> None:
        ...


# ---------------------------------------------------------------------------
# India family
# ---------------------------------------------------------------------------

class IndianSMS(SMSSender):
    region = "india"

    def __init__(self):
        self._say("Initialized with Indian SMS gateway")

    def send_sms(self, otp: str) -> None:
        self._say(f"Sent SMS OTP: {otp}")


class IndianWhatsApp(WhatsAppSender):
    region = "india"

    def __init__(self):
        self._say("Connected to Indian WhatsApp Business")

    def send_whatsapp(self, otp: str) -> None:
        self._say(f"Sent WhatsApp OTP: {otp}")


class IndianEmail(EmailSender):
    region = "india"

    def __init__(self):
        self._say("Using Indian SMTP server")

    def send_email(self, otp: str) -> None:
        self._say(f"Sent Email OTP: {otp}")


# ---------------------------------------------------------------------------
# USA family
# ---------------------------------------------------------------------------

class USASMS(SMSSender):
    region = "usa"

    def __init__(self):
        self._say("Initialized with US SMS gateway")

    def send_sms(self, otp: str) -> None:
        self._say(f"Sent SMS OTP: {otp}")


class USAWhatsApp(WhatsAppSender):
    region = "usa"

    def __init__(self):
        self._say("Connected to US WhatsApp Business")

    def send_whatsapp(self, otp: str) -> None:
        self._say(f"Sent WhatsApp OTP: {otp}")


class USAEmail(EmailSender):
    region = "usa"

    def __init__(self):
        self._say("Using US SMTP server")

    def send_email(self, otp: str) -> None:
        self._say(f"Sent Email OTP: {otp}")


# ---------------------------------------------------------------------------
# Abstract factory + concrete factories
# ---------------------------------------------------------------------------

class OTPFactory(ABC):
    region: str = ""

    @abstractmethod
    def create_sms_sender(self) -> SMSSender:
        ...

    @abstractmethod
    def create_whatsapp_sender(self) -> WhatsAppSender:
        ...

    @abstractmethod
    def create_email_sender(self) -> EmailSender:
        ...


class IndiaOTPFactory(OTPFactory):
    region = "india"

    def create_sms_sender(self) -> SMSSender:
        return IndianSMS()

    def create_whatsapp_sender(self) -> WhatsAppSender:
        return IndianWhatsApp()

    def create_email_sender(self) -> EmailSender:
        return IndianEmail()


class USAOTPFactory(OTPFactory):
    region = "usa"

    def create_sms_sender(self) -> SMSSender:
        return USASMS()

    def create_whatsapp_sender(self) -> WhatsAppSender:
        return USAWhatsApp()

    def create_email_sender(self) -> EmailSender:
        return USAEmail()


_FACTORIES: dict[str, type[OTPFactory]] = {
    "india": IndiaOTPFactory,
    "usa": USAOTPFactory,
}

CHANNELS = ("sms", "whatsapp", "email")


def supported_regions() -> list[str]:
    return list(_FACTORIES)


def get_factory(region: str) -> OTPFactory:
    """Pick the factory for ``region``. Raises ValueError if unknown."""
    factory_cls = _FACTORIES.get(region.lower())
    if factory_cls is None:
        raise ValueError(f"Unknown region: {region}")
    logger.debug("Selected %s", factory_cls.__name__)
    return factory_cls()


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class AuthService:
    """Sends OTPs through whatever family the injected factory builds."""

    def __init__(self, factory: OTPFactory):
        self.factory = factory

    def send_otp_via_all(self, otp: str) -> list[_RegionalProduct]:
        """Send through sms, whatsapp and email, in that order."""
        narrate("")
        narrate("   Sending OTP via all channels...")
        narrate("")
        return [self.send_otp_via(channel, otp) for channel in CHANNELS]

    def send_otp_via(self, channel: str, otp: str) -> _RegionalProduct:
        """Send through one channel. Raises ValueError if unknown."""
        senders: dict[str, Callable[[str], _RegionalProduct]] = {
            "sms": self._send_sms,
            "whatsapp": self._send_whatsapp,
            "email": self._send_email,
        }
        send = senders.get(channel.lower())
        if send is None:
            raise ValueError(f"Unknown channel: {channel}")
        return send(otp)

    def _send_sms(self, otp: str) -> SMSSender:
        sender = self.factory.create_sms_sender()
        sender.send_sms(otp)
        return sender

    def _send_whatsapp(self, otp: str) -> WhatsAppSender:
        sender = self.factory.create_whatsapp_sender()
        sender.send_whatsapp(otp)
        return sender

    def _send_email(self, otp: str) -> EmailSender:
        sender = self.factory.create_email_sender()
        sender.send_email(otp)
        return sender
