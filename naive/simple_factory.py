"""Without factory: the caller constructs concrete OTP senders itself.

The auth service must know every sender class and every credential. When
a sender's constructor changes, or a channel is added, the caller breaks.
"""

from __future__ import annotations

from core.narration import narrate
from patterns.domain_config import DemoConfig


class EmailOTP:
    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port

    def send_otp(self, otp: str) -> None:
        narrate(f"   [EmailOTP] Sent OTP: {otp}")


class SMSOTP:
    def __init__(self, key: str, sid: str):
        self.key = key
        self.sid = sid

    def send_otp(self, otp: str) -> None:
        narrate(f"   [SMSOTP] Sent OTP: {otp}")


class WhatsAppOTP:
    def __init__(self, business_id: str, token: str):
        self.business_id = business_id
        self.token = token

    def send_otp(self, otp: str) -> None:
        narrate(f"   [WhatsAppOTP] Sent OTP: {otp}")


class TelegramOTP:
    def __init__(self, bot_id: str, token: str):
        self.bot_id = bot_id
        self.token = token

    def send_otp(self, otp: str) -> None:
        narrate(f"   [TelegramOTP] Sent OTP: {otp}")


def send_otp_without_factory(channel: str, otp: str, config: DemoConfig):
    """Switch on the channel and build the sender inline.

    Returns the sender used, or None: an unknown channel silently sends
    nothing. Telegram exists but was never wired in here.
    """
    if channel == "email":
        sender = EmailOTP(config.smtp.host, config.smtp.port)
    elif channel == "sms":
        # Copy-pasted key instead of the configured one
        sender = SMSOTP("sdkjhfkjsdf", config.twilio.account_sid)
    elif channel == "whatsapp":
        sender = WhatsAppOTP(config.whatsapp.business_id, config.whatsapp.token)
    else:
        return None
    sender.send_otp(otp)
    return sender
