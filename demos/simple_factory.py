"""Simple Factory scenarios: caller-side switch vs create_otp_sender()."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive.simple_factory import send_otp_without_factory
from patterns.domain_config import DemoConfig
from patterns.simple_factory import create_otp_sender, supported_channels

_ROLES = [
    "Product: OTPSender",
    "Concrete Products: EmailOTP, SMSOTP, WhatsAppOTP, TelegramOTP",
    "Factory: create_otp_sender()",
]


@register_demo(
    "simple_factory", "without",
    title="Auth service builds senders itself",
    summary="The caller switches on the channel and knows every sender's constructor.",
    roles=_ROLES,
    inputs={"channel": ["email", "sms", "whatsapp"]},
)
def run_without(config: DemoConfig, channel: str | None = None) -> None:
    channel = channel or config.default_channel
    narrate("=== Auth Service (Without Factory) ===")
    narrate(f"Channel: {channel}")
    sender = send_otp_without_factory(channel, config.otp_code, config)
    if sender is None:
        narrate(f"   Nothing sent: no branch handles '{channel}'")


@register_demo(
    "simple_factory", "with",
    title="One factory function",
    summary="The caller asks the factory for a sender and only sees the OTPSender interface.",
    roles=_ROLES,
    inputs={"channel": supported_channels()},
)
def run_with(config: DemoConfig, channel: str | None = None) -> None:
    channel = channel or config.default_channel
    narrate("=== Auth Service (With Factory) ===")
    narrate(f"Channel: {channel}")
    sender = create_otp_sender(channel, config)
    sender.send_otp(config.otp_code)
