"""Factory Method scenario: OTP services subclassed per channel."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from patterns.domain_config import DemoConfig
from patterns.factory_method import get_service
from patterns.simple_factory import supported_channels


@register_demo(
    "factory_method", "with",
    title="Services create their own sender",
    summary="OTPService.send_otp() is a template method; subclasses override create_sender().",
    roles=[
        "Product: OTPSender",
        "Creator: OTPService",
        "Concrete Creators: EmailOTPService, SMSOTPService, WhatsAppOTPService, TelegramOTPService",
    ],
    inputs={"channel": supported_channels()},
)
def run_with(config: DemoConfig, channel: str | None = None) -> None:
    channel = channel or config.default_channel
    narrate("=== Auth Service (Factory Method Pattern) ===")
    narrate(f"Channel: {channel}")
    service = get_service(channel, config)
    service.send_otp(config.otp_code)
