"""Abstract Factory scenario: regional OTP provider families."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from patterns.abstract_factory import CHANNELS, AuthService, get_factory, supported_regions
from patterns.domain_config import DemoConfig


@register_demo(
    "abstract_factory", "with",
    title="Regional sender families",
    summary="A regional factory builds SMS, WhatsApp and email senders that always belong together.",
    roles=[
        "Abstract Products: SMSSender, WhatsAppSender, EmailSender",
        "Abstract Factory: OTPFactory",
        "Concrete Factories: IndiaOTPFactory, USAOTPFactory",
        "Client: AuthService",
    ],
    inputs={"region": supported_regions(), "channel": [*CHANNELS, "all"]},
)
def run_with(config: DemoConfig, region: str | None = None, channel: str | None = None) -> None:
    region = region or config.default_region
    channel = channel or "all"
    narrate("=== OTP Service (Abstract Factory Pattern) ===")
    narrate(f"Region: {region}, channel: {channel}")

    service = AuthService(get_factory(region))
    if channel == "all":
        service.send_otp_via_all(config.otp_code)
    else:
        service.send_otp_via(channel, config.otp_code)
