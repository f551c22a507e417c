"""Test simple factory, factory method and abstract factory."""
import pytest
from core.narration import capture_narration
from naive.simple_factory import send_otp_without_factory
from patterns.abstract_factory import (
    AuthService,
    IndiaOTPFactory,
    USAOTPFactory,
    get_factory,
)
from patterns.domain_config import DemoConfig, SmtpConfig
from patterns.factory_method import EmailOTPService, get_service
from patterns.simple_factory import (
    EmailOTP,
    OTPSender,
    SMSOTP,
    TelegramOTP,
    WhatsAppOTP,
    create_otp_sender,
)


@pytest.mark.parametrize(
    "channel, expected",
    [("email", EmailOTP), ("sms", SMSOTP), ("whatsapp", WhatsAppOTP), ("telegram", TelegramOTP)],
)
def test_factory_creates_sender_per_channel(channel, expected):
    sender = create_otp_sender(channel)
    assert isinstance(sender, expected)
    assert isinstance(sender, OTPSender)


def test_factory_channel_case_insensitive():
    assert isinstance(create_otp_sender("EMAIL"), EmailOTP)


def test_factory_unknown_channel():
    with pytest.raises(ValueError, match="Unknown: pigeon"):
        create_otp_sender("pigeon")


def test_factory_uses_config():
    config = DemoConfig(smtp=SmtpConfig(host="mail.internal", port=2525))
    sender = create_otp_sender("email", config)
    assert (sender.host, sender.port) == ("mail.internal", 2525)


def test_sender_narration():
    with capture_narration() as transcript:
        create_otp_sender("sms").send_otp("847291")
    assert transcript.lines == ["   [SMSOTP] Sent OTP: 847291"]


def test_naive_unknown_channel_sends_nothing():
    with capture_narration() as transcript:
        sender = send_otp_without_factory("telegram", "847291", DemoConfig())
    assert sender is None
    assert transcript.lines == []


def test_naive_sms_uses_hardcoded_key():
    with capture_narration():
        sender = send_otp_without_factory("sms", "847291", DemoConfig())
    assert sender.key != DemoConfig().twilio.api_key


def test_factory_method_template():
    with capture_narration() as transcript:
        sender = EmailOTPService().send_otp("123456")
    assert isinstance(sender, EmailOTP)
    assert transcript.lines == ["   [EmailOTP] Sent OTP: 123456"]


def test_get_service_unknown_channel():
    with pytest.raises(ValueError, match="Unknown channel"):
        get_service("fax")


def test_get_factory():
    assert isinstance(get_factory("india"), IndiaOTPFactory)
    assert isinstance(get_factory("USA"), USAOTPFactory)
    with pytest.raises(ValueError, match="Unknown region: mars"):
        get_factory("mars")


@pytest.mark.parametrize("region", ["india", "usa"])
def test_abstract_factory_family_is_consistent(region):
    with capture_narration():
        senders = AuthService(get_factory(region)).send_otp_via_all("847291")
    assert len(senders) == 3
    assert {s.region for s in senders} == {region}


def test_send_otp_via_all_order():
    with capture_narration() as transcript:
        AuthService(USAOTPFactory()).send_otp_via_all("847291")
    sent = [line.strip() for line in transcript.lines if "Sent" in line]
    assert sent == [
        "[USASMS] Sent SMS OTP: 847291",
        "[USAWhatsApp] Sent WhatsApp OTP: 847291",
        "[USAEmail] Sent Email OTP: 847291",
    ]


def test_send_otp_via_single_channel():
    with capture_narration() as transcript:
        AuthService(IndiaOTPFactory()).send_otp_via("email", "847291")
    assert transcript.lines == [
        "   [IndianEmail] Using Indian SMTP server",
        "   [IndianEmail] Sent Email OTP: 847291",
    ]


def test_send_otp_via_unknown_channel():
    with pytest.raises(ValueError, match="Unknown channel"):
        AuthService(IndiaOTPFactory()).send_otp_via("fax", "847291")


def test_send_otp_via_channel_case_insensitive():
    with capture_narration() as transcript:
        sender = AuthService(get_factory("USA")).send_otp_via("SMS", "847291")
    assert type(sender).__name__ == "USASMS"
    assert transcript.lines[-1] == "   [USASMS] Sent SMS OTP: 847291"
