import pytest
from solid_exercises.infrastructure.factories import ProviderFactory
from solid_exercises.infrastructure.notifications import EmailService
from solid_exercises.infrastructure.payments import (
    CreditCardPaymentProcessor,
    PayPalPaymentProcessor,
)
from solid_exercises.infrastructure.players import AudioPlayer, VideoPlayer
from solid_exercises.infrastructure.storage import (
    FileReader,
    FileWriter,
    InMemoryReader,
    InMemoryWriter,
)


@pytest.mark.parametrize(
    "method, expected",
    [
        ("credit_card", CreditCardPaymentProcessor),
        ("PayPal", PayPalPaymentProcessor),
    ],
)
def test_create_payment_processor(method, expected):
    assert isinstance(ProviderFactory.create_payment_processor(method), expected)


def test_create_payment_processor_unsupported():
    with pytest.raises(ValueError, match="Unsupported payment method type: bitcoin"):
        ProviderFactory.create_payment_processor("bitcoin")


def test_create_notification_service():
    assert isinstance(ProviderFactory.create_notification_service("email"), EmailService)

    with pytest.raises(ValueError, match="Unsupported notification channel type"):
        ProviderFactory.create_notification_service("carrier_pigeon")


def test_create_storage():
    store = {}

    assert isinstance(ProviderFactory.create_reader("filesystem"), FileReader)
    assert isinstance(ProviderFactory.create_writer("filesystem"), FileWriter)

    reader = ProviderFactory.create_reader("memory", store=store)
    writer = ProviderFactory.create_writer("memory", store=store)
    assert isinstance(reader, InMemoryReader)
    assert isinstance(writer, InMemoryWriter)
    assert reader.store is writer.store is store


def test_create_storage_unsupported():
    with pytest.raises(ValueError, match="Unsupported storage type: s3"):
        ProviderFactory.create_reader("s3")
    with pytest.raises(ValueError, match="Unsupported storage type: s3"):
        ProviderFactory.create_writer("s3")


def test_create_players():
    assert isinstance(ProviderFactory.create_audio_player(), AudioPlayer)
    assert isinstance(ProviderFactory.create_video_player(), VideoPlayer)
