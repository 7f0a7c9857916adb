"""Factory for creating provider instances (Factory Pattern)."""
import logging
from typing import Dict, Optional

from solid_exercises.domain.interfaces.audio_player import IAudioPlayer
from solid_exercises.domain.interfaces.video_player import IVideoPlayer
from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor
from solid_exercises.domain.interfaces.notification_service import INotificationService

from solid_exercises.infrastructure.players.audio_player import AudioPlayer
from solid_exercises.infrastructure.players.video_player import VideoPlayer
from solid_exercises.infrastructure.storage.file_storage import FileReader, FileWriter
from solid_exercises.infrastructure.storage.memory_storage import InMemoryReader, InMemoryWriter
from solid_exercises.infrastructure.payments.credit_card import CreditCardPaymentProcessor
from solid_exercises.infrastructure.payments.paypal import PayPalPaymentProcessor
from solid_exercises.infrastructure.notifications.email_service import EmailService


logger = logging.getLogger(__name__)


class ProviderFactory:
    """
    Factory for creating provider instances following Factory Pattern.

    Variant selection lives here, never in the components that
    consume the providers.
    """

    @staticmethod
    def create_payment_processor(payment_method: str = "credit_card") -> IPaymentProcessor:
        """
        Create a payment processor instance.

        Args:
            payment_method: Type of processor ("credit_card", "paypal")

        Returns:
            IPaymentProcessor instance

        Raises:
            ValueError: If payment method is not supported
        """
        payment_method = payment_method.lower()

        if payment_method == "credit_card":
            return CreditCardPaymentProcessor()
        elif payment_method == "paypal":
            return PayPalPaymentProcessor()
        else:
            raise ValueError(f"Unsupported payment method type: {payment_method}")

    @staticmethod
    def create_notification_service(channel: str = "email") -> INotificationService:
        """
        Create a notification service instance.

        Args:
            channel: Notification channel ("email")

        Returns:
            INotificationService instance

        Raises:
            ValueError: If channel is not supported
        """
        channel = channel.lower()

        if channel == "email":
            return EmailService()
        else:
            raise ValueError(f"Unsupported notification channel type: {channel}")

    @staticmethod
    def create_reader(
        storage_type: str = "filesystem",
        store: Optional[Dict[str, str]] = None,
        encoding: Optional[str] = None
    ) -> IReader:
        """
        Create a reader instance.

        Args:
            storage_type: Type of storage ("filesystem", "memory")
            store: Shared store for in-memory storage
            encoding: Text encoding for file-system storage

        Returns:
            IReader instance

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()

        if storage_type == "filesystem":
            return FileReader(encoding=encoding)
        elif storage_type == "memory":
            return InMemoryReader(store=store)
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")

    @staticmethod
    def create_writer(
        storage_type: str = "filesystem",
        store: Optional[Dict[str, str]] = None,
        encoding: Optional[str] = None
    ) -> IWriter:
        """
        Create a writer instance.

        Args:
            storage_type: Type of storage ("filesystem", "memory")
            store: Shared store for in-memory storage
            encoding: Text encoding for file-system storage

        Returns:
            IWriter instance

        Raises:
            ValueError: If storage type is not supported
        """
        storage_type = storage_type.lower()

        if storage_type == "filesystem":
            return FileWriter(encoding=encoding)
        elif storage_type == "memory":
            return InMemoryWriter(store=store)
        else:
            raise ValueError(f"Unsupported storage type: {storage_type}")

    @staticmethod
    def create_audio_player() -> IAudioPlayer:
        return AudioPlayer()

    @staticmethod
    def create_video_player() -> IVideoPlayer:
        return VideoPlayer()
