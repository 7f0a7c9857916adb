"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Dict, Optional

from solid_exercises.config.settings import Config
from solid_exercises.domain.interfaces.audio_player import IAudioPlayer
from solid_exercises.domain.interfaces.video_player import IVideoPlayer
from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter
from solid_exercises.domain.interfaces.product_manager import IProductManager
from solid_exercises.domain.interfaces.order_manager import IOrderManager
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor
from solid_exercises.domain.interfaces.notification_service import INotificationService
from solid_exercises.application.ecommerce_system import ECommerceSystem
from solid_exercises.application.services.file_processor import FileProcessor
from solid_exercises.application.services.order_manager import OrderManager
from solid_exercises.application.services.product_manager import ProductManager
from solid_exercises.infrastructure.factories.provider_factory import ProviderFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern and Dependency Inversion Principle.
    Uses Factory Pattern to create providers based on configuration.
    """

    _instance: Optional['ServiceContainer'] = None
    _config: type[Config] = Config
    _audio_player: Optional[IAudioPlayer] = None
    _video_player: Optional[IVideoPlayer] = None
    _memory_store: Optional[Dict[str, str]] = None
    _reader: Optional[IReader] = None
    _writer: Optional[IWriter] = None
    _file_processor: Optional[FileProcessor] = None
    _product_manager: Optional[IProductManager] = None
    _order_manager: Optional[IOrderManager] = None
    _payment_processor: Optional[IPaymentProcessor] = None
    _notification_service: Optional[INotificationService] = None
    _ecommerce_system: Optional[ECommerceSystem] = None

    def __new__(cls, config_class: Optional[type[Config]] = None):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_class: Optional[type[Config]] = None):
        """
        Initialize service container.

        Args:
            config_class: Optional configuration class (for testing)
        """
        if config_class is not None and config_class is not ServiceContainer._config:
            # Components built from the previous config must not outlive it
            ServiceContainer._clear_services()
            ServiceContainer._config = config_class
        self._logger = logging.getLogger(__name__)

    @property
    def config(self) -> type[Config]:
        return self._config

    def get_audio_player(self) -> IAudioPlayer:
        """Get or create audio player instance."""
        if self._audio_player is None:
            ServiceContainer._audio_player = ProviderFactory.create_audio_player()
            self._logger.info("AudioPlayer created")
        return self._audio_player

    def get_video_player(self) -> IVideoPlayer:
        """Get or create video player instance."""
        if self._video_player is None:
            ServiceContainer._video_player = ProviderFactory.create_video_player()
            self._logger.info("VideoPlayer created")
        return self._video_player

    def _get_memory_store(self) -> Dict[str, str]:
        """Shared store so in-memory reader and writer see the same content."""
        if self._memory_store is None:
            ServiceContainer._memory_store = {}
        return self._memory_store

    def get_reader(self) -> IReader:
        """Get or create reader instance."""
        if self._reader is None:
            storage_type = self.config.STORAGE_TYPE
            try:
                ServiceContainer._reader = ProviderFactory.create_reader(
                    storage_type=storage_type,
                    store=self._get_memory_store(),
                    encoding=self.config.FILE_ENCODING
                )
                self._logger.info(f"Reader created with {storage_type}")
            except Exception as e:
                self._logger.error(f"Failed to create Reader: {e}")
                raise
        return self._reader

    def get_writer(self) -> IWriter:
        """Get or create writer instance."""
        if self._writer is None:
            storage_type = self.config.STORAGE_TYPE
            try:
                ServiceContainer._writer = ProviderFactory.create_writer(
                    storage_type=storage_type,
                    store=self._get_memory_store(),
                    encoding=self.config.FILE_ENCODING
                )
                self._logger.info(f"Writer created with {storage_type}")
            except Exception as e:
                self._logger.error(f"Failed to create Writer: {e}")
                raise
        return self._writer

    def get_file_processor(self) -> FileProcessor:
        """Get or create file processor instance."""
        if self._file_processor is None:
            ServiceContainer._file_processor = FileProcessor(
                reader=self.get_reader(),
                writer=self.get_writer()
            )
            self._logger.info("FileProcessor created")
        return self._file_processor

    def get_product_manager(self) -> IProductManager:
        """Get or create product manager instance."""
        if self._product_manager is None:
            ServiceContainer._product_manager = ProductManager()
            self._logger.info("ProductManager created")
        return self._product_manager

    def get_order_manager(self) -> IOrderManager:
        """Get or create order manager instance."""
        if self._order_manager is None:
            ServiceContainer._order_manager = OrderManager()
            self._logger.info("OrderManager created")
        return self._order_manager

    def get_payment_processor(self) -> IPaymentProcessor:
        """Get or create payment processor instance."""
        if self._payment_processor is None:
            payment_method = self.config.PAYMENT_METHOD
            try:
                ServiceContainer._payment_processor = ProviderFactory.create_payment_processor(payment_method)
                self._logger.info(f"PaymentProcessor created: {payment_method}")
            except Exception as e:
                self._logger.error(f"Failed to create PaymentProcessor: {e}")
                raise
        return self._payment_processor

    def get_notification_service(self) -> INotificationService:
        """Get or create notification service instance."""
        if self._notification_service is None:
            channel = self.config.NOTIFICATION_CHANNEL
            try:
                ServiceContainer._notification_service = ProviderFactory.create_notification_service(channel)
                self._logger.info(f"NotificationService created: {channel}")
            except Exception as e:
                self._logger.error(f"Failed to create NotificationService: {e}")
                raise
        return self._notification_service

    def get_ecommerce_system(self) -> ECommerceSystem:
        """Get or create e-commerce system instance."""
        if self._ecommerce_system is None:
            ServiceContainer._ecommerce_system = ECommerceSystem(
                product_manager=self.get_product_manager(),
                order_manager=self.get_order_manager(),
                payment_processor=self.get_payment_processor(),
                notification_service=self.get_notification_service()
            )
            self._logger.info("ECommerceSystem created")
        return self._ecommerce_system

    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._config = Config
        cls._clear_services()

    @classmethod
    def _clear_services(cls) -> None:
        """Drop every cached component."""
        cls._audio_player = None
        cls._video_player = None
        cls._memory_store = None
        cls._reader = None
        cls._writer = None
        cls._file_processor = None
        cls._product_manager = None
        cls._order_manager = None
        cls._payment_processor = None
        cls._notification_service = None
        cls._ecommerce_system = None
