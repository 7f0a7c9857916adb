"""Domain interfaces following Interface Segregation and Dependency Inversion."""

from solid_exercises.domain.interfaces.audio_player import IAudioPlayer
from solid_exercises.domain.interfaces.video_player import IVideoPlayer
from solid_exercises.domain.interfaces.reader import IReader
from solid_exercises.domain.interfaces.writer import IWriter
from solid_exercises.domain.interfaces.product_manager import IProductManager
from solid_exercises.domain.interfaces.order_manager import IOrderManager
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor
from solid_exercises.domain.interfaces.notification_service import INotificationService

__all__ = [
    "IAudioPlayer",
    "IVideoPlayer",
    "IReader",
    "IWriter",
    "IProductManager",
    "IOrderManager",
    "IPaymentProcessor",
    "INotificationService",
]
