from .email_service import EmailService
from .seed_service import SeedService

__all__ = ["EmailService", "SeedService"]
