# Firebase loads the functions from this module; the implementation lives in
# the ``app`` package.
from app.main import send_welcome_email

__all__ = ["send_welcome_email"]
