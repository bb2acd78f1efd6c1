"""Services for ecosystem-deploy"""

from .config_service import ConfigService

__all__ = [
    'ConfigService',
]
