"""Base service class for all services."""

from typing import Optional

from ..config import Config, default_config


class BaseService:
    """Base class for all services.

    Provides access to the shared configuration through dependency injection.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize the base service.

        Args:
            config: Application configuration (built-in defaults when omitted)
        """
        self.config = config or default_config()
