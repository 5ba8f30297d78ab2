"""Client configuration."""
from .client_config import ClientConfig, load_client_config

__all__ = ["ClientConfig", "load_client_config"]
