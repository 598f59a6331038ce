"""
Base class for dynamic-lighting modules.
"""

from abc import ABC, abstractmethod
from typing import Dict


class LightingModule(ABC):
    """
    A plug-in that listens on the event bus and owns its runtime state.

    Configuration is a versioned dict; subclasses describe it with
    config_schema() so hosts can render settings forms.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @property
    @abstractmethod
    def CURRENT_CONFIG_VERSION(self) -> int:
        pass

    @abstractmethod
    def attach(self, bus) -> None:
        """Subscribe to bus events and keep the bus for publishing."""
        pass

    @abstractmethod
    def default_config(self) -> Dict:
        pass

    @abstractmethod
    def config_schema(self) -> Dict:
        pass

    def migrate_config(self, config: Dict) -> Dict:
        """Bring an older config dict up to CURRENT_CONFIG_VERSION."""
        return config

    def on_config_changed(self, config: Dict) -> None:
        pass
