"""Base component implementation classes.

This module provides abstract base classes that implement the lifecycle and
health protocols defined in interfaces.py.
"""

import time
from abc import ABC
from typing import Generic, TypeVar

from pydantic import BaseModel

from .base import HealthStatus
from .interfaces import HealthCheck, ServiceLifecycle

ConfigT = TypeVar("ConfigT", bound=BaseModel)


class Component(ABC, ServiceLifecycle, HealthCheck):
    """Base class for all components with lifecycle and health management."""

    def __init__(self, name: str):
        """Initialize component with a name."""
        self.name = name
        self.initialized = False
        self.healthy = True
        self.health_message = "Not initialized"
        self.last_health_check = 0.0

    async def initialize(self) -> None:
        """Initialize the component, setting up required resources."""
        self.initialized = True
        self.health_message = "Initialized"
        self.last_health_check = time.time()

    async def cleanup(self) -> None:
        """Clean up resources used by the component."""
        self.initialized = False
        self.health_message = "Cleaned up"

    async def reset(self) -> None:
        """Reset the component to its initial state."""
        await self.cleanup()
        await self.initialize()

    async def check_health(self) -> tuple[HealthStatus, str]:
        """Check component health status with basic implementation."""
        if not self.initialized:
            return HealthStatus.UNHEALTHY, f"{self.name} not initialized"

        try:
            await self._perform_health_check()
            self.last_health_check = time.time()
            if not self.healthy:
                return HealthStatus.DEGRADED, self.health_message
            return HealthStatus.HEALTHY, self.health_message
        except Exception as e:
            self.healthy = False
            self.health_message = f"Health check failed: {str(e)}"
            return HealthStatus.UNHEALTHY, self.health_message

    async def _perform_health_check(self) -> None:
        """
        Perform component-specific health check.

        Override this method in subclasses to implement custom health checking.
        """
        self.healthy = True
        self.health_message = "Healthy"

    def is_healthy(self) -> bool:
        """Check if the component is in a healthy state."""
        return self.healthy and self.initialized


class ConfigurableComponentBase(Component, Generic[ConfigT]):
    """Base class for components that can be configured."""

    def __init__(self, name: str, config: ConfigT | None = None):
        """Initialize with optional configuration."""
        super().__init__(name)
        self.config = config

    def configure(self, config: ConfigT) -> None:
        """Configure the component with provided configuration."""
        self.config = config

    def get_config(self) -> ConfigT:
        """Get current configuration (raises error if not configured)."""
        if self.config is None:
            raise ValueError(f"Component {self.name} has not been configured")
        return self.config
