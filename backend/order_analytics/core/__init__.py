"""
Core - configuration and shared exceptions
"""
from order_analytics.core.config import Settings, settings
from order_analytics.core.exceptions import InvalidArgumentError

__all__ = ['Settings', 'settings', 'InvalidArgumentError']
