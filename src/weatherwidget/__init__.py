"""
Weather lookup widget: UiState container and text rendering on top of weatherclient.
"""

__all__ = ['WeatherWidget', 'UiState', 'Idle', 'Loading', 'Loaded', 'Failed', 'render', 'message_for']

from .render import message_for, render
from .state import Failed, Idle, Loaded, Loading, UiState
from .widget import WeatherWidget
