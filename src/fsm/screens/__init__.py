"""
Exports públicos do módulo fsm/screens.

Registro injetável de templates de tela.
"""

from fsm.screens.registry import (
    DEFAULT_SCREENS_PATH,
    ScreenRegistry,
    get_default_registry,
    load_screen_registry,
)

__all__ = [
    "DEFAULT_SCREENS_PATH",
    "ScreenRegistry",
    "get_default_registry",
    "load_screen_registry",
]
