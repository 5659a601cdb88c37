"""A console battle game between wizards and warriors armed with magic items and combat weapons."""

__version__ = "0.1.0"
__all__ = ["armas", "personajes", "factory", "juego", "demo"]