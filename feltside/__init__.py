"""Poker table pieces: card model, AI opponents, keyboard input handling and text-mode drawing."""

__version__ = "1.0.0"
__all__ = ["model", "personality", "ai", "input_handler", "render", "heads_up"]