"""Keyboard event helpers."""

from __future__ import annotations

from typing import Any, Optional

import pygame

_KEYPAD_DIGITS = {
    pygame.K_KP0: "0",
    pygame.K_KP1: "1",
    pygame.K_KP2: "2",
    pygame.K_KP3: "3",
    pygame.K_KP4: "4",
    pygame.K_KP5: "5",
    pygame.K_KP6: "6",
    pygame.K_KP7: "7",
    pygame.K_KP8: "8",
    pygame.K_KP9: "9",
}

_ROW_DIGITS = {getattr(pygame, f"K_{d}"): str(d) for d in range(10)}

SUBMIT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def is_keydown(event: Any) -> bool:
    return event is not None and event.type == pygame.KEYDOWN


def digit_from_event(event: Any) -> Optional[str]:
    """Return the digit typed by a KEYDOWN event, or None."""

    if not is_keydown(event):
        return None
    key = getattr(event, "key", None)
    if key in _ROW_DIGITS:
        return _ROW_DIGITS[key]
    if key in _KEYPAD_DIGITS:
        return _KEYPAD_DIGITS[key]
    char = getattr(event, "unicode", "")
    if len(char) == 1 and char in "0123456789":
        return char
    return None
