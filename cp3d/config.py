"""
Глобальні константи cp3d та їх перевизначення зі змінних оточення.

    CP3D_STRIP_BOUND  — "max" (за замовчуванням) або "min" (класичний варіант)
    CP3D_LOG_LEVEL    — рівень логування CLI за замовчуванням (WARNING)
"""
from __future__ import annotations
import logging
import os

BRUTE_FORCE_THRESHOLD = 3     # частини з N <= 3 рахуються перебором
STRIP_BOUNDS = ("max", "min")
EXIT_INPUT_ERROR = 9          # код виходу для нечитабельного/битого вводу


def strip_bound() -> str:
    val = os.environ.get("CP3D_STRIP_BOUND", "max").strip().lower()
    if val not in STRIP_BOUNDS:
        raise ValueError(f"CP3D_STRIP_BOUND must be one of {STRIP_BOUNDS}, got {val!r}")
    return val


def log_level() -> int:
    name = os.environ.get("CP3D_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"CP3D_LOG_LEVEL: unknown logging level {name!r}")
    return level
