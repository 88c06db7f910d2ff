# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blocking, human-looking delays.

Delays are plain ``time.sleep`` calls on the caller's thread: they emulate
human timing and give the game a moment to settle before the next snapshot
is read.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable

KEY_PRESS_MIN_MS = 40
KEY_PRESS_MAX_MS = 90

Sleeper = Callable[[float], None]


def sleep_ms(ms: float, sleep: Sleeper = time.sleep) -> None:
    if ms > 0:
        sleep(ms / 1000.0)


def key_press_delay_ms(rng: random.Random | None = None) -> int:
    """Hold time between key/button down and up."""
    return (rng or random).randrange(KEY_PRESS_MIN_MS, KEY_PRESS_MAX_MS)


def humanized_pause(rng: random.Random | None = None, sleep: Sleeper = time.sleep) -> int:
    """Sleep for one key-press hold time and return it in milliseconds."""
    ms = key_press_delay_ms(rng)
    sleep_ms(ms, sleep)
    return ms
