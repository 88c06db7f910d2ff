# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Device-input and protocol-command seams used by the planner."""

from __future__ import annotations

from isobot.input.base import InputDispatcher, ModifierKey, MouseButton, ProtocolSender
from isobot.input.recording import RecordingDispatcher, RecordingSender

__all__ = [
    "InputDispatcher",
    "ModifierKey",
    "MouseButton",
    "ProtocolSender",
    "RecordingDispatcher",
    "RecordingSender",
]
