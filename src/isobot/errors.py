# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for isobot."""


class IsobotError(Exception):
    """Base exception for isobot."""

    pass


class ProtocolCommandError(IsobotError):
    """A protocol-level command (teleport, skill select) was rejected."""

    pass


class ConfigError(IsobotError):
    """Configuration or scenario file could not be loaded."""

    pass
