#!/usr/bin/env python3
"""
fileguard Core Constants - Defaults and diagnostics of the file accessor

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Alignment
# =============================================================================
DEFAULT_SECTOR_SIZE = 2048  # CD-ROM Mode 1 user data per sector
PAD_BYTE = b"\x00"

# =============================================================================
# Diagnostics
# =============================================================================
# Logged and carried on AccessError.message
MSG_EMPTY_SOURCE = "Attempting to read from an uninitialized buffer, aborting..."
MSG_EMPTY_DESTINATION = "Attempting to write to an uninitialized buffer, aborting..."
MSG_NOT_READABLE = "Unable to read from file, aborting..."
MSG_NOT_WRITABLE = "Unable to write to file, aborting..."
MSG_NOT_SEEKABLE = "Unable to seek file pointer, aborting..."
MSG_READ_ONLY = "Attempting to write to a read-only file, aborting..."
