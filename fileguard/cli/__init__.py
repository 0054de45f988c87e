#!/usr/bin/env python3
"""
fileguard CLI Package

Command-line interface over the validated file accessor.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""
