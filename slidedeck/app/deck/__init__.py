# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""
Deck module for AI-assisted slide decks.

This module provides RESTful API endpoints for:
- Presentation generation from a prompt
- Slide insert, edit, delete, shift and move with dense ordering
- Slide regeneration previews
- Theme application and full-screen playback
"""
