"""Common type definitions for the linked list.

Values are fixed to plain integers.
"""

from __future__ import annotations

# Element stored in a node
Value = int
# 1-based ordinal into the current sequence
Position = int
