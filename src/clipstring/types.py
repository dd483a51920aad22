"""
Core types for clip string conversion.
"""

type Symbol = str
type ClipString = str
type BitString = str
