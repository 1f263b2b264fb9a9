"""
Core value types, numerical primitives, and plain-data models.

This module contains the foundational building blocks that are independent
of any surrounding system (storage, transport, UI).
"""
