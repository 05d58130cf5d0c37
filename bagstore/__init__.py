"""Bag Store Item Identifiers — parse, validate and render bag-ids and file-ids.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
