"""Core Layer — pure identifier logic, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic; failures are returned as Err values

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
