"""Pydantic Schemas — item-id validation for payloads crossing the system boundary.

Invariants:
    - Schemas validate at system boundary (collaborator input, responses)
    - Parsing delegated to core/; schemas only translate errors to pydantic's

Design Decisions:
    - Separate from core: schemas are wire contracts, core types are the model (ADR: DDD boundary)
"""
