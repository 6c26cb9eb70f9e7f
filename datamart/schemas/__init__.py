"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (payloads, API responses)
    - Wire names are camelCase where the record field is (attachmentURL, dataFormat, purchasedItem)

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
