"""Datamart Registry Package - marketplace registry for data item listings and purchasers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
