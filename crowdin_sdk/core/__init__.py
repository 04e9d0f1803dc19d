"""Core Layer — pure validation and encoding logic, no IO.

Invariants:
    - core/ never imports infrastructure/; schemas/ are referenced for typing only
    - All functions are pure and deterministic

Design Decisions:
    - Shared contract (errors, nil handling, query encoding) lives here; resources stay leaves
"""
