"""Crowdin SDK Package — request/response models for the Crowdin REST API v2.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: import from crowdin_sdk.schemas.<resource> explicitly, no star exports
"""
