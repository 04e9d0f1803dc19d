"""Pydantic Schemas — request, response and list-option shapes per Crowdin resource.

Invariants:
    - One module per API resource group; modules never import each other except base
      and the shared entity shapes (languages, users)
    - Wire names are camelCase aliases; Python attributes are snake_case

Design Decisions:
    - Requests are constructible empty so validate() can report the first missing field
      (ADR: presence checks are part of the public contract, not construction errors)
"""
