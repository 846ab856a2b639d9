"""Infrastructure Layer — persistence, id generation and cross-cutting concerns.

Invariants:
    - Infrastructure may import core types (records, changesets, errors) but never
      calls core operations itself
    - All database exceptions mapped to DatabaseError

Design Decisions:
    - Thin adapters that satisfy the Protocols in core/repository_protocols.py
"""
