"""Application layer - reactions to platform events.

Structure:
- event_handlers/: Event consumers that apply guards and delegate side
  effects to domain ports

The application layer orchestrates collaborators but contains no business rules.
"""
