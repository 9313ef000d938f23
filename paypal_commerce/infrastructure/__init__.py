"""Infrastructure layer - adapters for domain protocols.

Structure:
- events/: In-memory event bus
- logging/: structlog console adapter
- persistence/: In-memory generic attribute store and shipment repository
- localization/: Resource-table localization service
"""
