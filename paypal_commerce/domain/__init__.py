"""Domain layer - the plugin's view of the host platform.

Structure:
- entities/: Platform entities the plugin touches (shipment, payment token,
  system warning)
- models/: UI model variants delivered with model lifecycle events
- value_objects/: Request-scoped context threaded through events
- events/: Platform events the plugin subscribes to, plus the registry
- protocols/: Ports for collaborators (provider, storage, localization)
- errors/: Provider error types carried in Failure results

The domain layer has no dependency on any framework.
"""
