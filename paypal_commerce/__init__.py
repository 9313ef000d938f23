"""PayPal Commerce plugin event consumer.

Reacts to e-commerce platform events (customer deletion, admin UI model
preparation and submission, shipment creation, tracking numbers, system
warnings) and performs the plugin's side effects through injected ports.
"""

__version__ = "0.1.0"
