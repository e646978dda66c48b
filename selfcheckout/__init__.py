"""Self-checkout machine parts: products, cart, payment, change stock and display."""

__version__ = "0.1.0"
__all__ = ["cart", "change_repository", "display", "payment", "product"]