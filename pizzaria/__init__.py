"""Pizza ordering with delivery or pickup pricing, receipts and an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["cli", "entrega", "pedido", "pizza"]