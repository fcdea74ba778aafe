"""Delivery modes and the fee each one charges."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ModalidadeEntrega(ABC):
    """How an order reaches the customer, and what that costs."""

    @abstractmethod
    def calcular_taxa(self, valor_itens: float) -> float:
        """Return the fee charged for an order whose items cost ``valor_itens``."""

    @abstractmethod
    def obter_nome(self) -> str:
        """Return the name shown on the receipt."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class EstrategiaDelivery(ModalidadeEntrega):
    """Delivery to the customer's address for a flat fee."""

    TAXA = 10.0

    def calcular_taxa(self, valor_itens: float) -> float:
        return self.TAXA

    def obter_nome(self) -> str:
        return "Delivery"


class EstrategiaRetirada(ModalidadeEntrega):
    """Pick-up at the shop, free of charge."""

    def calcular_taxa(self, valor_itens: float) -> float:
        return 0.0

    def obter_nome(self) -> str:
        return "Retirada"


def modalidade_por_nome(nome: str) -> ModalidadeEntrega:
    """Return delivery for the exact name ``"Delivery"``, pick-up for anything else."""
    if nome == "Delivery":
        return EstrategiaDelivery()
    return EstrategiaRetirada()