"""Pizzas, their prices, and a fluent builder for them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

_PRECO_BASE = {"Grande": 50.0, "Média": 40.0}
_PRECO_PEQUENA = 30.0
_PRECO_SABOR_EXTRA = 5.0
_PRECO_BORDA = 8.0


def formatar_valor(valor: float) -> str:
    """Format an amount the way the receipt shows it: up to six significant digits."""
    return f"{valor:g}"


@dataclass(frozen=True)
class Pizza:
    """A pizza of a given size, with one or more flavours and an optional stuffed crust."""

    tamanho: str
    sabores: tuple[str, ...] = ()
    borda_recheada: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "sabores", tuple(self.sabores))

    @property
    def preco(self) -> float:
        """Price: base by size, plus each extra flavour, plus the stuffed crust."""
        preco = _PRECO_BASE.get(self.tamanho, _PRECO_PEQUENA)
        if len(self.sabores) > 1:
            preco += (len(self.sabores) - 1) * _PRECO_SABOR_EXTRA
        if self.borda_recheada:
            preco += _PRECO_BORDA
        return preco

    def descricao(self) -> str:
        """The receipt line for this pizza, without a trailing newline."""
        borda = " com borda recheada" if self.borda_recheada else ""
        sabores = ", ".join(self.sabores)
        return f"  - Pizza {self.tamanho} ({sabores}){borda} - R$ {formatar_valor(self.preco)}"

    def exibir(self, file: TextIO | None = None) -> None:
        """Write the receipt line to ``file`` (standard output by default)."""
        print(self.descricao(), file=file if file is not None else sys.stdout)


@dataclass
class PizzaBuilder:
    """Collects a pizza's options step by step; each step returns the builder."""

    tamanho: str = ""
    sabores: list[str] = field(default_factory=list)
    borda_recheada: bool = False

    def com_tamanho(self, tamanho: str) -> PizzaBuilder:
        self.tamanho = tamanho
        return self

    def com_sabor(self, sabor: str) -> PizzaBuilder:
        self.sabores.append(sabor)
        return self

    def com_borda_recheada(self, recheada: bool = True) -> PizzaBuilder:
        self.borda_recheada = recheada
        return self

    def build(self) -> Pizza:
        """Make the pizza from the options gathered so far."""
        return Pizza(self.tamanho, tuple(self.sabores), self.borda_recheada)