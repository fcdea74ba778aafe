"""An order: its pizzas, delivery mode, total and receipt."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from pizzaria.entrega import ModalidadeEntrega, modalidade_por_nome
from pizzaria.pizza import Pizza, formatar_valor

_LINHA_DUPLA = "======================================"
_LINHA_SIMPLES = "--------------------------------------"


@dataclass
class Pedido:
    """A customer's order. ``modalidade`` may also be given by name."""

    modalidade: ModalidadeEntrega | str
    endereco: str = ""
    pizzas: list[Pizza] = field(default_factory=list)
    valor_total: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.modalidade, str):
            self.modalidade = modalidade_por_nome(self.modalidade)

    def adicionar_pizza(self, pizza: Pizza) -> None:
        self.pizzas.append(pizza)

    def calcular_valor_total(self) -> float:
        """Set and return the total: the items' prices plus the delivery fee."""
        valor_itens = sum(pizza.preco for pizza in self.pizzas)
        self.valor_total = valor_itens + self.modalidade.calcular_taxa(valor_itens)
        return self.valor_total

    def recibo(self) -> str:
        """The printed receipt, using the total last calculated."""
        nome = self.modalidade.obter_nome()
        taxa = self.modalidade.calcular_taxa(0)
        linhas = [
            "",
            _LINHA_DUPLA,
            "         RECIBO DO PEDIDO",
            _LINHA_DUPLA,
            f"Modalidade: {nome}",
        ]
        if nome == "Delivery" and self.endereco:
            linhas.append(f"Endereco de Entrega: {self.endereco}")
        linhas += [_LINHA_SIMPLES, "Itens do Pedido:"]
        linhas += [pizza.descricao() for pizza in self.pizzas]
        linhas.append(_LINHA_SIMPLES)
        if taxa > 0:
            linhas.append(f"Taxa de Entrega: R$ {formatar_valor(taxa)}")
        linhas += [f"VALOR TOTAL: R$ {formatar_valor(self.valor_total)}", _LINHA_DUPLA]
        return "\n".join(linhas) + "\n"

    def imprimir_recibo(self, file: TextIO | None = None) -> None:
        """Write the receipt to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.recibo())