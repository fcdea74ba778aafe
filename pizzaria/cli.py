"""Interactive order taking at the counter: builds an order and prints its receipt."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from pizzaria.entrega import modalidade_por_nome
from pizzaria.pedido import Pedido
from pizzaria.pizza import Pizza, PizzaBuilder

_PALAVRA = re.compile(r"\S+")
_SIM = ("s", "S")


class _Leitor:
    """Reads whitespace-separated words, single characters and whole lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _preencher(self) -> bool:
        linha = self._stream.readline()
        if not linha:
            return False
        self._buffer += linha
        return True

    def _pular_espacos(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            if not self._preencher():
                raise EOFError("a entrada terminou antes do esperado")

    def palavra(self) -> str:
        """The next word, skipping leading whitespace."""
        self._pular_espacos()
        encontrada = _PALAVRA.match(self._buffer)
        assert encontrada is not None
        self._buffer = self._buffer[encontrada.end():]
        return encontrada.group()

    def caractere(self) -> str:
        """The next character that is not whitespace."""
        self._pular_espacos()
        caractere, self._buffer = self._buffer[0], self._buffer[1:]
        return caractere

    def ignorar(self) -> None:
        """Discard exactly one character, whatever it is."""
        if not self._buffer and not self._preencher():
            return
        self._buffer = self._buffer[1:]

    def linha(self) -> str:
        """The rest of the current line, without its newline."""
        while "\n" not in self._buffer:
            if not self._preencher():
                resto, self._buffer = self._buffer, ""
                return resto
        linha, _, self._buffer = self._buffer.partition("\n")
        return linha


def _escrever(saida: TextIO, texto: str) -> None:
    saida.write(texto)
    saida.flush()


def _leitor(entrada: TextIO | _Leitor) -> _Leitor:
    return entrada if isinstance(entrada, _Leitor) else _Leitor(entrada)


def criar_pizza(entrada: TextIO | _Leitor, saida: TextIO) -> Pizza:
    """Ask for a pizza's size, flavours and crust, and return the pizza.

    Raises EOFError if the input ends before the pizza is complete.
    """
    leitor = _leitor(entrada)
    builder = PizzaBuilder()

    _escrever(saida, "\n-- Montando uma nova Pizza --\n")
    _escrever(saida, "Qual o tamanho (Pequena, Média, Grande)? ")
    builder.com_tamanho(leitor.palavra())

    _escrever(saida, "Digite um sabor: ")
    builder.com_sabor(leitor.palavra())

    while True:
        _escrever(saida, "Adicionar outro sabor (s/n)? ")
        if leitor.caractere() not in _SIM:
            break
        _escrever(saida, "Digite o outro sabor: ")
        builder.com_sabor(leitor.palavra())

    _escrever(saida, "Borda recheada (s/n)? ")
    if leitor.caractere() in _SIM:
        builder.com_borda_recheada(True)

    _escrever(saida, "Pizza adicionada ao pedido!\n")
    return builder.build()


def _atender(leitor: _Leitor, saida: TextIO) -> None:
    _escrever(saida, "Bem-vindo a Pizzaria do TPE!\n")
    _escrever(saida, "O pedido e para 'Delivery' ou 'Retirada'? ")
    tipo = leitor.palavra()

    endereco = ""
    if tipo == "Delivery":
        _escrever(saida, "Por favor, digite o endereco para entrega: ")
        leitor.ignorar()
        endereco = leitor.linha()

    pedido = Pedido(modalidade_por_nome(tipo), endereco)

    while True:
        pedido.adicionar_pizza(criar_pizza(leitor, saida))
        _escrever(saida, "\nDeseja adicionar outra pizza ao pedido (s/n)? ")
        if leitor.caractere() not in _SIM:
            break

    pedido.calcular_valor_total()
    pedido.imprimir_recibo(saida)
    _escrever(saida, "\nObrigado pela preferencia!\n")


def main(argv: list[str] | None = None) -> int:
    """Take one order from standard input and print its receipt."""
    parser = argparse.ArgumentParser(
        prog="pizzaria",
        description="Monta um pedido de pizzas e imprime o recibo.",
    )
    parser.parse_args(argv)

    try:
        _atender(_Leitor(sys.stdin), sys.stdout)
    except EOFError as erro:
        print(f"\nerro: {erro}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())