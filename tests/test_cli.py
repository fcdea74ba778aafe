import io

import pytest

from pizzaria.cli import criar_pizza, main
from pizzaria.entrega import EstrategiaDelivery, EstrategiaRetirada
from pizzaria.pedido import Pedido
from pizzaria.pizza import Pizza


def _rodar(monkeypatch, capsys, texto, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(texto))
    codigo = main(argv if argv is not None else [])
    return codigo, capsys.readouterr()


def test_criar_pizza_um_sabor_sem_borda():
    saida = io.StringIO()
    pizza = criar_pizza(io.StringIO("Grande Calabresa n n\n"), saida)
    assert pizza == Pizza("Grande", ("Calabresa",), False)
    assert pizza.preco == 50.0
    assert "Pizza adicionada ao pedido!" in saida.getvalue()


def test_criar_pizza_varios_sabores_com_borda():
    entrada = io.StringIO("Média\nCalabresa\ns\nMussarela\nS\nAtum\nn\ns\n")
    pizza = criar_pizza(entrada, io.StringIO())
    assert pizza.tamanho == "Média"
    assert pizza.sabores == ("Calabresa", "Mussarela", "Atum")
    assert pizza.borda_recheada is True


def test_criar_pizza_mostra_perguntas_na_ordem():
    saida = io.StringIO()
    criar_pizza(io.StringIO("Pequena X n n\n"), saida)
    texto = saida.getvalue()
    perguntas = [
        "-- Montando uma nova Pizza --",
        "Qual o tamanho (Pequena, Média, Grande)? ",
        "Digite um sabor: ",
        "Adicionar outro sabor (s/n)? ",
        "Borda recheada (s/n)? ",
        "Pizza adicionada ao pedido!",
    ]
    posicoes = [texto.index(p) for p in perguntas]
    assert posicoes == sorted(posicoes)
    assert "Digite o outro sabor: " not in texto


def test_criar_pizza_le_um_caractere_por_resposta():
    # "sim" answers with its first letter; the rest is read as the next word.
    pizza = criar_pizza(io.StringIO("Pequena X sim n n\n"), io.StringIO())
    assert pizza.sabores == ("X", "im")
    assert pizza.borda_recheada is False


def test_criar_pizza_entrada_incompleta():
    with pytest.raises(EOFError):
        criar_pizza(io.StringIO("Grande Calabresa\n"), io.StringIO())


def test_main_retirada(monkeypatch, capsys):
    codigo, saida = _rodar(monkeypatch, capsys, "Retirada\nGrande Calabresa n n\nn\n")
    assert codigo == 0
    esperado = Pedido(EstrategiaRetirada(), "", [Pizza("Grande", ("Calabresa",))])
    esperado.calcular_valor_total()
    assert esperado.recibo() in saida.out
    assert "Taxa de Entrega" not in saida.out
    assert saida.out.startswith("Bem-vindo a Pizzaria do TPE!\n")
    assert saida.out.endswith("\nObrigado pela preferencia!\n")


def test_main_delivery_com_endereco(monkeypatch, capsys):
    texto = "Delivery\nRua das Flores 10\nGrande Calabresa n n\nn\n"
    codigo, saida = _rodar(monkeypatch, capsys, texto)
    assert codigo == 0
    esperado = Pedido(
        EstrategiaDelivery(), "Rua das Flores 10", [Pizza("Grande", ("Calabresa",))]
    )
    esperado.calcular_valor_total()
    assert esperado.recibo() in saida.out
    assert "Endereco de Entrega: Rua das Flores 10" in saida.out
    assert "Taxa de Entrega: R$ 10" in saida.out


def test_main_delivery_endereco_na_mesma_linha(monkeypatch, capsys):
    codigo, saida = _rodar(monkeypatch, capsys, "Delivery Rua Azul\nPequena X n n n\n")
    assert codigo == 0
    assert "Endereco de Entrega: Rua Azul\n" in saida.out


def test_main_tipo_desconhecido_vira_retirada(monkeypatch, capsys):
    codigo, saida = _rodar(monkeypatch, capsys, "delivery\nPequena X n n n\n")
    assert codigo == 0
    assert "Modalidade: Retirada" in saida.out
    assert "Por favor, digite o endereco" not in saida.out


def test_main_entrada_vazia(monkeypatch, capsys):
    codigo, saida = _rodar(monkeypatch, capsys, "")
    assert codigo == 1
    assert "erro" in saida.err
    assert "RECIBO DO PEDIDO" not in saida.out


def test_main_rejeita_argumentos(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["--sabor"])
    assert excinfo.value.code == 2