# pizzaria

A small ordering tool for a pizza shop. It asks whether the order is for
delivery (`Delivery`) or pickup (`Retirada`), builds one or more pizzas from
the answers typed in, and prints an itemised receipt with the total.

## Installation

```
pip install .
```

## Usage at the prompt

```
pizzaria
```

The same program also runs as `python -m pizzaria.cli`. It takes no options
other than `-h`/`--help`.

The program reads its answers from standard input and asks, in order:

1. `Delivery` or `Retirada`. Only the exact word `Delivery` selects delivery;
   any other word means pickup. For delivery it then asks for the address,
   which is read as a whole line.
2. For each pizza: the size (`Pequena`, `Média`, `Grande`), a first flavour,
   whether to add another flavour (repeated until the answer is not yes), and
   whether it has a stuffed crust.
3. Whether to add another pizza.

Sizes and flavours are read as single words. A yes/no answer counts as yes
only when it is `s` or `S`.

At the end it prints the receipt and a closing message. If the input ends
before the order is complete, it writes an error to standard error and exits
with status 1.

### Prices

| Item                            | Price     |
|---------------------------------|-----------|
| Grande                          | R$ 50     |
| Média                           | R$ 40     |
| Pequena (or any other size)     | R$ 30     |
| Each flavour after the first    | R$ 5      |
| Stuffed crust                   | R$ 8      |
| Delivery fee                    | R$ 10     |
| Pickup fee                      | R$ 0      |

Amounts on the receipt are shown with up to six significant digits
(`formatar_valor` in `pizzaria.pizza`), so R$ 58 appears as `R$ 58`.

## Use as a library

```python
from pizzaria.pizza import PizzaBuilder
from pizzaria.pedido import Pedido
from pizzaria.entrega import EstrategiaDelivery, modalidade_por_nome

pizza = (
    PizzaBuilder()
    .com_tamanho("Grande")
    .com_sabor("Calabresa")
    .com_sabor("Mussarela")
    .com_borda_recheada(True)
    .build()
)

pedido = Pedido(EstrategiaDelivery(), "Rua Exemplo, 123")
pedido.adicionar_pizza(pizza)
pedido.calcular_valor_total()   # returns 73.0 and stores it in valor_total
pedido.imprimir_recibo()
```

- `pizzaria.entrega`: the abstract `ModalidadeEntrega` with
  `calcular_taxa(valor_itens)` and `obter_nome()`, and its two kinds,
  `EstrategiaDelivery` and `EstrategiaRetirada`. `modalidade_por_nome("Delivery")`
  returns the delivery rule; any other name returns the pickup rule.
- `pizzaria.pizza`: `Pizza` is an immutable record of size, flavours and crust;
  its `preco` property gives the price, `descricao()` its receipt line and
  `exibir(file)` writes that line. `PizzaBuilder` gathers the same options
  step by step and `build()` makes the pizza.
- `pizzaria.pedido`: `Pedido` takes a delivery mode (an object or its name) and
  an optional address. `calcular_valor_total()` sets and returns the total;
  `recibo()` returns the receipt as a string using the total last calculated,
  and `imprimir_recibo(file)` writes it (standard output by default).
- `pizzaria.cli`: `criar_pizza(entrada, saida)` asks for one pizza on the given
  streams, and `main(argv=None)` runs the whole order at the prompt.

## What it does not do

It takes one order per run and keeps nothing: orders are not saved, numbered
or listed anywhere. There is no menu of known flavours and no check of the
size; an unrecognised size is simply priced as `Pequena`.

## Tests

```
pip install ".[test]"
pytest
```