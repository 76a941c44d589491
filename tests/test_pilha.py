import pytest

from estruturas.elemento import Elemento
from estruturas.pilha import (
    PilhaCheiaError,
    PilhaEncadeada,
    PilhaEstatica,
    PilhaVaziaError,
)

ALICE = Elemento("Alice", 25)
BOB = Elemento("Bob", 30)
CAROL = Elemento("Carol", 28)
PESSOAS = [
    ALICE,
    BOB,
    CAROL,
    Elemento("David", 35),
    Elemento("Eve", 22),
]


@pytest.fixture(params=[PilhaEstatica, PilhaEncadeada])
def pilha(request):
    return request.param()


def test_lifo_order(pilha):
    for e in (ALICE, BOB, CAROL):
        pilha.push(e)
    assert [pilha.pop() for _ in range(3)] == [CAROL, BOB, ALICE]
    assert len(pilha) == 0


def test_pop_empty_after_draining(pilha):
    pilha.push(ALICE)
    assert pilha.pop() == ALICE
    with pytest.raises(PilhaVaziaError):
        pilha.pop()


def test_iter_top_to_base(pilha):
    for e in (ALICE, BOB, CAROL):
        pilha.push(e)
    assert list(pilha) == [CAROL, BOB, ALICE]
    assert len(pilha) == 3


def test_exibir_empty():
    assert PilhaEstatica().exibir() == "Pilha vazia.\n"
    assert PilhaEncadeada().exibir() == "Pilha vazia.\n"


def test_estatica_full():
    pilha = PilhaEstatica()
    for e in PESSOAS:
        pilha.push(e)
    with pytest.raises(PilhaCheiaError):
        pilha.push(Elemento("Frank", 40))
    assert list(pilha) == list(reversed(PESSOAS))


def test_estatica_custom_capacity():
    pilha = PilhaEstatica(capacidade=1)
    pilha.push(ALICE)
    with pytest.raises(PilhaCheiaError):
        pilha.push(BOB)


def test_encadeada_unbounded():
    pilha = PilhaEncadeada()
    for i in range(50):
        pilha.push(Elemento(f"p{i}", i))
    assert len(pilha) == 50
    assert pilha.pop().idade == 49


def test_estatica_exibir_positions():
    pilha = PilhaEstatica()
    pilha.push(ALICE)
    pilha.push(BOB)
    assert pilha.exibir() == (
        "Estado atual da pilha (topo -> base):\n"
        "Posição 1: Nome: Bob, Idade: 30\n"
        "Posição 0: Nome: Alice, Idade: 25\n"
    )


def test_encadeada_exibir_positions():
    pilha = PilhaEncadeada()
    pilha.push(ALICE)
    pilha.push(BOB)
    assert pilha.exibir() == (
        "Estado atual da pilha (topo -> base):\n"
        "Posição 0: Nome: Bob, Idade: 30\n"
        "Posição 1: Nome: Alice, Idade: 25\n"
    )