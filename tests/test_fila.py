import pytest

from estruturas.elemento import Elemento
from estruturas.fila import (
    FilaCheiaError,
    FilaCircular,
    FilaEncadeada,
    FilaVaziaError,
)

ALICE = Elemento("Alice", 25)
BOB = Elemento("Bob", 30)
CAROL = Elemento("Carol", 28)
DAVID = Elemento("David", 35)
EVE = Elemento("Eve", 22)
FRANK = Elemento("Frank", 40)

CINCO = [ALICE, BOB, CAROL, DAVID, EVE]


@pytest.fixture(params=[FilaCircular, FilaEncadeada])
def fila(request):
    return request.param()


def test_fifo_order(fila):
    for e in (ALICE, BOB, CAROL):
        fila.enfileirar(e)
    assert [fila.desenfileirar() for _ in range(3)] == [ALICE, BOB, CAROL]
    assert len(fila) == 0


def test_dequeue_empty_raises(fila):
    fila.enfileirar(ALICE)
    assert fila.desenfileirar() == ALICE
    with pytest.raises(FilaVaziaError):
        fila.desenfileirar()


def test_empty_display():
    assert FilaCircular().exibir() == "Fila vazia.\n"
    assert FilaEncadeada().exibir() == "Fila vazia.\n"


def test_iteration_front_to_end(fila):
    for e in (ALICE, BOB, CAROL):
        fila.enfileirar(e)
    assert list(fila) == [ALICE, BOB, CAROL]
    assert len(fila) == 3


def test_display_after_enqueue(fila):
    for e in (ALICE, BOB, CAROL):
        fila.enfileirar(e)
    assert fila.exibir() == (
        "Estado atual da fila (inicio -> fim):\n"
        "Posição 0: Nome: Alice, Idade: 25\n"
        "Posição 1: Nome: Bob, Idade: 30\n"
        "Posição 2: Nome: Carol, Idade: 28\n"
    )


def test_circular_full_raises():
    fila = FilaCircular()
    for e in CINCO:
        fila.enfileirar(e)
    with pytest.raises(FilaCheiaError):
        fila.enfileirar(FRANK)
    assert list(fila) == CINCO


def test_circular_wraps_around():
    fila = FilaCircular()
    for e in CINCO:
        fila.enfileirar(e)
    assert fila.desenfileirar() == ALICE
    assert fila.desenfileirar() == BOB
    fila.enfileirar(FRANK)
    fila.enfileirar(ALICE)
    assert [pos for pos, _ in fila.posicoes()] == [2, 3, 4, 0, 1]
    assert list(fila) == [CAROL, DAVID, EVE, FRANK, ALICE]
    with pytest.raises(FilaCheiaError):
        fila.enfileirar(BOB)


def test_circular_restarts_at_zero_after_emptying():
    fila = FilaCircular()
    fila.enfileirar(ALICE)
    fila.enfileirar(BOB)
    fila.desenfileirar()
    fila.desenfileirar()
    fila.enfileirar(CAROL)
    assert list(fila.posicoes()) == [(0, CAROL)]


def test_circular_custom_capacity():
    fila = FilaCircular(2)
    fila.enfileirar(ALICE)
    fila.enfileirar(BOB)
    with pytest.raises(FilaCheiaError):
        fila.enfileirar(CAROL)
    assert len(fila) == fila.capacidade


def test_circular_negative_capacity():
    with pytest.raises(ValueError):
        FilaCircular(-1)


def test_linked_has_no_limit():
    fila = FilaEncadeada()
    elementos = [Elemento(f"p{i}", i) for i in range(50)]
    for e in elementos:
        fila.enfileirar(e)
    assert list(fila) == elementos
    assert len(fila) == len(elementos)


def test_linked_reusable_after_emptying():
    fila = FilaEncadeada()
    fila.enfileirar(ALICE)
    fila.desenfileirar()
    fila.enfileirar(BOB)
    fila.enfileirar(CAROL)
    assert list(fila) == [BOB, CAROL]