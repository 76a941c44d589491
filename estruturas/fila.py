"""Queues: a fixed-capacity circular queue and a linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from estruturas.elemento import Elemento

MAX_FILA = 5


class FilaCheiaError(Exception):
    """Raised when enqueuing into a full queue."""


class FilaVaziaError(Exception):
    """Raised when dequeuing from an empty queue."""


def _descrever_fila(posicoes: Iterator[tuple[int, Elemento]]) -> str:
    linhas = [f"Posição {pos}: {e.descrever()}" for pos, e in posicoes]
    if not linhas:
        return "Fila vazia.\n"
    return "\n".join(["Estado atual da fila (inicio -> fim):", *linhas]) + "\n"


class FilaCircular:
    """A queue stored in a fixed-size array used as a ring."""

    def __init__(self, capacidade: int = MAX_FILA) -> None:
        if capacidade < 0:
            raise ValueError(f"capacidade inválida: {capacidade}")
        self.capacidade = capacidade
        self._slots: list[Elemento | None] = [None] * capacidade
        self._inicio: int | None = None
        self._tamanho = 0

    def _fim(self) -> int | None:
        if self._inicio is None:
            return None
        return (self._inicio + self._tamanho - 1) % self.capacidade

    def enfileirar(self, elemento: Elemento) -> None:
        """Add ``elemento`` at the end of the queue."""
        if self._tamanho >= self.capacidade:
            raise FilaCheiaError(f"fila cheia ao tentar enfileirar {elemento.nome}")
        fim = self._fim()
        if fim is None:
            # An empty queue always restarts at the first slot.
            self._inicio = 0
            posicao = 0
        else:
            posicao = (fim + 1) % self.capacidade
        self._slots[posicao] = elemento
        self._tamanho += 1

    def desenfileirar(self) -> Elemento:
        """Remove and return the element at the front of the queue."""
        if self._inicio is None:
            raise FilaVaziaError("fila vazia")
        elemento = self._slots[self._inicio]
        assert elemento is not None
        self._slots[self._inicio] = None
        self._tamanho -= 1
        if self._tamanho == 0:
            self._inicio = None
        else:
            self._inicio = (self._inicio + 1) % self.capacidade
        return elemento

    def __len__(self) -> int:
        return self._tamanho

    def __iter__(self) -> Iterator[Elemento]:
        """Iterate from front to end."""
        return (elemento for _, elemento in self.posicoes())

    def posicoes(self) -> Iterator[tuple[int, Elemento]]:
        """Yield ``(array position, element)`` pairs from front to end."""
        if self._inicio is None:
            return
        for deslocamento in range(self._tamanho):
            posicao = (self._inicio + deslocamento) % self.capacidade
            elemento = self._slots[posicao]
            assert elemento is not None
            yield posicao, elemento

    def exibir(self) -> str:
        """Describe the queue from front to end, with array positions."""
        return _descrever_fila(self.posicoes())


@dataclass
class _No:
    elemento: Elemento
    prox: _No | None = None


class FilaEncadeada:
    """A queue made of linked nodes, with no capacity limit."""

    def __init__(self) -> None:
        self._inicio: _No | None = None
        self._fim: _No | None = None
        self._tamanho = 0

    def enfileirar(self, elemento: Elemento) -> None:
        """Add ``elemento`` at the end of the queue."""
        novo = _No(elemento)
        if self._fim is None:
            self._inicio = novo
        else:
            self._fim.prox = novo
        self._fim = novo
        self._tamanho += 1

    def desenfileirar(self) -> Elemento:
        """Remove and return the element at the front of the queue."""
        if self._inicio is None:
            raise FilaVaziaError("fila vazia")
        no = self._inicio
        self._inicio = no.prox
        if self._inicio is None:
            self._fim = None
        self._tamanho -= 1
        return no.elemento

    def __len__(self) -> int:
        return self._tamanho

    def __iter__(self) -> Iterator[Elemento]:
        """Iterate from front to end."""
        atual = self._inicio
        while atual is not None:
            yield atual.elemento
            atual = atual.prox

    def exibir(self) -> str:
        """Describe the queue from front (position 0) to end."""
        return _descrever_fila(enumerate(self))