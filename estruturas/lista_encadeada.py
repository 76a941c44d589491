"""Linked nodes and a key-ordered singly linked list with a head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from estruturas.elemento import Elemento
from estruturas.sequencial import ChaveDuplicadaError


@dataclass
class No:
    """A node of a singly linked list."""

    chave: int
    elemento: Any = None
    prox: No | None = field(default=None, repr=False, compare=False)


@dataclass
class NoDuplo:
    """A node of a doubly linked list."""

    chave: int
    elemento: Any = None
    prox: NoDuplo | None = field(default=None, repr=False, compare=False)
    ant: NoDuplo | None = field(default=None, repr=False, compare=False)


def percorrer(inicio: No | NoDuplo | None) -> Iterator[No | NoDuplo]:
    """Yield nodes following ``prox`` links from ``inicio``."""
    atual = inicio
    while atual is not None:
        yield atual
        atual = atual.prox


def percorrer_reverso(fim: NoDuplo | None) -> Iterator[NoDuplo]:
    """Yield nodes following ``ant`` links from ``fim``."""
    atual = fim
    while atual is not None:
        yield atual
        atual = atual.ant


def encadear_duplo(nos: Iterable[NoDuplo]) -> tuple[NoDuplo | None, NoDuplo | None]:
    """Link the nodes in order both ways; return the first and last node."""
    inicio: NoDuplo | None = None
    anterior: NoDuplo | None = None
    for no in nos:
        no.ant = anterior
        no.prox = None
        if anterior is None:
            inicio = no
        else:
            anterior.prox = no
        anterior = no
    return inicio, anterior


class ListaOrdenada:
    """A singly linked list kept in ascending order of unique keys."""

    def __init__(self) -> None:
        self._cabeca = No(chave=0)
        self._tamanho = 0

    def _localizar(self, chave: int) -> tuple[No, No | None]:
        """Return the node preceding ``chave``'s place and the node with ``chave``."""
        anterior = self._cabeca
        atual = anterior.prox
        while atual is not None and atual.chave < chave:
            anterior = atual
            atual = atual.prox
        if atual is not None and atual.chave == chave:
            return anterior, atual
        return anterior, None

    def buscar(self, chave: int) -> No | None:
        """Return the node holding ``chave``, or None."""
        return self._localizar(chave)[1]

    def inserir(self, chave: int, elemento: Elemento) -> None:
        """Insert ``elemento`` under ``chave`` in its ordered place."""
        anterior, encontrado = self._localizar(chave)
        if encontrado is not None:
            raise ChaveDuplicadaError(f"chave {chave} já existe na lista")
        anterior.prox = No(chave, elemento, anterior.prox)
        self._tamanho += 1

    def remover(self, chave: int) -> None:
        """Remove the node holding ``chave``."""
        anterior, encontrado = self._localizar(chave)
        if encontrado is None:
            raise KeyError(chave)
        anterior.prox = encontrado.prox
        self._tamanho -= 1

    def __iter__(self) -> Iterator[tuple[int, Elemento]]:
        """Yield ``(chave, elemento)`` pairs in ascending key order."""
        for no in percorrer(self._cabeca.prox):
            yield no.chave, no.elemento

    def __len__(self) -> int:
        return self._tamanho

    def exibir(self) -> str:
        """Describe every node, one line each, in key order."""
        return "".join(
            f"Chave: {chave}, {elemento.descrever()}\n" for chave, elemento in self
        )