"""Stacks: a fixed-capacity array stack and a linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from estruturas.elemento import Elemento

MAX_PILHA = 5


class PilhaCheiaError(Exception):
    """Raised when pushing onto a full stack."""


class PilhaVaziaError(Exception):
    """Raised when popping from an empty stack."""


class PilhaEstatica:
    """A stack stored in a fixed-size array."""

    def __init__(self, capacidade: int = MAX_PILHA) -> None:
        if capacidade < 0:
            raise ValueError(f"capacidade inválida: {capacidade}")
        self.capacidade = capacidade
        self._itens: list[Elemento] = []

    def push(self, elemento: Elemento) -> None:
        """Push ``elemento`` on top of the stack."""
        if len(self._itens) >= self.capacidade:
            raise PilhaCheiaError(f"pilha cheia ao tentar empilhar {elemento.nome}")
        self._itens.append(elemento)

    def pop(self) -> Elemento:
        """Remove and return the top element."""
        if not self._itens:
            raise PilhaVaziaError("pilha vazia")
        return self._itens.pop()

    def __len__(self) -> int:
        return len(self._itens)

    def __iter__(self) -> Iterator[Elemento]:
        """Iterate from top to base."""
        return reversed(self._itens)

    def exibir(self) -> str:
        """Describe the stack from top to base, with array positions."""
        if not self._itens:
            return "Pilha vazia.\n"
        linhas = ["Estado atual da pilha (topo -> base):"]
        linhas.extend(
            f"Posição {i}: {e.descrever()}"
            for i, e in reversed(list(enumerate(self._itens)))
        )
        return "\n".join(linhas) + "\n"


@dataclass
class _No:
    elemento: Elemento
    prox: _No | None


class PilhaEncadeada:
    """A stack made of linked nodes, with no capacity limit."""

    def __init__(self) -> None:
        self._topo: _No | None = None
        self._tamanho = 0

    def push(self, elemento: Elemento) -> None:
        """Push ``elemento`` on top of the stack."""
        self._topo = _No(elemento, self._topo)
        self._tamanho += 1

    def pop(self) -> Elemento:
        """Remove and return the top element."""
        if self._topo is None:
            raise PilhaVaziaError("pilha vazia")
        no = self._topo
        self._topo = no.prox
        self._tamanho -= 1
        return no.elemento

    def __len__(self) -> int:
        return self._tamanho

    def __iter__(self) -> Iterator[Elemento]:
        """Iterate from top to base."""
        atual = self._topo
        while atual is not None:
            yield atual.elemento
            atual = atual.prox

    def exibir(self) -> str:
        """Describe the stack from top (position 0) to base."""
        if self._topo is None:
            return "Pilha vazia.\n"
        linhas = ["Estado atual da pilha (topo -> base):"]
        linhas.extend(f"Posição {pos}: {e.descrever()}" for pos, e in enumerate(self))
        return "\n".join(linhas) + "\n"