"""Sequential storage: fixed-capacity lists, sequential and binary search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

CAPACIDADE_PADRAO = 10


class ListaCheiaError(Exception):
    """Raised when inserting into a list that is already at capacity."""


class ListaVaziaError(Exception):
    """Raised when removing from an empty list."""


class ChaveDuplicadaError(Exception):
    """Raised when inserting a key that is already present."""


def vetor_multiplos(tamanho: int) -> list[int]:
    """Return a vector of ``tamanho`` positions where position i holds i * 10."""
    if tamanho < 0:
        raise ValueError(f"tamanho inválido: {tamanho}")
    return [i * 10 for i in range(tamanho)]


def busca_sequencial(chaves: Iterable[int], chave: int) -> int | None:
    """Return the first position of ``chave`` in ``chaves``, or None."""
    for posicao, atual in enumerate(chaves):
        if atual == chave:
            return posicao
    return None


def busca_binaria(lista: Sequence[int], elemento: int) -> int | None:
    """Binary search in a sorted sequence; return the position found or None."""
    inicio, fim = 0, len(lista) - 1
    while inicio <= fim:
        meio = (inicio + fim) // 2
        if lista[meio] == elemento:
            return meio
        if elemento < lista[meio]:
            fim = meio - 1
        else:
            inicio = meio + 1
    return None


class ListaSequencial:
    """A list of unique keys with a fixed capacity."""

    def __init__(self, chaves: Iterable[int] = (), capacidade: int = CAPACIDADE_PADRAO) -> None:
        if capacidade < 0:
            raise ValueError(f"capacidade inválida: {capacidade}")
        self.capacidade = capacidade
        self._chaves: list[int] = []
        for chave in chaves:
            self.inserir(chave)

    def buscar(self, chave: int) -> int | None:
        """Return the position of ``chave``, or None if absent."""
        return busca_sequencial(self._chaves, chave)

    def inserir(self, chave: int) -> None:
        """Append ``chave`` at the end of the list."""
        if self.buscar(chave) is not None:
            raise ChaveDuplicadaError(f"chave {chave} já existe na lista")
        if len(self._chaves) >= self.capacidade:
            raise ListaCheiaError(f"lista cheia, não foi possível inserir {chave}")
        self._chaves.append(chave)

    def remover(self, chave: int) -> None:
        """Remove ``chave``, shifting the following keys one position left."""
        if not self._chaves:
            raise ListaVaziaError("lista vazia")
        posicao = self.buscar(chave)
        if posicao is None:
            raise KeyError(chave)
        del self._chaves[posicao]

    def __len__(self) -> int:
        return len(self._chaves)

    def __iter__(self) -> Iterator[int]:
        return iter(self._chaves)

    def __repr__(self) -> str:
        return f"ListaSequencial({self._chaves!r}, capacidade={self.capacidade})"