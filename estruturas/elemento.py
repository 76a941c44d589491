"""The record stored in the stacks, queues and linked lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Elemento:
    """A person's name and age."""

    nome: str
    idade: int

    def descrever(self) -> str:
        """Return the element as ``Nome: <nome>, Idade: <idade>``."""
        return f"Nome: {self.nome}, Idade: {self.idade}"