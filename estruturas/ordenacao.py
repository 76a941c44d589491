"""Distribution (radix) sort on non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def obter_digito(numero: int, pos: int) -> int:
    """Return the decimal digit of ``numero`` at position ``pos`` (0 = units).

    Negative numbers yield negative digits, as with truncating division.
    """
    if pos < 0:
        raise ValueError(f"posição inválida: {pos}")
    digito = (abs(numero) // 10**pos) % 10
    return -digito if numero < 0 else digito


def ordenacao_por_distribuicao(valores: Iterable[int]) -> list[int]:
    """Return the values sorted ascending using LSD radix sort, base 10."""
    entrada = list(valores)
    if not entrada:
        return []
    if any(v < 0 for v in entrada):
        raise ValueError("a ordenação por distribuição exige valores não negativos")

    maior = max(entrada)
    exp = 1
    while maior // exp > 0:
        filas: list[list[int]] = [[] for _ in range(10)]
        for valor in entrada:
            filas[(valor // exp) % 10].append(valor)
        entrada = [valor for fila in filas for valor in fila]
        exp *= 10
    return entrada