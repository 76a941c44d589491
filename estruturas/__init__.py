"""Estruturas de dados clássicas: listas, pilhas, filas, busca, ordenação e cadastros."""

__version__ = "0.1.0"