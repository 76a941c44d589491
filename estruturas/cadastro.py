"""Student and employee records read interactively from a text stream."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

TAMANHO_NOME_ALUNO = 200
TAMANHO_CAMPO_FICHA = 40
TAMANHO_CAMPO_FUNCIONARIO = 30
QUANTIDADE_ALUNOS = 5


def media(notas: Iterable[float]) -> float:
    """Return the arithmetic mean of ``notas``."""
    valores = list(notas)
    if not valores:
        raise ValueError("não há notas para calcular a média")
    return sum(valores) / len(valores)


@dataclass
class Data:
    """A calendar date kept as three plain integers."""

    dia: int = 0
    mes: int = 0
    ano: int = 0


@dataclass
class Aluno:
    """A student with a code, a name and a birth date."""

    codigo: int = 0
    nome: str = "NULL"
    data_nascimento: Data = field(default_factory=Data)

    def formatar(self) -> str:
        """Describe the student's code, name and birth date."""
        d = self.data_nascimento
        return (
            f"O código do aluno é: {self.codigo}\n"
            f"O nome do aluno é: {self.nome}\n"
            f"A data de nascimento do aluno é: {d.dia} / {d.mes} / {d.ano}\n"
        )


@dataclass
class FichaDeAluno:
    """A student's record card with a subject and two exam grades."""

    nome: str
    disciplina: str
    nota_prova1: float
    nota_prova2: float

    def formatar(self) -> str:
        """Describe the record card, grades with two decimals."""
        return (
            f"Nome ...........: {self.nome}\n"
            f"Disciplina .....: {self.disciplina}\n"
            f"Nota da Prova 1 ...: {self.nota_prova1:.2f}\n"
            f"Nota da Prova 2 ...: {self.nota_prova2:.2f}\n"
        )


@dataclass
class Departamento:
    """A department."""

    cod: int
    descricao: str


@dataclass
class Cargo:
    """A job position."""

    cod: int
    descricao: str


@dataclass
class Funcionario:
    """An employee with a department and a position."""

    cod: int
    nome: str
    salario: float
    depto: Departamento
    cargo: Cargo

    def formatar(self) -> str:
        """Describe the employee, the department and the position."""
        return (
            "---- Dados do Funcionario ----\n"
            f"Codigo: {self.cod}\n"
            f"Nome: {self.nome}\n"
            f"Salario: {self.salario:.2f}\n"
            "\n---- Departamento ----\n"
            f"Codigo: {self.depto.cod}\n"
            f"Descricao: {self.depto.descricao}\n"
            "\n---- Cargo ----\n"
            f"Codigo: {self.cargo.cod}\n"
            f"Descricao: {self.cargo.descricao}\n"
        )


def _ler_linha(entrada: TextIO, tamanho: int | None = None) -> str:
    """Read one line without its newline, keeping at most ``tamanho - 1`` chars."""
    linha = entrada.readline()
    if not linha:
        raise EOFError("a entrada terminou antes do esperado")
    linha = linha.rstrip("\r\n")
    if tamanho is not None:
        linha = linha[: tamanho - 1]
    return linha


def _ler_inteiro(entrada: TextIO) -> int:
    texto = _ler_linha(entrada).strip()
    try:
        return int(texto)
    except ValueError:
        raise ValueError(f"número inteiro inválido: {texto!r}") from None


def _ler_real(entrada: TextIO) -> float:
    texto = _ler_linha(entrada).strip()
    try:
        return float(texto)
    except ValueError:
        raise ValueError(f"número inválido: {texto!r}") from None


def _perguntar(saida: TextIO, texto: str) -> None:
    saida.write(texto)
    saida.flush()


def ler_aluno(entrada: TextIO, saida: TextIO) -> Aluno:
    """Prompt on ``saida`` and read a student from ``entrada``."""
    _perguntar(saida, "Digite o código do aluno: ")
    codigo = _ler_inteiro(entrada)
    _perguntar(saida, "Digite o nome do aluno: ")
    nome = _ler_linha(entrada, TAMANHO_NOME_ALUNO)
    _perguntar(saida, "Digite o dia do nascimento do aluno: ")
    dia = _ler_inteiro(entrada)
    _perguntar(saida, "Digite o mês do nascimento do aluno: ")
    mes = _ler_inteiro(entrada)
    _perguntar(saida, "Digite o ano do nascimento do aluno: ")
    ano = _ler_inteiro(entrada)
    return Aluno(codigo, nome, Data(dia, mes, ano))


def ler_ficha(entrada: TextIO, saida: TextIO) -> FichaDeAluno:
    """Prompt on ``saida`` and read a student's record card from ``entrada``."""
    _perguntar(saida, "\n---------- Cadastro de aluno -----------\n\n")
    _perguntar(saida, "Nome do aluno ......: ")
    nome = _ler_linha(entrada, TAMANHO_CAMPO_FICHA)
    _perguntar(saida, "Disciplina ......: ")
    disciplina = _ler_linha(entrada, TAMANHO_CAMPO_FICHA)
    _perguntar(saida, "Informe a 1a. nota ..: ")
    nota1 = _ler_real(entrada)
    _perguntar(saida, "Informe a 2a. nota ..: ")
    nota2 = _ler_real(entrada)
    return FichaDeAluno(nome, disciplina, nota1, nota2)


def ler_funcionario(entrada: TextIO, saida: TextIO) -> Funcionario:
    """Prompt on ``saida`` and read an employee from ``entrada``."""
    _perguntar(saida, "---- Cadastro de Funcionario ----\n\n")
    _perguntar(saida, "Codigo do funcionario: ")
    cod = _ler_inteiro(entrada)
    _perguntar(saida, "Nome do funcionario: ")
    nome = _ler_linha(entrada, TAMANHO_CAMPO_FUNCIONARIO)
    _perguntar(saida, "Salario do funcionario: ")
    salario = _ler_real(entrada)
    _perguntar(saida, "Codigo do departamento: ")
    cod_depto = _ler_inteiro(entrada)
    _perguntar(saida, "Descricao do departamento: ")
    desc_depto = _ler_linha(entrada, TAMANHO_CAMPO_FUNCIONARIO)
    _perguntar(saida, "Codigo do cargo: ")
    cod_cargo = _ler_inteiro(entrada)
    _perguntar(saida, "Descricao do cargo: ")
    desc_cargo = _ler_linha(entrada, TAMANHO_CAMPO_FUNCIONARIO)
    return Funcionario(
        cod, nome, salario, Departamento(cod_depto, desc_depto), Cargo(cod_cargo, desc_cargo)
    )


def _resumo(numero: int, aluno: Aluno) -> str:
    d = aluno.data_nascimento
    return (
        f"\nAluno {numero}:\n"
        f"Código: {aluno.codigo}\n"
        f"Nome: {aluno.nome}\n"
        f"Data de Nascimento: {d.dia}/{d.mes}/{d.ano}\n"
    )


def _aguardar_enter(entrada: TextIO, saida: TextIO) -> None:
    _perguntar(saida, "\nPressione ENTER para sair...")
    entrada.readline()


def _programa_aluno(entrada: TextIO, saida: TextIO) -> None:
    saida.write("\n" + Aluno().formatar() + "\n")
    aluno = ler_aluno(entrada, saida)
    saida.write("\n" + aluno.formatar())
    _aguardar_enter(entrada, saida)


def _programa_alunos(entrada: TextIO, saida: TextIO) -> None:
    alunos = [Aluno() for _ in range(QUANTIDADE_ALUNOS)]
    saida.write("\n================== Dados Iniciais ==================\n")
    saida.writelines(_resumo(n, a) for n, a in enumerate(alunos, start=1))
    for numero in range(1, QUANTIDADE_ALUNOS + 1):
        saida.write("\n=====================================================")
        saida.write(f"\nCadastro do aluno {numero}\n")
        alunos[numero - 1] = ler_aluno(entrada, saida)
    saida.write("\n================== Dados Finais ==================\n")
    saida.writelines(_resumo(n, a) for n, a in enumerate(alunos, start=1))
    _aguardar_enter(entrada, saida)


def _programa_ficha(entrada: TextIO, saida: TextIO) -> None:
    ficha = ler_ficha(entrada, saida)
    saida.write("\n\n --------- Lendo os dados da struct ---------\n\n")
    saida.write(ficha.formatar())


def _programa_funcionario(entrada: TextIO, saida: TextIO) -> None:
    funcionario = ler_funcionario(entrada, saida)
    saida.write("\n" + funcionario.formatar())


def _programa_exemplo(entrada: TextIO, saida: TextIO) -> None:
    matricula = 120
    notas = (8.5, 7.2, 5.4)
    saida.write(f"Matricula: {matricula}\n")
    saida.write(f"Media: {media(notas):.2f}\n")


_PROGRAMAS = {
    "aluno": _programa_aluno,
    "alunos": _programa_alunos,
    "ficha": _programa_ficha,
    "funcionario": _programa_funcionario,
    "exemplo": _programa_exemplo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the registration programs on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cadastro", description="Cadastro de alunos e funcionários."
    )
    parser.add_argument("programa", choices=sorted(_PROGRAMAS))
    args = parser.parse_args(argv)
    try:
        _PROGRAMAS[args.programa](sys.stdin, sys.stdout)
    except (EOFError, ValueError) as erro:
        print(f"Erro: {erro}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())