# estruturas

Estruturas de dados clássicas em Python para estudo: listas sequenciais com
capacidade fixa, lista encadeada ordenada, nós simples e duplos, pilhas e filas
(estáticas e encadeadas), busca sequencial e binária, ordenação por
distribuição (radix sort) e pequenos cadastros de alunos e funcionários.

Não há dependências além da biblioteca padrão.

## Instalação

```
pip install .
```

Para rodar os testes:

```
pip install ".[test]"
pytest
```

## Módulos

| Módulo | Conteúdo |
| --- | --- |
| `estruturas.elemento` | `Elemento` (nome e idade), guardado nas pilhas, filas e listas |
| `estruturas.sequencial` | `vetor_multiplos`, `busca_sequencial`, `busca_binaria`, `ListaSequencial` |
| `estruturas.ordenacao` | `obter_digito`, `ordenacao_por_distribuicao` |
| `estruturas.pilha` | `PilhaEstatica`, `PilhaEncadeada` |
| `estruturas.fila` | `FilaCircular`, `FilaEncadeada` |
| `estruturas.lista_encadeada` | `No`, `NoDuplo`, `percorrer`, `percorrer_reverso`, `encadear_duplo`, `ListaOrdenada` |
| `estruturas.cadastro` | `Aluno`, `Data`, `FichaDeAluno`, `Funcionario`, `Departamento`, `Cargo`, `media`, leitores interativos e o comando `estruturas-cadastro` |

## Uso

### Busca e listas sequenciais

```python
from estruturas.sequencial import ListaSequencial, busca_binaria, vetor_multiplos

busca_binaria([10, 20, 30, 40, 50, 60, 70], 40)   # 3
busca_binaria([10, 20, 30], 25)                   # None
vetor_multiplos(4)                                # [0, 10, 20, 30]

lista = ListaSequencial([10, 20, 30], capacidade=10)
lista.inserir(40)
lista.remover(30)
list(lista)                                       # [10, 20, 40]
lista.buscar(40)                                  # 2
```

Inserir uma chave repetida levanta `ChaveDuplicadaError`; inserir numa lista
cheia levanta `ListaCheiaError`; remover de uma lista vazia levanta
`ListaVaziaError`; remover uma chave ausente levanta `KeyError`.

### Ordenação por distribuição

```python
from estruturas.ordenacao import obter_digito, ordenacao_por_distribuicao

ordenacao_por_distribuicao([170, 45, 75, 90, 802, 24, 2, 66])
# [2, 24, 45, 66, 75, 90, 170, 802]
obter_digito(802, 2)   # 8
```

A ordenação aceita só valores não negativos; com um valor negativo levanta
`ValueError`.

### Pilhas e filas

```python
from estruturas.elemento import Elemento
from estruturas.pilha import PilhaEstatica
from estruturas.fila import FilaCircular

pilha = PilhaEstatica(capacidade=5)
pilha.push(Elemento("Alice", 25))
pilha.pop()           # Elemento(nome='Alice', idade=25)

fila = FilaCircular(capacidade=5)
fila.enfileirar(Elemento("Bob", 30))
print(fila.exibir())
# Estado atual da fila (inicio -> fim):
# Posição 0: Nome: Bob, Idade: 30
```

`PilhaEncadeada` e `FilaEncadeada` têm a mesma interface, sem limite de
capacidade. Estruturas cheias levantam `PilhaCheiaError` / `FilaCheiaError`;
vazias levantam `PilhaVaziaError` / `FilaVaziaError`. A iteração de uma pilha
vai do topo à base; a de uma fila, do início ao fim. `FilaCircular.posicoes()`
devolve também a posição de cada elemento no vetor circular.

### Lista encadeada ordenada e nós

```python
from estruturas.elemento import Elemento
from estruturas.lista_encadeada import ListaOrdenada, NoDuplo, encadear_duplo, percorrer_reverso

lista = ListaOrdenada()
lista.inserir(20, Elemento("Bob", 30))
lista.inserir(10, Elemento("Alice", 25))
lista.remover(20)
print(lista.exibir())
# Chave: 10, Nome: Alice, Idade: 25

inicio, fim = encadear_duplo([NoDuplo(10), NoDuplo(20)])
[no.chave for no in percorrer_reverso(fim)]   # [20, 10]
```

Inserir uma chave já presente levanta `ChaveDuplicadaError`; remover uma chave
ausente levanta `KeyError`.

## Cadastro interativo

O comando `estruturas-cadastro` recebe o nome do programa a executar, pergunta
os dados pela saída padrão e os lê da entrada padrão, um campo por linha:

```
estruturas-cadastro aluno        # um aluno com código, nome e data de nascimento
estruturas-cadastro alunos       # cinco alunos, mostrados antes e depois
estruturas-cadastro ficha        # nome, disciplina e duas notas
estruturas-cadastro funcionario  # funcionário com departamento e cargo
estruturas-cadastro exemplo      # matrícula fixa e média de três notas
```

Entrada que termina antes da hora ou número inválido encerram com uma mensagem
em `stderr` e código de saída 1.

As mesmas leituras estão disponíveis como funções: `ler_aluno`, `ler_ficha` e
`ler_funcionario` recebem um fluxo de entrada e um de saída e devolvem o
registro lido.

## O que o pacote não faz

Os cadastros só existem enquanto o programa roda: nada é gravado em arquivo ou
banco de dados, e não há consulta nem edição de registros já lidos. As
estruturas de dados vivem apenas em memória.