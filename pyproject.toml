[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Estruturas de dados clássicas: listas sequenciais e encadeadas, pilhas, filas, busca, ordenação e cadastros simples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "estruturas de dados",
    "pilha",
    "fila",
    "lista encadeada",
    "busca binária",
    "radix sort",
    "ensino",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estruturas-cadastro = "estruturas.cadastro:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
