"""Reading and writing the property database text file."""

from __future__ import annotations

import os
from typing import Iterable, Union

from .models import Property, format_line, parse_line

MAX_PROPERTIES = 200
END_MARKER = "fim"
DEFAULT_FILENAME = "BD_Imoveis2.txt"
HEADER = (
    "Tipo Finalidade Endereco Bairro Cidade Area Valor IPTU Quartos Suites "
    "Banheiros Vagas Cozinha Sala Varanda Area_Servico Piso Conservacao "
    "Armarios Ar_Condicionado Aquecedor Ventilador"
)

PathLike = Union[str, "os.PathLike[str]"]


def load_properties(path: PathLike) -> list[Property]:
    """Read properties from ``path`` in file order.

    The first line is a header and is skipped. Reading stops at a line whose
    first field is ``fim``, at the end of the file, or after
    ``MAX_PROPERTIES`` records. Blank lines are skipped. Raises ``OSError``
    when the file cannot be opened and ``RecordError`` on a malformed line.
    """
    properties: list[Property] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            if len(properties) >= MAX_PROPERTIES:
                break
            tokens = line.split()
            if not tokens:
                continue
            if tokens[0] == END_MARKER:
                break
            properties.append(parse_line(line))
    return properties


def save_properties(properties: Iterable[Property], path: PathLike) -> None:
    """Write a header, one line per property and the end marker to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(HEADER + "\n")
        for prop in properties:
            handle.write(format_line(prop) + "\n")
        handle.write(END_MARKER + "\n")