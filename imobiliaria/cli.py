"""Interactive menu for managing the property database."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterable, Optional, Sequence, TextIO

from . import search
from .catalog import Catalog, CapacityError
from .database import DEFAULT_FILENAME, load_properties, save_properties
from .models import Property, RecordError
from .statistics import compute_statistics

CLEAR_SCREEN = "\033[H\033[J"
YES_ANSWERS = frozenset({"sim", "Sim", "s", "S"})
NO_ANSWERS = frozenset({"nao", "Nao", "n", "N"})
NOT_FOUND = "Nenhum imóvel encontrado para os critérios especificados."

MENU = (
    "--- Menu Principal --- Gestão de Imóveis ---\n"
    "1. Visualizar Lista de Imóveis\n"
    "2. Inclusão de um novo imóvel\n"
    "3. Busca de imóveis por faixa de valores\n"
    "4. Busca de imóveis por características\n"
    "5. Relatório estatístico\n"
    "6. Sair do Programa\n"
)
SUBMENU = (
    "--- Busca por Características ---\n"
    "1. Buscar por Comodidades (Armários, Ar, etc.)\n"
    "2. Buscar por Número de Quartos e Suítes\n"
    "3. Voltar ao menu principal\n"
)
EXIT_OPTION = 6


class Console:
    """Whitespace-token input and text output over a pair of streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        """Write ``text`` as is."""
        self._out.write(text)
        self._out.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next whitespace-separated word."""
        self.write(prompt)
        return self._next_token()

    def ask_bool(self, prompt: str) -> bool:
        """Ask a yes/no question until the answer is recognised."""
        while True:
            answer = self.ask(f"{prompt} (sim/nao): ")
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.write("Resposta inválida. Por favor, digite 'sim' ou 'nao'.\n")

    def ask_int(self, prompt: str) -> int:
        """Ask until an integer is given."""
        while True:
            answer = self.ask(prompt)
            try:
                return int(answer)
            except ValueError:
                self.write("Entrada inválida. Digite um número inteiro.\n")

    def ask_float(self, prompt: str) -> float:
        """Ask until a number is given."""
        while True:
            answer = self.ask(prompt)
            try:
                return float(answer)
            except ValueError:
                self.write("Entrada inválida. Digite um número.\n")

    def pause(self) -> None:
        """Discard the rest of the current line and wait for Enter."""
        self.write("\nPressione Enter para continuar...")
        self._pending.clear()
        self._in.readline()

    def clear(self) -> None:
        """Clear the terminal screen."""
        self.write(CLEAR_SCREEN)


def _report_matches(console: Console, matches: Sequence[tuple[int, Property]],
                    lines: Iterable[str], none_message: str) -> None:
    for line in lines:
        console.write(line + "\n")
    if matches:
        console.write(f"\nTotal de {len(matches)} imóvel(is) encontrado(s).\n")
    else:
        console.write(none_message + "\n")
    console.pause()


def _start(console: Console, catalog: Catalog, title: str, empty_message: str) -> bool:
    """Clear the screen, show ``title`` and tell whether there is anything to work on."""
    console.clear()
    console.write(f"--- {title} ---\n")
    if len(catalog) == 0:
        console.write(empty_message + "\n")
        console.pause()
        return False
    return True


def list_properties(console: Console, catalog: Catalog) -> None:
    """Show every property with all its details."""
    if not _start(console, catalog, "Lista de Todos os Imóveis Disponíveis",
                  "Nenhum imóvel cadastrado."):
        return
    for number, p in enumerate(catalog, start=1):
        console.write(
            f"\nImóvel {number}:\n"
            f"  Tipo: {p.kind}, Finalidade: {p.purpose}\n"
            f"  Endereço: {p.address}, Bairro: {p.neighborhood}, Cidade: {p.city}\n"
            f"  Área: {p.area:.2f} m2, Valor: R${p.value:.2f}, IPTU: R${p.iptu:.2f}\n"
            f"  Quartos: {p.bedrooms}, Suítes: {p.suites}, Banheiros: {p.bathrooms}, "
            f"Vagas: {p.parking_spaces}\n"
            f"  Cozinha: {p.kitchen}, Sala: {p.living_room}, Varanda: {p.balcony}, "
            f"Área Serv.: {p.service_area}\n"
            f"  Piso: {p.floor}, Conservação: {p.condition}\n"
            f"  Comodidades: {' '.join(p.amenity_labels())}\n"
        )
    console.write(f"\nTotal de {len(catalog)} imóvel(is) listado(s).\n")
    console.pause()


def add_property(console: Console, catalog: Catalog) -> None:
    """Ask for every field of a new property and add it to the catalog."""
    console.clear()
    console.write("--- Inclusão de Novo Imóvel ---\n")
    if catalog.is_full():
        console.write(
            f"Erro: Capacidade máxima de imóveis atingida ({catalog.capacity}).\n"
        )
        console.pause()
        return
    prop = Property(
        kind=console.ask("Tipo (casa, apartamento, sala_comercial, etc.): "),
        purpose=console.ask("Finalidade (venda, locacao, temporada): "),
        address=console.ask("Endereço (rua_nome_numero, sem espaços): "),
        neighborhood=console.ask("Bairro: "),
        city=console.ask("Cidade: "),
        area=console.ask_float("Área (m2): "),
        value=console.ask_float("Valor (R$): "),
        iptu=console.ask_float("IPTU (R$): "),
        bedrooms=console.ask_int("Quartos: "),
        suites=console.ask_int("Suítes: "),
        bathrooms=console.ask_int("Banheiros: "),
        parking_spaces=console.ask_int("Vagas de garagem: "),
        kitchen=console.ask("Cozinha (padrao, americana, etc.): "),
        living_room=console.ask("Sala (estar, jantar, tv, etc.): "),
        balcony=console.ask("Varanda (simples, gourmet, etc.): "),
        service_area=console.ask("Área de serviço (sim, nao): "),
        floor=console.ask("Piso (ceramica, porcelanato, madeira, etc.): "),
        condition=console.ask("Conservação (novo, bom, regular, reformar): "),
        wardrobes=console.ask_bool("Armários embutidos?"),
        air_conditioning=console.ask_bool("Ar-condicionado?"),
        heater=console.ask_bool("Aquecedor?"),
        fan=console.ask_bool("Ventilador de teto?"),
    )
    try:
        catalog.add(prop)
    except CapacityError as error:
        console.write(f"\nErro: {error}.\n")
    else:
        console.write("\nImóvel adicionado com sucesso!\n")
    console.pause()


def search_by_value(console: Console, catalog: Catalog) -> None:
    """List properties of one purpose whose value lies in a range."""
    if not _start(console, catalog, "Busca de Imóveis por Faixa de Valor",
                  "Nenhum imóvel cadastrado."):
        return
    purpose = console.ask("Digite a finalidade (venda, locacao, temporada): ")
    minimum = console.ask_float("Digite o valor mínimo (R$): ")
    maximum = console.ask_float("Digite o valor máximo (R$): ")
    console.write("\nImóveis encontrados:\n")
    matches = search.by_value_range(catalog, purpose, minimum, maximum)
    lines = (
        f"{i + 1}. Tipo: {p.kind}, Endereço: {p.address}, Bairro: {p.neighborhood}, "
        f"Valor: R${p.value:.2f}, Área: {p.area:.2f} m2"
        for i, p in matches
    )
    _report_matches(console, matches, lines, NOT_FOUND)


def search_by_amenities(console: Console, catalog: Catalog) -> None:
    """List properties that have every amenity the user requires."""
    if not _start(console, catalog, "Busca de Imóveis por Comodidades",
                  "Nenhum imóvel cadastrado."):
        return
    matches = search.by_amenities(
        catalog,
        wardrobes=console.ask_bool("Exigir armários embutidos?"),
        air_conditioning=console.ask_bool("Exigir ar-condicionado?"),
        heater=console.ask_bool("Exigir aquecedor?"),
        fan=console.ask_bool("Exigir ventilador de teto?"),
    )
    console.write("\nImóveis encontrados com as comodidades especificadas:\n")
    lines = (
        f"{i + 1}. Tipo: {p.kind}, Endereço: {p.address}, Bairro: {p.neighborhood}, "
        f"Valor: R${p.value:.2f}"
        for i, p in matches
    )
    _report_matches(
        console, matches, lines,
        "Nenhum imóvel encontrado com todas as comodidades especificadas.",
    )


def search_by_rooms(console: Console, catalog: Catalog) -> None:
    """List properties with at least the given bedrooms and suites."""
    if not _start(console, catalog, "Busca de Imóveis por Número de Quartos e Suítes",
                  "Nenhum imóvel cadastrado."):
        return
    min_bedrooms = console.ask_int("Número mínimo de quartos desejado: ")
    min_suites = console.ask_int("Número mínimo de suítes desejado: ")
    console.write("\nImóveis encontrados:\n")
    matches = search.by_rooms(catalog, min_bedrooms, min_suites)
    lines = (
        f"{i + 1}. Tipo: {p.kind}, Endereço: {p.address}, Quartos: {p.bedrooms}, "
        f"Suítes: {p.suites}, Valor: R${p.value:.2f}"
        for i, p in matches
    )
    _report_matches(console, matches, lines, NOT_FOUND)


def search_and_delete(console: Console, catalog: Catalog) -> None:
    """Find a property by address and delete it after confirmation."""
    if not _start(console, catalog, "Busca e Exclusão de Imóvel por Endereço",
                  "Nenhum imóvel cadastrado para buscar ou excluir."):
        return
    address = console.ask("Digite o endereço (rua_nome_numero) do imóvel a ser buscado: ")
    index = catalog.find_by_address(address)
    if index is None:
        console.write(f"Nenhum imóvel encontrado com o endereço '{address}'.\n")
        console.pause()
        return
    p = catalog[index]
    console.write(
        "\nImóvel encontrado:\n"
        f"Tipo: {p.kind}, Finalidade: {p.purpose}, Endereço: {p.address}, "
        f"Valor: R${p.value:g}\n"
    )
    answer = console.ask("\nDeseja excluir este imóvel? (s/n): ")
    if answer[:1] in ("s", "S"):
        catalog.remove(index)
        console.write("Imóvel excluído com sucesso!\n")
    else:
        console.write("Exclusão cancelada.\n")
    console.pause()


def show_report(console: Console, catalog: Catalog) -> None:
    """Show the statistical report."""
    if not _start(console, catalog, "Relatório Estatístico",
                  "Nenhum imóvel cadastrado para gerar estatísticas."):
        return
    stats = compute_statistics(catalog)
    console.write("\nPercentual de Imóveis por Finalidade:\n")
    for label, purpose in (("Venda", "venda"), ("Locação", "locacao"),
                           ("Temporada", "temporada")):
        share = stats.purpose_percentage(purpose) or 0.0
        console.write(f"  {label}: {share:.2f}% ({stats.purposes[purpose]})\n")

    console.write("\nPercentual de Casas com Suítes:\n")
    share = stats.houses_with_suites_percentage()
    if share is None:
        console.write("  Nenhuma casa cadastrada.\n")
    else:
        console.write(
            f"  {share:.2f}% de casas possuem suítes "
            f"({stats.houses_with_suites} de {stats.houses} casas).\n"
        )

    console.write("\nPercentual de Salas Comerciais com Piso Cerâmico:\n")
    share = stats.ceramic_offices_percentage()
    if share is None:
        console.write("  Nenhuma sala comercial cadastrada.\n")
    else:
        console.write(
            f"  {share:.2f}% de salas comerciais possuem piso cerâmico "
            f"({stats.ceramic_offices} de {stats.offices} salas).\n"
        )
    console.pause()


def _parse_choice(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def _menu_choice(console: Console) -> int:
    console.clear()
    console.write(MENU)
    choice = _parse_choice(console.ask("Escolha uma opção: "))
    while choice is None or not 1 <= choice <= EXIT_OPTION:
        console.clear()
        console.write(
            "ERROR - Opção inválida.\nPor favor, escolha uma opção entre 1 e 6.\n\n"
        )
        console.write(MENU)
        choice = _parse_choice(console.ask("Escolha uma opção: "))
    return choice


def _characteristics_menu(console: Console, catalog: Catalog) -> None:
    console.clear()
    console.write(SUBMENU)
    sub_choice = _parse_choice(console.ask("Escolha uma sub-opção: "))
    if sub_choice == 1:
        search_by_amenities(console, catalog)
    elif sub_choice == 2:
        search_by_rooms(console, catalog)
    elif sub_choice != 3:
        console.write("Sub-opção inválida.\n")
        console.pause()


def _wants_menu_again(console: Console) -> bool:
    answer = console.ask(
        "\n\nDeseja voltar ao menu principal? Digite 's' para SIM ou 'n' para NÃO "
        "(sair do programa): "
    )
    while answer not in ("s", "S", "n", "N"):
        answer = console.ask("Opção inválida. Digite 's' para SIM ou 'n' para NÃO: ")
    return answer in ("s", "S")


def run(console: Console, catalog: Catalog) -> None:
    """Run the main menu until the user leaves or input ends."""
    actions = {
        1: list_properties,
        2: add_property,
        3: search_by_value,
        4: _characteristics_menu,
        5: show_report,
    }
    try:
        while True:
            choice = _menu_choice(console)
            if choice == EXIT_OPTION:
                return
            actions[choice](console, catalog)
            if not _wants_menu_again(console):
                return
            console.clear()
    except EOFError:
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the database, run the menu and save the database on exit."""
    parser = argparse.ArgumentParser(description="Gestão de imóveis.")
    parser.add_argument("database", nargs="?", default=DEFAULT_FILENAME,
                        help="arquivo da base de dados")
    args = parser.parse_args(argv)
    path = args.database

    console = Console()
    try:
        properties = load_properties(path)
    except OSError:
        print(f"Erro ao abrir o arquivo {path}. Verifique se ele existe e está no "
              "local correto.", file=sys.stderr)
        print("Um novo arquivo será criado ao sair se houverem dados.", file=sys.stderr)
        properties = []
    except RecordError as error:
        print(f"Erro ao ler o arquivo {path}: {error}", file=sys.stderr)
        return 1

    catalog = Catalog(properties)
    console.write(f"Total de imóveis lidos do arquivo: {len(catalog)}\n")
    console.pause()
    run(console, catalog)

    console.clear()
    console.write("\nPreparando para encerrar o programa...\n")
    try:
        save_properties(catalog, path)
    except OSError:
        print(f"Erro fatal: Não foi possível abrir o arquivo {path} para escrita.",
              file=sys.stderr)
    else:
        console.write(f"\nDados gravados com sucesso no arquivo {path}.\n")
    console.write("\nPrograma encerrado.\n\n")
    console.pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())