# imobiliaria

A small console application for managing a catalogue of properties offered
for sale (`venda`), rent (`locacao`) or seasonal stay (`temporada`). The
catalogue lives in a plain-text file and holds up to 200 properties. The
program talks to the user in Portuguese.

## Installation

```
pip install .
```

## Usage

```
imobiliaria [database]
```

`database` is the path of the database file and defaults to
`BD_Imoveis2.txt` in the current directory. On start-up the program reads the
file and reports how many properties were loaded. If the file cannot be
opened, a message is printed and you start with an empty catalogue; the file
is written when you leave. If a line of the file is malformed, the program
prints the error and exits with status 1 without changing the file.

The main menu offers:

1. View the list of all properties with all their details
2. Add a new property (refused when the catalogue already holds 200)
3. Search properties of one purpose whose value lies in a range
4. Search by characteristics, in a sub-menu: required amenities (wardrobes,
   air conditioning, heater, ceiling fan) or a minimum number of bedrooms and
   suites
5. Statistical report: share of properties per purpose, share of houses
   (`casa`) with at least one suite, share of commercial rooms
   (`sala_comercial`) with a ceramic floor (`ceramica`)
6. Quit

After each action you are asked whether to go back to the menu (`s`) or quit
(`n`). When you quit, or when input ends, the catalogue is written back to the
same file.

Input is read word by word, so text fields may not contain spaces; use
underscores (for example `sala_comercial` or `rua_das_flores_10`). Yes/no
questions accept `sim`, `Sim`, `s`, `S`, `nao`, `Nao`, `n` and `N`.

## Database file format

The first line is a header and is ignored. Each following line describes one
property with 22 whitespace-separated fields:

```
tipo finalidade endereco bairro cidade area valor iptu quartos suites banheiros vagas
cozinha sala varanda area_servico piso conservacao armarios ar_condicionado aquecedor ventilador
```

Area, value and IPTU are numbers; bedrooms, suites, bathrooms and parking
spaces are integers. The last four fields are `sim` or `nao`; anything other
than `sim` counts as no. Blank lines are skipped, and extra fields at the end
of a line are ignored. Reading stops at a line whose first field is `fim`, at
the end of the file, or after 200 properties. Every saved file has a header
line, one line per property and a final `fim` line.

## Using the library

```python
from imobiliaria.database import load_properties, save_properties
from imobiliaria.search import by_value_range, by_amenities, by_rooms
from imobiliaria.statistics import compute_statistics

properties = load_properties("BD_Imoveis2.txt")

for index, prop in by_value_range(properties, "venda", 100000, 300000):
    print(index, prop.address, prop.value)

with_air = by_amenities(properties, air_conditioning=True)
large = by_rooms(properties, min_bedrooms=3, min_suites=1)

stats = compute_statistics(properties)
print(stats.purpose_percentage("locacao"))
print(stats.houses_with_suites_percentage())
print(stats.ceramic_offices_percentage())

save_properties(properties, "BD_Imoveis2.txt")
```

- `imobiliaria.models` holds the `Property` dataclass, `parse_line` and
  `format_line` for the one-line text form, and `RecordError`, raised for a
  line that cannot be read.
- `imobiliaria.search` filters return `(index, property)` pairs, the index
  being the zero-based position in the sequence given.
- The percentage methods of `Statistics` return `None` when there is nothing
  to divide by (no properties, no houses, no commercial rooms).
- `imobiliaria.catalog.Catalog` keeps properties in order with a fixed
  capacity: `add` raises `CapacityError` when full, `find_by_address` returns
  the index of the first exact match or `None`, and `remove` deletes by index,
  moving later properties left.
- `imobiliaria.cli` has the interactive screens; `search_and_delete` finds a
  property by address and deletes it after confirmation. It is not reachable
  from the main menu.

## Running the tests

```
pip install .[test]
pytest
```