import pytest

from imobiliaria.database import (
    END_MARKER,
    HEADER,
    MAX_PROPERTIES,
    load_properties,
    save_properties,
)
from imobiliaria.models import Property, RecordError, parse_line

LINE_A = (
    "casa venda rua_flores_10 centro ouro_preto 120.5 350000 800 "
    "3 1 2 2 americana estar simples sim ceramica bom sim nao sim nao"
)
LINE_B = (
    "sala_comercial locacao av_brasil_200 pilar mariana 45 2500 120 "
    "0 0 1 1 padrao recepcao nao nao ceramica novo nao sim nao sim"
)


def write(path, *lines):
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")


def make_property(address):
    return Property(
        kind="casa",
        purpose="temporada",
        address=address,
        neighborhood="centro",
        city="tiradentes",
        area=200.0,
        value=900.0,
        iptu=0.0,
        bedrooms=4,
        suites=2,
        bathrooms=3,
        parking_spaces=2,
        kitchen="gourmet",
        living_room="jantar",
        balcony="gourmet",
        service_area="sim",
        floor="madeira",
        condition="bom",
        wardrobes=True,
        air_conditioning=False,
        heater=True,
        fan=False,
    )


def test_load_skips_header_and_stops_at_marker(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, LINE_A, LINE_B, END_MARKER)
    assert load_properties(db) == [parse_line(LINE_A), parse_line(LINE_B)]


def test_load_ignores_lines_after_marker(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, LINE_A, END_MARKER, LINE_B)
    assert load_properties(db) == [parse_line(LINE_A)]


def test_load_header_line_is_not_a_record(tmp_path):
    db = tmp_path / "db.txt"
    write(db, LINE_B, LINE_A, END_MARKER)
    assert load_properties(db) == [parse_line(LINE_A)]


def test_load_without_marker_reads_to_end(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, LINE_A, LINE_B)
    assert len(load_properties(db)) == 2


def test_load_skips_blank_lines(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, "", LINE_A, "   ", LINE_B, END_MARKER)
    assert [p.address for p in load_properties(db)] == ["rua_flores_10", "av_brasil_200"]


def test_load_header_only(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER)
    assert load_properties(db) == []


def test_load_caps_at_capacity(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, *([LINE_A] * (MAX_PROPERTIES + 5)), END_MARKER)
    assert len(load_properties(db)) == MAX_PROPERTIES


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_properties(tmp_path / "missing.txt")


def test_load_malformed_line(tmp_path):
    db = tmp_path / "db.txt"
    write(db, HEADER, "casa venda incompleta", END_MARKER)
    with pytest.raises(RecordError):
        load_properties(db)


def test_save_writes_header_first_and_marker_last(tmp_path):
    db = tmp_path / "db.txt"
    save_properties([make_property("rua_a_1")], db)
    lines = db.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert lines[-1] == "fim"
    assert len(lines) == 3


def test_save_empty_list(tmp_path):
    db = tmp_path / "db.txt"
    save_properties([], db)
    assert db.read_text(encoding="utf-8").splitlines() == [HEADER, END_MARKER]


def test_round_trip_preserves_order(tmp_path):
    db = tmp_path / "db.txt"
    props = [make_property(f"rua_{n}") for n in range(5)] + [parse_line(LINE_B)]
    save_properties(props, db)
    assert load_properties(db) == props


def test_round_trip_accepts_generator(tmp_path):
    db = tmp_path / "db.txt"
    props = [make_property("rua_x_1"), make_property("rua_y_2")]
    save_properties((p for p in props), db)
    assert load_properties(db) == props


def test_save_overwrites_existing(tmp_path):
    db = tmp_path / "db.txt"
    save_properties([make_property("rua_a_1"), make_property("rua_b_2")], db)
    save_properties([make_property("rua_c_3")], db)
    assert [p.address for p in load_properties(db)] == ["rua_c_3"]