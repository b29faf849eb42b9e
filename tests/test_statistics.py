import pytest

from imobiliaria.models import Property
from imobiliaria.statistics import compute_statistics


def make(kind="casa", purpose="venda", suites=0, floor="madeira") -> Property:
    return Property(
        kind=kind, purpose=purpose, address="rua_x_1", neighborhood="Centro",
        city="Cidade", area=60.0, value=100000.0, iptu=300.0,
        bedrooms=2, suites=suites, bathrooms=1, parking_spaces=0,
        kitchen="padrao", living_room="estar", balcony="simples",
        service_area="sim", floor=floor, condition="bom",
    )


def test_empty_collection_has_no_percentages():
    stats = compute_statistics([])
    assert stats.total == 0
    assert stats.purpose_percentage("venda") is None
    assert stats.houses_with_suites_percentage() is None
    assert stats.ceramic_offices_percentage() is None


def test_single_purpose_is_whole():
    stats = compute_statistics([make(purpose="venda"), make(purpose="venda")])
    assert stats.purpose_percentage("venda") == pytest.approx(100.0)
    assert stats.purpose_percentage("locacao") == 0.0


def test_known_purposes_sum_to_whole():
    props = [
        make(purpose="venda"),
        make(purpose="locacao"),
        make(purpose="temporada"),
        make(purpose="locacao"),
        make(purpose="venda"),
        make(purpose="venda"),
    ]
    stats = compute_statistics(props)
    shares = [stats.purpose_percentage(p) for p in ("venda", "locacao", "temporada")]
    assert sum(shares) == pytest.approx(100.0)
    assert shares[0] > shares[1] > shares[2]
    assert stats.total == len(props)


def test_unknown_purpose_lowers_known_shares():
    with_unknown = compute_statistics([make(purpose="venda"), make(purpose="permuta")])
    without = compute_statistics([make(purpose="venda")])
    assert with_unknown.purpose_percentage("venda") < without.purpose_percentage("venda")


def test_houses_with_suites_half():
    props = [make(kind="casa", suites=2), make(kind="casa", suites=0)]
    stats = compute_statistics(props)
    assert stats.houses_with_suites_percentage() == pytest.approx(50.0)


def test_only_houses_count_for_suites():
    base = [make(kind="casa", suites=1), make(kind="casa", suites=0)]
    extra = base + [make(kind="apartamento", suites=3)]
    assert (
        compute_statistics(extra).houses_with_suites_percentage()
        == compute_statistics(base).houses_with_suites_percentage()
    )
    assert compute_statistics(extra).houses == compute_statistics(base).houses


def test_no_houses_gives_none():
    stats = compute_statistics([make(kind="apartamento", suites=1)])
    assert stats.houses_with_suites_percentage() is None


def test_ceramic_offices_ignore_other_kinds():
    offices = [
        make(kind="sala_comercial", floor="ceramica"),
        make(kind="sala_comercial", floor="madeira"),
        make(kind="sala_comercial", floor="ceramica"),
    ]
    mixed = offices + [make(kind="casa", floor="ceramica")]
    only = compute_statistics(offices)
    assert compute_statistics(mixed).ceramic_offices_percentage() == pytest.approx(
        only.ceramic_offices_percentage()
    )
    assert only.ceramic_offices == only.offices - 1
    assert 0.0 < only.ceramic_offices_percentage() < 100.0


def test_no_offices_gives_none():
    stats = compute_statistics([make(kind="casa", floor="ceramica")])
    assert stats.ceramic_offices_percentage() is None