import pytest

from porotree.poro import Poro


def test_default_poro_is_empty():
    poro = Poro()
    assert poro.is_empty()
    assert str(poro) == "()"


def test_color_is_lowercased_on_construction():
    assert Poro(1, 2, 3, "ROJO").color == "rojo"


def test_color_is_lowercased_on_assignment():
    poro = Poro(1, 2, 3)
    poro.color = "AzUl"
    assert poro.color == "azul"


def test_clearing_color_allows_empty():
    poro = Poro(0, 0, 0, "verde")
    assert not poro.is_empty()
    poro.color = None
    assert poro.is_empty()


def test_str_with_color():
    assert str(Poro(1, 2, 100, "rojo")) == "(1, 2) 100.00 rojo"


def test_str_without_color():
    assert str(Poro(1, 2, 3.5)) == "(1, 2) 3.50 -"


def test_volume_only_is_not_empty():
    assert not Poro(0, 0, 0.5).is_empty()


def test_equality_compares_all_fields():
    assert Poro(1, 2, 3, "Rojo") == Poro(1, 2, 3, "rojo")
    assert Poro(1, 2, 3, "rojo") != Poro(1, 2, 3, "azul")
    assert Poro(1, 2, 3, "rojo") != Poro(1, 2, 3)
    assert Poro(1, 2, 3) != Poro(1, 2, 4)
    assert Poro(1, 2, 3) != Poro(2, 2, 3)


def test_equality_with_other_types():
    assert (Poro() == "()") is False


def test_move_to_updates_position():
    poro = Poro(1, 2, 3)
    poro.move_to(7, 9)
    assert (poro.x, poro.y) == (7, 9)
    assert poro.volume == 3.0


def test_poro_is_unhashable():
    with pytest.raises(TypeError):
        hash(Poro())