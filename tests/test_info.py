from tadlab.info import Info


def test_texto_pins_format():
    assert Info(4, 2.0).texto() == "(4,2.00)"
    assert Info(9, -1.2).texto() == "(9,-1.20)"
    assert Info(0, 0).texto() == "(0,0.00)"


def test_str_matches_texto():
    info = Info(7, 3.25)
    assert str(info) == info.texto()


def test_copia_is_equal_but_independent():
    original = Info(5, 1.5)
    copia = original.copia()
    assert copia == original
    assert copia is not original
    copia.natural = 6
    copia.real = -2.0
    assert original.natural == 5
    assert original.real == 1.5


def test_equality_needs_both_components():
    assert Info(3, 1.0) == Info(3, 1.0)
    assert not (Info(3, 1.0) == Info(3, 2.0))
    assert not (Info(3, 1.0) == Info(4, 1.0))


def test_components_are_kept():
    info = Info(12, -0.5)
    assert info.natural == 12
    assert info.real == -0.5