from preexplorer import Style


def test_style_from_str_names_and_symbols():
    assert Style.from_str("Points") is Style.points
    assert Style.from_str("  LINESPOINTS ") is Style.linespoints
    assert Style.from_str(" -+- ") is Style.linespoints
    assert Style.from_str("_|") is Style.steps
    assert Style.from_str("_--_") is Style.boxes


def test_style_unknown_input_falls_back_to_lines():
    assert Style.from_str("nonsense") is Style.lines
    assert Style.from_index(42) is Style.lines
    assert Style.from_index(-1) is Style.lines


def test_style_from_index_follows_declaration_order():
    assert Style.from_index(0) is Style.default
    assert Style.from_index(1) is Style.lines
    assert Style.from_index(6) is Style.steps
    assert Style.from_index(9) is Style.boxes


def test_style_display_renders_default_as_lines():
    assert Style.default.display == "lines"
    assert str(Style.default) == "lines"
    assert str(Style.histeps) == "histeps"


def test_style_coerce():
    assert Style.coerce(Style.dots) is Style.dots
    assert Style.coerce(2) is Style.points
    assert Style.coerce("impulses") is Style.impulses
