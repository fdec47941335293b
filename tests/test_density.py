import pytest

from preexplorer import Densities, Density, NoDataError


def test_density_rows_and_script(output_root):
    density = Density([1, 2, 3, 4]).set_header(False)
    density.plot_later("d")
    data_path = output_root / "data" / "d.txt"
    assert data_path.read_text(encoding="utf-8") == "1\n2\n3\n4\n"

    script = (output_root / "plots" / "d.gnu").read_text(encoding="utf-8")
    assert "nbins = 20.0" in script
    assert "max = 4.0" in script
    assert "min = 1.0" in script
    assert "len = 4.0" in script
    assert "width = (max - min) / nbins" in script
    assert "hist(x,width) = width * floor(x/width) + width / 2.0" in script
    assert (
        f'plot "{data_path.as_posix()}" using (hist($1,width)):(1.0/len) smooth frequency with steps dashtype 1'
        in script
    )


def test_density_style_can_be_overridden():
    density = Density([1.0, 2.0]).set_style("lines").set_id("d")
    assert "smooth frequency with lines" in density.plot_script()


def test_density_of_equal_values_has_unit_width():
    script = Density([3, 3, 3]).set_id("d").plot_script()
    assert "width = 1.0" in script


def test_empty_density_cannot_be_plotted():
    with pytest.raises(NoDataError):
        Density([]).plot_later("d")


def test_densities_suffix_their_macros():
    densities = Densities([Density([1, 2]), Density([5, 6, 7]).set_title("wide")]).set_id("ds")
    script = densities.plot_script()
    assert "nbins_0 = 20.0" in script
    assert "len_1 = 3.0" in script
    assert "(hist_0($1,width_0)):(1.0/len_0)" in script
    assert '(hist_1($1,width_1)):(1.0/len_1) smooth frequency with steps title "wide" dashtype 2' in script


def test_default_style_on_densities_keeps_child_styles():
    densities = Densities([Density([1, 2]), Density([3, 4]).set_style("lines")]).set_id("ds")
    densities.set_style("default")
    script = densities.plot_script()
    assert 'smooth frequency with steps title "0"' in script
    assert 'smooth frequency with lines title "1"' in script
