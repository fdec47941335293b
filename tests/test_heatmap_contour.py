import numpy as np
import pytest

from preexplorer import Contour, Contours, Heatmap, Heatmaps, ValidationError


def test_heatmap_rows_are_row_major(output_root):
    Heatmap([0, 1], [0, 1, 2], range(6)).set_header(False).save_with_id("h")
    text = (output_root / "data" / "h.txt").read_text(encoding="utf-8")
    assert text == "0\t0\t0\n0\t1\t1\n0\t2\t2\n1\t0\t3\n1\t1\t4\n1\t2\t5\n"


def test_heatmap_grid_mismatch():
    with pytest.raises(ValidationError):
        Heatmap([0, 1], [0, 1], [1, 2, 3])


def test_heatmap_script(output_root):
    script = Heatmap([0], [0], [1]).set_id("h").plot_script()
    path = (output_root / "data" / "h.txt").as_posix()
    assert f'plot "{path}" using 1:2:3 with image' in script


def test_heatmap_from_array_puts_first_row_on_top():
    heatmap = Heatmap.from_array(np.array([[1, 2], [3, 4]]))
    assert heatmap.xs == (0, 1)
    assert heatmap.ys == (1, 0)
    assert heatmap.values == (1, 3, 2, 4)


def test_from_array_needs_a_matrix():
    with pytest.raises(ValidationError):
        Heatmap.from_array(np.zeros(3))


def test_contour_rows_end_with_blank_line(output_root):
    Contour([0, 1], [0, 1], [1, 2, 3, 4]).set_header(False).save_with_id("c")
    text = (output_root / "data" / "c.txt").read_text(encoding="utf-8")
    assert text == "0\t0\t1\n0\t1\t2\n\n1\t0\t3\n1\t1\t4\n\n"


def test_contour_script():
    contour = Contour.from_array(np.eye(2)).set_zlabel("z").set_id("c")
    script = contour.plot_script()
    assert "set contour\n" in script
    assert 'set zlabel "z"\n' in script
    assert "using 1:2:3 with lines" in script
    assert "splot" in script


def test_heatmaps_use_a_multiplot_grid():
    heatmaps = Heatmaps([Heatmap([0], [0], [i]) for i in range(3)]).set_title("grid").set_id("hs")
    script = heatmaps.plot_script()
    assert 'set multiplot layout 2,2 rowsfirst downwards title "grid"' in script
    assert 'set title "0"' in script
    assert 'set title "2"' in script
    assert script.count("with image") == 3
    assert "unset multiplot" in script


def test_contours_comparison():
    contours = Contour([0], [0], [1]) + Contour([0], [0], [2])
    assert isinstance(contours, Contours)
    script = contours.set_style("points").set_id("cs").plot_script()
    assert script.count("splot") == 2
    assert script.count("with points") == 2
