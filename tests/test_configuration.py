from datetime import datetime

import pytest

from preexplorer import Configuration, MissingIdError, SavingError, Sequence, Style


def test_default_opening_and_closing_scripts():
    config = Configuration()
    assert config.opening_script(comparison=False) == (
        'unset key\nset title ""\nset xlabel ""\nset ylabel ""\n'
    )
    assert config.opening_script(comparison=True).startswith('set title ""')
    assert config.closing_script() == "pause -1\n"


def test_getters_reflect_setters():
    config = Configuration()
    assert config.title is None
    assert config.logx is None
    assert config.dashtype is None
    assert config.pause is None
    assert config.style is Style.default
    assert config.style_override is None

    config.set_title("T").set_logx(0).set_logy(10).set_dashtype(3).set_pause(2).set_style("points")
    assert config.title == "T"
    assert config.logx == 0
    assert config.logy == 10
    assert config.dashtype == 3
    assert config.pause == 2
    assert config.style is Style.points
    assert config.style_override is Style.points


def test_opening_script_with_every_option():
    config = (
        Configuration()
        .set_title("T")
        .set_xlabel("x")
        .set_ylabel("y")
        .set_logx(0)
        .set_logy(10)
        .set_xrange(0, None)
        .set_yrange(0.5, 2.0)
        .set_xtics("0,1,10")
        .set_custom("grid")
        .set_custom("key", "left top")
    )
    script = config.opening_script(comparison=False)
    assert 'set title "T"\n' in script
    assert 'set xlabel "x"\n' in script
    assert 'set ylabel "y"\n' in script
    assert "set logscale x\n" in script
    assert "set logscale y 10\n" in script
    assert "set xrange [0:*]\n" in script
    assert "set yrange [0.5:2]\n" in script
    assert "set xtics 0,1,10\n" in script
    assert script.endswith("set grid\nset key left top\n")


def test_titles_are_escaped():
    script = Configuration().set_title('a "b"').opening_script()
    assert 'set title "a \\"b\\""' in script


def test_closing_script_with_pause():
    assert Configuration().set_pause(2).closing_script() == "pause 2\n"


def test_checked_id_without_id_raises():
    with pytest.raises(MissingIdError):
        Configuration().checked_id()
    with pytest.raises(MissingIdError):
        Sequence([1, 2]).save()


def test_copy_is_independent():
    config = Configuration().set_title("T").set_custom("grid")
    copied = config.copy()
    assert copied == config
    copied.set_title("U").set_custom("key", "left")
    assert config.title == "T"
    assert config.get_custom("key") is None


def test_header_block_and_layout(output_root):
    sequence = Sequence([7]).set_title("T").set_date(datetime(2020, 1, 2, 3, 4, 5)).set_extension("dat")
    sequence.save_with_id("s")
    text = (output_root / "data" / "s.dat").read_text(encoding="utf-8")
    assert text == "# T\n# s\n# 2020-01-02 03:04:05\n0\t7\n"


def test_header_can_be_disabled(output_root):
    Sequence([7]).set_header(False).set_id("s").save()
    assert (output_root / "data" / "s.txt").read_text(encoding="utf-8") == "0\t7\n"


def test_custom_directory(tmp_path):
    sequence = Sequence([1]).set_directory(tmp_path / "custom")
    sequence.plot_later("s")
    assert (tmp_path / "custom" / "data" / "s.txt").exists()
    assert (tmp_path / "custom" / "plots" / "s.gnu").exists()


def test_unwritable_directory_raises_saving_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(SavingError):
        Sequence([1]).set_directory(blocker).save_with_id("s")


def test_logscale_forms():
    assert "logscale" not in Configuration().opening_script()
    assert "set logscale x\n" in Configuration().set_logx(-5).opening_script()
    assert "set logscale x 2\n" in Configuration().set_logx(2).opening_script()
    assert "set logscale y\n" in Configuration().set_logy(-1).opening_script()
