import pytest

from preexplorer import PlottingError, Process, Sequence, ValidationError, preexplore


def test_plot_later_writes_data_and_script(output_root):
    Sequence([0, 1, 2, 3, 4]).set_title("T").plot_later("id1")

    data_path = output_root / "data" / "id1.txt"
    lines = data_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# T"
    assert lines[1] == "# id1"
    assert lines[2].startswith("# ")
    assert lines[3:] == ["0\t0", "1\t1", "2\t2", "3\t3", "4\t4"]

    script = (output_root / "plots" / "id1.gnu").read_text(encoding="utf-8")
    assert script.startswith("unset key\n")
    assert 'set title "T"\n' in script
    assert f'plot "{data_path.as_posix()}" using 1:2 with lines dashtype 1\n' in script
    assert script.endswith("pause -1\n")


def test_sequence_style_and_dashtype(output_root):
    sequence = Sequence([1.5, 2.5]).set_style("points").set_dashtype(4)
    sequence.plot_later("s")
    assert "with points dashtype 4" in sequence.plot_script()


def test_plot_launches_gnuplot(output_root, spawned):
    Sequence([1, 2]).plot("p")
    assert len(spawned) == 1
    assert spawned[0][-1] == str(output_root / "plots" / "p.gnu")


def test_plot_spawn_failure_is_plotting_error(monkeypatch):
    import subprocess

    def missing(cmd, *args, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "Popen", missing)
    with pytest.raises(PlottingError):
        Sequence([1]).plot("p")


def test_empty_sequence_still_saves(output_root):
    Sequence([]).set_header(False).plot_later("empty")
    assert (output_root / "data" / "empty.txt").read_text(encoding="utf-8") == ""


def test_process_rows_and_length_check(output_root):
    Process([0.0, 0.5], [3, 4]).set_header(False).save_with_id("p")
    assert (output_root / "data" / "p.txt").read_text(encoding="utf-8") == "0.0\t3\n0.5\t4\n"
    with pytest.raises(ValidationError):
        Process([0, 1], [1])


def test_preexplore_picks_the_kind():
    assert isinstance(preexplore([1, 2, 3]), Sequence)
    process = preexplore(([0, 1], [2, 3]))
    assert isinstance(process, Process)
    assert process.domain == (0, 1)
    assert isinstance(preexplore((1, 2)), Sequence)
