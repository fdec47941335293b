import pytest

from preexplorer import NoDataError, ProcessBin, ProcessBins, SequenceBin, SequenceBins, ValidationError


def test_sequence_bin_rows_split_buckets(output_root):
    SequenceBin([[1, 2], [3, 4, 5]], 0.5).set_header(False).save_with_id("b")
    text = (output_root / "data" / "b.txt").read_text(encoding="utf-8")
    assert text == "0\t1\n0\t2\n\n\n1\t3\n1\t4\n1\t5\n\n\n"


def test_sequence_bin_script(output_root):
    script = SequenceBin([[1, 2], [3, 4, 5]], 0.5).set_id("b").plot_script()
    stem = (output_root / "data" / "b").as_posix()
    assert "array TIMES[2] = [0, 1]\n" in script
    assert "BINWIDTH = 0.5\n" in script
    assert "array DATA_POINTS[2] = [2, 3]\n" in script
    assert f"set table \"{stem}\".'_partial_plot'.i" in script
    assert "WEIGHT = 1. / (DATA_POINTS[i+1] * BINWIDTH)" in script
    assert "using 2:(WEIGHT) bins binwidth=BINWIDTH with boxes" in script
    assert "with boxxyerrorbars linecolor i" in script


def test_process_bin_length_check():
    with pytest.raises(ValidationError):
        ProcessBin([0, 1, 2], [[1], [2]], 1.0)


def test_empty_bin_cannot_be_plotted():
    with pytest.raises(NoDataError):
        ProcessBin([], [], 1.0).plot_later("b")


def test_process_bins_comparison():
    bins = ProcessBins([ProcessBin([0, 1], [[1], [2, 3]], 1.0), ProcessBin([0.5], [[4]], 0.25).set_title("B")])
    script = bins.set_id("bs").plot_script()
    assert "BINWIDTH_0 = 1.0" in script
    assert "BINWIDTH_1 = 0.25" in script
    assert "array TIMES_1[1] = [0.5]" in script
    assert 'linecolor 1 title (i == 0 ? "0" : "")' in script
    assert 'linecolor 2 title (i == 0 ? "B" : "")' in script


def test_sequence_bins_sugar():
    first = SequenceBin([[1]], 1.0)
    both = first + SequenceBin([[2]], 1.0)
    assert isinstance(both, SequenceBins)
    assert first.data == ((1,),)


def test_empty_inner_bucket_is_rejected(output_root):
    with pytest.raises(NoDataError, match="bucket at 1"):
        ProcessBin([0, 1, 2], [[1, 2], [], [3]], 1.0).plot_later("b")
    assert not (output_root / "data" / "b.txt").exists()

    with pytest.raises(NoDataError, match="bucket at 1"):
        SequenceBin([[1, 2], [], [3]], 1.0).plot_later("sb")


def test_empty_inner_bucket_is_rejected_in_comparisons():
    bins = ProcessBins([ProcessBin([0], [[1]], 1.0), ProcessBin([0, 1], [[1], []], 1.0)]).set_id("bs")
    with pytest.raises(NoDataError):
        bins.plot_script()
