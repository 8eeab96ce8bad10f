import pytest

from minmax_normalize.arff import read_arff
from minmax_normalize.errors import InvalidArgument, InvalidArgumentCount
from minmax_normalize.main import main, parse_params, run
from minmax_normalize.models import RangeSpec


def test_parse_params_builds_range_specs():
    class_attribute, ranges = parse_params(["-c", "class", "-a1", "0", "1", "-a2", "-5", "5"])
    assert class_attribute == "class"
    assert ranges == [
        RangeSpec(attribute="a1", new_min=0.0, new_max=1.0),
        RangeSpec(attribute="a2", new_min=-5.0, new_max=5.0),
    ]


@pytest.mark.parametrize("params", [[], ["-c"], ["-c", "class", "-a1"], ["-c", "class", "-a1", "0"]])
def test_parse_params_argument_count(params):
    with pytest.raises(InvalidArgumentCount):
        parse_params(params)


@pytest.mark.parametrize(
    "params",
    [
        ["-x", "class"],
        ["-c", "class", "a1", "0", "1"],
        ["-c", "class", "-a1", "zero", "1"],
        ["-c", "class", "-class", "0", "1"],
        ["-c", "class", "-a1", "0", "1", "-a1", "2", "3"],
    ],
)
def test_parse_params_invalid(params):
    with pytest.raises(InvalidArgument):
        parse_params(params)


def test_run_writes_both_outputs(workdir, capsys):
    report = run("mmtest.arff", "class", [RangeSpec(attribute="a1", new_min=0, new_max=1)])

    assert report.rows == 3
    assert report.columns == 3
    assert report.minmax_file == "MinMaxmmtest.arff"
    assert report.normalized_file == "MinMaxNormalizemmtest.arff"

    minmax, _ = read_arff(str(workdir / "MinMaxmmtest.arff"))
    assert minmax.relation == "MinMaxmmtest"
    assert [a.name for a in minmax.attributes] == ["a1", "a2", "class"]
    assert minmax.rows == [[1.0, 10.0, 0.0], [5.0, 30.0, 1.0]]

    normalized, _ = read_arff(str(workdir / "MinMaxNormalizemmtest.arff"))
    assert normalized.column(0) == pytest.approx([0.0, 0.5, 1.0])
    assert normalized.column(1) == [10.0, 20.0, 30.0]
    assert normalized.column(2) == [0.0, 1.0, 0.0]

    out = capsys.readouterr().out
    assert "Reading from file mmtest.arff" in out
    assert "Computing min max values for 3 attributes" in out


def test_main_success(workdir, capsys):
    assert main(["mmtest.arff", "-c", "class", "-a1", "0", "1", "-a2", "0", "10"]) == 0
    normalized, _ = read_arff(str(workdir / "MinMaxNormalizemmtest.arff"))
    assert normalized.column(1) == pytest.approx([0.0, 5.0, 10.0])

    # summary line comes from the run report
    out = capsys.readouterr().out
    assert "3 rows x 3 attributes read (encoding: " in out
    assert "normalized: a1, a2" in out


def test_main_bad_argument_count_writes_nothing(workdir, capsys):
    assert main(["mmtest.arff", "-c", "class", "-a1", "0"]) == 2
    assert "Invalid number of arguments" in capsys.readouterr().err
    assert sorted(p.name for p in workdir.iterdir()) == ["mmtest.arff"]


def test_main_missing_input(workdir, capsys):
    assert main(["absent.arff", "-c", "class"]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_degenerate_range_fails(workdir, capsys):
    (workdir / "flat.arff").write_text("@attribute f numeric\n@attribute class numeric\n@data\n2 0\n2 1\n")
    assert main(["flat.arff", "-c", "class", "-f", "0", "1"]) == 1
    assert "min == max" in capsys.readouterr().err
    assert sorted(p.name for p in workdir.iterdir()) == ["flat.arff", "mmtest.arff"]


def test_main_unknown_range_attribute_writes_nothing(workdir, capsys):
    assert main(["mmtest.arff", "-c", "class", "-a9", "0", "1"]) == 1
    assert "Unknown attribute: a9" in capsys.readouterr().err
    assert sorted(p.name for p in workdir.iterdir()) == ["mmtest.arff"]


def test_main_unknown_class_attribute(workdir, capsys):
    assert main(["mmtest.arff", "-c", "label"]) == 1
    assert "Unknown attribute: label" in capsys.readouterr().err
