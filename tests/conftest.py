import pytest

MMTEST = """@relation mmtest

@attribute a1 numeric
@attribute a2 numeric
@attribute class numeric
@data
1 10 0
3 20 1
5 30 0
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    # output names are built by prefixing the input path, so run inside tmp_path
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mmtest.arff").write_text(MMTEST)
    return tmp_path
