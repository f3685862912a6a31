import pytest

from learnkit.cli.config import Algorithm, RunConfig
from learnkit.cli.learn import main, parse_config, split_centroids


@pytest.fixture
def knn_files(tmp_path):
    train = tmp_path / "train.csv"
    train.write_text("0,0,x\n1,1,x\n5,5,y\n6,6,y\n")
    test = tmp_path / "test.csv"
    test.write_text("0.5,0.5,x\n5.5,5.5,y\n0.2,0.1,y\n")
    return str(train), str(test)


@pytest.fixture
def kmeans_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("# data\n0,0,a\n0,1,b\n\n10 10 c\n")
    return str(path)


def test_knn_run(knn_files, capsys):
    train, test = knn_files
    assert main(["-train", train, "-test", test, "-k", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Label=x Precision=1/2 Recall=1/1",
        "Label=y Precision=1/1 Recall=1/2",
    ]


def test_knn_verbose_prints_comparisons(knn_files, capsys):
    train, test = knn_files
    assert main(["-train", train, "-test", test, "-k", "1", "-v"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["want=x got=x", "want=y got=y", "want=y got=x"]


def test_naive_bayes_run(knn_files, capsys):
    train, test = knn_files
    assert main(["-train", train, "-test", test, "-c", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Label=x ")
    assert out[-1].startswith("Label=y ")


def test_naive_bayes_verbose(knn_files, capsys):
    train, test = knn_files
    assert main(["-train", train, "-test", test, "-c", "0", "-verbose"]) == 0
    out = capsys.readouterr().out
    assert "P(C=x) = [2 / 4]" in out
    assert "NB(C=y) = " in out


def test_kmeans_run(kmeans_file, capsys):
    assert main(["-train", kmeans_file, "-d", "e2", "0,0", "10,10"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["C1 = {a,b}", "C2 = {c}", "([0 0.5])", "([10 10])"]


def test_kmeans_max_iter(kmeans_file, capsys):
    assert main(["-train", kmeans_file, "-d", "manh", "--max-iter", "1", "0,0", "10,10"]) == 0
    assert "([0 0.5])" in capsys.readouterr().out


def test_kmeans_dimension_mismatch_fails(kmeans_file, capsys):
    assert main(["-train", kmeans_file, "-d", "e2", "0,0,0"]) == 1
    assert "Incorrect dimensions" in capsys.readouterr().err


def test_both_k_and_c_fail(knn_files, capsys):
    train, test = knn_files
    assert main(["-train", train, "-test", test, "-k", "3", "-c", "1"]) == 1
    assert "Cannot use both" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    missing = str(tmp_path / "nope.csv")
    assert main(["-train", missing, "-test", missing, "-k", "1"]) == 1
    assert "could not be read" in capsys.readouterr().err


def test_unknown_distance_exits():
    with pytest.raises(SystemExit):
        main(["-train", "points.txt", "-d", "cosine", "0,0"])


def test_parse_config():
    config = parse_config(["-train", "a.txt", "-d", "manh", "1,2", "3,4", "-v"])
    assert config.distance == "manh"
    assert config.centroids == ["1,2", "3,4"]
    assert config.verbose


@pytest.mark.parametrize("kwargs, algorithm", [
    (dict(k=3), Algorithm.KNN),
    (dict(c=0.5), Algorithm.NAIVE_BAYES),
    (dict(c=0.0), Algorithm.NAIVE_BAYES),
    (dict(k=0, c=1.0), Algorithm.NAIVE_BAYES),
])
def test_validate_selects_algorithm(kwargs, algorithm):
    assert RunConfig(train="a", test="b", **kwargs).validate() is algorithm


def test_validate_kmeans():
    config = RunConfig(train="a", distance="e2", centroids=["0,0"])
    assert config.validate() is Algorithm.KMEANS


@pytest.mark.parametrize("kwargs", [
    dict(train="a", test="b"),
    dict(train="a", test="b", k=0),
    dict(train="a", test="b", k=-1),
    dict(train="a", test="b", c=-0.5),
    dict(train="a", test="b", k=2, c=1.0),
    dict(train="a", k=2),
    dict(train="a", distance="e2"),
    dict(train="a", distance="cosine", centroids=["0,0"]),
    dict(train="a", distance="e2", centroids=["0,0"], max_iter=0),
    dict(train="a", test="b", k=2, centroids=["0,0"]),
])
def test_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        RunConfig(**kwargs).validate()


def test_kmeans_negative_centroid_coordinates(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("-1,-1,a\n-2,-1,b\n5,5,c\n")
    assert main(["-train", str(path), "-d", "e2", "-1,-1", "5,5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["C1 = {a,b}", "C2 = {c}", "([-1.5 -1])", "([5 5])"]


def test_split_centroids_keeps_option_values():
    remaining, found = split_centroids(["-train", "a,b.txt", "-d", "manh", "-1,-1", "-v", "2,3"])
    assert remaining == ["-train", "a,b.txt", "-d", "manh", "-v"]
    assert found == ["-1,-1", "2,3"]


def test_knn_empty_training_file_fails(tmp_path, knn_files, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text("\n")
    _, test = knn_files
    assert main(["-train", str(empty), "-test", test, "-k", "1"]) == 1
    assert "Cannot train on an empty dataset" in capsys.readouterr().err
