import pytest

from learnkit.utils.io import parse_centroids, parse_nodes, read_dataset, read_text


def test_read_dataset(tmp_path):
    path = tmp_path / "train.csv"
    path.write_text("1,2,yes\n\n3.5,-4,no\n")

    dataset = read_dataset(str(path))

    assert dataset.features == [(1.0, 2.0), (3.5, -4.0)]
    assert dataset.labels == ["yes", "no"]
    assert dataset.dimension == 2


def test_read_dataset_rejects_ragged_rows(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,2,yes\n3,no\n")
    with pytest.raises(ValueError):
        read_dataset(str(path))


def test_read_dataset_rejects_non_numeric(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,abc,yes\n")
    with pytest.raises(ValueError, match="bad.csv:1"):
        read_dataset(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dataset(str(tmp_path / "missing.csv"))
    with pytest.raises(FileNotFoundError):
        read_text(str(tmp_path / "missing.txt"))


def test_parse_nodes_skips_blank_and_comment_lines():
    text = "# x y name\n0,0,a\n\n   \n10 10 b\n  # indented comment\n1, 2  c\n"
    nodes = parse_nodes(text)

    assert [n.identity for n in nodes] == ["a", "b", "c"]
    assert nodes[1].features == (10.0, 10.0)
    assert nodes[2].features == (1.0, 2.0)


def test_parse_nodes_rejects_bad_number():
    with pytest.raises(ValueError, match="line 1"):
        parse_nodes("1,x,a\n")


def test_parse_centroids():
    result = parse_centroids(["0,0", "10,10", "3 4"])
    assert [c.identity for c in result] == ["C1", "C2", "C3"]
    assert result[2].features == (3.0, 4.0)


def test_parse_centroids_rejects_empty():
    with pytest.raises(ValueError):
        parse_centroids([","])
