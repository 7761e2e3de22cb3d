import io

import pytest

from nbtree.menu import main, read_tree, run_menu
from nbtree.tree import TreeError

BUILD = "1\n3\nA\n2\nB\nC\n"


def run(text):
    out = io.StringIO()
    run_menu(io.StringIO(text), out)
    return out.getvalue()


def test_read_tree_builds_level_by_level():
    out = io.StringIO()
    tree = read_tree(3, io.StringIO("A 2 B C"), out)
    assert list(tree.preorder()) == ["A", "B", "C"]
    assert "Masukkan info untuk root : " in out.getvalue()
    assert "Masukkan jumlah anak untuk A : " in out.getvalue()
    assert "Masukkan anak ke 2 : " in out.getvalue()


def test_read_tree_deeper_levels():
    tree = read_tree(4, io.StringIO("A\n1\nB\n1\nC\n1\nD\n"), io.StringIO())
    assert list(tree.level_order()) == ["A", "B", "C", "D"]
    assert tree.depth() == len(tree) - 1


def test_read_tree_zero_nodes():
    tree = read_tree(0, io.StringIO(""), io.StringIO())
    assert tree.is_empty()


def test_read_tree_too_many_children():
    with pytest.raises(TreeError):
        read_tree(2, io.StringIO("A 3 B C D"), io.StringIO())


def test_read_tree_runs_out_of_parents():
    with pytest.raises(TreeError):
        read_tree(3, io.StringIO("A 1 B 0"), io.StringIO())


def test_read_tree_over_capacity():
    with pytest.raises(TreeError):
        read_tree(25, io.StringIO("A"), io.StringIO())


def test_read_tree_negative_count():
    with pytest.raises(ValueError):
        read_tree(-1, io.StringIO(""), io.StringIO())


def test_read_tree_truncated_input():
    with pytest.raises(EOFError):
        read_tree(3, io.StringIO("A 2 B"), io.StringIO())


def test_preorder_from_menu():
    output = run(BUILD + "2\n\n12\n")
    assert "Preorder     : A B C " in output
    assert output.endswith("Log Out.....\n")


def test_level_order_from_menu():
    output = run(BUILD + "5\n\n12\n")
    assert "Level Order  : A B C " in output


def test_print_tree_and_count():
    output = run(BUILD + "6\n\n12\n")
    assert "info array ke-1 : A \n" in output
    assert "Jumlah elemen      : 3\n" in output


def test_leaf_count_from_menu():
    output = run(BUILD + "7\n\n12\n")
    assert "Jumlah daun        : 2\n" in output


def test_search_found_and_missing():
    output = run(BUILD + "8\nB\n\n8\nZ\n\n12\n")
    assert "Node 'B' ditemukan dalam tree." in output
    assert "Node 'Z' tidak ditemukan dalam tree." in output


def test_level_from_menu():
    output = run(BUILD + "9\nA\n\n9\nZ\n\n12\n")
    assert "Level dari A adalah 0" in output
    assert "Node Z tidak ditemukan" in output


def test_depth_from_menu():
    output = run(BUILD + "10\n\n12\n")
    assert "Kedalaman (depth)  : 1\n" in output


def test_compare_from_menu():
    output = run(BUILD + "11\nB\nC\n\n11\nA\nZ\n\n12\n")
    assert "Nilai maksimum dari 'B' dan 'C' adalah: 'C'" in output
    assert "Data tidak ditemukan dalam tree!" in output
    assert "Salah satu atau kedua data tidak ditemukan dalam tree." in output


def test_invalid_choices():
    output = run("99\nabc\n12\n")
    assert output.count("Pilihan tidak valid.") == 2
    assert "Log Out....." in output


def test_end_of_input_stops_menu():
    output = run("")
    assert " ===== Non Binary Tree =====" in output
    assert "Log Out....." not in output


def test_failed_build_leaves_empty_tree():
    output = run("1\n2\nA\n5\n\n6\n\n12\n")
    assert "Jumlah elemen      : 0\n" in output


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("12\n"))
    assert main([]) == 0
    assert "Log Out....." in capsys.readouterr().out