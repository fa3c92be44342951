import io
import sys

from llrbtree.cli import EXIT_EOF, EXIT_OK, Shell, main, print_menu
from llrbtree.tree import Tree


def run_shell(text):
    stdout = io.StringIO()
    shell = Shell(io.StringIO(text), stdout)
    code = shell.run()
    return code, stdout.getvalue(), shell


def test_print_menu_text():
    out = io.StringIO()
    print_menu(out)
    text = out.getvalue()
    assert "--- LLRB Tree Operations ---" in text
    assert "10. Exit\n" in text
    assert text.endswith("Enter your choice: ")


def test_exit_choice():
    code, out, _ = run_shell("10\n")
    assert code == EXIT_OK
    assert "Exiting program...\n" in out


def test_eof_at_menu():
    code, out, _ = run_shell("")
    assert code == EXIT_EOF
    assert out.endswith("Bue\n")


def test_insert_then_search():
    code, out, shell = run_shell("1\n5\nhello\n3\n5\n10\n")
    assert code == EXIT_OK
    assert "Найден элемент. Key: 5, value: hello\n" in out
    assert [(n.key, n.value) for n in shell.tree] == [(5, "hello")]


def test_search_missing():
    _, out, _ = run_shell("3\n5\n10\n")
    assert "Ничего не найдено\n" in out


def test_remove_missing_and_present():
    _, out, shell = run_shell("2\n7\n1\n7\nseven\n2\n7\n10\n")
    assert out.index("No element\n") < out.index("Delete node\n")
    assert len(shell.tree) == 0


def test_lower_bound():
    _, out, _ = run_shell("1\n10\na\n1\n20\nb\n4\n15\n4\n5\n10\n")
    assert "Нашли элемент. ключь: 10, значение: a, цвет:" in out
    assert "Ничего не нашлось\n" in out


def test_invalid_choice():
    code, out, _ = run_shell("11\n10\n")
    assert code == EXIT_OK
    assert "Invalid choice. Please try again.\n" in out


def test_print_tree_and_inorder():
    _, out, shell = run_shell("1\n1\na\n1\n2\nb\n1\n3\nc\n7\n5\n10\n")
    expected = Tree()
    for key, value in [(1, "a"), (2, "b"), (3, "c")]:
        expected.insert(key, value)
    assert expected.format() in out
    assert expected.format_inorder() in out
    assert [n.key for n in shell.tree] == [1, 2, 3]


def test_eof_while_reading_value():
    code, _, shell = run_shell("1\n5\n")
    assert code == EXIT_EOF
    assert len(shell.tree) == 0


def test_load_from_file(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("3\nthree\n1\none\n", encoding="utf-8")
    _, out, shell = run_shell(f"8\n{path}\n10\n")
    assert "Tree successfully loaded from file\n" in out
    assert [(n.key, n.value) for n in shell.tree] == [(1, "one"), (3, "three")]


def test_load_bad_file_keeps_tree(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("x\nvalue\n", encoding="utf-8")
    _, out, shell = run_shell(f"1\n4\nfour\n8\n{path}\n10\n")
    assert "Error loading tree from file\n" in out
    assert [n.key for n in shell.tree] == [4]


def test_save_png(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, out, _ = run_shell("1\n2\ntwo\n6\n10\n")
    assert "Tree visualization saved as 'llrb.png'\n" in out
    assert (tmp_path / "llrb.png").read_bytes().startswith(b"\x89PNG")


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10\n"))
    code = main([])
    assert code == EXIT_OK
    assert "Exiting program...\n" in capsys.readouterr().out