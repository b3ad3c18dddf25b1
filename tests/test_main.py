"""Tests for the command line entry point."""
import pytest
from decimal import Decimal

from exprtree import main as cli


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    """Keep the CLI from reconfiguring the root logger during tests."""
    return mocker.patch("exprtree.main.setup_logging")


def test_parse_assignments():
    assert cli.parse_assignments(["x=1.5", "name=bob", " y = 2"]) == {
        "x": Decimal("1.5"), "name": "bob", "y": Decimal(2),
    }

@pytest.mark.parametrize("assignment", ["novalue", "=3"])
def test_parse_assignments_rejects_malformed(assignment):
    with pytest.raises(ValueError):
        cli.parse_assignments([assignment])

def test_evaluates_tree_argument(capsys):
    exit_code = cli.main(["(operator + (number 1) (variable x))", "--var", "x=41"])
    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "42"

def test_evaluates_tree_from_file(tmp_path, capsys):
    tree_file = tmp_path / "tree.sexp"
    tree_file.write_text("(function concat (string \"'a'\") (variable s))", encoding="utf-8")
    assert cli.main(["--file", str(tree_file), "--var", "s=b"]) == 0
    assert capsys.readouterr().out.strip() == "ab"

def test_missing_file(tmp_path, capsys):
    assert cli.main(["--file", str(tmp_path / "absent.sexp")]) == 1
    assert "cannot read" in capsys.readouterr().err

def test_evaluation_error_exit_code(capsys):
    assert cli.main(["(variable missing)"]) == 1
    assert "Undefined variable: missing" in capsys.readouterr().err

def test_arithmetic_error_exit_code(capsys):
    assert cli.main(['(operator % (number "1e40") (number 3))']) == 1
    assert "Arithmetic error" in capsys.readouterr().err

def test_syntax_error_exit_code(capsys):
    assert cli.main(["(nonsense 1)"]) == 1
    assert "Unknown node kind" in capsys.readouterr().err

def test_prompt_variables(mocker, capsys):
    mocker.patch("rich.console.Console.input", return_value="6")
    assert cli.main(["(operator * (promptvariable n) (promptvariable n))", "--prompt"]) == 0
    assert capsys.readouterr().out.strip() == "36"

def test_tree_and_file_are_exclusive(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([])
    with pytest.raises(SystemExit):
        cli.main(["(true)", "--file", str(tmp_path / "x")])

def test_log_level_passed_to_setup(no_logging_setup):
    cli.main(["(true)", "--log-level", "DEBUG"])
    no_logging_setup.assert_called_once_with("DEBUG", None)
