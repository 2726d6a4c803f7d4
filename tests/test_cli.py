from hokg.cli import main


def test_default_configuration_reports_error(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Error: Initial point does not lie on the curve"


def test_valid_configuration_prints_key_pair(capsys):
    argv = ["--p", "5", "--a", "1", "--b", "0", "--x0", "2", "--y0", "0", "--k", "2"]
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Base Point: Coordinates(")
    assert lines[0].endswith(", 0)")
    label, _, scalar_text = lines[1].partition(": ")
    assert label == "Private Key"
    scalar = int(scalar_text)
    assert 1 <= scalar <= 24
    assert lines[2] == "Public Key: Infinity"
    assert lines[3] == "Minimal Data: (5, 1, 0, 2, 0, 2)"


def test_invalid_configuration_reports_error(capsys):
    assert main(["--k", "-1"]) == 0
    assert capsys.readouterr().out.startswith("Error: ")