"""
Tests for the command line entry point.
"""
import json

from property_doc_filler.cli import main


def test_generate_prints_reference(config, make_template, capsys):
    make_template(5)

    exit_code = main([
        "generate",
        "--full-name", "Jane Doe",
        "--address", "12 Harbor Lane",
        "--date", "2024-05-01",
        "--price", "$350,000",
    ])

    assert exit_code == 0
    reference = json.loads(capsys.readouterr().out)
    assert (config.paths().generated_dir / reference["filename"]).is_file()
    assert reference["downloadUrl"].endswith(reference["filename"])


def test_generate_without_fields_fails(config, make_template, capsys):
    make_template(5)

    exit_code = main(["generate", "--full-name", "Jane Doe"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "All fields are required"}


def test_inspect_lists_pages_and_text(config, make_template, capsys):
    template = make_template(2)

    exit_code = main(["inspect", "--template", str(template)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "2 page(s)" in out
    assert "Page 1 (612.0 x 792.0)" in out
    assert "template page 2" in out


def test_inspect_missing_file(config, capsys):
    assert main(["inspect"]) == 1
    assert "File not found" in capsys.readouterr().out
