import json

from propsync.main import main


def test_import_writes_json(tmp_path, write_props):
    root = tmp_path / "res"
    write_props(root, "strings.properties", "greeting = Hello\n")
    write_props(root, "strings_de.properties", "greeting = Hallo\nonly_de = x\n")
    out = tmp_path / "out.json"

    assert main(["--root", str(root), "import", "--invariant-only", "-o", str(out)]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == [
        {
            "name": "greeting",
            "storage_location": "strings",
            "translations": {"": "Hello", "de": "Hallo"},
            "notes": None,
        }
    ]


def test_export_reads_json_file(tmp_path, capsys):
    root = tmp_path / "res"
    payload = tmp_path / "in.json"
    payload.write_text(
        json.dumps([{"name": "farewell", "storage_location": "sub/strings", "translations": {"": "Bye"}}]),
        encoding="utf-8",
    )

    assert main(["--root", str(root), "--project", "demo", "export", str(payload)]) == 0

    assert (root / "sub" / "strings.properties").read_bytes() == b"farewell = Bye\n"
    assert "OK" in capsys.readouterr().out


def test_export_failure_sets_exit_code(tmp_path, capsys):
    root = tmp_path / "res"
    (root / "strings.properties").mkdir(parents=True)
    payload = tmp_path / "in.json"
    payload.write_text(json.dumps([{"name": "k", "storage_location": "strings", "translations": {"": "v"}}]))

    assert main(["--root", str(root), "export", str(payload)]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_normalize_drops_comments(tmp_path, write_props):
    root = tmp_path / "res"
    path = write_props(root, "strings.properties", "# header\n\n  greeting=Hello\n")

    assert main(["--root", str(root), "normalize"]) == 0
    assert path.read_bytes() == b"greeting = Hello\n"


def test_import_of_missing_root_fails(tmp_path):
    assert main(["--root", str(tmp_path / "missing"), "import"]) == 2
