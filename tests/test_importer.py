import pytest

from propsync.core.errors import ResourceReadError, StorageLocationError
from propsync.features.importer import find_resource_files, import_resources
from propsync.features.importer import merger


def _by_key(resources):
    return {(r.storage_location, r.name): r for r in resources}


def test_invariant_and_translation_fold_into_one_record(tmp_path, write_props):
    write_props(tmp_path, "strings.properties", "greeting = Hello\n")
    write_props(tmp_path, "strings_de-DE.properties", "greeting = Hallo\n")

    resources = import_resources(tmp_path)

    assert len(resources) == 1
    res = resources[0]
    assert res.name == "greeting"
    assert res.storage_location == "strings"
    assert res.invariant_text == "Hello"
    assert res.get_locale_text("de-DE") == "Hallo"


def test_groups_are_kept_apart_by_folder_and_base_name(tmp_path, write_props):
    write_props(tmp_path, "strings.properties", "title = Top\n")
    write_props(tmp_path, "sub/strings.properties", "title = Nested\n")
    write_props(tmp_path, "sub/strings_fr.properties", "title = Imbriqué\n")
    write_props(tmp_path, "errors.properties", "title = Error\n")

    found = _by_key(import_resources(tmp_path))

    assert set(found) == {("strings", "title"), ("sub/strings", "title"), ("errors", "title")}
    assert found[("sub/strings", "title")].translations == {"": "Nested", "fr": "Imbriqué"}
    assert found[("strings", "title")].translations == {"": "Top"}


def test_translation_only_keys_are_returned_without_invariant_text(tmp_path, write_props):
    write_props(tmp_path, "strings.properties", "a = A\n")
    write_props(tmp_path, "strings_de.properties", "a = A-de\norphan = nur deutsch\n")

    found = _by_key(import_resources(tmp_path))

    orphan = found[("strings", "orphan")]
    assert orphan.invariant_text == ""
    assert not orphan.has_invariant_text
    assert orphan.get_locale_text("de") == "nur deutsch"


def test_last_duplicate_wins(tmp_path, write_props):
    write_props(tmp_path, "strings.properties", "k = first\nk = second\n")
    (res,) = import_resources(tmp_path)
    assert res.invariant_text == "second"


def test_only_resource_files_are_read(tmp_path, write_props):
    write_props(tmp_path, "strings.properties", "k = v\n")
    write_props(tmp_path, "notes.txt", "k = ignored\n")
    (tmp_path / "folder.properties").mkdir()

    assert find_resource_files(tmp_path) == [tmp_path / "strings.properties"]


def test_missing_root(tmp_path):
    with pytest.raises(StorageLocationError):
        import_resources(tmp_path / "missing")


def test_read_failure_aborts_import(tmp_path, write_props, monkeypatch):
    write_props(tmp_path, "a.properties", "k = v\n")
    bad = write_props(tmp_path, "b.properties", "k = v\n")
    real_read = merger.read_entries

    def flaky_read(path):
        if path == bad:
            raise PermissionError(13, "Permission denied", str(path))
        return real_read(path)

    monkeypatch.setattr(merger, "read_entries", flaky_read)

    with pytest.raises(ResourceReadError) as info:
        import_resources(tmp_path)
    assert info.value.path == bad
    assert "Permission denied" in str(info.value)
    assert isinstance(info.value.__cause__, PermissionError)
