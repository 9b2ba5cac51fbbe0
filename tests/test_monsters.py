import pytest

from estructuras.monsters import (
    CatalogError,
    Monster,
    MonsterCatalog,
    count_entries,
    main,
    monster_hash,
)

HEADER = "name,cr,type,size,ac,hp,align"
ROWS = [
    "cat,0.125,beast,Tiny,12,2,unaligned",
    "goblin,0.25,humanoid,Small,15,7,neutral evil",
    "ogre,2,giant,Large,11,59,chaotic evil",
]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "monsters.csv"
    path.write_text("\n".join([HEADER, *ROWS]) + "\n", encoding="utf-8")
    return path


def write(tmp_path, *lines):
    path = tmp_path / "bad.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_equality_uses_name_only():
    assert Monster(name="cat", hp=2) == Monster(name="cat", hp=99)
    assert Monster(name="cat") != Monster(name="dog")
    assert Monster(name="bat") < Monster(name="cat")
    assert Monster(name="cat") > Monster(name="bat")


def test_str_is_name():
    assert str(Monster(name="goblin")) == "goblin"


def test_describe():
    lines = Monster("cat", 0.125, "beast", "Tiny", 12, 2, "unaligned").describe().splitlines()
    assert lines[0] == "Name: cat"
    assert lines[1] == "cr: 0.125"
    assert lines[-1] == "align: unaligned"
    assert len(lines) == 7


def test_hash_single_character():
    assert monster_hash(Monster(name="a"), 100) == 97


def test_hash_in_range_and_name_only():
    for name in ("cat", "goblin", "ancient red dragon", ""):
        value = monster_hash(Monster(name=name), 13)
        assert 0 <= value < 13
        assert value == monster_hash(Monster(name=name, hp=5), 13)


def test_count_entries(csv_file):
    assert count_entries(csv_file) == len(ROWS)


def test_count_entries_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        count_entries(tmp_path / "nope.csv")


def test_count_entries_without_header(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CatalogError):
        count_entries(path)


def test_load_and_find(csv_file):
    catalog = MonsterCatalog()
    catalog.load_csv(csv_file)
    assert len(catalog) == len(ROWS)
    ogre = catalog.find("ogre")
    assert ogre.cr == 2.0
    assert ogre.size == "Large"
    assert ogre.ac == 11
    assert ogre.hp == 59
    assert ogre.align == "chaotic evil"
    assert catalog.find("dragon") is None


def test_report_covers_all_buckets(csv_file):
    catalog = MonsterCatalog(buckets=7)
    catalog.load_csv(csv_file)
    lines = catalog.report().splitlines()
    assert len(lines) == 8
    counts = [int(line.split(": ")[1]) for line in lines[:-1]]
    assert sum(counts) == len(ROWS)


def test_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        MonsterCatalog().load_csv(tmp_path / "nope.csv")


@pytest.mark.parametrize(
    "row",
    [
        "cat,,beast,Tiny,12,2,unaligned",
        "cat,0.125,beast,Tiny,12,2,unaligned,extra",
        "cat,lots,beast,Tiny,12,2,unaligned",
        "cat,0.125,beast,Tiny,twelve,2,unaligned",
    ],
)
def test_malformed_line(tmp_path, row):
    with pytest.raises(CatalogError):
        MonsterCatalog().load_csv(write(tmp_path, HEADER, row))


def test_main_finds_cat(csv_file, capsys):
    assert main([str(csv_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "cat"


def test_main_reports_missing(csv_file, capsys):
    assert main([str(csv_file), "dragon"]) == 0
    out = capsys.readouterr().out
    assert "dragon was not found" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 0
    out = capsys.readouterr().out
    assert "Could not build the catalog" in out