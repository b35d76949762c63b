from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_every_module_starts_with_its_path():
    for path in sorted((ROOT / "suratkeluar").rglob("*.py")):
        relative = path.relative_to(ROOT).as_posix()
        first_line = path.read_text(encoding="utf-8").splitlines()[0]
        assert first_line == f"# {relative}", relative
