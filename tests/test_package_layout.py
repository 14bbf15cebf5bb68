import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom) and node.module:
            yield node.module


def test_server_and_store_do_not_import_the_client():
    offenders = []
    for package in ("app", "core"):
        for path in (ROOT / package).rglob("*.py"):
            for module in _imported_modules(path):
                if module == "client" or module.startswith("client."):
                    offenders.append(f"{path.relative_to(ROOT)}: {module}")
    assert offenders == []


def test_server_pages_share_the_core_renderer():
    assert "core.render" in set(_imported_modules(ROOT / "app" / "layout.py"))
    assert "core.render" in set(_imported_modules(ROOT / "app" / "routes" / "pages.py"))
