import logging

from abacus import registry
from abacus.flows import resolve_flow_links
from abacus.lint import lint_module
from abacus.registry import load_entrypoint_modules, load_filesystem_modules, load_modules
from abacus.settings import flow_base_url, log_level, modules_path, shared_templates_dir


def _write_manifest(root, name, body):
    module_dir = root / name
    module_dir.mkdir()
    (module_dir / "module.yaml").write_text(body, encoding="utf-8")
    return module_dir


def test_load_filesystem_modules(tmp_path):
    _write_manifest(tmp_path, "half_tool", "name: half_tool\ntitle: Half\n")
    _write_manifest(tmp_path, "nameless", "title: Nothing\n")
    (tmp_path / "stray.txt").write_text("ignored", encoding="utf-8")

    modules = load_filesystem_modules(tmp_path)

    assert list(modules) == ["half_tool"]
    meta = modules["half_tool"]
    assert meta["slug"] == "half-tool"
    assert meta["mount"] == "/half-tool"
    assert meta["public"] is True
    assert meta["source"] == "filesystem"
    assert meta["path"] == tmp_path / "half_tool"


def test_non_mapping_manifest_is_skipped(tmp_path, caplog):
    _write_manifest(tmp_path, "listy", "- a\n- b\n")
    with caplog.at_level(logging.WARNING, logger="abacus.registry"):
        assert load_filesystem_modules(tmp_path) == {}
    assert "not a mapping" in caplog.text


class _FakeEntryPoint:
    def __init__(self, name, target):
        self.name = name
        self._target = target

    def load(self):
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


def _install_entry_points(monkeypatch, entries):
    def entry_points(group):
        assert group == registry.ENTRYPOINT_GROUP
        return entries

    monkeypatch.setattr(registry.metadata, "entry_points", entry_points)


def test_entry_point_modules(monkeypatch, caplog):
    _install_entry_points(
        monkeypatch,
        [
            _FakeEntryPoint("third", lambda: {"name": "third_tool", "public": 0}),
            _FakeEntryPoint("plain", {"name": "plain_tool", "mount": "/plain"}),
            _FakeEntryPoint("listy", lambda: ["not", "a", "mapping"]),
            _FakeEntryPoint("broken", ImportError("no such module")),
        ],
    )

    with caplog.at_level(logging.WARNING, logger="abacus.registry"):
        modules = load_entrypoint_modules()

    assert sorted(modules) == ["plain_tool", "third_tool"]
    third = modules["third_tool"]
    assert third["source"] == "entry_point"
    assert third["entry_point"] == "third"
    assert third["slug"] == "third-tool"
    assert third["public"] is False
    assert modules["plain_tool"]["mount"] == "/plain"
    assert "listy did not provide a manifest mapping" in caplog.text
    assert "Failed to load module entry point broken" in caplog.text


def test_filesystem_modules_win_over_entry_points(monkeypatch, tmp_path):
    _write_manifest(tmp_path, "half_tool", "name: half_tool\ntitle: Half\n")
    _install_entry_points(
        monkeypatch,
        [
            _FakeEntryPoint("half", lambda: {"name": "half_tool", "title": "Shadow"}),
            _FakeEntryPoint("extra", lambda: {"name": "extra_tool"}),
        ],
    )

    modules = load_modules(tmp_path)

    assert modules["half_tool"]["title"] == "Half"
    assert modules["half_tool"]["source"] == "filesystem"
    assert modules["extra_tool"]["source"] == "entry_point"


def test_flow_links_follow_manifests():
    links = resolve_flow_links("fraction_calc")
    assert links == [{"label": "Measure a shape", "href": "/geometry"}]

    links = resolve_flow_links("geometry-calc", base_url="https://calc.example/")
    assert links == [{"label": "Fraction Calculator", "href": "https://calc.example/fraction"}]

    assert resolve_flow_links("missing") == []


def test_bundled_modules_pass_lint():
    for meta in load_filesystem_modules().values():
        result = lint_module(meta)
        assert result["ok"], (meta["name"], result)


def test_lint_reports_missing_pieces(tmp_path):
    module_dir = _write_manifest(
        tmp_path,
        "broken",
        "name: broken\ntitle: Broken\npublic: true\nmount: broken/\n"
        "entrypoints:\n  api: no_colon_here\n",
    )
    result = lint_module({"name": "broken", "path": module_dir})

    assert not result["ok"]
    assert "missing field: version" in result["issues"]
    assert "mount must start with /" in result["issues"]
    assert "mount must not end with /" in result["issues"]
    assert "missing tool/app.py" in result["issues"]
    assert not result["entrypoint_ok"]


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ABACUS_SHARED_TEMPLATES", str(tmp_path))
    monkeypatch.setenv("ABACUS_MODULES_PATH", str(tmp_path / "mods"))
    monkeypatch.setenv("ABACUS_FLOW_BASE_URL", " ")
    monkeypatch.setenv("ABACUS_LOG_LEVEL", "debug")

    assert shared_templates_dir() == tmp_path
    assert modules_path() == tmp_path / "mods"
    assert flow_base_url() is None
    assert log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("ABACUS_LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING, logger="abacus.settings"):
        assert log_level() == logging.INFO
    assert "ABACUS_LOG_LEVEL" in caplog.text
