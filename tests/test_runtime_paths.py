from __future__ import annotations

from pathlib import Path

from themecolors import runtime_paths


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "themecolors"
    assert (root / "core").exists()


def test_source_data_paths_resolve() -> None:
    assert runtime_paths.data_path("color_defaults.yaml").parent.name == "data"
    assert runtime_paths.builtin_catalog_path().is_file()


def test_frozen_prefers_meipass_themecolors_dir(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    package_root = bundle_root / "themecolors"
    package_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == package_root
    assert runtime_paths.builtin_catalog_path() == package_root / "data" / "color_defaults.yaml"


def test_frozen_falls_back_to_meipass_when_themecolors_missing(tmp_path: Path, monkeypatch) -> None:
    bundle_root = tmp_path / "bundle"
    bundle_root.mkdir(parents=True)
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.setattr(runtime_paths.sys, "_MEIPASS", str(bundle_root), raising=False)

    assert runtime_paths.package_root() == bundle_root


def test_catalog_path_honours_environment_override(tmp_path: Path, monkeypatch) -> None:
    custom = tmp_path / "my_defaults.yaml"
    monkeypatch.setenv(runtime_paths.CATALOG_ENV_VAR, str(custom))
    assert runtime_paths.builtin_catalog_path() == custom

    monkeypatch.setenv(runtime_paths.CATALOG_ENV_VAR, "  ")
    assert runtime_paths.builtin_catalog_path() == runtime_paths.data_path("color_defaults.yaml")


def test_frozen_without_meipass_uses_source_layout(monkeypatch) -> None:
    monkeypatch.setattr(runtime_paths.sys, "frozen", True, raising=False)
    monkeypatch.delattr(runtime_paths.sys, "_MEIPASS", raising=False)
    assert runtime_paths.package_root().name == "themecolors"
