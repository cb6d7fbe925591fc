import os

from storefront.settings import BASE_DIR, Settings


def test_relative_folders_resolve_against_project_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = Settings(data_dir="data", admin_dir="admin")
    assert cfg.products_path == os.path.join(BASE_DIR, "data", "products.json")
    assert cfg.orders_path == os.path.join(BASE_DIR, "data", "orders.json")
    assert cfg.admin_path == os.path.join(BASE_DIR, "admin")
    assert not cfg.products_path.startswith(str(tmp_path))

def test_bundled_catalog_loads_from_any_working_directory(tmp_path, monkeypatch):
    from storefront.database import CatalogStore

    monkeypatch.chdir(tmp_path)
    cfg = Settings(data_dir="data")
    store = CatalogStore(cfg.products_path, str(tmp_path / "orders.json"))
    assert len(store.products) == 5

def test_absolute_paths_are_kept(tmp_path):
    cfg = Settings(data_dir=str(tmp_path), products_file=str(tmp_path / "elsewhere.json"))
    assert cfg.products_path == str(tmp_path / "elsewhere.json")
    assert cfg.orders_path == os.path.join(str(tmp_path), "orders.json")
