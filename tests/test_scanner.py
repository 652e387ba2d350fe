import sys
import textwrap
import zipfile

import pytest

from nano_ioc import Artifact, ImportlibTypeLoader, NamespaceNotFoundError, TypeLoadError, walk
from nano_ioc.scanner import is_nested


class FakeLoader:
    """In-memory TypeLoader: a tree of namespaces and the classes in each module."""

    def __init__(self, tree, types=None, broken=()):
        self.tree = tree
        self.types = types or {}
        self.broken = set(broken)
        self.loaded = []

    def list_artifacts(self, namespace):
        return self.tree.get(namespace)

    def load_types(self, qualified_name):
        self.loaded.append(qualified_name)
        if qualified_name in self.broken:
            raise ImportError(f"cannot import {qualified_name}")
        return self.types.get(qualified_name, [])


class Alpha:
    pass


class Beta:
    pass


class Holder:
    class Nested:
        pass


def test_walk_builds_qualified_names_from_nested_namespaces():
    loader = FakeLoader(
        tree={
            "app": [Artifact("beta", False), Artifact("core", True)],
            "app.core": [Artifact("alpha", False)],
        },
        types={"app.beta": [Beta], "app.core.alpha": [Alpha]},
    )

    found = dict(walk("app", loader))

    assert set(found) == {"app.beta.Beta", "app.core.alpha.Alpha"}
    assert found["app.beta.Beta"].cls is Beta
    assert loader.loaded == ["app", "app.beta", "app.core", "app.core.alpha"]


def test_walk_skips_nested_classes():
    loader = FakeLoader(tree={"app": []}, types={"app": [Holder, Holder.Nested]})

    names = [qn for qn, _ in walk("app", loader)]

    assert names == ["app.Holder"]


def test_walk_is_lazy():
    loader = FakeLoader(tree={"app": [Artifact("mod", False)]})

    gen = walk("app", loader)

    assert loader.loaded == []
    list(gen)
    assert loader.loaded == ["app", "app.mod"]


def test_walk_missing_namespace_raises():
    with pytest.raises(NamespaceNotFoundError) as exc:
        list(walk("nope", FakeLoader(tree={})))
    assert exc.value.namespace == "nope"


def test_walk_load_failure_is_fatal_and_wraps_cause():
    loader = FakeLoader(
        tree={"app": [Artifact("bad", False), Artifact("good", False)]},
        broken={"app.bad"},
    )

    with pytest.raises(TypeLoadError) as exc:
        list(walk("app", loader))

    assert exc.value.qualified_name == "app.bad"
    assert isinstance(exc.value.cause, ImportError)
    assert "app.good" not in loader.loaded


def test_walk_child_listing_failure_is_wrapped():
    class FailingListing(FakeLoader):
        def list_artifacts(self, namespace):
            if namespace == "app.core":
                raise OSError("unreadable")
            return super().list_artifacts(namespace)

    loader = FailingListing(tree={"app": [Artifact("core", True)]})

    with pytest.raises(TypeLoadError) as exc:
        list(walk("app", loader))

    assert exc.value.qualified_name == "app.core"
    assert isinstance(exc.value.cause, OSError)


def test_is_nested():
    assert is_nested(Holder) is False
    assert is_nested(Holder.Nested) is True

    def factory():
        class Local:
            pass
        return Local

    assert is_nested(factory()) is True


class TestImportlibTypeLoader:
    def test_list_artifacts_of_package(self):
        artifacts = ImportlibTypeLoader().list_artifacts("sample_shop")
        assert Artifact("services", True) in artifacts
        assert Artifact("repositories", False) in artifacts
        assert [a.name for a in artifacts] == sorted(a.name for a in artifacts)

    def test_list_artifacts_of_plain_module_is_empty(self):
        assert ImportlibTypeLoader().list_artifacts("sample_shop.repositories") == []

    def test_list_artifacts_of_missing_namespace_is_none(self):
        loader = ImportlibTypeLoader()
        assert loader.list_artifacts("no_such_package_anywhere") is None
        assert loader.list_artifacts("no_such_package_anywhere.child") is None
        assert loader.list_artifacts("sample_shop.no_such_module") is None

    def test_list_artifacts_under_broken_parent_raises(self):
        with pytest.raises(ModuleNotFoundError) as exc:
            ImportlibTypeLoader().list_artifacts("dep_shop.app")
        assert exc.value.name == "some_missing_thirdparty_lib"

    def test_load_types_returns_only_classes_defined_in_module(self):
        from sample_shop.repositories import MyShopRepository
        from sample_shop.services.orders import OrderService

        types = ImportlibTypeLoader().load_types("sample_shop.services.orders")

        assert OrderService in types
        assert MyShopRepository not in types


def test_walk_real_package():
    names = {qn for qn, _ in walk("sample_shop")}

    assert "sample_shop.ShopSettings" in names
    assert "sample_shop.repositories.MyShopRepository" in names
    assert "sample_shop.repositories.PlainHelper" in names
    assert "sample_shop.services.orders.OrderService" in names
    assert "sample_shop.services.checkout.Clock" in names
    assert not any("Inner" in n or "Local" in n for n in names)


def test_walk_real_package_with_broken_module():
    with pytest.raises(TypeLoadError) as exc:
        list(walk("broken_shop"))
    assert exc.value.qualified_name == "broken_shop.b_broken"
    assert isinstance(exc.value.cause, RuntimeError)
    assert isinstance(exc.value.__cause__, RuntimeError)


@pytest.fixture
def zipped_package(tmp_path, monkeypatch):
    archive = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("zipped_shop/__init__.py", "")
        zf.writestr("zipped_shop/parts/__init__.py", "")
        zf.writestr(
            "zipped_shop/parts/engine.py",
            textwrap.dedent(
                """
                from nano_ioc import component

                @component
                class Engine:
                    pass
                """
            ),
        )
    monkeypatch.syspath_prepend(str(archive))
    yield "zipped_shop"
    for name in [m for m in sys.modules if m == "zipped_shop" or m.startswith("zipped_shop.")]:
        sys.modules.pop(name, None)


def test_walk_package_inside_zip_archive(zipped_package):
    names = [qn for qn, _ in walk(zipped_package)]
    assert names == ["zipped_shop.parts.engine.Engine"]
