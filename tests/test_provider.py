"""Tests for the npm package dependency provider."""

import asyncio
import os
from unittest.mock import AsyncMock, patch

import pytest

from npmgraph.graph.models import DependencyDescriptor, GraphNode
from npmgraph.graph.provider import NodePackageDependencies
from npmgraph.utils.exceptions import ManifestNotFoundError, ModuleResolutionError


@pytest.fixture
def project(tmp_path, make_package):
    """Root project with one production and one dev dependency installed.

    ``a`` depends on ``b``, lists ``c`` (installed) and ``x`` (missing) as dev
    dependencies and ``d`` (installed) and ``y`` (missing) as optional ones.
    """
    root = make_package(
        tmp_path / "project",
        "root-project",
        "0.0.1",
        dependencies={"a": "^1.0.0"},
        devDependencies={"tooling": "*"},
    )
    modules = root / "node_modules"
    make_package(
        modules / "a",
        "a",
        "1.2.3",
        dependencies={"b": "*"},
        devDependencies={"c": "*", "x": "*"},
        optionalDependencies={"d": "*", "y": "*"},
    )
    make_package(modules / "b", "b", "2.0.0")
    make_package(modules / "c", "c", "3.0.0")
    make_package(modules / "d", "d", "4.0.0")
    make_package(modules / "tooling", "tooling", "5.0.0")
    return root


def run(coro):
    return asyncio.run(coro)


class TestGetRootNode:

    def test_root_node(self, project):
        provider = NodePackageDependencies(cwd=str(project))

        root = run(provider.get_root_node())

        assert root.id == "root-project"
        assert root.version == "0.0.1"
        assert root.path == str(project)
        assert root.optional is False
        assert root.pending_dependencies == (
            DependencyDescriptor("a", optional=False),
            DependencyDescriptor("tooling", optional=False),
        )

    def test_root_configuration_is_passed_through(self, project):
        configuration = {"specVersion": "3.0", "type": "application"}
        provider = NodePackageDependencies(
            cwd=str(project),
            root_configuration=configuration,
            root_config_path="custom.yaml",
        )

        root = run(provider.get_root_node())

        assert root.configuration is configuration
        assert root.config_path == "custom.yaml"

    def test_root_found_from_subdirectory(self, project):
        subdir = project / "src" / "components"
        subdir.mkdir(parents=True)

        root = run(NodePackageDependencies(cwd=str(subdir)).get_root_node())

        assert root.id == "root-project"
        assert root.path == str(project)

    def test_root_path_is_canonical(self, project, tmp_path):
        link = tmp_path / "linked-project"
        os.symlink(project, link)

        root = run(NodePackageDependencies(cwd=str(link)).get_root_node())

        assert root.path == str(project)

    def test_root_without_name_or_version(self, tmp_path):
        (tmp_path / "package.json").write_text('{"private": true}')

        root = run(NodePackageDependencies(cwd=str(tmp_path)).get_root_node())

        assert root.id is None
        assert root.version is None
        assert root.path == str(tmp_path)
        assert root.pending_dependencies == ()

    def test_missing_root_manifest(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()

        with pytest.raises(ManifestNotFoundError) as exc_info:
            run(NodePackageDependencies(cwd=str(empty)).get_root_node())

        assert str(empty) in str(exc_info.value)


class TestExpand:

    def test_expand_root(self, project):
        provider = NodePackageDependencies(cwd=str(project))
        root = run(provider.get_root_node())

        children = run(provider.expand(root))

        assert [(c.id, c.version, c.optional) for c in children] == [
            ("a", "1.2.3", False),
            ("tooling", "5.0.0", False),
        ]
        assert children[0].path == str(project / "node_modules" / "a")
        assert children[0].configuration is None
        assert children[0].config_path is None

    def test_nested_node_classification(self, project):
        provider = NodePackageDependencies(cwd=str(project))
        root = run(provider.get_root_node())

        a_node = run(provider.expand(root))[0]

        assert a_node.pending_dependencies == (
            DependencyDescriptor("b", optional=False),
            DependencyDescriptor("c", optional=True),
            DependencyDescriptor("d", optional=False),
        )

    def test_expand_nested_node(self, project):
        provider = NodePackageDependencies(cwd=str(project))
        root = run(provider.get_root_node())
        a_node = run(provider.expand(root))[0]

        children = run(provider.expand(a_node))

        assert [(c.id, c.optional) for c in children] == [
            ("b", False),
            ("c", True),
            ("d", False),
        ]
        assert all(c.pending_dependencies == () for c in children)

    def test_missing_required_dependency_fails(self, tmp_path, make_package):
        root = make_package(tmp_path, "root", dependencies={"a": "*"})
        make_package(root / "node_modules" / "a", "a", dependencies={"e": "*"})
        provider = NodePackageDependencies(cwd=str(root))
        a_node = run(provider.expand(run(provider.get_root_node())))[0]

        with pytest.raises(ModuleResolutionError) as exc_info:
            run(provider.expand(a_node))

        assert exc_info.value.module_name == "e"

    def test_missing_root_dev_dependency_fails(self, tmp_path, make_package):
        root = make_package(tmp_path, "root", devDependencies={"lint": "*"})
        provider = NodePackageDependencies(cwd=str(root))
        root_node = run(provider.get_root_node())

        with pytest.raises(ModuleResolutionError):
            run(provider.expand(root_node))

    def test_broken_dependency_manifest_fails(self, tmp_path, make_package):
        root = make_package(tmp_path, "root", dependencies={"a": "*"})
        (root / "node_modules" / "a").mkdir(parents=True)
        (root / "node_modules" / "a" / "package.json").write_text("{broken")
        provider = NodePackageDependencies(cwd=str(root))

        with pytest.raises(ManifestNotFoundError):
            run(provider.expand(run(provider.get_root_node())))

    def test_expand_without_pending_dependencies(self, tmp_path):
        node = GraphNode(id="leaf", version="1.0.0", path=str(tmp_path / "nowhere"))
        provider = NodePackageDependencies(cwd=str(tmp_path))

        with patch("npmgraph.graph.provider.resolve_module_path", new=AsyncMock()) as resolver, \
                patch("npmgraph.graph.provider.read_manifest", new=AsyncMock()) as reader:
            assert run(provider.expand(node)) == []

        resolver.assert_not_called()
        reader.assert_not_called()

    def test_symlinked_and_direct_install_share_path(self, tmp_path, make_package):
        root = make_package(tmp_path / "app", "app", dependencies={"one": "*", "two": "*"})
        modules = root / "node_modules"
        one = make_package(modules / "one", "one", dependencies={"shared": "*"})
        two = make_package(modules / "two", "two", dependencies={"shared": "*"})
        installed = make_package(one / "node_modules" / "shared", "shared")
        (two / "node_modules").mkdir()
        os.symlink(installed, two / "node_modules" / "shared")

        provider = NodePackageDependencies(cwd=str(root))
        one_node, two_node = run(provider.expand(run(provider.get_root_node())))
        shared_direct = run(provider.expand(one_node))[0]
        shared_linked = run(provider.expand(two_node))[0]

        assert shared_direct.path == str(installed)
        assert shared_linked.path == shared_direct.path

    def test_symlinks_into_shared_store_share_path(self, tmp_path, make_package):
        store = make_package(tmp_path / "store" / "shared", "shared")
        root = make_package(tmp_path / "app", "app", dependencies={"one": "*", "two": "*"})
        modules = root / "node_modules"
        one = make_package(modules / "one", "one", dependencies={"shared": "*"})
        two = make_package(modules / "two", "two", dependencies={"shared": "*"})
        (one / "node_modules").mkdir()
        (two / "node_modules").mkdir()
        os.symlink(store, one / "node_modules" / "shared")
        os.symlink(one / "node_modules" / "shared", two / "node_modules" / "shared")

        provider = NodePackageDependencies(cwd=str(root))
        one_node, two_node = run(provider.expand(run(provider.get_root_node())))
        shared_from_one = run(provider.expand(one_node))[0]
        shared_from_two = run(provider.expand(two_node))[0]

        assert shared_from_one.path == shared_from_two.path == str(store)

    def test_no_caching_between_expansions(self, project):
        provider = NodePackageDependencies(cwd=str(project))
        root = run(provider.get_root_node())

        first = run(provider.expand(root))
        (project / "node_modules" / "a" / "package.json").write_text(
            '{"name": "a", "version": "9.9.9"}'
        )
        second = run(provider.expand(root))

        assert first[0].version == "1.2.3"
        assert second[0].version == "9.9.9"
