"""Tests for application/resolve/resolver.py."""

import pytest

from packagelint.application.resolve.deferred import Deferred
from packagelint.application.resolve.resolver import (
    NameResolver,
    is_qualified_name,
    split_qualified_name,
)
from packagelint.domain.exceptions import InvalidConfigError, InvalidNameError, PluginImportError
from packagelint.infrastructure.module_loader import PluginRegistry
from tests.factories import (
    RecordingReporter,
    make_plugin_module,
    make_resolver,
    make_rule_definition,
    make_ruleset_definition,
)


class _CountingLoader:
    """Loader that records every module it is asked for."""

    def __init__(self, registry: PluginRegistry) -> None:
        self.registry = registry
        self.requested: list[str] = []

    async def load(self, module_id: str) -> object:
        self.requested.append(module_id)
        return await self.registry.load(module_id)


class TestSplitQualifiedName:
    """Tests for split_qualified_name."""

    def test_split(self) -> None:
        assert split_qualified_name("pkg:rule") == ("pkg", "rule")

    def test_dotted_module(self) -> None:
        assert split_qualified_name("my.plugin:some-rule") == ("my.plugin", "some-rule")

    @pytest.mark.parametrize("name", ["badname", ":rule", "pkg:", "a:b:c", ""])
    def test_invalid(self, name: str) -> None:
        assert not is_qualified_name(name)
        with pytest.raises(InvalidNameError) as exc_info:
            split_qualified_name(name)
        assert exc_info.value.name == name

    def test_kind_in_message(self) -> None:
        with pytest.raises(InvalidNameError, match="Reporter 'badname'"):
            split_qualified_name("badname", "reporter")


class TestResolveRule:
    """Tests for NameResolver.resolve_rule."""

    @pytest.mark.asyncio
    async def test_resolves_rule(self) -> None:
        definition = make_rule_definition("rule")
        resolver = make_resolver(pkg=make_plugin_module(rules={"rule": definition}))
        assert await resolver.resolve_rule("pkg:rule") is definition

    @pytest.mark.asyncio
    async def test_resolves_ruleset(self) -> None:
        ruleset = make_ruleset_definition("set", "pkg:rule")
        resolver = make_resolver(pkg=make_plugin_module(rules={"set": ruleset}))
        assert await resolver.resolve_rule("pkg:set") is ruleset

    @pytest.mark.asyncio
    async def test_invalid_name_before_loading(self) -> None:
        loader = _CountingLoader(PluginRegistry())
        with pytest.raises(InvalidNameError, match="'badname'"):
            await NameResolver(loader).resolve_rule("badname")
        assert loader.requested == []

    @pytest.mark.asyncio
    async def test_module_not_loadable(self) -> None:
        with pytest.raises(PluginImportError, match="Package 'pkg' cannot be loaded") as exc_info:
            await make_resolver().resolve_rule("pkg:rule")
        assert exc_info.value.module_id == "pkg"

    @pytest.mark.asyncio
    async def test_export_missing(self) -> None:
        resolver = make_resolver(pkg=make_plugin_module())
        with pytest.raises(PluginImportError, match="does not provide any packagelint rules"):
            await resolver.resolve_rule("pkg:rule")

    @pytest.mark.asyncio
    async def test_export_not_mapping(self) -> None:
        resolver = make_resolver(pkg=make_plugin_module(rules=["rule"]))  # type: ignore[arg-type]
        with pytest.raises(PluginImportError, match="does not provide any valid packagelint rules"):
            await resolver.resolve_rule("pkg:rule")

    @pytest.mark.asyncio
    async def test_key_missing(self) -> None:
        resolver = make_resolver(pkg=make_plugin_module(rules={}))
        with pytest.raises(PluginImportError, match="does not provide rule 'rule'"):
            await resolver.resolve_rule("pkg:rule")

    @pytest.mark.asyncio
    async def test_not_a_definition(self) -> None:
        resolver = make_resolver(pkg=make_plugin_module(rules={"rule": "nope"}))
        with pytest.raises(PluginImportError, match="not a rule or ruleset definition"):
            await resolver.resolve_rule("pkg:rule")


class TestDeferredExports:
    """Tests for deferred export resolution."""

    @pytest.mark.asyncio
    async def test_deferred_entry(self) -> None:
        definition = make_rule_definition("rule")
        module = make_plugin_module(rules={"rule": Deferred(lambda: definition)})
        assert await make_resolver(pkg=module).resolve_rule("pkg:rule") is definition

    @pytest.mark.asyncio
    async def test_deferred_export(self) -> None:
        definition = make_rule_definition("rule")
        exports = Deferred(lambda: {"rule": definition})
        module = make_plugin_module(rules=exports)  # type: ignore[arg-type]
        assert await make_resolver(pkg=module).resolve_rule("pkg:rule") is definition

    @pytest.mark.asyncio
    async def test_async_deferred_entry(self) -> None:
        definition = make_rule_definition("rule")

        async def load() -> object:
            return definition

        module = make_plugin_module(rules={"rule": Deferred(load)})
        assert await make_resolver(pkg=module).resolve_rule("pkg:rule") is definition

    @pytest.mark.asyncio
    async def test_failing_deferred_export(self) -> None:
        def load() -> object:
            raise ImportError("lazy import failed")

        module = make_plugin_module(rules=Deferred(load))  # type: ignore[arg-type]
        with pytest.raises(PluginImportError, match="ImportError: lazy import failed") as exc_info:
            await make_resolver(pkg=module).resolve_rule("pkg:rule")
        assert exc_info.value.module_id == "pkg"
        assert isinstance(exc_info.value.__cause__, ImportError)

    @pytest.mark.asyncio
    async def test_failing_async_deferred_entry(self) -> None:
        async def load() -> object:
            raise RuntimeError("broken")

        module = make_plugin_module(rules={"rule": Deferred(load)})
        with pytest.raises(PluginImportError, match="failed to load rule 'rule'"):
            await make_resolver(pkg=module).resolve_rule("pkg:rule")

    @pytest.mark.asyncio
    async def test_failing_deferred_reporter(self) -> None:
        def load() -> object:
            raise ImportError("no reporter")

        module = make_plugin_module(reporters={"recorder": Deferred(load)})
        with pytest.raises(InvalidConfigError, match="failed to load reporter 'recorder'"):
            await make_resolver(pkg=module).resolve_reporter("pkg:recorder")


class TestResolveReporter:
    """Tests for NameResolver.resolve_reporter."""

    @pytest.mark.asyncio
    async def test_resolves_class(self) -> None:
        module = make_plugin_module(reporters={"recorder": RecordingReporter})
        resolver = make_resolver(pkg=module)
        assert await resolver.resolve_reporter("pkg:recorder") is RecordingReporter

    @pytest.mark.asyncio
    async def test_reporters_use_separate_export(self) -> None:
        module = make_plugin_module(rules={"recorder": make_rule_definition("recorder")})
        with pytest.raises(PluginImportError, match="does not provide any packagelint reporters"):
            await make_resolver(pkg=module).resolve_reporter("pkg:recorder")

    @pytest.mark.asyncio
    async def test_not_callable(self) -> None:
        module = make_plugin_module(reporters={"recorder": 42})
        with pytest.raises(PluginImportError, match="not callable"):
            await make_resolver(pkg=module).resolve_reporter("pkg:recorder")

    @pytest.mark.asyncio
    async def test_invalid_name(self) -> None:
        with pytest.raises(InvalidNameError, match="not a valid reporter name"):
            await make_resolver().resolve_reporter("recorder")

    def test_loader_required(self) -> None:
        with pytest.raises(TypeError, match="loader must not be None"):
            NameResolver(None)  # type: ignore[arg-type]
