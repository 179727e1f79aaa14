# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.
"""Unit tests for ResolverEngine and the render pass."""

import errno

import pytest

from cprompt.core.errors import UnknownElementKindError
from cprompt.kernel.catalog import PromptCatalog
from cprompt.kernel.engine import ResolverEngine, render_prompt
from cprompt.kernel.resolver_registry import ResolverRegistry
from cprompt.kernel.system import UserRecord
from cprompt.protocols.elements import PromptElement, PromptElementKind as K, element
from cprompt.resolvers.base import BaseResolver
from cprompt.resolvers.static import LiteralResolver
from cprompt.user_config import PROMPT

EVERY_KIND = PromptCatalog(
    [PromptElement.literal("> ")]
    + [element(kind) for kind in K if kind not in (K.LITERAL, K.CUSTOM_STRFTIME)]
    + [PromptElement.strftime("%j")]
)


class ExhaustedResolver(BaseResolver):
    resolver_id = "exhausted"
    kinds = (K.USERNAME,)

    def resolve(self, element):
        raise MemoryError


class TestEndToEnd:
    def test_hi_bob(self, engine, fake_system):
        fake_system.users = {1000: UserRecord(name="bob", home="/home/bob")}
        catalog = PromptCatalog([
            PromptElement.literal("hi "),
            element(K.USERNAME),
            PromptElement.literal("!"),
        ])
        assert render_prompt(catalog, engine) == "hi bob!\n"

    def test_default_catalog(self, engine):
        line = render_prompt(PROMPT, engine)
        assert line == "\033[1;32malice@build01\033[1;34m ~/proj $\033[0m \n"

    def test_default_catalog_as_root(self, engine, fake_system):
        fake_system.euid = 0
        assert " ~/proj #" in render_prompt(PROMPT, engine)


class TestExplode:
    def test_one_fragment_per_element(self, engine):
        render_pass = engine.explode(EVERY_KIND)
        assert len(render_pass) == len(EVERY_KIND)

    def test_clock_failure_is_isolated(self, engine, fake_system):
        fake_system.error_names = None
        fake_system.clock_error = OSError(errno.EFAULT, "simulated")
        catalog = PromptCatalog([
            element(K.USERNAME),
            element(K.TIME_24H_SECONDS),
            element(K.SPACE),
            element(K.WEEKDAY_DATE),
            element(K.CWD_TILDE),
        ])
        texts = [f.text for f in engine.explode(catalog)]
        assert texts == ["alice", "!TIME!", " ", "!TIME!", "~/proj"]

    def test_every_failure_still_renders(self, engine, fake_system):
        fake_system.clock_error = OSError(errno.EFAULT, "simulated")
        fake_system.hostname_error = OSError(errno.EFAULT, "simulated")
        fake_system.tty = False
        fake_system.supports_process_paths = False
        fake_system.pw_error = OSError(errno.EIO, "simulated")
        fake_system.cwd_error = OSError(errno.ENOENT, "simulated")
        render_pass = engine.explode(EVERY_KIND)
        assert len(render_pass) == len(EVERY_KIND)
        for frag in render_pass:
            assert not frag.failed or (frag.text.startswith("!") and frag.text.endswith("!"))

    def test_memory_error_degrades_to_malloc(self, fake_system, prompt_settings):
        reg = ResolverRegistry()
        reg.register(LiteralResolver(fake_system, prompt_settings))
        reg.register(ExhaustedResolver(fake_system, prompt_settings))
        catalog = PromptCatalog([PromptElement.literal("a"), element(K.USERNAME)])
        fragments = ResolverEngine(reg).explode(catalog).fragments
        assert fragments[0].text == "a"
        assert fragments[1].text == "!MALLOC!"
        assert fragments[1].owned is False

    def test_unregistered_kind_raises(self):
        with pytest.raises(UnknownElementKindError):
            ResolverEngine(ResolverRegistry()).resolve(element(K.SPACE))


class TestRelease:
    def test_release_matches_owned_set(self, engine):
        render_pass = engine.explode(EVERY_KIND)
        owned = [f for f in render_pass if f.owned]
        borrowed = [f for f in render_pass if not f.owned]
        assert render_pass.release() == len(owned)
        assert all(f.released for f in owned)
        assert not any(f.released for f in borrowed)

    def test_release_includes_owned_failures(self, engine, fake_system):
        fake_system.cwd_error = OSError(errno.ENOENT, "simulated")
        render_pass = engine.explode(PromptCatalog([element(K.CWD_TILDE), element(K.SPACE)]))
        assert render_pass.owned_count == 1
        assert render_pass.release() == 1

    def test_release_twice_is_noop(self, engine):
        render_pass = engine.explode(EVERY_KIND)
        render_pass.release()
        assert render_pass.release() == 0

    def test_context_manager_releases(self, engine):
        with engine.explode(PROMPT) as render_pass:
            fragments = render_pass.fragments
        assert render_pass.released
        assert all(f.released for f in fragments if f.owned)

    def test_context_manager_releases_on_error(self, engine):
        with pytest.raises(RuntimeError):
            with engine.explode(PROMPT) as render_pass:
                raise RuntimeError("write failed")
        assert render_pass.released
