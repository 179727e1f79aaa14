# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.
"""Unit tests for fragment variants and the home directory outcome."""

import pytest

from cprompt.core.errors import FragmentReleaseError
from cprompt.protocols.fragments import (
    Borrowed, Failed, HomeDirOutcome, HomeDirectory, Owned, ResolvedFragment,
)


class TestFragmentOwnership:
    def test_variant_decides_ownership(self):
        assert Owned("x").owned is True
        assert Borrowed("x").owned is False
        assert Failed("!TIME!").owned is False
        assert Failed("!ENOENT!", diagnostic_owned=True).owned is True

    def test_only_failed_is_failed(self):
        assert Failed("!TIME!").failed is True
        assert Owned("x").failed is False
        assert Borrowed("x").failed is False

    def test_owned_release_once(self):
        frag = Owned("alice")
        frag.release()
        assert frag.released is True

    def test_double_release_raises(self):
        frag = Owned("alice")
        frag.release()
        with pytest.raises(FragmentReleaseError) as exc_info:
            frag.release()
        assert exc_info.value.code == "FRAGMENT_RELEASE"

    def test_borrowed_release_raises(self):
        with pytest.raises(FragmentReleaseError):
            Borrowed(" ").release()

    def test_borrowed_failure_release_raises(self):
        with pytest.raises(FragmentReleaseError):
            Failed("!NOPROC!").release()

    def test_owned_failure_release(self):
        frag = Failed("!EACCES!", diagnostic_owned=True)
        frag.release()
        assert frag.released is True


class TestHomeDirectory:
    @pytest.mark.parametrize("is_error,owned,expected", [
        (False, False, HomeDirOutcome.BORROWED_VALUE),
        (True, False, HomeDirOutcome.BORROWED_ERROR),
        (False, True, HomeDirOutcome.OWNED_VALUE),
        (True, True, HomeDirOutcome.OWNED_ERROR),
    ])
    def test_outcome_derived_from_flags(self, is_error, owned, expected):
        home = HomeDirectory.of("/home/alice", is_error=is_error, owned=owned)
        assert home.outcome == expected
        assert home.is_error is is_error
        assert home.owned is owned

    def test_from_failure_keeps_ownership(self):
        home = HomeDirectory.from_failure(Failed("!ERANGE!", diagnostic_owned=True))
        assert home.outcome == HomeDirOutcome.OWNED_ERROR

    def test_to_failure(self):
        home = HomeDirectory.of("!USERNOTFOUND!", is_error=True, owned=False)
        frag = home.to_failure()
        assert frag.text == "!USERNOTFOUND!"
        assert frag.failed and not frag.owned

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            ResolvedFragment("x")
