"""Tests for the lazy top-level API in routeaudit/__init__.py."""

import pytest

import routeaudit


class TestLazyImports:
    @pytest.mark.parametrize("name", routeaudit.__all__)
    def test_all_names_resolve(self, name: str) -> None:
        assert getattr(routeaudit, name) is not None

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            routeaudit.does_not_exist  # noqa: B018

    def test_run_audit_is_pipeline(self) -> None:
        from routeaudit.audit import run_audit

        assert routeaudit.run_audit is run_audit
