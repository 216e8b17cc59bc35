"""Tests for the hypothesis_recurse package __init__.py module.

Covers the package entry point:
- Fallback version when package metadata is unavailable
- __all__ integrity: every exported name is accessible
- Re-exports resolve to the defining modules
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch


def test_version_fallback_when_package_not_installed() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback.

    When importlib.metadata.version() raises PackageNotFoundError (e.g. a
    development checkout without a pip install), __version__ defaults to
    '0.0.0+dev'.
    """
    saved_modules = {
        name: module
        for name, module in sys.modules.items()
        if name == "hypothesis_recurse" or name.startswith("hypothesis_recurse.")
    }

    try:
        for module_name in list(saved_modules.keys()):
            if module_name in sys.modules:
                del sys.modules[module_name]

        mock_version = MagicMock(side_effect=PackageNotFoundError("hypothesis-recurse"))

        with patch("importlib.metadata.version", mock_version):
            import hypothesis_recurse

            assert hypothesis_recurse.__version__ == "0.0.0+dev", (
                "Expected fallback version '0.0.0+dev' when package not found, "
                f"got {hypothesis_recurse.__version__!r}"
            )
    finally:
        all_modules = [
            name
            for name in sys.modules
            if name == "hypothesis_recurse" or name.startswith("hypothesis_recurse.")
        ]
        for module_name in all_modules:
            del sys.modules[module_name]

        sys.modules.update(saved_modules)


class TestInitModuleExports:
    """__all__ integrity: every exported name must be accessible from hypothesis_recurse."""

    def test_all_exports_are_accessible(self) -> None:
        """Every name in hypothesis_recurse.__all__ resolves without error."""
        import hypothesis_recurse

        for name in hypothesis_recurse.__all__:
            assert hasattr(hypothesis_recurse, name), (
                f"hypothesis_recurse.__all__ contains {name!r} but "
                f"hypothesis_recurse.{name} raises AttributeError"
            )

    def test_all_exports_count(self) -> None:
        """__all__ contains exactly the expected number of public exports.

        Tripwire: update the count alongside any __all__ change.
        """
        import hypothesis_recurse

        assert len(hypothesis_recurse.__all__) == 10

    def test_version_is_string(self) -> None:
        import hypothesis_recurse

        assert isinstance(hypothesis_recurse.__version__, str)
        assert hypothesis_recurse.__version__

    def test_reexports_are_defining_objects(self) -> None:
        """Top-level names are the objects defined in the submodules."""
        import hypothesis_recurse
        from hypothesis_recurse.core import errors, probability
        from hypothesis_recurse.registry import StrategySet
        from hypothesis_recurse.strategies import recursive, weighted

        assert hypothesis_recurse.StrategySet is StrategySet
        assert hypothesis_recurse.mutually_recursive is recursive.mutually_recursive
        assert hypothesis_recurse.MutuallyRecursiveStrategy is recursive.MutuallyRecursiveStrategy
        assert hypothesis_recurse.weighted_one_of is weighted.weighted_one_of
        assert hypothesis_recurse.branch_probabilities is probability.branch_probabilities
        assert hypothesis_recurse.float_to_weight is probability.float_to_weight
        assert hypothesis_recurse.UnboundedRecursionError is errors.UnboundedRecursionError

    def test_errors_share_base_class(self) -> None:
        """Package exceptions derive from RecurseError."""
        from hypothesis_recurse import (
            RecurseError,
            StrategySetInvariantError,
            UnboundedRecursionError,
        )

        assert issubclass(StrategySetInvariantError, RecurseError)
        assert issubclass(UnboundedRecursionError, RecurseError)
