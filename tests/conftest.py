"""Pytest configuration for the planarityharness test suite.

Hypothesis profiles:
- dev: local runs, 500 examples per property
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with Hypothesis progress output

HYPOTHESIS_PROFILE overrides the automatic choice, e.g.
``HYPOTHESIS_PROFILE=verbose pytest tests/``.

Tests marked ``fuzz`` sweep whole graph families through every selector and
are skipped unless requested with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    """Explicit HYPOTHESIS_PROFILE, then CI detection, then "dev"."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Exhaustive graph sweeps (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="Graph sweep - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
