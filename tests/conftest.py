"""Pytest configuration for the utf8parse test suite.

Hypothesis profiles (select with HYPOTHESIS_PROFILE, or CI=true for "ci"):
- dev: 500 examples per property; the default when working locally
- ci: 50 derandomized examples with no deadline, so shared runners with
  slow first calls into unicodedata do not flake
- verbose: 100 examples, printing each generated buffer

Fuzz tests:
Classes marked @pytest.mark.fuzz drive every parser operation over arbitrary
(mostly malformed) byte strings. They are skipped in the normal run and
selected with `pytest -m fuzz`, or by naming their module on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Modules whose fuzz classes run when the module is named explicitly
_FUZZ_MODULES = ("test_parser_hypothesis",)

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_PHASES)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    deadline=None,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile: HYPOTHESIS_PROFILE, then CI=true, then dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: arbitrary-bytes parser runs (skipped unless selected with -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless -m fuzz is given or their module is named."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    args = [str(arg) for arg in config.invocation_params.args]
    if any(module in arg for arg in args for module in _FUZZ_MODULES):
        return

    skip_fuzz = pytest.mark.skip(reason="arbitrary-bytes fuzz run; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
