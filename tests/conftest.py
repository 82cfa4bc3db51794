"""Shared test fixtures for the DOL compiler."""

from __future__ import annotations

import pytest

from dolc.compiler.compiler import DolCompiler
from dolc.core.config import set_config
from dolc.runtime.lifecycle import shutdown

COUNTER_SOURCE = """\
// A small counter spirit
spirit Counter {
    fn increment() {
        count = count + 1
    }

    pub fn reset() {
        count = 0
    }
}

fn helper() {}
"""

NESTED_SOURCE = """\
spirit Outer {
    spirit Inner {
        fn deep() {}
    }
    fn shallow() {}
}
"""


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Undo lifecycle and config changes made by a test."""
    yield
    shutdown()
    set_config(None)


@pytest.fixture
def compiler() -> DolCompiler:
    return DolCompiler()


@pytest.fixture
def counter_source() -> str:
    return COUNTER_SOURCE


@pytest.fixture
def nested_source() -> str:
    return NESTED_SOURCE


@pytest.fixture
def sample_sources() -> list[str]:
    """A spread of well-formed and malformed inputs for property checks."""
    return [
        "",
        "\n\n",
        "spirit Foo {\n  fn bar() {}\n}\n",
        "fn standalone() {}\n",
        "spirit Broken {\n",
        "fn f() {}\n}\n",
        "hello world",
        "// only a comment",
        "spirit Empty {}",
        "fn \n",
        COUNTER_SOURCE,
        NESTED_SOURCE,
        "spirit A\n{\n  fn x() {\n}\n",
    ]
