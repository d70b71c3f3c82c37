"""
Step definitions for hierarchy rendering.

Feature: hierarchy_rendering.feature

Implements BDD steps for:
- Loading triples from a docstring
- Rendering with filter and depth settings
- Parse errors, unknown predicates and unknown filters
"""

import pytest
from pytest_bdd import given, when, then, parsers

from rdf_hierarchy import (
    HierarchyConfig,
    HierarchyService,
    ParseError,
    UnknownFilterSelector,
)


# ─────────────────────────────────────────────────────────────────────────────
# Shared Context
# ─────────────────────────────────────────────────────────────────────────────

class HierarchyContext:
    """Shared test context across steps."""

    def __init__(self):
        self.lines: list[str] = []
        self.service: HierarchyService | None = None
        self.output: list[str] = []
        self.error: Exception | None = None


@pytest.fixture
def ctx():
    """Fresh test context for each scenario."""
    return HierarchyContext()


def _render(ctx, **config):
    try:
        ctx.service = HierarchyService(HierarchyConfig(**config))
        hierarchy = ctx.service.load_lines(ctx.lines)
        ctx.output = ctx.service.render(hierarchy)
    except (ParseError, UnknownFilterSelector) as e:
        ctx.error = e
        ctx.output = []


# ─────────────────────────────────────────────────────────────────────────────
# Given
# ─────────────────────────────────────────────────────────────────────────────

@given("the triples:")
def given_triples(ctx, docstring):
    ctx.lines = docstring.splitlines()


@given(parsers.parse('the additional triple "{triple}"'))
def given_additional_triple(ctx, triple):
    ctx.lines.append(triple)


# ─────────────────────────────────────────────────────────────────────────────
# When
# ─────────────────────────────────────────────────────────────────────────────

@when("the hierarchy is rendered")
def when_rendered(ctx):
    _render(ctx)


@when(parsers.parse("the hierarchy is rendered with maximum depth {depth:d}"))
def when_rendered_with_depth(ctx, depth):
    _render(ctx, max_depth=depth)


@when(parsers.parse('the hierarchy is rendered with the "{name}" filter'))
def when_rendered_with_filter(ctx, name):
    _render(ctx, filter_name=name)


# ─────────────────────────────────────────────────────────────────────────────
# Then
# ─────────────────────────────────────────────────────────────────────────────

@then("the output is:")
def then_output_is(ctx, docstring):
    assert ctx.error is None
    assert ctx.output == docstring.splitlines()


@then(parsers.parse('the output contains "{line}"'))
def then_output_contains(ctx, line):
    assert line in ctx.output


@then(parsers.parse("{count:d} unknown predicate is reported on line {line_number:d}"))
def then_unknown_predicate(ctx, count, line_number):
    diagnostics = ctx.service.diagnostics
    assert len(diagnostics) == count
    assert diagnostics[0].line_number == line_number


@then(parsers.parse("a parse error is raised for line {line_number:d}"))
def then_parse_error(ctx, line_number):
    assert isinstance(ctx.error, ParseError)
    assert ctx.error.line_number == line_number


@then("nothing is printed")
def then_nothing_printed(ctx):
    assert ctx.output == []


@then(parsers.parse('the filter "{name}" is rejected'))
def then_filter_rejected(ctx, name):
    assert isinstance(ctx.error, UnknownFilterSelector)
    assert ctx.error.selector == name
