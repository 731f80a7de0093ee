"""
Step definitions for anchor resolution scenarios.

These scenarios check that anchors find their selection again after the
document is edited around it.
"""

from behave import given, then, when  # type: ignore[import-untyped]

from tome.anchors import Anchor, AnchorStatus
from tome.models import Range
from tome.text import normalize_eol


def _encoded(context) -> bytes:
    return normalize_eol(context.document).encode("utf-8")


def _nth_occurrence(data: bytes, needle: bytes, n: int) -> int:
    pos = -len(needle)
    for _ in range(n):
        pos = data.find(needle, pos + len(needle))
        assert pos != -1, f"{needle!r} occurs fewer than {n} times"
    return pos


# === Document Setup ===


@given("the document:")  # type: ignore[misc]
def step_given_document(context):
    """Store the document text from the scenario docstring."""
    context.document = context.text


@when("the document is edited to:")  # type: ignore[misc]
def step_when_document_edited(context):
    """Replace the document with a new version."""
    context.document = context.text


@when("the document is edited to use CRLF line endings")  # type: ignore[misc]
def step_when_document_crlf(context):
    """Rewrite every line ending as CR-LF."""
    context.document = normalize_eol(context.document).replace("\n", "\r\n")


# === Anchor Setup ===


@given('an anchor over "{target}"')  # type: ignore[misc]
def step_given_anchor(context, target):
    """Anchor the first occurrence of target."""
    step_given_anchor_occurrence(context, 1, target)


@given('an anchor over occurrence {n:d} of "{target}"')  # type: ignore[misc]
def step_given_anchor_occurrence(context, n, target):
    """Anchor the n-th occurrence of target."""
    needle = target.encode("utf-8")
    start = _nth_occurrence(_encoded(context), needle, n)
    context.anchor = Anchor.create(
        context.document, Range(start=start, end=start + len(needle))
    )


@given("an anchor over byte range {start:d} to {end:d}")  # type: ignore[misc]
def step_given_anchor_range(context, start, end):
    """Anchor an explicit byte range."""
    context.anchor = Anchor.create(context.document, Range(start=start, end=end))


# === Resolution Actions ===


@when("I resolve the anchor")  # type: ignore[misc]
def step_when_resolve(context):
    """Locate the anchor in the current document."""
    context.result = context.anchor.locate(context.document)


# === Assertions ===


@then('the anchor resolves to "{expected_text}"')  # type: ignore[misc]
def step_then_resolves_to(context, expected_text):
    """Assert the resolved range covers the expected text."""
    assert context.result.found, f"Expected a match but got {context.result.status}"
    actual = context.result.range.slice(_encoded(context)).decode("utf-8")
    assert actual == expected_text, f"Expected '{expected_text}' but got '{actual}'"


@then("the resolved range starts at byte {start:d}")  # type: ignore[misc]
def step_then_range_starts_at(context, start):
    """Assert the start of the resolved range."""
    actual = context.result.range.start
    assert actual == start, f"Expected start {start} but got {actual}"


@then("the match is exact")  # type: ignore[misc]
def step_then_exact(context):
    """Assert the surrounding context matched."""
    assert context.result.status == AnchorStatus.EXACT, (
        f"Expected exact but got {context.result.status}"
    )


@then("the match is a fallback")  # type: ignore[misc]
def step_then_fallback(context):
    """Assert only the target text matched."""
    assert context.result.status == AnchorStatus.FALLBACK, (
        f"Expected fallback but got {context.result.status}"
    )


@then("the anchor is lost")  # type: ignore[misc]
def step_then_lost(context):
    """Assert the anchor could not be resolved."""
    assert context.result.lost, f"Expected lost but got {context.result.status}"
    assert context.result.range is None
