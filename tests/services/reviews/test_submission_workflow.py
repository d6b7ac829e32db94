import asyncio

import pytest

from sitereviews.domain.enums.submission_outcome import SubmissionOutcome
from sitereviews.domain.errors import AppendFailure, ReviewValidationError
from sitereviews.services.reviews.submission import ReviewForm, SubmissionWorkflow

NOW = "2025-03-04T10:15:00.000Z"


class FakeStore:
    def __init__(self, fail: bool = False):
        self.appended = []
        self.fail = fail

    async def append(self, record):
        self.appended.append(dict(record))
        if self.fail:
            raise ConnectionError("write rejected")
        return f"key-{len(self.appended)}"


def _form(name="Jane Doe", text="Great service", rating=5) -> ReviewForm:
    form = ReviewForm(name=name, text=text)
    if rating:
        form.selector.select(rating)
    return form


def _workflow(store, **kw) -> SubmissionWorkflow:
    return SubmissionWorkflow(store, clock=lambda: NOW, **kw)


def test_successful_submission_appends_once_and_resets():
    store = FakeStore()
    form = _form()
    form.selector.show_preview(2)

    result = asyncio.run(_workflow(store).submit(form))

    assert result.outcome is SubmissionOutcome.success
    assert result.ok and result.persisted
    assert store.appended == [{"name": "Jane Doe", "text": "Great service", "rating": 5, "date": NOW}]
    assert result.review.key == "key-1"
    assert result.review.date == NOW
    # local state reset
    assert form.name == "" and form.text == ""
    assert form.selector.committed == 0
    assert form.selector.preview is None


def test_submission_trims_values():
    store = FakeStore()
    result = asyncio.run(_workflow(store).submit(_form(name="  Jane Doe ", text=" Lovely night \n")))
    assert result.ok
    assert store.appended[0]["name"] == "Jane Doe"
    assert store.appended[0]["text"] == "Lovely night"


@pytest.mark.parametrize(
    "name,text,rating,missing",
    [
        ("", "Great service", 5, ["name"]),
        ("   ", "Great service", 5, ["name"]),
        ("Jane Doe", "", 5, ["text"]),
        ("Jane Doe", "Great service", 0, ["rating"]),
        ("", " ", 0, ["name", "text", "rating"]),
    ],
)
def test_invalid_submission_blocks_store_and_keeps_state(name, text, rating, missing):
    store = FakeStore()
    form = _form(name=name, text=text, rating=rating)

    result = asyncio.run(_workflow(store).submit(form))

    assert result.outcome is SubmissionOutcome.error
    assert isinstance(result.error, ReviewValidationError)
    assert result.missing == missing
    assert store.appended == []
    assert (form.name, form.text, form.selector.committed) == (name, text, rating)


def test_resubmission_is_a_new_review():
    store = FakeStore()
    wf = _workflow(store)

    async def scenario():
        await wf.submit(_form())
        await wf.submit(_form())

    asyncio.run(scenario())
    assert len(store.appended) == 2


def test_surfaced_append_failure_is_error_and_keeps_form():
    store = FakeStore(fail=True)
    form = _form()

    result = asyncio.run(_workflow(store, surface_append_failures=True).submit(form))

    assert result.outcome is SubmissionOutcome.error
    assert isinstance(result.error, AppendFailure)
    assert isinstance(result.error.cause, ConnectionError)
    assert len(store.appended) == 1
    assert form.name == "Jane Doe" and form.selector.committed == 5


def test_unchecked_append_reports_success_even_when_store_fails():
    store = FakeStore(fail=True)
    form = _form()
    wf = _workflow(store, surface_append_failures=False)

    async def scenario():
        res = await wf.submit(form)
        await wf.drain()
        return res

    result = asyncio.run(scenario())
    assert result.outcome is SubmissionOutcome.success
    assert result.persisted is False
    assert len(store.appended) == 1
    assert form.selector.committed == 0


def test_without_store_submission_still_validates_and_resets():
    form = _form()
    result = asyncio.run(_workflow(None).submit(form))
    assert result.ok
    assert result.persisted is False
    assert form.name == "" and form.selector.committed == 0

    bad = _form(rating=0)
    assert asyncio.run(_workflow(None).submit(bad)).outcome is SubmissionOutcome.error
