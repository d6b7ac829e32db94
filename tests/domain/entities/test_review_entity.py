import pytest

from sitereviews.domain.entities.review import Review

DATE = "2025-03-04T10:15:00.000Z"


def test_review_trims_fields():
    r = Review(name="  Jane Doe ", text=" Great service\n", rating=5, date=DATE)
    assert r.name == "Jane Doe"
    assert r.text == "Great service"
    assert r.key is None


def test_review_is_immutable():
    r = Review(name="Jane", text="ok", rating=3, date=DATE)
    with pytest.raises(Exception):
        r.rating = 4  # type: ignore[misc]


@pytest.mark.parametrize("bad", [0, 6, -1])
def test_review_rating_out_of_bounds(bad):
    with pytest.raises(ValueError):
        Review(name="Jane", text="ok", rating=bad, date=DATE)


@pytest.mark.parametrize("bad", [4.5, "5", True, None])
def test_review_rating_must_be_int(bad):
    with pytest.raises(ValueError):
        Review(name="Jane", text="ok", rating=bad, date=DATE)  # type: ignore[arg-type]


@pytest.mark.parametrize("field", ["name", "text", "date"])
def test_review_requires_non_blank_fields(field):
    kwargs = dict(name="Jane", text="ok", rating=3, date=DATE)
    kwargs[field] = "   "
    with pytest.raises(ValueError):
        Review(**kwargs)


def test_review_record_wire_shape():
    r = Review(name="Jane Doe", text="Great service", rating=5, date=DATE, key="-Nabc")
    assert r.to_record() == {"name": "Jane Doe", "text": "Great service", "rating": 5, "date": DATE}

    back = Review.from_record(r.to_record(), key="-Nabc")
    assert back == r
    assert back.key == "-Nabc"


def test_review_from_record_accepts_whole_float_rating():
    r = Review.from_record({"name": "A B", "text": "t", "rating": 4.0, "date": DATE})
    assert r.rating == 4 and isinstance(r.rating, int)


def test_review_from_record_missing_rating_is_invalid():
    with pytest.raises(ValueError):
        Review.from_record({"name": "A B", "text": "t", "date": DATE})


def test_review_identity_prefers_key():
    a = Review(name="A", text="t", rating=1, date=DATE, key="k1")
    b = Review(name="A", text="t", rating=1, date=DATE, key="k2")
    c = Review(name="A", text="t", rating=1, date=DATE)
    d = Review(name="A", text="t", rating=1, date=DATE)
    assert a.identity() != b.identity()
    assert c.identity() == d.identity()
    assert a.with_key("k9").identity() == ("key", "k9")
