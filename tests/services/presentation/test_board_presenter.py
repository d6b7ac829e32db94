import asyncio

from sitereviews.domain.entities.review import Review
from sitereviews.services.presentation.board import ReviewBoardPresenter


def _r(key, name, rating, date="2025-03-04T10:15:00.000Z"):
    return Review(name=name, text="Brilliant night", rating=rating, date=date, key=key)


def test_render_full_list_builds_cards():
    p = ReviewBoardPresenter()
    p.render_full_list([_r("k2", "Mary Jane Watson", 4), _r("k1", "Cher", 5, date="garbage")], True)

    board = p.board()
    assert board.loaded and not board.empty
    first, second = board.cards
    assert first.display_name == "Mary W."
    assert first.stars == [True, True, True, True, False]
    assert first.aria_label == "4 out of 5 stars"
    assert first.date_label == "March 4, 2025"
    assert second.display_name == "Cher"
    assert second.date_label == ""  # unparseable date renders blank


def test_dates_hidden_when_show_date_false():
    p = ReviewBoardPresenter()
    p.render_full_list([_r("k1", "John Smith", 3)], False)
    assert p.board().cards[0].date_label is None


def test_prepend_and_summary():
    p = ReviewBoardPresenter()
    p.render_full_list([_r("k1", "John Smith", 3)], True)
    p.prepend_one(_r("k2", "Jane Doe", 5), True)
    p.show_summary(2, "4.0", 4)

    board = p.board()
    assert [c.key for c in board.cards] == ["k2", "k1"]
    assert board.summary.visible
    assert board.summary.count_label == "2 reviews"
    assert board.summary.average == "4.0"
    assert board.summary.stars == [True, True, True, True, False]


def test_empty_state_and_hidden_summary():
    p = ReviewBoardPresenter(empty_message="Nothing yet")
    p.show_empty_state()
    p.hide_summary()
    board = p.board()
    assert board.empty and board.empty_message == "Nothing yet"
    assert board.cards == []
    assert not board.summary.visible


def test_listeners_receive_events():
    p = ReviewBoardPresenter()

    async def scenario():
        q = p.listen()
        p.prepend_one(_r("k1", "Jane Doe", 5), True)
        p.show_summary(1, "5.0", 5)
        events = [q.get_nowait(), q.get_nowait()]
        p.unlisten(q)
        p.hide_summary()
        return events, q.empty()

    events, drained = asyncio.run(scenario())
    assert [e.type for e in events] == ["prepend", "summary"]
    assert events[0].cards[0].display_name == "Jane D."
    assert drained


def test_slow_listener_is_dropped_with_a_closed_event():
    p = ReviewBoardPresenter(listener_queue_size=1)

    async def scenario():
        q = p.listen()
        p.show_summary(1, "5.0", 5)
        p.show_summary(2, "4.5", 5)  # queue full -> listener dropped
        p.show_empty_state()  # no longer delivered
        first = await asyncio.wait_for(q.get(), 0.2)
        return first, q.qsize()

    first, left = asyncio.run(scenario())
    assert first.type == "closed"
    assert left == 0


def test_close_signals_every_listener():
    p = ReviewBoardPresenter()

    async def scenario():
        a, b = p.listen(), p.listen()
        p.show_summary(1, "5.0", 5)
        p.close()
        p.hide_summary()
        return [a.get_nowait().type for _ in range(a.qsize())], [b.get_nowait().type for _ in range(b.qsize())]

    a_events, b_events = asyncio.run(scenario())
    assert a_events == ["closed"]
    assert b_events == ["closed"]
