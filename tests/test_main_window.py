"""Navigation stack, search page and main-window wiring."""

from __future__ import annotations

import pytest
from PySide6.QtWidgets import QLabel

from movieSearch.gui.main_window import MainWindow
from movieSearch.gui.movie_details_page import MovieDetailsPage
from movieSearch.gui.navigation import NavigationStack
from movieSearch.gui.search_page import SearchPage
from movieSearch.metadata.core.models import FavoritesList
from tests.support import FakeFetcher, make_movie, seed_favorites


def test_navigation_stack_never_pops_root(qapp) -> None:
    root = QLabel("root")
    stack = NavigationStack(root)

    assert stack.pop() is None
    stack.push(QLabel("details"))
    assert stack.count() == 2
    assert stack.top is not root

    stack.pop()
    assert stack.count() == 1
    assert stack.top is root


def test_search_page_lists_hits_and_opens_details(qapp, navigator) -> None:
    fetcher = FakeFetcher(known=[("Dune", "2021"), ("Arrival", "2016")])
    page = SearchPage(fetcher, navigator)
    try:
        page.query_input.setText("dune")
        page.search()
        page.tasks.wait_for_done(5000)

        assert [r.title for r in page.results] == ["Dune"]
        assert page.result_list.count() == 1
        assert page.status_lbl.text() == "1 result(s)"

        page.open_result(0)
        page.tasks.wait_for_done(5000)
        assert len(navigator.pushed) == 1
        assert navigator.pushed[0].movie().title == "Dune"
    finally:
        page.dispose()
        page.deleteLater()


@pytest.fixture
def window(qapp, store):
    seed_favorites(store, [("Dune", "2021")])
    win = MainWindow(store, FakeFetcher(known=[("Dune", "2021"), ("Arrival", "2016")]))
    win.favorites_page.tasks.wait_for_done(5000)
    yield win
    win.close()
    win.deleteLater()


def test_window_loads_favorites_up_front(window) -> None:
    assert window.favorites_page.number_of_rows() == 1
    assert window.nav_list.count() == 2
    assert window.pages.currentWidget() is window.search_stack


def test_details_page_adds_to_favorites_and_goes_back(window, store) -> None:
    details = window._details_page(make_movie("Arrival", "2016"), window.search_stack)
    window.search_stack.push(details)

    details.btn_favorite.click()
    window.favorites_page.tasks.wait_for_done(5000)

    assert window.favorites_page.row_titles() == ["Dune", "Arrival"]
    assert [m.title for m in store.fetch_first(FavoritesList).movies] == ["Dune", "Arrival"]
    assert not details.btn_favorite.isEnabled()

    details.btn_back.click()
    assert window.search_stack.top is window.search_page


def test_details_page_for_existing_favorite_is_marked(window) -> None:
    details = window._details_page(make_movie("Dune", "2021"), window.favorites_stack)
    try:
        assert isinstance(details, MovieDetailsPage)
        assert not details.btn_favorite.isEnabled()
        assert details.btn_favorite.text() == "In favorites"
    finally:
        details.deleteLater()


def test_selecting_a_favorite_pushes_onto_favorites_stack(window) -> None:
    window.favorites_page.select_row(0)
    window.favorites_page.tasks.wait_for_done(5000)

    top = window.favorites_stack.top
    assert isinstance(top, MovieDetailsPage)
    assert top.movie().title == "Dune"
