"""Tests de la projection des instantanés en écrans, et parcours complets."""

import re

import pytest

from clicktally.controller import NavigationController
from clicktally.intents import PressBack, PressDecrement, PressIncrement, PressNav, SubmitLogin
from clicktally.state import ViewSnapshot, ViewState
from clicktally.ui.screens import (
    BACK_LABEL,
    PASSWORD_INPUT_ID,
    SUBMIT_BUTTON_ID,
    USERNAME_INPUT_ID,
    WidgetKind,
    build_screen,
)


class App:
    """Pilote le contrôleur comme le fait ``MainWindow``."""

    def __init__(self) -> None:
        self.controller = NavigationController()
        self.fields = {USERNAME_INPUT_ID: "", PASSWORD_INPUT_ID: ""}

    @property
    def screen(self):
        return build_screen(self.controller.snapshot)

    def change_text(self, test_id, value):
        self.screen.by_test_id(test_id)
        self.fields[test_id] = value

    def press(self, label):
        button = self.screen.button(label)
        self.controller.dispatch(button.intent)

    def submit(self):
        assert self.screen.by_test_id(SUBMIT_BUTTON_ID).kind is WidgetKind.BUTTON
        self.controller.dispatch(
            SubmitLogin(self.fields[USERNAME_INPUT_ID], self.fields[PASSWORD_INPUT_ID])
        )

    def login(self, username="testuser", password="password123"):
        self.change_text(USERNAME_INPUT_ID, username)
        self.change_text(PASSWORD_INPUT_ID, password)
        self.submit()

    def has_text(self, pattern):
        return any(re.search(pattern, text, re.IGNORECASE) for text in self.screen.texts())

    def count_buttons(self, label):
        return sum(1 for button in self.screen.buttons() if button.text == label)


@pytest.fixture
def app():
    return App()


class TestLoginScreen:
    def test_shows_inputs_and_submit(self, app):
        screen = app.screen

        assert screen.view is ViewState.LOGGED_OUT
        assert screen.by_test_id(USERNAME_INPUT_ID).kind is WidgetKind.INPUT
        assert screen.by_test_id(PASSWORD_INPUT_ID).secret
        assert screen.by_test_id(SUBMIT_BUTTON_ID).kind is WidgetKind.BUTTON

    def test_no_navigation_without_username(self, app):
        app.change_text(PASSWORD_INPUT_ID, "password123")
        app.submit()

        assert not app.has_text(r"Welcome")

    def test_no_navigation_without_password(self, app):
        app.change_text(USERNAME_INPUT_ID, "testuser")
        app.submit()

        assert not app.has_text(r"Welcome")

    def test_navigates_to_welcome(self, app):
        app.login()

        assert app.has_text(r"Welcome.*testuser")


class TestWelcomeScreen:
    def test_shows_username_and_initial_count(self, app):
        app.login()

        assert app.has_text(r"Welcome.*testuser")
        assert app.has_text(r"Click Count:.*0")

    def test_navigation_buttons(self, app):
        app.login()

        assert [button.text for button in app.screen.buttons()] == [
            "Increment",
            "Decrement",
            "Summary",
        ]
        assert app.screen.button("Summary").intent == PressNav(ViewState.SUMMARY)
        assert isinstance(app.screen.button("Summary").intent, PressNav)


class TestCounterScreens:
    def test_increment_screen(self, app):
        app.login()
        app.press("Increment")

        assert app.has_text(r"Count:")
        assert app.count_buttons("Increment") == 1
        assert app.count_buttons(BACK_LABEL) == 1

        app.press("Increment")
        assert app.has_text(r"Count:.*1")

    def test_decrement_screen(self, app):
        app.login()
        app.press("Decrement")

        assert app.has_text(r"Count:")
        assert app.screen.button("Decrement").intent == PressDecrement()
        assert app.screen.button(BACK_LABEL).intent == PressBack()

    @pytest.mark.parametrize("entry", ["Increment", "Decrement", "Summary"])
    def test_back_to_welcome(self, app, entry):
        app.login()
        app.press(entry)
        app.press(BACK_LABEL)

        assert app.has_text(r"Welcome.*testuser")


class TestSummaryScreen:
    def test_shows_username_and_clicks_only(self, app):
        app.login()
        app.press("Summary")

        assert app.has_text(r"Username:")
        assert app.has_text(r"Clicks:")
        assert app.count_buttons(BACK_LABEL) == 1
        assert app.count_buttons("Increment") == 0
        assert app.count_buttons("Decrement") == 0

    def test_missing_button_raises_lookup_error(self, app):
        app.login()
        app.press("Summary")

        with pytest.raises(LookupError):
            app.press("Increment")


class TestDataAcrossNavigation:
    def test_documented_scenario(self, app):
        app.login("testuser", "password123")
        assert app.has_text(r"Welcome.*testuser")
        assert app.has_text(r"Click Count: 0")

        app.press("Increment")
        assert app.has_text(r"Count: 0")
        app.press("Increment")
        app.press("Increment")
        assert app.has_text(r"Count: 2")

        app.press(BACK_LABEL)
        assert app.has_text(r"Click Count: 2")

        app.press("Summary")
        assert app.has_text(r"Username: testuser")
        assert app.has_text(r"Clicks: 2")
        assert app.count_buttons("Increment") == 0
        assert app.count_buttons("Decrement") == 0

    def test_summary_after_three_increments(self, app):
        app.login("myuser", "pass")
        app.press("Increment")
        for _ in range(3):
            app.press("Increment")
        app.press(BACK_LABEL)
        app.press("Summary")

        assert app.has_text(r"Username:.*myuser")
        assert app.has_text(r"Clicks:.*3")

    def test_decrement_reduces_counter(self, app):
        app.login()
        app.press("Increment")
        app.press("Increment")
        app.press("Increment")
        app.press(BACK_LABEL)
        app.press("Decrement")
        app.press("Decrement")
        app.press(BACK_LABEL)

        assert app.has_text(r"Click Count: 1")


def test_increment_intent_is_shared_between_screens():
    welcome = build_screen(ViewSnapshot(ViewState.WELCOME, "u", 0))
    increment = build_screen(ViewSnapshot(ViewState.INCREMENT, "u", 0))

    assert welcome.button("Increment").intent == increment.button("Increment").intent == PressIncrement()


def test_negative_count_is_rendered():
    screen = build_screen(ViewSnapshot(ViewState.DECREMENT, "u", -4))

    assert "Count: -4" in screen.texts()
