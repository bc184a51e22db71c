import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = "../app.py"


def fill_form(at, name, age, marks):
    at.text_input(key="draft_name").set_value(name)
    at.text_input(key="draft_age").set_value(age)
    for i, mark in enumerate(marks):
        at.text_input(key=f"draft_mark_{i}").set_value(mark)
    return at.run()


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    return at.run()


class TestStudentRecordPage:
    """Test the Streamlit page end to end."""

    def test_starts_empty(self, app):
        assert not app.exception
        assert len(app.session_state["store"]) == 0
        assert any("No matching records found." in i.value for i in app.info)

    def test_preview_updates_with_marks(self, app):
        fill_form(app, "Asha", "20", ["60"] * 5)
        assert any("60.00%" in i.value and "First Division" in i.value for i in app.info)

    def test_submit_adds_record_and_clears_form(self, app):
        fill_form(app, "Asha", "20", ["60"] * 5)
        app.button(key="submit_btn").click().run()

        store = app.session_state["store"]
        assert len(store) == 1
        assert store.get(0).division == "First Division"
        assert app.text_input(key="draft_name").value == ""
        assert not app.error

    def test_invalid_name_shows_error(self, app):
        fill_form(app, "R2D2", "20", ["60"] * 5)
        app.button(key="submit_btn").click().run()

        assert len(app.session_state["store"]) == 0
        assert app.error[0].value == "Name should only contain letters and spaces."

    def test_edit_then_update(self, app):
        fill_form(app, "Asha", "20", ["60"] * 5)
        app.button(key="submit_btn").click().run()

        app.button(key="edit_0").click().run()
        assert app.text_input(key="draft_name").value == "Asha"
        assert app.button(key="submit_btn").label == "Update"

        app.text_input(key="draft_mark_0").set_value("10").run()
        app.button(key="submit_btn").click().run()

        store = app.session_state["store"]
        assert len(store) == 1
        assert store.get(0).marks[0] == 10.0
        assert store.get(0).division == "Second Division"

    def test_delete(self, app):
        fill_form(app, "Asha", "20", ["60"] * 5)
        app.button(key="submit_btn").click().run()
        app.button(key="delete_0").click().run()
        assert len(app.session_state["store"]) == 0

    def test_failing_preview_is_a_warning(self, app):
        fill_form(app, "Asha", "20", ["10"] * 5)
        assert any("10.00%" in w.value and "Fail" in w.value for w in app.warning)
        assert not any("10.00%" in i.value for i in app.info)

    def test_error_cleared_by_clear(self, app):
        fill_form(app, "Asha", "0", ["60"] * 5)
        app.button(key="submit_btn").click().run()
        assert app.error[0].value == "Age should be a positive integer between 1 and 100."

        app.button(key="clear_btn").click().run()
        assert not app.error
        assert app.text_input(key="draft_age").value == ""

    def test_error_cleared_by_next_submit(self, app):
        fill_form(app, "Asha", "0", ["60"] * 5)
        app.button(key="submit_btn").click().run()
        assert app.error

        fill_form(app, "Asha", "20", ["60"] * 5)
        app.button(key="submit_btn").click().run()
        assert not app.error
        assert len(app.session_state["store"]) == 1


class TestRecordFilters:
    """Test the name and division filters on the page."""

    @pytest.fixture
    def populated(self, app):
        fill_form(app, "Asha Rao", "20", ["70"] * 5)
        app.button(key="submit_btn").click().run()
        fill_form(app, "Ravi", "21", ["10"] * 5)
        app.button(key="submit_btn").click().run()
        fill_form(app, "Asha Iyer", "22", ["50"] * 5)
        app.button(key="submit_btn").click().run()
        return app

    @staticmethod
    def shown_names(at):
        return [m.value for m in at.markdown if "**" in m.value and ". " in m.value]

    def test_name_filter(self, populated):
        populated.text_input(key="filter_name").set_value("ASHA").run()
        shown = self.shown_names(populated)
        assert len(shown) == 2
        assert "Asha Rao" in shown[0]
        assert "Asha Iyer" in shown[1]
        assert populated.caption[0].value == "Showing 2 of 3 records"

    def test_name_and_division_filter(self, populated):
        populated.text_input(key="filter_name").set_value("asha").run()
        populated.selectbox(key="filter_division").set_value("Second Division").run()
        shown = self.shown_names(populated)
        assert len(shown) == 1
        assert shown[0].startswith("3. **Asha Iyer**")

    def test_no_match(self, populated):
        populated.text_input(key="filter_name").set_value("zzz").run()
        assert self.shown_names(populated) == []
        assert any("No matching records found." in i.value for i in populated.info)

    def test_delete_under_filter_uses_store_index(self, populated):
        populated.selectbox(key="filter_division").set_value("Fail").run()
        assert len(self.shown_names(populated)) == 1

        # Ravi is the only row shown but sits at store index 1
        populated.button(key="delete_1").click().run()

        names = [r.name for r in populated.session_state["store"]]
        assert names == ["Asha Rao", "Asha Iyer"]

    def test_edit_under_filter_uses_store_index(self, populated):
        populated.text_input(key="filter_name").set_value("iyer").run()
        populated.button(key="edit_2").click().run()
        assert populated.text_input(key="draft_name").value == "Asha Iyer"
        assert populated.text_input(key="draft_age").value == "22"
