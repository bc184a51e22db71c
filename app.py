from dataclasses import replace

import streamlit as st

from student_records.backend_logic import DIVISIONS, is_at_least, preview_classify
from student_records.config import ALL_DIVISIONS, PAGE_ICON, PAGE_TITLE, PASS_DIVISION, SUBJECT_COUNT, setup_logging
from student_records.errors import StaleEditError
from student_records.form import begin_edit, clear_draft, filter_records, submit
from student_records.records_table import division_badge, records_frame, style_records
from student_records.store import RecordStore

setup_logging()

MARK_KEYS = [f"draft_mark_{i}" for i in range(SUBJECT_COUNT)]

DIVISION_FILTER_OPTIONS = {
    "All Divisions": ALL_DIVISIONS,
    **{division: division for division in DIVISIONS},
}

# ------------------------
# Streamlit UI
# ------------------------

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide",
)

# ---- Session state: one store and one draft per browser session ----
if "store" not in st.session_state:
    st.session_state["store"] = RecordStore()
if "draft" not in st.session_state:
    st.session_state["draft"] = clear_draft()
if "error" not in st.session_state:
    st.session_state["error"] = None

st.session_state.setdefault("draft_name", "")
st.session_state.setdefault("draft_age", "")
for key in MARK_KEYS:
    st.session_state.setdefault(key, "")

store: RecordStore = st.session_state["store"]


# ------------------------
# Callbacks (run before the rerun renders)
# ------------------------

def _draft_from_widgets():
    return replace(
        st.session_state["draft"],
        name=st.session_state["draft_name"],
        age=st.session_state["draft_age"],
        marks=tuple(st.session_state[key] for key in MARK_KEYS),
    )


def _show_draft(draft):
    st.session_state["draft"] = draft
    st.session_state["draft_name"] = draft.name
    st.session_state["draft_age"] = draft.age
    for key, mark in zip(MARK_KEYS, draft.marks):
        st.session_state[key] = mark


def on_submit():
    result = submit(_draft_from_widgets(), store)
    _show_draft(result.draft)
    st.session_state["error"] = result.error


def on_clear():
    _show_draft(clear_draft())
    st.session_state["error"] = None


def on_edit(index: int):
    try:
        draft = begin_edit(store, index)
    except StaleEditError as e:
        st.session_state["error"] = str(e)
        return
    _show_draft(draft)
    st.session_state["error"] = None


def on_delete(index: int):
    store.remove_at(index)


col_form, col_records = st.columns([1, 2], gap="large")

# ------------------------
# Input form
# ------------------------

with col_form:
    st.subheader("🎓 Student Record")

    if st.session_state["error"]:
        st.error(st.session_state["error"])

    st.text_input("Student Name", key="draft_name")
    st.text_input("Age", key="draft_age")
    for i, key in enumerate(MARK_KEYS):
        st.text_input(f"Marks {i + 1}", key=key)

    # Recomputed from the raw marks on every rerun
    preview = preview_classify([st.session_state[key] for key in MARK_KEYS])
    if preview is not None:
        colour = division_badge(preview.division)
        passing = is_at_least(preview.division, PASS_DIVISION)
        (st.info if passing else st.warning)(
            f"**Preview:** Percentage **{preview.percentage}%**  \n"
            f"Division: :{colour}[**{preview.division}**]"
        )

    editing = st.session_state["draft"].is_editing
    b1, b2 = st.columns(2)
    with b1:
        st.button(
            "Update" if editing else "Submit",
            key="submit_btn",
            type="primary",
            on_click=on_submit,
            width="stretch",
        )
    with b2:
        st.button("Clear", key="clear_btn", on_click=on_clear, width="stretch")


# ------------------------
# Records
# ------------------------

with col_records:
    st.subheader("📋 Student Records")

    f1, f2 = st.columns([2, 1])
    with f1:
        filter_name = st.text_input("Search by Name", key="filter_name")
    with f2:
        filter_label = st.selectbox(
            "Division",
            list(DIVISION_FILTER_OPTIONS.keys()),
            index=0,
            key="filter_division",
        )

    rows = filter_records(store, filter_name, DIVISION_FILTER_OPTIONS[filter_label])

    if not rows:
        st.info("No matching records found.")
    else:
        st.caption(f"Showing {len(rows)} of {len(store)} records")
        st.dataframe(
            style_records(records_frame(rows)),
            hide_index=True,
        )

        for index, record in rows:
            c1, c2, c3 = st.columns([4, 1, 1])
            with c1:
                st.markdown(
                    f"{index + 1}. **{record.name}** "
                    f":{division_badge(record.division)}[{record.division}]"
                )
            with c2:
                st.button("Edit", key=f"edit_{index}", on_click=on_edit, args=(index,))
            with c3:
                st.button("Delete", key=f"delete_{index}", on_click=on_delete, args=(index,))

# To run:
# streamlit run app.py
