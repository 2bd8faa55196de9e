"""
Taskboard web UI (Streamlit).

Run:
    taskboard-store                      # the task store API on :8000
    streamlit run taskboard/ui/app.py    # this page

Controllers live in st.session_state, so the task list survives reruns and is
only re-fetched on first render after sign-in.
"""

import logging

import streamlit as st

from taskboard.logging_setup import setup_logging
from taskboard.ui import strings
from taskboard.ui.client import StoreError, TaskStoreClient
from taskboard.ui.config import get_settings
from taskboard.ui.controllers import TaskEditController, TaskListController
from taskboard.ui.display import (
    Tone,
    allowed_transitions,
    format_due_date,
    priority_badge,
    status_badge,
)
from taskboard.ui.models import Task, TaskPriority
from taskboard.ui.notify import StreamlitNotifier

settings = get_settings()
setup_logging(level=settings.LOG_LEVEL)
logger = logging.getLogger("taskboard.ui.app")

_TONE_COLORS = {
    Tone.NEUTRAL: "gray",
    Tone.INFO: "blue",
    Tone.SUCCESS: "green",
    Tone.WARNING: "orange",
    Tone.DANGER: "red",
}

st.set_page_config(page_title=settings.APP_TITLE, layout="centered")


def _client() -> TaskStoreClient:
    if "client" not in st.session_state:
        st.session_state.client = TaskStoreClient(settings.API_URL, timeout=settings.REQUEST_TIMEOUT)
    return st.session_state.client


def _controller() -> TaskListController:
    if "controller" not in st.session_state:
        client = _client()
        st.session_state.controller = TaskListController(client, client, StreamlitNotifier())
    return st.session_state.controller


def _badge(label: str, tone: Tone) -> str:
    return f":{_TONE_COLORS.get(tone, 'gray')}-background[{label}]"


def _sign_out() -> None:
    if _controller().sign_out():
        st.session_state.pop("controller", None)


# ---- views ----

def render_sign_in(client: TaskStoreClient) -> None:
    st.title(settings.APP_TITLE)
    if not client.health():
        st.warning(strings.STORE_UNREACHABLE)
    with st.form("sign_in"):
        email = st.text_input(strings.EMAIL)
        if st.form_submit_button(strings.SIGN_IN) and email.strip():
            try:
                client.sign_in(email.strip())
            except StoreError:
                logger.exception("Sign-in failed")
                st.error(strings.SIGN_IN_FAILED)
                return
            st.rerun()


def render_form(editor: TaskEditController) -> None:
    key = editor.task.id if editor.task else "new"
    st.subheader(strings.FORM_EDIT_TITLE if editor.is_edit else strings.FORM_CREATE_TITLE)

    with st.form(f"task_form_{key}"):
        title = st.text_input(strings.FIELD_TITLE, value=editor.title)
        description = st.text_area(strings.FIELD_DESCRIPTION, value=editor.description, height=100)
        priority = st.selectbox(
            strings.FIELD_PRIORITY,
            options=list(TaskPriority),
            index=list(TaskPriority).index(editor.priority),
            format_func=lambda p: priority_badge(p).label,
        )
        due_date = st.date_input(strings.FIELD_DUE_DATE, value=editor.due_date, format="DD.MM.YYYY")

        label = strings.SUBMIT_UPDATE if editor.is_edit else strings.SUBMIT_CREATE
        c1, c2 = st.columns(2)
        submitted = c1.form_submit_button(
            strings.SAVING if editor.submitting else label,
            type="primary",
            disabled=editor.submitting,
        )
        cancelled = c2.form_submit_button(strings.CANCEL)

    if cancelled:
        editor.cancel()
        st.rerun()

    if submitted:
        editor.title = title
        editor.description = description
        editor.priority = priority
        editor.due_date = due_date
        if not editor.is_valid:
            st.warning(strings.TITLE_REQUIRED)
        elif editor.submit():
            st.rerun()


def render_task(controller: TaskListController, task: Task) -> None:
    with st.container(border=True):
        head, actions = st.columns([5, 2])
        head.markdown(f"**{task.title}**")
        if task.description:
            head.caption(task.description)

        e, d = actions.columns(2)
        e.button(strings.EDIT, key=f"edit_{task.id}", on_click=controller.begin_edit, args=(task,))
        d.button(strings.DELETE, key=f"delete_{task.id}", on_click=controller.delete, args=(task.id,))

        s, p = status_badge(task.status), priority_badge(task.priority)
        badges = [_badge(s.label, s.tone), _badge(p.label, p.tone)]
        if task.due_date:
            badges.append(f"{strings.DUE_PREFIX}: {format_due_date(task.due_date)}")
        st.markdown(" ".join(badges))

        transitions = allowed_transitions(task.status)
        for col, tr in zip(st.columns(len(transitions) + 2), transitions):
            col.button(
                tr.label,
                key=f"status_{task.id}_{tr.target}",
                type="primary" if tr.primary else "secondary",
                on_click=controller.change_status,
                args=(task.id, tr.target),
            )


def render_list(controller: TaskListController) -> None:
    head, add, out = st.columns([4, 2, 2])
    head.title(settings.APP_TITLE)
    add.button(strings.ADD_TASK, type="primary", on_click=controller.begin_create)
    out.button(strings.SIGN_OUT, on_click=_sign_out)

    if not controller.tasks:
        st.info(f"**{strings.EMPTY_TITLE}**\n\n{strings.EMPTY_HINT}")
        return

    for task in controller.tasks:
        render_task(controller, task)


# ---- page ----

client = _client()
if not client.access_token:
    render_sign_in(client)
    st.stop()

controller = _controller()
if controller.loading:
    with st.spinner(strings.LOADING):
        controller.load()

if controller.editor is not None:
    render_form(controller.editor)
else:
    render_list(controller)
