# taskboard/ui/notify.py

from __future__ import annotations

import logging

import streamlit as st

from .ports import NoticeKind

logger = logging.getLogger(__name__)

_ICONS = {NoticeKind.SUCCESS: "✅", NoticeKind.ERROR: "⚠️"}


class StreamlitNotifier:
    """Shows notifications as Streamlit toasts."""

    def notify(self, kind: NoticeKind, title: str, description: str) -> None:
        st.toast(f"**{title}** {description}", icon=_ICONS.get(kind, "ℹ️"))


class LoggingNotifier:
    """Headless notifier: writes notifications to the log."""

    def notify(self, kind: NoticeKind, title: str, description: str) -> None:
        level = logging.ERROR if kind == NoticeKind.ERROR else logging.INFO
        logger.log(level, "%s %s", title, description)
