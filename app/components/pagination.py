"""Page navigation controls for the listings grid."""

from __future__ import annotations

from typing import Callable, List, Optional

import streamlit as st

ELLIPSIS = None


def page_window(current_page: int, total_pages: int) -> List[Optional[int]]:
    """Page numbers to show, with ``None`` marking an ellipsis.

    Up to five pages are all shown. Beyond that the first and last page and
    the neighbours of the current page are shown, with an ellipsis two pages
    away from the current one.
    """

    if total_pages <= 5:
        return list(range(1, total_pages + 1))
    window: List[Optional[int]] = []
    for page in range(1, total_pages + 1):
        if page == 1 or page == total_pages or current_page - 1 <= page <= current_page + 1:
            window.append(page)
        elif page == current_page - 2 or page == current_page + 2:
            window.append(ELLIPSIS)
    return window


def render_pagination(current_page: int, total_pages: int, on_change: Callable[[int], None]) -> None:
    if total_pages <= 1:
        return
    window = page_window(current_page, total_pages)
    columns = st.columns(len(window) + 2)
    with columns[0]:
        st.button(
            "‹",
            key="page-prev",
            disabled=current_page <= 1,
            on_click=on_change,
            args=(current_page - 1,),
            help="Previous page",
        )
    for idx, page in enumerate(window, start=1):
        with columns[idx]:
            if page is ELLIPSIS:
                st.markdown("…")
                continue
            st.button(
                str(page),
                key=f"page-{page}",
                disabled=page == current_page,
                type="primary" if page == current_page else "secondary",
                on_click=on_change,
                args=(page,),
            )
    with columns[-1]:
        st.button(
            "›",
            key="page-next",
            disabled=current_page >= total_pages,
            on_click=on_change,
            args=(current_page + 1,),
            help="Next page",
        )
