"""Static About page."""

from __future__ import annotations

import streamlit as st

MISSION = (
    "Finding the right home should be an exciting journey, not a stressful ordeal. "
    "We bring together comprehensive listings, detailed property information and "
    "simple tools so buyers can make informed decisions."
)

STATS = [
    ("Properties listed", "1,000+"),
    ("Happy customers", "5,000+"),
    ("Years of experience", "10+"),
    ("Success rate", "98%"),
]

TEAM = [
    ("Sarah Johnson", "CEO & Founder", "Started the company after fifteen years in real estate."),
    ("Michael Chen", "Head of Technology", "Leads the team that builds and runs the listings platform."),
    ("Emily Rodriguez", "Customer Success Manager", "Makes sure every buyer finds a property that fits their needs."),
]

VALUES = [
    ("Transparency", "Honest, clear communication and all the information you need to decide."),
    ("Innovation", "New features that make the property search faster and easier."),
    ("Excellence", "Care in every listing we publish and every question we answer."),
]


def render_about_page() -> None:
    st.title("About Us")
    st.caption("We help people find their perfect home and make property searching simple.")

    st.subheader("Our Mission")
    st.write(MISSION)

    for col, (label, value) in zip(st.columns(len(STATS)), STATS):
        col.metric(label, value)

    st.subheader("Our Team")
    for col, (name, role, bio) in zip(st.columns(len(TEAM)), TEAM):
        with col:
            st.markdown(f"**{name}**")
            st.caption(role)
            st.write(bio)

    st.subheader("Our Values")
    for col, (value, description) in zip(st.columns(len(VALUES)), VALUES):
        with col:
            st.markdown(f"**{value}**")
            st.write(description)
