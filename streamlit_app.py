"""Streamlit entrypoint for the view components showcase."""

from importlib import import_module

import streamlit as st


def main() -> None:
    """Render the showcase home page when the app entrypoint is loaded."""

    try:
        home_module = import_module("Home")
    except ModuleNotFoundError:
        st.error("Showcase home page module not found.")
        return

    render = getattr(home_module, "main", None)
    if render is None:
        st.error("Showcase home page is missing a main() function.")
        return

    render()


if __name__ == "__main__":
    main()
