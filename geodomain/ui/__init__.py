"""UI: Streamlit rendering and the presentation helpers behind it."""
