"""Personal task tracker: a hosted task store and its Streamlit UI."""

__version__ = "0.1.0"
