"""AI Image Enhancer: Streamlit front end for Gemini-powered photo restoration."""

__version__ = "1.0.0"
