"""
Streamlit AI Image Enhancer
File: image_enhancer/app.py

Features:
- Upload a photo (png, jpg, jpeg, webp)
- Brightness, Contrast and Noise Reduction sliders
- Artistic effects (Vintage, B&W, Sepia, Sketch, Oil Painting, Cartoon)
- Instant CSS-filter preview of the original image
- One-click AI enhancement with Gemini
- Side-by-side comparison and download of the enhanced image

Dependencies:
pip install -e .

Run:
GEMINI_API_KEY=... streamlit run image_enhancer/app.py

"""
import streamlit as st

from image_enhancer.adjustments import (
    BRIGHTNESS_RANGE,
    CONTRAST_RANGE,
    NOISE_REDUCTION_RANGE,
    ArtisticEffect,
)
from image_enhancer.config import AppConfig, load_config, setup_logging
from image_enhancer.controller import EnhancerController, RequestStatus
from image_enhancer.errors import MissingApiKeyError, RequestInFlight
from image_enhancer.gemini_client import EnhancementClient
from image_enhancer.images import SUPPORTED_UPLOAD_TYPES
from image_enhancer.preview_filters import preview_html

st.set_page_config(page_title="✨ AI Image Enhancer", page_icon="🪄", layout="centered")
st.title("✨ AI Image Enhancer")
st.write("Fix your old photos and add artistic touches with a single click.")

try:
    config = load_config()
except MissingApiKeyError as exc:
    st.error(exc.message)
    st.stop()

setup_logging(config.log_level)


@st.cache_resource
def get_client(_cfg: AppConfig) -> EnhancementClient:
    # one Gemini client per process
    return EnhancementClient.from_config(_cfg)

# Utility functions

def sync_widgets() -> None:
    """Push controller settings into the widget state (before widgets render or inside callbacks)."""
    s = controller.settings
    st.session_state.brightness = s.brightness
    st.session_state.contrast = s.contrast
    st.session_state.noise_reduction = s.noise_reduction
    st.session_state.artistic_effect = s.artistic_effect


def on_upload() -> None:
    uploaded = st.session_state.get(f"upload-{st.session_state.upload_key}")
    if uploaded is None:
        controller.reset()
    else:
        controller.select_file(uploaded.getvalue(), uploaded.type)
    sync_widgets()


def on_reset_settings() -> None:
    controller.reset_settings()
    sync_widgets()


def on_start_over() -> None:
    controller.reset()
    # a fresh key empties the uploader
    st.session_state.upload_key += 1
    sync_widgets()


if "controller" not in st.session_state:
    st.session_state.controller = EnhancerController(client_factory=lambda: get_client(config))
    st.session_state.upload_key = 0
controller: EnhancerController = st.session_state.controller
if "brightness" not in st.session_state:
    sync_widgets()

# Sidebar controls
st.sidebar.header("Adjustments")
st.sidebar.slider(
    "Brightness (%)", *BRIGHTNESS_RANGE, key="brightness",
    on_change=lambda: controller.set_brightness(st.session_state.brightness),
)
st.sidebar.slider(
    "Contrast (%)", *CONTRAST_RANGE, key="contrast",
    on_change=lambda: controller.set_contrast(st.session_state.contrast),
)
st.sidebar.slider(
    "Noise Reduction (%)", *NOISE_REDUCTION_RANGE, key="noise_reduction",
    on_change=lambda: controller.set_noise_reduction(st.session_state.noise_reduction),
)
st.sidebar.radio(
    "Artistic Effect", list(ArtisticEffect), format_func=lambda e: e.label, key="artistic_effect",
    on_change=lambda: controller.set_artistic_effect(st.session_state.artistic_effect),
)
st.sidebar.button("Reset Settings", on_click=on_reset_settings, use_container_width=True)

# File uploader
st.file_uploader(
    "Upload an image", type=SUPPORTED_UPLOAD_TYPES,
    key=f"upload-{st.session_state.upload_key}", on_change=on_upload,
)

# Main view

if controller.source is not None:
    st.subheader("Preview")
    col1, col2 = st.columns(2)
    with col1:
        st.caption("Original (Preview)")
        st.markdown(preview_html(controller.source.data_url, controller.preview_filter()), unsafe_allow_html=True)
    with col2:
        st.caption("Enhanced")
        if controller.enhanced is not None:
            st.image(controller.enhanced.data, use_container_width=True)
        else:
            st.info("Waiting for enhancement...")

    if controller.error is not None:
        st.error(controller.error.message)

    col_enhance, col_download, col_reset = st.columns(3)
    with col_enhance:
        if controller.status is not RequestStatus.LOADING and st.button("🪄 Enhance Image", type="primary"):
            try:
                with st.spinner("Enhancing, this may take some time..."):
                    controller.enhance()
            except RequestInFlight as exc:
                st.warning(exc.message)
            else:
                st.rerun()
    with col_download:
        if controller.status is RequestStatus.SUCCESS:
            file_name, data, mime = controller.download()
            st.download_button(label="📥 Download Enhanced", data=data, file_name=file_name, mime=mime)
    with col_reset:
        st.button("Start Over", on_click=on_start_over)

else:
    if controller.error is not None:
        st.error(controller.error.message)
    st.info("👆 Upload an image to enhance it")

# Footer
st.markdown("---")
st.caption("Tip: the preview is an approximation; the AI result may differ from it.")
st.caption("Developed with ❤️ using Streamlit, Pillow, and Gemini")
st.caption("Version 1.0")
