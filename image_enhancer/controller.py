"""
Application state controller.

Owns everything the page shows: the source image, the adjustment settings, the
request status, and the enhanced image or error. Transitions:

    idle/success/error --enhance--> loading --> success | error
    (any)              --reset / new upload--> idle

A generation counter is bumped on every reset and upload; a response whose ticket
carries an older generation is dropped so it cannot resurrect cleared state.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

from image_enhancer.adjustments import AdjustmentSettings
from image_enhancer.errors import (
    EnhancementFailed,
    EnhancerError,
    LocalIOError,
    RequestInFlight,
    ValidationError,
)
from image_enhancer.gemini_client import EnhancementClient
from image_enhancer.images import EnhancedImage, SourceImage, export_filename, load_source_image
from image_enhancer.preview_filters import compile_preview_filter, to_css
from image_enhancer.prompts import compile_prompt_for

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "Please select an image first."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while enhancing the image."


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ErrorInfo:
    message: str
    kind: type = EnhancerError


@dataclass(frozen=True)
class EnhancementTicket:
    generation: int
    source: SourceImage
    prompt: str


@dataclass
class EnhancerController:
    """State machine behind the page. `client_factory` is called lazily on first enhance."""
    client_factory: Callable[[], EnhancementClient]

    settings: AdjustmentSettings = field(default_factory=AdjustmentSettings)
    source: Optional[SourceImage] = None
    enhanced: Optional[EnhancedImage] = None
    error: Optional[ErrorInfo] = None
    status: RequestStatus = RequestStatus.IDLE
    generation: int = 0

    # ---- File intake / reset ----
    def select_file(self, data: bytes, mime_type: Optional[str] = None) -> None:
        try:
            source = load_source_image(data, mime_type)
        except LocalIOError as exc:
            self._set_error(exc)
            return
        self._clear(source)
        logger.info("Loaded source image (%s, %d bytes)", source.mime_type, len(source.data))

    def reset(self) -> None:
        self._clear(None)

    def reset_settings(self) -> None:
        self.settings.reset()

    def _clear(self, source: Optional[SourceImage]) -> None:
        self.generation += 1
        self.source = source
        self.enhanced = None
        self.error = None
        self.status = RequestStatus.IDLE
        self.settings.reset()

    # ---- Settings ----
    def set_brightness(self, value: int) -> None:
        self.settings.set_brightness(value)

    def set_contrast(self, value: int) -> None:
        self.settings.set_contrast(value)

    def set_noise_reduction(self, value: int) -> None:
        self.settings.set_noise_reduction(value)

    def set_artistic_effect(self, effect) -> None:
        self.settings.set_artistic_effect(effect)

    def preview_filter(self) -> str:
        s = self.settings
        return to_css(compile_preview_filter(s.brightness, s.contrast, s.artistic_effect))

    # ---- Enhancement ----
    def begin_enhancement(self) -> Optional[EnhancementTicket]:
        """Move to loading and hand out a ticket, or None when there is no source image."""
        if self.status is RequestStatus.LOADING:
            raise RequestInFlight()
        if self.source is None:
            self._set_error(ValidationError(NO_IMAGE_MESSAGE))
            return None

        self.status = RequestStatus.LOADING
        self.enhanced = None
        self.error = None
        prompt = compile_prompt_for(self.settings)
        logger.debug("Prompt: %s", prompt)
        return EnhancementTicket(self.generation, self.source, prompt)

    def complete(self, ticket: EnhancementTicket, image: EnhancedImage) -> bool:
        if not self._is_current(ticket):
            return False
        self.enhanced = image
        self.status = RequestStatus.SUCCESS
        return True

    def fail(self, ticket: EnhancementTicket, exc: BaseException) -> bool:
        if not self._is_current(ticket):
            return False
        if not isinstance(exc, EnhancerError):
            exc = EnhancementFailed(UNEXPECTED_ERROR_MESSAGE)
        self._set_error(exc)
        return True

    def enhance(self) -> RequestStatus:
        ticket = self.begin_enhancement()
        if ticket is None:
            return self.status
        try:
            image = self.client_factory().enhance(ticket.source.data, ticket.source.mime_type, ticket.prompt)
        except Exception as exc:
            self.fail(ticket, exc)
        else:
            self.complete(ticket, image)
        return self.status

    async def enhance_async(self) -> RequestStatus:
        ticket = self.begin_enhancement()
        if ticket is None:
            return self.status
        try:
            image = await self.client_factory().enhance_async(
                ticket.source.data, ticket.source.mime_type, ticket.prompt
            )
        except Exception as exc:
            self.fail(ticket, exc)
        else:
            self.complete(ticket, image)
        return self.status

    # ---- Export ----
    def download(self, timestamp: Optional[int] = None) -> Tuple[str, bytes, str]:
        if self.status is not RequestStatus.SUCCESS or self.enhanced is None:
            raise ValidationError("No enhanced image to download.")
        return export_filename(self.enhanced, timestamp), self.enhanced.data, self.enhanced.mime_type

    # ---- Helpers ----
    def _is_current(self, ticket: EnhancementTicket) -> bool:
        if ticket.generation != self.generation or self.status is not RequestStatus.LOADING:
            logger.info("Dropping stale enhancement result (generation %d, current %d)",
                        ticket.generation, self.generation)
            return False
        return True

    def _set_error(self, exc: EnhancerError) -> None:
        logger.warning("%s: %s", type(exc).__name__, exc.message)
        self.enhanced = None
        self.error = ErrorInfo(exc.message, type(exc))
        self.status = RequestStatus.ERROR
