"""
WhatsApp deep-link handoff for finished quote messages.

The messaging channel is a black box: the link is opened and nothing
comes back, so every dispatch reports DispatchStatus.UNKNOWN. In
production the opener is the browser; tests pass a recorder.
"""

import logging
import webbrowser
from typing import Any, Callable, Optional
from urllib.parse import quote

from cotizador.config import MessagingConfig
from cotizador.logging_context import get_quote_logger
from cotizador.schemas.quote_schema import DispatchStatus

logger = get_quote_logger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics.
URI_COMPONENT_SAFE = "-_.!~*'()"

Opener = Callable[[str], Any]


class WhatsAppLink:
    """Builds ``wa.me`` deep links carrying a prefilled message."""

    def __init__(self, config: Optional[MessagingConfig] = None) -> None:
        self.config = config or MessagingConfig()

    def build_url(self, message: str) -> str:
        encoded = quote(message, safe=URI_COMPONENT_SAFE)
        return f"{self.config.whatsapp_base_url}{self.config.whatsapp_number}?text={encoded}"


class MessageDispatcher:
    """Fire-and-forget handoff of a message to the messaging link."""

    def __init__(
        self,
        link: Optional[WhatsAppLink] = None,
        opener: Optional[Opener] = None,
    ) -> None:
        self.link = link or WhatsAppLink()
        self.opener: Opener = opener or webbrowser.open

    def dispatch(self, message: str) -> DispatchStatus:
        url = self.link.build_url(message)
        self.opener(url)
        logger.info("Quote message handed to messaging link (%d chars)", len(message))
        return DispatchStatus.UNKNOWN
