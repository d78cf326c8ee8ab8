"""Introspection contract between the site and the prober.

The page under test exposes a handful of globals so the prober can
drive and observe it. Their names are collected here so that a site
rewrite knows exactly what it must keep.
"""

import re
from dataclasses import dataclass

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


@dataclass(frozen=True, slots=True)
class PageContract:
    """Names of the page globals the prober relies on.

    Identifier fields are interpolated into evaluated scripts, so each
    one must be a plain JavaScript identifier. The initial language
    variable belongs to ValidatorConfig, which reads it from source.

    Attributes:
        switch_language: Function taking a language code
        restart_animation: Function restarting the chat animation
        timeout_handle: Variable holding the chat cycle timeout id
        tracking_collection: Array of tracked animation timeouts
        message_container_id: Element id of the chat message list
    """

    switch_language: str = "switchLang"
    restart_animation: str = "restartChat"
    timeout_handle: str = "chatTimeoutId"
    tracking_collection: str = "chatAnimationTimeouts"
    message_container_id: str = "chat-messages"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in (
            "switch_language",
            "restart_animation",
            "timeout_handle",
            "tracking_collection",
        ):
            value = getattr(self, name)
            if not _JS_IDENTIFIER.match(value):
                raise ValueError(f"{name} must be a JavaScript identifier, got {value!r}")
        if not self.message_container_id:
            raise ValueError("message_container_id must not be empty")
