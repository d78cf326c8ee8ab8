"""Facts extracted from a live rendered page."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MockVisibility:
    """Rendered state of the illustrative phone mockup.

    Attributes:
        found: Element exists in the DOM
        display: Computed display of its layout container
        width: Rendered width in CSS pixels
        height: Rendered height in CSS pixels
    """

    found: bool
    display: str = ""
    width: float = 0.0
    height: float = 0.0

    @property
    def visible(self) -> bool:
        """Rendered with nonzero width and container not suppressed."""
        return self.found and self.display != "none" and self.width > 0


@dataclass(frozen=True, slots=True)
class LayoutMetrics:
    """Layout facts for one viewport.

    Heights are None when the element is absent.

    Attributes:
        scroll_width: document.body.scrollWidth
        inner_width: window.innerWidth
        nav_height: Height of the primary navigation landmark
        mock: Phone mockup visibility
        footer_height: Footer height after scrolling it into view
    """

    scroll_width: int
    inner_width: int
    nav_height: float | None
    mock: MockVisibility
    footer_height: float | None

    @property
    def overflows(self) -> bool:
        """Document is wider than the viewport."""
        return self.scroll_width > self.inner_width


@dataclass(frozen=True, slots=True)
class LanguageState:
    """Document language after a switch.

    Attributes:
        lang: document.documentElement.lang
        heading: Leading text of the designated heading, None if absent
    """

    lang: str
    heading: str | None

    def matches(self, lang: str, heading_fragment: str) -> bool:
        """Check both language attribute and heading text."""
        return self.lang == lang and self.heading is not None and heading_fragment in self.heading


@dataclass(frozen=True, slots=True)
class AnimationState:
    """Chat animation globals and rendered messages.

    Attributes:
        message_count: Children rendered in the message container
        timeout_set: Cycle timeout handle is defined and not null
        tracking_present: Timeout tracking collection is defined
    """

    message_count: int
    timeout_set: bool
    tracking_present: bool


@dataclass(frozen=True, slots=True)
class ResourceWeight:
    """Aggregate network transfer for a page load.

    Attributes:
        count: Number of resource timing entries
        total_kb: Sum of transferSize in KB (rounded)
    """

    count: int
    total_kb: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.total_kb < 0:
            raise ValueError(f"total_kb must be >= 0, got {self.total_kb}")
