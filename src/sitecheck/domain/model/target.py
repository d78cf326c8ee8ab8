"""Probe targets: viewport configurations and page routes."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Viewport:
    """Browser window size for one layout pass.

    Attributes:
        name: Display name (e.g. "Mobile (iPhone 14)")
        width: Inner width in CSS pixels (> 0)
        height: Inner height in CSS pixels (> 0)
    """

    name: str
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0, got {self.height}")

    def __str__(self) -> str:
        """Format as 'name (widthpx)'."""
        return f"{self.name} ({self.width}px)"


@dataclass(frozen=True, slots=True)
class PageRoute:
    """URL path under the base URL.

    Attributes:
        name: Display name (e.g. "Privacy Policy")
        path: Absolute path starting with '/'
    """

    name: str
    path: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.path.startswith("/"):
            raise ValueError(f"path must start with '/', got {self.path!r}")

    def url(self, base_url: str) -> str:
        """Join route path onto base URL."""
        return base_url.rstrip("/") + self.path
